from setuptools import setup, find_packages

setup(
    name="openweather-cli",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.8",
    install_requires=[
        "httpx>=0.24",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "weather=weatherclient.cli:main",
        ],
    },
    description="Command-line current weather and 7-day forecast via OpenWeatherMap.",
    author="chriscoveyduck",
    author_email="",
    include_package_data=True,
)
