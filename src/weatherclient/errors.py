class WeatherError(Exception):
    pass


class ConfigError(WeatherError):
    pass


class LocationNotFoundError(WeatherError):
    pass


class WeatherFetchError(WeatherError):
    pass


class WeatherDecodeError(WeatherError):
    pass
