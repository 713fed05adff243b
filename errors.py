class WeatherServiceError(RuntimeError):
    """Base class for policy failures raised by the weather service."""

    def __init__(self, city, message):
        super().__init__(message)
        self.city = city


class CityNotFound(WeatherServiceError):
    """Raised when a city is missing from every source an operation consults."""

    def __init__(self, city, message=None):
        super().__init__(city, message or f"{city} data not found in all the sources")


class CityAlreadyExists(WeatherServiceError):
    """Raised when creating a record for a city that is already stored."""

    def __init__(self, city):
        super().__init__(city, f"{city} already exists in memory, try adding a new city")


class ValidationFailure(ValueError):
    """Raised by the HTTP layer for malformed input."""
