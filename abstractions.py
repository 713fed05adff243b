from typing import Optional, Protocol, runtime_checkable

from models import WeatherReport
from schemas import WeatherRequest


@runtime_checkable
class FallbackSource(Protocol):
    """A read-only secondary source consulted when the store has no entry."""

    name: str

    def find(self, city: str) -> Optional[WeatherReport]:
        """Return the canned report for ``city`` or ``None``."""
        ...


@runtime_checkable
class WeatherReader(Protocol):
    def read(self, city: str) -> WeatherReport:
        """Return the report for ``city`` or raise ``CityNotFound``."""
        ...


@runtime_checkable
class WeatherWriter(Protocol):
    def create(self, request: WeatherRequest) -> WeatherReport:
        ...

    def replace(self, request: WeatherRequest) -> WeatherReport:
        ...

    def remove(self, city: str) -> None:
        ...
