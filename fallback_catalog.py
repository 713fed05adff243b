from datetime import date
from typing import Callable, Dict, Optional

from identifiers import IdGenerator
from models import WeatherReport

# (lookup key, reported city name, temperature, description); all Celsius.
CATALOG_ENTRIES = (
    ("Hamilton", "Hamilton", "11", "sunny"),
    ("Tauranga", "Tauranga", "19", "sunny"),
    ("Napier-Hastings", "Napier-Hastings", "17", "rainy"),
    ("Dunedin", "Dunedin", "12", "cloudy"),
    ("Palmerston North", "Palmerston North", "15", "windy"),
    ("Nelson", "Nelson", "18", "sunny"),
    ("Rotorua", "Rotorua", "16", "rainy"),
    ("New Plymouth", "New Plymouth", "17", "sunny"),
    ("Whangarei", "Whangārei", "18", "sunny"),
)


class StaticFallbackCatalog:
    """Canned weather for cities the store does not hold.

    Stands in for an external provider.  The table is built once, dated on
    the day the catalog is constructed, and never changes afterwards.
    """

    name = "static"

    def __init__(self, id_generator: Optional[IdGenerator] = None, today: Callable[[], date] = date.today) -> None:
        id_generator = id_generator or IdGenerator()
        as_of = today()
        self._reports: Dict[str, WeatherReport] = {
            key: WeatherReport(
                id=id_generator.generate(),
                city=city,
                temperature=temperature,
                unit="C",
                description=description,
                date=as_of,
            )
            for key, city, temperature, description in CATALOG_ENTRIES
        }

    def find(self, city: str) -> Optional[WeatherReport]:
        return self._reports.get(city)



class EmptyFallbackCatalog:
    """Fallback that never has an answer; reads are served by the store alone."""

    name = "none"

    def find(self, city: str) -> Optional[WeatherReport]:
        return None


FALLBACKS = {
    StaticFallbackCatalog.name: StaticFallbackCatalog,
    EmptyFallbackCatalog.name: EmptyFallbackCatalog,
}

# Builds the fallback named by configuration.
def build_fallback(name: str):
    try:
        factory = FALLBACKS[name]
    except KeyError:
        raise ValueError(f"Unknown weather fallback '{name}', expected one of {sorted(FALLBACKS)}") from None
    return factory()
