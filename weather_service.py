import logging
from typing import Optional

from abstractions import FallbackSource
from errors import CityAlreadyExists, CityNotFound
from identifiers import IdGenerator
from models import WeatherRecord, WeatherReport
from schemas import WeatherRequest
from store import RecordStore


class ResolutionService:
    """Serve reads from the store, then the fallback; guard writes against the store.

    Satisfies both ``WeatherReader`` and ``WeatherWriter``.  Each
    check-then-act sequence runs while holding the store lock, so two
    concurrent creates for one city cannot both pass the existence check.
    """

    def __init__(
        self,
        *,
        store: RecordStore,
        fallback: FallbackSource,
        id_generator: Optional[IdGenerator] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.store = store
        self.fallback = fallback
        self.id_generator = id_generator or IdGenerator()
        self._log = logger or logging.getLogger(self.__class__.__name__)

    # Store first, then the fallback; a miss in both is CityNotFound.
    def read(self, city: str) -> WeatherReport:
        with self.store.lock:
            record = self.store.find(city)
            if record is not None:
                return WeatherReport.from_record(record)

        self._log.warning("Weather data for %s not found in the store, using fallback %s", city, self.fallback.name)
        report = self.fallback.find(city)
        if report is None:
            raise CityNotFound(city)
        return report

    # Fails if the city is already stored; otherwise stores it under a fresh identifier.
    def create(self, request: WeatherRequest) -> WeatherReport:
        with self.store.lock:
            if self.store.find(request.city) is not None:
                raise CityAlreadyExists(request.city)
            record = self._build_record(self.id_generator.generate(), request)
            stored = self.store.save(request.city, record)
            report = WeatherReport.from_record(stored)
        self._log.info("Created weather record %s for %s", report.id, report.city)
        return report

    # Fails unless the city is stored; overwrites every field but the identifier.
    def replace(self, request: WeatherRequest) -> WeatherReport:
        with self.store.lock:
            existing = self.store.find(request.city)
            if existing is None:
                raise CityNotFound(request.city, self._missing_message(request.city))
            # The identifier is kept for the lifetime of the city's record.
            record = self._build_record(existing.id, request)
            stored = self.store.update(request.city, record)
            report = WeatherReport.from_record(stored)
        self._log.info("Replaced weather record %s for %s", report.id, report.city)
        return report

    # Fails unless the city is stored.
    def remove(self, city: str) -> None:
        with self.store.lock:
            if self.store.find(city) is None:
                raise CityNotFound(city, self._missing_message(city))
            self.store.delete(city)
        self._log.info("Deleted weather record for %s", city)

    # Maps a validated request onto a row carrying the given identifier.
    @staticmethod
    def _build_record(record_id: str, request: WeatherRequest) -> WeatherRecord:
        return WeatherRecord(
            id=record_id,
            city=request.city,
            temperature=request.temp,
            unit=request.unit,
            description=request.weather,
            date=request.date,
        )

    @staticmethod
    def _missing_message(city: str) -> str:
        return f"{city} city not found in memory, try a city already in memory"
