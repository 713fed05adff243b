import logging
from datetime import date
from threading import RLock
from typing import Iterable, List, Optional

from identifiers import IdGenerator
from models import WeatherRecord, db

logger = logging.getLogger(__name__)

SAMPLE_ENTRIES = (
    ("Auckland", "15", "C", "rainy"),
    ("Christchurch", "7", "C", "Cloudy"),
    ("Wellington", "22", "C", "sunny"),
)

# Builds the records the store is seeded with at startup, dated today.
def sample_records(id_generator: IdGenerator, today: Optional[date] = None) -> List[WeatherRecord]:
    today = today or date.today()
    return [
        WeatherRecord(
            id=id_generator.generate(),
            city=city,
            temperature=temperature,
            unit=unit,
            description=description,
            date=today,
        )
        for city, temperature, unit, description in SAMPLE_ENTRIES
    ]


class RecordStore:
    """Keyed store of weather records, one row per city.

    Every operation takes ``lock``.  The lock is re-entrant so a caller can
    hold it across a find followed by a save, update or delete.
    """

    def __init__(self, database=db) -> None:
        self._db = database
        self.lock = RLock()

    def find(self, city: str) -> Optional[WeatherRecord]:
        with self.lock:
            return self._db.session.get(WeatherRecord, city)

    def save(self, city: str, record: WeatherRecord) -> WeatherRecord:
        with self.lock:
            record.city = city
            stored = self._db.session.merge(record)
            self._db.session.commit()
            return stored

    # Same effect as save; used by callers replacing an existing record.
    def update(self, city: str, record: WeatherRecord) -> WeatherRecord:
        return self.save(city, record)

    def delete(self, city: str) -> None:
        with self.lock:
            record = self._db.session.get(WeatherRecord, city)
            if record is None:
                return
            self._db.session.delete(record)
            self._db.session.commit()

    # Fills an empty store; a store that already holds rows is left as it is.
    def seed(self, records: Iterable[WeatherRecord]) -> None:
        with self.lock:
            if self._db.session.query(WeatherRecord.city).first() is not None:
                logger.info("Store already holds weather records, skipping seed")
                return
            count = 0
            for record in records:
                self._db.session.add(record)
                count += 1
            self._db.session.commit()
        logger.info("Seeded %d weather records", count)
