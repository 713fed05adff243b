from dataclasses import dataclass
from datetime import date

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

class WeatherRecord(db.Model):
    __tablename__ = "weather_records"

    city = db.Column(db.String(120), primary_key=True)
    id = db.Column(db.String(36), nullable=False, unique=True)

    temperature = db.Column(db.String(32), nullable=False)
    unit = db.Column(db.String(1), nullable=False)  # "C" or "F"
    description = db.Column(db.String(120), nullable=False)
    date = db.Column(db.Date, nullable=False, index=True)

    def __repr__(self):
        return f"<WeatherRecord {self.id} {self.city} {self.temperature}{self.unit} {self.date}>"


# Immutable response shape shared by stored and fallback records.
@dataclass(frozen=True)
class WeatherReport:
    id: str
    city: str
    temperature: str
    unit: str
    description: str
    date: date

    @classmethod
    def from_record(cls, record):
        return cls(
            id=record.id,
            city=record.city,
            temperature=record.temperature,
            unit=record.unit,
            description=record.description,
            date=record.date,
        )

    def to_dict(self):
        """Wire representation; field names follow the request body."""
        return {
            "uuid": self.id,
            "city": self.city,
            "temp": self.temperature,
            "unit": self.unit,
            "weather": self.description,
            "date": self.date.isoformat(),
        }
