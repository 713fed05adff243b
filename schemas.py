import datetime as dt
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from errors import ValidationFailure

UNIT_PATTERN = re.compile(r"^(C|F)$")

_REQUIRED = {
    "city": "city is required",
    "temp": "temperature is required",
    "weather": "weather description is required",
}


# Body of POST and PUT /weather. Field names are the wire names.
class WeatherRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    city: str = Field(default=None, validate_default=True)
    temp: str = Field(default=None, validate_default=True)
    unit: str = Field(default=None, validate_default=True)
    date: dt.date = Field(default=None, validate_default=True)
    weather: str = Field(default=None, validate_default=True)

    @field_validator("city", "temp", "weather", mode="before")
    @classmethod
    def _require_text(cls, value: Any, info: ValidationInfo) -> Any:
        # Numeric temperatures are accepted and kept string-encoded.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str) or not value.strip():
            raise PydanticCustomError("blank", _REQUIRED[info.field_name])
        return value

    @field_validator("unit", mode="before")
    @classmethod
    def _check_unit(cls, value: Any) -> Any:
        if not isinstance(value, str) or not UNIT_PATTERN.fullmatch(value):
            raise PydanticCustomError(
                "unit", "Unit must be either 'C' for celsius or 'F' for Fahrenheit"
            )
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _require_date(cls, value: Any) -> Any:
        if value is None or value == "":
            raise PydanticCustomError("missing_date", "date is required")
        return value

    @field_validator("date")
    @classmethod
    def _not_in_future(cls, value: dt.date) -> dt.date:
        if value > dt.date.today():
            raise PydanticCustomError("future_date", "date can not be in the future")
        return value


def parse_weather_request(payload) -> WeatherRequest:
    """Validate a decoded JSON body, raising ValidationFailure with every problem found."""
    if not isinstance(payload, dict):
        raise ValidationFailure("request body must be a JSON object")
    try:
        return WeatherRequest.model_validate(payload)
    except ValidationError as exc:
        messages = [error["msg"] for error in exc.errors()]
        raise ValidationFailure("; ".join(messages)) from exc


def require_city(value) -> str:
    if value is None or not value.strip():
        raise ValidationFailure("city is required")
    return value
