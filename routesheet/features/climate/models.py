"""
Climate query and observation models.

A ClimateQuery names a point and a day; an Observation holds the Daymet
daily values for it. A ClimateRow is the two merged, and only ever comes
from a positional merge (see merge.py).
"""

import math
from dataclasses import asdict, dataclass, fields
from datetime import date
from typing import Any, Optional

from routesheet.shared.errors import ValidationError


def _coordinate(name: str, value: Any, limit: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{name} is not a number: {value!r}")
    if isinstance(value, bool) or not math.isfinite(number) or abs(number) > limit:
        raise ValidationError(f"{name} out of range: {value!r}")
    return number


@dataclass(frozen=True)
class ClimateQuery:
    """One point/day to look up."""
    lat: float
    long: float
    date: date

    def __post_init__(self):
        object.__setattr__(self, "lat", _coordinate("lat", self.lat, 90.0))
        object.__setattr__(self, "long", _coordinate("long", self.long, 180.0))
        if not isinstance(self.date, date):
            raise ValidationError(f"date must be a date, got {self.date!r}")

    @classmethod
    def from_dict(cls, record: dict) -> "ClimateQuery":
        """
        Build a query from a parsed spreadsheet row.

        Accepts `lat`/`latitude`, `long`/`lon`/`longitude` and an ISO date
        string or date for `date`.
        """
        lat = record.get("lat", record.get("latitude"))
        long = record.get("long", record.get("lon", record.get("longitude")))
        day = record.get("date")
        if isinstance(day, str):
            try:
                day = date.fromisoformat(day.strip()[:10])
            except ValueError:
                raise ValidationError(f"date is not ISO formatted: {day!r}")
        return cls(lat=lat, long=long, date=day)


@dataclass(frozen=True)
class Observation:
    """Daymet daily values; any of them may be missing."""
    day_length: Optional[float] = None           # s/day
    precipitation: Optional[float] = None        # mm/day
    shortwave_radiation: Optional[float] = None  # W/m^2
    snow_water_equivalent: Optional[float] = None  # kg/m^2
    max_temperature: Optional[float] = None      # deg C
    min_temperature: Optional[float] = None      # deg C
    vapor_pressure: Optional[float] = None       # Pa


# Daymet variable name -> Observation field
DAYMET_VARIABLES = {
    "dayl": "day_length",
    "prcp": "precipitation",
    "srad": "shortwave_radiation",
    "swe": "snow_water_equivalent",
    "tmax": "max_temperature",
    "tmin": "min_temperature",
    "vp": "vapor_pressure",
}


@dataclass(frozen=True)
class ClimateRow:
    """A query with its observation merged in."""
    lat: float
    long: float
    date: date
    day_length: Optional[float] = None
    precipitation: Optional[float] = None
    shortwave_radiation: Optional[float] = None
    snow_water_equivalent: Optional[float] = None
    max_temperature: Optional[float] = None
    min_temperature: Optional[float] = None
    vapor_pressure: Optional[float] = None

    @classmethod
    def combine(cls, query: ClimateQuery, observation: Observation) -> "ClimateRow":
        values = {f.name: getattr(query, f.name) for f in fields(ClimateQuery)}
        values.update(asdict(observation))
        return cls(**values)
