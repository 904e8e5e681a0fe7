"""
Climate spreadsheet columns.

Point and date are always shown; each Daymet variable is shown only when
some row has a value for it.
"""

from typing import Any, Callable, List, Optional, Sequence

from routesheet.features.spreadsheet import Column, Spreadsheet, select_columns

from .models import ClimateRow


def format_number(places: int) -> Callable[[Optional[float]], str]:
    """Cell formatter with a fixed number of decimals; blank stays blank."""
    def formatter(value: Optional[float]) -> str:
        if value is None:
            return ""
        return f"{value:.{places}f}"
    return formatter


def format_day_length(seconds: Optional[float]) -> str:
    """Day length as 'H:MM' (Daymet reports seconds)."""
    if seconds is None:
        return ""
    minutes = int(round(seconds / 60))
    return f"{minutes // 60}:{minutes % 60:02d}"


# column key -> cell formatter
FORMATTERS = {
    "lat": format_number(6),
    "long": format_number(6),
    "date": lambda d: d.isoformat(),
    "dayLength": format_day_length,
    "precipitation": format_number(1),
    "shortwaveRadiation": format_number(1),
    "snowWaterEquivalent": format_number(1),
    "maxTemperature": format_number(1),
    "minTemperature": format_number(1),
    "vaporPressure": format_number(0),
}

CLIMATE_COLUMNS: List[Column[ClimateRow]] = [
    Column("lat", "Latitude", lambda row: row.lat),
    Column("long", "Longitude", lambda row: row.long),
    Column("date", "Date", lambda row: row.date),
    Column("dayLength", "Day length (h:mm)", lambda row: row.day_length, optional=True),
    Column("precipitation", "Precipitation (mm/day)", lambda row: row.precipitation, optional=True),
    Column(
        "shortwaveRadiation",
        "Shortwave radiation (W/m²)",
        lambda row: row.shortwave_radiation,
        optional=True,
    ),
    Column(
        "snowWaterEquivalent",
        "Snow water equivalent (kg/m²)",
        lambda row: row.snow_water_equivalent,
        optional=True,
    ),
    Column("maxTemperature", "Max temperature (°C)", lambda row: row.max_temperature, optional=True),
    Column("minTemperature", "Min temperature (°C)", lambda row: row.min_temperature, optional=True),
    Column("vaporPressure", "Vapor pressure (Pa)", lambda row: row.vapor_pressure, optional=True),
]


def format_cell(key: str, value: Any) -> str:
    """Format a raw cell value for display."""
    if value is None:
        return ""
    formatter = FORMATTERS.get(key)
    if formatter:
        return formatter(value)
    return str(value)


def build_climate_spreadsheet(rows: Sequence[ClimateRow]) -> Spreadsheet:
    """Select the climate columns that carry data."""
    rows = list(rows)
    return Spreadsheet(columns=select_columns(rows, CLIMATE_COLUMNS), rows=rows)
