"""
Spreadsheet rows and columns.

Rows are typed dataclasses; a Column reads its value out of a row through
an explicit accessor, so every column key is bound to a real field.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

RowT = TypeVar("RowT")


@dataclass(frozen=True)
class LegRow:
    """One leg of the route: from one point to the next."""
    cumulative_distance: Optional[float]
    from_title: str
    to_title: str
    distance: Optional[float]
    gain: Optional[int]
    loss: Optional[int]
    description: Optional[str] = None
    users: Optional[str] = None
    surface: Optional[str] = None
    locomotion: Optional[str] = None


@dataclass(frozen=True)
class LocationRow:
    """One point along the route, with the leg that arrives at it."""
    location: str
    cumulative_distance: Optional[float]
    distance: Optional[float]
    gain: Optional[int]
    loss: Optional[int]
    description: Optional[str] = None
    users: Optional[str] = None
    surface: Optional[str] = None
    locomotion: Optional[str] = None


@dataclass(frozen=True)
class Column(Generic[RowT]):
    """
    A display column.

    Optional columns are shown only when some row has a value for them.
    """
    key: str
    name: str
    accessor: Callable[[RowT], Any] = field(compare=False, repr=False)
    optional: bool = False

    def value(self, row: RowT) -> Any:
        return self.accessor(row)

    def header(self) -> Dict[str, str]:
        return {"key": self.key, "name": self.name}


@dataclass
class Spreadsheet(Generic[RowT]):
    """Realized columns plus the rows they describe."""
    columns: List[Column]
    rows: List[RowT]

    def headers(self) -> List[Dict[str, str]]:
        return [column.header() for column in self.columns]

    def to_records(self) -> List[Dict[str, Any]]:
        """Rows as dicts keyed by column key."""
        return [
            {column.key: column.value(row) for column in self.columns}
            for row in self.rows
        ]

    def to_matrix(
        self,
        formatter: Optional[Callable[[str, Any], Any]] = None
    ) -> List[List[Any]]:
        """
        Rows as lists aligned with `columns`.

        Args:
            formatter: Optional (column key, value) -> cell callable
        """
        return [
            [
                formatter(column.key, column.value(row)) if formatter
                else column.value(row)
                for column in self.columns
            ]
            for row in self.rows
        ]
