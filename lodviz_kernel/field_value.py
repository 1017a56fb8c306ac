"""Tidy table layer.

Rows map column names to typed `FieldValue`s. A `DataTable` keeps rows in
source order and converts them into chart datasets through an `Encoding`.
"""

from __future__ import annotations

from dataclasses import dataclass
import datetime as dt
from decimal import Decimal
import math
from typing import Any, Iterable, Iterator, Mapping, TypeAlias

import numpy as np

from lodviz_kernel.data import BarDataset, DataPoint, Dataset, Series
from lodviz_kernel.encoding import Encoding


NULL_GROUP_KEY = "__null__"
DEFAULT_SERIES_NAME = "default"


class _FieldValueBase:
    def as_f64(self) -> float | None:
        return None

    def as_str(self) -> str | None:
        return None

    def as_timestamp(self) -> float | None:
        return None

    def is_null(self) -> bool:
        return False


@dataclass(frozen=True)
class Numeric(_FieldValueBase):
    value: float

    def as_f64(self) -> float | None:
        return self.value

    def as_timestamp(self) -> float | None:
        return self.value

    def group_key(self) -> str:
        return format_number_key(self.value)


@dataclass(frozen=True)
class Text(_FieldValueBase):
    value: str

    def as_str(self) -> str | None:
        return self.value

    def group_key(self) -> str:
        return self.value


@dataclass(frozen=True)
class Timestamp(_FieldValueBase):
    """Unix timestamp in milliseconds."""

    value: float

    def as_f64(self) -> float | None:
        return self.value

    def as_timestamp(self) -> float | None:
        return self.value

    def group_key(self) -> str:
        return format_number_key(self.value)


@dataclass(frozen=True)
class Bool(_FieldValueBase):
    value: bool

    def as_f64(self) -> float | None:
        return 1.0 if self.value else 0.0

    def group_key(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Null(_FieldValueBase):
    def is_null(self) -> bool:
        return True

    def group_key(self) -> str:
        return NULL_GROUP_KEY


FieldValue: TypeAlias = Numeric | Text | Timestamp | Bool | Null
DataRow: TypeAlias = dict[str, FieldValue]

NULL = Null()


def format_number_key(value: float) -> str:
    """Shortest round-trip text, never in exponent form; integral values drop the `.0`."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return np.format_float_positional(value, trim="-")


def field_value(raw: Any) -> FieldValue:
    """Wrap a Python value in the matching `FieldValue` variant."""
    if isinstance(raw, (Numeric, Text, Timestamp, Bool, Null)):
        return raw
    if raw is None:
        return NULL
    # bool before int: bool is an int subclass.
    if isinstance(raw, bool):
        return Bool(raw)
    if isinstance(raw, (int, float, Decimal)):
        return Numeric(float(raw))
    if isinstance(raw, str):
        return Text(raw)
    if isinstance(raw, dt.datetime):
        # naive datetimes are read as UTC
        if raw.tzinfo is None:
            raw = raw.replace(tzinfo=dt.timezone.utc)
        return Timestamp(raw.timestamp() * 1000.0)
    if isinstance(raw, dt.date):
        return Timestamp(dt.datetime(raw.year, raw.month, raw.day, tzinfo=dt.timezone.utc).timestamp() * 1000.0)
    raise TypeError(f"cannot convert {type(raw)!r} to a field value")


def data_row(values: Mapping[str, Any] | None = None, /, **columns: Any) -> DataRow:
    row: DataRow = {}
    for source in (values or {}, columns):
        for name, raw in source.items():
            row[str(name)] = field_value(raw)
    return row


class DataTable:
    """Ordered rows of heterogeneous typed columns."""

    def __init__(self, rows: Iterable[DataRow] | None = None) -> None:
        self._rows: list[DataRow] = list(rows) if rows is not None else []

    @classmethod
    def from_rows(cls, rows: Iterable[DataRow]) -> "DataTable":
        return cls(rows)

    def push(self, row: DataRow) -> None:
        self._rows.append(row)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[DataRow]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataTable):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"DataTable(rows={len(self._rows)})"

    def is_empty(self) -> bool:
        return not self._rows

    def rows(self) -> list[DataRow]:
        return list(self._rows)

    def columns(self) -> list[str]:
        seen: dict[str, None] = {}
        for row in self._rows:
            for name in row:
                seen.setdefault(name, None)
        return list(seen)

    def extract_numeric(self, col: str) -> list[float]:
        out: list[float] = []
        for row in self._rows:
            value = row.get(col)
            number = value.as_f64() if value is not None else None
            if number is not None:
                out.append(number)
        return out

    def extract_text(self, col: str) -> list[str]:
        out: list[str] = []
        for row in self._rows:
            value = row.get(col)
            text = value.as_str() if value is not None else None
            if text is not None:
                out.append(text)
        return out

    def group_by(self, col: str) -> list[tuple[str, "DataTable"]]:
        """Split rows by the stringified value of `col`, in first-seen order."""
        groups: dict[str, list[DataRow]] = {}
        for row in self._rows:
            value = row.get(col)
            key = value.group_key() if value is not None else NULL_GROUP_KEY
            groups.setdefault(key, []).append(row)
        return [(key, DataTable(rows)) for key, rows in groups.items()]

    def to_dataset(self, encoding: Encoding) -> Dataset:
        """Rows to (x, y) series; rows without numeric x and y are skipped."""
        x_col = encoding.x.name
        y_col = encoding.y.name
        if encoding.color is None:
            return Dataset.from_series(Series(DEFAULT_SERIES_NAME, self._extract_xy(x_col, y_col)))

        dataset = Dataset()
        for name, sub in self.group_by(encoding.color.name):
            dataset.add_series(Series(name, sub._extract_xy(x_col, y_col)))
        return dataset

    def to_bar_dataset(self, encoding: Encoding) -> BarDataset:
        """Text categories from x, one value per category from y (0.0 if absent)."""
        cat_col = encoding.x.name
        val_col = encoding.y.name

        categories: dict[str, None] = {}
        for row in self._rows:
            value = row.get(cat_col)
            label = value.as_str() if value is not None else None
            if label is not None:
                categories.setdefault(label, None)

        bars = BarDataset(categories=list(categories))
        if encoding.color is None:
            bars.add_series(DEFAULT_SERIES_NAME, self._category_values(bars.categories, cat_col, val_col))
            return bars

        for name, sub in self.group_by(encoding.color.name):
            bars.add_series(name, sub._category_values(bars.categories, cat_col, val_col))
        return bars

    def _extract_xy(self, x_col: str, y_col: str) -> list[DataPoint]:
        points: list[DataPoint] = []
        for row in self._rows:
            xv = row.get(x_col)
            yv = row.get(y_col)
            if xv is None or yv is None:
                continue
            x = xv.as_f64()
            y = yv.as_f64()
            if x is None or y is None:
                continue
            points.append(DataPoint(x, y))
        return points

    def _category_values(self, categories: list[str], cat_col: str, val_col: str) -> list[float]:
        first_rows: dict[str, DataRow] = {}
        for row in self._rows:
            value = row.get(cat_col)
            label = value.as_str() if value is not None else None
            if label is not None and label not in first_rows:
                first_rows[label] = row

        values: list[float] = []
        for category in categories:
            row = first_rows.get(category)
            cell = row.get(val_col) if row is not None else None
            number = cell.as_f64() if cell is not None else None
            values.append(number if number is not None else 0.0)
        return values
