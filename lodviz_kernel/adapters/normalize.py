from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal
import logging
import math
from typing import Any

import numpy as np

from lodviz_kernel.data import DataPoint
from lodviz_kernel.errors import KernelDataError
from lodviz_kernel.field_value import NULL, DataRow, DataTable, FieldValue, Timestamp, field_value


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


LOGGER = logging.getLogger(__name__)


def points_from_xy(y: Any, x: Any = None) -> list[DataPoint]:
    """Coerce array-likes to data points, dropping pairs with a non-finite coordinate.

    `x` defaults to the sample index.
    """
    if y is None:
        raise KernelDataError("y input is required")
    y_arr = _coerce_1d_numeric(y, label="y")

    if x is None:
        x_arr = np.arange(y_arr.size, dtype=np.float64)
    else:
        x_arr = _coerce_1d_numeric(x, label="x")

    if x_arr.shape != y_arr.shape:
        raise KernelDataError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")

    mask = np.isfinite(x_arr) & np.isfinite(y_arr)
    dropped = int(mask.size - np.count_nonzero(mask))
    if dropped:
        LOGGER.warning("dropped %d non-finite point(s) of %d", dropped, mask.size)
    return [DataPoint(float(px), float(py)) for px, py in zip(x_arr[mask], y_arr[mask])]


def table_from_records(records: Iterable[Mapping[str, Any]]) -> DataTable:
    """Build a table from dict-like rows; values go through `_to_field_value`."""
    table = DataTable()
    for i, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise KernelDataError(f"record {i} is not a mapping: {type(record)!r}")
        row: DataRow = {}
        for name, raw in record.items():
            row[str(name)] = _to_field_value(raw, where=f"record {i}, column {name!r}")
        table.push(row)
    return table


def table_from_dataframe(df: Any) -> DataTable:
    if pd is None:
        raise KernelDataError("pandas is required for table_from_dataframe")
    if not isinstance(df, pd.DataFrame):
        raise KernelDataError("`df` must be a pandas DataFrame")

    columns = [str(c) for c in df.columns]
    table = DataTable()
    for i, values in enumerate(df.itertuples(index=False, name=None)):
        row: DataRow = {}
        for name, raw in zip(columns, values):
            row[name] = _to_field_value(raw, where=f"row {i}, column {name!r}")
        table.push(row)
    return table


def _to_field_value(raw: Any, *, where: str) -> FieldValue:
    if pd is not None:
        if isinstance(raw, pd.Timestamp):
            return NULL if pd.isna(raw) else Timestamp(raw.value / 1_000_000.0)
        if raw is pd.NA or raw is pd.NaT:
            return NULL
    if isinstance(raw, np.datetime64):
        if np.isnat(raw):
            return NULL
        return Timestamp(float(raw.astype("datetime64[us]").astype(np.int64)) / 1000.0)
    if isinstance(raw, np.bool_):
        raw = bool(raw)
    elif isinstance(raw, np.generic):
        raw = raw.item()
    if isinstance(raw, float) and math.isnan(raw):
        return NULL
    try:
        return field_value(raw)
    except TypeError as exc:
        raise KernelDataError(f"unsupported value at {where}: {raw!r}") from exc


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise KernelDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise KernelDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(value, dtype=object).reshape(-1), label=label)

    raise KernelDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)
    if arr.dtype.kind == "M":
        stamps = arr.astype("datetime64[ms]")
        out = stamps.astype(np.int64).astype(np.float64)
        out[np.isnat(stamps)] = np.nan
        return out

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        if isinstance(raw, (str, bytes)):
            raise KernelDataError(f"{label} contains non-numeric value at index {i}: {raw!r}")
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise KernelDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
