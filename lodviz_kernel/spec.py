from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Sequence, TypeAlias

from lodviz_kernel.data import BarDataset, DataPoint, Dataset, Series
from lodviz_kernel.encoding import Encoding, Field
from lodviz_kernel.errors import ChartSpecError
from lodviz_kernel.field_value import DEFAULT_SERIES_NAME, DataTable


Mark = Literal["line", "area", "bar", "point", "circle"]
MARKS: tuple[str, ...] = ("line", "area", "bar", "point", "circle")

ChartSource: TypeAlias = Dataset | BarDataset | DataTable


@dataclass(frozen=True)
class ChartData:
    """One of a continuous dataset, a categorical bar dataset or a raw table."""

    source: ChartSource

    def as_dataset(self) -> Dataset | None:
        return self.source if isinstance(self.source, Dataset) else None

    def as_bar_dataset(self) -> BarDataset | None:
        return self.source if isinstance(self.source, BarDataset) else None

    def as_table(self) -> DataTable | None:
        return self.source if isinstance(self.source, DataTable) else None


@dataclass(frozen=True)
class ChartOptions:
    title: str | None = None
    show_grid_x: bool | None = None
    show_grid_y: bool | None = None


@dataclass(frozen=True)
class ChartSpec:
    data: ChartData
    mark: Mark
    x: Field
    y: Field | None = None
    color: Field | None = None
    size: Field | None = None
    options: ChartOptions = field(default_factory=ChartOptions)

    @staticmethod
    def builder() -> "ChartSpecBuilder":
        return ChartSpecBuilder()

    def encoding(self) -> Encoding:
        if self.y is None:
            raise ChartSpecError("chart spec has no y field; cannot build an encoding")
        return Encoding(x=self.x, y=self.y, color=self.color, size=self.size)

    def resolve_dataset(self) -> Dataset:
        """Continuous dataset for line/area/point marks; tables convert on demand."""
        dataset = self.data.as_dataset()
        if dataset is not None:
            return dataset
        table = self.data.as_table()
        if table is not None:
            return table.to_dataset(self.encoding())
        return Dataset()

    def resolve_bar_dataset(self) -> BarDataset:
        bars = self.data.as_bar_dataset()
        if bars is not None:
            return bars
        table = self.data.as_table()
        if table is not None:
            return table.to_bar_dataset(self.encoding())
        return BarDataset()


class ChartSpecBuilder:
    """Collects chart settings; `build()` checks that data, mark and x are set."""

    def __init__(self) -> None:
        self._data: ChartData | None = None
        self._mark: Mark | None = None
        self._x: Field | None = None
        self._y: Field | None = None
        self._color: Field | None = None
        self._size: Field | None = None
        self._title: str | None = None
        self._grid: bool | None = None

    def data(self, dataset: Dataset) -> "ChartSpecBuilder":
        self._data = ChartData(dataset)
        return self

    def data_points(self, points: Sequence[DataPoint]) -> "ChartSpecBuilder":
        return self.data(Dataset.from_series(Series(DEFAULT_SERIES_NAME, list(points))))

    def bar_data(self, bars: BarDataset) -> "ChartSpecBuilder":
        self._data = ChartData(bars)
        return self

    def from_table(self, table: DataTable) -> "ChartSpecBuilder":
        self._data = ChartData(table)
        return self

    def mark(self, mark: Mark) -> "ChartSpecBuilder":
        if mark not in MARKS:
            raise ChartSpecError(f"Unsupported mark: {mark}")
        self._mark = mark
        return self

    def x(self, field_: Field) -> "ChartSpecBuilder":
        self._x = field_
        return self

    def y(self, field_: Field) -> "ChartSpecBuilder":
        self._y = field_
        return self

    def color(self, field_: Field) -> "ChartSpecBuilder":
        self._color = field_
        return self

    def size(self, field_: Field) -> "ChartSpecBuilder":
        self._size = field_
        return self

    def title(self, title: str) -> "ChartSpecBuilder":
        self._title = title
        return self

    def grid(self, show: bool) -> "ChartSpecBuilder":
        self._grid = show
        return self

    def build(self) -> ChartSpec:
        missing = [
            name
            for name, value in (("data", self._data), ("mark", self._mark), ("x", self._x))
            if value is None
        ]
        if missing:
            raise ChartSpecError(f"chart spec missing required field(s): {', '.join(missing)}")
        assert self._data is not None and self._mark is not None and self._x is not None
        return ChartSpec(
            data=self._data,
            mark=self._mark,
            x=self._x,
            y=self._y,
            color=self._color,
            size=self._size,
            options=ChartOptions(title=self._title, show_grid_x=self._grid, show_grid_y=self._grid),
        )
