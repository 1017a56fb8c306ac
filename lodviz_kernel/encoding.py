from __future__ import annotations

from dataclasses import dataclass, replace

from lodviz_kernel.data import DATA_TYPES, DataType


@dataclass(frozen=True)
class Field:
    name: str
    data_type: DataType = "quantitative"

    def __post_init__(self) -> None:
        if self.data_type not in DATA_TYPES:
            raise ValueError(f"Unsupported data type: {self.data_type}")

    @classmethod
    def quantitative(cls, name: str) -> "Field":
        return cls(name, "quantitative")

    @classmethod
    def temporal(cls, name: str) -> "Field":
        return cls(name, "temporal")

    @classmethod
    def nominal(cls, name: str) -> "Field":
        return cls(name, "nominal")

    @classmethod
    def ordinal(cls, name: str) -> "Field":
        return cls(name, "ordinal")

    @property
    def is_categorical(self) -> bool:
        return self.data_type in ("nominal", "ordinal")


@dataclass(frozen=True)
class Encoding:
    """Which table columns feed the x, y, color and size channels."""

    x: Field
    y: Field
    color: Field | None = None
    size: Field | None = None

    def with_color(self, color: Field) -> "Encoding":
        return replace(self, color=color)

    def with_size(self, size: Field) -> "Encoding":
        return replace(self, size=size)

    def with_color_opt(self, color: Field | None) -> "Encoding":
        return self if color is None else self.with_color(color)

    def with_size_opt(self, size: Field | None) -> "Encoding":
        return self if size is None else self.with_size(size)
