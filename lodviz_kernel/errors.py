from __future__ import annotations


class KernelDataError(ValueError):
    """Raised when caller data cannot be coerced into kernel types."""


class ChartSpecError(ValueError):
    """Raised when a chart spec is built without its required fields."""
