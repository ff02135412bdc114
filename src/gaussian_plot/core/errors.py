"""Exception types raised by the Gaussian plot widget and its helpers."""

from __future__ import annotations


class GaussianPlotError(Exception):
    """Base class for all errors raised by ``gaussian_plot``."""


class UnsupportedPropertyError(GaussianPlotError, KeyError):
    """Raised when a property name is not one of the six plot parameters."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unsupported property: {self.name!r}"


class ParameterRangeError(GaussianPlotError, ValueError):
    """Raised when a value falls outside the declared range of its property."""

    def __init__(self, name: str, value: object, minimum: float, maximum: float) -> None:
        self.name = name
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Value {value!r} for {name!r} is outside the allowed range "
            f"[{minimum:g}, {maximum:g}]"
        )


class RenderError(GaussianPlotError, RuntimeError):
    """Raised when the drawing backend fails to build, draw or save a plot."""
