"""Bivariate Gaussian density and the fixed sampling grid used by the surface plot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

import numpy as np

if TYPE_CHECKING:
    from gaussian_plot.core.parameters import PlotParameters

__all__ = ["GRID_AXIS", "DensityGrid", "density", "peak_density", "sample_density_grid"]

# 101 samples over [-10, 10] at 0.2 spacing.
GRID_AXIS: np.ndarray = np.arange(-50, 51, dtype=float) / 5.0


@dataclass
class DensityGrid:
    """Meshed sample coordinates and density values, all shaped ``(101, 101)``."""

    x: np.ndarray
    z: np.ndarray
    values: np.ndarray


@overload
def density(x: float, y: float, mean_x: float, mean_y: float, std_x: float, std_y: float) -> float: ...


@overload
def density(
    x: np.ndarray, y: np.ndarray, mean_x: float, mean_y: float, std_x: float, std_y: float
) -> np.ndarray: ...


def density(x, y, mean_x, mean_y, std_x, std_y):
    """
    Evaluate the plot's Gaussian density at ``(x, y)``.

    The normaliser is ``sqrt(2π / (std_x * std_y))``, not the textbook
    ``2π·std_x·std_y``. The peak at the mean is therefore
    ``sqrt(std_x * std_y / 2π)``.

    A zero standard deviation follows IEEE semantics: points give ``0.0``,
    ``inf`` or ``nan`` without raising.

    Args:
        x, y: Scalars or numpy arrays (broadcast together)
        mean_x, mean_y: Distribution means
        std_x, std_y: Standard deviations (>= 0)

    Returns:
        A float for scalar input, otherwise an ndarray
    """
    scalar = np.ndim(x) == 0 and np.ndim(y) == 0
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        dx = (np.asarray(x, dtype=float) - mean_x) / np.float64(std_x)
        dy = (np.asarray(y, dtype=float) - mean_y) / np.float64(std_y)
        exponent = -(dx * dx + dy * dy) / 2.0
        norm = np.sqrt(2.0 * np.pi / (np.float64(std_x) * np.float64(std_y)))
        result = np.exp(exponent) / norm
    if scalar:
        return float(result)
    return result


def peak_density(std_x: float, std_y: float) -> float:
    """Density at the mean for the given standard deviations."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(1.0 / np.sqrt(2.0 * np.pi / (np.float64(std_x) * np.float64(std_y))))


def sample_density_grid(params: PlotParameters) -> DensityGrid:
    # values[i, j] is the density at x=GRID_AXIS[j], y=GRID_AXIS[i]
    x, z = np.meshgrid(GRID_AXIS, GRID_AXIS)
    values = density(x, z, params.mean_x, params.mean_y, params.std_x, params.std_y)
    return DensityGrid(x=x, z=z, values=values)
