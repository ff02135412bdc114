"""Matplotlib renderer for the Gaussian density surface.

This module owns the pure rendering pipeline used by both the widget's paint
path and image export. It is independent of Qt so it can be used for headless
exports and tests.
"""

from __future__ import annotations

import logging
import math
import time
from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib
import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator

from gaussian_plot.core.density import sample_density_grid
from gaussian_plot.core.errors import RenderError
from gaussian_plot.ui import style

if TYPE_CHECKING:
    from mpl_toolkits.mplot3d import Axes3D

    from gaussian_plot.core.parameters import PlotParameters

log = logging.getLogger(__name__)

__all__ = [
    "build_figure",
    "density_colors",
    "displayable_density",
    "export_plot",
    "hsl_to_rgb",
    "render_rgba",
]


def hsl_to_rgb(hue, saturation, lightness) -> np.ndarray:
    """Vectorised HSL → RGB. Inputs in [0, 1]; returns an array with a trailing axis of 3."""
    h = np.asarray(hue, dtype=float)
    s = np.broadcast_to(np.asarray(saturation, dtype=float), h.shape)
    light = np.broadcast_to(np.asarray(lightness, dtype=float), h.shape)

    chroma = (1.0 - np.abs(2.0 * light - 1.0)) * s
    sector = (h % 1.0) * 6.0
    second = chroma * (1.0 - np.abs(sector % 2.0 - 1.0))
    zero = np.zeros_like(chroma)
    idx = np.floor(sector).astype(int) % 6

    r = np.choose(idx, [chroma, second, zero, zero, second, chroma])
    g = np.choose(idx, [second, chroma, chroma, second, zero, zero])
    b = np.choose(idx, [zero, zero, second, chroma, chroma, second])
    m = light - chroma / 2.0
    return np.stack([r + m, g + m, b + m], axis=-1)


def displayable_density(values: np.ndarray) -> np.ndarray:
    """Map raw density samples into the drawable density range.

    NaN becomes the floor and +inf the ceiling; everything is then clipped to
    the fixed density axis so degenerate parameters still draw.
    """
    lo, hi = style.DENSITY_RANGE
    finite = np.nan_to_num(values, nan=lo, posinf=hi, neginf=lo)
    return np.clip(finite, lo, hi)


def density_colors(values: np.ndarray) -> np.ndarray:
    """RGBA colors for density samples, shaped ``values.shape + (4,)``."""
    hue = np.clip(style.HUE_START - style.HUE_START * values, 0.0, 1.0)
    rgb = hsl_to_rgb(hue, style.SURFACE_SATURATION, style.SURFACE_LIGHTNESS)
    alpha = np.ones(rgb.shape[:-1] + (1,))
    return np.concatenate([rgb, alpha], axis=-1)


def build_figure(
    params: PlotParameters,
    width: int,
    height: int,
    dpi: float = style.DEFAULT_DPI,
    antialiased: bool = style.SURFACE_ANTIALIAS,
) -> Figure:
    """Build the 3D density figure for ``params`` at ``width``×``height`` pixels."""
    fig = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    fig.patch.set_facecolor(style.BACKGROUND_COLOR)

    # 3D axes pick up their grid style from rcParams when the axis is created.
    with matplotlib.rc_context(
        {"grid.color": style.GRID_COLOR, "grid.linewidth": style.GRID_LINEWIDTH}
    ):
        ax: Axes3D = fig.add_axes((0.0, 0.0, 1.0, 1.0), projection="3d")

    ax.set_facecolor(style.BACKGROUND_COLOR)
    ax.set_xlim(*style.X_RANGE)
    ax.set_ylim(*style.Z_RANGE)
    ax.set_zlim(*style.DENSITY_RANGE)
    ax.view_init(
        elev=math.degrees(params.pitch),
        azim=math.degrees(params.yaw) + style.AZIMUTH_OFFSET_DEG,
    )
    ax.set_box_aspect(None, zoom=style.PROJECTION_SCALE)
    _apply_light_grid(ax)

    grid = sample_density_grid(params)
    values = displayable_density(grid.values)
    ax.plot_surface(
        grid.x,
        grid.z,
        values,
        facecolors=density_colors(values),
        rstride=1,
        cstride=1,
        linewidth=0,
        antialiased=antialiased,
        shade=False,
    )
    return fig


def _apply_light_grid(ax: Axes3D) -> None:
    ax.grid(True)
    # nbins=n yields at most n + 1 lines over the fixed ranges
    for axis in (ax.xaxis, ax.yaxis, ax.zaxis):
        axis.set_major_locator(MaxNLocator(nbins=style.MAX_LIGHT_LINES - 1))
        axis.set_pane_color((1.0, 1.0, 1.0, 0.0))
    x_label, y_label, z_label = style.AXIS_LABELS
    ax.set_xlabel(x_label, fontsize=style.AXIS_LABEL_FONTSIZE)
    ax.set_ylabel(y_label, fontsize=style.AXIS_LABEL_FONTSIZE)
    ax.set_zlabel(z_label, fontsize=style.AXIS_LABEL_FONTSIZE)
    ax.tick_params(labelsize=style.TICK_LABEL_FONTSIZE)


def render_rgba(
    params: PlotParameters,
    width: int,
    height: int,
    dpi: float = style.DEFAULT_DPI,
    antialiased: bool = style.SURFACE_ANTIALIAS,
) -> np.ndarray | None:
    """
    Render the surface plot into an RGBA pixel buffer.

    Args:
        params: Parameter snapshot to draw
        width, height: Target size in device pixels
        dpi: Resolution used to size fonts and lines
        antialiased: Antialias the surface polygons (slower)

    Returns:
        ``(height, width, 4)`` uint8 array, or None when either dimension is zero

    Raises:
        RenderError: if the figure cannot be built or drawn
    """
    if width <= 0 or height <= 0:
        return None

    started = time.perf_counter()
    try:
        fig = build_figure(params, width, height, dpi, antialiased)
        canvas = FigureCanvasAgg(fig)
        canvas.draw()
        buf = np.asarray(canvas.buffer_rgba()).copy()
    except Exception as exc:
        log.exception("Surface render failed for %sx%s", width, height)
        raise RenderError(f"Failed to render {width}x{height} surface plot") from exc

    if log.isEnabledFor(logging.DEBUG):
        log.debug(
            "Rendered %sx%s surface in %.1f ms",
            buf.shape[1],
            buf.shape[0],
            (time.perf_counter() - started) * 1000.0,
        )
    return buf


def export_plot(
    params: PlotParameters,
    out_path: str | Path,
    width: int = style.DEFAULT_EXPORT_SIZE[0],
    height: int = style.DEFAULT_EXPORT_SIZE[1],
    dpi: float = style.DEFAULT_DPI,
    antialiased: bool = style.SURFACE_ANTIALIAS,
) -> Path:
    """Save the surface plot to ``out_path``; the format follows the file suffix."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Export size must be positive, got {width}x{height}")

    out = Path(out_path)
    try:
        fig = build_figure(params, width, height, dpi, antialiased)
        FigureCanvasAgg(fig)
        fig.savefig(out, dpi=dpi, facecolor=fig.get_facecolor())
    except Exception as exc:
        log.exception("Export to %s failed", out)
        raise RenderError(f"Failed to export surface plot to {out}") from exc

    log.info("Exported %sx%s surface plot to %s", width, height, out)
    return out
