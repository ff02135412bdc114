"""Smoke tests for the headless surface renderer."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from gaussian_plot.core.errors import RenderError
from gaussian_plot.core.parameters import PlotParameters
from gaussian_plot.ui import style
from gaussian_plot.ui.plots import surface_renderer
from gaussian_plot.ui.plots.surface_renderer import (
    build_figure,
    density_colors,
    displayable_density,
    export_plot,
    hsl_to_rgb,
    render_rgba,
)


@pytest.mark.parametrize("width, height", [(0, 200), (200, 0), (0, 0), (-5, 10)])
def test_zero_size_is_a_no_op(monkeypatch, width, height):
    def _fail(*args, **kwargs):
        raise AssertionError("figure must not be built for an empty target")

    monkeypatch.setattr(surface_renderer, "build_figure", _fail)
    assert render_rgba(PlotParameters(), width, height) is None


def test_default_parameters_render_non_empty_image():
    buf = render_rgba(PlotParameters(), 320, 240)
    assert buf.shape == (240, 320, 4)
    assert buf.dtype == np.uint8
    # Background is white; the surface and axes are not.
    assert np.any(buf[..., :3] < 250)


def test_zero_std_renders():
    buf = render_rgba(PlotParameters(std_x=0.0, std_y=0.0), 160, 120)
    assert buf.shape == (120, 160, 4)


def test_figure_layout():
    fig = build_figure(PlotParameters(pitch=0.5, yaw=1.0), 400, 300)
    (ax,) = fig.axes
    assert ax.name == "3d"
    assert ax.get_xlim() == pytest.approx(style.X_RANGE)
    assert ax.get_ylim() == pytest.approx(style.Z_RANGE)
    assert ax.get_zlim() == pytest.approx(style.DENSITY_RANGE)
    assert ax.elev == pytest.approx(np.degrees(0.5))
    assert ax.azim == pytest.approx(np.degrees(1.0) + style.AZIMUTH_OFFSET_DEG)
    assert len(ax.collections) == 1
    lo, hi = ax.get_xlim()
    ticks = [t for t in ax.get_xticks() if lo <= t <= hi]
    assert len(ticks) <= style.MAX_LIGHT_LINES


def test_zero_yaw_looks_down_depth_axis():
    ax = build_figure(PlotParameters(), 400, 300).axes[0]
    assert ax.azim == pytest.approx(-90.0)
    assert ax.elev == pytest.approx(0.0)


def test_surface_antialias_setting():
    plain = build_figure(PlotParameters(), 200, 150).axes[0].collections[0]
    smooth = build_figure(PlotParameters(), 200, 150, antialiased=True).axes[0].collections[0]
    assert not np.any(plain.get_antialiased())
    assert np.all(smooth.get_antialiased())


def test_displayable_density_handles_non_finite():
    raw = np.array([np.nan, np.inf, -np.inf, -0.5, 0.4, 3.0])
    shown = displayable_density(raw)
    assert shown.tolist() == pytest.approx([0.0, 1.2, 0.0, 0.0, 0.4, 1.2])


def test_hsl_primaries():
    rgb = hsl_to_rgb(np.array([0.0, 1 / 3, 2 / 3]), 1.0, 0.5)
    assert rgb == pytest.approx(np.array([[1, 0, 0], [0, 1, 0], [0, 0, 1]], dtype=float))
    grey = hsl_to_rgb(np.array([0.25]), 0.0, 0.7)
    assert grey == pytest.approx(np.array([[0.7, 0.7, 0.7]]))


def test_density_colors_run_from_blue_to_red():
    colors = density_colors(np.array([0.0, 1.0, 1.2]))
    assert colors.shape == (3, 4)
    low, high, clipped = colors
    # hue 240°, lightness 0.7, full saturation
    assert low == pytest.approx([0.4, 0.4, 1.0, 1.0])
    assert high == pytest.approx([1.0, 0.4, 0.4, 1.0])
    assert clipped == pytest.approx(high)


def test_backend_failure_is_wrapped(monkeypatch):
    def _boom(*args, **kwargs):
        raise MemoryError("no canvas")

    monkeypatch.setattr(surface_renderer, "FigureCanvasAgg", _boom)
    with pytest.raises(RenderError) as excinfo:
        render_rgba(PlotParameters(), 100, 100)
    assert isinstance(excinfo.value.__cause__, MemoryError)


def test_render_timing_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger=surface_renderer.__name__):
        render_rgba(PlotParameters(), 80, 60)
    assert any("Rendered 80x60 surface" in rec.getMessage() for rec in caplog.records)


def test_render_timing_silent_above_debug(caplog):
    with caplog.at_level(logging.INFO, logger=surface_renderer.__name__):
        render_rgba(PlotParameters(), 80, 60)
    assert not any("Rendered" in rec.getMessage() for rec in caplog.records)


def test_export_png(tmp_path):
    out = export_plot(PlotParameters(mean_x=2.0), tmp_path / "plot.png", 200, 150)
    assert out.exists()
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_export_rejects_empty_size(tmp_path):
    with pytest.raises(ValueError):
        export_plot(PlotParameters(), tmp_path / "plot.png", 0, 150)
