# GaussianPlot
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Public package interface for the Gaussian plot widget."""

from importlib import import_module

from gaussian_plot.core.density import density, sample_density_grid
from gaussian_plot.core.errors import (
    GaussianPlotError,
    ParameterRangeError,
    RenderError,
    UnsupportedPropertyError,
)
from gaussian_plot.core.parameters import (
    PARAMETER_SPECS,
    ParameterSpec,
    ParameterStore,
    PlotParameters,
)

__version__ = "0.1.0"

_UI_EXPORTS = {
    "GaussianPlotWidget": ("gaussian_plot.ui.gaussian_plot_widget", "GaussianPlotWidget"),
    "GaussianPlotWindow": ("gaussian_plot.ui.main_window", "GaussianPlotWindow"),
    "render_rgba": ("gaussian_plot.ui.plots.surface_renderer", "render_rgba"),
    "export_plot": ("gaussian_plot.ui.plots.surface_renderer", "export_plot"),
}


def __getattr__(name: str):
    if name in _UI_EXPORTS:
        module_name, attr = _UI_EXPORTS[name]
        module = import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module 'gaussian_plot' has no attribute {name!r}")


__all__ = [
    "GaussianPlotWidget",
    "GaussianPlotWindow",
    "GaussianPlotError",
    "ParameterRangeError",
    "RenderError",
    "UnsupportedPropertyError",
    "PARAMETER_SPECS",
    "ParameterSpec",
    "ParameterStore",
    "PlotParameters",
    "density",
    "sample_density_grid",
    "render_rgba",
    "export_plot",
]
