"""Application bootstrap helpers."""

from importlib import import_module

__all__ = ["GaussianPlotLauncher"]


def __getattr__(name: str):
    if name == "GaussianPlotLauncher":
        module = import_module("gaussian_plot.app.launcher")
        value = module.GaussianPlotLauncher
        globals()[name] = value
        return value
    raise AttributeError(f"module 'gaussian_plot.app' has no attribute {name!r}")
