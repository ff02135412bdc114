from importlib import import_module

__all__ = ["GaussianPlotWidget", "GaussianPlotWindow"]


def __getattr__(name: str):
    if name == "GaussianPlotWidget":
        module = import_module("gaussian_plot.ui.gaussian_plot_widget")
        value = module.GaussianPlotWidget
    elif name == "GaussianPlotWindow":
        module = import_module("gaussian_plot.ui.main_window")
        value = module.GaussianPlotWindow
    else:
        raise AttributeError(f"module 'gaussian_plot.ui' has no attribute {name!r}")
    globals()[name] = value
    return value
