"""Application bootstrap for the Gaussian plot viewer."""

from __future__ import annotations

import logging
import os
import sys

from PyQt5.QtCore import QCoreApplication, Qt
from PyQt5.QtWidgets import QApplication

from gaussian_plot.core.parameters import PlotParameters
from gaussian_plot.ui import style
from gaussian_plot.ui.main_window import GaussianPlotWindow

log = logging.getLogger(__name__)

# Ensure HiDPI scaling is enabled before the QApplication is instantiated
os.environ.setdefault("QT_AUTO_SCREEN_SCALE_FACTOR", "1")
os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")


class GaussianPlotLauncher:
    """Create the Qt application and show the viewer window."""

    def __init__(
        self,
        parameters: PlotParameters | None = None,
        argv: list[str] | None = None,
        antialiased: bool = style.SURFACE_ANTIALIAS,
    ) -> None:
        QCoreApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
        QCoreApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)
        QCoreApplication.setApplicationName("GaussianPlot")

        self.app = QApplication.instance() or QApplication(list(sys.argv if argv is None else argv))
        self.window = GaussianPlotWindow(parameters=parameters, antialiased=antialiased)

    def run(self) -> int:
        self.window.show()
        log.info("Viewer window shown")
        return self.app.exec_()
