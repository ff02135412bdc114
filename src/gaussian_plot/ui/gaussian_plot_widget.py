# GaussianPlot
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Qt widget that paints the 3D Gaussian density surface."""

from __future__ import annotations

import logging

from PyQt5.QtCore import QRectF, QSize, Qt, pyqtProperty, pyqtSignal
from PyQt5.QtGui import QImage, QPainter, QPaintEvent
from PyQt5.QtWidgets import QSizePolicy, QWidget

from gaussian_plot.core.errors import GaussianPlotError, RenderError
from gaussian_plot.core.parameters import ParameterStore, PlotParameters
from gaussian_plot.ui import style
from gaussian_plot.ui.plots.surface_renderer import render_rgba

log = logging.getLogger(__name__)

__all__ = ["GaussianPlotWidget"]


def _parameter_property(name: str) -> pyqtProperty:
    def fget(self: GaussianPlotWidget) -> float:
        return self.store.get(name)

    def fset(self: GaussianPlotWidget, value: float) -> None:
        # Called from C++ by QObject.setProperty; an exception here aborts the process.
        try:
            self.store.set(name, value)
        except GaussianPlotError as exc:
            log.warning("Ignoring property write: %s", exc)

    return pyqtProperty(float, fget=fget, fset=fset)


class GaussianPlotWidget(QWidget):
    """Surface plot of a bivariate Gaussian with adjustable view and distribution.

    The six parameters are exposed as Qt properties (``pitch``, ``yaw``,
    ``meanX``, ``meanY``, ``stdX``, ``stdY``) and by name through
    :meth:`get_property` / :meth:`set_property`. Every accepted change
    schedules a repaint; the surface is rebuilt on each paint.
    """

    parameterChanged = pyqtSignal(str, float)
    renderFailed = pyqtSignal(str)

    pitch = _parameter_property("pitch")
    yaw = _parameter_property("yaw")
    meanX = _parameter_property("mean-x")
    meanY = _parameter_property("mean-y")
    stdX = _parameter_property("std-x")
    stdY = _parameter_property("std-y")

    def __init__(self, parent: QWidget | None = None, parameters: PlotParameters | None = None):
        super().__init__(parent)
        self.store = ParameterStore(parameters)
        self.store.connect(self._on_parameter_changed)
        self._last_error: str | None = None
        self._antialiased = style.SURFACE_ANTIALIAS
        self.setAttribute(Qt.WA_OpaquePaintEvent, True)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

    # ------------------------------------------------------------------
    def get_property(self, name: str) -> float:
        return self.store.get(name)

    def set_property(self, name: str, value: float) -> None:
        self.store.set(name, value)

    def set_parameters(self, **values: float) -> None:
        self.store.update(**values)

    def parameters(self) -> PlotParameters:
        return self.store.snapshot()

    @property
    def last_error(self) -> str | None:
        """Message of the most recent failed paint, cleared by the next successful one."""
        return self._last_error

    def antialiased(self) -> bool:
        return self._antialiased

    def set_antialiased(self, enabled: bool) -> None:
        """Toggle surface antialiasing; repaints only when the setting changes."""
        if self._antialiased == bool(enabled):
            return
        self._antialiased = bool(enabled)
        self.update()

    def _on_parameter_changed(self, name: str, value: float) -> None:
        self.parameterChanged.emit(name, value)
        self.update()

    # ------------------------------------------------------------------
    def sizeHint(self) -> QSize:
        return QSize(640, 480)

    def minimumSizeHint(self) -> QSize:
        return QSize(200, 150)

    def render_image(
        self,
        width: int | None = None,
        height: int | None = None,
        dpi: float = style.DEFAULT_DPI,
    ) -> QImage | None:
        """Render the current parameters to a QImage; None for a zero-sized target.

        Raises:
            RenderError: if the drawing backend fails
        """
        w_px = self.width() if width is None else int(width)
        h_px = self.height() if height is None else int(height)
        buf = render_rgba(self.store.snapshot(), w_px, h_px, dpi, self._antialiased)
        if buf is None:
            return None
        h_px, w_px = buf.shape[:2]
        return QImage(buf.tobytes(), w_px, h_px, 4 * w_px, QImage.Format_RGBA8888).copy()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), self.palette().window())
            if self.width() == 0 or self.height() == 0:
                return
            dpr = float(self.devicePixelRatioF())
            try:
                image = self.render_image(
                    round(self.width() * dpr),
                    round(self.height() * dpr),
                    dpi=style.DEFAULT_DPI * dpr,
                )
            except RenderError as exc:
                # Already logged by the renderer; Qt cannot unwind through paintEvent.
                self._last_error = str(exc)
                self.renderFailed.emit(str(exc))
                return
            self._last_error = None
            if image is not None:
                painter.setRenderHint(QPainter.SmoothPixmapTransform, True)
                painter.drawImage(QRectF(self.rect()), image)
        finally:
            painter.end()
