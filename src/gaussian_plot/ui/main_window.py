"""Viewer window: the Gaussian plot widget plus one spin box per parameter."""

from __future__ import annotations

from contextlib import contextmanager

from PyQt5.QtWidgets import (
    QAction,
    QDoubleSpinBox,
    QFileDialog,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from gaussian_plot.core.errors import RenderError
from gaussian_plot.core.parameters import PARAMETER_SPECS, ParameterSpec, PlotParameters
from gaussian_plot.ui import style
from gaussian_plot.ui.gaussian_plot_widget import GaussianPlotWidget
from gaussian_plot.ui.plots.surface_renderer import export_plot

CONTROL_MIN_W = 240
SPIN_DECIMALS = 2


@contextmanager
def signals_blocked(widget):
    """Context manager to safely block/unblock signals."""
    widget.blockSignals(True)
    try:
        yield widget
    finally:
        widget.blockSignals(False)


class GaussianPlotWindow(QMainWindow):
    """Main window wiring parameter controls to a :class:`GaussianPlotWidget`."""

    def __init__(
        self,
        parameters: PlotParameters | None = None,
        parent=None,
        antialiased: bool = style.SURFACE_ANTIALIAS,
    ):
        super().__init__(parent)
        self.setWindowTitle("Gaussian Plot")

        self.plot = GaussianPlotWidget(parameters=parameters)
        self.plot.set_antialiased(antialiased)
        self.spin_boxes: dict[str, QDoubleSpinBox] = {}

        self._setup_ui()
        self.plot.parameterChanged.connect(self._on_parameter_changed)
        self.plot.renderFailed.connect(self._on_render_failed)

    # ------------------------------------------------------------------
    def _setup_ui(self) -> None:
        central = QWidget(self)
        layout = QHBoxLayout(central)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        controls = QVBoxLayout()
        controls.addWidget(self._build_parameter_group())
        self.reset_button = QPushButton("Reset")
        self.reset_button.clicked.connect(lambda: self.plot.store.reset())
        controls.addWidget(self.reset_button)
        controls.addStretch(1)

        control_panel = QWidget()
        control_panel.setLayout(controls)
        control_panel.setMinimumWidth(CONTROL_MIN_W)

        layout.addWidget(control_panel)
        layout.addWidget(self.plot, 1)
        self.setCentralWidget(central)

        self.export_action = QAction("Export image…", self)
        self.export_action.triggered.connect(self._export_dialog)
        file_menu = self.menuBar().addMenu("&File")
        file_menu.addAction(self.export_action)

        self.antialias_action = QAction("Antialias surface", self)
        self.antialias_action.setCheckable(True)
        self.antialias_action.setChecked(self.plot.antialiased())
        self.antialias_action.toggled.connect(self.plot.set_antialiased)
        view_menu = self.menuBar().addMenu("&View")
        view_menu.addAction(self.antialias_action)
        self.statusBar()

    def _build_parameter_group(self) -> QGroupBox:
        grp = QGroupBox("Parameters")
        form = QFormLayout(grp)
        for spec in PARAMETER_SPECS.values():
            spin = self._make_spin_box(spec)
            spin.valueChanged.connect(
                lambda value, name=spec.name: self._on_spin_changed(name, value)
            )
            self.spin_boxes[spec.name] = spin
            form.addRow(spec.nick, spin)
        return grp

    def _make_spin_box(self, spec: ParameterSpec) -> QDoubleSpinBox:
        spin = QDoubleSpinBox()
        spin.setDecimals(SPIN_DECIMALS)
        spin.setRange(spec.minimum, spec.maximum)
        spin.setSingleStep((spec.maximum - spec.minimum) / 100.0)
        spin.setToolTip(spec.blurb)
        spin.setValue(self.plot.get_property(spec.name))
        return spin

    # ------------------------------------------------------------------
    def _on_spin_changed(self, name: str, value: float) -> None:
        spec = PARAMETER_SPECS[name]
        # Spin boxes round their range to the shown decimals; keep inside the declared bounds.
        self.plot.set_property(name, min(max(value, spec.minimum), spec.maximum))

    def _on_parameter_changed(self, name: str, value: float) -> None:
        spin = self.spin_boxes.get(name)
        if spin is None or spin.value() == round(value, SPIN_DECIMALS):
            return
        with signals_blocked(spin):
            spin.setValue(value)

    def _on_render_failed(self, message: str) -> None:
        self.statusBar().showMessage(f"Render failed: {message}", 5000)

    def _export_dialog(self) -> None:
        path, _ = QFileDialog.getSaveFileName(
            self,
            "Export image",
            "gaussian_plot.png",
            "PNG image (*.png);;SVG image (*.svg);;PDF document (*.pdf)",
        )
        if not path:
            return
        self.export_image(path)

    def export_image(self, path: str) -> bool:
        width, height = style.DEFAULT_EXPORT_SIZE
        try:
            export_plot(
                self.plot.parameters(),
                path,
                width,
                height,
                antialiased=self.plot.antialiased(),
            )
        except RenderError as exc:
            # export_plot has already logged the traceback
            QMessageBox.warning(self, "Export failed", str(exc))
            return False
        self.statusBar().showMessage(f"Exported {path}", 5000)
        return True
