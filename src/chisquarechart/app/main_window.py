"""Main window: input fields, the chart canvas and the SVG export button."""
from __future__ import annotations

import logging
from typing import Optional

from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QLineEdit,
    QPushButton, QLabel, QFileDialog, QMessageBox
)

from chisquarechart.app.application import VISIBLE_APP_NAME
from chisquarechart.chart.inputs import InvalidChartInput, parse_inputs
from chisquarechart.chart.renderer import export_svg, render_chart
from chisquarechart.config import (
    ChartLayout, EngineConfig, DEFAULT_DOF, DEFAULT_ALPHA_PERCENT, DEFAULT_EXPORT_FILENAME
)
from chisquarechart.engine.pipeline import ChartResult, ChiSquareEngine

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, engine_config: Optional[EngineConfig] = None,
                 layout: Optional[ChartLayout] = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)

        self.engine = ChiSquareEngine(engine_config or EngineConfig())
        self.chart_layout = layout or ChartLayout()
        self.result: Optional[ChartResult] = None

        self._build_ui()
        self.redraw_from_inputs()

    def _build_ui(self) -> None:
        central = QWidget(self)
        v = QVBoxLayout(central)

        # ---- Controls ----
        controls = QHBoxLayout()
        form = QFormLayout()

        self.dof_input = QLineEdit(str(DEFAULT_DOF))
        self.dof_input.textChanged.connect(self.redraw_from_inputs)
        form.addRow("Degrees of freedom", self.dof_input)

        self.alpha_input = QLineEdit(f"{DEFAULT_ALPHA_PERCENT:g}")
        self.alpha_input.textChanged.connect(self.redraw_from_inputs)
        form.addRow("Significance level α [%]", self.alpha_input)

        controls.addLayout(form)
        controls.addStretch()

        self.download_btn = QPushButton("Export SVG...")
        self.download_btn.clicked.connect(self._export_svg)
        controls.addWidget(self.download_btn, 0, Qt.AlignmentFlag.AlignTop)
        v.addLayout(controls)

        # ---- Chart ----
        self.figure = Figure()
        self.canvas = FigureCanvas(self.figure)
        self.canvas.setFixedSize(self.chart_layout.width, self.chart_layout.height)
        v.addWidget(self.canvas, 0, Qt.AlignmentFlag.AlignHCenter)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color: gray;")
        v.addWidget(self.status_label)

        self.setCentralWidget(central)

    def redraw_from_inputs(self, *_) -> None:
        """Recompute and redraw; invalid input keeps the previous chart."""
        try:
            inputs = parse_inputs(self.dof_input.text(), self.alpha_input.text())
        except InvalidChartInput as e:
            logger.warning(str(e))
            self.status_label.setText(str(e))
            return

        self.status_label.setText("")
        self.draw_chart(inputs.k, inputs.alpha_percent)

    def draw_chart(self, k: int, alpha_percent: float) -> None:
        self.result = self.engine.compute(k, alpha_percent)
        render_chart(self.result, self.chart_layout, figure=self.figure)
        self.canvas.draw_idle()

    def _export_svg(self) -> None:
        if self.result is None:
            return

        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Save chart as SVG",
            DEFAULT_EXPORT_FILENAME,
            "SVG vector image (*.svg)"
        )
        if not file_path:
            return

        try:
            export_svg(self.result, file_path, figure=self.figure)
        except Exception as e:
            logger.exception("Failed to export chart")
            QMessageBox.critical(self, "Export error", f"Could not export the chart:\n{str(e)}")
