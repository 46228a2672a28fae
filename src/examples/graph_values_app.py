from PySide6.QtCore import Qt
from PySide6.QtWidgets import QMainWindow, QApplication, QWidget, QHBoxLayout, QSlider

from valueaxis.colors.modes import ColorMap
from valueaxis.ticks.graph_ticks import GraphTicks, TickStepType
from valueaxis.widgets.graph_values import GraphValues


class GraphValuesWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Graph Values")
        self.color_map = ColorMap(darkmode=True)

        central = QWidget()
        layout = QHBoxLayout(central)
        self.values = GraphValues(layout, 60, 400, GraphTicks(TickStepType.TIME), self.color_map.get_object_color("tick-line"))

        # Slider sets the half range in seconds, from one second to ten minutes
        self.slider = QSlider(Qt.Orientation.Vertical)
        self.slider.setRange(1, 600)
        self.slider.setValue(1)
        self.slider.valueChanged.connect(lambda v: self.values.set_range(-v, v))
        layout.addWidget(self.slider)

        self.setCentralWidget(central)
        self.setStyleSheet(f"background-color: {self.color_map.get_object_color('surface-base').name()};")


if __name__ == "__main__":
    app = QApplication([])
    window = GraphValuesWindow()
    window.show()
    app.exec()
