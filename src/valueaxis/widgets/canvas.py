from typing import Optional, Tuple
from PySide6.QtCore import Qt, QPointF, QRectF
from PySide6.QtGui import QColor, QFont, QFontMetrics, QImage, QPainter, QPen
from PySide6.QtWidgets import QWidget


class ImageCanvas:
    """Off-screen drawing surface backed by a QImage.

    Drawing calls on an empty (zero sized) canvas are ignored.
    """

    def __init__(self, width: int, height: int) -> None:
        self.image: QImage = self._create_image(width, height)

    def resize(self, width: int, height: int) -> None:
        """Replace the image with a cleared one of the new size."""
        self.image = self._create_image(width, height)

    def size(self) -> Tuple[int, int]:
        return self.image.width(), self.image.height()

    def clear(self) -> None:
        if not self.image.isNull():
            self.image.fill(Qt.GlobalColor.transparent)

    def draw_line(self, start: Tuple[int, int], end: Tuple[int, int], color: QColor) -> None:
        if self.image.isNull():
            return
        painter = QPainter(self.image)
        painter.setPen(QPen(color, 1))
        painter.drawLine(QPointF(*start), QPointF(*end))
        painter.end()

    def draw_text(self, text: str, position: Tuple[int, int], font: QFont, color: QColor) -> None:
        """Draw text with its bounding box's top-left corner at position."""
        if self.image.isNull():
            return
        width, height = self.text_bounds(text, font)
        painter = QPainter(self.image)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        painter.setFont(font)
        painter.setPen(QPen(color, 1))
        painter.drawText(QRectF(position[0], position[1], width, height), Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop, text)
        painter.end()

    @staticmethod
    def text_bounds(text: str, font: QFont) -> Tuple[int, int]:
        """Width and height in pixels that text takes up when drawn with font."""
        metrics = QFontMetrics(font)
        return metrics.horizontalAdvance(text), metrics.height()

    @staticmethod
    def _create_image(width: int, height: int) -> QImage:
        image = QImage(max(0, width), max(0, height), QImage.Format.Format_ARGB32_Premultiplied)
        if not image.isNull():
            image.fill(Qt.GlobalColor.transparent)
        return image


class CanvasWidget(QWidget):
    """Fixed size widget showing an ImageCanvas."""

    def __init__(self, canvas: ImageCanvas, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.canvas: ImageCanvas = canvas
        self.setFixedSize(*canvas.size())

    def sync_size(self) -> None:
        """Follow the canvas size after it was resized."""
        self.setFixedSize(*self.canvas.size())
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        if not self.canvas.image.isNull():
            painter.drawImage(0, 0, self.canvas.image)
        painter.end()
