import logging
from typing import List, Optional
from PySide6.QtGui import QColor, QFont
from PySide6.QtWidgets import QLayout

from valueaxis.colors.modes import ColorMap
from valueaxis.renderers.values import RenderedTick, build_ticks, label_position
from valueaxis.rulers.range import AxisConfig
from valueaxis.ticks.graph_ticks import GraphTicks
from valueaxis.ticks.source import TickSource, tick_levels
from valueaxis.widgets.canvas import CanvasWidget, ImageCanvas

LOGGER = logging.getLogger(__name__)

DEFAULT_FONT_SIZE = 8


class GraphValues:
    """
    Vertical value display used as a side bar for a graph.

    Key behaviors:
    - Owns its canvas and the widget showing it, added to the given layout
    - Every change of size or range re-queries the tick source and redraws at once
    - Value 0 is drawn at the vertical centre, larger values further up
    - Only the most important tick level gets time labels
    """

    def __init__(self, layout: QLayout, width: int, height: int, tick_source: Optional[TickSource] = None, color: Optional[QColor] = None, font: Optional[QFont] = None) -> None:
        """Create value display of width x height pixels and add it to layout."""
        self.tick_source: TickSource = tick_source if tick_source is not None else GraphTicks()
        self.color: QColor = QColor(color) if color is not None else ColorMap().get_object_color("tick-line")
        if font is None:
            font = QFont()
            font.setPointSize(DEFAULT_FONT_SIZE)
        self.font: QFont = font
        self._config: AxisConfig = AxisConfig(width, height)

        self.canvas: ImageCanvas = ImageCanvas(width, height)
        self.widget: CanvasWidget = CanvasWidget(self.canvas)
        layout.addWidget(self.widget)

        self.set_size(width, height)

    @property
    def config(self) -> AxisConfig:
        return self._config

    def set_size(self, width: int, height: int) -> None:
        """Set the pixel size to draw the value display on."""
        self._config = self._config.with_size(width, height)
        self.canvas.resize(width, height)
        self.widget.sync_size()
        self._update_ticks()
        self.redraw()

    def set_range(self, start: float, end: float) -> None:
        """Set the range of values to display. Bounds may be given in any order."""
        self._config = self._config.with_range(start, end)
        self._update_ticks()
        self.redraw()

    def rendered_ticks(self) -> List[RenderedTick]:
        """Ticks as drawn by the last redraw, recomputed from the tick source."""
        return build_ticks(self._config, tick_levels(self.tick_source), self.color)

    def redraw(self) -> None:
        """Clear the canvas and draw all ticks and labels."""
        self.canvas.clear()
        ticks = self.rendered_ticks()
        for tick in ticks:
            self.canvas.draw_line((0, tick.y), (tick.line_length, tick.y), tick.color)
            if tick.label is not None:
                self._draw_label(tick)
        self.widget.update()
        LOGGER.debug("Drew %d ticks for %s", len(ticks), self._config)

    def _draw_label(self, tick: RenderedTick) -> None:
        bounds = self.canvas.text_bounds(tick.label, self.font)
        position = label_position(tick, self._config.width, bounds)
        self.canvas.draw_text(tick.label, position, self.font, self.color)

    def _update_ticks(self) -> None:
        value_range = self._config.value_range
        self.tick_source.set_range(value_range.start, value_range.end, self._config.height)
