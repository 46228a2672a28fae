from dataclasses import dataclass
from datetime import timedelta
from typing import List, Optional, Sequence, Tuple

from PySide6.QtGui import QColor

from valueaxis.rulers.range import AxisConfig
from valueaxis.ticks.source import DetailLevel

LABEL_PADDING = 3  # Keeps text below a tick from touching its line


@dataclass(frozen=True)
class RenderedTick:
    y: int
    line_length: int
    color: QColor
    value: float
    label: Optional[str] = None


def display_as_minutes(value_per_tick: float) -> bool:
    """True when the whole-minutes component of a duration of value_per_tick seconds is non-zero."""
    duration = timedelta(seconds=abs(value_per_tick))
    return (duration.seconds // 60) % 60 > 0


def format_time(seconds: float, minutes: bool) -> str:
    """Format seconds either as 'm:ss' or as decimal seconds with two digits."""
    seconds = seconds + 0.0
    if not minutes:
        return f"{seconds:.2f}"
    sign = "-" if seconds < 0 else ""
    whole_minutes, rest = divmod(int(abs(seconds)), 60)
    return f"{sign}{whole_minutes}:{rest:02d}"


def tick_color(base: QColor, strength: float) -> QColor:
    """Base color with its alpha scaled by strength."""
    color = QColor(base)
    color.setAlphaF(max(0.0, min(1.0, base.alphaF() * strength)))
    return color


def build_ticks(config: AxisConfig, levels: Sequence[DetailLevel], base_color: QColor) -> List[RenderedTick]:
    """Compute every tick to draw, in drawing order (least important level first).

    Only ticks of level 0 carry a label. The format of the labels depends on how much
    of the range a single tick of that level covers.
    """
    span = config.value_range.span
    rendered = []
    for index in range(len(levels) - 1, -1, -1):
        level = levels[index]
        if not level.ticks:
            continue

        value_per_tick = span / len(level.ticks)
        minutes = display_as_minutes(value_per_tick)
        # round() takes halves to the even neighbour
        line_length = int(round(config.width * level.strength))
        color = tick_color(base_color, level.strength)

        for value in level.ticks:
            label = format_time(value, minutes) if index == 0 else None
            rendered.append(RenderedTick(config.value_to_pixel(value), line_length, color, value, label))
    return rendered


def label_position(tick: RenderedTick, width: int, text_size: Tuple[int, int]) -> Tuple[int, int]:
    """Top-left corner of a tick label, right aligned to width.

    Labels of values at or below zero go above the line, the rest below it.
    """
    text_width, text_height = text_size
    x = width - text_width
    if tick.value <= 0:
        return x, tick.y - text_height
    return x, tick.y + LABEL_PADDING
