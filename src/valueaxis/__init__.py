"""Vertical value axis for graph and timeline views."""

from .colors.modes import ColorMap
from .rulers import AxisConfig, ValueRange
from .ticks import DetailLevel, GraphTicks, TickSource, TickStepType
from .renderers import RenderedTick, build_ticks, format_time
from .widgets import GraphValues

__all__ = [
    "ColorMap",
    "AxisConfig",
    "ValueRange",
    "DetailLevel",
    "GraphTicks",
    "TickSource",
    "TickStepType",
    "RenderedTick",
    "build_ticks",
    "format_time",
    "GraphValues",
]
