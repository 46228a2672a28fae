from .source import DetailLevel, TickSource, tick_levels
from .graph_ticks import GraphTicks, TickStepType

__all__ = ['DetailLevel', 'TickSource', 'tick_levels', 'GraphTicks', 'TickStepType']
