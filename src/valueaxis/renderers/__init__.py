from .values import RenderedTick, build_ticks, display_as_minutes, format_time, label_position, tick_color

__all__ = ['RenderedTick', 'build_ticks', 'display_as_minutes', 'format_time', 'label_position', 'tick_color']
