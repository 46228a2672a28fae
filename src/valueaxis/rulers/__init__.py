from .range import AxisConfig, ValueRange

__all__ = ['AxisConfig', 'ValueRange']
