from typing import Literal, Optional
from PySide6.QtGui import QColor


ObjectColorName = Literal["surface-base", "tick-line"]


class ColorMap:

    # Neutral color level map for light & dark mode
    _neutral_levels: dict[str, list[QColor]] = {
        "neutral-0": [QColor(255, 255, 255), QColor(0, 0, 0)],
        "neutral-50": [QColor(246, 247, 249), QColor(20, 24, 31)],
    }

    # Half transparent so stacked tick levels blend
    _tick_line: list[QColor] = [QColor(96, 110, 128, 128), QColor(200, 200, 200, 128)]

    def __init__(self, darkmode: bool = True) -> None:
        """Create color map. darkmode=True for dark theme, False for light theme."""
        self.darkmode: bool = darkmode

    def get_object_color(self, name: ObjectColorName, darkmode: Optional[bool] = None) -> QColor:
        """Get UI color (surface background, tick line). Uses instance darkmode if not specified."""
        if name == "tick-line":
            return QColor(ColorMap._tick_line[self._mode_loc(darkmode)])
        surface_colors = {
            "surface-base": ["neutral-0", "neutral-50"],
        }
        return self._get_neutral_color(surface_colors[name][self._mode_loc(darkmode)], darkmode)

    def _get_neutral_color(self, level: str, darkmode: Optional[bool] = None) -> QColor:
        return QColor(ColorMap._neutral_levels[level][self._mode_loc(darkmode)])

    def _mode_loc(self, darkmode: Optional[bool]) -> int:
        if darkmode is None:
            darkmode = self.darkmode
        return 1 if darkmode else 0
