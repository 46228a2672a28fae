import logging
from enum import Enum
from typing import List

import numpy as np

LOGGER = logging.getLogger(__name__)

# Steps of one second and more used by TickStepType.TIME, up to one day.
_TIME_STEPS = [1, 5, 10, 30, 60, 300, 600, 1800, 3600, 10800, 21600, 43200, 86400]
_DAY = 86400


class TickStepType(Enum):
    GENERIC = "generic"
    TIME = "time"


class GraphTicks:
    """Generates ticks at multiple levels of detail for a value range.

    Every candidate step gets a strength from the pixel distance between its ticks:
    0 at ``min_tick_spacing`` or less, 1 at ``max_tick_spacing`` or more. Level 0 is
    the finest step that is fully strong, followed by finer steps that are still
    visible, in decreasing strength.
    """

    def __init__(self, step_type: TickStepType = TickStepType.GENERIC, min_tick_spacing: float = 5.0, max_tick_spacing: float = 30.0) -> None:
        if not isinstance(step_type, TickStepType):
            raise ValueError(f"Invalid step type {step_type!r}. Use TickStepType.GENERIC or TickStepType.TIME.")
        self.step_type: TickStepType = step_type
        self.min_tick_spacing: float = min_tick_spacing
        self.max_tick_spacing: float = max_tick_spacing
        self.start: float = 0.0
        self.end: float = 0.0
        self.pixel_extent: float = 0.0
        self._steps: List[float] = []
        self._strengths: List[float] = []

    def set_range(self, start: float, end: float, pixel_extent: float) -> None:
        """Configure the value range and the number of pixels it is drawn over."""
        if start > end:
            start, end = end, start
        self.start = float(start)
        self.end = float(end)
        self.pixel_extent = float(pixel_extent)
        self._steps = []
        self._strengths = []

        span = self.end - self.start
        if span <= 0 or self.pixel_extent <= 0:
            LOGGER.debug("No tick levels for range [%s, %s] over %s px", self.start, self.end, self.pixel_extent)
            return

        visible = []
        for step in self._candidate_steps(span):
            strength = self._strength(self.pixel_extent * step / span)
            if strength > 0:
                visible.append((step, strength))
            if strength >= 1:
                break

        # Strongest (coarsest) first
        for step, strength in reversed(visible):
            self._steps.append(step)
            self._strengths.append(strength)
        LOGGER.debug("Tick levels for range [%s, %s] over %s px: %s", self.start, self.end, self.pixel_extent, self._steps)

    def level_count(self) -> int:
        return len(self._steps)

    def strength_at(self, level: int) -> float:
        return self._strengths[level]

    def step_at(self, level: int) -> float:
        return self._steps[level]

    def ticks_at(self, level: int) -> List[float]:
        """Tick values of a level inside the range, without ticks of stronger levels."""
        step = self._steps[level]
        first = np.ceil(self.start / step - 1e-9)
        last = np.floor(self.end / step + 1e-9)
        ticks = np.arange(first, last + 1) * step

        keep = np.ones(len(ticks), dtype=bool)
        for stronger in self._steps[:level]:
            ratio = ticks / stronger
            keep &= np.abs(ratio - np.round(ratio)) > 1e-6
        # Adding 0.0 turns -0.0 into 0.0
        return [float(t) for t in np.round(ticks[keep], 12) + 0.0]

    def _strength(self, spacing: float) -> float:
        if self.max_tick_spacing <= self.min_tick_spacing:
            return 1.0 if spacing >= self.max_tick_spacing else 0.0
        ratio = (spacing - self.min_tick_spacing) / (self.max_tick_spacing - self.min_tick_spacing)
        return float(min(1.0, max(0.0, ratio)))

    def _candidate_steps(self, span: float) -> List[float]:
        """Ascending step sizes from the finest one that could be visible up to one covering the whole span."""
        # Never closer than one pixel
        smallest = max(self.min_tick_spacing, 1.0) * span / self.pixel_extent
        low = int(np.floor(np.log10(smallest))) - 1
        high = int(np.ceil(np.log10(span))) + 1
        generic = [float(f"{base}e{exp}") for exp in range(low, high + 1) for base in (1, 5)]

        if self.step_type == TickStepType.GENERIC:
            steps = generic
        else:
            steps = [s for s in generic if s < 1]
            steps += [float(s) for s in _TIME_STEPS]
            day_low = int(np.floor(np.log10(smallest / _DAY))) - 1
            day_high = int(np.ceil(np.log10(span / _DAY))) + 1
            days = [float(f"{base}e{exp}") for exp in range(day_low, day_high + 1) for base in (1, 5)]
            steps += [float(_DAY * d) for d in days if d > 1]
        return [s for s in steps if s >= smallest * 0.999] or [steps[-1]]
