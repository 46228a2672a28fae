from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class ValueRange:
    """Closed value interval [start, end], always with start <= end."""

    start: float = -1.0
    end: float = 1.0

    @classmethod
    def normalized(cls, start: float, end: float) -> "ValueRange":
        """Create range from two bounds given in any order."""
        if start > end:
            start, end = end, start
        return cls(float(start), float(end))

    @property
    def span(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class AxisConfig:
    """Pixel size and value range of a vertical value axis."""

    width: int = 20
    height: int = 20
    value_range: ValueRange = field(default_factory=ValueRange)

    def with_size(self, width: int, height: int) -> "AxisConfig":
        """Return config with new pixel dimensions and the same range."""
        return replace(self, width=width, height=height)

    def with_range(self, start: float, end: float) -> "AxisConfig":
        """Return config with a new (normalized) value range and the same size."""
        return replace(self, value_range=ValueRange.normalized(start, end))

    @property
    def pixels_per_unit(self) -> float:
        """Pixels per value unit. Zero when the range has no width."""
        span = self.value_range.span
        if span == 0:
            return 0.0
        return self.height / span

    def value_to_pixel(self, value: float) -> int:
        """Convert value to vertical pixel position. Value 0 sits at the centre, larger values move up."""
        offset = int(value * self.pixels_per_unit)
        return self.height // 2 - offset
