from dataclasses import dataclass
from typing import List, Protocol, Sequence, Tuple


class TickSource(Protocol):
    """What the value axis needs from a tick generator.

    All queries describe the state set by the last ``set_range`` call. Level 0 is
    the most important level, higher indices are progressively fainter.
    """

    def set_range(self, start: float, end: float, pixel_extent: float) -> None: ...

    def level_count(self) -> int: ...

    def ticks_at(self, level: int) -> Sequence[float]: ...

    def strength_at(self, level: int) -> float: ...


@dataclass(frozen=True)
class DetailLevel:
    """Tick values sharing one visual weight."""

    ticks: Tuple[float, ...]
    strength: float


def tick_levels(source: TickSource) -> List[DetailLevel]:
    """Read all levels currently exposed by a tick source, most important first."""
    return [
        DetailLevel(tuple(float(t) for t in source.ticks_at(i)), float(source.strength_at(i)))
        for i in range(source.level_count())
    ]
