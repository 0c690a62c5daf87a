"""Entity records for composite (multi-band) knobs."""
from dataclasses import dataclass, field
from typing import Callable

from models.geometry import Range


@dataclass
class Entity:
    """One band of a composite knob.

    range and current_value are read from the owning engine on every access,
    so a dependent band reflects commits made to the bands it depends on.

    Attributes:
        id: Band name ('year', 'month', 'day')
        ring_radius: Radius of the band's ring in pixels
        commit: Writes a new value for this band
        read_range: Returns the band's valid range right now
        read_value: Returns the value the band shows right now
    """
    id: str
    ring_radius: float
    commit: Callable[[int], None]
    read_range: Callable[[], Range] = field(repr=False)
    read_value: Callable[[], int] = field(repr=False)

    @property
    def range(self) -> Range:
        return self.read_range()

    @property
    def current_value(self) -> int:
        return self.read_value()
