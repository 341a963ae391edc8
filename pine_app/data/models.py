"""
Canonical data models for price input and indicator output.

PriceBar is what callers hand to the engine; IndicatorDescriptor is what a
script run hands back. Both are immutable once built.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class PriceBar:
    """Single OHLC(V) price record. ``time`` is opaque but must be orderable."""
    time: Any
    open: float
    high: float
    low: float
    close: float
    volume: Optional[float] = None


@dataclass(frozen=True)
class LinePoint:
    """One (time, value) point of a line indicator."""
    time: Any
    value: float

    def to_dict(self) -> dict[str, Any]:
        return {"time": self.time, "value": self.value}


@dataclass(frozen=True)
class IndicatorDescriptor:
    """Named, colored, time-ordered value sequence produced by a plot."""
    name: str
    data: tuple[LinePoint, ...]
    color: str
    overlay: bool = True
    kind: str = "line"

    @property
    def times(self) -> list[Any]:
        """Time labels in point order."""
        return [point.time for point in self.data]

    @property
    def values(self) -> list[float]:
        """Values in point order."""
        return [point.value for point in self.data]

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping in the shape chart collaborators consume."""
        return {
            "name": self.name,
            "type": self.kind,
            "data": [point.to_dict() for point in self.data],
            "color": self.color,
            "overlay": self.overlay,
        }
