"""
Runtime value union for script evaluation.

A value produced by evaluation is one of: int, float, bool, str, Color or
Series. Scalars use the Python builtins; the two structured kinds are below.
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Color:
    """Color token with its resolved display value."""
    token: str
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Series:
    """Float vector with one time label per element."""
    times: tuple[Any, ...]
    values: tuple[float, ...]

    def __post_init__(self):
        if len(self.times) != len(self.values):
            raise ValueError(
                f"Series times and values differ in length: {len(self.times)} != {len(self.values)}"
            )

    def __len__(self) -> int:
        return len(self.values)

    def tail(self, count: int) -> "Series":
        """Last ``count`` elements."""
        if count >= len(self):
            return self
        start = len(self) - count
        return Series(self.times[start:], self.values[start:])

    def with_index_labels(self) -> "Series":
        """Same values labelled "0", "1", ... instead of bar times."""
        return Series(tuple(str(i) for i in range(len(self))), self.values)


Value = Union[int, float, bool, str, Color, Series]


def type_name(value: Any) -> str:
    """Short kind name used in error messages."""
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Color):
        return "color"
    if isinstance(value, Series):
        return "series"
    return type(value).__name__
