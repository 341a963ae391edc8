"""
Price series parsers for converting caller records to PriceBar objects.

Callers usually hold bars as mappings ({time, open, high, low, close,
volume?}), the same shape a charting frontend keeps. This module converts them
into PriceBar instances with numeric type conversion and basic validation.
"""

import math
from collections.abc import Iterable, Mapping
from typing import Any, Union

from ..errors import MalformedDataError, MissingDataError
from .models import PriceBar


REQUIRED_FIELDS = ("time", "open", "high", "low", "close")
PRICE_FIELDS = ("open", "high", "low", "close")


def parse_price_bars(records: Iterable[Union[PriceBar, Mapping[str, Any]]]) -> list[PriceBar]:
    """
    Convert a sequence of bar records into PriceBar objects.

    Args:
        records: PriceBar instances or mappings with time/open/high/low/close
            and an optional volume

    Returns:
        List of PriceBar in input order

    Raises:
        MissingDataError: If a required field is absent
        MalformedDataError: If a price is not a finite number, or bar times
            decrease
    """
    bars = []

    for i, record in enumerate(records):
        bar = record if isinstance(record, PriceBar) else _parse_single_bar(record, i)

        if bars and _is_before(bar.time, bars[-1].time):
            raise MalformedDataError(
                f"Bar times must be non-decreasing: bar {i} at {bar.time!r} "
                f"follows {bars[-1].time!r}",
                context={"index": i},
            )

        bars.append(bar)

    return bars


def _parse_single_bar(record: Mapping[str, Any], index: int) -> PriceBar:
    """Parse one mapping into a PriceBar."""
    if not isinstance(record, Mapping):
        raise MalformedDataError(
            f"Bar {index} must be a mapping, got {type(record).__name__}",
            raw_data=repr(record),
            expected_format="mapping",
        )

    missing = [name for name in REQUIRED_FIELDS if record.get(name) is None]
    if missing:
        raise MissingDataError(
            f"Bar {index} is missing fields: {', '.join(missing)}",
            data_type="bar",
            missing_fields=missing,
            context={"index": index},
        )

    prices = {name: _parse_number(record[name], name, index) for name in PRICE_FIELDS}

    volume = record.get("volume")
    if volume is not None:
        volume = _parse_number(volume, "volume", index)

    return PriceBar(time=record["time"], volume=volume, **prices)


def _parse_number(raw: Any, field_name: str, index: int) -> float:
    """Parse a numeric bar field, rejecting bools and non-finite values."""
    if isinstance(raw, bool):
        raise MalformedDataError(
            f"Invalid {field_name} at bar {index}: {raw!r}",
            raw_data=repr(raw),
            expected_format="number",
        )

    try:
        value = float(raw)
    except (TypeError, ValueError) as e:
        raise MalformedDataError(
            f"Invalid {field_name} at bar {index}: {e}",
            raw_data=repr(raw),
            expected_format="number",
        ) from e

    if not math.isfinite(value):
        raise MalformedDataError(
            f"Non-finite {field_name} at bar {index}: {value}",
            raw_data=repr(raw),
            expected_format="finite number",
        )

    return value


def _is_before(current: Any, previous: Any) -> bool:
    """Ordering check that tolerates time labels that do not compare."""
    try:
        return bool(current < previous)
    except TypeError:
        return False
