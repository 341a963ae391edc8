"""SMA (Simple Moving Average) and EMA (Exponential Moving Average) calculations"""

from collections.abc import Sequence


def calculate_sma(source: Sequence[float], length: int) -> list[float]:
    """
    Calculate Simple Moving Average over trailing windows

    SMA[k] = mean(source[k .. k + length - 1])

    The first ``length - 1`` inputs only warm the window up, so the output
    has ``len(source) - length + 1`` values (none when the source is shorter
    than the window).

    Args:
        source: Values in chronological order
        length: Window length, must be positive

    Returns:
        SMA values, one per complete window
    """
    if length <= 0:
        raise ValueError(f"SMA length must be positive, got {length}")

    result = []
    for i in range(length - 1, len(source)):
        window = source[i - length + 1:i + 1]
        result.append(sum(window) / length)

    return result


def calculate_ema(source: Sequence[float], length: int) -> list[float]:
    """
    Calculate Exponential Moving Average seeded with the first value

    multiplier = 2 / (length + 1)
    EMA[0] = source[0]
    EMA[i] = (source[i] - EMA[i-1]) * multiplier + EMA[i-1]

    Args:
        source: Values in chronological order
        length: Smoothing length, must be positive

    Returns:
        EMA values, same length as the source
    """
    if length <= 0:
        raise ValueError(f"EMA length must be positive, got {length}")

    if not source:
        return []

    multiplier = 2 / (length + 1)
    ema = source[0]
    result = [ema]

    for value in source[1:]:
        ema = (value - ema) * multiplier + ema
        result.append(ema)

    return result
