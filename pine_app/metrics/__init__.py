"""Moving average calculations backing the ta.* built-ins"""

from .moving_average import calculate_ema, calculate_sma

__all__ = [
    "calculate_sma",
    "calculate_ema",
]
