"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, Dict, List
from datetime import datetime, timedelta, timezone

from pine_app.data.models import PriceBar
from pine_app.engine import ScriptEngine


@pytest.fixture
def five_bar_records() -> List[Dict[str, Any]]:
    """Five daily bars with closes 10, 20, 30, 40, 50."""
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return [
        {
            "time": start + timedelta(days=i),
            "open": close - 1.0,
            "high": close + 2.0,
            "low": close - 2.0,
            "close": close,
            "volume": 100.0 * (i + 1),
        }
        for i, close in enumerate([10.0, 20.0, 30.0, 40.0, 50.0])
    ]


@pytest.fixture
def five_bars(five_bar_records: List[Dict[str, Any]]) -> List[PriceBar]:
    """The five sample bars as PriceBar objects."""
    return [PriceBar(**record) for record in five_bar_records]


@pytest.fixture
def engine(tmp_path) -> ScriptEngine:
    """Engine isolated from any engine.yaml in the working tree."""
    return ScriptEngine(config_dir=tmp_path)


@pytest.fixture
def sample_script() -> str:
    """Script exercising every statement kind."""
    return "\n".join([
        "//@version=5",
        "// Moving average crossover",
        'indicator("MA Cross", overlay=true)',
        "input.length = 3, 2|3|4",
        "fast = ta.ema(close, 2)",
        "slow = ta.sma(close, length)",
        "method spread(a, b:float) => a - b",
        'plot(fast, color=color.blue, title="Fast")',
        'plot(slow, color=color.red, title="Slow")',
        "",
    ])
