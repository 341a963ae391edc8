#!/usr/bin/env python3
"""
Basic Usage Example - Pine App Indicator Script Engine

This script demonstrates the basic usage of the script engine with a small
generated price series. It shows how to:
- Initialize the engine
- Parse and evaluate an indicator script
- Keep indicators in the registry between runs
- Handle evaluation errors

Run: python examples/basic_usage.py
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List

from pine_app.engine import ScriptEngine
from pine_app.errors import ScriptEvaluationError


SCRIPT = """
//@version=5
indicator("Moving Averages", overlay=true)
input.length = 5, 5|10|20
fast = ta.ema(close, 3)
slow = ta.sma(close, length)
plot(fast, color=color.blue, title="EMA 3")
plot(slow, color=color.orange, title="SMA")
plot(fast - slow, color=#888888, title="Spread")
"""


def create_price_bars(count: int = 30) -> List[Dict[str, Any]]:
    """Create a gently oscillating hourly price series."""
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    bars = []
    price = 100.0
    for i in range(count):
        close = price + 2.0 * math.sin(i / 3.0)
        bars.append({
            "time": start + timedelta(hours=i),
            "open": price,
            "high": max(price, close) + 0.5,
            "low": min(price, close) - 0.5,
            "close": close,
            "volume": 1000.0 + 10 * i,
        })
        price = close
    return bars


def print_indicator(indicator) -> None:
    """Print a short summary of one indicator."""
    print(f"📈 {indicator.name} ({indicator.color}, overlay={indicator.overlay})")
    print(f"   Points: {len(indicator.data)}")
    for point in indicator.data[-3:]:
        print(f"   {point.time}: {point.value:.4f}")


def main():
    """Main demonstration function."""
    print("🚀 Pine App Script Engine - Basic Usage Demo")
    print("=" * 60)

    print("1. Initializing the script engine...")
    engine = ScriptEngine()
    print()

    print("2. Evaluating the moving average script...")
    bars = create_price_bars()
    indicators = engine.parse_script(SCRIPT, bars)
    for indicator in indicators:
        print_indicator(indicator)
        engine.add_indicator(indicator)
    print()

    print("3. Re-running with a longer SMA input...")
    engine.clear_indicators()
    for indicator in engine.parse_script(SCRIPT, bars, inputs={"length": 10}):
        engine.add_indicator(indicator)
    print(f"   Registry holds: {[i.name for i in engine.get_indicators()]}")
    print()

    print("4. Evaluating a script with an unknown variable...")
    try:
        engine.parse_script('plot(foo, color=color.red, title="Broken")', bars)
    except ScriptEvaluationError as e:
        print(f"   ❌ {e.kind}: {e}")
    print()

    print("✅ Demo completed successfully!")


if __name__ == "__main__":
    main()
