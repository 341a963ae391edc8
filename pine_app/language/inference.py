"""
Value and type inference for raw script tokens.

Used for declaration values, input defaults, option lists, plot colors and as
the fallback classification inside expression parsing.
"""

import re
from collections.abc import Mapping
from typing import Any, Optional

from ..runtime.values import Color
from .catalog import COLOR_MAP, ValueType


COLOR_PREFIX = "color."

_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{3,8}$")
_COLOR_TOKEN = re.compile(r"^color\.\w+$")


def is_number(text: str) -> bool:
    return bool(_NUMBER.match(text.strip()))


def is_quoted(text: str) -> bool:
    return len(text) >= 2 and text.startswith('"') and text.endswith('"')


def is_color_token(text: str) -> bool:
    """Whole text is one named color token or a hex color code."""
    return bool(_COLOR_TOKEN.match(text) or _HEX_COLOR.match(text))


def parse_number(text: str) -> int | float:
    """Integer when the number has no fractional part, float otherwise."""
    value = float(text)
    if value.is_integer():
        return int(value)
    return value


def infer_type(text: str) -> ValueType:
    """
    Decide the value type of a raw token from its textual form.

    Numbers are int when integral, float otherwise; true/false are bool;
    double-quoted text is a string; ``color.`` tokens and hex codes are
    colors; anything else is treated as a series reference.
    """
    text = text.strip()

    if is_number(text):
        return ValueType.INT if isinstance(parse_number(text), int) else ValueType.FLOAT
    if text in ("true", "false"):
        return ValueType.BOOL
    if is_quoted(text):
        return ValueType.STRING
    if text.startswith(COLOR_PREFIX) or is_color_token(text):
        return ValueType.COLOR
    return ValueType.SERIES


def parse_value(text: str, palette: Optional[Mapping[str, str]] = None) -> Any:
    """
    Parse a raw token into its literal value.

    Non-literal tokens come back as their trimmed text.
    """
    text = text.strip()

    if is_number(text):
        return parse_number(text)
    if text in ("true", "false"):
        return text == "true"
    if is_quoted(text):
        return text[1:-1]
    if is_color_token(text):
        return Color(token=text, value=parse_color(text, palette))
    return text


def parse_color(text: str, palette: Optional[Mapping[str, str]] = None) -> str:
    """Resolve a color token to its display value; unknown tokens pass through."""
    text = text.strip()
    return (palette if palette is not None else COLOR_MAP).get(text, text)
