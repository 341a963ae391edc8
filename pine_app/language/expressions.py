"""
Single-line expression parser.

Expressions are matched by shape rather than tokenized: a function call is
tried first, then the text is split on the first operator from a fixed list
that occurs anywhere in it, then a known name becomes a variable reference,
and anything else falls back to literal inference.

The operator split is purely textual. There is no precedence and no
associativity: ``a >= b`` splits on ``>`` because ``>`` is listed before
``>=``, and ``a * b + c`` splits on ``+``. Scripts written against the
existing chart tool rely on exactly this behaviour.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Optional

from .catalog import BUILTIN_VARIABLE_NAMES, COLOR_MAP
from .inference import infer_type, is_color_token, is_number, is_quoted, parse_value
from .nodes import Expression, FunctionCall, Literal, Operator, VariableRef


OPERATORS = (
    "+", "-", "*", "/", "%", "^",
    ">", "<", ">=", "<=", "==", "!=",
    "and", "or", "not",
)
UNARY_OPERATORS = frozenset({"not"})

_CALL = re.compile(r"(\w+\.?\w*)\s*\((.*)\)", re.DOTALL)


def split_arguments(text: str) -> list[str]:
    """Split on commas outside parentheses and string quotes."""
    if not text.strip():
        return []

    parts = []
    depth = 0
    in_string = False
    current = []

    for char in text:
        if char == '"':
            in_string = not in_string
        elif not in_string:
            if char == "(":
                depth += 1
            elif char == ")":
                depth = max(depth - 1, 0)
            elif char == "," and depth == 0:
                parts.append("".join(current).strip())
                current = []
                continue
        current.append(char)

    parts.append("".join(current).strip())
    return parts


def _strip_group(text: str) -> str:
    """Remove parentheses that wrap the whole text."""
    while text.startswith("(") and text.endswith(")"):
        depth = 0
        for i, char in enumerate(text):
            if char == "(":
                depth += 1
            elif char == ")":
                depth -= 1
                if depth == 0 and i != len(text) - 1:
                    return text
        text = text[1:-1].strip()
    return text


class ExpressionParser:
    """Parses expression text against a set of names known so far."""

    def __init__(self, known_names: Iterable[str] = (),
                 palette: Optional[Mapping[str, str]] = None):
        self.known_names = set(BUILTIN_VARIABLE_NAMES) | set(known_names)
        self.palette = palette if palette is not None else COLOR_MAP

    def declare(self, name: str) -> None:
        """Make a later reference to ``name`` parse as a variable."""
        self.known_names.add(name)

    def with_names(self, names: Iterable[str]) -> "ExpressionParser":
        """Child parser that also knows ``names`` (function parameters)."""
        return ExpressionParser(self.known_names | set(names), self.palette)

    def parse(self, text: str) -> Expression:
        text = _strip_group(text.strip())

        literal = self._parse_complete_literal(text)
        if literal is not None:
            return literal

        if "(" in text:
            match = _CALL.search(text)
            if match:
                return FunctionCall(
                    name=match.group(1),
                    args=tuple(self.parse(arg) for arg in split_arguments(match.group(2))),
                )

        for token in OPERATORS:
            index = text.find(token)
            if index < 0:
                continue
            left = text[:index].strip()
            right = text[index + len(token):].strip()
            if token in UNARY_OPERATORS:
                return Operator(token, (self.parse(right),))
            if not left and token in ("-", "+"):
                # Leading sign: 0 - x
                return Operator(token, (Literal(0, infer_type("0")), self.parse(right)))
            return Operator(token, (self.parse(left), self.parse(right)))

        if text in self.known_names:
            return VariableRef(text)

        return Literal(parse_value(text, self.palette), infer_type(text))

    def _parse_complete_literal(self, text: str) -> Optional[Literal]:
        """Literal when the whole text is one number, bool, string or color."""
        if is_number(text) or text in ("true", "false") or is_color_token(text):
            return Literal(parse_value(text, self.palette), infer_type(text))
        if is_quoted(text) and '"' not in text[1:-1]:
            return Literal(parse_value(text, self.palette), infer_type(text))
        return None
