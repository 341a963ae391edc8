"""
Operator rules over the runtime value union.

Scalars combine directly. A Series combined with a scalar broadcasts the
scalar; two Series are aligned on their last elements, since every derived
series ends on the final bar and only differs in warm-up length. Combinations
that are not listed here raise UnsupportedOperandError rather than being
coerced.
"""

import math
import operator as op
from collections.abc import Callable, Sequence
from typing import Any

from ..errors import UnknownOperatorError, UnsupportedOperandError
from .values import Color, Series, Value, type_name


def _fmod(a: float, b: float) -> float:
    return math.fmod(a, b)


def _power(a: float, b: float) -> float:
    result = a ** b
    if isinstance(result, complex):
        raise ValueError(f"{a} ^ {b} has no real value")
    return result


ARITHMETIC: dict[str, Callable[[Any, Any], Any]] = {
    "+": op.add,
    "-": op.sub,
    "*": op.mul,
    "/": op.truediv,
    "%": _fmod,
    "^": _power,
}

COMPARISON: dict[str, Callable[[Any, Any], bool]] = {
    ">": op.gt,
    "<": op.lt,
    ">=": op.ge,
    "<=": op.le,
    "==": op.eq,
    "!=": op.ne,
}

LOGICAL = ("and", "or", "not")


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_truthy(value: float) -> bool:
    return value != 0 and not math.isnan(value)


def apply_operator(token: str, operands: Sequence[Value]) -> Value:
    """
    Apply an operator to already evaluated operands.

    Raises:
        UnknownOperatorError: If the token is not a known operator
        UnsupportedOperandError: If the operand kinds do not combine
    """
    if token == "not":
        _expect_arity(token, operands, 1)
        return _apply_not(operands[0])

    if token in ARITHMETIC:
        _expect_arity(token, operands, 2)
        return _apply_arithmetic(token, operands[0], operands[1])

    if token in COMPARISON:
        _expect_arity(token, operands, 2)
        return _apply_comparison(token, operands[0], operands[1])

    if token in LOGICAL:
        _expect_arity(token, operands, 2)
        return _apply_logical(token, operands[0], operands[1])

    raise UnknownOperatorError(f"Unknown operator: {token}", token=token)


def _expect_arity(token: str, operands: Sequence[Value], count: int) -> None:
    if len(operands) != count:
        raise UnsupportedOperandError(
            f"Operator '{token}' takes {count} operand(s), got {len(operands)}",
            operator=token,
            operand_types=[type_name(v) for v in operands],
        )


def _unsupported(token: str, *operands: Value) -> UnsupportedOperandError:
    kinds = [type_name(v) for v in operands]
    return UnsupportedOperandError(
        f"Operator '{token}' does not support {' and '.join(kinds)}",
        operator=token,
        operand_types=kinds,
    )


def _apply_arithmetic(token: str, left: Value, right: Value) -> Value:
    fn = ARITHMETIC[token]

    if isinstance(left, Series) or isinstance(right, Series):
        if not _series_operand(left) or not _series_operand(right):
            raise _unsupported(token, left, right)
        return _elementwise(lambda a, b: _safe_arithmetic(fn, a, b), left, right)

    if token == "+" and isinstance(left, str) and isinstance(right, str):
        return left + right

    if not is_number(left) or not is_number(right):
        raise _unsupported(token, left, right)

    if token in ("/", "%") and right == 0:
        raise UnsupportedOperandError(
            f"Operator '{token}' by zero",
            operator=token,
            operand_types=[type_name(left), type_name(right)],
        )

    try:
        result = fn(left, right)
    except ZeroDivisionError as e:
        raise UnsupportedOperandError(
            f"Operator '{token}' undefined for {left!r} and {right!r}",
            operator=token,
            operand_types=[type_name(left), type_name(right)],
        ) from e
    except (ValueError, OverflowError):
        return math.nan
    if token == "%" and isinstance(left, int) and isinstance(right, int):
        return int(result)
    return result


def _safe_arithmetic(fn: Callable[[Any, Any], Any], a: float, b: float) -> float:
    """Elementwise arithmetic; undefined results become NaN."""
    try:
        return float(fn(a, b))
    except (ZeroDivisionError, ValueError, OverflowError):
        return math.nan


def _apply_comparison(token: str, left: Value, right: Value) -> Value:
    fn = COMPARISON[token]

    if isinstance(left, Series) or isinstance(right, Series):
        if not _series_operand(left) or not _series_operand(right):
            raise _unsupported(token, left, right)
        return _elementwise(lambda a, b: 1.0 if fn(a, b) else 0.0, left, right)

    if is_number(left) and is_number(right):
        return fn(left, right)

    if token in ("==", "!="):
        if isinstance(left, Color) and isinstance(right, Color):
            return fn(left.value, right.value)
        if type_name(left) == type_name(right):
            return fn(left, right)

    raise _unsupported(token, left, right)


def _apply_logical(token: str, left: Value, right: Value) -> Value:
    if isinstance(left, bool) and isinstance(right, bool):
        return (left and right) if token == "and" else (left or right)

    if isinstance(left, Series) or isinstance(right, Series):
        if not _logical_operand(left) or not _logical_operand(right):
            raise _unsupported(token, left, right)
        left, right = _as_flags(left), _as_flags(right)
        want_both = token == "and"

        def combine(a: float, b: float) -> float:
            if want_both:
                return 1.0 if is_truthy(a) and is_truthy(b) else 0.0
            return 1.0 if is_truthy(a) or is_truthy(b) else 0.0

        return _elementwise(combine, left, right)

    raise _unsupported(token, left, right)


def _apply_not(value: Value) -> Value:
    if isinstance(value, bool):
        return not value
    if isinstance(value, Series):
        return Series(value.times, tuple(0.0 if is_truthy(v) else 1.0 for v in value.values))
    raise _unsupported("not", value)


def _series_operand(value: Value) -> bool:
    return isinstance(value, Series) or is_number(value)


def _logical_operand(value: Value) -> bool:
    return isinstance(value, (Series, bool))


def _as_flags(value: Value) -> Value:
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    return value


def _elementwise(fn: Callable[[float, float], float], left: Value, right: Value) -> Series:
    """Combine series/scalar operands element by element."""
    if isinstance(left, Series) and isinstance(right, Series):
        count = min(len(left), len(right))
        shorter = left if len(left) <= len(right) else right
        left, right = left.tail(count), right.tail(count)
        times = shorter.tail(count).times
        values = tuple(fn(a, b) for a, b in zip(left.values, right.values))
        return Series(times, values)

    if isinstance(left, Series):
        return Series(left.times, tuple(fn(a, right) for a in left.values))

    return Series(right.times, tuple(fn(left, b) for b in right.values))
