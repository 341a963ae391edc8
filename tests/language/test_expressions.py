"""Tests for the expression parser."""

import pytest

from pine_app.language.catalog import ValueType
from pine_app.language.expressions import ExpressionParser, split_arguments
from pine_app.language.nodes import FunctionCall, Literal, Operator, VariableRef
from pine_app.runtime.values import Color


@pytest.fixture
def parser() -> ExpressionParser:
    return ExpressionParser(known_names={"fast", "slow"})


class TestSplitArguments:
    """Test top-level argument splitting."""

    def test_simple(self):
        assert split_arguments("close, 3") == ["close", "3"]

    def test_nested_call(self):
        assert split_arguments("ta.ema(close, 5), 3") == ["ta.ema(close, 5)", "3"]

    def test_comma_in_string(self):
        assert split_arguments('"a, b", 1') == ['"a, b"', "1"]

    def test_empty(self):
        assert split_arguments("   ") == []


class TestFunctionCalls:
    """Test function-call matching."""

    def test_builtin_call(self, parser):
        expr = parser.parse("ta.sma(close, 3)")
        assert expr == FunctionCall(
            name="ta.sma",
            args=(VariableRef("close"), Literal(3, ValueType.INT)),
        )

    def test_nested_call(self, parser):
        expr = parser.parse("ta.sma(ta.ema(close, 5), 3)")
        assert isinstance(expr, FunctionCall)
        assert expr.args[0] == FunctionCall(
            name="ta.ema",
            args=(VariableRef("close"), Literal(5, ValueType.INT)),
        )

    def test_call_wins_over_operators(self, parser):
        """Text containing a call is a call even with a trailing operator."""
        expr = parser.parse("ta.sma(close, 3) + 1")
        assert isinstance(expr, FunctionCall)
        assert expr.name == "ta.sma"

    def test_call_without_arguments(self, parser):
        assert parser.parse("foo()") == FunctionCall(name="foo", args=())


class TestOperators:
    """Test the textual operator scan."""

    def test_binary_arithmetic(self, parser):
        expr = parser.parse("fast - slow")
        assert expr == Operator("-", (VariableRef("fast"), VariableRef("slow")))

    def test_first_listed_operator_wins(self, parser):
        """'+' is listed before '*', so it splits first regardless of position."""
        expr = parser.parse("fast * 2 + slow")
        assert expr.token == "+"
        assert expr.operands[0] == Operator(
            "*", (VariableRef("fast"), Literal(2, ValueType.INT))
        )
        assert expr.operands[1] == VariableRef("slow")

    def test_greater_equal_splits_on_greater(self, parser):
        """'>' is listed before '>=' and therefore matches first."""
        expr = parser.parse("fast >= slow")
        assert expr.token == ">"
        assert expr.operands[0] == VariableRef("fast")
        assert expr.operands[1] == Literal("= slow", ValueType.SERIES)

    def test_split_at_first_occurrence(self, parser):
        expr = parser.parse("1 - 2 - 3")
        assert expr.token == "-"
        assert expr.operands[0] == Literal(1, ValueType.INT)
        assert expr.operands[1] == Operator(
            "-", (Literal(2, ValueType.INT), Literal(3, ValueType.INT))
        )

    def test_binary_operator_has_two_operands(self, parser):
        expr = parser.parse("fast / slow")
        assert len(expr.operands) == 2

    def test_not_has_one_operand(self, parser):
        expr = parser.parse("not true")
        assert expr == Operator("not", (Literal(True, ValueType.BOOL),))

    def test_logical_and(self, parser):
        expr = parser.parse("true and false")
        assert expr == Operator(
            "and", (Literal(True, ValueType.BOOL), Literal(False, ValueType.BOOL))
        )

    def test_leading_minus(self, parser):
        expr = parser.parse("-fast")
        assert expr == Operator("-", (Literal(0, ValueType.INT), VariableRef("fast")))

    def test_wrapping_parentheses_removed(self, parser):
        assert parser.parse("(fast + slow)") == parser.parse("fast + slow")


class TestLiteralsAndVariables:
    """Test variable references and literal fallback."""

    def test_builtin_variable(self, parser):
        assert parser.parse("close") == VariableRef("close")

    def test_declared_variable(self, parser):
        assert parser.parse("fast") == VariableRef("fast")

    def test_declare_makes_name_known(self, parser):
        assert parser.parse("signal") == Literal("signal", ValueType.SERIES)
        parser.declare("signal")
        assert parser.parse("signal") == VariableRef("signal")

    def test_negative_number_is_literal(self, parser):
        assert parser.parse("-2.5") == Literal(-2.5, ValueType.FLOAT)

    def test_string_literal(self, parser):
        assert parser.parse('"a-b"') == Literal("a-b", ValueType.STRING)

    def test_color_literal_resolved(self, parser):
        expr = parser.parse("color.green")
        assert expr == Literal(Color("color.green", "#2ECC40"), ValueType.COLOR)

    def test_unknown_name_is_series_literal(self, parser):
        assert parser.parse("foo") == Literal("foo", ValueType.SERIES)
