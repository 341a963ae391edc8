"""Tests for the statement classifier."""

import pytest

from pine_app.language.catalog import ValueType
from pine_app.language.classifier import StatementClassifier, classify
from pine_app.language.nodes import (
    ExpressionStatement,
    FuncDecl,
    FunctionCall,
    FunctionParam,
    IndicatorDecl,
    InputDecl,
    Literal,
    Operator,
    PlotStatement,
    VarDecl,
    VariableRef,
    VersionPragma,
)


@pytest.fixture
def classifier() -> StatementClassifier:
    return StatementClassifier()


class TestClassifyLine:
    """Test single-line classification."""

    def test_version_pragma(self, classifier):
        assert classifier.classify_line("//@version=5") == VersionPragma("5")

    def test_comment_produces_nothing(self, classifier):
        assert classifier.classify_line("// plain comment") is None

    def test_indicator_declaration(self, classifier):
        statement = classifier.classify_line('indicator("My Script", overlay=true)')
        assert statement == IndicatorDecl(name="My Script", overlay=True)

    def test_indicator_overlay_false(self, classifier):
        statement = classifier.classify_line('indicator("Osc", overlay=false)')
        assert statement.overlay is False

    def test_malformed_indicator_dropped(self, classifier):
        assert classifier.classify_line('indicator("No overlay")') is None

    def test_input_declaration(self, classifier):
        statement = classifier.classify_line("input.length = 14")
        assert statement == InputDecl(
            name="length", value_type=ValueType.INT, default=14, options=None
        )

    def test_input_with_options(self, classifier):
        statement = classifier.classify_line("input.length = 14, 7|14|21")
        assert statement.default == 14
        assert statement.options == (7, 14, 21)

    def test_input_quoted_default_with_comma(self, classifier):
        statement = classifier.classify_line('input.t = "a, b"')
        assert statement == InputDecl(
            name="t", value_type=ValueType.STRING, default="a, b", options=None
        )

    def test_input_quoted_default_with_options(self, classifier):
        statement = classifier.classify_line('input.t = "a, b", "a, b"|"c"')
        assert statement.default == "a, b"
        assert statement.options == ("a, b", "c")

    def test_input_without_default_dropped(self, classifier):
        assert classifier.classify_line("input.t = , 1|2") is None

    def test_variable_declaration(self, classifier):
        statement = classifier.classify_line("fast = ta.ema(close, 9)")
        assert statement == VarDecl(
            name="fast",
            value_type=ValueType.SERIES,
            value=FunctionCall(
                name="ta.ema",
                args=(VariableRef("close"), Literal(9, ValueType.INT)),
            ),
        )

    def test_variable_type_from_text(self, classifier):
        assert classifier.classify_line("threshold = 1.5").value_type == ValueType.FLOAT
        assert classifier.classify_line("enabled = true").value_type == ValueType.BOOL

    def test_equality_is_not_a_declaration(self, classifier):
        assert classifier.classify_line("a == b") is None

    def test_function_declaration(self, classifier):
        statement = classifier.classify_line("method spread(a, b:float) => a - b")
        assert statement == FuncDecl(
            name="spread",
            params=(
                FunctionParam("a", ValueType.SERIES),
                FunctionParam("b", ValueType.FLOAT),
            ),
            return_type=ValueType.SERIES,
            body=(ExpressionStatement(
                Operator("-", (VariableRef("a"), VariableRef("b")))
            ),),
        )

    def test_function_body_is_single_statement(self, classifier):
        statement = classifier.classify_line("method one() => 1")
        assert statement.params == ()
        assert len(statement.body) == 1
        assert statement.return_type == ValueType.INT

    def test_plot_statement(self, classifier):
        statement = classifier.classify_line(
            'plot(ta.sma(close, 3), color=color.blue, title="SMA 3")'
        )
        assert statement == PlotStatement(
            expression=FunctionCall(
                name="ta.sma",
                args=(VariableRef("close"), Literal(3, ValueType.INT)),
            ),
            color="#2962FF",
            title="SMA 3",
        )

    def test_plot_unknown_color_passes_through(self, classifier):
        statement = classifier.classify_line('plot(close, color=#ABCDEF, title="C")')
        assert statement.color == "#ABCDEF"

    def test_plot_missing_title_dropped(self, classifier):
        assert classifier.classify_line("plot(close, color=color.blue)") is None

    @pytest.mark.parametrize("line", [
        "if close > open",
        "for i = 0 to 10",
        "strategy.entry(\"long\", strategy.long)",
        "x := x + 1",
    ])
    def test_unrecognized_lines_dropped(self, classifier, line):
        assert classifier.classify_line(line) is None


class TestClassify:
    """Test whole-script classification."""

    def test_only_comments_and_blanks(self):
        program = classify("// one\n\n   \n// two\n")
        assert program.main == []
        assert program.version == ""

    def test_absent_declaration_lists_are_unset(self):
        program = classify('plot(close, color=color.blue, title="Close")')
        assert program.inputs is None
        assert program.variables is None
        assert program.functions is None
        assert len(program.main) == 1

    def test_full_script(self, sample_script):
        program = classify(sample_script)

        assert program.version == "5"
        assert [i.name for i in program.inputs] == ["length"]
        assert [v.name for v in program.variables] == ["fast", "slow"]
        assert [f.name for f in program.functions] == ["spread"]
        assert program.indicator == IndicatorDecl("MA Cross", True)
        assert [p.title for p in program.plots] == ["Fast", "Slow"]

    def test_declaration_order_preserved(self):
        program = classify("b = 2\na = 1\nc = 3")
        assert [v.name for v in program.variables] == ["b", "a", "c"]

    def test_declared_names_become_references(self):
        program = classify("base = close\nplot(base, color=color.red, title=\"B\")")
        assert program.plots[0].expression == VariableRef("base")

    def test_forward_reference_stays_unresolved(self):
        program = classify("a = b\nb = close")
        assert program.variables[0].value == Literal("b", ValueType.SERIES)

    def test_inputs_become_references(self):
        program = classify("input.len = 5\nx = ta.sma(close, len)")
        assert program.variables[0].value.args[1] == VariableRef("len")

    def test_accepts_line_sequence(self):
        program = classify(["//@version=4", "x = 1"])
        assert program.version == "4"
        assert program.variables[0].name == "x"

    def test_custom_palette(self):
        program = StatementClassifier({"color.teal": "#008080"}).classify(
            'plot(close, color=color.teal, title="T")'
        )
        assert program.plots[0].color == "#008080"
