"""Tests for value and type inference."""

import pytest

from pine_app.language.catalog import COLOR_MAP, ValueType
from pine_app.language.inference import infer_type, parse_color, parse_value
from pine_app.runtime.values import Color


class TestInferType:
    """Test type inference from token text."""

    @pytest.mark.parametrize("text,expected", [
        ("14", ValueType.INT),
        ("14.0", ValueType.INT),
        ("-3", ValueType.INT),
        ("2.5", ValueType.FLOAT),
        (".5", ValueType.FLOAT),
        ("true", ValueType.BOOL),
        ("false", ValueType.BOOL),
        ('"Length"', ValueType.STRING),
        ("color.blue", ValueType.COLOR),
        ("color.teal", ValueType.COLOR),
        ("#FF0000", ValueType.COLOR),
        ("close", ValueType.SERIES),
        ("ta.sma(close, 3)", ValueType.SERIES),
    ])
    def test_infer_type(self, text, expected):
        """Test each token shape maps to its type."""
        assert infer_type(text) == expected

    def test_infer_type_trims_whitespace(self):
        """Test surrounding whitespace is ignored."""
        assert infer_type("  7  ") == ValueType.INT


class TestParseValue:
    """Test literal parsing."""

    def test_integer(self):
        value = parse_value("14")
        assert value == 14
        assert isinstance(value, int)

    def test_integral_float_becomes_int(self):
        value = parse_value("3.0")
        assert value == 3
        assert isinstance(value, int)

    def test_float(self):
        assert parse_value("2.75") == 2.75

    def test_booleans(self):
        assert parse_value("true") is True
        assert parse_value("false") is False

    def test_string_quotes_stripped(self):
        assert parse_value('"Fast MA"') == "Fast MA"

    def test_named_color(self):
        value = parse_value("color.red")
        assert value == Color(token="color.red", value=COLOR_MAP["color.red"])

    def test_unknown_color_passes_through(self):
        value = parse_value("color.teal")
        assert value.value == "color.teal"

    def test_other_text_returned_verbatim(self):
        assert parse_value(" close ") == "close"


class TestParseColor:
    """Test color resolution."""

    def test_known_token(self):
        assert parse_color("color.blue") == "#2962FF"

    def test_unknown_token_passes_through(self):
        assert parse_color(" #123456 ") == "#123456"

    def test_custom_palette(self):
        palette = {**COLOR_MAP, "color.teal": "#008080"}
        assert parse_color("color.teal", palette) == "#008080"
