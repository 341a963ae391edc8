"""
Line-oriented statement classifier.

Each non-blank script line is matched against a fixed, ordered list of line
shapes and the first shape that matches decides the statement kind:

    1. version pragma        //@version=5
    2. comment               // ...
    3. indicator declaration indicator("Name", overlay=true)
    4. input declaration     input.length = 14, 7|14|21
    5. variable declaration  fast = ta.ema(close, 9)
    6. function declaration  method double(x) => x * 2
    7. plot statement        plot(fast, color=color.blue, title="Fast")

A line matching none of them produces no statement. Classification never
looks at neighbouring lines.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Optional, Union

from ..logging.config import get_engine_logger, log_statement_skipped
from .catalog import COLOR_MAP, ValueType
from .expressions import ExpressionParser, split_arguments
from .inference import infer_type, parse_color, parse_value
from .nodes import (
    ExpressionStatement,
    FuncDecl,
    FunctionParam,
    IndicatorDecl,
    InputDecl,
    PlotStatement,
    Program,
    Statement,
    VarDecl,
    VersionPragma,
)


logger = get_engine_logger(__name__)

VERSION_MARKER = "//@version="
COMMENT_MARKER = "//"
INPUT_PREFIX = "input."
METHOD_KEYWORD = "method"

_INDICATOR = re.compile(r'indicator\("([^"]+)",\s*overlay=(\w+)\)')
_INPUT = re.compile(r"input\.(\w+)\s*=\s*(.+)")
_VAR_DECL = re.compile(r"^(\w+)\s*=(?!=)\s*(.+)$")
_FUNC_DECL = re.compile(r"method\s+(\w+)\s*\((.*)\)\s*=>\s*(.+)")
_PLOT = re.compile(r'^plot\((.+),\s*color=([^,]+),\s*title="([^"]+)"\)\s*$')

_TYPE_NAMES = frozenset(t.value for t in ValueType)


class StatementClassifier:
    """Turns script lines into a Program."""

    def __init__(self, palette: Optional[Mapping[str, str]] = None):
        self.palette = palette if palette is not None else COLOR_MAP
        self.parser = ExpressionParser(palette=self.palette)

    def classify(self, lines: Union[str, Iterable[str]]) -> Program:
        """
        Classify every line in order and collect the statements.

        Args:
            lines: Script text or an ordered sequence of raw lines

        Returns:
            Program with declarations grouped by kind and main statements
            in source order
        """
        if isinstance(lines, str):
            lines = lines.splitlines()

        program = Program()

        for line_no, raw in enumerate(lines, start=1):
            line = raw.strip()
            if not line:
                continue

            statement = self.classify_line(line)
            if statement is None:
                if not line.startswith(COMMENT_MARKER):
                    log_statement_skipped(logger, line_no, line)
                continue

            program.add(statement)

        logger.debug(
            "Script classified",
            version=program.version,
            inputs=len(program.inputs or []),
            variables=len(program.variables or []),
            functions=len(program.functions or []),
            main=len(program.main),
        )
        return program

    def classify_line(self, line: str) -> Optional[Statement]:
        """
        Classify a single trimmed line.

        Returns None for comments and for lines that match no statement
        shape; names declared by input and variable lines become known to
        the expression parser for the lines that follow.
        """
        line = line.strip()

        if line.startswith(VERSION_MARKER):
            return VersionPragma(line.split("=", 1)[1])

        if line.startswith(COMMENT_MARKER):
            return None

        if "indicator(" in line:
            return self._parse_indicator(line)

        if line.startswith(INPUT_PREFIX):
            return self._parse_input(line)

        if _VAR_DECL.match(line):
            return self._parse_variable(line)

        if line.startswith(METHOD_KEYWORD):
            return self._parse_function(line)

        if line.startswith("plot("):
            return self._parse_plot(line)

        return None

    def _parse_indicator(self, line: str) -> Optional[IndicatorDecl]:
        match = _INDICATOR.search(line)
        if not match:
            return None
        return IndicatorDecl(name=match.group(1), overlay=match.group(2) == "true")

    def _parse_input(self, line: str) -> Optional[InputDecl]:
        match = _INPUT.match(line)
        if not match:
            return None

        name = match.group(1)
        parts = split_arguments(match.group(2))
        if not parts or not parts[0]:
            return None
        raw_default = parts[0]
        raw_options = parts[1] if len(parts) > 1 else None
        options = None
        if raw_options:
            options = tuple(parse_value(opt, self.palette) for opt in raw_options.split("|"))

        self.parser.declare(name)
        return InputDecl(
            name=name,
            value_type=infer_type(raw_default),
            default=parse_value(raw_default, self.palette),
            options=options,
        )

    def _parse_variable(self, line: str) -> Optional[VarDecl]:
        match = _VAR_DECL.match(line)
        if not match:
            return None

        name, raw_value = match.group(1), match.group(2).strip()
        # Parse before declaring: a line never sees its own name
        value = self.parser.parse(raw_value)
        self.parser.declare(name)
        return VarDecl(name=name, value_type=infer_type(raw_value), value=value)

    def _parse_function(self, line: str) -> Optional[FuncDecl]:
        match = _FUNC_DECL.match(line)
        if not match:
            return None

        name, raw_params, raw_body = match.groups()
        params = tuple(self._parse_param(p) for p in split_arguments(raw_params) if p)
        body_parser = self.parser.with_names(p.name for p in params)

        return FuncDecl(
            name=name,
            params=params,
            return_type=infer_type(raw_body),
            body=(ExpressionStatement(body_parser.parse(raw_body)),),
        )

    def _parse_param(self, text: str) -> FunctionParam:
        name, _, declared = text.partition(":")
        name = name.strip()
        declared = declared.strip()
        if declared in _TYPE_NAMES:
            return FunctionParam(name=name, type=ValueType(declared))
        return FunctionParam(name=name, type=infer_type(name))

    def _parse_plot(self, line: str) -> Optional[PlotStatement]:
        match = _PLOT.match(line)
        if not match:
            return None

        raw_expression, raw_color, title = match.groups()
        return PlotStatement(
            expression=self.parser.parse(raw_expression),
            color=parse_color(raw_color, self.palette),
            title=title,
        )


def classify(lines: Union[str, Iterable[str]],
             palette: Optional[Mapping[str, str]] = None) -> Program:
    """Classify a script with a fresh classifier."""
    return StatementClassifier(palette).classify(lines)
