"""
Tree evaluator for parsed scripts.

Evaluation is a single synchronous pass: inputs and variables are bound into
a fresh Environment in declaration order, then every plot statement is
evaluated against the price series. The first failure propagates and aborts
the run, so a caller never receives a partial indicator list.
"""

import math
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from ..data.models import IndicatorDescriptor, LinePoint, PriceBar
from ..errors import (
    InvalidArgumentError,
    UnknownExpressionKindError,
    UnknownIdentifierError,
)
from ..language.catalog import (
    BUILTIN_VARIABLE_NAMES,
    BuiltinFunction,
    ValueType,
    get_function_signature,
)
from ..language.nodes import (
    Expression,
    FunctionCall,
    Literal,
    Operator,
    PlotStatement,
    Program,
    VariableRef,
)
from ..logging.config import get_engine_logger, log_indicator_emitted
from ..metrics.moving_average import calculate_ema, calculate_sma
from .operators import apply_operator, is_number
from .values import Series, Value, type_name


logger = get_engine_logger(__name__)


class Environment:
    """Variable bindings for one script run."""

    def __init__(self):
        self._bindings: dict[str, Value] = {}

    def bind(self, name: str, value: Value) -> None:
        self._bindings[name] = value

    def lookup(self, name: str) -> Value:
        return self._bindings[name]

    def __contains__(self, name: str) -> bool:
        return name in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    def names(self) -> list[str]:
        return list(self._bindings)


class Evaluator:
    """Evaluates a Program against one price series."""

    def __init__(
        self,
        bars: Sequence[PriceBar],
        time_labels: str = "bar",
        default_overlay: bool = True,
    ) -> None:
        self.bars = list(bars)
        self.time_labels = time_labels
        self.default_overlay = default_overlay
        self.logger = logger
        self._builtin_cache: dict[str, Series] = {}

    def evaluate(
        self,
        program: Program,
        inputs: Optional[Mapping[str, Any]] = None,
        environment: Optional[Environment] = None,
    ) -> list[IndicatorDescriptor]:
        """
        Run a program and collect the indicators its plots produce.

        Args:
            program: Classified script
            inputs: Caller values overriding input declaration defaults
            environment: Bindings to evaluate into, fresh when omitted

        Returns:
            Indicator descriptors in plot order

        Raises:
            ScriptEvaluationError: On the first failing expression
        """
        env = environment if environment is not None else Environment()
        inputs = inputs or {}

        for decl in program.inputs or []:
            value = inputs.get(decl.name, decl.default)
            if decl.options and value not in decl.options:
                self.logger.warning(
                    "Input value not among declared options",
                    input=decl.name,
                    value=value,
                    options=list(decl.options),
                )
            if decl.value_type == ValueType.SERIES and isinstance(value, str):
                # Series-typed defaults name a source such as close
                value = self.resolve(value, env)
            env.bind(decl.name, value)

        for decl in program.variables or []:
            env.bind(decl.name, self.evaluate_expression(decl.value, env))

        indicators = []
        for statement in program.main:
            if not isinstance(statement, PlotStatement):
                # Declarations such as indicator(...) carry no runtime effect
                continue

            descriptor = self._evaluate_plot(statement, env)
            if descriptor is not None:
                indicators.append(descriptor)

        return indicators

    def _evaluate_plot(self, statement: PlotStatement, env: Environment) -> Optional[IndicatorDescriptor]:
        result = self.evaluate_expression(statement.expression, env)

        if not isinstance(result, Series):
            self.logger.debug(
                "Plot skipped",
                title=statement.title,
                reason="non_series_result",
                result_type=type_name(result),
            )
            return None

        descriptor = IndicatorDescriptor(
            name=statement.title,
            data=tuple(LinePoint(t, v) for t, v in zip(result.times, result.values)),
            color=statement.color,
            overlay=self.default_overlay,
        )
        log_indicator_emitted(self.logger, descriptor.name, len(descriptor.data), descriptor.color)
        return descriptor

    def evaluate_expression(self, expr: Expression, env: Environment) -> Value:
        """Evaluate one expression tree."""
        if isinstance(expr, Literal):
            if expr.value_type == ValueType.SERIES:
                # Unrecognized bare word: resolved by name now that bindings exist
                return self.resolve(str(expr.value), env)
            return expr.value

        if isinstance(expr, VariableRef):
            return self.resolve(expr.name, env)

        if isinstance(expr, FunctionCall):
            function = BuiltinFunction.lookup(expr.name)
            if function is None:
                raise UnknownIdentifierError(
                    f"Unknown function: {expr.name}",
                    identifier=expr.name,
                    identifier_kind="function",
                )
            args = [self.evaluate_expression(arg, env) for arg in expr.args]
            return self.call_builtin(function, args)

        if isinstance(expr, Operator):
            operands = [self.evaluate_expression(operand, env) for operand in expr.operands]
            return apply_operator(expr.token, operands)

        raise UnknownExpressionKindError(
            f"Unknown expression type: {type(expr).__name__}",
            node=expr,
        )

    def resolve(self, name: str, env: Environment) -> Value:
        """Look a name up in the environment, then in the built-in series."""
        if name in env:
            return env.lookup(name)

        if name in BUILTIN_VARIABLE_NAMES:
            return self.builtin_series(name)

        raise UnknownIdentifierError(
            f"Unknown variable: {name}",
            identifier=name,
            identifier_kind="variable",
        )

    def builtin_series(self, name: str) -> Series:
        """Per-bar field across the whole price series, in bar order."""
        if name not in self._builtin_cache:
            values = []
            for bar in self.bars:
                value = getattr(bar, name)
                values.append(math.nan if value is None else float(value))
            self._builtin_cache[name] = Series(
                times=tuple(bar.time for bar in self.bars),
                values=tuple(values),
            )
        return self._builtin_cache[name]

    def call_builtin(self, function: BuiltinFunction, args: list[Value]) -> Value:
        """Dispatch a built-in function over evaluated arguments."""
        if function is BuiltinFunction.SMA:
            source, length = self._source_and_length(function, args)
            values = calculate_sma(source.values, length)
            result = Series(source.times[length - 1:], tuple(values))
        elif function is BuiltinFunction.EMA:
            source, length = self._source_and_length(function, args)
            result = Series(source.times, tuple(calculate_ema(source.values, length)))
        else:
            raise UnknownIdentifierError(
                f"Unknown function: {function.value}",
                identifier=function.value,
                identifier_kind="function",
            )

        if self.time_labels == "index":
            return result.with_index_labels()
        return result

    def _source_and_length(self, function: BuiltinFunction, args: list[Value]) -> tuple[Series, int]:
        """Validate the (source, length) argument pair of a moving average."""
        signature = get_function_signature(function.value)
        expected = len(signature.parameters)
        if len(args) != expected:
            raise InvalidArgumentError(
                f"{function.value} expects {expected} arguments, got {len(args)}",
                function=function.value,
            )

        source, length = args

        if not isinstance(source, Series):
            raise InvalidArgumentError(
                f"{function.value} source must be a series, got {type_name(source)}",
                function=function.value,
                argument="source",
            )

        if not is_number(length) or not float(length).is_integer() or length <= 0:
            raise InvalidArgumentError(
                f"{function.value} length must be a positive integer, got {length!r}",
                function=function.value,
                argument="length",
            )

        return source, int(length)
