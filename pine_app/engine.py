"""
Main script engine coordinator.

Orchestrates the script pipeline, coordinating price input conversion,
statement classification, evaluation and the indicator registry.
"""

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Optional, Union

from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.models import IndicatorDescriptor, PriceBar
from .data.parsers import parse_price_bars
from .errors import ConfigurationError, DataQualityError, ScriptEvaluationError
from .language.catalog import (
    BUILTIN_FUNCTIONS,
    BUILTIN_VARIABLES,
    COLOR_MAP,
)
from .language.classifier import StatementClassifier
from .language.nodes import Program
from .logging.config import configure_logging, get_engine_logger
from .runtime.evaluator import Evaluator
from .runtime.registry import IndicatorRegistry

engine_logger = get_engine_logger(__name__)

BarInput = Iterable[Union[PriceBar, Mapping[str, Any]]]


class ScriptEngine:
    """
    Main coordinator for parsing and evaluating indicator scripts.

    Manages the script pipeline:
    Script Text → Classification → Program → Evaluation → Indicators

    One instance is built by the caller and passed to whatever needs it. The
    indicator registry lives on the instance and survives across runs until
    cleared. Calls must be serialized by the caller.
    """

    def __init__(
        self,
        config_dir: Optional[Union[str, Path]] = None,
        overrides: Optional[dict[str, Any]] = None,
    ) -> None:
        """Initialize the engine from defaults, engine.yaml and overrides."""
        self.logger = engine_logger

        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        self.config = self.config_loader.merge_config(overrides)

        validation_errors = ConfigValidator.validate_config(self.config)
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value!r})" for err in validation_errors]
            self.logger.error("Engine configuration invalid", errors=error_msgs)
            raise ConfigurationError(
                "Invalid engine configuration: " + "; ".join(error_msgs),
                errors=validation_errors,
            )

        self.palette = {**COLOR_MAP, **self.config["palette"]["colors"]}
        self.registry = IndicatorRegistry()

        self.logger.info(
            "Script engine initialized",
            time_labels=self.config["engine"]["time_labels"],
            palette_size=len(self.palette),
        )

    def configure_logging(self, **kwargs: Any) -> None:
        """Apply the logging section of the merged configuration."""
        configure_logging(
            level=self.config["logging"]["level"],
            format_json=self.config["logging"]["format_json"],
            **kwargs,
        )

    def parse_script(
        self,
        script: str,
        bars: BarInput,
        inputs: Optional[Mapping[str, Any]] = None,
    ) -> list[IndicatorDescriptor]:
        """
        Classify a script and evaluate it against a price series.

        Args:
            script: Newline separated script text
            bars: PriceBar objects or {time, open, high, low, close, volume?}
                mappings in time order
            inputs: Values overriding input declaration defaults

        Returns:
            Indicator descriptors in plot order

        Raises:
            ScriptEvaluationError: If evaluation fails; no indicators are
                returned in that case
            DataQualityError: If the bars cannot be converted
        """
        self.logger.info("Parsing script", lines=len(script.splitlines()))
        program = self.classify(script)
        return self.evaluate(program, bars, inputs)

    def classify(self, script: Union[str, Iterable[str]]) -> Program:
        """Classify script text into a Program. Never raises."""
        return StatementClassifier(self.palette).classify(script)

    def evaluate(
        self,
        program: Program,
        bars: BarInput,
        inputs: Optional[Mapping[str, Any]] = None,
    ) -> list[IndicatorDescriptor]:
        """Evaluate a classified Program against a price series."""
        try:
            price_bars = parse_price_bars(bars)
        except DataQualityError as e:
            self.logger.warning(
                "Price series rejected",
                error=str(e),
                error_type=type(e).__name__,
                context=e.context,
            )
            raise

        evaluator = Evaluator(
            price_bars,
            time_labels=self.config["engine"]["time_labels"],
            default_overlay=self.config["engine"]["default_overlay"],
        )

        try:
            indicators = evaluator.evaluate(program, inputs)
        except ScriptEvaluationError as e:
            self.logger.error(
                "Script evaluation failed",
                error=str(e),
                error_kind=e.kind,
                bars=len(price_bars),
            )
            raise

        self.logger.info(
            "Script evaluated",
            bars=len(price_bars),
            indicators=[i.name for i in indicators],
        )
        return indicators

    def add_indicator(self, descriptor: IndicatorDescriptor) -> None:
        """Store an indicator, replacing any with the same name."""
        self.registry.add(descriptor)

    def remove_indicator(self, name: str) -> None:
        self.registry.remove(name)

    def clear_indicators(self) -> None:
        self.registry.clear()

    def get_indicators(self) -> list[IndicatorDescriptor]:
        return self.registry.list()

    def describe_builtins(self) -> dict[str, Any]:
        """Read-only view of the built-in catalog for editors and docs."""
        return {
            "functions": [
                {
                    "name": fn.name,
                    "return_type": fn.return_type.value,
                    "parameters": [
                        {"name": p.name, "type": p.type.value, "optional": p.optional}
                        for p in fn.parameters
                    ],
                    "description": fn.description,
                }
                for fn in BUILTIN_FUNCTIONS
            ],
            "variables": [
                {"name": v.name, "type": v.type.value, "description": v.description}
                for v in BUILTIN_VARIABLES
            ],
            "colors": dict(self.palette),
        }
