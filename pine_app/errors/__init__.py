"""
Error classification for the script engine.

Evaluation errors abort a script run, data quality errors reject caller
supplied price bars, and configuration errors reject engine settings.
"""

from .configuration import ConfigurationError
from .data_quality import (
    DataQualityError,
    MalformedDataError,
    MissingDataError,
)
from .evaluation import (
    InvalidArgumentError,
    ScriptEvaluationError,
    UnknownExpressionKindError,
    UnknownIdentifierError,
    UnknownOperatorError,
    UnsupportedOperandError,
)

__all__ = [
    # Evaluation Errors
    "ScriptEvaluationError",
    "UnknownIdentifierError",
    "UnknownOperatorError",
    "UnknownExpressionKindError",
    "UnsupportedOperandError",
    "InvalidArgumentError",
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    # Configuration
    "ConfigurationError",
]
