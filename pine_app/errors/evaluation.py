"""
Script evaluation error classifications.

Every failure raised while evaluating a parsed script derives from
ScriptEvaluationError. The ``kind`` attribute is a stable string that callers
can match on together with the offending identifier or token.
"""

from typing import Any, Dict, Optional, Sequence


class ScriptEvaluationError(Exception):
    """Base class for failures that abort a script run."""

    kind = "evaluation_error"

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class UnknownIdentifierError(ScriptEvaluationError):
    """Variable or function name not found in the environment or built-ins."""

    kind = "unknown_identifier"

    def __init__(self, message: str, identifier: Optional[str] = None,
                 identifier_kind: str = "variable", **kwargs):
        super().__init__(message, **kwargs)
        self.identifier = identifier
        self.identifier_kind = identifier_kind


class UnknownOperatorError(ScriptEvaluationError):
    """Operator token outside the fixed operator set."""

    kind = "unknown_operator"

    def __init__(self, message: str, token: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.token = token


class UnknownExpressionKindError(ScriptEvaluationError):
    """Expression node that is not one of the known tree variants."""

    kind = "unknown_expression_kind"

    def __init__(self, message: str, node: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.node = node


class UnsupportedOperandError(ScriptEvaluationError):
    """Operator applied to a combination of value kinds it does not define."""

    kind = "unsupported_operand"

    def __init__(self, message: str, operator: Optional[str] = None,
                 operand_types: Optional[Sequence[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operator = operator
        self.operand_types = list(operand_types or [])


class InvalidArgumentError(ScriptEvaluationError):
    """Built-in function called with a missing or ill-typed argument."""

    kind = "invalid_argument"

    def __init__(self, message: str, function: Optional[str] = None,
                 argument: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.function = function
        self.argument = argument
