"""
Built-in catalog for the script language.

Static registries of built-in function signatures, built-in variable names
and named color tokens. Pure data shared read-only by every engine.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class ValueType(str, Enum):
    """Value kinds known to the type system."""
    FLOAT = "float"
    INT = "int"
    BOOL = "bool"
    STRING = "string"
    COLOR = "color"
    SERIES = "series"
    # Declared for completeness, evaluation never produces these
    ARRAY = "array"
    MATRIX = "matrix"


class BuiltinFunction(str, Enum):
    """Closed set of callable built-ins, keyed by script name."""
    SMA = "ta.sma"
    EMA = "ta.ema"

    @classmethod
    def lookup(cls, name: str) -> "BuiltinFunction | None":
        """Return the member for a script-level name, None if not built in."""
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True)
class ParameterSpec:
    """One declared parameter of a function signature."""
    name: str
    type: ValueType
    optional: bool = False


@dataclass(frozen=True)
class FunctionSignature:
    """Declared shape of a built-in function."""
    name: str
    return_type: ValueType
    parameters: tuple[ParameterSpec, ...]
    description: str


@dataclass(frozen=True)
class VariableDescriptor:
    """Describes a built-in series source, not a runtime value."""
    name: str
    type: ValueType
    description: str


BUILTIN_FUNCTIONS: tuple[FunctionSignature, ...] = (
    FunctionSignature(
        name=BuiltinFunction.SMA.value,
        return_type=ValueType.SERIES,
        parameters=(
            ParameterSpec("source", ValueType.SERIES),
            ParameterSpec("length", ValueType.INT),
        ),
        description="Simple Moving Average",
    ),
    FunctionSignature(
        name=BuiltinFunction.EMA.value,
        return_type=ValueType.SERIES,
        parameters=(
            ParameterSpec("source", ValueType.SERIES),
            ParameterSpec("length", ValueType.INT),
        ),
        description="Exponential Moving Average",
    ),
)

BUILTIN_VARIABLES: tuple[VariableDescriptor, ...] = (
    VariableDescriptor("close", ValueType.SERIES, "Close price"),
    VariableDescriptor("open", ValueType.SERIES, "Open price"),
    VariableDescriptor("high", ValueType.SERIES, "High price"),
    VariableDescriptor("low", ValueType.SERIES, "Low price"),
    VariableDescriptor("volume", ValueType.SERIES, "Volume"),
)

BUILTIN_VARIABLE_NAMES = frozenset(v.name for v in BUILTIN_VARIABLES)

COLOR_MAP = MappingProxyType({
    "color.blue": "#2962FF",
    "color.red": "#FF4136",
    "color.green": "#2ECC40",
    "color.yellow": "#FFDC00",
    "color.purple": "#B10DC9",
    "color.orange": "#FF851B",
    "color.black": "#111111",
    "color.white": "#FFFFFF",
})


def get_function_signature(name: str) -> FunctionSignature | None:
    """Find the signature of a built-in function by script name."""
    for signature in BUILTIN_FUNCTIONS:
        if signature.name == name:
            return signature
    return None
