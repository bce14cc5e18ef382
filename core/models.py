# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the tool catalog)
# =============================================================================
#
# These dataclasses describe WHAT a tool looks like (its name, description
# and argument contract) and WHAT flows in and out of a single call.  They
# carry almost no behavior; the registry (core/registry.py) does the work.
#
# IMMUTABILITY:
#   Descriptors are frozen.  The catalog is built once at startup and never
#   changes, so it can be shared by every concurrent invocation without locks.
#
# TRANSIENT TYPES:
#   InvocationRequest and InvocationResult live for exactly one call.
# =============================================================================

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


# -----------------------------------------------------------------------------
# ParameterType — the three primitive types a tool argument can have
# -----------------------------------------------------------------------------
# Arguments arrive from JSON, so "3" and 3.0 both show up where an integer is
# expected.  coerce() turns what the caller sent into the Python type the
# handler declares, or raises ValueError/TypeError.
# -----------------------------------------------------------------------------
class ParameterType(str, Enum):
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"

    @property
    def json_type(self) -> str:
        """The JSON-schema type name for this parameter type."""
        return "number" if self is ParameterType.FLOAT else self.value

    def coerce(self, value: Any) -> Union[int, float, str]:
        # bool is a subclass of int; True is not a number a caller meant to send.
        if isinstance(value, bool) and self is not ParameterType.STRING:
            raise TypeError(f"expected {self.value}, got boolean")

        if self is ParameterType.INTEGER:
            if isinstance(value, int):
                return value
            if isinstance(value, float):
                if not value.is_integer():
                    raise ValueError(f"{value!r} is not a whole number")
                return int(value)
            if isinstance(value, str):
                return int(value.strip())
            raise TypeError(f"expected integer, got {type(value).__name__}")

        if self is ParameterType.FLOAT:
            if isinstance(value, (int, float)):
                return float(value)
            if isinstance(value, str):
                return float(value.strip())
            raise TypeError(f"expected float, got {type(value).__name__}")

        if isinstance(value, (dict, list)):
            raise TypeError(f"expected string, got {type(value).__name__}")
        return str(value)


@dataclass(frozen=True)
class ParameterDescriptor:
    """One argument in a tool's contract.

    `name` is the wire name the caller uses (e.g. "targetLanguage").
    `attr` is the handler's Python keyword (e.g. "target_language"); it
    defaults to the wire name.
    """

    name: str
    description: str
    type: ParameterType
    required: bool = True
    default: Any = None
    attr: Optional[str] = None

    @property
    def keyword(self) -> str:
        return self.attr or self.name


@dataclass(frozen=True)
class ToolDescriptor:
    """A named tool and its ordered argument contract."""

    name: str
    description: str
    parameters: tuple[ParameterDescriptor, ...] = ()

    def parameter(self, name: str) -> Optional[ParameterDescriptor]:
        for param in self.parameters:
            if param.name == name:
                return param
        return None

    def input_schema(self) -> dict:
        """Render the argument contract as a JSON-schema object."""
        properties = {}
        for param in self.parameters:
            prop = {"type": param.type.json_type, "description": param.description}
            if not param.required and param.default is not None:
                prop["default"] = param.default
            properties[param.name] = prop
        return {
            "type": "object",
            "properties": properties,
            "required": [p.name for p in self.parameters if p.required],
        }


@dataclass
class InvocationRequest:
    tool_name: str
    arguments: dict[str, Any] = field(default_factory=dict)


@dataclass
class InvocationResult:
    """Outcome of one call: a value on success, or an error message."""

    value: Union[int, float, str, None] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_payload(self) -> Union[int, float, str, dict, None]:
        if self.error is not None:
            return {"error": self.error}
        return self.value


@dataclass(frozen=True)
class SupportedLanguage:
    code: str  # ISO-639-1
    name: str
