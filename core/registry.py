# =============================================================================
# core/registry.py  —  Tool Registry (the explicit dispatch table)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Maps a tool NAME to its descriptor (argument contract) and its handler.
#   Given an InvocationRequest, the registry:
#     1. Looks up the tool by name
#     2. Validates and coerces the arguments against the descriptor
#     3. Calls the handler (awaiting it if it's async)
#     4. Wraps the return value in an InvocationResult
#
# WHY AN EXPLICIT TABLE?
#   The MCP layer (tools/mcp_server.py) is only one way in.  Keeping the
#   catalog here as plain data means it can be listed, tested and dispatched
#   without starting a server, and the wire layer stays a thin wrapper.
#
# ERROR POLICY:
#   invoke()   raises UnknownToolError / ArgumentError, and lets handler
#              exceptions (including upstream completion failures) propagate.
#   dispatch() is the boundary form: caller mistakes become
#              InvocationResult(error=...), everything else still propagates.
# =============================================================================

import functools
import inspect
import logging
from typing import Any, Callable, Optional

from core.errors import ArgumentError, ConfigurationError, UnknownToolError
from core.languages import get_supported_languages
from core.math_tools import add, calculate_rectangle_area, greet
from core.models import (
    InvocationRequest,
    InvocationResult,
    ParameterDescriptor,
    ParameterType,
    ToolDescriptor,
)
from core.translation import Completer, translate

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


class ToolRegistry:
    def __init__(self):
        self._tools: dict[str, tuple[ToolDescriptor, Handler]] = {}

    def register(self, descriptor: ToolDescriptor, handler: Handler) -> None:
        if descriptor.name in self._tools:
            raise ValueError(f"Tool '{descriptor.name}' is already registered")
        self._tools[descriptor.name] = (descriptor, handler)

    def get(self, name: str) -> ToolDescriptor:
        try:
            return self._tools[name][0]
        except KeyError:
            raise UnknownToolError(name) from None

    def names(self) -> list[str]:
        return list(self._tools)

    def descriptors(self) -> list[ToolDescriptor]:
        return [descriptor for descriptor, _ in self._tools.values()]

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    @staticmethod
    def bind_arguments(descriptor: ToolDescriptor, arguments: dict[str, Any]) -> dict[str, Any]:
        """Turn wire arguments into handler keyword arguments.

        Missing optional arguments (absent or None) get their declared default.
        """
        known = {param.name for param in descriptor.parameters}
        unexpected = sorted(set(arguments) - known)
        if unexpected:
            raise ArgumentError(descriptor.name, unexpected[0], "unexpected argument")

        kwargs = {}
        for param in descriptor.parameters:
            raw = arguments.get(param.name)
            if raw is None:
                if param.required:
                    raise ArgumentError(descriptor.name, param.name, "required argument is missing")
                kwargs[param.keyword] = param.default
                continue
            try:
                kwargs[param.keyword] = param.type.coerce(raw)
            except (TypeError, ValueError, OverflowError) as e:
                raise ArgumentError(descriptor.name, param.name, str(e)) from e
        return kwargs

    async def invoke(self, request: InvocationRequest) -> InvocationResult:
        try:
            descriptor, handler = self._tools[request.tool_name]
        except KeyError:
            raise UnknownToolError(request.tool_name) from None

        kwargs = self.bind_arguments(descriptor, request.arguments)
        logger.debug("Invoking %s with %s", descriptor.name, kwargs)

        value = handler(**kwargs)
        if inspect.isawaitable(value):
            value = await value
        return InvocationResult(value=value)

    async def dispatch(self, request: InvocationRequest) -> InvocationResult:
        """Like invoke(), but report unknown tools and bad arguments as results."""
        try:
            return await self.invoke(request)
        except (UnknownToolError, ArgumentError) as e:
            logger.warning("Rejected call to %s: %s", request.tool_name, e)
            return InvocationResult(error=str(e))


# =============================================================================
# The default catalog
# =============================================================================
ADD = ToolDescriptor(
    name="Add",
    description="Adds two numbers together",
    parameters=(
        ParameterDescriptor("a", "First number", ParameterType.INTEGER),
        ParameterDescriptor("b", "Second number", ParameterType.INTEGER),
    ),
)

GREET = ToolDescriptor(
    name="Greet",
    description="Gets a greeting message for a given name",
    parameters=(
        ParameterDescriptor("name", "Name to greet", ParameterType.STRING, required=False, default=""),
    ),
)

CALCULATE_RECTANGLE_AREA = ToolDescriptor(
    name="CalculateRectangleArea",
    description="Calculates the area of a rectangle",
    parameters=(
        ParameterDescriptor("width", "Width of the rectangle", ParameterType.FLOAT),
        ParameterDescriptor("height", "Height of the rectangle", ParameterType.FLOAT),
    ),
)

TRANSLATE = ToolDescriptor(
    name="TranslateTool",
    description="Translates text from one language to another using AI Agent",
    parameters=(
        ParameterDescriptor("text", "The text to translate", ParameterType.STRING),
        ParameterDescriptor(
            "targetLanguage",
            "The target language code (e.g., 'en', 'es', 'fr', 'de')",
            ParameterType.STRING,
            attr="target_language",
        ),
        ParameterDescriptor(
            "sourceLanguage",
            "The source language code (optional, auto-detect if not specified)",
            ParameterType.STRING,
            required=False,
            attr="source_language",
        ),
    ),
)

GET_SUPPORTED_LANGUAGES = ToolDescriptor(
    name="GetSupportedLanguages",
    description="Gets the list of commonly supported languages for translation",
)


class _UnconfiguredCompleter:
    """Stands in for the completion adapter when translation isn't set up."""

    def __init__(self, reason: str):
        self.reason = reason

    async def complete(self, prompt: str) -> str:
        raise ConfigurationError(self.reason)


def build_registry(completer: Optional[Completer] = None, unconfigured_reason: str = "") -> ToolRegistry:
    """Build the registry of all five tools.

    Args:
        completer: What TranslateTool uses to reach the model.  When None,
            TranslateTool raises ConfigurationError and the other tools work.
        unconfigured_reason: Message for that ConfigurationError.
    """
    if completer is None:
        completer = _UnconfiguredCompleter(unconfigured_reason or "Translation is not configured")

    registry = ToolRegistry()
    registry.register(ADD, add)
    registry.register(GREET, greet)
    registry.register(CALCULATE_RECTANGLE_AREA, calculate_rectangle_area)
    registry.register(TRANSLATE, functools.partial(translate, completer))
    registry.register(GET_SUPPORTED_LANGUAGES, get_supported_languages)
    return registry


