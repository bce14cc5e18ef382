# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the tool catalog (core/registry.py) to MCP clients.  Each tool
#   here is a thin wrapper: it logs the call, builds an InvocationRequest,
#   dispatches it through the registry, and returns the result.
#
# HOW IT WORKS (the flow):
#   1. An MCP client (e.g. the demo agent in agent/) calls "TranslateTool"
#   2. FastMCP validates the JSON arguments and routes to the wrapper below
#   3. The wrapper hands the call to ToolRegistry.invoke()
#   4. The registry binds arguments and runs the handler from core/
#   5. The value (or the exception) goes back to the client through FastMCP
#
# WIRE NAMES:
#   Tool and parameter names are part of the public contract ("Add",
#   "TranslateTool", "targetLanguage", ...).  Existing clients call them by
#   these exact names, so the wrapper parameters keep the camelCase spelling.
#
# RUNNING THIS SERVER:
#     a) Standalone (stdio):  python -m tools.mcp_server
#     b) Over HTTP:           MCP_TRANSPORT=http python -m tools.mcp_server
#     c) Spawned by the demo agent via stdio (see agent/translator_agent.py)
# =============================================================================

import json
import logging
import sys
from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import Field

from core.completion import create_completion_adapter
from core.config import DEFAULT_SERVER_NAME, Settings, load_settings
from core.errors import ConfigurationError
from core.models import InvocationRequest
from core.registry import (
    ADD,
    CALCULATE_RECTANGLE_AREA,
    GET_SUPPORTED_LANGUAGES,
    GREET,
    TRANSLATE,
    ToolRegistry,
    build_registry,
)

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: with the stdio transport, STDOUT carries the MCP JSON
# messages and anything else written there corrupts the stream.
#
# Colors:
#   CYAN    incoming requests (tool name + parameters)
#   GREEN   responses
#   YELLOW  intermediate status
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result):
    """Log the tool response as compact JSON in GREEN, then return it."""
    logger.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(result, separators=(',', ':'))}{_RESET}")
    return result


def _describe(tool, param_name: str) -> str:
    return tool.parameter(param_name).description


# =============================================================================
# Building the registry from configuration
# =============================================================================
# Translation needs an endpoint, a model and a credential.  If any of those
# is missing the server still starts: the math and language tools work and
# TranslateTool answers every call with a ConfigurationError that says what
# to set.
# =============================================================================
def build_tool_registry(settings: Settings) -> ToolRegistry:
    try:
        adapter = create_completion_adapter(settings)
    except ConfigurationError as e:
        logger.warning(f"{_YELLOW}TranslateTool disabled: {e}{_RESET}")
        return build_registry(None, unconfigured_reason=str(e))
    return build_registry(adapter)


# =============================================================================
# Create the FastMCP server
# =============================================================================
# Every tool below has a hand-written wrapper so FastMCP can read typed
# parameters from its signature.  A registry tool missing from this list
# would be silently unreachable, so create_server refuses it.
# =============================================================================
WRAPPED_TOOLS = (ADD, GREET, CALCULATE_RECTANGLE_AREA, TRANSLATE, GET_SUPPORTED_LANGUAGES)


def create_server(registry: ToolRegistry, name: str = DEFAULT_SERVER_NAME) -> FastMCP:
    """Create a FastMCP server exposing every tool in `registry`.

    The server name becomes its identity in MCP; clients connect to it and
    discover the five tools below.

    Raises:
        ValueError: `registry` holds a tool that has no wrapper here.
    """
    wrapped = {tool.name for tool in WRAPPED_TOOLS}
    unwrapped = [d.name for d in registry.descriptors() if d.name not in wrapped]
    if unwrapped:
        raise ValueError(f"No MCP wrapper for tool(s): {', '.join(unwrapped)}")

    mcp = FastMCP(name)

    async def _call(tool_name: str, **arguments):
        _log_request(tool_name, **arguments)
        result = await registry.invoke(InvocationRequest(tool_name, arguments))
        return _log_response(tool_name, result.value)

    # -------------------------------------------------------------------------
    # Math tools
    # -------------------------------------------------------------------------
    @mcp.tool(name=ADD.name, description=ADD.description)
    async def add(
        a: Annotated[int, Field(description=_describe(ADD, "a"))],
        b: Annotated[int, Field(description=_describe(ADD, "b"))],
    ) -> int:
        return await _call(ADD.name, a=a, b=b)

    @mcp.tool(name=GREET.name, description=GREET.description)
    async def greet(
        name: Annotated[Optional[str], Field(description=_describe(GREET, "name"))] = None,
    ) -> str:
        return await _call(GREET.name, name=name)

    @mcp.tool(name=CALCULATE_RECTANGLE_AREA.name, description=CALCULATE_RECTANGLE_AREA.description)
    async def calculate_rectangle_area(
        width: Annotated[float, Field(description=_describe(CALCULATE_RECTANGLE_AREA, "width"))],
        height: Annotated[float, Field(description=_describe(CALCULATE_RECTANGLE_AREA, "height"))],
    ) -> float:
        return await _call(CALCULATE_RECTANGLE_AREA.name, width=width, height=height)

    # -------------------------------------------------------------------------
    # Translation tools
    # -------------------------------------------------------------------------
    # TranslateTool is the only tool that leaves the process: it waits on the
    # completion service.  Upstream errors are not caught here; FastMCP turns
    # them into a tool error for the client.
    # -------------------------------------------------------------------------
    @mcp.tool(name=TRANSLATE.name, description=TRANSLATE.description)
    async def translate_tool(
        text: Annotated[str, Field(description=_describe(TRANSLATE, "text"))],
        targetLanguage: Annotated[str, Field(description=_describe(TRANSLATE, "targetLanguage"))],
        sourceLanguage: Annotated[
            Optional[str], Field(description=_describe(TRANSLATE, "sourceLanguage"))
        ] = None,
    ) -> str:
        if sourceLanguage is None:
            _log_status("No source language given, model will auto-detect")
        return await _call(
            TRANSLATE.name,
            text=text,
            targetLanguage=targetLanguage,
            sourceLanguage=sourceLanguage,
        )

    @mcp.tool(name=GET_SUPPORTED_LANGUAGES.name, description=GET_SUPPORTED_LANGUAGES.description)
    async def get_supported_languages() -> str:
        return await _call(GET_SUPPORTED_LANGUAGES.name)

    _log_status(f"Registered tools: {', '.join(registry.names())}")
    return mcp


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    server = create_server(build_tool_registry(settings), settings.server_name)
    server.run(transport=settings.transport)


if __name__ == "__main__":
    main()
