# =============================================================================
# core/errors.py  —  Exception types raised by the tool layer
# =============================================================================
#
# Only failures that the tools themselves detect get a class here.  Errors
# from the completion service (network, auth, quota, model) are NOT wrapped:
# litellm raises them and they propagate to the caller unchanged.
# =============================================================================


class ToolError(Exception):
    """Base class for errors raised by the tool registry and its handlers."""


class UnknownToolError(ToolError):
    """No tool with the requested name is registered."""

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: '{tool_name}'")
        self.tool_name = tool_name


class ArgumentError(ToolError):
    """A required argument is missing or an argument failed type coercion."""

    def __init__(self, tool_name: str, parameter: str, message: str):
        super().__init__(f"{tool_name}: invalid argument '{parameter}': {message}")
        self.tool_name = tool_name
        self.parameter = parameter


class ConfigurationError(ToolError):
    """Required configuration is missing or malformed."""


class CompletionTimeoutError(ToolError):
    """The completion stream did not finish before its deadline."""

    def __init__(self, timeout: float):
        super().__init__(f"Completion did not finish within {timeout:g} seconds")
        self.timeout = timeout
