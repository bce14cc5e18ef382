# =============================================================================
# agent/translator_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the demo agent: an ADK Agent whose reasoning model is reached
#   through LiteLlm and whose tools come from our FastMCP server.
#
# HOW IT FITS TOGETHER:
#
#   ┌───────────────────────────────┐        stdio        ┌────────────────────┐
#   │  Google ADK Agent             │ ──────────────────▶ │  FastMCP Server    │
#   │  (LiteLlm reasoning model)    │                     │  tools/mcp_server  │
#   └───────────────────────────────┘ ◀────────────────── │  • Add             │
#                                         tool results    │  • Greet           │
#                                                         │  • TranslateTool   │
#                                                         │  • ...             │
#                                                         └────────────────────┘
#
#   The reasoning model and the translation model are different things.
#   AGENT_MODEL picks the model the agent thinks with; the server's
#   TranslateTool uses its own AZURE_OPENAI_* deployment.
#
# MCP CONNECTION:
#   ADK launches the server as a subprocess with the SAME interpreter that
#   runs the agent, so the subprocess sees the same installed packages.
# =============================================================================

import os
import sys

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_translator_prompt

DEFAULT_AGENT_MODEL = "openrouter/openai/gpt-4o"


def server_command() -> tuple[str, list[str]]:
    """The command that starts the tool server over stdio."""
    return sys.executable, ["-m", "tools.mcp_server"]


def create_agent(model: str | None = None) -> Agent:
    """Create the translator assistant agent.

    Args:
        model: LiteLlm model string.  Defaults to $AGENT_MODEL, then to
            GPT-4o via OpenRouter (LiteLlm reads OPENROUTER_API_KEY itself).

    Returns:
        A configured Google ADK Agent connected to the tool server.
    """
    command, args = server_command()
    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command=command,
            args=args,
            # The child inherits our environment, so AZURE_OPENAI_* settings
            # and the .env values loaded by main.py reach the server.
            env=dict(os.environ),
        ),
    )

    return Agent(
        name="translator_assistant",
        model=LiteLlm(model=model or os.environ.get("AGENT_MODEL", DEFAULT_AGENT_MODEL)),
        instruction=get_translator_prompt(),
        tools=[mcp_tools],
    )
