import asyncio
import json

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from core.completion import CompletionAdapter
from core.config import Settings
from core.models import ToolDescriptor
from core.registry import build_registry
from tools import mcp_server
from tools.mcp_server import build_tool_registry, create_server


@pytest.fixture()
def server(registry):
    return create_server(registry, name="test-tools")


def call(server, tool_name, arguments=None):
    async def run():
        async with Client(server) as client:
            return await client.call_tool(tool_name, arguments or {})

    return asyncio.run(run())


def text_of(result) -> str:
    return result.content[0].text


def test_server_advertises_all_tools(server) -> None:
    async def run():
        async with Client(server) as client:
            return await client.list_tools()

    tools = {tool.name: tool for tool in asyncio.run(run())}

    assert set(tools) == {
        "Add",
        "Greet",
        "CalculateRectangleArea",
        "TranslateTool",
        "GetSupportedLanguages",
    }
    translate = tools["TranslateTool"]
    assert translate.description == "Translates text from one language to another using AI Agent"
    assert set(translate.inputSchema["required"]) == {"text", "targetLanguage"}
    assert "sourceLanguage" in translate.inputSchema["properties"]


def test_add_over_mcp(server) -> None:
    assert text_of(call(server, "Add", {"a": 2, "b": 3})) == "5"


def test_greet_over_mcp(server) -> None:
    assert text_of(call(server, "Greet", {"name": "Ada"})) == "Hello, Ada! Welcome to MCP on Azure Functions."
    assert text_of(call(server, "Greet")) == "Hello, ! Welcome to MCP on Azure Functions."


def test_translate_over_mcp(server, hola_source) -> None:
    result = call(server, "TranslateTool", {"text": "Hello", "targetLanguage": "es"})

    assert text_of(result) == "Hola"
    assert hola_source.prompts == ["Translate the following text to es:\n\nHello"]


def test_supported_languages_over_mcp(server) -> None:
    document = json.loads(text_of(call(server, "GetSupportedLanguages")))
    assert len(document["languages"]) == 15


def test_upstream_failure_surfaces_as_tool_error(make_source) -> None:
    registry = build_registry(CompletionAdapter(make_source(["Hol", "a"], fail_at=1)))
    server = create_server(registry)

    with pytest.raises(ToolError):
        call(server, "TranslateTool", {"text": "Hello", "targetLanguage": "es"})


def test_unconfigured_translation_keeps_other_tools_working() -> None:
    server = create_server(build_tool_registry(Settings()))

    assert text_of(call(server, "Add", {"a": 1, "b": 1})) == "2"
    with pytest.raises(ToolError, match="not configured"):
        call(server, "TranslateTool", {"text": "Hello", "targetLanguage": "es"})


def test_create_server_refuses_tools_without_a_wrapper(registry) -> None:
    registry.register(ToolDescriptor("Subtract", "Subtracts two numbers"), lambda: 0)

    with pytest.raises(ValueError, match="Subtract"):
        create_server(registry)


def test_server_logger_is_outside_sdk_namespace() -> None:
    assert mcp_server.logger.name == "tools.mcp_server"
