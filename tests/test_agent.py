import sys

from agent.prompt import get_translator_prompt
from agent.translator_agent import server_command
from core.languages import SUPPORTED_LANGUAGES


def test_server_command_uses_current_interpreter() -> None:
    command, args = server_command()
    assert command == sys.executable
    assert args == ["-m", "tools.mcp_server"]


def test_prompt_names_every_tool() -> None:
    prompt = get_translator_prompt()
    for tool_name in ("TranslateTool", "GetSupportedLanguages", "Add", "CalculateRectangleArea", "Greet"):
        assert tool_name in prompt


def test_prompt_lists_supported_languages() -> None:
    prompt = get_translator_prompt()
    for language in SUPPORTED_LANGUAGES:
        assert f"{language.name} ({language.code})" in prompt
