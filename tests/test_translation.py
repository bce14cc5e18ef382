import asyncio

import pytest

from core.completion import CompletionAdapter
from core.translation import build_translation_prompt, translate


def test_prompt_without_source_language() -> None:
    assert build_translation_prompt("Hello", "es") == "Translate the following text to es:\n\nHello"


def test_prompt_with_source_language() -> None:
    assert (
        build_translation_prompt("Hello", "es", "en")
        == "Translate the following text from en to es:\n\nHello"
    )


def test_translate_returns_aggregated_completion(hola_source) -> None:
    result = asyncio.run(translate(CompletionAdapter(hola_source), "Hello", "es"))

    assert result == "Hola"
    assert hola_source.prompts == ["Translate the following text to es:\n\nHello"]


def test_translate_returns_no_text_when_stream_fails(make_source) -> None:
    source = make_source(["Hol", "a"], fail_at=1)
    returned = []

    async def run():
        returned.append(await translate(CompletionAdapter(source), "Hello", "es"))

    with pytest.raises(ConnectionError):
        asyncio.run(run())
    assert returned == []


def test_translate_logs_target_language(hola_source, caplog) -> None:
    with caplog.at_level("INFO", logger="core.translation"):
        asyncio.run(translate(CompletionAdapter(hola_source), "Hello", "fr"))
    assert "Translating text to fr" in caplog.text
