# =============================================================================
# core/translation.py  —  The TranslateTool handler
# =============================================================================
#
# Builds an instruction prompt and hands it to whatever can complete it.
# The handler has no opinion about the model: it only needs an object with
#
#     async def complete(prompt: str) -> str
#
# which in production is a CompletionAdapter over LiteLLMChatClient, and in
# tests is a CompletionAdapter over a fake fragment source.
# =============================================================================

import logging
from typing import Awaitable, Optional, Protocol

logger = logging.getLogger(__name__)


class Completer(Protocol):
    def complete(self, prompt: str) -> Awaitable[str]:
        ...


def build_translation_prompt(
    text: str, target_language: str, source_language: Optional[str] = None
) -> str:
    """Instruction prompt for the model.  No source language means auto-detect."""
    if source_language is not None:
        return (
            f"Translate the following text from {source_language} "
            f"to {target_language}:\n\n{text}"
        )
    return f"Translate the following text to {target_language}:\n\n{text}"


async def translate(
    completer: Completer,
    text: str,
    target_language: str,
    source_language: Optional[str] = None,
) -> str:
    """Translate `text` into `target_language` using the completion service.

    Upstream failures propagate unchanged; no partial text is returned.
    """
    logger.info("Translating text to %s", target_language)
    prompt = build_translation_prompt(text, target_language, source_language)
    return await completer.complete(prompt)
