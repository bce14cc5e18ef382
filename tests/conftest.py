"""
Shared fixtures for the tool tests.

Nothing here talks to a real model.  `make_source` builds fragment sources
that replay a fixed list of fragments, optionally failing part-way or
sleeping between fragments, so the completion adapter and TranslateTool can
be exercised end to end without a network.
"""

import asyncio
from typing import List, Optional

import pytest

from core.completion import CompletionAdapter
from core.registry import build_registry


class ScriptedSource:
    """A FragmentSource that replays `fragments` and records each prompt."""

    def __init__(
        self,
        fragments: List[str],
        fail_at: Optional[int] = None,
        delay: float = 0.0,
        error: Optional[Exception] = None,
    ):
        self.fragments = fragments
        self.fail_at = fail_at
        self.error = error or ConnectionError("stream dropped")
        self.delay = delay
        self.prompts: List[str] = []

    async def stream(self, prompt: str):
        self.prompts.append(prompt)
        for index, fragment in enumerate(self.fragments):
            if self.fail_at is not None and index == self.fail_at:
                raise self.error
            if self.delay:
                await asyncio.sleep(self.delay)
            yield fragment


@pytest.fixture()
def make_source():
    return ScriptedSource


@pytest.fixture()
def hola_source():
    return ScriptedSource(["Hol", "a"])


@pytest.fixture()
def registry(hola_source):
    return build_registry(CompletionAdapter(hola_source))
