# =============================================================================
# core/completion.py  —  Completion Adapter (prompt in, aggregated text out)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns ONE prompt into ONE string by consuming the model's streamed
#   output.  Two pieces:
#
#     LiteLLMChatClient   talks to the hosted chat-completion deployment and
#                         yields text fragments as they arrive.
#     CompletionAdapter   reads fragments from any FragmentSource, in order,
#                         and returns the joined text once the stream ends.
#
#   This is the Strategy Pattern: the adapter does not know (or
#   care) whether fragments come from litellm, another SDK, or a list in a
#   test.  Tests swap the source; the aggregation logic stays the same.
#
# FAILURE SEMANTICS:
#   - No retry.  If the upstream call fails mid-stream, the exception
#     propagates and whatever was accumulated so far is thrown away.
#   - A deadline (seconds) bounds the whole stream.  When it elapses the
#     stream is abandoned and CompletionTimeoutError is raised.
#   - Cancelling the calling task cancels the stream (asyncio.CancelledError).
#
# WHY litellm?
#   One call signature for every provider.  Azure OpenAI today; pointing the
#   model string somewhere else tomorrow doesn't touch the tools.
# =============================================================================

import asyncio
import logging
from typing import AsyncIterator, Optional, Protocol

import litellm

from core.config import Settings
from core.credentials import CredentialProvider, credential_from_settings
from core.errors import CompletionTimeoutError

logger = logging.getLogger(__name__)

TRANSLATOR_INSTRUCTIONS = (
    "You are a professional translator. Translate text accurately while "
    "preserving meaning, tone, and context. Respond ONLY with the translated "
    "text, nothing else."
)


class FragmentSource(Protocol):
    """Anything that streams a model's answer to a prompt as text fragments."""

    def stream(self, prompt: str) -> AsyncIterator[str]:
        ...


class LiteLLMChatClient:
    """Streams chat completions from an Azure OpenAI deployment via litellm.

    Endpoint, model and credential are fixed at construction and reused by
    every call.  The credential is asked for a token per request; providers
    backed by azure-identity cache tokens, so this does not re-authenticate.
    """

    def __init__(
        self,
        endpoint: str,
        model: str,
        credential: CredentialProvider,
        api_version: str,
        instructions: str = TRANSLATOR_INSTRUCTIONS,
    ):
        self.endpoint = endpoint
        self.model = model
        self.api_version = api_version
        self.instructions = instructions
        self._credential = credential

    def _auth_kwargs(self) -> dict:
        if self._credential.scheme == "api_key":
            return {"api_key": self._credential.get_token()}
        return {"azure_ad_token_provider": self._credential.get_token}

    async def stream(self, prompt: str) -> AsyncIterator[str]:
        response = await litellm.acompletion(
            model=f"azure/{self.model}",
            api_base=self.endpoint,
            api_version=self.api_version,
            messages=[
                {"role": "system", "content": self.instructions},
                {"role": "user", "content": prompt},
            ],
            stream=True,
            **self._auth_kwargs(),
        )
        try:
            async for chunk in response:
                if not chunk.choices:
                    continue
                content = getattr(chunk.choices[0].delta, "content", None)
                if content:
                    yield content
        finally:
            # Abandoned by a deadline or a cancellation: release the connection.
            aclose = getattr(response, "aclose", None)
            if aclose is not None:
                await aclose()


class CompletionAdapter:
    """Aggregates a FragmentSource's stream into a single string."""

    def __init__(self, source: FragmentSource, timeout: Optional[float] = None):
        self.source = source
        self.timeout = timeout

    async def complete(self, prompt: str, timeout: Optional[float] = None) -> str:
        """Return the full text for `prompt`.

        Args:
            prompt: The user prompt sent to the model.
            timeout: Deadline in seconds for this call.  Falls back to the
                adapter's default; when both are None the call may wait as
                long as the stream stays open.

        Raises:
            CompletionTimeoutError: the deadline elapsed before the stream ended.
            Exception: any upstream failure, unchanged.
        """
        deadline = timeout if timeout is not None else self.timeout
        if deadline is None:
            return await self._collect(prompt)

        # A TimeoutError raised by the stream itself is an upstream failure,
        # not our deadline, and must reach the caller unchanged.
        upstream_timed_out = False

        async def collect() -> str:
            nonlocal upstream_timed_out
            try:
                return await self._collect(prompt)
            except asyncio.TimeoutError:
                upstream_timed_out = True
                raise

        try:
            return await asyncio.wait_for(collect(), deadline)
        except asyncio.TimeoutError as e:
            if upstream_timed_out:
                raise
            logger.warning("Completion abandoned after %gs", deadline)
            raise CompletionTimeoutError(deadline) from e

    async def _collect(self, prompt: str) -> str:
        parts: list[str] = []
        fragments = self.source.stream(prompt)
        try:
            async for fragment in fragments:
                parts.append(fragment)
        finally:
            aclose = getattr(fragments, "aclose", None)
            if aclose is not None:
                await aclose()
        logger.debug("Completion finished: %d fragments", len(parts))
        return "".join(parts)


def create_completion_adapter(settings: Settings) -> CompletionAdapter:
    """Wire the production chain: credential -> litellm client -> adapter.

    Raises:
        ConfigurationError: endpoint, model or credential settings are missing.
    """
    settings.require_translation()
    client = LiteLLMChatClient(
        endpoint=settings.endpoint,
        model=settings.model,
        credential=credential_from_settings(settings),
        api_version=settings.api_version,
    )
    logger.info("Completion client ready: %s (%s)", settings.model, settings.endpoint)
    return CompletionAdapter(client, timeout=settings.completion_timeout)
