"""Model transport for lesson generation: Ollama (default), Claude, OpenAI."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from . import constants

logger = logging.getLogger(__name__)

LESSON_TEMPERATURE = 0.5


class LLMClient(ABC):
    """Abstract base for LLM API clients."""

    @abstractmethod
    def complete(
        self, system_prompt: str, user_message: str, max_tokens: int = 4096
    ) -> str:
        """Send a prompt to the LLM and return the raw text response."""
        ...


class ClaudeLLMClient(LLMClient):
    """Wraps anthropic.Anthropic() with lazy import and DI."""

    _LAZY_IMPORT = object()

    def __init__(
        self, model: str = "claude-sonnet-4-20250514", client: Any = _LAZY_IMPORT
    ):
        if client is ClaudeLLMClient._LAZY_IMPORT:
            import anthropic

            self._client = anthropic.Anthropic()
        else:
            self._client = client
        self._model = model

    def complete(
        self, system_prompt: str, user_message: str, max_tokens: int = 4096
    ) -> str:
        logger.debug(
            "ClaudeLLMClient.complete: model=%s, max_tokens=%d", self._model, max_tokens
        )
        response = self._client.messages.create(
            model=self._model,
            max_tokens=max_tokens,
            temperature=LESSON_TEMPERATURE,
            system=system_prompt,
            messages=[{"role": "user", "content": user_message}],
        )
        return "".join(
            block.text for block in response.content if getattr(block, "type", "text") == "text"
        )


class _ChatCompletionsClient(LLMClient):
    """Shared ``chat.completions`` call for OpenAI-compatible endpoints."""

    def __init__(self, model: str, client: Any):
        self._client = client
        self._model = model

    def complete(
        self, system_prompt: str, user_message: str, max_tokens: int = 4096
    ) -> str:
        logger.info(
            "%s.complete: model=%s, max_tokens=%d",
            type(self).__name__,
            self._model,
            max_tokens,
        )
        response = self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
            max_tokens=max_tokens,
            temperature=LESSON_TEMPERATURE,
        )
        return response.choices[0].message.content or ""


class OpenAILLMClient(_ChatCompletionsClient):
    """Wraps openai.OpenAI() with lazy import and DI."""

    _LAZY_IMPORT = object()

    def __init__(self, model: str = "gpt-4o", client: Any = _LAZY_IMPORT):
        if client is OpenAILLMClient._LAZY_IMPORT:
            import openai

            client = openai.OpenAI()
        super().__init__(model, client)


class OllamaLLMClient(_ChatCompletionsClient):
    """Talks to a local Ollama server through its OpenAI-compatible API."""

    _LAZY_IMPORT = object()

    def __init__(
        self,
        model: str = constants.DEFAULT_OLLAMA_MODEL,
        client: Any = _LAZY_IMPORT,
        base_url: str = constants.DEFAULT_OLLAMA_URL,
    ):
        if client is OllamaLLMClient._LAZY_IMPORT:
            import openai

            client = openai.OpenAI(base_url=ollama_api_url(base_url), api_key="ollama")
        super().__init__(model, client)


def ollama_api_url(server_url: str) -> str:
    """``http://host:11434`` -> ``http://host:11434/v1``."""
    url = server_url.rstrip("/")
    return url if url.endswith("/v1") else f"{url}/v1"


def get_llm_client(
    provider: str = constants.DEFAULT_PROVIDER,
    model: str = "",
    client: Any = None,
    base_url: str = "",
) -> LLMClient:
    """Factory for LLM clients.

    Args:
        provider: "ollama", "claude", or "openai"
        model: Model name override (empty string = use default)
        client: Pre-built API client for DI/testing
        base_url: Ollama server URL (empty string = use default)
    """
    kwargs: dict[str, Any] = {}
    if model:
        kwargs["model"] = model
    if client is not None:
        kwargs["client"] = client

    if provider == "ollama":
        if base_url:
            kwargs["base_url"] = base_url
        return OllamaLLMClient(**kwargs)

    if provider == "claude":
        return ClaudeLLMClient(**kwargs)

    if provider == "openai":
        return OpenAILLMClient(**kwargs)

    raise ValueError(f"Unknown LLM provider: {provider}")
