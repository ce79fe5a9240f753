"""Tests for tutor.llm_client."""

from __future__ import annotations

import pytest

from tutor.llm_client import (
    ClaudeLLMClient,
    LLMClient,
    OllamaLLMClient,
    OpenAILLMClient,
    get_llm_client,
    ollama_api_url,
)


class FakeAnthropicResponse:
    """Mimics anthropic message response structure."""

    def __init__(self, text: str):
        self.content = [type("Block", (), {"type": "text", "text": text})()]


class FakeAnthropicClient:
    """Fake anthropic.Anthropic() for testing."""

    def __init__(self):
        self.messages = self
        self.last_call = {}

    def create(self, **kwargs):
        self.last_call = kwargs
        return FakeAnthropicResponse("fake claude response")


class FakeOpenAIResponse:
    """Mimics openai chat completion response structure."""

    def __init__(self, text):
        self.choices = [
            type("Choice", (), {"message": type("Msg", (), {"content": text})()})()
        ]


class FakeOpenAIClient:
    """Fake openai.OpenAI() for testing."""

    def __init__(self, text="fake openai response"):
        self.chat = type("Chat", (), {"completions": self})()
        self.last_call = {}
        self._text = text

    def create(self, **kwargs):
        self.last_call = kwargs
        return FakeOpenAIResponse(self._text)


class TestClaudeLLMClient:
    def test_complete_with_injected_client(self):
        fake = FakeAnthropicClient()
        client = ClaudeLLMClient(client=fake)
        result = client.complete("sys prompt", "user msg", max_tokens=512)

        assert result == "fake claude response"
        assert fake.last_call["system"] == "sys prompt"
        assert fake.last_call["max_tokens"] == 512
        assert fake.last_call["temperature"] == 0.5
        assert fake.last_call["messages"] == [{"role": "user", "content": "user msg"}]


class TestOllamaLLMClient:
    def test_complete_with_injected_client(self):
        fake = FakeOpenAIClient()
        client = OllamaLLMClient(client=fake)
        result = client.complete("sys prompt", "user msg", max_tokens=7000)

        assert result == "fake openai response"
        assert fake.last_call["model"] == "qwen2.5-coder:7b"
        assert fake.last_call["max_tokens"] == 7000
        messages = fake.last_call["messages"]
        assert messages[0] == {"role": "system", "content": "sys prompt"}
        assert messages[1] == {"role": "user", "content": "user msg"}

    def test_empty_content_becomes_empty_text(self):
        client = OllamaLLMClient(client=FakeOpenAIClient(text=None))
        assert client.complete("s", "u") == ""

    @pytest.mark.parametrize(
        "server, expected",
        [
            ("http://localhost:11434", "http://localhost:11434/v1"),
            ("http://gpu-box:11434/", "http://gpu-box:11434/v1"),
            ("http://gpu-box:11434/v1", "http://gpu-box:11434/v1"),
        ],
    )
    def test_api_url(self, server, expected):
        assert ollama_api_url(server) == expected


class TestOpenAILLMClient:
    def test_custom_model(self):
        fake = FakeOpenAIClient()
        client = OpenAILLMClient(model="gpt-4o-mini", client=fake)
        client.complete("s", "u")
        assert fake.last_call["model"] == "gpt-4o-mini"


class TestGetLLMClient:
    def test_ollama_is_default(self):
        client = get_llm_client(client=FakeOpenAIClient())
        assert isinstance(client, OllamaLLMClient)

    def test_claude(self):
        client = get_llm_client(provider="claude", client=FakeAnthropicClient())
        assert isinstance(client, ClaudeLLMClient)
        assert isinstance(client, LLMClient)

    def test_openai_with_model(self):
        fake = FakeOpenAIClient()
        client = get_llm_client(provider="openai", model="custom-model", client=fake)
        assert isinstance(client, OpenAILLMClient)
        client.complete("s", "u")
        assert fake.last_call["model"] == "custom-model"

    def test_unknown_provider_raises(self):
        with pytest.raises(ValueError, match="Unknown LLM provider"):
            get_llm_client(provider="gemini")
