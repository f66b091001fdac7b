"""Tests for LLM providers and the provider factory."""

import asyncio

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from commit_scribe.config import AISettings, GenerationSettings, Settings
from commit_scribe.core.errors import ConfigurationError, GenerationError, UnauthorizedError
from commit_scribe.providers import BaseLLMProvider, ProviderConfig, get_llm_provider
from commit_scribe.providers.anthropic_provider import AnthropicLLMProvider
from commit_scribe.providers.openai_provider import AzureOpenAILLMProvider, OpenAILLMProvider


class StatusError(Exception):
    def __init__(self, message, status_code):
        super().__init__(message)
        self.status_code = status_code


def make_settings(**ai_kwargs) -> Settings:
    return Settings(ai=AISettings(**ai_kwargs), generation=GenerationSettings())


def completion(content):
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    return response


# ============================================================================
# Factory Tests
# ============================================================================

class TestGetLLMProvider:
    """Tests for get_llm_provider."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ("LLM_PROVIDER", "LLM_MODEL", "OPENAI_API_TYPE", "MAX_CONCURRENT_REQUESTS"):
            monkeypatch.delenv(name, raising=False)

    def test_openai_provider(self):
        with patch("commit_scribe.providers.openai_provider.AsyncOpenAI"):
            llm = get_llm_provider(settings=make_settings(openai_api_key="sk-test"))

        assert isinstance(llm, OpenAILLMProvider)
        assert llm.config.api_key == "sk-test"
        assert llm.config.model == "gpt-4o-mini"
        assert llm.config.max_tokens == 500

    def test_unknown_provider(self):
        with pytest.raises(ConfigurationError) as exc_info:
            get_llm_provider(provider="mystery", settings=make_settings())

        assert "Unknown LLM provider: mystery" in str(exc_info.value)

    def test_missing_openai_key(self):
        with pytest.raises(ConfigurationError) as exc_info:
            get_llm_provider(provider="openai", settings=make_settings(openai_api_key=""))

        assert "OPENAI_API_KEY" in str(exc_info.value)

    def test_azure_requires_base_url(self):
        settings = make_settings(openai_api_key="sk-test", openai_base_url=None)

        with pytest.raises(ConfigurationError):
            get_llm_provider(provider="azure", settings=settings)

    def test_azure_selected_by_api_type(self):
        settings = make_settings(
            openai_api_key="sk-test",
            openai_api_type="azure",
            openai_base_url="https://example.openai.azure.com",
            azure_deployment="commit-gpt",
        )

        with patch("commit_scribe.providers.openai_provider.AsyncAzureOpenAI") as azure_class:
            llm = get_llm_provider(settings=settings)

        assert isinstance(llm, AzureOpenAILLMProvider)
        assert llm.config.model == "commit-gpt"
        assert azure_class.call_args.kwargs["azure_deployment"] == "commit-gpt"

    def test_ollama_default_model(self):
        llm = get_llm_provider(provider="ollama", settings=make_settings())

        assert llm.config.model == "llama3.2"
        assert llm.config.api_key is None

    def test_concurrency_cap_is_applied(self):
        settings = make_settings(openai_api_key="sk-test", max_concurrent_requests=3)

        with patch("commit_scribe.providers.openai_provider.AsyncOpenAI"):
            llm = get_llm_provider(settings=settings)

        assert isinstance(llm._semaphore, asyncio.Semaphore)

    def test_no_concurrency_cap_by_default(self):
        with patch("commit_scribe.providers.openai_provider.AsyncOpenAI"):
            llm = get_llm_provider(settings=make_settings(openai_api_key="sk-test"))

        assert llm._semaphore is None


# ============================================================================
# Base Provider Tests
# ============================================================================

class RecordingProvider(BaseLLMProvider):
    def __init__(self, config):
        super().__init__(config)
        self.in_flight = 0
        self.peak = 0
        self.calls = []

    async def _complete_impl(self, messages, max_tokens, temperature):
        self.calls.append((max_tokens, temperature))
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)
        await asyncio.sleep(0.01)
        self.in_flight -= 1
        return "done"


class TestBaseLLMProvider:
    """Tests for BaseLLMProvider defaults and concurrency."""

    @pytest.fixture
    def provider(self):
        return RecordingProvider(ProviderConfig(provider="test", model="m", temperature=0.3, max_tokens=42))

    @pytest.mark.asyncio
    async def test_defaults_from_config(self, provider):
        await provider.complete([{"role": "user", "content": "hi"}])

        assert provider.calls == [(42, 0.3)]

    @pytest.mark.asyncio
    async def test_explicit_zero_temperature(self, provider):
        await provider.complete([{"role": "user", "content": "hi"}], max_tokens=10, temperature=0.0)

        assert provider.calls == [(10, 0.0)]

    @pytest.mark.asyncio
    async def test_unbounded_by_default(self, provider):
        await asyncio.gather(*(provider.complete([]) for _ in range(5)))

        assert provider.peak == 5

    @pytest.mark.asyncio
    async def test_set_concurrency(self, provider):
        provider.set_concurrency(2)

        await asyncio.gather(*(provider.complete([]) for _ in range(5)))

        assert provider.peak == 2


# ============================================================================
# OpenAI Provider Tests
# ============================================================================

class TestOpenAILLMProvider:
    """Tests for OpenAILLMProvider class."""

    @pytest.fixture
    def mock_openai_client(self):
        return AsyncMock()

    @pytest.fixture
    def provider(self, mock_openai_client):
        with patch("commit_scribe.providers.openai_provider.AsyncOpenAI") as mock_class:
            mock_class.return_value = mock_openai_client
            llm = OpenAILLMProvider(ProviderConfig(provider="openai", model="gpt-4o-mini", api_key="sk"))
            llm._client = mock_openai_client
            return llm

    @pytest.mark.asyncio
    async def test_complete(self, provider, mock_openai_client):
        mock_openai_client.chat.completions.create = AsyncMock(
            return_value=completion("  feat: add thing \n")
        )

        result = await provider.complete([{"role": "user", "content": "diff"}], max_tokens=100)

        assert result == "feat: add thing"
        kwargs = mock_openai_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["max_tokens"] == 100
        assert kwargs["temperature"] == 0.0

    @pytest.mark.asyncio
    async def test_missing_content(self, provider, mock_openai_client):
        mock_openai_client.chat.completions.create = AsyncMock(return_value=completion(None))

        assert await provider.complete([{"role": "user", "content": "diff"}]) == ""

    @pytest.mark.asyncio
    async def test_unauthorized(self, provider, mock_openai_client):
        error = StatusError("invalid api key", status_code=401)
        mock_openai_client.chat.completions.create = AsyncMock(side_effect=error)

        with pytest.raises(UnauthorizedError) as exc_info:
            await provider.complete([{"role": "user", "content": "diff"}])

        assert exc_info.value.cause is error
        assert exc_info.value.provider == "openai"

    @pytest.mark.asyncio
    async def test_upstream_failure(self, provider, mock_openai_client):
        mock_openai_client.chat.completions.create = AsyncMock(
            side_effect=StatusError("overloaded", status_code=503)
        )

        with pytest.raises(GenerationError) as exc_info:
            await provider.complete([{"role": "user", "content": "diff"}])

        assert not isinstance(exc_info.value, UnauthorizedError)
        assert mock_openai_client.chat.completions.create.await_count == 1


# ============================================================================
# Anthropic Provider Tests
# ============================================================================

class TestAnthropicLLMProvider:
    """Tests for AnthropicLLMProvider class."""

    @pytest.fixture
    def mock_anthropic_client(self):
        return AsyncMock()

    @pytest.fixture
    def provider(self, mock_anthropic_client):
        with patch(
            "commit_scribe.providers.anthropic_provider._get_anthropic_client",
            return_value=mock_anthropic_client,
        ):
            return AnthropicLLMProvider(
                ProviderConfig(provider="anthropic", model="claude-3-5-haiku-20241022", api_key="sk-ant")
            )

    @pytest.mark.asyncio
    async def test_system_messages_are_lifted(self, provider, mock_anthropic_client):
        block = MagicMock(type="text", text=" fix: handle port ")
        mock_anthropic_client.messages.create = AsyncMock(return_value=MagicMock(content=[block]))
        messages = [
            {"role": "system", "content": "be brief"},
            {"role": "user", "content": "example"},
            {"role": "assistant", "content": "feat: example"},
            {"role": "user", "content": "diff"},
        ]

        result = await provider.complete(messages, max_tokens=64)

        assert result == "fix: handle port"
        kwargs = mock_anthropic_client.messages.create.call_args.kwargs
        assert kwargs["system"] == "be brief"
        assert [m["role"] for m in kwargs["messages"]] == ["user", "assistant", "user"]

    @pytest.mark.asyncio
    async def test_upstream_failure(self, provider, mock_anthropic_client):
        mock_anthropic_client.messages.create = AsyncMock(side_effect=StatusError("bad key", 401))

        with pytest.raises(UnauthorizedError):
            await provider.complete([{"role": "user", "content": "diff"}])
