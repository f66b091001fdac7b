"""Ollama provider for drafting commit messages with a local model.

Ollama serves an OpenAI-compatible chat API, so requests go through the
OpenAI client pointed at the local endpoint.

Environment:
    LLM_PROVIDER=ollama
    LLM_MODEL=qwen2.5-coder      (defaults to llama3.2)
    OLLAMA_BASE_URL=http://gpu-box:11434/v1
"""

import logging

from openai import AsyncOpenAI

from commit_scribe.providers.base import BaseLLMProvider, ProviderConfig
from commit_scribe.providers.openai_provider import OpenAILLMProvider

logger = logging.getLogger(__name__)

DEFAULT_OLLAMA_BASE_URL = "http://localhost:11434/v1"


class OllamaLLMProvider(OpenAILLMProvider):
    """Completions from a locally running Ollama server."""

    def __init__(self, config: ProviderConfig):
        BaseLLMProvider.__init__(self, config)
        endpoint = config.base_url or DEFAULT_OLLAMA_BASE_URL

        # the key is ignored by Ollama but required by the client
        self._client = AsyncOpenAI(api_key="ollama", base_url=endpoint)
        logger.info(f"Using Ollama at {endpoint} for model {config.model}")
