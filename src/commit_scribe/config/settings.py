import re
from dataclasses import dataclass
from functools import lru_cache

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from commit_scribe.core.types import ApiType, PromptModule
from commit_scribe.i18n import TRANSLATIONS, resolve_locale

AZURE_DEPLOYMENT_REGEX = re.compile(r"^[a-zA-Z0-9]+([-_][a-zA-Z0-9]+)*[a-zA-Z0-9]$")


@dataclass(frozen=True)
class CommitConfig:
    """Read-only configuration snapshot for one generation run."""

    max_input_tokens: int = 4096
    max_output_tokens: int = 500
    emoji: bool = False
    description: bool = False
    issue_enabled: bool = False
    issue_prefix: str = ""
    language: str = "en"
    prompt_module: PromptModule = PromptModule.CONVENTIONAL_COMMIT

    def format_issue_id(self, issue_id: str) -> str:
        issue_id = issue_id.strip()
        if issue_id and self.issue_prefix and not issue_id.startswith(self.issue_prefix):
            return f"{self.issue_prefix}{issue_id}"
        return issue_id


class AISettings(BaseSettings):
    """Supports: OpenAI (default), Azure OpenAI, Ollama, Anthropic."""

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    llm_provider: str = Field(default="openai")
    llm_model: str = Field(default="gpt-4o-mini")
    llm_temperature: float = Field(default=0.0, ge=0.0, le=2.0)

    openai_api_key: SecretStr = Field(default=SecretStr(""))
    openai_base_url: str | None = Field(default=None)
    openai_api_type: ApiType = Field(default=ApiType.OPENAI)
    azure_deployment: str | None = Field(default=None)
    azure_api_version: str = Field(default="2023-07-01-preview")
    ollama_base_url: str = Field(default="http://localhost:11434/v1")
    anthropic_api_key: SecretStr = Field(default=SecretStr(""))

    max_concurrent_requests: int | None = Field(default=None, gt=0, le=100)

    @field_validator("azure_deployment")
    @classmethod
    def validate_azure_deployment(cls, v: str | None) -> str | None:
        if v and not AZURE_DEPLOYMENT_REGEX.match(v):
            raise ValueError(
                f"{v} is not a valid deployment name, it should only include "
                "alphanumeric characters, '_' and '-', and can't end with '_' or '-'"
            )
        return v


class GenerationSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="COMMIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    tokens_max_input: int = Field(default=4096, gt=0)
    tokens_max_output: int = Field(default=500, gt=0)
    emoji: bool = Field(default=False)
    description: bool = Field(default=False)
    issue_enabled: bool = Field(default=False)
    issue_prefix: str = Field(default="")
    language: str = Field(default="en")
    prompt_module: PromptModule = Field(default=PromptModule.CONVENTIONAL_COMMIT)
    pacing_seconds: float = Field(default=2.0, ge=0.0)

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        locale = resolve_locale(v)
        if locale is None:
            raise ValueError(
                f"{v} is not supported yet, use one of: {', '.join(sorted(TRANSLATIONS))}"
            )
        return locale

    @model_validator(mode="after")
    def enable_issue_with_prefix(self) -> "GenerationSettings":
        if self.issue_prefix:
            self.issue_enabled = True
        return self

    def snapshot(self) -> CommitConfig:
        return CommitConfig(
            max_input_tokens=self.tokens_max_input,
            max_output_tokens=self.tokens_max_output,
            emoji=self.emoji,
            description=self.description,
            issue_enabled=self.issue_enabled,
            issue_prefix=self.issue_prefix,
            language=self.language,
            prompt_module=self.prompt_module,
        )


class Settings(BaseSettings):
    """Composed settings with flat property access for common values."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ai: AISettings = Field(default_factory=AISettings)
    generation: GenerationSettings = Field(default_factory=GenerationSettings)

    @property
    def openai_api_key(self) -> str:
        return self.ai.openai_api_key.get_secret_value()

    @property
    def llm_model(self) -> str:
        return self.ai.llm_model

    @property
    def llm_temperature(self) -> float:
        return self.ai.llm_temperature

    @property
    def max_concurrent_requests(self) -> int | None:
        return self.ai.max_concurrent_requests

    @property
    def pacing_seconds(self) -> float:
        return self.generation.pacing_seconds

    def commit_config(self) -> CommitConfig:
        return self.generation.snapshot()


@lru_cache
def get_settings() -> Settings:
    return Settings()
