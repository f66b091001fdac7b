from enum import Enum


class Role(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class PromptModule(str, Enum):
    CONVENTIONAL_COMMIT = "conventional-commit"


class ApiType(str, Enum):
    OPENAI = "openai"
    AZURE = "azure"


class GenerationMode(str, Enum):
    DIRECT = "direct"
    CHUNKED = "chunked"
