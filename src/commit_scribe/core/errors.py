class CommitScribeError(Exception):
    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.args[0]} (caused by: {self.cause})"
        return str(self.args[0])


class ConfigurationError(CommitScribeError):
    pass


class EmptyDiffError(CommitScribeError):
    pass


class EmptyMessageError(CommitScribeError):
    pass


class TooMuchTokensError(CommitScribeError):
    def __init__(
        self,
        message: str,
        request_tokens: int | None = None,
        limit: int | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause)
        self.request_tokens = request_tokens
        self.limit = limit


class GenerationError(CommitScribeError):
    def __init__(
        self,
        message: str,
        provider: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause)
        self.provider = provider


class UnauthorizedError(GenerationError):
    pass


class GitError(CommitScribeError):
    pass
