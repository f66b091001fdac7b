from functools import lru_cache

import tiktoken

DEFAULT_ENCODING = "cl100k_base"


class TokenEstimator:
    """Estimates the input cost of a text with a tiktoken encoding."""

    def __init__(self, encoding_name: str = DEFAULT_ENCODING):
        self.encoding_name = encoding_name
        self.encoding = tiktoken.get_encoding(encoding_name)

    def count_tokens(self, text: str) -> int:
        if not text:
            return 0
        # Diffs may contain special-token text such as "<|endoftext|>".
        return len(self.encoding.encode(text, disallowed_special=()))

    def __call__(self, text: str) -> int:
        return self.count_tokens(text)


@lru_cache
def get_estimator(encoding_name: str = DEFAULT_ENCODING) -> TokenEstimator:
    return TokenEstimator(encoding_name)


def estimate_tokens(text: str) -> int:
    return get_estimator().count_tokens(text)
