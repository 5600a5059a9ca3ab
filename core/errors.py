"""Exception types for StronglyTyped."""


class ConfigurationError(ValueError):
    """Session or generator configuration cannot produce a valid session."""


class EmptyCorpusError(ConfigurationError):
    """No corpus word satisfies the configured length bounds."""

    def __init__(self, min_length: int, max_length: int):
        self.min_length = min_length
        self.max_length = max_length
        super().__init__(
            f"No words with length between {min_length} and {max_length} "
            "in corpus"
        )


class SessionInvariantError(RuntimeError):
    """Internal session state violated one of its invariants."""


__all__ = ["ConfigurationError", "EmptyCorpusError", "SessionInvariantError"]
