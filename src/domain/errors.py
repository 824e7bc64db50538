"""Domain errors raised by the budget pipeline."""


class SourceLoadError(RuntimeError):
    """Raised when a remote or local budget source cannot be read.

    Attributes:
        source: URL or path of the source that failed.
    """

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Failed to load {source}: {reason}")
        self.source = source
        self.reason = reason


class ConfigurationError(ValueError):
    """Raised when settings select an unsupported source or column."""


__all__ = ["SourceLoadError", "ConfigurationError"]
