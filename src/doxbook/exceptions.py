"""Custom exceptions for the documentation pipeline."""


class DoxError(Exception):
    """Base exception for all doxbook errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConfigurationError(DoxError):
    """Raised when plugin configuration or book files are invalid."""

    def __init__(self, message: str, errors: list | None = None, *args, **kwargs):
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)


class ExtractionError(DoxError):
    """Raised when a single source file cannot be turned into a document."""

    def __init__(self, message: str, path: str | None = None, *args, **kwargs):
        self.path = path
        super().__init__(message, *args, **kwargs)


class CommentSyntaxError(ExtractionError):
    """Raised when a doc comment is malformed."""

    def __init__(self, message: str, line: int, *args, **kwargs):
        self.line = line
        super().__init__(f"line {line}: {message}", *args, **kwargs)


class RenderError(ExtractionError):
    """Raised when parsed comments cannot be rendered."""

    pass


class SummaryError(DoxError):
    """Raised when the book summary cannot receive new articles."""

    pass


class StageError(DoxError):
    """Raised when a pipeline stage fails."""

    def __init__(self, stage: str, message: str, *args, **kwargs):
        self.stage = stage
        super().__init__(message, *args, **kwargs)


class OutputCollisionError(DoxError):
    """Raised when two source files would be written to the same document."""

    def __init__(
        self, message: str, path: str | None = None, sources: list | None = None, *args, **kwargs
    ):
        self.path = path
        self.sources = sources or []
        super().__init__(message, *args, **kwargs)
