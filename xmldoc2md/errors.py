"""Exceptions raised by the documentation pipeline."""


class MissingConfigurationError(ValueError):
    """Raised before generation when input or output folders are not configured."""


class ExtractionError(Exception):
    """Raised when a source file cannot be scanned for declarations."""

    def __init__(self, path: str, message: str, line: int | None = None) -> None:
        """Record the offending file and, when known, the line number."""
        self.path = path
        self.line = line
        where = f"{path}:{line}" if line is not None else path
        super().__init__(f"{where}: {message}")


class TagMarkupError(ValueError):
    """Raised when documentation tag markup is not well-formed."""
