"""Custom exceptions for the structuring context."""

from typing import Iterable, Optional


class EmptyContentError(ValueError):
    """
    Exception raised when raw input has no non-blank lines after trimming.

    Fatal to the invocation and surfaced to the caller; never retried internally.

    Attributes:
        message: Error description
        raw_length: Length of the raw input that produced no lines
    """

    def __init__(self, message: str = "Document content is empty", raw_length: int = 0):
        self.message = message
        self.raw_length = raw_length

        parts = [message]
        if raw_length:
            parts.append(f"(received {raw_length} characters of whitespace only)")

        super().__init__(" ".join(parts))


class UnsupportedDocumentTypeError(ValueError):
    """
    Exception raised when a document type outside the declared enum is requested.

    This is a contract error on the caller's side, not a runtime condition.

    Attributes:
        value: The rejected document type value
        supported: Values that would have been accepted
    """

    def __init__(self, value: object, supported: Optional[Iterable[str]] = None):
        self.value = value
        self.supported = list(supported or [])

        message = f"Unsupported document type: {value!r}"
        if self.supported:
            message += f". Supported types: {', '.join(self.supported)}"

        super().__init__(message)
