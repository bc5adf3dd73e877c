"""Errors raised at the API boundary before or around analysis.

The analyzers themselves never raise on string input; these cover caller-side
precondition violations and document decoding failures.
"""


class AnalyzerError(Exception):
    """Base class for errors reported to the client as a failed request."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InputTooShortError(AnalyzerError):
    def __init__(self, field: str, minimum: int) -> None:
        super().__init__(
            f"{field} is too short. Please provide at least {minimum} characters."
        )
        self.field = field
        self.minimum = minimum


class UnsupportedDocumentFormatError(AnalyzerError):
    def __init__(self, content_type: str | None) -> None:
        super().__init__(
            f"Unsupported file type: {content_type or 'unknown'}. "
            "Only PDF, DOCX, DOC, and TXT files are allowed"
        )
        self.content_type = content_type


class DocumentDecodeError(AnalyzerError):
    """The document could not be turned into usable plain text."""


class UploadTooLargeError(AnalyzerError):
    def __init__(self, limit_mb: int) -> None:
        super().__init__(f"File too large. Max size: {limit_mb}MB")
        self.limit_mb = limit_mb
