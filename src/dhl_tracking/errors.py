"""
Exceptions raised while turning a DHL tracking page into a TrackingStatus.

Every error carries the pipeline ``stage`` that produced it so callers of
``parse_tracking_page`` can tell a changed page layout from a changed payload.
"""

from typing import Optional


class DHLTrackingError(Exception):
    """Base exception for everything raised by this package."""

    stage: Optional[str] = None

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"[{self.stage}] {self.message} | Details: {self.details}"
        return f"[{self.stage}] {self.message}"


class ExtractionError(DHLTrackingError):
    """The embedded state could not be located in the HTML."""

    stage = "extract"


class PatternNotFoundError(ExtractionError):
    def __init__(self):
        super().__init__("No 'initialState: JSON.parse(...)' assignment found in page")


class MalformedLiteralError(ExtractionError):
    def __init__(self, captured: str):
        super().__init__(
            "Captured JSON literal is too short to strip its quotes",
            {"captured": captured},
        )
        self.captured = captured


class DecodeError(DHLTrackingError):
    """The extracted JSON could not be mapped onto the tracking schema."""

    stage = "decode"


class InvalidJsonError(DecodeError):
    def __init__(self, reason: str, line: int = None, column: int = None):
        super().__init__(f"Invalid JSON: {reason}", {"line": line, "column": column})
        self.line = line
        self.column = column


class SchemaViolationError(DecodeError):
    def __init__(self, path: str, reason: str, errors: list = None):
        super().__init__(f"Schema violation at {path}: {reason}", {"path": path})
        self.path = path
        self.errors = errors or []


class FetchError(DHLTrackingError):
    """The tracking page could not be retrieved."""

    stage = "fetch"

    def __init__(self, message: str, url: str, status_code: int = None):
        details = {"url": url}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code
