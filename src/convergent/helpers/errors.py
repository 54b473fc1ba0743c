"""JSON extraction error types.

This module defines the exceptions raised when no valid JSON document can be
pulled out of a piece of text. Both concrete errors derive from ValueError so
callers that already catch ValueError around ``json.loads`` keep working.
"""

PREVIEW_LENGTH = 80


def preview(text: str) -> str:
    """Return a short repr of text suitable for an error message."""
    if len(text) <= PREVIEW_LENGTH:
        return repr(text)
    return repr(text[:PREVIEW_LENGTH]) + f"... ({len(text)} chars)"


class JSONExtractionError(ValueError):
    """Base class for failures to extract JSON from text."""


class JSONNotFoundError(JSONExtractionError):
    """Raised when the text contains no JSON-like span at all.

    Example:
        >>> raise JSONNotFoundError("No JSON object found in text: 'hello'")
        Traceback (most recent call last):
        ...
        JSONNotFoundError: No JSON object found in text: 'hello'
    """


class JSONParseError(JSONExtractionError):
    """Raised when candidate spans were found but none of them parsed.

    Attributes:
        attempts: Mapping of strategy name to the decoder error message it
            produced, in the order the strategies were tried.
    """

    def __init__(self, message: str, attempts: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.attempts = attempts or {}
