"""Helper utilities for Convergent.

This module provides utility functions for common tasks in Convergent runs,
including JSON extraction from LLM responses.

Exports:
    extract_json: Extract and parse JSON from text with markdown or prose.
    JSONExtractionError: Base class for extraction failures.
    JSONNotFoundError: Raised when the text contains no JSON-like span.
    JSONParseError: Raised when a candidate span was found but is not valid JSON.
"""

from convergent.helpers.errors import JSONExtractionError, JSONNotFoundError, JSONParseError
from convergent.helpers.json import extract_json

__all__ = ["JSONExtractionError", "JSONNotFoundError", "JSONParseError", "extract_json"]
