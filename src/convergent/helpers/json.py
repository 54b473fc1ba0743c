"""JSON extraction from LLM responses.

This module provides utilities for extracting and parsing JSON from text
that may be wrapped in markdown code fences or surrounded by prose, which
is common in LLM outputs.

Extraction tries a fixed chain of strategies and stops at the first one whose
candidate span parses:

1. ``whole`` - the entire trimmed text.
2. ``json_fence`` - the first fenced block tagged ``json``.
3. ``fence`` - the first fenced block with any tag or none.
4. ``braces`` - the first ``{`` through the last ``}``.

Each strategy returns the parsed value, returns ``NOT_APPLICABLE`` when it
cannot locate a candidate span, or lets the decoder's error (usually
``json.JSONDecodeError``) escape when the span it located is not valid JSON.
"""

import json as _json
import logging
import re
from typing import Any, Callable, TypeVar, cast

from convergent.helpers.errors import JSONNotFoundError, JSONParseError, preview

logger = logging.getLogger("convergent.helpers.json")

T = TypeVar("T")

NOT_APPLICABLE = object()

JSON_FENCE_RE = re.compile(r"```json\b(.*?)```", re.DOTALL)
FENCE_RE = re.compile(r"```[^\n`]*\n(.*?)```", re.DOTALL)


def _loads(candidate: str) -> Any:
    return _json.loads(candidate.strip())


def _from_fence(pattern: re.Pattern[str], text: str) -> Any:
    match = pattern.search(text)
    if match is None:
        return NOT_APPLICABLE
    return _loads(match.group(1))


def brace_span(text: str) -> tuple[int, int] | None:
    """Locate the outermost brace span of text.

    Takes the first ``{`` and the last ``}``. This is not a balanced-bracket
    walk: ``{a} and {b}`` yields a single span covering both.

    Args:
        text: Text to scan.

    Returns:
        tuple[int, int] | None: Start and end offsets (end exclusive), or None
            if there is no ``{`` followed somewhere by a ``}``.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        return None
    return start, end + 1


def from_whole(text: str) -> Any:
    """Parse the whole trimmed text as JSON."""
    if not text.strip():
        return NOT_APPLICABLE
    return _loads(text)


def from_json_fence(text: str) -> Any:
    """Parse the content of the first ```json fenced block."""
    return _from_fence(JSON_FENCE_RE, text)


def from_fence(text: str) -> Any:
    """Parse the content of the first fenced block, whatever its tag."""
    return _from_fence(FENCE_RE, text)


def from_braces(text: str) -> Any:
    """Parse the span from the first ``{`` to the last ``}``."""
    span = brace_span(text)
    if span is None:
        return NOT_APPLICABLE
    start, end = span
    return _loads(text[start:end])


STRATEGIES: list[tuple[str, Callable[[str], Any]]] = [
    ("whole", from_whole),
    ("json_fence", from_json_fence),
    ("fence", from_fence),
    ("braces", from_braces),
]


def extract_json(text: str, shape: type[T] | None = None) -> T:
    """Extract and parse a JSON document from text that may contain markdown fencing or prose.

    Strategies are tried in order (whole text, ```json fence, any fence, first
    ``{`` to last ``}``) and the first one that yields valid JSON wins.

    The ``shape`` argument only informs the static return type. The parsed
    value is not checked against it; callers that need guarantees about the
    structure must validate it themselves.

    Args:
        text: Raw text potentially containing a JSON document wrapped in
              markdown code fences or surrounding prose.
        shape: Optional expected type of the result, e.g. ``dict``.

    Returns:
        The parsed JSON value.

    Raises:
        JSONNotFoundError: If the text contains no brace-delimited span and
            no other strategy produced valid JSON.
        JSONParseError: If a candidate span was found but nothing parsed.

    Example:
        >>> text = '```json\\n{"key": "value"}\\n```'
        >>> extract_json(text)
        {'key': 'value'}
        >>> extract_json('Here is some data: {"a": 1} and more text')
        {'a': 1}
    """
    attempts: dict[str, str] = {}
    last_error: ValueError | RecursionError | None = None
    for name, strategy in STRATEGIES:
        try:
            result = strategy(text)
        except (ValueError, RecursionError) as e:
            # JSONDecodeError, oversized integers, deeply nested documents
            logger.debug(f"Strategy {name} found a candidate but it failed to parse: {e}")
            attempts[name] = str(e)
            last_error = e
            continue
        if result is NOT_APPLICABLE:
            continue
        logger.debug(f"Strategy {name} extracted JSON")
        return cast(T, result)

    if brace_span(text) is None:
        raise JSONNotFoundError(f"No JSON object found in text: {preview(text)}")
    raise JSONParseError(
        f"Invalid JSON: {last_error} (tried: {', '.join(attempts)}) in text: {preview(text)}",
        attempts,
    ) from last_error
