"""Convergent: helpers for turning LLM output into structured data.

Convergent extracts JSON payloads from free-form model responses and provides
the small git helpers a run needs to work on its own branch.
"""

from convergent.helpers import JSONExtractionError, JSONNotFoundError, JSONParseError, extract_json
from convergent.git import create_run_branch

__all__ = [
    "extract_json",
    "JSONExtractionError",
    "JSONNotFoundError",
    "JSONParseError",
    "create_run_branch",
]
