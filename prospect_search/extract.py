"""
Pull the result records out of the model's free-text reply.

The model is asked for a bare JSON array in a fenced block, but replies
often wrap it in prose. Candidates are tried in this order:

1. balanced [ ... ] spans inside ``` fenced blocks
2. balanced [ ... ] spans anywhere in the text
3. the slice from the first '[' to the last ']'

The first candidate that parses as JSON is validated and returned; a
validation failure there is final.
"""

import json
import logging
import math
import re
from typing import Any, Iterator, List, Optional

from .exceptions import NoArrayFoundError, ResultFormatError, ResultParseError
from .types import SearchResult

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```[ \t]*(?:json)?[ \t]*\n?(.*?)```", re.DOTALL | re.IGNORECASE)


# ----------------------------
# Locating the array
# ----------------------------
def _match_bracket(text: str, start: int) -> int:
    """
    Index of the ']' closing the '[' at `start`, or -1 if it is never closed.
    Brackets inside JSON string literals are ignored.
    """
    depth = 0
    in_str = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_str:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_str = False
            continue
        if ch == '"':
            in_str = True
        elif ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth == 0:
                return i
    return -1


def _balanced_spans(text: str) -> Iterator[str]:
    i = text.find("[")
    while i != -1:
        end = _match_bracket(text, i)
        if end == -1:
            # stray '[' in prose; try the next one
            i = text.find("[", i + 1)
            continue
        yield text[i : end + 1]
        i = text.find("[", end + 1)


def _legacy_slice(text: str) -> Optional[str]:
    start = text.find("[")
    end = text.rfind("]")
    if start == -1 or end == -1 or end < start:
        return None
    return text[start : end + 1]


def find_array_candidates(text: str) -> List[str]:
    """Candidate JSON array substrings, most trustworthy first, without duplicates."""
    ordered: List[str] = []
    for block in _FENCE_RE.findall(text):
        ordered.extend(_balanced_spans(block))
    ordered.extend(_balanced_spans(text))
    legacy = _legacy_slice(text)
    if legacy is not None:
        ordered.append(legacy)

    seen = set()
    uniq: List[str] = []
    for c in ordered:
        if c in seen:
            continue
        seen.add(c)
        uniq.append(c)
    return uniq


# ----------------------------
# Validation
# ----------------------------
def _valid_id(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value) and value.is_integer()
    return False


def validate_records(data: Any) -> List[SearchResult]:
    """Check the parsed JSON is a list of {id, entityName, websiteUrl} objects."""
    if not isinstance(data, list):
        raise ResultFormatError(f"Invalid results format: expected a list, got {type(data).__name__}")

    results: List[SearchResult] = []
    for idx, item in enumerate(data):
        if not isinstance(item, dict):
            raise ResultFormatError(f"Invalid results format: item {idx} is not an object")
        if not _valid_id(item.get("id")):
            raise ResultFormatError(f"Invalid results format: item {idx} has no numeric id")
        if not isinstance(item.get("entityName"), str):
            raise ResultFormatError(f"Invalid results format: item {idx} has no string entityName")
        if not isinstance(item.get("websiteUrl"), str):
            raise ResultFormatError(f"Invalid results format: item {idx} has no string websiteUrl")
        results.append(SearchResult.from_dict(item))
    return results


# ----------------------------
# Public API
# ----------------------------
def extract_results(text: str) -> List[SearchResult]:
    """
    Return the validated records embedded in `text`.
    Raises NoArrayFoundError, ResultParseError or ResultFormatError; never
    returns a partially valid list.
    """
    text = text or ""
    candidates = find_array_candidates(text)
    if not candidates:
        raise NoArrayFoundError()

    # the first candidate that is JSON is the answer; later arrays are never a fallback
    for candidate in candidates:
        try:
            data = json.loads(candidate)
        except (ValueError, RecursionError):
            continue
        return validate_records(data)

    logger.debug("None of %d array candidates parsed as JSON", len(candidates))
    raise ResultParseError()


def results_to_json(results: List[SearchResult], indent: Optional[int] = None) -> str:
    return json.dumps([r.to_dict() for r in results], ensure_ascii=False, indent=indent)
