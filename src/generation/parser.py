"""Best-effort extraction of a JSON array from model output.

Parsing happens in two explicit stages. Each stage returns a
``ParseSuccess`` or ``ParseFailure`` instead of raising, so callers branch
on the result type and every stage can be exercised on its own.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Literal

_FENCE_START_RE = re.compile(r"^\s*```[a-zA-Z0-9_-]*\s*")
_FENCE_END_RE = re.compile(r"\s*```\s*$")
_ARRAY_RE = re.compile(r"\[[\s\S]*\]")

Stage = Literal["direct", "embedded"]


@dataclass(frozen=True)
class ParseSuccess:
    items: list[Any]
    stage: Stage


@dataclass(frozen=True)
class ParseFailure:
    reason: str


ParseResult = ParseSuccess | ParseFailure


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ``` / ```json fence and trim whitespace."""
    text = _FENCE_START_RE.sub("", text)
    text = _FENCE_END_RE.sub("", text)
    return text.strip()


def _load_array(text: str, stage: Stage) -> ParseResult:
    try:
        data = json.loads(text)
    except ValueError as e:
        return ParseFailure(f"{stage}: invalid JSON ({e})")
    if not isinstance(data, list):
        return ParseFailure(f"{stage}: expected a JSON array, got {type(data).__name__}")
    return ParseSuccess(items=data, stage=stage)


def parse_direct(text: str) -> ParseResult:
    """Parse the whole text as a JSON array."""
    return _load_array(text, "direct")


def parse_embedded_array(text: str) -> ParseResult:
    """Parse the span from the first '[' to the last ']' as a JSON array."""
    match = _ARRAY_RE.search(text)
    if match is None:
        return ParseFailure("embedded: no array found")
    return _load_array(match.group(0), "embedded")


def parse_quiz_output(raw: str) -> ParseResult:
    """
    Extract the list of question records from raw model text.

    Args:
        raw: Text exactly as returned by the model

    Returns:
        ParseSuccess with the decoded list, or ParseFailure naming why both
        stages failed
    """
    cleaned = strip_code_fences(raw)

    direct = parse_direct(cleaned)
    if isinstance(direct, ParseSuccess):
        return direct

    embedded = parse_embedded_array(cleaned)
    if isinstance(embedded, ParseSuccess):
        return embedded

    return ParseFailure(f"{direct.reason}; {embedded.reason}")
