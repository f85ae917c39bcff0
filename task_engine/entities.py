"""Regex-based entity extraction from task text.

Every extractor scans the original-case text with each of its patterns from
the start, then merges the matches into one tuple, keeping the first
occurrence of each value. Compiled patterns carry no scan position, so
repeated calls always see every match. Patterns are ASCII-only: non-ASCII
digits, letters and case folding never match.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable

from task_engine.schema import ExtractedEntities

_WEEKDAYS = "monday|tuesday|wednesday|thursday|friday|saturday|sunday"

DATE_PATTERNS = (
    re.compile(r"\b(today|tomorrow|yesterday)\b", re.IGNORECASE | re.ASCII),
    re.compile(rf"\b({_WEEKDAYS})\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\b\d{1,2}/\d{1,2}(/\d{2,4})?\b", re.ASCII),
    re.compile(r"\b\d{1,2}-\d{1,2}(-\d{2,4})?\b", re.ASCII),
    re.compile(r"\b(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]* \d{1,2}(,? \d{4})?\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\bthis (week|month|year)\b", re.IGNORECASE | re.ASCII),
    re.compile(rf"\bnext (week|month|year|{_WEEKDAYS})\b", re.IGNORECASE | re.ASCII),
    re.compile(rf"\bthis ({_WEEKDAYS})\b", re.IGNORECASE | re.ASCII),
)

PERSON_PATTERNS = (
    re.compile(r"(?:with|by|assign(?:ed)? to|contact|notify|tell|inform|call)\s+([A-Z][a-z]+(?:\s+[A-Z][a-z]+)?)", re.ASCII),
    re.compile(r"@(\w+)", re.ASCII),
)

LOCATION_PATTERNS = (
    re.compile(r"(?:at|in|to|from|room|office|building|site)\s+([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)", re.ASCII),
    re.compile(r"(?:room|office|building|site)\s+([A-Za-z0-9]+)", re.IGNORECASE | re.ASCII),
)

ACTION_VERBS = (
    "schedule", "create", "review", "complete", "send", "call", "email", "update",
    "fix", "check", "prepare", "submit", "approve", "cancel", "organize", "setup",
    "plan", "meet", "discuss", "analyze", "implement", "deploy",
)

ACTION_VERB_PATTERNS = (
    re.compile(r"\b(" + "|".join(ACTION_VERBS) + r")\b", re.IGNORECASE | re.ASCII),
)


def _collect(
    text: str,
    patterns: Iterable[re.Pattern],
    pick: Callable[[re.Match], str | None],
) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for pattern in patterns:
        for match in pattern.finditer(text):
            value = pick(match)
            if value:
                seen.setdefault(value, None)
    return tuple(seen)


def _whole_lower(match: re.Match) -> str:
    return match.group(0).lower()


def _capture_stripped(match: re.Match) -> str | None:
    captured = match.group(1)
    return captured.strip() if captured else None


def extract_dates(text: str) -> tuple[str, ...]:
    """Relative days, weekdays, numeric and month-name dates, lowercased."""

    return _collect(text, DATE_PATTERNS, _whole_lower)


def extract_people(text: str) -> tuple[str, ...]:
    """Capitalized names after a relational cue word, and @handles."""

    return _collect(text, PERSON_PATTERNS, _capture_stripped)


def extract_locations(text: str) -> tuple[str, ...]:
    """Capitalized places after a preposition, and room/office/site codes."""

    return _collect(text, LOCATION_PATTERNS, _capture_stripped)


def extract_action_verbs(text: str) -> tuple[str, ...]:
    return _collect(text, ACTION_VERB_PATTERNS, _whole_lower)


def extract_entities(text: str) -> ExtractedEntities:
    """Run all four extractors over the same original-case text."""

    return ExtractedEntities(
        dates=extract_dates(text),
        people=extract_people(text),
        locations=extract_locations(text),
        action_verbs=extract_action_verbs(text),
    )
