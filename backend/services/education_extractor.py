"""Education history extraction.

Every degree token in the text opens a span made of its own line plus a few
following lines. Each span becomes one EducationEntry; its sub-fields are
pulled from the span by independent patterns.
"""

import re

from models.schemas.parsed_resume import EducationEntry
from services.keywords import (
    DEGREE_PATTERNS,
    INSTITUTION_KEYWORDS,
    SPECIALIZATION_KEYWORDS,
)

# Lines after the degree line that still belong to the same entry
SPAN_EXTRA_LINES = 4

DEGREE_RE = re.compile(
    r"\b(?:" + "|".join(f"(?P<d{i}>{pattern})" for i, (_, pattern) in enumerate(DEGREE_PATTERNS)) + r")\b",
    re.IGNORECASE,
)
PERCENT_RE = re.compile(r"(\d{1,3}(?:\.\d{1,2})?)\s*%")
YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")
SPECIALIZATION_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(s) for s in SPECIALIZATION_KEYWORDS) + r")\b",
    re.IGNORECASE,
)
UNIVERSITY_RE = re.compile(
    r"\b(?:" + "|".join(INSTITUTION_KEYWORDS) + r")\b[^,\n]*",
    re.IGNORECASE,
)

_CANONICAL_SPECIALIZATIONS = {s.lower(): s for s in SPECIALIZATION_KEYWORDS}


def _canonical_degree(match: re.Match) -> str:
    for i, (canonical, _) in enumerate(DEGREE_PATTERNS):
        if match.group(f"d{i}") is not None:
            return canonical.upper()
    return ""


def _span_end(text: str, start: int) -> int:
    """Offset just past the degree line and SPAN_EXTRA_LINES more lines."""
    end = start
    for _ in range(SPAN_EXTRA_LINES + 1):
        newline = text.find("\n", end)
        if newline == -1:
            return len(text)
        end = newline + 1
    return end - 1


def degree_spans(text: str) -> list[tuple[str, str]]:
    """Return (canonical degree, span text) for every degree occurrence.

    A span stops early where the next degree occurrence begins.
    """
    matches = list(DEGREE_RE.finditer(text))
    spans: list[tuple[str, str]] = []
    for i, match in enumerate(matches):
        end = _span_end(text, match.start())
        if i + 1 < len(matches):
            end = min(end, matches[i + 1].start())
        spans.append((_canonical_degree(match), text[match.start():end]))
    return spans


def extract_percentage(span: str) -> str:
    match = PERCENT_RE.search(span)
    return match.group(1) if match else ""


def extract_year(span: str) -> str:
    match = YEAR_RE.search(span)
    return match.group() if match else ""


def extract_specialization(span: str) -> str:
    match = SPECIALIZATION_RE.search(span)
    return _CANONICAL_SPECIALIZATIONS[match.group().lower()] if match else ""


def extract_university(span: str) -> str:
    match = UNIVERSITY_RE.search(span)
    return match.group().strip() if match else ""


def extract_education(text: str) -> list[EducationEntry]:
    """One EducationEntry per degree occurrence, in document order."""
    return [
        EducationEntry(
            degree=degree,
            specialization=extract_specialization(span),
            university=extract_university(span),
            percentage=extract_percentage(span),
            year=extract_year(span),
        )
        for degree, span in degree_spans(text)
    ]
