"""Keyword-based skill and spoken-language extraction.

Both extractors test every keyword of a fixed table against the lower-cased
text and report hits in table order, so results do not depend on where in the
document a keyword appears.
"""

import re

from services.keywords import LANGUAGE_KEYWORDS, SKILL_KEYWORDS


def _keyword_pattern(keyword: str) -> re.Pattern:
    # Word boundary matching so "java" does not match inside "javascript"
    # and "go" does not match inside "google"
    escaped = re.escape(keyword)
    return re.compile(rf"(?<![a-z0-9.#+]){escaped}(?![a-z0-9+#])")


_SKILL_PATTERNS: tuple[tuple[str, re.Pattern], ...] = tuple(
    (skill, _keyword_pattern(skill)) for skill in SKILL_KEYWORDS
)
_LANGUAGE_PATTERNS: tuple[tuple[str, re.Pattern], ...] = tuple(
    (language, _keyword_pattern(language)) for language in LANGUAGE_KEYWORDS
)


def extract_skills(text: str) -> list[str]:
    """Technical skills mentioned in the text, in SKILL_KEYWORDS order."""
    text_lower = text.lower()
    return [skill for skill, pattern in _SKILL_PATTERNS if pattern.search(text_lower)]


def extract_spoken_languages(text: str) -> list[str]:
    """Spoken languages mentioned in the text, title-cased, in table order."""
    text_lower = text.lower()
    return [
        language.title()
        for language, pattern in _LANGUAGE_PATTERNS
        if pattern.search(text_lower)
    ]
