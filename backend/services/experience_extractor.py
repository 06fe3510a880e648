"""Work experience extraction.

The section starts after the first "Experience" / "Work Experience" heading.
Lines are classified one at a time against a single open entry:

1. A section heading (Education, Skills, ...) pauses accumulation until the
   next date line.
2. A date line fills the open entry's duration when it has a title but no
   duration yet (dates printed under the role). Otherwise it closes the open
   entry and starts a new one with that duration; header lines held back
   since the last description line become the new entry's title and company.
3. Any other line fills the open entry's title, then its company. After
   that, short header-like lines are held back (they may head the next
   role) and everything else is appended to the description.

Entries are appended when closed; the last one is closed at end of input.
Entries that never got a title are dropped.
"""

import re

from models.schemas.parsed_resume import ExperienceEntry
from services.section_parser import is_experience_heading, is_section_boundary, split_lines

_MONTHS = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|"
    r"Jul(?:y)?|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
_DATE = rf"(?:{_MONTHS}\.?\s*\d{{4}}|\d{{1,2}}/\d{{4}}|\d{{4}})"

# "2019 - 2021", "Jan 2020 – Present", "03/2018 to 06/2020", "2021 to date"
DATE_RANGE_RE = re.compile(
    rf"{_DATE}\s*(?:-|–|—|to)\s*(?:{_DATE}|present|current|now|date|till\s+date)",
    re.IGNORECASE,
)
# "06/2019" at the start of a line
MONTH_YEAR_RE = re.compile(r"^\d{1,2}/\d{4}")

BULLET_MARKERS = "•-–—►▪✓*○◆⚫→▸▹◇■□●"

# Longest line still treated as a possible role header
HEADER_MAX_WORDS = 8


def is_date_line(line: str) -> bool:
    return bool(MONTH_YEAR_RE.match(line) or DATE_RANGE_RE.search(line))


def is_bullet_line(line: str) -> bool:
    return line[:1] in BULLET_MARKERS


def is_header_line(line: str) -> bool:
    """Short, unpunctuated, non-bullet line such as a job title or company."""
    return (
        not is_bullet_line(line)
        and not line.endswith(".")
        and len(line.split()) <= HEADER_MAX_WORDS
    )


def experience_section_lines(text: str) -> list[str]:
    """Lines after the first experience heading, or [] when there is none."""
    lines = split_lines(text)
    for i, line in enumerate(lines):
        if is_experience_heading(line):
            return lines[i + 1:]
    return []


def _strip_bullet(line: str) -> str:
    return line.lstrip(BULLET_MARKERS + " ").strip()


class ExperienceClassifier:
    """Builds ExperienceEntry records from experience-section lines."""

    def __init__(self) -> None:
        self.entries: list[ExperienceEntry] = []
        self._current: ExperienceEntry | None = None
        self._pending: list[str] = []
        self._capturing = True

    def feed(self, line: str) -> None:
        if is_section_boundary(line):
            self._release_pending()
            self._flush()
            self._capturing = False
            return

        if is_date_line(line):
            self._capturing = True
            self._start_or_date(line)
            return

        if not self._capturing:
            return

        if self._current is None:
            self._current = ExperienceEntry()
        current = self._current
        if not current.title:
            current.title = line
        elif not current.company:
            current.company = line
        elif is_header_line(line):
            self._pending.append(line)
        else:
            self._release_pending()
            self._describe(line)

    def finish(self) -> list[ExperienceEntry]:
        self._release_pending()
        self._flush()
        return self.entries

    def _start_or_date(self, line: str) -> None:
        current = self._current
        if current is not None and current.title and not current.duration:
            current.duration = line
            self._release_pending()
            return

        headers, self._pending = self._pending, []
        self._flush()
        self._current = ExperienceEntry(duration=line)
        if headers:
            self._current.title = headers[0]
        if len(headers) > 1:
            self._current.company = headers[1]
        for extra in headers[2:]:
            self._describe(extra)

    def _describe(self, line: str) -> None:
        text = _strip_bullet(line)
        if text:
            current = self._current
            current.description = f"{current.description} {text}".strip()

    def _release_pending(self) -> None:
        """Held-back lines turned out to be description, not a new header."""
        pending, self._pending = self._pending, []
        for line in pending:
            self._describe(line)

    def _flush(self) -> None:
        if self._current is not None and self._current.title:
            self.entries.append(self._current)
        self._current = None


def extract_experience(text: str) -> list[ExperienceEntry]:
    """ExperienceEntry records from the experience section, in order."""
    classifier = ExperienceClassifier()
    for line in experience_section_lines(text):
        classifier.feed(line)
    return classifier.finish()
