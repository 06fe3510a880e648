"""Line decomposition, contact, address and name extraction."""

import re

from services.defaults import DEFAULT_TOTAL_EXPERIENCE_YEARS, UNKNOWN_NAME
from services.keywords import (
    ADDRESS_LABELS,
    EXPERIENCE_HEADINGS,
    SECTION_BOUNDARY_HEADINGS,
)

# Contact info patterns
EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)+")
PHONE_RE = re.compile(
    r"(?<![\d+])(?:\+\d{1,3}[\s-]?)?(?:\d{5}[\s-]?\d{5}|\d{3}[\s-]?\d{3}[\s-]?\d{4})(?!\d)"
)
_PHONE_SEPARATORS_RE = re.compile(r"[\s-]")

ADDRESS_RE = re.compile(
    rf"^(?:{'|'.join(re.escape(label) for label in ADDRESS_LABELS)})\b\s*[:\-]?\s*",
    re.IGNORECASE,
)

# "John Doe", "Priya Sharma Iyer"
NAME_LINE_RE = re.compile(r"^[A-Z][a-z]+ [A-Z][a-z]+")

_EMAIL_NAME_NOISE_RE = re.compile(r"\d+")
_EMAIL_NAME_SEPARATORS_RE = re.compile(r"[._-]")


def _heading_pattern(headings: tuple[str, ...]) -> re.Pattern:
    combined = "|".join(re.escape(h).replace(r"\ ", r"\s+") for h in headings)
    return re.compile(rf"^(?:{combined})\s*:?$", re.IGNORECASE)


_EXPERIENCE_HEADING_RE = _heading_pattern(EXPERIENCE_HEADINGS)
_SECTION_BOUNDARY_RE = _heading_pattern(SECTION_BOUNDARY_HEADINGS)


def split_lines(text: str) -> list[str]:
    """Split text on line breaks, trim each line and drop blank ones."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def is_experience_heading(line: str) -> bool:
    return bool(_EXPERIENCE_HEADING_RE.match(line.strip()))


def is_section_boundary(line: str) -> bool:
    return bool(_SECTION_BOUNDARY_RE.match(line.strip()))


def extract_contact_info(text: str) -> dict[str, str]:
    """Extract the first email and phone number found in the text.

    The phone number is returned with spaces and hyphens removed.
    Missing values are empty strings.
    """
    email_match = EMAIL_RE.search(text)
    phone_match = PHONE_RE.search(text)

    return {
        "email": email_match.group() if email_match else "",
        "phone_number": (
            _PHONE_SEPARATORS_RE.sub("", phone_match.group()) if phone_match else ""
        ),
    }


def extract_address(lines: list[str]) -> str:
    """Return the text after the first address label.

    A label alone on its line ("Address:") takes the following line.
    """
    for i, line in enumerate(lines):
        match = ADDRESS_RE.match(line)
        if not match:
            continue
        remainder = line[match.end():].strip()
        if not remainder and i + 1 < len(lines):
            remainder = lines[i + 1]
        return remainder
    return ""


def name_from_email(email: str) -> str:
    """Infer a display name from an email's local part.

    "john.doe123@mail.com" -> "John Doe"
    """
    local_part = email.split("@")[0]
    local_part = _EMAIL_NAME_NOISE_RE.sub("", local_part)
    local_part = _EMAIL_NAME_SEPARATORS_RE.sub(" ", local_part)
    return " ".join(word[0].upper() + word[1:] for word in local_part.split())


def extract_full_name(lines: list[str], email: str = "") -> str:
    """Name from the first line, else from the email, else "Unknown"."""
    if lines and NAME_LINE_RE.match(lines[0]):
        return lines[0]
    if email:
        inferred = name_from_email(email)
        if inferred:
            return inferred
    return UNKNOWN_NAME


# ---------------------------------------------------------------------------
# Experience duration estimate
# ---------------------------------------------------------------------------

# "5+ years of experience" or "3 years experience in Python"
EXP_YEARS_RE = re.compile(
    r"(\d+(?:\.\d+)?)\+?\s*(?:years?|yrs?)\s*(?:of\s+)?(?:experience|exp\b)",
    re.IGNORECASE,
)


def extract_experience_years(text: str) -> float:
    """Largest explicit "N years of experience" claim in the text.

    Falls back to DEFAULT_TOTAL_EXPERIENCE_YEARS when nothing usable is
    claimed. Dates are never parsed here.
    """
    best = 0.0
    for match in EXP_YEARS_RE.finditer(text):
        years = float(match.group(1))
        if best < years < 60:
            best = years
    return best or DEFAULT_TOTAL_EXPERIENCE_YEARS
