"""Heuristic field extraction pipeline.

Runs each extractor over the résumé text and its lines and collects the
results into a ParsedResume. Extractors are independent except that the
name fallback uses the extracted email. Nothing here raises on odd input:
unmatched fields keep their defaults.
"""

import logging

from models.schemas.parsed_resume import ParsedResume
from services.education_extractor import extract_education
from services.experience_extractor import extract_experience
from services.section_parser import (
    extract_address,
    extract_contact_info,
    extract_experience_years,
    extract_full_name,
    split_lines,
)
from services.skill_extractor import extract_skills, extract_spoken_languages

logger = logging.getLogger(__name__)


def extract_structured_info(text: str) -> ParsedResume:
    """Extract a ParsedResume from plain résumé text."""
    text = text or ""
    lines = split_lines(text)

    contact = extract_contact_info(text)
    parsed = ParsedResume(
        full_name=extract_full_name(lines, contact["email"]),
        email=contact["email"],
        phone_number=contact["phone_number"],
        address=extract_address(lines),
        education=extract_education(text),
        experience=extract_experience(text),
        skills=extract_skills(text),
        languages_spoken=extract_spoken_languages(text),
        total_experience_years=extract_experience_years(text),
    )

    logger.debug(
        "Extracted resume fields: %d education, %d experience, %d skills, %d languages",
        len(parsed.education),
        len(parsed.experience),
        len(parsed.skills),
        len(parsed.languages_spoken),
    )
    return parsed
