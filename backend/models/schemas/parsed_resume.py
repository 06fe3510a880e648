"""Pipeline output: fields pulled out of résumé text by the extractors."""

from pydantic import BaseModel

from services.defaults import DEFAULT_TOTAL_EXPERIENCE_YEARS


class EducationEntry(BaseModel):
    """A single education entry."""
    degree: str = ""  # canonical token, uppercased, e.g. "B.TECH"
    specialization: str = ""
    university: str = ""
    percentage: str = ""  # number only, e.g. "82.5"
    year: str = ""  # 4-digit year or empty


class ExperienceEntry(BaseModel):
    """A single work experience entry."""
    title: str = ""
    company: str = ""
    duration: str = ""  # free text, never parsed into dates
    description: str = ""


class ParsedResume(BaseModel):
    """Structured output of extract_structured_info.

    Every field has a default, so a résumé with nothing recognisable still
    yields a complete record.
    """
    full_name: str = ""
    email: str = ""
    phone_number: str = ""
    address: str = ""
    education: list[EducationEntry] = []
    experience: list[ExperienceEntry] = []
    skills: list[str] = []  # keyword-list order
    languages_spoken: list[str] = []  # keyword-list order, title-cased
    total_experience_years: float = DEFAULT_TOTAL_EXPERIENCE_YEARS
