"""Pydantic contracts between the extraction pipeline, assembler and API."""

from models.schemas.parsed_resume import EducationEntry, ExperienceEntry, ParsedResume
from models.schemas.candidate_profile import (
    CandidateProfile,
    EducationDetail,
    ExperienceDetail,
    FileDetails,
    ProfileDetails,
    SkillDetail,
    StandardFields,
    WorkExperience,
)

__all__ = [
    "EducationEntry",
    "ExperienceEntry",
    "ParsedResume",
    "CandidateProfile",
    "EducationDetail",
    "ExperienceDetail",
    "FileDetails",
    "ProfileDetails",
    "SkillDetail",
    "StandardFields",
    "WorkExperience",
]
