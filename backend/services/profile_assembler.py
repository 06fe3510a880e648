"""Maps a ParsedResume plus upload metadata onto the CandidateProfile schema."""

import math
import uuid
from pathlib import PurePosixPath
from typing import Callable

from config import settings
from models.requests import FileMeta
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
from models.schemas.parsed_resume import EducationEntry, ParsedResume

IdFactory = Callable[[], str]


def new_id() -> str:
    return str(uuid.uuid4())


def split_name(full_name: str) -> tuple[str, str]:
    """Split on the first space into (first name, rest)."""
    first, _, last = full_name.strip().partition(" ")
    return first, last.strip()


def work_experience(total_years: float) -> WorkExperience:
    total_months = max(0, math.floor(total_years * 12))
    return WorkExperience(
        years=total_months // 12,
        months=total_months % 12,
        total_months=total_months,
    )


def storage_path(file_name: str, profile_id: str, storage_dir: str | None = None) -> str:
    """Storage location for the upload, keyed by the id without separators."""
    compact_id = profile_id.replace("-", "")
    base = PurePosixPath(storage_dir if storage_dir is not None else settings.storage_dir)
    return str(base / compact_id / PurePosixPath(file_name).name)


def completion_date(year: str) -> str | None:
    return f"{year}-12-31T00:00:00" if year else None


def _education_detail(entry: EducationEntry, make_id: IdFactory) -> EducationDetail:
    return EducationDetail(
        id=make_id(),
        completion_date=completion_date(entry.year),
        **entry.model_dump(),
    )


def format_candidate_data(
    file_meta: FileMeta,
    parsed: ParsedResume,
    make_id: IdFactory = new_id,
) -> CandidateProfile:
    """Build the CandidateProfile for one parsed upload.

    Allocates one id for the profile and one per education, experience and
    skill record. Join/relieve dates and per-skill experience are schema
    placeholders, not values read from the résumé.
    """
    profile_id = make_id()
    first_name, last_name = split_name(parsed.full_name)

    return CandidateProfile(
        file_details=FileDetails(
            file_name=file_meta.name,
            file_size=file_meta.size,
            content_type=file_meta.mime_type,
            storage_path=storage_path(file_meta.name, profile_id),
        ),
        resume_parse_and_index_identifier=profile_id,
        candidate_profile=ProfileDetails(
            first_name=first_name,
            middle_name="",
            last_name=last_name,
            display_name=parsed.full_name or f"{first_name} {last_name}",
            email=parsed.email,
            phone_number=parsed.phone_number,
            address=parsed.address,
            languages_spoken=list(parsed.languages_spoken),
            standard_fields=StandardFields(
                work_experience=work_experience(parsed.total_experience_years),
            ),
            education_details=[
                _education_detail(entry, make_id) for entry in parsed.education
            ],
            experience_details=[
                ExperienceDetail(id=make_id(), **entry.model_dump())
                for entry in parsed.experience
            ],
            skills=[SkillDetail(id=make_id(), skill=skill) for skill in parsed.skills],
        ),
    )
