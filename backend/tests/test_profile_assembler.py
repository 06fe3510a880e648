"""Tests for CandidateProfile assembly."""

import uuid

import pytest

from models.requests import FileMeta
from models.schemas.parsed_resume import EducationEntry, ExperienceEntry, ParsedResume
from services.defaults import (
    PLACEHOLDER_JOINING_DATE,
    PLACEHOLDER_RELIEVING_DATE,
    PLACEHOLDER_SKILL_EXPERIENCE_YEARS,
)
from services.profile_assembler import (
    completion_date,
    format_candidate_data,
    new_id,
    split_name,
    storage_path,
    work_experience,
)
from services.resume_extractor import extract_structured_info

FILE_META = FileMeta(name="priya_cv.pdf", size=2048, mime_type="application/pdf")


def test_format_candidate_data_end_to_end(sample_resume, sequential_ids):
    parsed = extract_structured_info(sample_resume)
    profile = format_candidate_data(FILE_META, parsed, sequential_ids)

    assert profile.resume_parse_and_index_identifier == "id-0001"
    assert profile.file_details.file_name == "priya_cv.pdf"
    assert profile.file_details.file_size == 2048
    assert profile.file_details.content_type == "application/pdf"
    assert profile.file_details.storage_path.endswith("/id0001/priya_cv.pdf")

    details = profile.candidate_profile
    assert (details.first_name, details.middle_name, details.last_name) == ("Priya", "", "Sharma")
    assert details.display_name == "Priya Sharma"
    assert details.email == "priya.sharma92@gmail.com"
    assert details.phone_number == "+919876543210"
    assert details.languages_spoken == ["English", "Hindi", "Marathi"]
    assert details.standard_fields.work_experience.total_months == 48

    # ids are allocated profile first, then education, experience, skills
    assert [e.id for e in details.education_details] == ["id-0002"]
    assert [e.id for e in details.experience_details] == ["id-0003", "id-0004"]
    assert details.skills[0].id == "id-0005"
    assert len({s.id for s in details.skills}) == len(parsed.skills)


def test_format_candidate_data_empty_collections(sequential_ids):
    profile = format_candidate_data(FILE_META, ParsedResume(), sequential_ids)
    details = profile.candidate_profile
    assert details.education_details == []
    assert details.experience_details == []
    assert details.skills == []
    assert details.languages_spoken == []

    dumped = profile.model_dump(by_alias=True)
    assert dumped["candidateProfile"]["educationDetails"] == []
    assert dumped["candidateProfile"]["experienceDetails"] == []
    assert dumped["candidateProfile"]["skills"] == []


def test_empty_name_display_name_fallback(sequential_ids):
    details = format_candidate_data(FILE_META, ParsedResume(), sequential_ids).candidate_profile
    assert details.first_name == ""
    assert details.last_name == ""
    assert details.display_name == " "


def test_split_name():
    assert split_name("John Doe") == ("John", "Doe")
    assert split_name("Anna Maria van Dijk") == ("Anna", "Maria van Dijk")
    assert split_name("Unknown") == ("Unknown", "")
    assert split_name("") == ("", "")


@pytest.mark.parametrize(
    "years, expected",
    [
        (1.5, (1, 6, 18)),
        (0, (0, 0, 0)),
        (4.99, (4, 11, 59)),
        (-2, (0, 0, 0)),
    ],
)
def test_work_experience(years, expected):
    exp = work_experience(years)
    assert (exp.years, exp.months, exp.total_months) == expected


def test_work_experience_serialised_names(sequential_ids):
    parsed = ParsedResume(total_experience_years=1.5)
    dumped = format_candidate_data(FILE_META, parsed, sequential_ids).model_dump(by_alias=True)
    assert dumped["candidateProfile"]["standardFields"]["workExperience"] == {
        "Years": 1,
        "Months": 6,
        "TotalMonths": 18,
    }


def test_education_completion_date(sequential_ids):
    parsed = ParsedResume(
        education=[
            EducationEntry(degree="MBA", year="2018"),
            EducationEntry(degree="LLB"),
        ]
    )
    details = format_candidate_data(FILE_META, parsed, sequential_ids).candidate_profile
    assert details.education_details[0].completion_date == "2018-12-31T00:00:00"
    assert details.education_details[0].degree == "MBA"
    assert details.education_details[1].completion_date is None
    assert completion_date("") is None


def test_experience_placeholders(sequential_ids):
    parsed = ParsedResume(
        experience=[ExperienceEntry(title="Analyst", company="Initech", duration="2019 - 2021")]
    )
    detail = format_candidate_data(FILE_META, parsed, sequential_ids).candidate_profile.experience_details[0]
    assert detail.title == "Analyst"
    assert detail.duration == "2019 - 2021"
    assert detail.is_currently_working is False
    assert detail.joining_date == PLACEHOLDER_JOINING_DATE
    assert detail.relieving_date == PLACEHOLDER_RELIEVING_DATE


def test_skill_placeholders(sequential_ids):
    parsed = ParsedResume(skills=["python", "sql"])
    skills = format_candidate_data(FILE_META, parsed, sequential_ids).candidate_profile.skills
    assert [(s.skill, s.experience_in_years) for s in skills] == [
        ("python", PLACEHOLDER_SKILL_EXPERIENCE_YEARS),
        ("sql", PLACEHOLDER_SKILL_EXPERIENCE_YEARS),
    ]


def test_camel_case_wire_format(sequential_ids):
    parsed = ParsedResume(
        full_name="John Doe",
        experience=[ExperienceEntry(title="Dev")],
        skills=["git"],
    )
    dumped = format_candidate_data(FILE_META, parsed, sequential_ids).model_dump(by_alias=True)
    assert set(dumped) == {"fileDetails", "resumeParseAndIndexIdentifier", "candidateProfile"}
    assert dumped["fileDetails"]["storagePath"]
    candidate = dumped["candidateProfile"]
    assert candidate["firstName"] == "John"
    assert candidate["displayName"] == "John Doe"
    assert candidate["experienceDetails"][0]["isCurrentlyWorking"] is False
    assert "relievingDate" in candidate["experienceDetails"][0]
    assert candidate["skills"][0]["experienceInYears"] == 0


def test_storage_path_strips_id_separators():
    profile_id = "123e4567-e89b-12d3-a456-426614174000"
    path = storage_path("cv.docx", profile_id, storage_dir="uploads")
    assert path == "uploads/123e4567e89b12d3a456426614174000/cv.docx"


def test_storage_path_drops_client_directories():
    assert storage_path("../../etc/cv.pdf", "ab-cd", storage_dir="uploads") == "uploads/abcd/cv.pdf"


def test_default_id_factory_returns_uuid():
    assert uuid.UUID(new_id())
    profile = format_candidate_data(FILE_META, ParsedResume(skills=["git"]))
    ids = {profile.resume_parse_and_index_identifier, profile.candidate_profile.skills[0].id}
    assert len(ids) == 2
