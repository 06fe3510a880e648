"""Tests for the full extraction pipeline."""

import pytest

from models.schemas.parsed_resume import ParsedResume
from services.defaults import DEFAULT_TOTAL_EXPERIENCE_YEARS
from services.resume_extractor import extract_structured_info


def test_sample_resume(sample_resume):
    parsed = extract_structured_info(sample_resume)
    assert parsed.full_name == "Priya Sharma"
    assert parsed.email == "priya.sharma92@gmail.com"
    assert parsed.phone_number == "+919876543210"
    assert parsed.address == "42 MG Road, Bengaluru, Karnataka"
    assert [e.degree for e in parsed.education] == ["B.TECH"]
    assert [e.title for e in parsed.experience] == ["Software Engineer", "Senior Software Engineer"]
    assert parsed.skills[:3] == ["python", "java", "django"]
    assert parsed.languages_spoken == ["English", "Hindi", "Marathi"]
    assert parsed.total_experience_years == 4.0


@pytest.mark.parametrize(
    "text",
    [
        "",
        "\n\n   \n",
        "Experience",
        "Experience\n2019 - 2021",
        "MBA",
        "@@@ %%% 2019 - 2021 ###",
        "Address:",
        "ünïcødé résumé — 履歴書",
        "x" * 10000,
    ],
)
def test_never_raises_and_fills_every_field(text):
    parsed = extract_structured_info(text)
    assert isinstance(parsed, ParsedResume)
    assert set(parsed.model_dump()) == {
        "full_name", "email", "phone_number", "address", "education",
        "experience", "skills", "languages_spoken", "total_experience_years",
    }


def test_empty_text_defaults():
    parsed = extract_structured_info("")
    assert parsed.full_name == "Unknown"
    assert parsed.email == ""
    assert parsed.phone_number == ""
    assert parsed.address == ""
    assert parsed.education == []
    assert parsed.experience == []
    assert parsed.skills == []
    assert parsed.languages_spoken == []
    assert parsed.total_experience_years == DEFAULT_TOTAL_EXPERIENCE_YEARS


def test_name_inferred_from_email():
    parsed = extract_structured_info("RESUME\nContact: john.doe123@example.com")
    assert parsed.email == "john.doe123@example.com"
    assert parsed.full_name == "John Doe"


def test_name_unknown_without_name_line_or_email():
    assert extract_structured_info("curriculum vitae\nskills: python").full_name == "Unknown"


def test_experience_example():
    text = "Experience\nSoftware Engineer\nAcme Corp\n2019 - 2021\nBuilt internal tools."
    experience = extract_structured_info(text).experience
    assert len(experience) == 1
    assert experience[0].title == "Software Engineer"
    assert "2019" in experience[0].duration and "2021" in experience[0].duration
    assert "Built internal tools." in experience[0].description


def test_pure_and_order_stable(sample_resume):
    first = extract_structured_info(sample_resume)
    second = extract_structured_info(sample_resume)
    assert first == second
