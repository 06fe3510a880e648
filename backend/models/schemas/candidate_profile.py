"""Assembler output: the candidate profile returned to API callers.

Field names are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field

from services.defaults import (
    PLACEHOLDER_JOINING_DATE,
    PLACEHOLDER_RELIEVING_DATE,
    PLACEHOLDER_SKILL_EXPERIENCE_YEARS,
)


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class FileDetails(WireModel):
    file_name: str = Field("", alias="fileName")
    file_size: int = Field(0, alias="fileSize")
    content_type: str = Field("", alias="contentType")
    storage_path: str = Field("", alias="storagePath")


class WorkExperience(WireModel):
    """Total experience split into whole years and remaining months."""
    years: int = Field(0, alias="Years")
    months: int = Field(0, alias="Months")
    total_months: int = Field(0, alias="TotalMonths")


class StandardFields(WireModel):
    work_experience: WorkExperience = Field(WorkExperience(), alias="workExperience")


class EducationDetail(WireModel):
    id: str
    degree: str = ""
    specialization: str = ""
    university: str = ""
    percentage: str = ""
    year: str = ""
    completion_date: str | None = Field(None, alias="completionDate")  # "<year>-12-31T00:00:00"


class ExperienceDetail(WireModel):
    id: str
    title: str = ""
    company: str = ""
    duration: str = ""
    description: str = ""
    is_currently_working: bool = Field(False, alias="isCurrentlyWorking")
    # Placeholders: the duration text is never parsed into dates
    joining_date: str = Field(PLACEHOLDER_JOINING_DATE, alias="joiningDate")
    relieving_date: str = Field(PLACEHOLDER_RELIEVING_DATE, alias="relievingDate")


class SkillDetail(WireModel):
    id: str
    skill: str
    experience_in_years: int = Field(
        PLACEHOLDER_SKILL_EXPERIENCE_YEARS, alias="experienceInYears"
    )  # placeholder


class ProfileDetails(WireModel):
    first_name: str = Field("", alias="firstName")
    middle_name: str = Field("", alias="middleName")
    last_name: str = Field("", alias="lastName")
    display_name: str = Field("", alias="displayName")
    email: str = ""
    phone_number: str = Field("", alias="phoneNumber")
    address: str = ""
    languages_spoken: list[str] = Field([], alias="languagesSpoken")
    standard_fields: StandardFields = Field(StandardFields(), alias="standardFields")
    education_details: list[EducationDetail] = Field([], alias="educationDetails")
    experience_details: list[ExperienceDetail] = Field([], alias="experienceDetails")
    skills: list[SkillDetail] = []


class CandidateProfile(WireModel):
    """Structured output of format_candidate_data."""
    file_details: FileDetails = Field(FileDetails(), alias="fileDetails")
    resume_parse_and_index_identifier: str = Field("", alias="resumeParseAndIndexIdentifier")
    candidate_profile: ProfileDetails = Field(ProfileDetails(), alias="candidateProfile")
