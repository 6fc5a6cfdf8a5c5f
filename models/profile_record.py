from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class EducationEntry(BaseModel):
    institution: str
    degree: str
    years: str

    model_config = ConfigDict(frozen=True, extra="ignore")


class ExperienceEntry(BaseModel):
    title: str
    company: str
    duration: str

    model_config = ConfigDict(frozen=True, extra="ignore")


class ProfileRecord(BaseModel):
    """Extractor output: every field is always populated (placeholders when absent)."""

    name: str
    headline: str
    location: str
    industry: str
    current_job_title: str = Field(alias="currentJobTitle")
    current_company: str = Field(alias="currentCompany")
    skills: list[str]
    education: list[EducationEntry]
    experience: list[ExperienceEntry]

    model_config = ConfigDict(frozen=True, populate_by_name=True)
