from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .profile_record import EducationEntry, ExperienceEntry


class StoredProfile(BaseModel):
    """App/DB record shape: a persisted profile owned by one user."""

    id: int
    user_id: int = Field(alias="userId")
    name: str
    headline: str | None = None
    location: str | None = None
    industry: str | None = None
    current_job_title: str | None = Field(default=None, alias="currentJobTitle")
    current_company: str | None = Field(default=None, alias="currentCompany")
    summary: str | None = None
    skills: list[str] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    experience: list[ExperienceEntry] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    avatar_url: str | None = Field(default=None, alias="avatarUrl")
    created_at: datetime | None = Field(default=None, alias="createdAt")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ProfileUpdate(BaseModel):
    """Partial profile edit; only fields that were sent are merged."""

    name: str | None = None
    headline: str | None = None
    location: str | None = None
    industry: str | None = None
    current_job_title: str | None = Field(default=None, alias="currentJobTitle")
    current_company: str | None = Field(default=None, alias="currentCompany")
    summary: str | None = None
    skills: list[str] | None = None
    education: list[EducationEntry] | None = None
    experience: list[ExperienceEntry] | None = None
    certifications: list[str] | None = None
    avatar_url: str | None = Field(default=None, alias="avatarUrl")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, value: str | None) -> str:
        # Only runs when the key is sent; profiles.name is NOT NULL
        if value is None or not value.strip():
            raise ValueError("name must be a non-empty string")
        return value

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)
