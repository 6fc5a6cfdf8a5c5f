from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class InterestOption(BaseModel):
    id: str
    name: str
    selected: bool = False

    model_config = ConfigDict(extra="ignore")


class InterestsInput(BaseModel):
    topics: list[InterestOption] = Field(default_factory=list)
    skills: list[InterestOption] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class InterestsRecord(InterestsInput):
    """App/DB record shape for a user's chosen topics and skills."""

    id: int
    user_id: int = Field(alias="userId")
    created_at: datetime | None = Field(default=None, alias="createdAt")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
