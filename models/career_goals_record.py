from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CareerGoalsInput(BaseModel):
    desired_role: str | None = Field(default=None, alias="desiredRole")
    industry: str | None = None
    location: str | None = None
    salary_range: str | None = Field(default=None, alias="salaryRange")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class CareerGoalsRecord(CareerGoalsInput):
    """App/DB record shape for a user's career goals."""

    id: int
    user_id: int = Field(alias="userId")
    created_at: datetime | None = Field(default=None, alias="createdAt")
