from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


ItemType = Literal["person", "job", "course", "post", "skill"]


class SavedItemInput(BaseModel):
    item_type: ItemType = Field(alias="itemType")
    item_id: str = Field(alias="itemId")
    item_data: dict[str, Any] = Field(default_factory=dict, alias="itemData")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class SavedItemRecord(SavedItemInput):
    """App/DB record shape for a bookmarked recommendation."""

    id: int
    user_id: int = Field(alias="userId")
    created_at: datetime | None = Field(default=None, alias="createdAt")


class UserRecord(BaseModel):
    id: int
    username: str

    model_config = ConfigDict(extra="ignore")
