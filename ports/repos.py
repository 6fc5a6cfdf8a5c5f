from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from models.career_goals_record import CareerGoalsRecord
from models.interests_record import InterestsRecord
from models.profile_record import ProfileRecord
from models.saved_item_record import SavedItemInput, SavedItemRecord
from models.stored_profile import StoredProfile


@runtime_checkable
class ProfilesRepoPort(Protocol):
    def get_by_user(self, user_id: int) -> Optional[StoredProfile]:
        ...

    def update(self, profile_id: int, fields: Dict[str, Any]) -> StoredProfile:
        ...

    def upsert(self, user_id: int, record: ProfileRecord) -> StoredProfile:
        ...


@runtime_checkable
class InterestsRepoPort(Protocol):
    def get_by_user(self, user_id: int) -> Optional[InterestsRecord]:
        ...

    def upsert(self, user_id: int, fields: Dict[str, Any]) -> InterestsRecord:
        ...


@runtime_checkable
class CareerGoalsRepoPort(Protocol):
    def get_by_user(self, user_id: int) -> Optional[CareerGoalsRecord]:
        ...

    def upsert(self, user_id: int, fields: Dict[str, Any]) -> CareerGoalsRecord:
        ...


@runtime_checkable
class SavedItemsRepoPort(Protocol):
    def list(self, user_id: int, item_type: Optional[str] = None) -> List[SavedItemRecord]:
        ...

    def create(self, user_id: int, item: SavedItemInput) -> SavedItemRecord:
        ...

    def delete(self, item_id: int) -> bool:
        ...
