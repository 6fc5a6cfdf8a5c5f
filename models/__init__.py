from .profile_record import EducationEntry, ExperienceEntry, ProfileRecord
from .stored_profile import ProfileUpdate, StoredProfile
from .interests_record import InterestOption, InterestsInput, InterestsRecord
from .career_goals_record import CareerGoalsInput, CareerGoalsRecord
from .saved_item_record import SavedItemInput, SavedItemRecord, UserRecord

__all__ = [
    "EducationEntry",
    "ExperienceEntry",
    "ProfileRecord",
    "ProfileUpdate",
    "StoredProfile",
    "InterestOption",
    "InterestsInput",
    "InterestsRecord",
    "CareerGoalsInput",
    "CareerGoalsRecord",
    "SavedItemInput",
    "SavedItemRecord",
    "UserRecord",
]
