from .repos import ProfilesRepoPort, InterestsRepoPort, CareerGoalsRepoPort, SavedItemsRepoPort
from .feed import FeedPort

__all__ = [
    "ProfilesRepoPort",
    "InterestsRepoPort",
    "CareerGoalsRepoPort",
    "SavedItemsRepoPort",
    "FeedPort",
]
