from __future__ import annotations

from typing import Any, Dict, List

from models.interests_record import InterestOption

# Fixed suggestion lists; the profile is only required to exist
SUGGESTED_TOPICS = [
    ("topic1", "Product Management", True),
    ("topic2", "Digital Transformation", True),
    ("topic3", "Artificial Intelligence", False),
    ("topic4", "User Experience Design", False),
    ("topic5", "Tech Leadership", False),
]

SUGGESTED_SKILLS = [
    ("skill1", "Data Science", True),
    ("skill2", "Machine Learning", False),
    ("skill3", "Strategic Business Development", True),
    ("skill4", "Cloud Architecture", False),
    ("skill5", "Project Management", False),
]


def _options(rows) -> List[Dict[str, Any]]:
    return [InterestOption(id=i, name=n, selected=s).model_dump() for i, n, s in rows]


def suggest_interests(profile: Any) -> Dict[str, List[Dict[str, Any]]]:
    return {
        "suggestedTopics": _options(SUGGESTED_TOPICS),
        "suggestedSkills": _options(SUGGESTED_SKILLS),
    }
