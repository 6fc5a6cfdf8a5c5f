from __future__ import annotations

from typing import Any


# Central table for profile extraction. Edit here to change labels, limits or placeholders.
#
# Alias lists are priority ordered: the first alias with a non-empty value wins.
FIELD_ALIASES: dict[str, list[str]] = {
    "name": ["Name", "Profile"],
    "headline": ["Headline", "Title"],
    "location": ["Location", "Address"],
    "industry": ["Industry", "Sector"],
    "current_company": ["Company", "Current Company"],
    "current_job_title": ["Job Title", "Position", "Current Role"],
}

# Longer headers first so "Skills & Endorsements" is not cut short at "Skills"
SECTION_HEADERS: dict[str, list[str]] = {
    "skills": ["Skills & Endorsements", "Skills and Endorsements", "Top Skills", "Skills"],
    "education": ["Education"],
    "experience": ["Work Experience", "Experience"],
}

SKILLS_LIMIT = 10
# Lines this long or longer are prose, not a skill label
SKILL_MAX_LENGTH = 50

INSTITUTION_KEYWORDS: list[str] = ["University", "College", "School", "Institute"]
ROLE_KEYWORDS: list[str] = ["Manager", "Director", "Lead", "Engineer", "Developer", "Designer"]
# Words captured before/after a keyword (same line only)
PHRASE_WORDS_BEFORE = 2
PHRASE_WORDS_AFTER = 5

PROFILE_DEFAULTS: dict[str, Any] = {
    "name": "LinkedIn User",
    "headline": "Professional on LinkedIn",
    "location": "Location from LinkedIn",
    "industry": "Industry from LinkedIn",
    "current_job_title": "Role from LinkedIn",
    "current_company": "Company from LinkedIn",
    "skills": ["Skill 1", "Skill 2", "Skill 3", "Skill 4", "Skill 5"],
    "education": [
        {
            "institution": "University Name from PDF",
            "degree": "Degree Program from PDF",
            "years": "Years of attendance from PDF",
        }
    ],
    "experience": [
        {
            "title": "Job Title from PDF",
            "company": "Company Name from PDF",
            "duration": "Employment duration from PDF",
        }
    ],
}

# Filled into every matched entry; the heuristic never parses these from text
EDUCATION_MATCH_PLACEHOLDERS: dict[str, str] = {
    "degree": "Degree extracted from PDF",
    "years": "Date range extracted from PDF",
}
EXPERIENCE_MATCH_PLACEHOLDERS: dict[str, str] = {
    "company": "Company from PDF",
    "duration": "Duration from PDF",
}

CAREER_GOALS_DEFAULTS: dict[str, str] = {
    "desired_role": "Product Manager",
    "industry": "Technology",
    "location": "San Francisco, CA",
    "salary_range": "$120,000 - $150,000",
}
