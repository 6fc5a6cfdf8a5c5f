import re
import logging
from typing import List, Optional

from config.profile_fields import (
    EDUCATION_MATCH_PLACEHOLDERS,
    EXPERIENCE_MATCH_PLACEHOLDERS,
    FIELD_ALIASES,
    INSTITUTION_KEYWORDS,
    PHRASE_WORDS_AFTER,
    PHRASE_WORDS_BEFORE,
    PROFILE_DEFAULTS,
    ROLE_KEYWORDS,
    SECTION_HEADERS,
    SKILL_MAX_LENGTH,
    SKILLS_LIMIT,
)
from models.profile_record import EducationEntry, ExperienceEntry, ProfileRecord

logger = logging.getLogger(__name__)


# Lines inside a skills block that repeat the header rather than name a skill
SKILLS_NOISE_RE = re.compile(r"^skills|^endorsements", re.IGNORECASE)

# A block ends at a blank line, at a "Word:" label line, or at the end of the text
SECTION_END = r"(?=\n[ \t]*\n|\n(?-i:[A-Z])\w*:|\Z)"

# Leading words must start with a letter so dates and bullets are not pulled in
LEAD_WORD = r"[^\W\d_][\w.&'-]*"
TRAIL_WORD = r"\w[\w.,&'-]*"


def _label_regex(label: str) -> str:
    # "Job Title" also matches "Job  Title" or "Job\tTitle"
    return r"[ \t]+".join(re.escape(word) for word in label.split())


def _field_pattern(alias: str) -> re.Pattern:
    return re.compile(
        r"(?<!\w)" + _label_regex(alias) + r"[ \t]*:[ \t]*([^\n]*)",
        re.IGNORECASE,
    )


def _section_pattern(headers: List[str]) -> re.Pattern:
    names = "|".join(_label_regex(h) for h in headers)
    return re.compile(
        r"^[ \t]*(?:" + names + r")(?!\w)[^\n]*.*?" + SECTION_END,
        re.IGNORECASE | re.MULTILINE | re.DOTALL,
    )


def _phrase_pattern(keywords: List[str]) -> re.Pattern:
    return re.compile(
        rf"(?<![\w.,&'-])(?:{LEAD_WORD}[ \t]+){{0,{PHRASE_WORDS_BEFORE}}}"
        rf"(?:{'|'.join(keywords)})\b"
        rf"(?:[ \t]+{TRAIL_WORD}){{0,{PHRASE_WORDS_AFTER}}}",
        re.IGNORECASE,
    )


INSTITUTION_RE = _phrase_pattern(INSTITUTION_KEYWORDS)
ROLE_RE = _phrase_pattern(ROLE_KEYWORDS)


def locate_field(text: str, aliases: List[str]) -> Optional[str]:
    """Return the trimmed value of the first alias (in priority order) with a non-empty value.

    Each alias is looked up at its first occurrence in the document; the label must not
    be glued to a preceding word ("Pseudoname:" never satisfies "Name:").
    """
    for alias in aliases:
        match = _field_pattern(alias).search(text)
        if match:
            value = match.group(1).strip()
            if value:
                return value
    return None


def locate_section(text: str, headers: List[str]) -> Optional[str]:
    """Return the block starting at the first header line, or None when no header is present."""
    match = _section_pattern(headers).search(text)
    return match.group(0) if match else None


def extract_skills(block: Optional[str]) -> List[str]:
    """Concise skill labels from a skills block, header dropped, at most SKILLS_LIMIT."""
    if not block:
        return []
    skills: List[str] = []
    for line in block.split("\n")[1:]:
        item = line.strip()
        if not item or SKILLS_NOISE_RE.match(item):
            continue
        if len(item) >= SKILL_MAX_LENGTH:
            continue
        skills.append(item)
        if len(skills) == SKILLS_LIMIT:
            break
    return skills


def _distinct_phrases(pattern: re.Pattern, block: Optional[str]) -> List[str]:
    if not block:
        return []
    seen = set()
    phrases: List[str] = []
    for match in pattern.finditer(block):
        phrase = match.group(0).strip().rstrip(",")
        key = phrase.lower()
        if phrase and key not in seen:
            seen.add(key)
            phrases.append(phrase)
    return phrases


def extract_education(block: Optional[str]) -> List[EducationEntry]:
    return [
        EducationEntry(institution=phrase, **EDUCATION_MATCH_PLACEHOLDERS)
        for phrase in _distinct_phrases(INSTITUTION_RE, block)
    ]


def extract_experience(block: Optional[str]) -> List[ExperienceEntry]:
    return [
        ExperienceEntry(title=phrase, **EXPERIENCE_MATCH_PLACEHOLDERS)
        for phrase in _distinct_phrases(ROLE_RE, block)
    ]


def default_profile() -> ProfileRecord:
    """The record produced when nothing in the text is recognized."""
    return extract_profile("")


def extract_profile(raw_text: str) -> ProfileRecord:
    """Turn plain document text into a fully populated ProfileRecord.

    Never raises for string input: every field, list or section that cannot be
    recognized falls back to its entry in PROFILE_DEFAULTS.
    """
    text = (raw_text or "").replace("\r\n", "\n").replace("\r", "\n")

    fields = {}
    for key, aliases in FIELD_ALIASES.items():
        fields[key] = locate_field(text, aliases) or PROFILE_DEFAULTS[key]

    skills = extract_skills(locate_section(text, SECTION_HEADERS["skills"]))
    education = extract_education(locate_section(text, SECTION_HEADERS["education"]))
    experience = extract_experience(locate_section(text, SECTION_HEADERS["experience"]))

    logger.debug(
        f"Extracted profile for {fields['name']}: skills={len(skills)} "
        f"education={len(education)} experience={len(experience)}"
    )

    return ProfileRecord(
        **fields,
        skills=skills or list(PROFILE_DEFAULTS["skills"]),
        education=education or [EducationEntry(**e) for e in PROFILE_DEFAULTS["education"]],
        experience=experience or [ExperienceEntry(**e) for e in PROFILE_DEFAULTS["experience"]],
    )


def placeholder_fields(record: ProfileRecord) -> List[str]:
    """Names of the fields that fell back to their default value."""
    defaults = default_profile()
    return [
        field
        for field in ProfileRecord.model_fields
        if getattr(record, field) == getattr(defaults, field)
    ]
