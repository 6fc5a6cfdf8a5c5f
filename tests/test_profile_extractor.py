from __future__ import annotations

from config.profile_fields import PROFILE_DEFAULTS
from profile_extractor import (
    default_profile,
    extract_profile,
    extract_skills,
    locate_field,
    locate_section,
    placeholder_fields,
)


JANE_DOE = (
    "Name: Jane Doe\nHeadline: CTO\n\nSkills\nPython\nLeadership\n\n"
    "Education\nHarvard University Bachelor\n\nExperience\nSenior Engineer at Acme\n"
)


def test_unlabelled_text_yields_default_record():
    record = extract_profile("just some words without any labels\nand a second line")
    assert record == default_profile()
    assert record.name == "LinkedIn User"
    assert record.headline == "Professional on LinkedIn"
    assert record.skills == ["Skill 1", "Skill 2", "Skill 3", "Skill 4", "Skill 5"]
    assert len(record.education) == 1
    assert record.education[0].institution == "University Name from PDF"
    assert len(record.experience) == 1
    assert record.experience[0].title == "Job Title from PDF"


def test_empty_text_yields_default_record():
    record = extract_profile("")
    assert record.current_job_title == PROFILE_DEFAULTS["current_job_title"]
    assert record.current_company == PROFILE_DEFAULTS["current_company"]
    assert record.location == PROFILE_DEFAULTS["location"]
    assert record.industry == PROFILE_DEFAULTS["industry"]


def test_name_is_trimmed_to_end_of_line():
    record = extract_profile("Name: Jane Smith\n")
    assert record.name == "Jane Smith"


def test_end_to_end_scenario():
    record = extract_profile(JANE_DOE)
    assert record.name == "Jane Doe"
    assert record.headline == "CTO"
    assert record.skills == ["Python", "Leadership"]
    assert len(record.education) == 1
    assert "Harvard University" in record.education[0].institution
    assert record.education[0].degree == "Degree extracted from PDF"
    assert record.education[0].years == "Date range extracted from PDF"
    assert len(record.experience) == 1
    assert "Engineer" in record.experience[0].title
    assert record.experience[0].company == "Company from PDF"
    assert record.experience[0].duration == "Duration from PDF"


def test_label_inside_a_word_does_not_match():
    assert extract_profile("Pseudoname: Ghost\n").name == "LinkedIn User"
    assert extract_profile("Pseudoname: Ghost\nName: Real Person\n").name == "Real Person"


def test_first_occurrence_wins():
    assert locate_field("Name: First\nName: Second\n", ["Name"]) == "First"


def test_alias_priority_beats_document_order():
    record = extract_profile("Profile: From Profile\nName: From Name\n")
    assert record.name == "From Name"
    assert extract_profile("Profile: Only Profile\n").name == "Only Profile"


def test_empty_value_falls_through_to_next_alias_then_default():
    assert extract_profile("Name:   \nProfile: Jo\n").name == "Jo"
    assert extract_profile("Name:\n").name == "LinkedIn User"


def test_field_labels_are_case_insensitive():
    record = extract_profile("LOCATION: Berlin\nindustry: Software\njob title: Developer\n")
    assert record.location == "Berlin"
    assert record.industry == "Software"
    assert record.current_job_title == "Developer"


def test_single_line_fields_from_aliases():
    text = "Address: Remote\nSector: Finance\nCurrent Company: Acme\nCurrent Role: Analyst\nTitle: Builder\n"
    record = extract_profile(text)
    assert record.location == "Remote"
    assert record.industry == "Finance"
    assert record.current_company == "Acme"
    assert record.current_job_title == "Analyst"
    assert record.headline == "Builder"


def test_skills_boundary_50_excluded_49_included():
    fifty = "a" * 50
    forty_nine = "b" * 49
    record = extract_profile(f"Skills\n{fifty}\n{forty_nine}\n")
    assert record.skills == [forty_nine]


def test_skills_capped_at_ten_in_order():
    lines = [f"Skill number {i}" for i in range(1, 13)]
    skills = extract_skills("Skills\n" + "\n".join(lines))
    assert skills == lines[:10]


def test_skills_drop_header_noise_lines():
    text = "Skills & Endorsements\nSkills\nEndorsements (12)\n  Python  \n\n"
    assert extract_profile(text).skills == ["Python"]


def test_skills_extraction_is_idempotent():
    text = "Top Skills\nSQL\nGo\nRust\n"
    first = extract_profile(text).skills
    second = extract_profile(text).skills
    assert first == second == ["SQL", "Go", "Rust"]


def test_no_skills_found_defaults_to_five_placeholders():
    record = extract_profile("Skills\n" + "x" * 60 + "\n")
    assert len(record.skills) == 5
    assert record.skills[0] == "Skill 1"


def test_section_ends_at_capitalized_label_line():
    record = extract_profile("Skills\nPython\nIndustry: Tech\n")
    assert record.skills == ["Python"]
    assert record.industry == "Tech"


def test_section_runs_to_end_of_text():
    assert locate_section("Skills\nPython\nSQL", ["Skills"]) == "Skills\nPython\nSQL"
    assert locate_section("No headers here", ["Skills"]) is None


def test_education_matching_is_case_insensitive():
    lower = extract_profile("Education\nuniversity of test\n")
    upper = extract_profile("Education\nUNIVERSITY OF TEST\n")
    assert lower.education[0].institution == "university of test"
    assert upper.education[0].institution == "UNIVERSITY OF TEST"


def test_education_distinct_matches():
    text = "Education\nStanford University MBA Program\nstanford university mba program\nCity College of Design\n"
    institutions = [e.institution for e in extract_profile(text).education]
    assert institutions == ["Stanford University MBA Program", "City College of Design"]


def test_experience_matching_is_case_insensitive():
    lower = extract_profile("Experience\nsenior engineer at acme\n")
    upper = extract_profile("EXPERIENCE\nSENIOR ENGINEER AT ACME\n")
    assert [e.title for e in lower.experience] == ["senior engineer at acme"]
    assert [e.title for e in upper.experience] == ["SENIOR ENGINEER AT ACME"]


def test_experience_roles_per_line():
    text = "Experience\nSenior Product Manager\nAcme Corp\nLead Developer at Beta\n"
    titles = [e.title for e in extract_profile(text).experience]
    assert titles == ["Senior Product Manager", "Lead Developer at Beta"]


def test_crlf_text_is_normalized():
    record = extract_profile("Name: Jane Doe\r\nSkills\r\nPython\r\n")
    assert record.name == "Jane Doe"
    assert record.skills == ["Python"]


def test_placeholder_fields_lists_defaulted_fields():
    record = extract_profile(JANE_DOE)
    missing = placeholder_fields(record)
    assert "name" not in missing
    assert "skills" not in missing
    assert "location" in missing
    assert "current_company" in missing


def test_record_serializes_with_camel_case_keys():
    data = extract_profile(JANE_DOE).model_dump(by_alias=True)
    assert data["currentJobTitle"] == "Role from LinkedIn"
    assert data["currentCompany"] == "Company from LinkedIn"
