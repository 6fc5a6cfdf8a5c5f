from __future__ import annotations

from typing import Union

from models.profile_record import ProfileRecord
from models.stored_profile import StoredProfile
from profile_extractor import placeholder_fields


def print_profile_summary(profile: Union[ProfileRecord, StoredProfile]) -> None:
    """Print a short human-readable summary of an extracted or stored profile."""
    print("\n" + "="*60)
    print("CAREER PROFILE - SUMMARY")
    print("="*60)
    if isinstance(profile, StoredProfile):
        print(f"Profile ID: {profile.id} (user {profile.user_id})")
    print(f"Name: {profile.name}")
    print(f"Headline: {profile.headline or 'N/A'}")
    print(f"Location: {profile.location or 'N/A'}")
    print(f"Current Role: {profile.current_job_title or 'N/A'} at {profile.current_company or 'N/A'}")
    print()
    print(f"Skills ({len(profile.skills)}): {', '.join(profile.skills) or 'N/A'}")
    print(f"Education entries: {len(profile.education)}")
    for entry in profile.education:
        print(f"  - {entry.institution}")
    print(f"Experience entries: {len(profile.experience)}")
    for entry in profile.experience:
        print(f"  - {entry.title}")
    if isinstance(profile, ProfileRecord):
        defaults = placeholder_fields(profile)
        print()
        print(f"Placeholder fields: {', '.join(defaults) if defaults else 'none'}")
    print("="*60)
