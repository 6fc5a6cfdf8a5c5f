import argparse
import json
import mimetypes
from pathlib import Path

from db.connection import get_connection
from db import schema
from db.repos.career_goals_repo import CareerGoalsRepo
from db.repos.profiles_repo import ProfilesRepo
from db.repos.saved_items_repo import SavedItemsRepo
from config.profile_fields import CAREER_GOALS_DEFAULTS
from models.career_goals_record import CareerGoalsInput
from config.settings import get_settings
from document_text import acquire_profile_text, read_document
from feeds import recommendations
from pipelines.ingest_profile import ingest_profile
from profile_extractor import extract_profile
from services.interests import suggest_interests
from services.reporting import print_profile_summary
from utils.logging_setup import init_logging


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _open_db(args):
    conn = get_connection(args.db)
    schema.bootstrap(conn, get_settings().owner_user_id)
    return conn


def _content_type(path: str) -> str:
    guessed, _ = mimetypes.guess_type(path)
    return guessed or "application/octet-stream"


def cmd_bootstrap(args):
    conn = _open_db(args)
    conn.close()
    print("Schema ready")


def cmd_extract(args):
    data = read_document(args.file)
    text = acquire_profile_text(data, filename=args.file, content_type=_content_type(args.file))
    record = extract_profile(text)
    if args.summary:
        print_profile_summary(record)
        return
    _print_json(record.model_dump(mode="json", by_alias=True))


def cmd_upload(args):
    conn = _open_db(args)
    try:
        data = read_document(args.file)
        ctx = ingest_profile(conn, data, filename=Path(args.file).name, content_type=_content_type(args.file))
    finally:
        conn.close()
    if args.summary:
        print_profile_summary(ctx.stored)
        return
    _print_json(ctx.stored.model_dump(mode="json", by_alias=True))


def cmd_show_profile(args):
    conn = _open_db(args)
    try:
        profile = ProfilesRepo(conn).get_by_user(get_settings().owner_user_id)
    finally:
        conn.close()
    if not profile:
        print("Profile not found")
        return
    _print_json(profile.model_dump(mode="json", by_alias=True))


def cmd_suggest_interests(args):
    conn = _open_db(args)
    try:
        profile = ProfilesRepo(conn).get_by_user(get_settings().owner_user_id)
    finally:
        conn.close()
    if not profile:
        print("Profile not found")
        return
    _print_json(suggest_interests(profile))


def cmd_recommendations(args):
    _print_json(recommendations(args.category))


def cmd_career_goals(args):
    conn = _open_db(args)
    owner_id = get_settings().owner_user_id
    try:
        repo = CareerGoalsRepo(conn)
        changes = {
            "desired_role": args.desired_role,
            "industry": args.industry,
            "location": args.location,
            "salary_range": args.salary_range,
        }
        changes = {k: v for k, v in changes.items() if v is not None}
        if changes:
            goals = repo.upsert(owner_id, changes)
        else:
            goals = repo.get_by_user(owner_id)
    finally:
        conn.close()
    if not goals:
        _print_json(CareerGoalsInput(**CAREER_GOALS_DEFAULTS).model_dump(by_alias=True))
        return
    _print_json(goals.model_dump(mode="json", by_alias=True))


def cmd_saved_items(args):
    conn = _open_db(args)
    try:
        items = SavedItemsRepo(conn).list(get_settings().owner_user_id, args.type)
    finally:
        conn.close()
    _print_json([item.model_dump(mode="json", by_alias=True) for item in items])


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="Career profile CLI")
    parser.add_argument("--db", default=settings.db_path, help="Path to SQLite DB (default from settings)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_boot = sub.add_parser("bootstrap", help="Create tables and seed the owner user")
    p_boot.set_defaults(func=cmd_bootstrap)

    p_ext = sub.add_parser("extract", help="Print the profile extracted from a PDF or text file (no DB writes)")
    p_ext.add_argument("--file", required=True, help="Path to a LinkedIn PDF export or plain-text profile")
    p_ext.add_argument("--summary", action="store_true", help="Print a readable summary instead of JSON")
    p_ext.set_defaults(func=cmd_extract)

    p_up = sub.add_parser("upload", help="Extract a profile and store it for the owner user")
    p_up.add_argument("--file", required=True, help="Path to a LinkedIn PDF export or plain-text profile")
    p_up.add_argument("--summary", action="store_true", help="Print a readable summary instead of JSON")
    p_up.set_defaults(func=cmd_upload)

    p_show = sub.add_parser("show-profile", help="Show the stored profile")
    p_show.set_defaults(func=cmd_show_profile)

    p_sug = sub.add_parser("suggest-interests", help="Suggest topics and skills for the stored profile")
    p_sug.set_defaults(func=cmd_suggest_interests)

    p_rec = sub.add_parser("recommendations", help="Show networking or job recommendations")
    p_rec.add_argument("category", choices=["networking", "jobs"])
    p_rec.set_defaults(func=cmd_recommendations)

    p_goals = sub.add_parser("career-goals", help="Show career goals, or update them when any option is given")
    p_goals.add_argument("--desired-role", default=None)
    p_goals.add_argument("--industry", default=None)
    p_goals.add_argument("--location", default=None)
    p_goals.add_argument("--salary-range", default=None)
    p_goals.set_defaults(func=cmd_career_goals)

    p_saved = sub.add_parser("saved-items", help="List saved items")
    p_saved.add_argument("--type", default=None, choices=["person", "job", "course", "post", "skill"])
    p_saved.set_defaults(func=cmd_saved_items)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
