from __future__ import annotations

import sqlite3

import pytest

from db import schema
from db.repos.career_goals_repo import CareerGoalsRepo
from db.repos.interests_repo import InterestsRepo
from db.repos.profiles_repo import ProfilesRepo
from db.repos.saved_items_repo import SavedItemsRepo
from db.repos.users_repo import UsersRepo
from models.saved_item_record import SavedItemInput
from profile_extractor import extract_profile


def _conn(tmp_path) -> sqlite3.Connection:
    conn = sqlite3.connect(str(tmp_path / "t.db"))
    schema.bootstrap(conn)
    return conn


def test_bootstrap_seeds_owner_and_is_idempotent(tmp_path):
    conn = _conn(tmp_path)
    try:
        schema.bootstrap(conn)
        user = UsersRepo(conn).get(1)
        assert user is not None and user.username == "demo"
        assert UsersRepo(conn).get_by_username("demo").id == 1
    finally:
        conn.close()


def test_profile_upsert_creates_then_merges(tmp_path):
    conn = _conn(tmp_path)
    try:
        repo = ProfilesRepo(conn)
        first = repo.upsert(1, extract_profile("Name: Alice\nSkills\nPython\n"))
        assert first.id > 0
        assert first.created_at is not None
        assert first.skills == ["Python"]

        repo.update(first.id, {"summary": "Hand written", "certifications": ["PMP"]})
        second = repo.upsert(1, extract_profile("Name: Alice B\nSkills\nGo\n"))
        assert second.id == first.id
        assert second.name == "Alice B"
        assert second.skills == ["Go"]
        assert second.summary == "Hand written"
        assert second.certifications == ["PMP"]
        assert second.created_at == first.created_at

        cur = conn.cursor()
        cur.execute("SELECT COUNT(*) FROM profiles")
        assert cur.fetchone()[0] == 1
    finally:
        conn.close()


def test_profile_update_unknown_id_raises(tmp_path):
    conn = _conn(tmp_path)
    try:
        with pytest.raises(KeyError):
            ProfilesRepo(conn).update(999, {"name": "Nobody"})
    finally:
        conn.close()


def test_interests_upsert_merges(tmp_path):
    conn = _conn(tmp_path)
    try:
        repo = InterestsRepo(conn)
        assert repo.get_by_user(1) is None
        created = repo.upsert(1, {"topics": [{"id": "topic1", "name": "AI", "selected": True}]})
        assert created.skills == []
        updated = repo.upsert(1, {"skills": [{"id": "skill1", "name": "SQL", "selected": False}]})
        assert updated.id == created.id
        assert [t.name for t in updated.topics] == ["AI"]
        assert [s.name for s in updated.skills] == ["SQL"]
    finally:
        conn.close()


def test_career_goals_upsert_merges(tmp_path):
    conn = _conn(tmp_path)
    try:
        repo = CareerGoalsRepo(conn)
        created = repo.upsert(1, {"desired_role": "CTO", "industry": "Fintech"})
        updated = repo.upsert(1, {"location": "Berlin"})
        assert updated.id == created.id
        assert updated.desired_role == "CTO"
        assert updated.location == "Berlin"
        assert updated.salary_range is None
    finally:
        conn.close()


def test_saved_items_list_filter_and_delete(tmp_path):
    conn = _conn(tmp_path)
    try:
        repo = SavedItemsRepo(conn)
        job = repo.create(1, SavedItemInput(itemType="job", itemId="job1", itemData={"title": "PM"}))
        repo.create(1, SavedItemInput(itemType="course", itemId="course2"))
        assert [i.item_id for i in repo.list(1)] == ["job1", "course2"]
        jobs = repo.list(1, "job")
        assert len(jobs) == 1 and jobs[0].item_data == {"title": "PM"}

        assert repo.delete(job.id) is True
        assert repo.delete(job.id) is False
        assert repo.delete(12345) is False
        assert [i.item_id for i in repo.list(1)] == ["course2"]
    finally:
        conn.close()


def test_repos_satisfy_ports(tmp_path):
    from ports.repos import CareerGoalsRepoPort, InterestsRepoPort, ProfilesRepoPort, SavedItemsRepoPort

    conn = _conn(tmp_path)
    try:
        assert isinstance(ProfilesRepo(conn), ProfilesRepoPort)
        assert isinstance(InterestsRepo(conn), InterestsRepoPort)
        assert isinstance(CareerGoalsRepo(conn), CareerGoalsRepoPort)
        assert isinstance(SavedItemsRepo(conn), SavedItemsRepoPort)
    finally:
        conn.close()
