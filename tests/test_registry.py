from __future__ import annotations

import pytest


def test_builtin_feeds_registered():
    # Import package to trigger registration
    import feeds  # noqa: F401
    from feeds.registry import available_feeds, get_feed

    names = set(available_feeds())
    assert {
        "people_to_follow",
        "people_to_connect",
        "trending_posts",
        "job_openings",
        "recommended_courses",
        "skills_to_develop",
    } <= names

    from ports.feed import FeedPort

    feed = get_feed("job_openings")
    assert isinstance(feed, FeedPort)
    assert feed.category == "jobs"
    assert len(feed.items()) == 5


def test_unknown_feed_raises():
    from feeds.registry import get_feed

    with pytest.raises(KeyError):
        get_feed("does_not_exist")


def test_recommendations_grouped_by_category():
    from feeds import recommendations

    networking = recommendations("networking")
    assert list(networking) == ["peopleToFollow", "peopleToConnect", "trendingPosts"]
    assert networking["trendingPosts"][0]["author"] == "Rachel Kim"

    with pytest.raises(KeyError):
        recommendations("gardening")


def test_feed_items_are_copies():
    from feeds import get_feed

    items = get_feed("people_to_follow").items()
    items[0]["name"] = "Changed"
    assert get_feed("people_to_follow").items()[0]["name"] == "David Chen"
