# Importing the feed modules registers the built-in feeds
from . import networking  # noqa: F401
from . import jobs  # noqa: F401
from .registry import available_feeds, get_feed, recommendations  # noqa: F401
