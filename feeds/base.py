from __future__ import annotations

import copy
from typing import Any, Dict, List

from ports.feed import FeedCategory


class StaticFeed:
    """A feed backed by a fixed list of items; callers get their own copy."""

    feed_name: str = ""
    category: FeedCategory = "networking"
    ITEMS: List[Dict[str, Any]] = []

    def items(self) -> List[Dict[str, Any]]:
        return copy.deepcopy(self.ITEMS)
