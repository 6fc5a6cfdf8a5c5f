from __future__ import annotations

from typing import Any, Dict, List, Literal, Protocol, runtime_checkable


FeedCategory = Literal["networking", "jobs"]


@runtime_checkable
class FeedPort(Protocol):
    feed_name: str
    category: FeedCategory

    def items(self) -> List[Dict[str, Any]]:
        ...
