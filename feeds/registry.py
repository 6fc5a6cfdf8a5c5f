from __future__ import annotations

from typing import Any, Dict, List


_REGISTRY: Dict[str, Any] = {}


def register(name: str, factory) -> None:
    _REGISTRY[name] = factory


def get_feed(name: str):
    if name not in _REGISTRY:
        raise KeyError(f"Unknown feed: {name}")
    return _REGISTRY[name]()


def available_feeds() -> Dict[str, Any]:
    return dict(_REGISTRY)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def recommendations(category: str) -> Dict[str, List[Dict[str, Any]]]:
    """All feeds of one category keyed by camelCase feed name, in registration order."""
    result: Dict[str, List[Dict[str, Any]]] = {}
    for name in _REGISTRY:
        feed = get_feed(name)
        if feed.category == category:
            result[_camel(name)] = feed.items()
    if not result:
        raise KeyError(f"Unknown recommendation category: {category}")
    return result
