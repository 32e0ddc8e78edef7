"""Turn raw item objects inside response bodies into ``Item`` records."""

from __future__ import annotations

from typing import Any

from .models import Item


def map_item_list(body: dict[str, Any], key: str = "items") -> dict[str, Any]:
    """Convert ``body[key]`` to a list of Items, keeping the other fields.

    Raises ``KeyError`` when *key* is missing.
    """
    mapped = dict(body)
    mapped[key] = [Item.from_dict(raw) for raw in body[key]]
    return mapped


def map_found_items(body: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Convert the ``item`` of every ``found`` entry of an mget result.

    Entries that were not found are returned unchanged.
    """
    mapped = []
    for entry in body:
        if entry["found"]:
            entry = {**entry, "item": Item.from_dict(entry["item"])}
        mapped.append(entry)
    return mapped
