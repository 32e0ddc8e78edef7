"""Request paths for the item endpoints."""

from __future__ import annotations

from typing import Optional

MGET_SUFFIX = "/_mget"
BULK_SUFFIX = "/_bulk"
COUNT_SUFFIX = "/_count"


def build_items_url(
    hash_id: str,
    index_name: str,
    item_id: Optional[str] = None,
    temporal: bool = False,
) -> str:
    """Return the items path of an index, or of one item when *item_id* is set.

    ``temporal`` addresses the staging copy of the index used while
    reindexing. Arguments are concatenated as-is, without escaping.
    """
    url = f"/search_engines/{hash_id}/indices/{index_name}"
    if temporal:
        url += "/temp"
    url += "/items"
    if item_id is not None:
        url += f"/{item_id}"
    return url
