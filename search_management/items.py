"""Item CRUD, mget, count and bulk operations, on an index or its temporal copy."""

from __future__ import annotations

from typing import Any, Optional

from .client import (
    METHOD_DELETE,
    METHOD_GET,
    METHOD_PATCH,
    METHOD_POST,
    HttpClient,
    create_client,
)
from .config import ManagementConfig
from .mapping import map_found_items, map_item_list
from .models import HttpResponse, Item
from .urls import BULK_SUFFIX, COUNT_SUFFIX, MGET_SUFFIX, build_items_url


class ItemResource:
    """Requests against the item endpoints of a search engine.

    *http_client* is anything with a ``request(method, path, model=None,
    body=None)`` method returning an :class:`HttpResponse`; errors it raises
    reach the caller unchanged.
    """

    def __init__(self, http_client: Any) -> None:
        self.http_client = http_client

    @classmethod
    def create(
        cls,
        config: Optional[ManagementConfig] = None,
        **overrides,
    ) -> "ItemResource":
        """Build an ItemResource on top of :func:`create_client`."""
        return cls(create_client(config=config, **overrides))

    def _request(
        self,
        method: str,
        path: str,
        model: Optional[type] = None,
        body: Any = None,
    ) -> HttpResponse:
        return self.http_client.request(method, path, model=model, body=body)

    def _find(self, path: str, params: Any) -> HttpResponse:
        response = self._request(METHOD_POST, path + MGET_SUFFIX, body=params)
        response.body = map_found_items(response.body)
        return response

    # -- index --------------------------------------------------------------

    def create_item(self, hash_id: str, index_name: str, params: dict[str, Any]) -> HttpResponse:
        """Create a new item in an index."""
        return self._request(METHOD_POST, build_items_url(hash_id, index_name), Item, params)

    def update_item(
        self, hash_id: str, index_name: str, item_id: str, params: dict[str, Any]
    ) -> HttpResponse:
        """Update an existing item."""
        return self._request(
            METHOD_PATCH, build_items_url(hash_id, index_name, item_id), Item, params
        )

    def get_item(self, hash_id: str, index_name: str, item_id: str) -> HttpResponse:
        return self._request(METHOD_GET, build_items_url(hash_id, index_name, item_id), Item)

    def delete_item(self, hash_id: str, index_name: str, item_id: str) -> HttpResponse:
        return self._request(METHOD_DELETE, build_items_url(hash_id, index_name, item_id))

    def scroll_index(
        self, hash_id: str, index_name: str, params: Optional[dict[str, Any]] = None
    ) -> HttpResponse:
        """Fetch one page of the items of an index.

        *params* are sent as query parameters (e.g. ``scroll_id``, ``rpp``).
        The ``items`` of the returned body are :class:`Item` records, the
        other fields (the scroll cursor) are left as returned.
        """
        response = self._request(METHOD_GET, build_items_url(hash_id, index_name), body=params)
        response.body = map_item_list(response.body)
        return response

    def find_items(self, hash_id: str, index_name: str, params: Any) -> HttpResponse:
        """Get several items by id in one request.

        The body is a list of ``{"found": bool, "item": Item}`` entries in
        request order; entries that were not found carry no ``item``.
        """
        return self._find(build_items_url(hash_id, index_name), params)

    def count_items(self, hash_id: str, index_name: str) -> HttpResponse:
        """Return the total number of items in the index."""
        return self._request(METHOD_GET, build_items_url(hash_id, index_name) + COUNT_SUFFIX)

    def create_items_in_bulk(self, hash_id: str, index_name: str, params: list[Any]) -> HttpResponse:
        return self._request(
            METHOD_POST, build_items_url(hash_id, index_name) + BULK_SUFFIX, body=params
        )

    def update_items_in_bulk(self, hash_id: str, index_name: str, params: list[Any]) -> HttpResponse:
        return self._request(
            METHOD_PATCH, build_items_url(hash_id, index_name) + BULK_SUFFIX, body=params
        )

    def delete_items_in_bulk(self, hash_id: str, index_name: str, params: list[Any]) -> HttpResponse:
        """Delete items by id; *params* is a list like ``[{"id": "1"}]``."""
        return self._request(
            METHOD_DELETE, build_items_url(hash_id, index_name) + BULK_SUFFIX, body=params
        )

    # -- temporal index -----------------------------------------------------

    def create_item_in_temporal_index(
        self, hash_id: str, index_name: str, params: dict[str, Any]
    ) -> HttpResponse:
        return self._request(
            METHOD_POST, build_items_url(hash_id, index_name, temporal=True), Item, params
        )

    def update_item_in_temporal_index(
        self, hash_id: str, index_name: str, item_id: str, params: dict[str, Any]
    ) -> HttpResponse:
        return self._request(
            METHOD_PATCH,
            build_items_url(hash_id, index_name, item_id, temporal=True),
            Item,
            params,
        )

    def get_item_from_temporal_index(
        self, hash_id: str, index_name: str, item_id: str
    ) -> HttpResponse:
        return self._request(
            METHOD_GET, build_items_url(hash_id, index_name, item_id, temporal=True), Item
        )

    def delete_item_from_temporal_index(
        self, hash_id: str, index_name: str, item_id: str
    ) -> HttpResponse:
        return self._request(
            METHOD_DELETE, build_items_url(hash_id, index_name, item_id, temporal=True)
        )

    def find_items_from_temporal_index(
        self, hash_id: str, index_name: str, params: Any
    ) -> HttpResponse:
        """Same as :meth:`find_items`, against the temporal index."""
        return self._find(build_items_url(hash_id, index_name, temporal=True), params)

    def create_items_in_bulk_in_temporal_index(
        self, hash_id: str, index_name: str, params: list[Any]
    ) -> HttpResponse:
        return self._request(
            METHOD_POST,
            build_items_url(hash_id, index_name, temporal=True) + BULK_SUFFIX,
            body=params,
        )

    def update_items_in_bulk_in_temporal_index(
        self, hash_id: str, index_name: str, params: list[Any]
    ) -> HttpResponse:
        return self._request(
            METHOD_PATCH,
            build_items_url(hash_id, index_name, temporal=True) + BULK_SUFFIX,
            body=params,
        )

    def delete_items_in_bulk_in_temporal_index(
        self, hash_id: str, index_name: str, params: list[Any]
    ) -> HttpResponse:
        return self._request(
            METHOD_DELETE,
            build_items_url(hash_id, index_name, temporal=True) + BULK_SUFFIX,
            body=params,
        )
