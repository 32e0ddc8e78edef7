from __future__ import annotations

import pytest
from pydantic import ValidationError

from search_management.mapping import map_found_items, map_item_list
from search_management.models import Item


def test_map_item_list_keeps_order_and_cursor():
    body = {"items": [{"a": 1}, {"a": 2}], "scroll_id": "c1"}

    mapped = map_item_list(body)

    assert mapped == {"items": [Item({"a": 1}), Item({"a": 2})], "scroll_id": "c1"}
    assert all(isinstance(item, Item) for item in mapped["items"])
    # input left untouched
    assert body["items"] == [{"a": 1}, {"a": 2}]


def test_map_item_list_missing_key_raises():
    with pytest.raises(KeyError):
        map_item_list({"scroll_id": "c1"})


def test_map_item_list_rejects_non_object_items():
    with pytest.raises(ValidationError):
        map_item_list({"items": ["not-an-object"]})


def test_map_found_items():
    body = [{"found": True, "item": {"a": 1}}, {"found": False}]

    mapped = map_found_items(body)

    assert mapped == [{"found": True, "item": Item({"a": 1})}, {"found": False}]
    assert isinstance(mapped[0]["item"], Item)
    assert mapped[1] is body[1]


def test_map_found_items_missing_found_raises():
    with pytest.raises(KeyError):
        map_found_items([{"item": {"a": 1}}])


def test_map_found_items_found_without_item_raises():
    with pytest.raises(KeyError):
        map_found_items([{"found": True}])


def test_item_mapping_access():
    item = Item.from_dict({"id": "1", "title": "Shoe", "price": 9.5})

    assert item["title"] == "Shoe"
    assert "price" in item
    assert item.get("missing", "n/a") == "n/a"
    assert len(item) == 3
    assert list(item) == ["id", "title", "price"]
    assert item.to_dict() == {"id": "1", "title": "Shoe", "price": 9.5}
