from __future__ import annotations

from search_management.urls import build_items_url


def test_collection_path():
    assert build_items_url("abc123", "product") == "/search_engines/abc123/indices/product/items"


def test_item_path():
    assert (
        build_items_url("abc123", "product", "sku-1")
        == "/search_engines/abc123/indices/product/items/sku-1"
    )


def test_temporal_paths():
    assert (
        build_items_url("abc123", "product", temporal=True)
        == "/search_engines/abc123/indices/product/temp/items"
    )
    assert (
        build_items_url("abc123", "product", "x", temporal=True)
        == "/search_engines/abc123/indices/product/temp/items/x"
    )


def test_same_inputs_give_same_path():
    first = build_items_url("e", "i", "x", temporal=True)
    assert build_items_url("e", "i", "x", temporal=True) == first
