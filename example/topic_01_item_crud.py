"""Topic 01: single item CRUD, mget, count and scroll."""

import os

import _path_setup  # noqa: F401

from search_management import ItemResource, load_config

HASH_ID = os.getenv("SEARCH_MANAGEMENT_HASH_ID", "your-search-engine-hash-id")
INDEX_NAME = "product"


def main() -> None:
    resource = ItemResource.create(config=load_config(env_path=".env"))

    created = resource.create_item(
        HASH_ID,
        INDEX_NAME,
        {"id": "example-1", "title": "Running Shoe", "link": "https://shop.test/shoe"},
    )
    print("Created:", created.body.to_dict())

    resource.update_item(HASH_ID, INDEX_NAME, "example-1", {"title": "Trail Running Shoe"})
    print("Fetched:", resource.get_item(HASH_ID, INDEX_NAME, "example-1").body["title"])

    found = resource.find_items(HASH_ID, INDEX_NAME, [{"id": "example-1"}, {"id": "nope"}])
    for entry in found.body:
        print("found" if entry["found"] else "missing", entry.get("item"))

    print("Count:", resource.count_items(HASH_ID, INDEX_NAME).body)

    page = resource.scroll_index(HASH_ID, INDEX_NAME, {"rpp": 10})
    print(f"First page: {len(page.body['items'])} items, scroll_id={page.body.get('scroll_id')}")

    resource.delete_item(HASH_ID, INDEX_NAME, "example-1")
    resource.http_client.close()
    print("Cleanup complete.")


if __name__ == "__main__":
    main()
