"""Topic 02: fill the temporal index in bulk while the live index keeps serving.

Swapping the temporal index in (and creating/deleting it) happens through the
index endpoints and is not shown here.
"""

import os

import _path_setup  # noqa: F401

from search_management import ApiError, ItemResource, load_config

HASH_ID = os.getenv("SEARCH_MANAGEMENT_HASH_ID", "your-search-engine-hash-id")
INDEX_NAME = "product"

PRODUCTS = [
    {"id": "p-1", "title": "Rain Jacket", "price": 89.0},
    {"id": "p-2", "title": "Wool Hat", "price": 19.5},
    {"id": "p-3", "title": "Hiking Boots", "price": 129.0},
]


def main() -> None:
    resource = ItemResource.create(config=load_config(env_path=".env"))

    result = resource.create_items_in_bulk_in_temporal_index(HASH_ID, INDEX_NAME, PRODUCTS)
    print("Bulk create:", result.body)

    resource.update_items_in_bulk_in_temporal_index(
        HASH_ID, INDEX_NAME, [{"id": "p-2", "price": 17.0}]
    )

    found = resource.find_items_from_temporal_index(
        HASH_ID, INDEX_NAME, [{"id": p["id"]} for p in PRODUCTS]
    )
    print("Staged:", [entry["item"]["title"] for entry in found.body if entry["found"]])

    try:
        resource.delete_items_in_bulk_in_temporal_index(HASH_ID, INDEX_NAME, [{"id": "p-3"}])
    except ApiError as exc:
        print("Bulk delete failed:", exc, exc.body)
    finally:
        resource.http_client.close()


if __name__ == "__main__":
    main()
