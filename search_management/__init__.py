"""Client for the item endpoints of a search management API."""

from .client import BearerTokenAuth, HttpClient, create_client
from .config import ManagementConfig, load_config
from .errors import ApiError
from .items import ItemResource
from .mapping import map_found_items, map_item_list
from .models import HttpResponse, Item
from .urls import build_items_url

__all__ = [
    # client
    "create_client",
    "HttpClient",
    "BearerTokenAuth",
    # config
    "ManagementConfig",
    "load_config",
    # errors
    "ApiError",
    # models
    "Item",
    "HttpResponse",
    # items
    "ItemResource",
    "build_items_url",
    "map_item_list",
    "map_found_items",
]
