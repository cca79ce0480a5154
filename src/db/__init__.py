"""Database connection and operations."""

from src.db.errors import QueryError
from src.db.postgres import (
    add_property,
    add_user,
    close_db_pool,
    get_all_properties,
    get_all_reservations,
    get_db_pool,
    get_user_with_email,
    get_user_with_id,
    ping,
)
from src.db.search import build_property_search_query

__all__ = [
    "QueryError",
    "add_property",
    "add_user",
    "build_property_search_query",
    "close_db_pool",
    "get_all_properties",
    "get_all_reservations",
    "get_db_pool",
    "get_user_with_email",
    "get_user_with_id",
    "ping",
]
