"""PostgreSQL database connection and queries using asyncpg."""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

import asyncpg
import structlog
from asyncpg import Pool

from src.config import settings
from src.db.errors import QueryError
from src.db.search import build_property_search_query
from src.models import NewProperty, NewUser, PropertySearchOptions

logger = structlog.get_logger()

_pool: Pool | None = None

_PROPERTY_COLUMNS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "street",
    "city",
    "province",
    "post_code",
    "country",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)


async def get_db_pool() -> Pool:
    """Get or create the database connection pool."""
    global _pool
    if _pool is None:
        _pool = await asyncpg.create_pool(
            settings.dsn,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
        )
        logger.info(
            "Database pool created",
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
        )
    return _pool


async def close_db_pool() -> None:
    """Close the database connection pool."""
    global _pool
    if _pool is not None:
        await _pool.close()
        _pool = None
        logger.info("Database pool closed")


@asynccontextmanager
async def get_connection() -> AsyncGenerator[asyncpg.Connection, None]:
    """Get a database connection from the pool."""
    pool = await get_db_pool()
    async with pool.acquire() as conn:
        yield conn


@asynccontextmanager
async def _query(operation: str) -> AsyncGenerator[asyncpg.Connection, None]:
    """Pooled connection whose driver and connect errors are raised as QueryError."""
    try:
        async with get_connection() as conn:
            yield conn
    except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError) as e:
        logger.error("query error", operation=operation, error=str(e), exc_info=True)
        raise QueryError(operation, str(e)) from e


def _to_dict(row: Any) -> dict[str, Any] | None:
    return dict(row) if row is not None else None


async def ping() -> bool:
    """Check the database answers a trivial query."""
    async with _query("ping") as conn:
        return await conn.fetchval("SELECT 1") == 1


# Users


async def get_user_with_email(email: str) -> dict[str, Any] | None:
    """Get a single user by email, or None if there is no such user."""
    async with _query("get_user_with_email") as conn:
        row = await conn.fetchrow(
            """
            SELECT *
            FROM users
            WHERE email = $1
            """,
            email,
        )
    return _to_dict(row)


async def get_user_with_id(user_id: int) -> dict[str, Any] | None:
    """Get a single user by id, or None if there is no such user."""
    async with _query("get_user_with_id") as conn:
        row = await conn.fetchrow(
            """
            SELECT *
            FROM users
            WHERE id = $1
            """,
            user_id,
        )
    return _to_dict(row)


async def add_user(user: NewUser) -> dict[str, Any]:
    """Insert a new user and return the stored row."""
    async with _query("add_user") as conn:
        row = await conn.fetchrow(
            """
            INSERT INTO users (name, email, password)
            VALUES ($1, $2, $3)
            RETURNING *
            """,
            user.name,
            user.email,
            user.password,
        )
    logger.info("User created", user_id=row["id"])
    return dict(row)


# Reservations


async def get_all_reservations(
    guest_id: int, limit: int | None = None
) -> list[dict[str, Any]]:
    """
    Get a guest's past reservations.

    Each row carries the reservation, its property and the property's
    average review rating. Only reservations that have already ended are
    returned, oldest first.
    """
    limit = limit or settings.default_result_limit
    async with _query("get_all_reservations") as conn:
        rows = await conn.fetch(
            """
            SELECT reservations.*, properties.*, avg(property_reviews.rating) AS average_rating
            FROM reservations
            JOIN properties ON properties.id = reservations.property_id
            JOIN property_reviews ON properties.id = property_reviews.property_id
            WHERE reservations.guest_id = $1
              AND reservations.end_date < now()::date
            GROUP BY reservations.id, properties.id
            ORDER BY reservations.start_date
            LIMIT $2
            """,
            guest_id,
            limit,
        )
    return [dict(row) for row in rows]


# Properties


async def get_all_properties(
    options: PropertySearchOptions | None = None, limit: int | None = None
) -> list[dict[str, Any]]:
    """Search properties, cheapest first, narrowed by any given options."""
    limit = limit or settings.default_result_limit
    sql, params = build_property_search_query(options, limit)
    async with _query("get_all_properties") as conn:
        rows = await conn.fetch(sql, *params)

    logger.info("Properties fetched", count=len(rows), filters=len(params) - 1)
    return [dict(row) for row in rows]


async def add_property(property: NewProperty) -> dict[str, Any]:
    """Insert a new property listing and return the stored row."""
    columns = ", ".join(_PROPERTY_COLUMNS)
    placeholders = ", ".join(f"${i}" for i in range(1, len(_PROPERTY_COLUMNS) + 1))
    values = [getattr(property, column) for column in _PROPERTY_COLUMNS]

    async with _query("add_property") as conn:
        row = await conn.fetchrow(
            f"""
            INSERT INTO properties ({columns})
            VALUES ({placeholders})
            RETURNING *
            """,
            *values,
        )
    logger.info("Property created", property_id=row["id"], owner_id=property.owner_id)
    return dict(row)
