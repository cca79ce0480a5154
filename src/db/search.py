"""Property search query construction."""

from typing import Any

from src.models import PropertySearchOptions

_BASE_QUERY = """
SELECT properties.*, avg(property_reviews.rating) AS average_rating
FROM properties
JOIN property_reviews ON properties.id = property_reviews.property_id
"""


def _dollars_to_cents(amount: float | None) -> int:
    return int(round(amount * 100)) if amount else 0


def build_property_search_query(
    options: PropertySearchOptions | None, limit: int
) -> tuple[str, list[Any]]:
    """
    Build the property search SQL and its positional parameters.

    Filters are appended in a fixed order (city, owner, price, rating) and
    every value is bound as the next ``$n`` placeholder. The limit is
    always the last parameter.

    Returns:
        Tuple of (sql, params)
    """
    params: list[Any] = []
    conditions: list[str] = []

    def bind(value: Any) -> str:
        params.append(value)
        return f"${len(params)}"

    if options is not None and options.has_filters():
        if options.city:
            # Dropping the first letter lets "vancouver" match "Vancouver"
            conditions.append(f"city LIKE {bind(f'%{options.city[1:]}%')}")

        if options.owner_id:
            conditions.append(f"owner_id = {bind(options.owner_id)}")

        minimum = _dollars_to_cents(options.minimum_price_per_night)
        maximum = _dollars_to_cents(options.maximum_price_per_night)
        if minimum:
            conditions.append(f"cost_per_night >= {bind(minimum)}")
        if maximum:
            conditions.append(f"cost_per_night <= {bind(maximum)}")

        if options.minimum_rating:
            conditions.append(
                f"property_reviews.rating >= {bind(options.minimum_rating)}::numeric"
            )

    sql = _BASE_QUERY
    if conditions:
        sql += "WHERE " + "\n  AND ".join(conditions) + "\n"

    sql += f"""GROUP BY properties.id
ORDER BY cost_per_night
LIMIT {bind(limit)}
"""
    return sql, params
