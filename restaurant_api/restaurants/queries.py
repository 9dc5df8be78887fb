from __future__ import annotations

from typing import Any

from ..db import Database, flag_values, row_id


async def get_all_restaurants(db: Database) -> dict[str, Any]:
    query = "SELECT * FROM restaurants"
    return {"restaurants": await db.fetch_all(query)}


async def get_restaurant_by_id(db: Database, restaurant_id: str) -> dict[str, Any]:
    query = "SELECT * FROM restaurants WHERE id = ?"
    return {"restaurant": await db.fetch_one(query, [row_id(restaurant_id)])}


async def get_restaurants_by_cuisine(db: Database, cuisine: str) -> dict[str, Any]:
    query = "SELECT * FROM restaurants WHERE cuisine = ?"
    return {"restaurants": await db.fetch_all(query, [cuisine])}


async def get_restaurants_by_filter(
    db: Database,
    is_veg: bool | None,
    has_outdoor_seating: bool | None,
    is_luxury: bool | None,
) -> dict[str, Any]:
    """Match all three flags by exact equality.

    Every flag is always applied, so an omitted one yields an empty list.
    """
    query = (
        "SELECT * FROM restaurants WHERE "
        "isVeg IN (?, ?) AND hasOutdoorSeating IN (?, ?) AND isLuxury IN (?, ?)"
    )
    params = [
        *flag_values(is_veg),
        *flag_values(has_outdoor_seating),
        *flag_values(is_luxury),
    ]
    return {"restaurants": await db.fetch_all(query, params)}


async def get_restaurants_sorted_by_rating(db: Database) -> dict[str, Any]:
    query = "SELECT * FROM restaurants ORDER BY rating DESC"
    return {"restaurants": await db.fetch_all(query)}
