from __future__ import annotations

from typing import Any

from ..db import Database, flag_values, row_id


async def get_all_dishes(db: Database) -> dict[str, Any]:
    query = "SELECT * FROM dishes"
    return {"dishes": await db.fetch_all(query)}


async def get_dish_by_id(db: Database, dish_id: str) -> dict[str, Any]:
    query = "SELECT * FROM dishes WHERE id = ?"
    return {"dish": await db.fetch_one(query, [row_id(dish_id)])}


async def get_dishes_by_filter(db: Database, is_veg: bool | None) -> dict[str, Any]:
    query = "SELECT * FROM dishes WHERE isVeg IN (?, ?)"
    return {"dishes": await db.fetch_all(query, flag_values(is_veg))}


async def get_dishes_sorted_by_price(db: Database) -> dict[str, Any]:
    query = "SELECT * FROM dishes ORDER BY price ASC"
    return {"dishes": await db.fetch_all(query)}
