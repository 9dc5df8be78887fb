from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query

from ..db import Database, QueryError
from ..dependencies import get_database
from ..responses import ID_PATTERN, fetch_failed, not_found
from .models import DishDetail, DishList
from .queries import (
    get_all_dishes,
    get_dish_by_id,
    get_dishes_by_filter,
    get_dishes_sorted_by_price,
)

router = APIRouter(prefix="/dishes", tags=["dishes"])

_LIST = {200: {"model": DishList}}
_DETAIL = {200: {"model": DishDetail}}


@router.get("", response_model=None, responses=_LIST)
async def list_dishes(db: Database = Depends(get_database)):
    try:
        return await get_all_dishes(db)
    except QueryError:
        return fetch_failed("dishes")


@router.get("/details/{dish_id}", response_model=None, responses=_DETAIL)
async def dish_details(
    dish_id: str = Path(pattern=ID_PATTERN),
    db: Database = Depends(get_database),
):
    try:
        result = await get_dish_by_id(db, dish_id)
    except QueryError:
        return fetch_failed("dish")
    if result["dish"] is None:
        return not_found("dish", dish_id)
    return result


@router.get("/filter", response_model=None, responses=_LIST)
async def dishes_by_filter(
    is_veg: bool | None = Query(default=None, alias="isVeg"),
    db: Database = Depends(get_database),
):
    try:
        return await get_dishes_by_filter(db, is_veg)
    except QueryError:
        return fetch_failed("dishes by filter")


@router.get("/sort-by-price", response_model=None, responses=_LIST)
async def dishes_sorted_by_price(db: Database = Depends(get_database)):
    try:
        return await get_dishes_sorted_by_price(db)
    except QueryError:
        return fetch_failed("dishes sorted by price")
