from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query

from ..db import Database, QueryError
from ..dependencies import get_database
from ..responses import ID_PATTERN, fetch_failed, not_found
from .models import RestaurantDetail, RestaurantList
from .queries import (
    get_all_restaurants,
    get_restaurant_by_id,
    get_restaurants_by_cuisine,
    get_restaurants_by_filter,
    get_restaurants_sorted_by_rating,
)

router = APIRouter(prefix="/restaurants", tags=["restaurants"])

# Rows are returned as stored; the models only document the shape.
_LIST = {200: {"model": RestaurantList}}
_DETAIL = {200: {"model": RestaurantDetail}}


@router.get("", response_model=None, responses=_LIST)
async def list_restaurants(db: Database = Depends(get_database)):
    try:
        return await get_all_restaurants(db)
    except QueryError:
        return fetch_failed("restaurants")


@router.get("/details/{restaurant_id}", response_model=None, responses=_DETAIL)
async def restaurant_details(
    restaurant_id: str = Path(pattern=ID_PATTERN),
    db: Database = Depends(get_database),
):
    try:
        result = await get_restaurant_by_id(db, restaurant_id)
    except QueryError:
        return fetch_failed("restaurant")
    if result["restaurant"] is None:
        return not_found("restaurant", restaurant_id)
    return result


@router.get("/cuisine/{cuisine}", response_model=None, responses=_LIST)
async def restaurants_by_cuisine(cuisine: str, db: Database = Depends(get_database)):
    try:
        return await get_restaurants_by_cuisine(db, cuisine)
    except QueryError:
        return fetch_failed("restaurants by cuisine")


@router.get("/filter", response_model=None, responses=_LIST)
async def restaurants_by_filter(
    is_veg: bool | None = Query(default=None, alias="isVeg"),
    has_outdoor_seating: bool | None = Query(default=None, alias="hasOutdoorSeating"),
    is_luxury: bool | None = Query(default=None, alias="isLuxury"),
    db: Database = Depends(get_database),
):
    try:
        return await get_restaurants_by_filter(db, is_veg, has_outdoor_seating, is_luxury)
    except QueryError:
        return fetch_failed("restaurants by filter")


@router.get("/sort-by-rating", response_model=None, responses=_LIST)
async def restaurants_sorted_by_rating(db: Database = Depends(get_database)):
    try:
        return await get_restaurants_sorted_by_rating(db)
    except QueryError:
        return fetch_failed("restaurants sorted by rating")
