from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Restaurant(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    name: str | None = None
    cuisine: str | None = None
    rating: float | None = None
    isVeg: bool | None = None
    hasOutdoorSeating: bool | None = None
    isLuxury: bool | None = None


class RestaurantList(BaseModel):
    restaurants: list[Restaurant]


class RestaurantDetail(BaseModel):
    restaurant: Restaurant
