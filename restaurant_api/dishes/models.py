from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Dish(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    name: str | None = None
    price: float | None = None
    isVeg: bool | None = None


class DishList(BaseModel):
    dishes: list[Dish]


class DishDetail(BaseModel):
    dish: Dish
