from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from restaurant_api.db import QueryError

FAILURES = [
    ("/restaurants", "Failed to fetch restaurants."),
    ("/restaurants/details/1", "Failed to fetch restaurant."),
    ("/restaurants/cuisine/Italian", "Failed to fetch restaurants by cuisine."),
    (
        "/restaurants/filter?isVeg=true&hasOutdoorSeating=true&isLuxury=false",
        "Failed to fetch restaurants by filter.",
    ),
    ("/restaurants/sort-by-rating", "Failed to fetch restaurants sorted by rating."),
    ("/dishes", "Failed to fetch dishes."),
    ("/dishes/details/1", "Failed to fetch dish."),
    ("/dishes/filter?isVeg=true", "Failed to fetch dishes by filter."),
    ("/dishes/sort-by-price", "Failed to fetch dishes sorted by price."),
]


@pytest.mark.parametrize("path,message", FAILURES)
def test_missing_tables_return_500(empty_db_client, path, message):
    resp = empty_db_client.get(path)
    assert resp.status_code == 500
    assert resp.json() == {"error": message}


@patch(
    "restaurant_api.db.database.Database.fetch_all",
    new_callable=AsyncMock,
    side_effect=QueryError("SELECT * FROM dishes", "disk I/O error"),
)
def test_driver_failure_returns_500(mock_fetch_all, client):
    resp = client.get("/dishes")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to fetch dishes."}
    mock_fetch_all.assert_awaited_once()


def test_lookup_failure_is_not_reported_as_404(empty_db_client):
    resp = empty_db_client.get("/dishes/details/999")
    assert resp.status_code == 500
    assert "message" not in resp.json()
