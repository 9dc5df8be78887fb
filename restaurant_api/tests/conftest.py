from __future__ import annotations

import sqlite3
from pathlib import Path

import pandas as pd
import pytest
from fastapi.testclient import TestClient

from restaurant_api.app import create_app
from restaurant_api.config import AppConfig
from restaurant_api.data_ingestion.config import IngestionConfig
from restaurant_api.data_ingestion.ingest import run_ingestion

SEED_DIR = Path(__file__).resolve().parent.parent / "data" / "seed"


@pytest.fixture(scope="session")
def seeded_db(tmp_path_factory) -> Path:
    db_path = tmp_path_factory.mktemp("db") / "restaurants.sqlite"
    return run_ingestion(IngestionConfig(database_path=db_path))


@pytest.fixture(scope="session")
def seed_restaurants() -> pd.DataFrame:
    return pd.read_csv(SEED_DIR / "restaurants.csv")


@pytest.fixture(scope="session")
def seed_dishes() -> pd.DataFrame:
    return pd.read_csv(SEED_DIR / "dishes.csv")


@pytest.fixture
def client(seeded_db):
    app = create_app(AppConfig(database_path=seeded_db))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def empty_db_client(tmp_path):
    # A database file with no tables: every query fails inside SQLite.
    app = create_app(AppConfig(database_path=tmp_path / "empty.sqlite"))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def text_flag_client(tmp_path):
    # Schema owned elsewhere: TEXT flags, an extra column, a non-numeric price.
    db_path = tmp_path / "external.sqlite"
    with sqlite3.connect(db_path) as conn:
        conn.executescript(
            """
            CREATE TABLE restaurants (
                id INTEGER PRIMARY KEY, name TEXT, cuisine TEXT, rating REAL,
                isVeg TEXT, hasOutdoorSeating TEXT, isLuxury TEXT, address TEXT
            );
            INSERT INTO restaurants VALUES
                (1, 'Spice Kitchen', 'Indian', 4.5, 'true', 'true', 'false', '12 MG Road'),
                (2, 'Olive Bistro', 'Italian', 4.1, 'false', 'true', 'false', '3 Church St'),
                (3, 'Royal Feast', 'Indian', 4.8, 'true', 'true', 'true', NULL);
            CREATE TABLE dishes (id INTEGER PRIMARY KEY, name TEXT, price, isVeg TEXT);
            INSERT INTO dishes VALUES
                (1, 'Paneer Tikka', 240, 'true'),
                (2, 'Catch of the Day', 'market price', 'false');
            """
        )
    conn.close()
    app = create_app(AppConfig(database_path=db_path))
    with TestClient(app) as c:
        yield c
