from __future__ import annotations

import logging
import numbers
import sqlite3
from pathlib import Path
from typing import Dict, List

import pandas as pd

from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig

logger = logging.getLogger(__name__)


RESTAURANT_COLUMNS: List[str] = [
    "id",
    "name",
    "cuisine",
    "rating",
    "isVeg",
    "hasOutdoorSeating",
    "isLuxury",
]

DISH_COLUMNS: List[str] = ["id", "name", "price", "isVeg"]

RESTAURANT_DTYPES: Dict[str, str] = {
    "id": "INTEGER PRIMARY KEY",
    "name": "TEXT",
    "cuisine": "TEXT",
    "rating": "REAL",
    "isVeg": "INTEGER",
    "hasOutdoorSeating": "INTEGER",
    "isLuxury": "INTEGER",
}

DISH_DTYPES: Dict[str, str] = {
    "id": "INTEGER PRIMARY KEY",
    "name": "TEXT",
    "price": "REAL",
    "isVeg": "INTEGER",
}

_TRUE_VALUES = {"1", "true", "yes", "y", "t"}
_FALSE_VALUES = {"0", "false", "no", "n", "f"}


def _normalize_flag(value: object) -> int | None:
    if value is None or pd.isna(value):
        return None
    if isinstance(value, numbers.Number):
        return int(bool(value))
    raw = str(value).strip().lower()
    if raw in _TRUE_VALUES:
        return 1
    if raw in _FALSE_VALUES:
        return 0
    return None


def _load_table(path: Path, columns: List[str], flags: List[str]) -> pd.DataFrame:
    df = pd.read_csv(path)

    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise ValueError(f"{path.name} is missing columns: {', '.join(missing)}")

    df = df[columns].copy()
    for col in flags:
        df[col] = df[col].apply(_normalize_flag).astype("Int64")
    return df


def _write_table(
    conn: sqlite3.Connection,
    name: str,
    df: pd.DataFrame,
    dtypes: Dict[str, str],
) -> None:
    # to_sql cannot declare a primary key, so the table is created by hand.
    columns_sql = ", ".join(f"{col} {dtype}" for col, dtype in dtypes.items())
    conn.execute(f"DROP TABLE IF EXISTS {name}")
    conn.execute(f"CREATE TABLE {name} ({columns_sql})")
    df.to_sql(name, conn, if_exists="append", index=False)


def run_ingestion(config: IngestionConfig = DEFAULT_INGESTION_CONFIG) -> Path:
    """
    Load the seed CSVs into the SQLite database.

    Steps:
    - Read restaurants and dishes from the seed directory.
    - Normalize flag columns to 0/1.
    - Replace both tables in the target database.
    """

    restaurants = _load_table(
        config.restaurants_path,
        RESTAURANT_COLUMNS,
        ["isVeg", "hasOutdoorSeating", "isLuxury"],
    )
    dishes = _load_table(config.dishes_path, DISH_COLUMNS, ["isVeg"])

    config.database_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(config.database_path)
    try:
        with conn:
            _write_table(conn, "restaurants", restaurants, RESTAURANT_DTYPES)
            _write_table(conn, "dishes", dishes, DISH_DTYPES)
    finally:
        conn.close()

    logger.info(
        "Loaded %d restaurants and %d dishes into %s",
        len(restaurants),
        len(dishes),
        config.database_path,
    )
    return config.database_path


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    path = run_ingestion()
    print(f"Ingestion complete. Seed data saved to: {path}")
