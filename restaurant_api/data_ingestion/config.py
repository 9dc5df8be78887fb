from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class IngestionConfig:
    """
    Configuration for the seed data loader.
    """

    seed_data_dir: Path = Path(__file__).resolve().parent.parent / "data" / "seed"
    database_path: Path = Path("database1.sqlite")
    restaurants_filename: str = "restaurants.csv"
    dishes_filename: str = "dishes.csv"

    @property
    def restaurants_path(self) -> Path:
        return self.seed_data_dir / self.restaurants_filename

    @property
    def dishes_path(self) -> Path:
        return self.seed_data_dir / self.dishes_filename


DEFAULT_INGESTION_CONFIG = IngestionConfig()
