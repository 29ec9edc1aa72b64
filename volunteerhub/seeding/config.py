from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SeedConfig:
    """
    Configuration for the sample event seeding step.
    """

    processed_data_dir: Path = Path(__file__).resolve().parent.parent / "data" / "processed"
    processed_filename: str = "events.csv"

    @property
    def processed_path(self) -> Path:
        return self.processed_data_dir / self.processed_filename


DEFAULT_SEED_CONFIG = SeedConfig()
