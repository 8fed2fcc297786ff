"""Runtime settings, read from the environment (and a local ``.env``)."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings:

    def __init__(self) -> None:
        self.data_dir: Path = Path(
            os.getenv("FULFILMENT_DATA_DIR", str(_PROJECT_ROOT / "data"))
        )
        self.log_level: str = os.getenv("FULFILMENT_LOG_LEVEL", "INFO").upper()
        self.default_page_size: int = int(os.getenv("FULFILMENT_DEFAULT_PAGE_SIZE", "10"))


def get_settings() -> Settings:
    return Settings()
