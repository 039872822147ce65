"""
Runtime configuration for the address book.

File: config.py
Author: Aidan Allchin
Created: 2026-10-12
Last Modified: 2026-10-16
"""

import logging
import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from .database.common import LOCAL_DB_PATH

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(message)s'


@dataclass
class AddressBookConfig:
    """Where the database and logs live, and how loud the logs are."""

    db_path: Path = field(default_factory=lambda: LOCAL_DB_PATH)
    log_dir: Path = field(default_factory=lambda: Path("logs"))
    log_level: str = "INFO"

    def __post_init__(self):
        # Ensure paths are Path objects
        if isinstance(self.db_path, str):
            self.db_path = Path(self.db_path)
        if isinstance(self.log_dir, str):
            self.log_dir = Path(self.log_dir)
        self.log_level = self.log_level.upper()

    @property
    def level(self) -> int:
        """Numeric logging level; unknown names fall back to INFO."""
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def from_env(cls) -> "AddressBookConfig":
        """Build config from the environment, reading .env first if present."""
        load_dotenv()
        defaults = cls()
        return cls(
            db_path=os.environ.get("ADDRESS_BOOK_DB", defaults.db_path),
            log_dir=os.environ.get("ADDRESS_BOOK_LOG_DIR", defaults.log_dir),
            log_level=os.environ.get("ADDRESS_BOOK_LOG_LEVEL", defaults.log_level),
        )


def configure_logging(config: AddressBookConfig) -> None:
    """Log to a dated file in config.log_dir and to stderr."""
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=config.level,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(config.log_dir / f"address_book_{datetime.now().strftime('%Y-%m-%d')}.log"),
            logging.StreamHandler()
        ]
    )
