"""Tests for AddressBookConfig and logging setup."""

import logging
from pathlib import Path

import pytest

import address_book
from address_book.config import AddressBookConfig, configure_logging
from address_book.database import LOCAL_DB_PATH


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Clear address book variables from the environment."""
    for var in ("ADDRESS_BOOK_DB", "ADDRESS_BOOK_LOG_DIR", "ADDRESS_BOOK_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


class TestAddressBookConfig:
    def test_defaults(self):
        config = AddressBookConfig()
        assert config.db_path == LOCAL_DB_PATH
        assert config.log_dir == Path("logs")
        assert config.log_level == "INFO"

    def test_default_db_beside_package(self):
        package_dir = Path(address_book.__file__).resolve().parent
        assert LOCAL_DB_PATH.resolve() == package_dir.parent / "data" / "address_book.db"

    def test_coerces_strings(self):
        config = AddressBookConfig(db_path="x/book.db", log_dir="out", log_level="debug")
        assert config.db_path == Path("x/book.db")
        assert config.log_dir == Path("out")
        assert config.log_level == "DEBUG"

    def test_from_env(self, clean_env: pytest.MonkeyPatch, tmp_path: Path):
        clean_env.setenv("ADDRESS_BOOK_DB", str(tmp_path / "env.db"))
        clean_env.setenv("ADDRESS_BOOK_LOG_LEVEL", "warning")
        config = AddressBookConfig.from_env()
        assert config.db_path == tmp_path / "env.db"
        assert config.log_level == "WARNING"

    @pytest.mark.parametrize(
        "name, expected",
        [("debug", logging.DEBUG), ("Warning", logging.WARNING), ("ERROR", logging.ERROR)],
    )
    def test_level_from_name(self, name: str, expected: int):
        assert AddressBookConfig(log_level=name).level == expected

    @pytest.mark.parametrize("name", ["basic_format", "root", "verbose", ""])
    def test_unknown_level_falls_back_to_info(self, name: str):
        assert AddressBookConfig(log_level=name).level == logging.INFO


class TestConfigureLogging:
    def test_creates_log_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        log_dir = tmp_path / "logs"
        configure_logging(AddressBookConfig(log_dir=log_dir))
        assert log_dir.is_dir()
        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
        for handler in root.handlers:
            handler.close()

    def test_bad_level_name_does_not_break_setup(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)
        configure_logging(AddressBookConfig(log_dir=tmp_path, log_level="basic_format"))
        assert root.level == logging.INFO
        for handler in root.handlers:
            handler.close()
