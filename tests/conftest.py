"""Shared pytest fixtures for all tests."""

import logging

import pytest

from bankpull.config import Settings
from tests.helpers import FakeDownloader


@pytest.fixture
def download_dir(tmp_path):
    """Directory standing in for the OS download directory."""
    path = tmp_path / "Downloads"
    path.mkdir()
    return path


@pytest.fixture
def test_config(tmp_path, download_dir):
    """Create settings pointing at temporary download and output directories.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.
        download_dir: Temporary download directory fixture.

    Returns:
        Settings: Test settings object.
    """
    return Settings(
        transactions_path=tmp_path / "transactions",
        download_path=download_dir,
        downloader_tool="bank-downloader",
        log_level="DEBUG",
        log_dir=None,
        debug=False,
    )


@pytest.fixture
def downloader(download_dir):
    """A fake downloader that always produces an export."""
    return FakeDownloader(download_dir)


@pytest.fixture
def test_logger():
    """Logger handed to banks and engines so caplog can capture output."""
    logger = logging.getLogger("bankpull.tests")
    logger.setLevel(logging.DEBUG)
    return logger
