"""
Run cache.

Remembers the date of the last completed run in a one-key YAML file:

    last-run: 2024/01/01

The loaded date becomes the start of the next run's fetch window.
"""

from datetime import date, datetime
from pathlib import Path
from typing import Optional, Union

import yaml

from .errors import ConfigurationError

LAST_RUN_KEY = "last-run"
CACHE_DATE_FORMAT = "%Y/%m/%d"
ACCEPTED_DATE_FORMATS = (CACHE_DATE_FORMAT, "%Y-%m-%d")


class RunCache:
    """Reads and writes the last-run date. A missing path disables caching."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None

    def load(self) -> Optional[date]:
        """
        Return the last run date, or None if no run is recorded.

        Raises:
            ConfigurationError: if the file exists but cannot be understood.
        """
        if self.path is None or not self.path.exists():
            return None

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in cache file {self.path}: {e}") from e

        if not isinstance(data, dict) or data.get(LAST_RUN_KEY) is None:
            return None
        return self._parse_date(data[LAST_RUN_KEY])

    def save(self, day: date):
        """Record `day` as the last run, replacing the file's contents."""
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            yaml.safe_dump({LAST_RUN_KEY: day.strftime(CACHE_DATE_FORMAT)}, f, default_flow_style=False)

    def _parse_date(self, value) -> date:
        # Unquoted ISO dates come back from YAML as date objects
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        for fmt in ACCEPTED_DATE_FORMATS:
            try:
                return datetime.strptime(str(value).strip(), fmt).date()
            except ValueError:
                continue
        raise ConfigurationError(f"Unrecognized {LAST_RUN_KEY} date in {self.path}: {value!r}")
