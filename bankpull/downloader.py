"""
Downloader invoker.

The external downloader tool does the actual talking to the bank. Given
credentials, an account and a date range it deposits a single export file in
the OS download directory. This module builds its argument list and runs it.

Banks depend only on the `Downloader` interface, so tests can substitute an
in-process fake for the subprocess.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from .config import DEFAULT_DOWNLOADER_TOOL

DATE_FORMAT = "%m/%d/%Y"


@dataclass(frozen=True)
class DownloadRequest:
    """Everything the downloader tool needs for one account."""
    bank: str
    login: str
    password: str
    account_id: str
    account_type: str
    from_date: Optional[date] = None
    to_date: Optional[date] = None

    def arguments(self) -> List[str]:
        """
        Build the tool's argument list (without the executable name).

        An absent date omits its flag entirely.
        """
        args = [
            self.bank,
            "--username", self.login,
            "--password", self.password,
            "--account_id", self.account_id,
            "--account_type", self.account_type,
        ]
        if self.from_date is not None:
            args += ["--from_date", self.from_date.strftime(DATE_FORMAT)]
        if self.to_date is not None:
            args += ["--to_date", self.to_date.strftime(DATE_FORMAT)]
        return args

    def masked_arguments(self) -> List[str]:
        """Same as arguments() but safe to log."""
        args = self.arguments()
        args[args.index("--password") + 1] = "****"
        return args


class Downloader(ABC):
    """Interface for anything that can run a DownloadRequest."""

    @abstractmethod
    def run(self, request: DownloadRequest) -> bool:
        """Run the request. Returns True if the tool reported success."""
        pass


class SubprocessDownloader(Downloader):
    """Runs the external downloader tool as a blocking subprocess."""

    def __init__(self, tool: str = DEFAULT_DOWNLOADER_TOOL, logger: Optional[logging.Logger] = None):
        self.tool = tool
        self.logger = logger or logging.getLogger(__name__)

    def command(self, request: DownloadRequest) -> List[str]:
        return [self.tool] + request.arguments()

    def run(self, request: DownloadRequest) -> bool:
        self.logger.debug("Running: %s", " ".join([self.tool] + request.masked_arguments()))
        # No timeout: a hung tool hangs the run
        result = subprocess.run(self.command(request), check=False)
        if result.returncode != 0:
            self.logger.debug("%s exited with status %d", self.tool, result.returncode)
        return result.returncode == 0
