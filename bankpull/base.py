import logging
from abc import ABC, abstractmethod
from datetime import date
from pathlib import Path
from typing import List, Optional

from .config import Settings, settings
from .downloader import Downloader, SubprocessDownloader
from .errors import ConfigurationError, MissingImplementationError
from .models import Account, RetrievalResult
from .relocate import download_directory


def describe_window(from_date: Optional[date], to_date: Optional[date]) -> str:
    """Human readable date range for log and error messages."""
    start = from_date.isoformat() if from_date else "the beginning of history"
    end = to_date.isoformat() if to_date else "today"
    return f"{start} to {end}"


class Bank(ABC):
    """
    Abstract base class for a bank and the accounts held under one login.

    A Bank owns a credential pair and the ordered list of accounts registered
    with it. `fetch` walks those accounts and calls `retrieve` for each one,
    isolating per-account failures so that one missing export never stops the
    rest of the list. Subclasses supply `get_bank_name` and `retrieve`.
    """

    def __init__(
        self,
        login: str,
        password: str,
        config: Settings = settings,
        downloader: Optional[Downloader] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.login = login
        self.password = password
        self.config = config
        self.accounts: List[Account] = []
        self.logger = logger or logging.getLogger(__name__)
        self.downloader = downloader or SubprocessDownloader(config.downloader_tool, logger=self.logger)
        # Resolved up front so an unsupported OS fails the run before any fetch
        self.download_dir: Path = config.download_path or download_directory()

    @abstractmethod
    def get_bank_name(self) -> str:
        """Return unique bank identifier for file naming."""
        pass

    def add(self, account: Account):
        """Register an account. Duplicates are kept, in order."""
        self.accounts.append(account)

    def fetch(self, from_date: Optional[date] = None, to_date: Optional[date] = None) -> List[RetrievalResult]:
        """
        Retrieve every account, in registration order.

        Errors from `retrieve` are logged and recorded against the account, and
        the loop moves on. Configuration errors (including a missing
        `retrieve` implementation) are not isolated and propagate to the caller.

        Returns:
            One RetrievalResult per account.
        """
        bank_name = self.get_bank_name()
        results = []
        for account in self.accounts:
            self.logger.info(
                "[%s] Fetching %s account %s (%s)",
                bank_name.upper(), account.kind.value, account.id, describe_window(from_date, to_date)
            )
            try:
                destination = self.retrieve(account, from_date, to_date)
            except ConfigurationError:
                raise
            except Exception as e:
                self.logger.error(
                    "[%s] Failed to fetch %s account %s: %s",
                    bank_name.upper(), account.kind.value, account.id, e
                )
                results.append(RetrievalResult(bank_name, account, error=str(e)))
                continue

            self.logger.info("[%s] Saved %s", bank_name.upper(), destination)
            results.append(RetrievalResult(bank_name, account, destination=destination))
        return results

    def retrieve(self, account: Account, from_date: Optional[date], to_date: Optional[date]) -> Path:
        """
        Retrieve one account's export and move it into place.

        Returns:
            The destination path of the export.

        Raises:
            RetrievalError: when no export is produced for the window.
        """
        raise MissingImplementationError(
            f"Missing implementation: {type(self).__name__} does not implement retrieve"
        )

    def destination_for(self, account: Account, extension: str) -> Path:
        """Return <transactions_path>/<bank>-<kind>-<id><extension>."""
        filename = f"{self.get_bank_name()}-{account.kind.value}-{account.id}{extension}"
        return self.config.transactions_path / filename

    def credit_card_count(self) -> int:
        return sum(1 for account in self.accounts if account.is_credit_card)
