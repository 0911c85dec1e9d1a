import logging
from datetime import date
from typing import Dict, List, Optional

from .base import Bank
from .config import FetchConfig, Settings, settings
from .downloader import Downloader
from .errors import ConfigurationError
from .models import Account, RetrievalResult
from .registry import resolve_bank, supported_banks


class RunEngine:
    """
    Orchestrates a run across every configured bank.

    Accounts are grouped under one Bank instance per (bank, login) pair, in
    configuration order. `fetch` drives each Bank in turn; per-account
    failures are isolated by the banks themselves.
    """

    def __init__(self, banks: Optional[Dict[str, Bank]] = None, logger: Optional[logging.Logger] = None):
        self.banks: Dict[str, Bank] = banks if banks is not None else {}
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def build(
        cls,
        fetch_config: FetchConfig,
        config: Settings = settings,
        downloader: Optional[Downloader] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "RunEngine":
        """
        Create the engine and its banks from a fetch configuration.

        Raises:
            ConfigurationError: if an account names a bank no implementation
                supports, a bank with no credentials entry, or when two
                credentials entries share a bank and login.
        """
        seen = set()
        for cred in fetch_config.credentials:
            resolved = resolve_bank(cred.bank)
            key = (resolved[0] if resolved else cred.bank.lower(), cred.login)
            if key in seen:
                raise ConfigurationError(
                    f"Duplicate credentials for bank: '{cred.bank}' with login '{cred.login}'"
                )
            seen.add(key)

        engine = cls(logger=logger)
        for index, entry in enumerate(fetch_config.accounts, start=1):
            resolved = resolve_bank(entry.bank)
            if resolved is None:
                raise ConfigurationError(
                    f"Bank not supported: '{entry.bank}' (account #{index}, id {entry.id}). "
                    f"Supported banks: {', '.join(supported_banks())}"
                )
            name, bank_cls = resolved

            cred = fetch_config.credentials_for(entry.bank, entry.login)
            if cred is None:
                who = f" with login '{entry.login}'" if entry.login else ""
                raise ConfigurationError(
                    f"No credentials for bank: '{entry.bank}'{who} (account #{index}, id {entry.id})"
                )

            key = f"{name}:{cred.login}"
            bank = engine.banks.get(key)
            if bank is None:
                bank = bank_cls(
                    cred.login, cred.password, config=config, downloader=downloader, logger=engine.logger
                )
                engine.banks[key] = bank
            bank.add(Account.from_config(entry.type, entry.id))

        engine.logger.debug(
            "Built %d bank(s): %s",
            len(engine.banks),
            ", ".join(f"{key} ({len(bank.accounts)} accounts)" for key, bank in engine.banks.items()),
        )
        return engine

    def fetch(self, from_date: Optional[date] = None, to_date: Optional[date] = None) -> List[RetrievalResult]:
        """Fetch every bank in turn and return the combined results."""
        results = []
        for bank in self.banks.values():
            results.extend(bank.fetch(from_date, to_date))
        return results
