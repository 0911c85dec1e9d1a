"""
bankpull package.

This package retrieves transaction exports for configured bank accounts using
an external downloader tool, files them under predictable names, and remembers
when it last ran so later runs fetch only new transactions.
It includes the abstract base class `Bank`, bank-specific implementations, the
`RunEngine` that groups accounts under banks, and the `RunCache`.
"""
from .base import Bank
from .cache import RunCache
from .chase import ChaseBank
from .config import settings, Settings, FetchConfig
from .downloader import Downloader, DownloadRequest, SubprocessDownloader
from .engine import RunEngine
from .errors import (
    BankPullError,
    ConfigurationError,
    MissingImplementationError,
    RetrievalError,
    UnsupportedPlatformError,
)
from .models import Account, AccountKind, RetrievalResult, classify

__all__ = [
    "Bank",
    "RunCache",
    "ChaseBank",
    "settings",
    "Settings",
    "FetchConfig",
    "Downloader",
    "DownloadRequest",
    "SubprocessDownloader",
    "RunEngine",
    "BankPullError",
    "ConfigurationError",
    "MissingImplementationError",
    "RetrievalError",
    "UnsupportedPlatformError",
    "Account",
    "AccountKind",
    "RetrievalResult",
    "classify",
]
