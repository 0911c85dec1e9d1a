from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

"""
Data Models for bankpull

This module defines the small value types passed between the configuration
layer, the bank implementations and the run engine.

Key Classes:
- AccountKind: Enum for account classifications.
- Account: One configured bank account (kind + bank specific id).
- RetrievalResult: Outcome of fetching a single account.
"""


class AccountKind(str, Enum):
    # Values are also the <accountkind> segment of destination file names.
    CREDIT_CARD = "credit_card"
    CHECKING = "checkings"
    SAVINGS = "savings"
    UNCLASSIFIED = "unknown"


# First match wins, so credit card patterns are checked before checking and savings.
KIND_PATTERNS: Tuple[Tuple[AccountKind, Tuple[str, ...]], ...] = (
    (AccountKind.CREDIT_CARD, ("credit", "cc")),
    (AccountKind.CHECKING, ("check", "chequ")),
    (AccountKind.SAVINGS, ("saving",)),
)


def classify(raw_type: str) -> AccountKind:
    """
    Classify a free-text account type from the configuration.

    Performs a case-insensitive substring match against KIND_PATTERNS.
    Unrecognized types yield AccountKind.UNCLASSIFIED instead of an error,
    so a typo in the configuration degrades the retrieval arguments rather
    than aborting the run.
    """
    text = str(raw_type or "").lower()
    for kind, patterns in KIND_PATTERNS:
        for pattern in patterns:
            if pattern in text:
                return kind
    return AccountKind.UNCLASSIFIED


@dataclass(frozen=True)
class Account:
    """A single bank account: classified kind plus the bank's identifier."""
    kind: AccountKind
    id: str

    @classmethod
    def from_config(cls, raw_type: str, account_id) -> "Account":
        return cls(kind=classify(raw_type), id=str(account_id))

    @property
    def is_credit_card(self) -> bool:
        return self.kind == AccountKind.CREDIT_CARD


@dataclass
class RetrievalResult:
    """
    Outcome of retrieving one account.

    Exactly one of `destination` (on success) or `error` (on failure) is set.
    """
    bank: str
    account: Account
    destination: Optional[Path] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
