"""
Exception hierarchy for bankpull.

Two tiers:
- ConfigurationError and its subclasses are fatal. They abort the whole run
  and the run cache is left untouched.
- RetrievalError is recoverable. Bank.fetch catches it per account, logs it
  and moves on to the next account.
"""


class BankPullError(Exception):
    """Base class for all bankpull errors."""


class ConfigurationError(BankPullError):
    """Invalid or unsupported configuration. Fatal for the run."""


class UnsupportedPlatformError(ConfigurationError):
    """The OS download directory cannot be located on this platform."""


class MissingImplementationError(ConfigurationError, NotImplementedError):
    """A bank variant was selected that has no retrieval implementation."""


class RetrievalError(BankPullError):
    """A single account could not be retrieved for the requested window."""
