"""
Bank registry.

Maps bank name patterns from the configuration to Bank implementations.
Adding a bank means adding its class here; the engine does not change.
"""

from typing import Optional, Tuple, Type

from .base import Bank
from .chase import ChaseBank

# (registry name, Bank subclass). The registry name is matched as a
# case-insensitive substring of the configured bank name.
BANKS: Tuple[Tuple[str, Type[Bank]], ...] = (
    ("chase", ChaseBank),
)


def resolve_bank(bank_name: str) -> Optional[Tuple[str, Type[Bank]]]:
    """Return (registry name, Bank class) for a configured bank name, or None."""
    text = bank_name.lower()
    for name, cls in BANKS:
        if name in text:
            return name, cls
    return None


def supported_banks():
    """Get list of supported bank names."""
    return [name for name, _ in BANKS]
