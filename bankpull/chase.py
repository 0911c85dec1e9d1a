from datetime import date
from pathlib import Path
from typing import NamedTuple, Optional

from .base import Bank, describe_window
from .downloader import DownloadRequest
from .errors import RetrievalError
from .models import Account, AccountKind
from .relocate import relocate


class ChaseExport(NamedTuple):
    """Account type token understood by the tool, and the file it produces."""
    account_type: str
    filename: str


# The tool uses a different account type and file name for credit cards
# when more than one card sits under the same login.
SINGLE_CREDIT_CARD = ChaseExport("credit_card", "chase_credit_card.qfx")
MULTIPLE_CREDIT_CARDS = ChaseExport("credit_cards", "chase_credit_cards.qfx")
CHECKING = ChaseExport("checking", "chase_checking.qfx")
SAVINGS = ChaseExport("savings", "chase_savings.qfx")

# Leftover exports found before a download are renamed with this suffix
STALE_SUFFIX = ".stale"


class ChaseBank(Bank):
    """
    Chase retrieval.

    Workflow per account:
    1.  Pick the account type token and expected file name from the account kind.
    2.  Run the downloader tool for the requested window.
    3.  Look for the expected file in the download directory.
    4.  Move it to `chase-<kind>-<id>.qfx` in the transactions directory.
    """

    def get_bank_name(self) -> str:
        return "chase"

    def export_for(self, account: Account) -> ChaseExport:
        """
        Select the export for an account.

        The credit card choice depends on the accounts currently registered,
        so it is recomputed on every call. Unclassified accounts are requested
        as checking accounts.
        """
        if account.kind == AccountKind.CREDIT_CARD:
            if self.credit_card_count() > 1:
                return MULTIPLE_CREDIT_CARDS
            return SINGLE_CREDIT_CARD
        if account.kind == AccountKind.SAVINGS:
            return SAVINGS
        return CHECKING

    def retrieve(self, account: Account, from_date: Optional[date], to_date: Optional[date]) -> Path:
        to_date = to_date or date.today()
        export = self.export_for(account)
        downloaded = self.download_dir / export.filename

        # A leftover export from an earlier run would be mistaken for this one
        if downloaded.exists():
            kept = relocate(downloaded, downloaded.with_name(downloaded.name + STALE_SUFFIX))
            self.logger.warning("[CHASE] Moved leftover export %s to %s", downloaded, kept)

        request = DownloadRequest(
            bank=self.get_bank_name(),
            login=self.login,
            password=self.password,
            account_id=account.id,
            account_type=export.account_type,
            from_date=from_date,
            to_date=to_date,
        )
        if not self.downloader.run(request):
            self.logger.warning(
                "[CHASE] Downloader reported failure for %s account %s", account.kind.value, account.id
            )

        if not downloaded.exists():
            raise RetrievalError(
                f"No transactions available for chase {account.kind.value} account {account.id} "
                f"from {describe_window(from_date, to_date)}"
            )

        return relocate(downloaded, self.destination_for(account, downloaded.suffix.lower()))
