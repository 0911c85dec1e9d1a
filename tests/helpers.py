"""Helper utilities for tests."""

from pathlib import Path
from typing import Iterable, List, Optional

from bankpull.chase import CHECKING, MULTIPLE_CREDIT_CARDS, SAVINGS, SINGLE_CREDIT_CARD
from bankpull.downloader import Downloader, DownloadRequest

CHASE_FILENAMES = {
    export.account_type: export.filename
    for export in (SINGLE_CREDIT_CARD, MULTIPLE_CREDIT_CARDS, CHECKING, SAVINGS)
}


class FakeDownloader(Downloader):
    """Stands in for the external tool.

    Records every request and, unless the account id is listed in `missing`,
    drops the export the real tool would produce into `download_dir`.
    """

    def __init__(self, download_dir: Path, missing: Optional[Iterable[str]] = None, succeed: bool = True):
        self.download_dir = download_dir
        self.missing = set(missing or [])
        self.succeed = succeed
        self.requests: List[DownloadRequest] = []

    def run(self, request: DownloadRequest) -> bool:
        self.requests.append(request)
        if request.account_id in self.missing:
            return False
        self.download_dir.mkdir(parents=True, exist_ok=True)
        path = self.download_dir / CHASE_FILENAMES[request.account_type]
        path.write_text(f"OFXHEADER:100\n<ACCTID>{request.account_id}\n", encoding="utf-8")
        return self.succeed


def write_config(path: Path, text: str) -> Path:
    """Write a YAML config file and return its path."""
    path.write_text(text, encoding="utf-8")
    return path
