"""
Output relocation.

Locates the directory the downloader tool deposits its exports in, and moves
an export from there to its per-bank, per-account destination.
"""

import os
import platform
import shutil
from pathlib import Path
from typing import Optional

from .errors import UnsupportedPlatformError

SUPPORTED_SYSTEMS = ("Linux", "Darwin", "Windows")


def download_directory(system: Optional[str] = None) -> Path:
    """
    Return the OS download directory.

    Args:
        system: Platform name as reported by platform.system(). Detected when omitted.

    Raises:
        UnsupportedPlatformError: on any platform other than Linux, macOS or Windows.
    """
    system = system or platform.system()
    if system not in SUPPORTED_SYSTEMS:
        raise UnsupportedPlatformError(
            f"Cannot locate the download directory on unsupported platform: {system}"
        )
    if system == "Windows":
        return Path(os.environ.get("USERPROFILE", str(Path.home()))) / "Downloads"
    return Path.home() / "Downloads"


def relocate(source: Path, destination: Path) -> Path:
    """
    Move `source` to `destination`, creating parent directories and
    replacing any file already at `destination`.
    """
    destination.parent.mkdir(parents=True, exist_ok=True)
    if destination.exists():
        destination.unlink()
    shutil.move(str(source), str(destination))
    return destination
