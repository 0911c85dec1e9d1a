from pathlib import Path

import pytest

from bankpull.errors import ConfigurationError, UnsupportedPlatformError
from bankpull.relocate import download_directory, relocate


class TestDownloadDirectory:
    @pytest.mark.parametrize("system", ["Linux", "Darwin"])
    def test_posix_systems_use_home_downloads(self, system):
        assert download_directory(system) == Path.home() / "Downloads"

    def test_windows_uses_userprofile(self, monkeypatch, tmp_path):
        monkeypatch.setenv("USERPROFILE", str(tmp_path))

        assert download_directory("Windows") == tmp_path / "Downloads"

    def test_unsupported_platform_is_fatal(self):
        with pytest.raises(UnsupportedPlatformError, match="SunOS"):
            download_directory("SunOS")

    def test_unsupported_platform_is_a_configuration_error(self):
        with pytest.raises(ConfigurationError):
            download_directory("Java")

    def test_detects_platform_when_not_given(self, monkeypatch):
        monkeypatch.setattr("bankpull.relocate.platform.system", lambda: "Plan9")

        with pytest.raises(UnsupportedPlatformError):
            download_directory()


class TestRelocate:
    def test_creates_destination_directory(self, tmp_path):
        source = tmp_path / "export.qfx"
        source.write_text("data")
        destination = tmp_path / "out" / "nested" / "chase-savings-1.qfx"

        assert relocate(source, destination) == destination
        assert destination.read_text() == "data"
        assert not source.exists()

    def test_overwrites_existing_destination(self, tmp_path):
        source = tmp_path / "export.qfx"
        source.write_text("new")
        destination = tmp_path / "chase-savings-1.qfx"
        destination.write_text("old")

        relocate(source, destination)

        assert destination.read_text() == "new"
