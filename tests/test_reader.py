"""Tests for envfile.dotenv.reader"""

from pathlib import Path

import pytest

from envfile.dotenv import DotenvReader
from envfile.exceptions import MissingFileError, ResourceNotFoundError


class TestDotenvReader:
    def test_reads_lines(self, write_env):
        directory = write_env("A=1\nB=2\n")
        assert DotenvReader(directory).read() == ["A=1", "B=2"]

    def test_custom_filename(self, write_env):
        directory = write_env("X=1\n", filename="app.env")
        assert DotenvReader(directory, "app.env").read() == ["X=1"]

    def test_windows_line_endings(self, tmp_path: Path):
        (tmp_path / ".env").write_bytes(b"A=1\r\nB=2\r\n")
        assert DotenvReader(tmp_path).read() == ["A=1", "B=2"]

    def test_byte_order_mark_stripped(self, tmp_path: Path):
        (tmp_path / ".env").write_bytes(b"\xef\xbb\xbfA=1\n")
        assert DotenvReader(tmp_path).read() == ["A=1"]

    def test_directory_naming_the_file(self, write_env):
        directory = write_env("A=1\n")
        reader = DotenvReader(directory / ".env")
        assert reader.path == directory / ".env"
        assert reader.read() == ["A=1"]

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(MissingFileError) as exc_info:
            DotenvReader(tmp_path).read()
        assert exc_info.value.path == str(tmp_path / ".env")
        assert exc_info.value.code == "MISSING_FILE"
        assert isinstance(exc_info.value, ResourceNotFoundError)

    def test_path_is_directory(self, tmp_path: Path):
        (tmp_path / ".env").mkdir()
        with pytest.raises(MissingFileError):
            DotenvReader(tmp_path).read()

    def test_expands_user_home(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.setenv("HOME", str(tmp_path))
        (tmp_path / ".env").write_text("A=1\n")
        assert DotenvReader("~").read() == ["A=1"]

    def test_symlink_loop(self, tmp_path: Path):
        (tmp_path / ".env").symlink_to(tmp_path / ".env")
        with pytest.raises(MissingFileError) as exc_info:
            DotenvReader(tmp_path).read()
        assert exc_info.value.path == str(tmp_path / ".env")
