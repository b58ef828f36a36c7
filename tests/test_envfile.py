"""
Tests for env file reading and appending.
"""

import tempfile
from pathlib import Path

import pytest
from envcheck.core.envfile import EnvFile, AUTO_GEN_MARKER
from envcheck.core.errors import EnvFileNotFound, EnvFileParseError


class TestReadNames:
    """Name enumeration for sync."""

    def test_names_in_order(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / ".env").write_text("FOO=1\nBAR=2\n# comment\n\nBAZ=3")
            assert EnvFile(tmpdir).read_names() == ["FOO", "BAR", "BAZ"]

    def test_duplicates_kept(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / ".env").write_text("FOO=1\nFOO=2\n")
            assert EnvFile(tmpdir).read_names() == ["FOO", "FOO"]

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            env_file = EnvFile(tmpdir)
            assert env_file.exists() is False
            with pytest.raises(EnvFileNotFound):
                env_file.read_names()

    def test_invalid_utf8(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / ".env").write_bytes(b"NAME=\xff\n")
            with pytest.raises(EnvFileParseError):
                EnvFile(tmpdir).read_names()

    def test_custom_filename(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / ".env.local").write_text("LOCAL=1\n")
            assert EnvFile(tmpdir, ".env.local").read_names() == ["LOCAL"]


class TestReadValues:
    """Values used to seed the environment snapshot."""

    def test_values_unquoted(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / ".env").write_text('A=1\nB="two words"\n')
            assert EnvFile(tmpdir).read_values() == {"A": "1", "B": "two words"}

    def test_missing_file_is_empty(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            assert EnvFile(tmpdir).read_values() == {}


class TestAppendEntries:
    """Appending answered variables."""

    def test_appends_marked_block(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / ".env"
            path.write_text("EXISTING=1\n")

            EnvFile(tmpdir).append_entries({"X": "1", "Y": "a b"})

            assert path.read_text() == (
                "EXISTING=1\n"
                "\n"
                f"{AUTO_GEN_MARKER}\n"
                "X=1\n"
                'Y="a b"\n'
            )

    def test_creates_missing_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            EnvFile(tmpdir).append_entries({"X": "1"})
            assert (Path(tmpdir) / ".env").read_text() == f"\n{AUTO_GEN_MARKER}\nX=1\n"

    def test_does_not_dedupe(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / ".env"
            path.write_text("X=old\n")

            EnvFile(tmpdir).append_entries({"X": "new"})

            assert EnvFile(tmpdir).read_names() == ["X", "X"]
            assert EnvFile(tmpdir).read_values() == {"X": "new"}

    def test_empty_mapping_writes_nothing(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            EnvFile(tmpdir).append_entries({})
            assert not (Path(tmpdir) / ".env").exists()

    def test_empty_value(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            EnvFile(tmpdir).append_entries({"EMPTY": ""})
            assert (Path(tmpdir) / ".env").read_text().endswith("EMPTY=\n")
