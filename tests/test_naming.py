"""
Tests for non-destructive export naming.
"""

from pathlib import Path

from chuk_mcp_jam.export import ExportNamer, next_available_name


def touch(directory: Path, *names: str) -> None:
    for name in names:
        (directory / name).write_bytes(b"")


class TestNextAvailableName:
    """Tests for next_available_name()."""

    def test_empty_directory_starts_at_zero(self, temp_dir: Path) -> None:
        """First name in an empty directory uses suffix 0."""
        assert next_available_name("jam", temp_dir) == temp_dir.absolute() / "jam0.mid"

    def test_skips_existing_files(self, temp_dir: Path) -> None:
        """With jam0..jam4 present the next name is jam5."""
        touch(temp_dir, *(f"jam{i}.mid" for i in range(5)))
        assert next_available_name("jam", temp_dir).name == "jam5.mid"

    def test_fills_first_gap(self, temp_dir: Path) -> None:
        """The lowest unused suffix wins."""
        touch(temp_dir, "jam0.mid", "jam2.mid")
        assert next_available_name("jam", temp_dir).name == "jam1.mid"

    def test_does_not_create_file(self, temp_dir: Path) -> None:
        """Probing leaves the directory untouched."""
        path = next_available_name("jam", temp_dir)
        assert not path.exists()
        assert next_available_name("jam", temp_dir) == path

    def test_returns_absolute_path(self, temp_dir: Path, monkeypatch) -> None:
        """Defaults to the working directory and returns an absolute path."""
        monkeypatch.chdir(temp_dir)
        path = next_available_name("jam")
        assert path.is_absolute()
        assert path.parent == Path.cwd()

    def test_many_existing_files(self, temp_dir: Path) -> None:
        """Long runs of existing files are walked without recursion."""
        touch(temp_dir, *(f"jam{i}.mid" for i in range(1500)))
        assert next_available_name("jam", temp_dir).name == "jam1500.mid"

    def test_other_extensions_ignored(self, temp_dir: Path) -> None:
        """Only .mid files count as taken."""
        touch(temp_dir, "jam0.txt", "jam0")
        assert next_available_name("jam", temp_dir).name == "jam0.mid"


class TestExportNamer:
    """Tests for ExportNamer."""

    def test_export_and_playback_sequences_independent(self, temp_dir: Path) -> None:
        """jam and tempjam number separately."""
        namer = ExportNamer(temp_dir)
        touch(temp_dir, "jam0.mid", "jam1.mid")

        assert namer.export_path().name == "jam2.mid"
        assert namer.playback_path().name == "tempjam0.mid"

        touch(temp_dir, "tempjam0.mid")
        assert namer.playback_path().name == "tempjam1.mid"
        assert namer.export_path().name == "jam2.mid"

    def test_claimed_paths_advance(self, temp_dir: Path) -> None:
        """Writing the returned path moves the sequence on."""
        namer = ExportNamer(temp_dir)
        first = namer.export_path()
        first.write_bytes(b"MThd")
        second = namer.export_path()
        assert first.name == "jam0.mid"
        assert second.name == "jam1.mid"

    def test_custom_bases(self, temp_dir: Path) -> None:
        """Bases are configurable."""
        namer = ExportNamer(temp_dir, export_base="take", playback_base="preview")
        assert namer.export_path().name == "take0.mid"
        assert namer.playback_path().name == "preview0.mid"
