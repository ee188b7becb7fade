"""Unit tests for the path intent resolver."""

import pytest

from mk.exceptions import InvalidArgumentError
from mk.intent import extension_of, has_extension, resolve_intent
from mk.models import EntryKind


class TestHasExtension:
    """Test the extension heuristic on single path segments."""

    @pytest.mark.parametrize(
        "name",
        ["foo.txt", "example.com.txt", "a.b", ".env.local", "archive.tar.gz", "x.SH"],
    )
    def test_segments_with_extension(self, name):
        """A dot after the first character followed by text is an extension."""
        assert has_extension(name)

    @pytest.mark.parametrize(
        "name", ["foo", ".gitignore", ".env", ".dir", "notes.", "", ".", ".."]
    )
    def test_segments_without_extension(self, name):
        """Leading-dot names, trailing dots and plain names have no extension."""
        assert not has_extension(name)


class TestExtensionOf:
    """Test extension extraction from full paths."""

    def test_returns_last_extension_lowercased(self):
        """Only the final suffix is returned, in lowercase."""
        assert extension_of("build/archive.TAR.GZ") == "gz"

    def test_looks_only_at_final_segment(self):
        """Dots in directory names do not leak into the result."""
        assert extension_of("example.com/readme") is None

    def test_dotfile_has_no_extension(self):
        """A hidden file name is not an extension."""
        assert extension_of("config/.bashrc") is None


class TestResolveIntent:
    """Test the File/Directory decision."""

    def test_extension_means_file(self):
        """A final segment with an extension resolves to a file."""
        assert resolve_intent("foo/bar.txt") is EntryKind.FILE

    def test_no_extension_means_directory(self):
        """A final segment without an extension resolves to a directory."""
        assert resolve_intent("foo/bar") is EntryKind.DIRECTORY

    def test_dotted_directory_names_are_ignored(self):
        """Only the final segment is inspected."""
        assert resolve_intent("examples/example.com.txt") is EntryKind.FILE
        assert resolve_intent("example.com/data") is EntryKind.DIRECTORY

    @pytest.mark.parametrize("path", [".gitignore", ".env", "config/.dir"])
    def test_dotfiles_resolve_to_directory(self, path):
        """A name whose only dot is the leading one is a directory."""
        assert resolve_intent(path) is EntryKind.DIRECTORY

    def test_dotfile_with_extension_resolves_to_file(self):
        """A hidden name with a further extension is a file."""
        assert resolve_intent(".env.local") is EntryKind.FILE

    def test_trailing_slash_means_directory(self):
        """A trailing separator overrides the extension heuristic."""
        assert resolve_intent("release.v2/") is EntryKind.DIRECTORY

    def test_force_file(self):
        """-f wins over a missing extension."""
        assert resolve_intent("foo/bar", force_file=True) is EntryKind.FILE

    def test_force_dir(self):
        """-d wins over a present extension."""
        assert resolve_intent("foo/bar.txt", force_dir=True) is EntryKind.DIRECTORY

    def test_both_forced_is_invalid(self):
        """Forcing both kinds is rejected."""
        with pytest.raises(InvalidArgumentError, match="both file and directory"):
            resolve_intent("foo", force_file=True, force_dir=True)

    def test_empty_path_is_invalid(self):
        """An empty target path is rejected."""
        with pytest.raises(InvalidArgumentError):
            resolve_intent("")
