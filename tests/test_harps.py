"""Tests for harp register operations."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from harpsearch.encoding.codec import SENTINEL
from harpsearch.harps import (
    GLOBAL_SEARCH_SECTION,
    Harps,
    local_marks_section,
    local_search_section,
    percwd_section,
)
from harpsearch.models import MarkLocation, SearchDirective, SearchTarget


@pytest.fixture
def store() -> MagicMock:
    mock_store = MagicMock()
    mock_store.update.return_value = True
    return mock_store


class TestSections:
    """Test section naming."""

    def test_location_sections(self) -> None:
        """Should append the location to the section prefix."""
        assert percwd_section("~/prog/dotfiles") == "cwd_harps_~/prog/dotfiles"
        assert local_marks_section("~/a.css") == "local_marks_~/a.css"
        assert local_search_section("~/a.css") == "local_search_~/a.css"


class TestPathHarps:
    """Test path harps."""

    def test_default(self, store: MagicMock) -> None:
        """Should use the harps section."""
        store.get_path.return_value = "~/a.txt"
        harps = Harps(store)

        assert harps.default_get("a") == "~/a.txt"
        store.get_path.assert_called_once_with("harps", "a")
        assert harps.default_set("a", "~/b.txt") is True
        store.update.assert_called_once_with("harps", "a", path="~/b.txt")

    def test_percwd(self, store: MagicMock) -> None:
        """Should key the section by the working directory."""
        harps = Harps(store)

        harps.percwd_set("q", "~/prog", "src/main.py")
        store.update.assert_called_once_with("cwd_harps_~/prog", "q", path="src/main.py")
        harps.percwd_get("q", "~/prog")
        store.get_path.assert_called_once_with("cwd_harps_~/prog", "q")

    def test_cd_and_positional(self, store: MagicMock) -> None:
        """Should use their own sections."""
        harps = Harps(store)

        harps.cd_set("d", "~/prog")
        harps.positional_set("g", ".gitignore")
        assert [c[0][0] for c in store.update.call_args_list] == ["cd_harps", "positional_harps"]

    def test_empty_register(self, store: MagicMock) -> None:
        """Should return None for empty registers."""
        store.get_path.return_value = None

        assert Harps(store).cd_get("x") is None
        assert Harps(store).positional_get("x") is None


class TestMarks:
    """Test mark harps."""

    def test_local_mark_get(self, store: MagicMock) -> None:
        """Should parse line and column."""
        store.get_fields.return_value = ["10", "3"]

        assert Harps(store).local_mark_get("a", "~/x.py") == MarkLocation(line=10, column=3)
        store.get_fields.assert_called_once_with("local_marks_~/x.py", "a", ["line", "column"])

    def test_global_mark_get(self, store: MagicMock) -> None:
        """Should parse path, line and column."""
        store.get_fields.return_value = ["~/x.py", "10", "3"]

        assert Harps(store).global_mark_get("A") == MarkLocation(line=10, column=3, path="~/x.py")

    def test_mark_empty(self, store: MagicMock) -> None:
        """Should return None for empty or malformed registers."""
        store.get_fields.return_value = None
        assert Harps(store).global_mark_get("A") is None

        store.get_fields.return_value = ["~/x.py", "ten", "3"]
        assert Harps(store).global_mark_get("A") is None

        store.get_fields.return_value = ["10"]
        assert Harps(store).local_mark_get("a", "~/x.py") is None

    def test_mark_set(self, store: MagicMock) -> None:
        """Should store line and column."""
        harps = Harps(store)

        harps.local_mark_set("a", "~/x.py", 5, 0)
        store.update.assert_called_with("local_marks_~/x.py", "a", line=5, column=0)
        harps.global_mark_set("A", "~/x.py", 5, 0)
        store.update.assert_called_with("global_marks", "A", path="~/x.py", line=5, column=0)


class TestLocalSearch:
    """Test local search harps."""

    def test_set_plain(self, store: MagicMock) -> None:
        """Should store the last search pattern as is."""
        assert Harps(store).set_local_search("s", "~/x.py", "def \\w\\+") is True
        store.update.assert_called_once_with("local_search_~/x.py", "s", path="def \\w\\+")

    def test_set_with_offset(self, store: MagicMock) -> None:
        """Should append the prompted offset."""
        harps = Harps(store)

        harps.set_local_search("s", "~/x.py", "foo", ask_offset=True, read_line=lambda _: "e")
        store.update.assert_called_once_with("local_search_~/x.py", "s", path="foo" + SENTINEL + "e")

    def test_set_cancelled(self, store: MagicMock) -> None:
        """Should not write anything when the prompt is cancelled."""
        harps = Harps(store)

        assert harps.set_local_search("s", "~/x.py", "foo", ask_offset=True, read_line=lambda _: None) is None
        store.update.assert_not_called()

    def test_get(self, store: MagicMock) -> None:
        """Should resolve the stored pattern into a directive."""
        store.get_path.return_value = "foo" + SENTINEL + "e"

        target = Harps(store).get_local_search("s", "~/x.py", backwards=True)

        assert target == SearchTarget(path=None, directive=SearchDirective("foo", "e", True))
        assert target.directive.compile() == "?foo?e"
        store.get_path.assert_called_once_with("local_search_~/x.py", "s")

    def test_get_assume(self, store: MagicMock) -> None:
        """Should pass the heuristic flag through."""
        store.get_path.return_value = "x -> \\zs.*\\ze /e"

        target = Harps(store).get_local_search("s", "~/x.py", assume_offset=True)

        assert target.directive.compile() == "/x -> \\zs.*\\ze /e"
        assert target.directive.pattern == "x -> \\zs.*\\ze "

    def test_get_empty(self, store: MagicMock) -> None:
        """Should return None for an empty register."""
        store.get_path.return_value = None

        assert Harps(store).get_local_search("s", "~/x.py") is None


class TestGlobalSearch:
    """Test global search harps."""

    def test_set(self, store: MagicMock) -> None:
        """Should store path and pattern in one value."""
        Harps(store).set_global_search("G", "~/x.py", "foo", ask_offset=True, read_line=lambda _: "s+1")

        store.update.assert_called_once_with(
            GLOBAL_SEARCH_SECTION, "G", path="~/x.py" + SENTINEL + "foo" + SENTINEL + "s+1"
        )

    def test_set_cancelled(self, store: MagicMock) -> None:
        """Should not write anything when the prompt is cancelled."""
        assert Harps(store).set_global_search("G", "~/x.py", "foo", ask_offset=True, read_line=lambda _: None) is None
        store.update.assert_not_called()

    def test_get(self, store: MagicMock) -> None:
        """Should return the file and the directive."""
        store.get_path.return_value = "~/x.py" + SENTINEL + "foo" + SENTINEL + "s+1"

        target = Harps(store).get_global_search("G")

        assert target == SearchTarget(path="~/x.py", directive=SearchDirective("foo", "s+1"))

    def test_get_legacy_value(self, store: MagicMock) -> None:
        """Should search in the current buffer when no path was stored."""
        store.get_path.return_value = "foo"

        target = Harps(store).get_global_search("G", at_end=True)

        assert target.path is None
        assert target.directive.compile() == "/foo/e"

    def test_get_empty(self, store: MagicMock) -> None:
        """Should return None for an empty register."""
        store.get_path.return_value = None

        assert Harps(store).get_global_search("G") is None


class TestSearchWriteResults:
    """Test results of writing search harps."""

    def test_store_failure_is_false(self, store: MagicMock) -> None:
        """Should report a failed write as False, distinct from a cancel."""
        store.update.return_value = False

        assert Harps(store).set_local_search("s", "~/x.py", "foo") is False
        assert Harps(store).set_global_search("G", "~/x.py", "foo") is False
