"""Tests for candidate selection."""

from unittest.mock import patch

from modsweep.models import Candidate
from modsweep.selection import DefaultSelector, resolve_selection
from modsweep.tui import TextualSelector


def _candidates():
    return [Candidate(path=f"/w/p{i}/node_modules", size_mb=i) for i in range(3)]


class TestDefaultSelector:
    def test_selects_everything_by_default(self):
        candidates = _candidates()
        assert DefaultSelector().select(candidates, True) == [c.path for c in candidates]

    def test_inverted_selects_nothing(self):
        assert DefaultSelector().select(_candidates(), False) == []


class TestResolveSelection:
    def test_maps_paths_in_chosen_order(self):
        candidates = _candidates()

        chosen = resolve_selection(candidates, [candidates[2].path, candidates[0].path])

        assert chosen == [candidates[2], candidates[0]]

    def test_drops_unknown_and_duplicate_paths(self):
        candidates = _candidates()

        chosen = resolve_selection(
            candidates, ["/elsewhere/node_modules", candidates[1].path, candidates[1].path]
        )

        assert chosen == [candidates[1]]

    def test_empty(self):
        assert resolve_selection(_candidates(), []) == []


class TestTextualSelector:
    def test_returns_app_result(self):
        candidates = _candidates()
        with patch("modsweep.tui.app.SelectionApp.run", return_value=[candidates[0].path]):
            assert TextualSelector().select(candidates, True) == [candidates[0].path]

    def test_cancelled_app_selects_nothing(self):
        with patch("modsweep.tui.app.SelectionApp.run", return_value=None):
            assert TextualSelector().select(_candidates(), True) == []
