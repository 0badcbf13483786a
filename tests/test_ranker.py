"""Tests for candidate ranking."""

from modsweep.models import Candidate
from modsweep.ranker import rank_candidates


def _candidate(name: str, deps: int, dev_deps: int = 0) -> Candidate:
    return Candidate(
        path=f"/work/{name}/node_modules",
        dependency_count=deps,
        dev_dependency_count=dev_deps,
    )


class TestRankCandidates:
    def test_descending_and_stable(self):
        """Equal counts keep their discovery order."""
        first_two = _candidate("first", 2)
        five = _candidate("five", 5)
        second_two = _candidate("second", 1, 1)
        one = _candidate("one", 1)

        ranked = rank_candidates([first_two, five, second_two, one])

        assert [c.total_dependencies for c in ranked] == [5, 2, 2, 1]
        assert ranked[1] is first_two
        assert ranked[2] is second_two

    def test_uses_combined_count(self):
        runtime_heavy = _candidate("runtime", 4, 0)
        dev_heavy = _candidate("dev", 1, 6)

        ranked = rank_candidates([runtime_heavy, dev_heavy])

        assert ranked == [dev_heavy, runtime_heavy]

    def test_all_equal_keeps_order(self):
        candidates = [_candidate(f"p{i}", 3) for i in range(6)]

        assert rank_candidates(candidates) == candidates

    def test_returns_new_list(self):
        candidates = [_candidate("a", 1), _candidate("b", 2)]

        ranked = rank_candidates(candidates)

        assert ranked is not candidates
        assert [c.path for c in candidates] == ["/work/a/node_modules", "/work/b/node_modules"]

    def test_empty(self):
        assert rank_candidates([]) == []
