"""Ordering candidates by how many dependencies they hold."""

from modsweep.models import Candidate


def rank_candidates(candidates: list[Candidate]) -> list[Candidate]:
    """
    Order candidates by combined dependency count, highest first.

    Candidates with the same count keep the order they had before ranking.
    sorted() is stable, including with reverse=True.

    Args:
        candidates: Candidates in discovery order

    Returns:
        New list in ranked order
    """
    return sorted(candidates, key=lambda c: c.total_dependencies, reverse=True)
