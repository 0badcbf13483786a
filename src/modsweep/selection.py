"""Choosing which candidates to remove."""

import logging
from typing import Protocol

from modsweep.models import Candidate

logger = logging.getLogger(__name__)


class Selector(Protocol):
    """Something that lets the operator pick candidates."""

    def select(self, candidates: list[Candidate], default_selected: bool) -> list[str]:
        """Return the paths of the chosen candidates."""
        ...


class DefaultSelector:
    """Accept the default choice for every candidate without asking."""

    def select(self, candidates: list[Candidate], default_selected: bool) -> list[str]:
        if not default_selected:
            return []
        return [c.path for c in candidates]


def resolve_selection(candidates: list[Candidate], chosen_paths: list[str]) -> list[Candidate]:
    """
    Map chosen paths back to candidates.

    Order follows chosen_paths. Duplicates and paths that were never
    candidates are dropped.
    """
    by_path = {c.path: c for c in candidates}
    chosen: list[Candidate] = []
    seen: set[str] = set()

    for path in chosen_paths:
        if path in seen:
            continue
        candidate = by_path.get(path)
        if candidate is None:
            logger.debug("Ignoring unknown selection %s", path)
            continue
        seen.add(path)
        chosen.append(candidate)

    return chosen
