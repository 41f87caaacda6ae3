"""Candidate selection engine.

Pure building blocks shared by every matching mode:

- ``matches`` / ``filter_candidates``: hard filter over the roster.
- ``random_select``: uniform random subset bounded by the group-size cap.
- ``SelectionSet``: ordered, capacity-bounded set of chosen candidate ids.

Nothing here touches the roster, performs I/O or logs; session bookkeeping
lives in ``lunchmate.services.session``.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence

from lunchmate.core.constants import MAX_GROUP_SIZE, MIN_GROUP_SIZE
from lunchmate.models.candidate import Candidate
from lunchmate.models.enums import Gender, MatchingStatus
from lunchmate.models.matching import FilterConditions


# ---------------------------------------------------------------------------
# Filter predicate
# ---------------------------------------------------------------------------

def matches(candidate: Candidate, conditions: FilterConditions) -> bool:
    """Return True if *candidate* passes all four filter checks.

    Each check is skipped when its condition is empty (or ``Gender.any``).
    """
    if conditions.age_groups and candidate.age_group not in conditions.age_groups:
        return False

    if conditions.gender != Gender.any and candidate.gender != conditions.gender:
        return False

    if conditions.locations and candidate.location not in conditions.locations:
        return False

    if (
        conditions.eating_styles
        and candidate.eating_style not in conditions.eating_styles
    ):
        return False

    return True


def filter_candidates(
    candidates: Iterable[Candidate],
    conditions: FilterConditions,
) -> list[Candidate]:
    """Return the candidates matching *conditions*, preserving order."""
    return [c for c in candidates if matches(c, conditions)]


# ---------------------------------------------------------------------------
# Random selection
# ---------------------------------------------------------------------------

def random_select(
    filtered: Sequence[Candidate],
    max_size: int,
    rng: random.Random | None = None,
) -> list[str]:
    """Draw up to *max_size* distinct candidate ids uniformly at random.

    The result has length ``min(max_size, len(filtered))``.  ``rng`` may be
    injected for reproducible draws.
    """
    if not filtered or max_size <= 0:
        return []

    rng = rng or random.Random()
    # Distinct ids only, first occurrence wins
    ids = list(dict.fromkeys(c.id for c in filtered))
    rng.shuffle(ids)
    return ids[:max_size]


# ---------------------------------------------------------------------------
# Incremental selection
# ---------------------------------------------------------------------------

def clamp_group_size(size: int) -> int:
    """Clamp *size* into the allowed group-size range."""
    return max(MIN_GROUP_SIZE, min(MAX_GROUP_SIZE, size))


class SelectionSet:
    """Ordered set of selected candidate ids under a group-size cap.

    ``add`` refuses to grow the set past ``max_group_size``.  Lowering the
    cap keeps members that are already selected.
    """

    def __init__(self, max_group_size: int = 3) -> None:
        self._ids: list[str] = []
        self._max_group_size = clamp_group_size(max_group_size)

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, candidate_id: object) -> bool:
        return candidate_id in self._ids

    def __iter__(self):
        return iter(list(self._ids))

    @property
    def ids(self) -> list[str]:
        return list(self._ids)

    @property
    def max_group_size(self) -> int:
        return self._max_group_size

    @property
    def at_capacity(self) -> bool:
        return len(self._ids) >= self._max_group_size

    @property
    def status(self) -> MatchingStatus:
        return MatchingStatus.matched if self._ids else MatchingStatus.idle

    def add(self, candidate_id: str) -> bool:
        """Append *candidate_id*; return False if the cap is reached."""
        if candidate_id in self._ids:
            return True
        if self.at_capacity:
            return False
        self._ids.append(candidate_id)
        return True

    def remove(self, candidate_id: str) -> None:
        if candidate_id in self._ids:
            self._ids.remove(candidate_id)

    def replace(self, candidate_ids: Iterable[str]) -> None:
        """Replace the selection with *candidate_ids*, truncated to the cap."""
        ids = list(dict.fromkeys(candidate_ids))
        self._ids = ids[: self._max_group_size]

    def clear(self) -> None:
        self._ids.clear()

    def set_max_group_size(self, size: int) -> int:
        """Set the cap (clamped to 1..8) and return the value applied."""
        self._max_group_size = clamp_group_size(size)
        return self._max_group_size
