"""
Batch allocation for the Mentor Matching System.

Mentees are served in urgency order and each assignment consumes one unit
of the chosen mentor's capacity before the next mentee is considered, so a
single batch is inherently sequential.
"""

from __future__ import annotations

import builtins
import os
import threading
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, TYPE_CHECKING

try:
    from ..config import URGENCY_ORDER
    from ..models.weights import MatchingWeights
except ImportError:
    from config import URGENCY_ORDER
    from models.weights import MatchingWeights

from .selector import MatchResult, select_best_match

if TYPE_CHECKING:
    from ..models.mentor import MentorProfile
    from ..models.mentee import MenteeRequest


# ------------------------------
# Verbosity control
# ------------------------------
# Default is verbose unless disabled via environment variable MENTORMATCH_VERBOSE=0.
_ALLOCATOR_VERBOSE = os.environ.get('MENTORMATCH_VERBOSE', '1').strip().lower() not in ('0', 'false', 'no', 'off')


def set_allocator_verbose(flag: bool) -> None:
    """Enable/disable allocator prints (useful in tests and notebooks)."""
    global _ALLOCATOR_VERBOSE
    _ALLOCATOR_VERBOSE = bool(flag)


def _vprint(*args, **kwargs) -> None:
    """Verbose print that stays quiet when verbosity is disabled."""
    if _ALLOCATOR_VERBOSE:
        builtins.print(*args, **kwargs)


class CapacityLedger:
    """
    Remaining mentee slots per mentor id.

    One ledger normally belongs to one allocate_batch call. When several
    callers share a ledger, claim() is an atomic compare-and-decrement, so
    two callers can never both take the last slot of a mentor.
    """

    def __init__(self, remaining: Optional[Dict[str, int]] = None) -> None:
        self._remaining: Dict[str, int] = {k: int(v) for k, v in (remaining or {}).items()}
        self._lock = threading.Lock()

    @classmethod
    def from_mentors(cls, mentors: Iterable["MentorProfile"]) -> "CapacityLedger":
        return cls({m.id: m.open_slots for m in mentors})

    def remaining(self, mentor_id: str) -> int:
        with self._lock:
            return self._remaining.get(mentor_id, 0)

    def claim(self, mentor_id: str) -> Optional[int]:
        """Take one slot. Returns the slots left afterwards, or None if none was free."""
        with self._lock:
            left = self._remaining.get(mentor_id, 0)
            if left <= 0:
                return None
            self._remaining[mentor_id] = left - 1
            return left - 1

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._remaining)


@dataclass
class AllocationDecision:
    mentee: "MenteeRequest"
    match: Optional[MatchResult]
    remaining_after: Optional[int] = None  # chosen mentor's slots left; None when unmatched

    @property
    def matched(self) -> bool:
        return self.match is not None


def urgency_rank(mentee: "MenteeRequest") -> int:
    # unknown urgency goes after "low"
    return URGENCY_ORDER.get(mentee.urgency, len(URGENCY_ORDER))


def order_by_urgency(mentees: Iterable["MenteeRequest"]) -> List["MenteeRequest"]:
    """high -> medium -> low; stable within a tier."""
    return sorted(mentees, key=urgency_rank)


def _allocate_one(
    mentee: "MenteeRequest",
    mentors: Sequence["MentorProfile"],
    ledger: CapacityLedger,
    weights: Optional[MatchingWeights],
) -> AllocationDecision:
    while True:
        pool = [m for m in mentors if m.is_active and ledger.remaining(m.id) > 0]
        match = select_best_match(mentee, pool, weights)
        if match is None:
            return AllocationDecision(mentee=mentee, match=None)
        left = ledger.claim(match.mentor.id)
        if left is not None:
            return AllocationDecision(mentee=mentee, match=match, remaining_after=left)
        # Slot taken by another holder of the shared ledger; the refreshed pool excludes it.


def allocate_batch(
    mentees: Iterable["MenteeRequest"],
    mentors: Sequence["MentorProfile"],
    weights: Optional[MatchingWeights] = None,
    ledger: Optional[CapacityLedger] = None,
) -> List[AllocationDecision]:
    """
    Greedily assign each mentee (most urgent first) to its best mentor with
    remaining capacity.

    Returns one decision per mentee, in processing order. Pass a shared
    `ledger` only when several batches draw on the same mentor capacity;
    otherwise a fresh one is built from `mentors`.
    """
    mentors = list(mentors)
    if ledger is None:
        ledger = CapacityLedger.from_mentors(mentors)

    decisions: List[AllocationDecision] = []
    for mentee in order_by_urgency(mentees):
        decision = _allocate_one(mentee, mentors, ledger, weights)
        decisions.append(decision)
        if decision.match is not None:
            _vprint(
                f"  [{mentee.urgency}] {mentee.id} -> {decision.match.mentor.id}"
                f" | score = {decision.match.score:.2f} | slots left = {decision.remaining_after}"
            )

    unmatched = [d.mentee.id for d in decisions if d.match is None]
    if unmatched:
        _vprint(f"{len(unmatched)} mentee(s) left unmatched: {', '.join(unmatched)}")
    return decisions
