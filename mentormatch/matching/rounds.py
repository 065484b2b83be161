"""
Matching rounds for the Mentor Matching System.

Applies a batch allocation to a store snapshot: every pending request is
allocated, and each assignment becomes a MentorMatch, a claimed mentor slot
and a request marked "matched".
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, TYPE_CHECKING

try:
    from ..lifecycle.clock import Clock, IdFactory, now_ms, new_id
    from ..lifecycle.records import create_mentor_match
    from ..models.match import MentorMatch
    from ..persistence.storage import reconcile_state
except ImportError:
    from lifecycle.clock import Clock, IdFactory, now_ms, new_id
    from lifecycle.records import create_mentor_match
    from models.match import MentorMatch
    from persistence.storage import reconcile_state

from .allocator import allocate_batch, _vprint

if TYPE_CHECKING:
    from ..models.state import MentorshipState


def run_matching_round(
    state: "MentorshipState",
    clock: Clock = now_ms,
    id_factory: IdFactory = new_id,
) -> List[MentorMatch]:
    """
    Allocate all pending requests against the stored mentors.

    Mentor profiles handed to the allocator are the snapshot taken before the
    round; slot bookkeeping during the round lives in the allocator's ledger.
    Returns the matches created, in allocation order.
    """
    reconcile_state(state)

    pending = state.pending_requests()
    if not pending:
        _vprint("No pending mentee requests.")
        return []

    if not state.mentors:
        _vprint("No mentors registered; nothing to allocate.")
        return []

    decisions = allocate_batch(pending, list(state.mentors.values()), state.weights)

    created: List[MentorMatch] = []
    for decision in decisions:
        if decision.match is None:
            continue
        request = decision.mentee
        mentor = state.mentors[decision.match.mentor.id]

        match = create_mentor_match(
            request_id=request.id,
            mentor_id=mentor.id,
            mentee_id=request.student_id,
            score=decision.match.score,
            explanation=decision.match.explanation,
            clock=clock,
            id_factory=id_factory,
        )
        state.matches[match.id] = match
        if request.student_id not in mentor.current_mentees:
            state.mentors[mentor.id] = replace(
                mentor, current_mentees=list(mentor.current_mentees) + [request.student_id]
            )
        state.requests[request.id] = replace(request, status="matched")
        created.append(match)

    if not created:
        _vprint("No matches created this round (no eligible mentors).")
    else:
        _vprint("Matches created in this round:")
        for m in sorted(created, key=lambda x: x.score, reverse=True):
            _vprint(f"  {m.mentee_id} <--> {m.mentor_id} | score = {m.score:.2f}")
    return created
