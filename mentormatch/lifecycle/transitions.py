"""
Match status transitions for the Mentor Matching System.

completed / cancelled are driven from outside (session end, user action);
expired comes from the inactivity check. The per-match functions return new
records; the state-level helpers apply them to a store snapshot and give
the mentor's slot back.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, TYPE_CHECKING

try:
    from ..models.match import MentorMatch
except ImportError:
    from models.match import MentorMatch

from .clock import Clock, now_ms
from .expiry import cleanup_inactive_matches

if TYPE_CHECKING:
    from ..models.state import MentorshipState


CLOSING_STATUSES = ("completed", "cancelled")


def _require_active(match: MentorMatch, action: str) -> None:
    if match.status != "active":
        raise ValueError(f"Cannot {action} match {match.id}: status is {match.status!r}")


def complete_match(match: MentorMatch) -> MentorMatch:
    _require_active(match, "complete")
    return replace(match, status="completed")


def cancel_match(match: MentorMatch) -> MentorMatch:
    _require_active(match, "cancel")
    return replace(match, status="cancelled")


def touch_match(match: MentorMatch, now: Optional[int] = None, clock: Clock = now_ms) -> MentorMatch:
    """Record an interaction, pushing back inactivity expiry."""
    _require_active(match, "touch")
    return replace(match, last_interaction_at=int(now if now is not None else clock()))


def release_mentee(state: "MentorshipState", match: MentorMatch) -> None:
    """Give the match's slot back to its mentor (no-op if the mentor is gone)."""
    mentor = state.mentors.get(match.mentor_id)
    if mentor is None:
        return
    remaining = [mid for mid in mentor.current_mentees if mid != match.mentee_id]
    state.mentors[mentor.id] = replace(mentor, current_mentees=remaining)


def close_match(state: "MentorshipState", match_id: str, status: str) -> MentorMatch:
    """Complete or cancel a stored match and free the mentor's slot."""
    if status not in CLOSING_STATUSES:
        raise ValueError(f"status must be one of {CLOSING_STATUSES}, got {status!r}")
    match = state.matches[match_id]
    closed = complete_match(match) if status == "completed" else cancel_match(match)
    state.matches[match_id] = closed
    release_mentee(state, closed)
    return closed


def expire_inactive_matches(
    state: "MentorshipState",
    now: Optional[int] = None,
    clock: Clock = now_ms,
) -> List[MentorMatch]:
    """Apply the inactivity cleanup to the stored matches. Returns the expired ones."""
    _, cleaned = cleanup_inactive_matches(list(state.matches.values()), now=now, clock=clock)
    for match in cleaned:
        state.matches[match.id] = match
        release_mentee(state, match)
    return cleaned
