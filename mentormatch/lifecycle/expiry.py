"""
Inactivity expiry for the Mentor Matching System.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

try:
    from ..config import INACTIVE_SESSION_THRESHOLD_MS
    from ..models.match import MentorMatch
except ImportError:
    from config import INACTIVE_SESSION_THRESHOLD_MS
    from models.match import MentorMatch

from .clock import Clock, now_ms


def should_cleanup_match(match: MentorMatch, now: Optional[int] = None, clock: Clock = now_ms) -> bool:
    """
    True if an active match has seen no activity for longer than the
    inactivity window. Non-active matches are never cleaned up.

    Activity is the first of last_interaction_at, session_started_at,
    matched_at that is set; expires_at is not consulted.
    """
    if match.status != "active":
        return False
    if now is None:
        now = clock()
    return int(now) - match.last_activity_at > INACTIVE_SESSION_THRESHOLD_MS


def cleanup_inactive_matches(
    matches: Iterable[MentorMatch],
    now: Optional[int] = None,
    clock: Clock = now_ms,
) -> Tuple[List[MentorMatch], List[MentorMatch]]:
    """
    Split matches into (kept, cleaned). Cleaned entries are copies with
    status "expired"; the inputs are not modified.
    """
    if now is None:
        now = clock()
    kept: List[MentorMatch] = []
    cleaned: List[MentorMatch] = []
    for match in matches:
        if should_cleanup_match(match, now):
            cleaned.append(replace(match, status="expired"))
        else:
            kept.append(match)
    return kept, cleaned
