"""
Record constructors for the Mentor Matching System.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Set

try:
    from ..config import (
        DEFAULT_MAX_MENTEES,
        DEFAULT_URGENCY,
        INACTIVE_SESSION_THRESHOLD_MS,
        REVIEW_RATING_MIN,
        REVIEW_RATING_MAX,
        URGENCY_LEVELS,
    )
    from ..models import (
        MatchExplanation,
        MenteeRequest,
        MentorMatch,
        MentorProfile,
        MentorReview,
    )
except ImportError:
    from config import (
        DEFAULT_MAX_MENTEES,
        DEFAULT_URGENCY,
        INACTIVE_SESSION_THRESHOLD_MS,
        REVIEW_RATING_MIN,
        REVIEW_RATING_MAX,
        URGENCY_LEVELS,
    )
    from models import (
        MatchExplanation,
        MenteeRequest,
        MentorMatch,
        MentorProfile,
        MentorReview,
    )

from .clock import Clock, IdFactory, now_ms, new_id


def _copy_schedule(schedule: Optional[Dict[str, Iterable[str]]]) -> Dict[str, Set[str]]:
    return {day: set(slots) for day, slots in (schedule or {}).items()}


def create_mentor_profile(
    student_id: str,
    college: str,
    topics: Iterable[str],
    availability: Dict[str, Iterable[str]],
    display_name: Optional[str] = None,
    bio: Optional[str] = None,
    max_mentees: int = DEFAULT_MAX_MENTEES,
    clock: Clock = now_ms,
    id_factory: IdFactory = new_id,
) -> MentorProfile:
    """New, active mentor with no reputation and no mentees yet."""
    if int(max_mentees) < 1:
        raise ValueError(f"max_mentees must be positive, got {max_mentees}")
    now = clock()
    return MentorProfile(
        id=id_factory(),
        student_id=student_id,
        college=college,
        topics=set(topics),
        availability=_copy_schedule(availability),
        karma=0,
        streak=0,
        rating=0.0,
        is_active=True,
        max_mentees=int(max_mentees),
        current_mentees=[],
        last_active_at=now,
        created_at=now,
        total_sessions=0,
        display_name=display_name,
        bio=bio,
    )


def create_mentee_request(
    student_id: str,
    college: str,
    topics: Iterable[str],
    preferred_availability: Dict[str, Iterable[str]],
    urgency: str = DEFAULT_URGENCY,
    description: Optional[str] = None,
    clock: Clock = now_ms,
    id_factory: IdFactory = new_id,
) -> MenteeRequest:
    if urgency not in URGENCY_LEVELS:
        raise ValueError(f"urgency must be one of {URGENCY_LEVELS}, got {urgency!r}")
    return MenteeRequest(
        id=id_factory(),
        student_id=student_id,
        college=college,
        topics=list(topics),
        preferred_availability=_copy_schedule(preferred_availability),
        urgency=urgency,
        created_at=clock(),
        description=description,
        status="pending",
    )


def create_mentor_match(
    request_id: str,
    mentor_id: str,
    mentee_id: str,
    score: float,
    explanation: MatchExplanation,
    clock: Clock = now_ms,
    id_factory: IdFactory = new_id,
) -> MentorMatch:
    """
    Active match stamped at `now`: matched, session start and last
    interaction all equal now, expiry scheduled one inactivity window later.
    """
    now = clock()
    return MentorMatch(
        id=id_factory(),
        request_id=request_id,
        mentor_id=mentor_id,
        mentee_id=mentee_id,
        score=float(score),
        explanation=explanation,
        matched_at=now,
        status="active",
        session_started_at=now,
        last_interaction_at=now,
        expires_at=now + INACTIVE_SESSION_THRESHOLD_MS,
    )


def create_mentor_review(
    match_id: str,
    mentor_id: str,
    mentee_id: str,
    rating: float,
    feedback: Optional[str] = None,
    clock: Clock = now_ms,
    id_factory: IdFactory = new_id,
) -> MentorReview:
    """Out-of-range ratings are clamped to 1..5, not rejected."""
    clamped = max(float(REVIEW_RATING_MIN), min(float(REVIEW_RATING_MAX), float(rating)))
    return MentorReview(
        id=id_factory(),
        match_id=match_id,
        mentor_id=mentor_id,
        mentee_id=mentee_id,
        rating=clamped,
        submitted_at=clock(),
        feedback=feedback.strip() if feedback is not None else None,
    )
