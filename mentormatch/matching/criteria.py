"""
Criterion scorers for the Mentor Matching System.

Every scorer is pure and returns a value in [0, 1].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Set, TYPE_CHECKING

try:
    from ..config import (
        DAYS_OF_WEEK,
        KARMA_CAP,
        STREAK_CAP_WEEKS,
        RATING_MAX,
        REPUTATION_W_KARMA,
        REPUTATION_W_RATING,
        REPUTATION_W_STREAK,
    )
except ImportError:
    from config import (
        DAYS_OF_WEEK,
        KARMA_CAP,
        STREAK_CAP_WEEKS,
        RATING_MAX,
        REPUTATION_W_KARMA,
        REPUTATION_W_RATING,
        REPUTATION_W_STREAK,
    )

if TYPE_CHECKING:
    from ..models.mentor import MentorProfile
    from ..models.mentee import MenteeRequest


@dataclass(frozen=True)
class CriterionScores:
    topic_overlap: float
    college_similarity: float
    availability: float
    reputation: float


def topic_overlap(mentor_topics: Iterable[str], mentee_topics: Iterable[str]) -> float:
    """Share of the mentee's topics the mentor covers (0 if the mentee listed none)."""
    mentee_topics = list(mentee_topics)
    if not mentee_topics:
        return 0.0
    mentor_set = set(mentor_topics)
    overlap = sum(1 for t in mentee_topics if t in mentor_set)
    return overlap / len(mentee_topics)


def availability_overlap(
    mentor_availability: Dict[str, Set[str]],
    mentee_availability: Dict[str, Set[str]],
) -> float:
    """
    matches / requested over all of the mentee's (day, slot) preferences,
    walking the week in canonical order. 0 if the mentee gave no slots.
    """
    total = 0
    matched = 0
    for day in DAYS_OF_WEEK:
        wanted = mentee_availability.get(day) or ()
        if not wanted:
            continue
        offered = set(mentor_availability.get(day) or ())
        total += len(wanted)
        matched += sum(1 for slot in wanted if slot in offered)
    return 0.0 if total == 0 else matched / total


def college_similarity(mentor_college: str, mentee_college: str) -> float:
    """1 for the same college (case and surrounding whitespace ignored), else 0."""
    same = (mentor_college or "").strip().lower() == (mentee_college or "").strip().lower()
    return 1.0 if same else 0.0


def reputation_score(mentor: "MentorProfile") -> float:
    # caps keep one extreme value from dominating
    karma = min(float(mentor.karma), float(KARMA_CAP)) / float(KARMA_CAP)
    rating = float(mentor.rating) / RATING_MAX
    streak = min(float(mentor.streak), float(STREAK_CAP_WEEKS)) / float(STREAK_CAP_WEEKS)
    return (
        REPUTATION_W_KARMA * karma
        + REPUTATION_W_RATING * rating
        + REPUTATION_W_STREAK * streak
    )


def compute_criteria(mentor: "MentorProfile", mentee: "MenteeRequest") -> CriterionScores:
    """Raw [0,1] value of each criterion for one mentor/mentee pair."""
    return CriterionScores(
        topic_overlap=topic_overlap(mentor.topics, mentee.topics),
        college_similarity=college_similarity(mentor.college, mentee.college),
        availability=availability_overlap(mentor.availability, mentee.preferred_availability),
        reputation=reputation_score(mentor),
    )
