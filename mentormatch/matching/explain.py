"""
Match explanations for the Mentor Matching System.

Turns the four raw criterion values into weighted 0..100 contributions,
audit reasons, and qualitative strengths / considerations.
"""

from __future__ import annotations

import math
from typing import Callable, List, Tuple, TYPE_CHECKING

try:
    from ..models.explanation import MatchExplanation
    from ..models.weights import MatchingWeights
except ImportError:
    from models.explanation import MatchExplanation
    from models.weights import MatchingWeights

from .criteria import CriterionScores

if TYPE_CHECKING:
    from ..models.mentor import MentorProfile
    from ..models.mentee import MenteeRequest


Predicate = Callable[[CriterionScores, "MentorProfile"], bool]

STRENGTH = "strength"
CONSIDERATION = "consideration"

# Per criterion, the first rule whose predicate holds adds its label.
ANNOTATION_RULES: List[Tuple[str, List[Tuple[Predicate, str, str]]]] = [
    ("topic_overlap", [
        (lambda c, m: c.topic_overlap >= 0.7, STRENGTH, "Strong topic alignment"),
        (lambda c, m: c.topic_overlap < 0.3, CONSIDERATION, "Limited topic overlap"),
    ]),
    ("college_similarity", [
        (lambda c, m: c.college_similarity == 1, STRENGTH, "Same college connection"),
    ]),
    ("availability", [
        (lambda c, m: c.availability >= 0.5, STRENGTH, "Good schedule compatibility"),
        (lambda c, m: c.availability < 0.2, CONSIDERATION, "Scheduling may be challenging"),
    ]),
    ("reputation", [
        (lambda c, m: m.rating >= 4.5 and m.karma >= 500, STRENGTH, "Highly experienced mentor"),
        (lambda c, m: m.rating < 3.0 or m.karma < 100, CONSIDERATION, "Developing mentor experience"),
    ]),
]


def round_half_up(x: float, decimals: int = 0) -> float:
    """Round with exact halves going up (3.125 -> 3.13), unlike round()."""
    factor = 10 ** decimals
    return math.floor(float(x) * factor + 0.5) / factor


def _percent(x: float) -> int:
    """Whole percent, halves rounded up."""
    return int(round_half_up(float(x) * 100.0))


def annotate(criteria: CriterionScores, mentor: "MentorProfile") -> Tuple[List[str], List[str]]:
    """Return (strengths, considerations) for a scored pair."""
    strengths: List[str] = []
    considerations: List[str] = []
    for _, rules in ANNOTATION_RULES:
        for predicate, kind, label in rules:
            if predicate(criteria, mentor):
                (strengths if kind == STRENGTH else considerations).append(label)
                break
    return strengths, considerations


def topic_reason(mentor: "MentorProfile", mentee: "MenteeRequest") -> str:
    mentor_set = set(mentor.topics)
    shared = [t for t in mentee.topics if t in mentor_set]
    if not shared:
        return "No topic overlap"
    return f"{len(shared)} shared topic(s): {', '.join(shared)}"


def college_reason(mentor: "MentorProfile", mentee: "MenteeRequest", college_match: float) -> str:
    if college_match == 1:
        return f"Same college: {mentor.college}"
    return f"Different colleges: {mentor.college} vs {mentee.college}"


def availability_reason(overlap: float) -> str:
    pct = _percent(overlap)
    if overlap >= 0.5:
        return f"{pct}% schedule compatibility"
    return f"Limited schedule overlap ({pct}%)"


def reputation_reason(mentor: "MentorProfile") -> str:
    return f"Karma: {mentor.karma}, Rating: {round_half_up(mentor.rating, 1):.1f}/5, Streak: {mentor.streak} weeks"


def explain_match(
    mentor: "MentorProfile",
    mentee: "MenteeRequest",
    criteria: CriterionScores,
    weights: MatchingWeights,
) -> MatchExplanation:
    """
    Build the audit trail for one pair.

    `weights` must already be normalized; each criterion contributes
    value * weight * 100 to total_score.
    """
    topic_score = criteria.topic_overlap * weights.topic_overlap * 100.0
    college_score = criteria.college_similarity * weights.college_similarity * 100.0
    availability_score = criteria.availability * weights.availability * 100.0
    reputation_score = criteria.reputation * weights.reputation * 100.0
    total = topic_score + college_score + availability_score + reputation_score

    strengths, considerations = annotate(criteria, mentor)

    return MatchExplanation(
        topic_overlap_score=float(topic_score),
        topic_overlap_reason=topic_reason(mentor, mentee),
        college_score=float(college_score),
        college_reason=college_reason(mentor, mentee, criteria.college_similarity),
        availability_score=float(availability_score),
        availability_reason=availability_reason(criteria.availability),
        reputation_score=float(reputation_score),
        reputation_reason=reputation_reason(mentor),
        total_score=float(total),
        strengths=strengths,
        considerations=considerations,
        weights=weights,
    )
