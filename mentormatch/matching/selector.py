"""
Best-mentor selection for the Mentor Matching System.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Callable, List, Optional, Sequence, Tuple, TYPE_CHECKING

try:
    from ..config import SCORE_TIE_TOLERANCE, SCORE_DECIMALS
    from ..models.explanation import MatchExplanation
    from ..models.weights import MatchingWeights, DEFAULT_MATCHING_WEIGHTS
except ImportError:
    from config import SCORE_TIE_TOLERANCE, SCORE_DECIMALS
    from models.explanation import MatchExplanation
    from models.weights import MatchingWeights, DEFAULT_MATCHING_WEIGHTS

from .weights import normalize_weights
from .criteria import CriterionScores, compute_criteria
from .explain import explain_match, round_half_up

if TYPE_CHECKING:
    from ..models.mentor import MentorProfile
    from ..models.mentee import MenteeRequest


# Applied in order when raw scores tie; every key prefers the larger value.
TIE_BREAK_KEYS: List[Tuple[str, Callable[["MentorProfile"], float]]] = [
    ("karma", lambda m: m.karma),
    ("rating", lambda m: m.rating),
    ("last_active_at", lambda m: m.last_active_at),
]


@dataclass
class ScoredMentor:
    mentor: "MentorProfile"
    criteria: CriterionScores
    raw_score: float  # 0..1, unrounded; used for ranking
    score: float  # 0..100, rounded; for display
    explanation: MatchExplanation


@dataclass
class MatchResult:
    mentor: "MentorProfile"
    score: float
    explanation: MatchExplanation


def is_eligible(mentor: "MentorProfile") -> bool:
    """Active (not opted out) and below capacity."""
    return bool(mentor.is_active) and mentor.has_capacity


def weighted_raw_score(criteria: CriterionScores, weights: MatchingWeights) -> float:
    return (
        criteria.topic_overlap * weights.topic_overlap
        + criteria.college_similarity * weights.college_similarity
        + criteria.availability * weights.availability
        + criteria.reputation * weights.reputation
    )


def score_mentor(
    mentor: "MentorProfile",
    mentee: "MenteeRequest",
    weights: MatchingWeights,
) -> ScoredMentor:
    """Score one pair. `weights` must already be normalized."""
    criteria = compute_criteria(mentor, mentee)
    raw = weighted_raw_score(criteria, weights)
    return ScoredMentor(
        mentor=mentor,
        criteria=criteria,
        raw_score=float(raw),
        score=round_half_up(raw * 100.0, SCORE_DECIMALS),
        explanation=explain_match(mentor, mentee, criteria, weights),
    )


def compare_scored(a: ScoredMentor, b: ScoredMentor) -> int:
    """Sort comparator: better candidate first."""
    if abs(b.raw_score - a.raw_score) > SCORE_TIE_TOLERANCE:
        return -1 if a.raw_score > b.raw_score else 1
    for _, key in TIE_BREAK_KEYS:
        ka, kb = key(a.mentor), key(b.mentor)
        if ka != kb:
            return -1 if ka > kb else 1
    return 0


def rank_mentors(
    mentee: "MenteeRequest",
    mentors: Sequence["MentorProfile"],
    weights: Optional[MatchingWeights] = None,
) -> List[ScoredMentor]:
    """
    Score every eligible mentor for the mentee and return them best first.
    Ineligible mentors (opted out or at capacity) are left out.
    """
    w = normalize_weights(weights if weights is not None else DEFAULT_MATCHING_WEIGHTS)
    scored = [score_mentor(m, mentee, w) for m in mentors if is_eligible(m)]
    scored.sort(key=cmp_to_key(compare_scored))
    return scored


def select_best_match(
    mentee: "MenteeRequest",
    mentors: Sequence["MentorProfile"],
    weights: Optional[MatchingWeights] = None,
) -> Optional[MatchResult]:
    """
    Pick the best eligible mentor for a single request.

    Returns None when no mentor is eligible; that is a normal outcome.
    """
    ranked = rank_mentors(mentee, mentors, weights)
    if not ranked:
        return None
    best = ranked[0]
    return MatchResult(mentor=best.mentor, score=best.score, explanation=best.explanation)
