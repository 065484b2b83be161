"""
Matching algorithms for the Mentor Matching System.
"""

try:
    from .weights import normalize_weights, get_normalized_weights
    from .criteria import (
        CriterionScores,
        topic_overlap,
        availability_overlap,
        college_similarity,
        reputation_score,
        compute_criteria,
    )
    from .explain import ANNOTATION_RULES, annotate, explain_match
    from .selector import (
        TIE_BREAK_KEYS,
        MatchResult,
        ScoredMentor,
        is_eligible,
        score_mentor,
        rank_mentors,
        select_best_match,
    )
    from .allocator import (
        AllocationDecision,
        CapacityLedger,
        allocate_batch,
        order_by_urgency,
        set_allocator_verbose,
    )
    from .rounds import run_matching_round
except ImportError:
    from matching.weights import normalize_weights, get_normalized_weights
    from matching.criteria import (
        CriterionScores,
        topic_overlap,
        availability_overlap,
        college_similarity,
        reputation_score,
        compute_criteria,
    )
    from matching.explain import ANNOTATION_RULES, annotate, explain_match
    from matching.selector import (
        TIE_BREAK_KEYS,
        MatchResult,
        ScoredMentor,
        is_eligible,
        score_mentor,
        rank_mentors,
        select_best_match,
    )
    from matching.allocator import (
        AllocationDecision,
        CapacityLedger,
        allocate_batch,
        order_by_urgency,
        set_allocator_verbose,
    )
    from matching.rounds import run_matching_round

__all__ = [
    "normalize_weights",
    "get_normalized_weights",
    "CriterionScores",
    "topic_overlap",
    "availability_overlap",
    "college_similarity",
    "reputation_score",
    "compute_criteria",
    "ANNOTATION_RULES",
    "annotate",
    "explain_match",
    "TIE_BREAK_KEYS",
    "MatchResult",
    "ScoredMentor",
    "is_eligible",
    "score_mentor",
    "rank_mentors",
    "select_best_match",
    "AllocationDecision",
    "CapacityLedger",
    "allocate_batch",
    "order_by_urgency",
    "set_allocator_verbose",
    "run_matching_round",
]
