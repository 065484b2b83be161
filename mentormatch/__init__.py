"""
Mentor Matching System - Main package.

Pairs support-seeking mentees with volunteer mentors using weighted,
explainable multi-criteria scoring, allocates batches of requests under
per-mentor capacity, and tracks the resulting matches through expiry.
"""

from .config import (
    STATE_FILE,
    MENTORSHIP_TOPICS,
    DAYS_OF_WEEK,
    AVAILABILITY_TIME_SLOTS,
    URGENCY_LEVELS,
    URGENCY_ORDER,
    DEFAULT_W_TOPIC_OVERLAP,
    DEFAULT_W_COLLEGE,
    DEFAULT_W_AVAILABILITY,
    DEFAULT_W_REPUTATION,
    SCORE_TIE_TOLERANCE,
    INACTIVE_SESSION_THRESHOLD_MS,
    DEFAULT_MAX_MENTEES,
)

from .models import (
    MatchingWeights,
    DEFAULT_MATCHING_WEIGHTS,
    MentorProfile,
    MenteeRequest,
    MatchExplanation,
    MentorMatch,
    MentorReview,
    MentorshipState,
)

from .matching import (
    normalize_weights,
    get_normalized_weights,
    CriterionScores,
    topic_overlap,
    availability_overlap,
    college_similarity,
    reputation_score,
    compute_criteria,
    explain_match,
    MatchResult,
    ScoredMentor,
    is_eligible,
    rank_mentors,
    select_best_match,
    AllocationDecision,
    CapacityLedger,
    allocate_batch,
    set_allocator_verbose,
    run_matching_round,
)

from .lifecycle import (
    now_ms,
    new_id,
    create_mentor_profile,
    create_mentee_request,
    create_mentor_match,
    create_mentor_review,
    should_cleanup_match,
    cleanup_inactive_matches,
    complete_match,
    cancel_match,
    touch_match,
    close_match,
    expire_inactive_matches,
)

from .persistence import load_state, save_state, reconcile_state

from .reporting import summarize_allocation, build_allocation_graph, show_allocation_graph

__version__ = "0.1.0"
