"""
Configuration constants for the Mentor Matching System.
"""

from __future__ import annotations

import os
from typing import Dict, List

# =====================================================
# State Persistence
# =====================================================

STATE_FILE = os.environ.get("MENTORMATCH_STATE_FILE", "mentormatch_state.json")

# =====================================================
# Topic Taxonomy
# =====================================================

MENTORSHIP_TOPICS: List[str] = [
    "anxiety",
    "depression",
    "stress_management",
    "academic_pressure",
    "relationships",
    "career_guidance",
    "time_management",
    "self_esteem",
    "loneliness",
    "grief",
    "eating_concerns",
    "substance_use",
    "trauma_recovery",
    "identity_exploration",
    "family_issues",
    "financial_stress",
    "sleep_issues",
    "general_support",
]

# =====================================================
# Availability
# =====================================================

# Canonical order; availability overlap walks the week in this order.
DAYS_OF_WEEK: List[str] = [
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
]

AVAILABILITY_TIME_SLOTS: List[str] = ["morning", "afternoon", "evening", "late_night"]

# =====================================================
# Urgency
# =====================================================

URGENCY_LEVELS: List[str] = ["low", "medium", "high"]

# Batch processing order (lower first)
URGENCY_ORDER: Dict[str, int] = {"high": 0, "medium": 1, "low": 2}

DEFAULT_URGENCY = "medium"

# =====================================================
# Default Matching Weights
# =====================================================

DEFAULT_W_TOPIC_OVERLAP: float = 0.4
DEFAULT_W_COLLEGE: float = 0.2
DEFAULT_W_AVAILABILITY: float = 0.2
DEFAULT_W_REPUTATION: float = 0.2

# =====================================================
# Reputation Sub-score
# =====================================================

KARMA_CAP: int = 1000
STREAK_CAP_WEEKS: int = 52
RATING_MAX: float = 5.0

# Fixed split inside the reputation criterion (independent of MatchingWeights)
REPUTATION_W_KARMA: float = 0.4
REPUTATION_W_RATING: float = 0.4
REPUTATION_W_STREAK: float = 0.2

# =====================================================
# Ranking
# =====================================================

# Raw scores (0..1) closer than this are ties and go to the tie-break chain
SCORE_TIE_TOLERANCE: float = 0.001

# Decimal places of the externally visible 0..100 score
SCORE_DECIMALS: int = 2

# =====================================================
# Match Lifecycle
# =====================================================

# 30 days in milliseconds
INACTIVE_SESSION_THRESHOLD_MS: int = 30 * 24 * 60 * 60 * 1000

MATCH_STATUSES: List[str] = ["active", "completed", "cancelled", "expired"]
REQUEST_STATUSES: List[str] = ["pending", "matched", "expired"]

# =====================================================
# Mentor Defaults
# =====================================================

DEFAULT_MAX_MENTEES: int = 5

# =====================================================
# Reviews
# =====================================================

REVIEW_RATING_MIN: int = 1
REVIEW_RATING_MAX: int = 5
