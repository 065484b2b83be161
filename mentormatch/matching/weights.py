"""
Weight normalization for the Mentor Matching System.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

try:
    from ..models.weights import MatchingWeights, DEFAULT_MATCHING_WEIGHTS
except ImportError:
    from models.weights import MatchingWeights, DEFAULT_MATCHING_WEIGHTS

if TYPE_CHECKING:
    from ..models.state import MentorshipState


def normalize_weights(weights: MatchingWeights) -> MatchingWeights:
    """
    Rescale the four criterion weights to sum to 1.

    Negative entries are clamped to 0. If nothing positive remains, the
    default vector (0.4, 0.2, 0.2, 0.2) is returned instead.
    """
    w = np.clip(np.asarray(weights.as_tuple(), dtype=float), 0.0, None)
    s = float(w.sum())
    if s <= 0.0:
        return MatchingWeights(*DEFAULT_MATCHING_WEIGHTS.as_tuple())
    w = w / s
    return MatchingWeights(
        topic_overlap=float(w[0]),
        college_similarity=float(w[1]),
        availability=float(w[2]),
        reputation=float(w[3]),
    )


def get_normalized_weights(state: "MentorshipState") -> MatchingWeights:
    """Normalized view of the raw weights persisted in the store."""
    return normalize_weights(state.weights)
