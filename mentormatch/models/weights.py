"""
Matching weights model for the Mentor Matching System.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Tuple

try:
    from ..config import (
        DEFAULT_W_TOPIC_OVERLAP,
        DEFAULT_W_COLLEGE,
        DEFAULT_W_AVAILABILITY,
        DEFAULT_W_REPUTATION,
    )
except ImportError:
    from config import (
        DEFAULT_W_TOPIC_OVERLAP,
        DEFAULT_W_COLLEGE,
        DEFAULT_W_AVAILABILITY,
        DEFAULT_W_REPUTATION,
    )


@dataclass
class MatchingWeights:
    topic_overlap: float = DEFAULT_W_TOPIC_OVERLAP
    college_similarity: float = DEFAULT_W_COLLEGE
    availability: float = DEFAULT_W_AVAILABILITY
    reputation: float = DEFAULT_W_REPUTATION

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (
            float(self.topic_overlap),
            float(self.college_similarity),
            float(self.availability),
            float(self.reputation),
        )

    def to_dict(self) -> Dict:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict) -> "MatchingWeights":
        return MatchingWeights(
            topic_overlap=float(d.get("topic_overlap", DEFAULT_W_TOPIC_OVERLAP)),
            college_similarity=float(d.get("college_similarity", DEFAULT_W_COLLEGE)),
            availability=float(d.get("availability", DEFAULT_W_AVAILABILITY)),
            reputation=float(d.get("reputation", DEFAULT_W_REPUTATION)),
        )


DEFAULT_MATCHING_WEIGHTS = MatchingWeights()
