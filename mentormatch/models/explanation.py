"""
Match explanation model for the Mentor Matching System.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from .weights import MatchingWeights


@dataclass
class MatchExplanation:
    # Each *_score is the criterion's contribution to total_score (0..100 scale)
    topic_overlap_score: float
    topic_overlap_reason: str
    college_score: float
    college_reason: str
    availability_score: float
    availability_reason: str
    reputation_score: float
    reputation_reason: str
    total_score: float
    strengths: List[str] = field(default_factory=list)
    considerations: List[str] = field(default_factory=list)
    weights: MatchingWeights = field(default_factory=MatchingWeights)

    def to_dict(self) -> Dict:
        return {
            "topic_overlap_score": float(self.topic_overlap_score),
            "topic_overlap_reason": self.topic_overlap_reason,
            "college_score": float(self.college_score),
            "college_reason": self.college_reason,
            "availability_score": float(self.availability_score),
            "availability_reason": self.availability_reason,
            "reputation_score": float(self.reputation_score),
            "reputation_reason": self.reputation_reason,
            "total_score": float(self.total_score),
            "strengths": list(self.strengths),
            "considerations": list(self.considerations),
            "weights": self.weights.to_dict(),
        }

    @staticmethod
    def from_dict(d: Dict) -> "MatchExplanation":
        return MatchExplanation(
            topic_overlap_score=float(d.get("topic_overlap_score", 0.0)),
            topic_overlap_reason=d.get("topic_overlap_reason", ""),
            college_score=float(d.get("college_score", 0.0)),
            college_reason=d.get("college_reason", ""),
            availability_score=float(d.get("availability_score", 0.0)),
            availability_reason=d.get("availability_reason", ""),
            reputation_score=float(d.get("reputation_score", 0.0)),
            reputation_reason=d.get("reputation_reason", ""),
            total_score=float(d.get("total_score", 0.0)),
            strengths=list(d.get("strengths", [])),
            considerations=list(d.get("considerations", [])),
            weights=MatchingWeights.from_dict(d.get("weights", {})),
        )
