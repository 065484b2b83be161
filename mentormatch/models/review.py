"""
Mentor review model for the Mentor Matching System.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Optional


@dataclass
class MentorReview:
    id: str
    match_id: str
    mentor_id: str
    mentee_id: str
    rating: float  # 1..5, clamped on construction
    submitted_at: int
    feedback: Optional[str] = None

    def to_dict(self) -> Dict:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict) -> "MentorReview":
        d2 = dict(d)
        d2.setdefault("feedback", None)
        return MentorReview(**d2)
