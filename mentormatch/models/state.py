"""
Store snapshot model for the Mentor Matching System.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from .mentor import MentorProfile
from .mentee import MenteeRequest
from .match import MentorMatch
from .review import MentorReview
from .weights import MatchingWeights


@dataclass
class MentorshipState:
    mentors: Dict[str, MentorProfile] = field(default_factory=dict)  # key=mentor id
    requests: Dict[str, MenteeRequest] = field(default_factory=dict)  # key=request id
    matches: Dict[str, MentorMatch] = field(default_factory=dict)  # key=match id
    reviews: Dict[str, MentorReview] = field(default_factory=dict)  # key=review id

    # Raw weights as entered (persisted); scoring always normalizes them
    weights: MatchingWeights = field(default_factory=MatchingWeights)

    def pending_requests(self) -> List[MenteeRequest]:
        return [r for r in self.requests.values() if r.status == "pending"]

    def active_matches(self) -> List[MentorMatch]:
        return [m for m in self.matches.values() if m.status == "active"]

    def to_dict(self) -> Dict:
        return {
            "mentors": {mid: m.to_dict() for mid, m in self.mentors.items()},
            "requests": {rid: r.to_dict() for rid, r in self.requests.items()},
            "matches": {mid: m.to_dict() for mid, m in self.matches.items()},
            "reviews": {rid: r.to_dict() for rid, r in self.reviews.items()},
            "weights": self.weights.to_dict(),
        }

    @staticmethod
    def from_dict(d: Dict) -> "MentorshipState":
        st = MentorshipState()
        for mid, md in d.get("mentors", {}).items():
            st.mentors[mid] = MentorProfile.from_dict(md)

        for rid, rd in d.get("requests", {}).items():
            st.requests[rid] = MenteeRequest.from_dict(rd)

        for mid, md in d.get("matches", {}).items():
            st.matches[mid] = MentorMatch.from_dict(md)

        # Back-compat: may not exist
        for rid, rd in d.get("reviews", {}).items():
            st.reviews[rid] = MentorReview.from_dict(rd)

        st.weights = MatchingWeights.from_dict(d.get("weights", {}))
        return st
