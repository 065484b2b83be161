"""
Data models for the Mentor Matching System.
"""

try:
    from .weights import MatchingWeights, DEFAULT_MATCHING_WEIGHTS
    from .mentor import MentorProfile
    from .mentee import MenteeRequest
    from .explanation import MatchExplanation
    from .match import MentorMatch
    from .review import MentorReview
    from .state import MentorshipState
except ImportError:
    from models.weights import MatchingWeights, DEFAULT_MATCHING_WEIGHTS
    from models.mentor import MentorProfile
    from models.mentee import MenteeRequest
    from models.explanation import MatchExplanation
    from models.match import MentorMatch
    from models.review import MentorReview
    from models.state import MentorshipState

__all__ = [
    "MatchingWeights",
    "DEFAULT_MATCHING_WEIGHTS",
    "MentorProfile",
    "MenteeRequest",
    "MatchExplanation",
    "MentorMatch",
    "MentorReview",
    "MentorshipState",
]
