"""
Match lifecycle for the Mentor Matching System.
"""

try:
    from .clock import now_ms, new_id
    from .records import (
        create_mentor_profile,
        create_mentee_request,
        create_mentor_match,
        create_mentor_review,
    )
    from .expiry import should_cleanup_match, cleanup_inactive_matches
    from .transitions import (
        complete_match,
        cancel_match,
        touch_match,
        release_mentee,
        close_match,
        expire_inactive_matches,
    )
except ImportError:
    from lifecycle.clock import now_ms, new_id
    from lifecycle.records import (
        create_mentor_profile,
        create_mentee_request,
        create_mentor_match,
        create_mentor_review,
    )
    from lifecycle.expiry import should_cleanup_match, cleanup_inactive_matches
    from lifecycle.transitions import (
        complete_match,
        cancel_match,
        touch_match,
        release_mentee,
        close_match,
        expire_inactive_matches,
    )

__all__ = [
    "now_ms",
    "new_id",
    "create_mentor_profile",
    "create_mentee_request",
    "create_mentor_match",
    "create_mentor_review",
    "should_cleanup_match",
    "cleanup_inactive_matches",
    "complete_match",
    "cancel_match",
    "touch_match",
    "release_mentee",
    "close_match",
    "expire_inactive_matches",
]
