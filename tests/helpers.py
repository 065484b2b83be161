"""Record builders shared by the test modules."""

import itertools

from mentormatch.models import MentorProfile, MenteeRequest, MatchingWeights

DAY_MS = 24 * 60 * 60 * 1000

TOPIC_ONLY = MatchingWeights(1, 0, 0, 0)
REPUTATION_ONLY = MatchingWeights(0, 0, 0, 1)


def make_mentor(mentor_id, **overrides):
    fields = dict(
        id=mentor_id,
        student_id=f"student-{mentor_id}",
        college="Stanford",
        topics={"anxiety", "depression"},
        availability={"monday": {"morning", "evening"}, "wednesday": {"afternoon"}},
        karma=200,
        streak=4,
        rating=4.0,
        is_active=True,
        max_mentees=3,
        current_mentees=[],
        last_active_at=1_000,
    )
    fields.update(overrides)
    return MentorProfile(**fields)


def make_mentee(request_id, **overrides):
    fields = dict(
        id=request_id,
        student_id=f"student-{request_id}",
        college="Stanford",
        topics=["anxiety", "depression"],
        preferred_availability={"monday": {"morning"}},
        urgency="medium",
        created_at=500,
    )
    fields.update(overrides)
    return MenteeRequest(**fields)


def fixed_clock(value):
    return lambda: value


def sequential_ids(prefix="id"):
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"
