import unittest

from mentormatch.config import INACTIVE_SESSION_THRESHOLD_MS
from mentormatch.lifecycle import (
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
from mentormatch.matching import select_best_match
from mentormatch.models import MentorshipState

from .helpers import DAY_MS, make_mentor, make_mentee, fixed_clock, sequential_ids

NOW = 1_700_000_000_000


def _match(**overrides):
    result = select_best_match(make_mentee("r"), [make_mentor("m")])
    m = create_mentor_match("r", "m", "student-r", result.score, result.explanation,
                            clock=fixed_clock(NOW), id_factory=fixed_clock("match-1"))
    for k, v in overrides.items():
        setattr(m, k, v)
    return m


class TestCreateMentorMatch(unittest.TestCase):

    def test_stamps_all_timestamps_with_now(self):
        m = _match()
        self.assertEqual(m.id, "match-1")
        self.assertEqual(m.status, "active")
        self.assertEqual(m.matched_at, NOW)
        self.assertEqual(m.session_started_at, NOW)
        self.assertEqual(m.last_interaction_at, NOW)
        self.assertEqual(m.expires_at, NOW + INACTIVE_SESSION_THRESHOLD_MS)
        self.assertEqual((m.request_id, m.mentor_id, m.mentee_id), ("r", "m", "student-r"))

    def test_default_ids_are_unique(self):
        result = select_best_match(make_mentee("r"), [make_mentor("m")])
        a = create_mentor_match("r", "m", "s", result.score, result.explanation)
        b = create_mentor_match("r", "m", "s", result.score, result.explanation)
        self.assertNotEqual(a.id, b.id)
        self.assertNotEqual(new_id(), new_id())
        self.assertIsInstance(now_ms(), int)


class TestShouldCleanupMatch(unittest.TestCase):

    def test_threshold_is_thirty_days(self):
        self.assertEqual(INACTIVE_SESSION_THRESHOLD_MS, 2_592_000_000)

    def test_active_and_stale(self):
        m = _match(last_interaction_at=NOW - 35 * DAY_MS)
        self.assertTrue(should_cleanup_match(m, NOW))

    def test_active_and_recent(self):
        m = _match(last_interaction_at=NOW - 20 * DAY_MS)
        self.assertFalse(should_cleanup_match(m, NOW))

    def test_exactly_at_threshold_is_kept(self):
        m = _match(last_interaction_at=NOW - INACTIVE_SESSION_THRESHOLD_MS)
        self.assertFalse(should_cleanup_match(m, NOW))

    def test_non_active_never_cleaned(self):
        for status in ("completed", "cancelled", "expired"):
            m = _match(status=status, last_interaction_at=NOW - 365 * DAY_MS)
            self.assertFalse(should_cleanup_match(m, NOW))

    def test_falls_back_to_session_start(self):
        m = _match(last_interaction_at=None, session_started_at=NOW - 40 * DAY_MS, matched_at=NOW)
        self.assertTrue(should_cleanup_match(m, NOW))

    def test_falls_back_to_matched_at(self):
        m = _match(last_interaction_at=None, session_started_at=None, matched_at=NOW - 31 * DAY_MS)
        self.assertTrue(should_cleanup_match(m, NOW))

    def test_expires_at_is_not_consulted(self):
        m = _match(last_interaction_at=NOW - 5 * DAY_MS, expires_at=NOW - DAY_MS)
        self.assertFalse(should_cleanup_match(m, NOW))

    def test_uses_clock_when_now_missing(self):
        m = _match(last_interaction_at=NOW)
        self.assertTrue(should_cleanup_match(m, clock=fixed_clock(NOW + 31 * DAY_MS)))


class TestCleanupInactiveMatches(unittest.TestCase):

    def test_partitions_and_copies(self):
        stale = _match(id="stale", last_interaction_at=NOW - 35 * DAY_MS)
        fresh = _match(id="fresh", last_interaction_at=NOW - DAY_MS)
        done = _match(id="done", status="completed", last_interaction_at=NOW - 90 * DAY_MS)

        kept, cleaned = cleanup_inactive_matches([stale, fresh, done], now=NOW)

        self.assertEqual([m.id for m in kept], ["fresh", "done"])
        self.assertEqual([m.id for m in cleaned], ["stale"])
        self.assertEqual(cleaned[0].status, "expired")
        self.assertEqual(stale.status, "active")
        self.assertIs(kept[0], fresh)

    def test_empty(self):
        self.assertEqual(cleanup_inactive_matches([], now=NOW), ([], []))


class TestRecordConstructors(unittest.TestCase):

    def test_mentor_profile_defaults(self):
        p = create_mentor_profile("s1", "Stanford", ["anxiety", "grief"], {"monday": ["morning"]},
                                  display_name="Sky", clock=fixed_clock(NOW), id_factory=fixed_clock("mentor-1"))
        self.assertEqual(p.id, "mentor-1")
        self.assertEqual(p.topics, {"anxiety", "grief"})
        self.assertEqual(p.availability, {"monday": {"morning"}})
        self.assertEqual((p.karma, p.streak, p.rating, p.total_sessions), (0, 0, 0.0, 0))
        self.assertTrue(p.is_active)
        self.assertEqual(p.max_mentees, 5)
        self.assertEqual(p.current_mentees, [])
        self.assertEqual((p.created_at, p.last_active_at), (NOW, NOW))
        self.assertEqual(p.display_name, "Sky")

    def test_mentor_profile_rejects_non_positive_capacity(self):
        with self.assertRaises(ValueError):
            create_mentor_profile("s1", "Stanford", [], {}, max_mentees=0)

    def test_mentee_request(self):
        r = create_mentee_request("s2", "MIT", ["stress_management"], {"friday": ["evening"]},
                                  clock=fixed_clock(NOW), id_factory=fixed_clock("req-1"))
        self.assertEqual(r.id, "req-1")
        self.assertEqual(r.urgency, "medium")
        self.assertEqual(r.status, "pending")
        self.assertEqual(r.created_at, NOW)
        self.assertEqual(r.preferred_availability, {"friday": {"evening"}})

    def test_mentee_request_rejects_unknown_urgency(self):
        with self.assertRaises(ValueError):
            create_mentee_request("s2", "MIT", [], {}, urgency="urgent")

    def test_review_rating_is_clamped(self):
        ids = sequential_ids("review")
        self.assertEqual(create_mentor_review("m1", "m", "s", 7, id_factory=ids).rating, 5.0)
        self.assertEqual(create_mentor_review("m1", "m", "s", 0, id_factory=ids).rating, 1.0)
        self.assertEqual(create_mentor_review("m1", "m", "s", 3.5, id_factory=ids).rating, 3.5)

    def test_review_feedback_is_trimmed(self):
        r = create_mentor_review("m1", "m", "s", 4, feedback="  very helpful \n", clock=fixed_clock(NOW))
        self.assertEqual(r.feedback, "very helpful")
        self.assertEqual(r.submitted_at, NOW)
        self.assertIsNone(create_mentor_review("m1", "m", "s", 4).feedback)


class TestTransitions(unittest.TestCase):

    def test_complete_and_cancel_return_copies(self):
        m = _match()
        self.assertEqual(complete_match(m).status, "completed")
        self.assertEqual(cancel_match(m).status, "cancelled")
        self.assertEqual(m.status, "active")

    def test_terminal_matches_cannot_transition(self):
        done = _match(status="completed")
        with self.assertRaises(ValueError):
            complete_match(done)
        with self.assertRaises(ValueError):
            cancel_match(done)
        with self.assertRaises(ValueError):
            touch_match(done, now=NOW)

    def test_touch_defers_expiry(self):
        m = _match(last_interaction_at=NOW - 29 * DAY_MS)
        touched = touch_match(m, now=NOW)
        self.assertEqual(touched.last_interaction_at, NOW)
        self.assertFalse(should_cleanup_match(touched, NOW + 10 * DAY_MS))
        self.assertTrue(should_cleanup_match(m, NOW + 10 * DAY_MS))


class TestStateTransitions(unittest.TestCase):

    def _state(self):
        st = MentorshipState()
        st.mentors["m"] = make_mentor("m", current_mentees=["student-r", "other"])
        m = _match()
        st.matches[m.id] = m
        return st, m

    def test_close_match_frees_the_slot(self):
        st, m = self._state()
        closed = close_match(st, m.id, "completed")
        self.assertEqual(closed.status, "completed")
        self.assertEqual(st.matches[m.id].status, "completed")
        self.assertEqual(st.mentors["m"].current_mentees, ["other"])

    def test_close_match_errors(self):
        st, m = self._state()
        with self.assertRaises(KeyError):
            close_match(st, "missing", "cancelled")
        with self.assertRaises(ValueError):
            close_match(st, m.id, "expired")

    def test_expire_inactive_matches(self):
        st, m = self._state()
        expired = expire_inactive_matches(st, now=NOW + 31 * DAY_MS)
        self.assertEqual([e.id for e in expired], [m.id])
        self.assertEqual(st.matches[m.id].status, "expired")
        self.assertEqual(st.mentors["m"].current_mentees, ["other"])

    def test_expire_keeps_recent(self):
        st, m = self._state()
        self.assertEqual(expire_inactive_matches(st, now=NOW + DAY_MS), [])
        self.assertEqual(st.matches[m.id].status, "active")


if __name__ == "__main__":
    unittest.main()
