"""
Tests for the Co-occurrence Tracker: streaks, windows, eviction, concurrency.
"""

import threading

import pytest

from compoundwatch.tracker import ActiveTopic, CooccurrenceTracker


@pytest.fixture
def tracker():
    return CooccurrenceTracker(retention_cycles=6)


class TestStreaks:
    def test_first_observation(self, tracker):
        tracker.observe("tariffs", 1)
        t = tracker.get("tariffs")
        assert (t.first_seen, t.last_seen, t.streak, t.mentions) == (1, 1, 1, 1)

    def test_same_cycle_only_adds_mentions(self, tracker):
        tracker.observe("tariffs", 1)
        tracker.observe("tariffs", 1)
        t = tracker.get("tariffs")
        assert t.streak == 1
        assert t.mentions == 2

    def test_consecutive_cycles_extend_streak(self, tracker):
        for cycle in (1, 2, 3):
            tracker.observe("tariffs", cycle)
        assert tracker.get("tariffs").streak == 3

    def test_gap_resets_streak(self, tracker):
        for cycle in (1, 2, 5):
            tracker.observe("tariffs", cycle)
        t = tracker.get("tariffs")
        assert t.streak == 1
        assert t.first_seen == 1
        assert t.last_seen == 5

    def test_late_arrival_counts_as_mention(self, tracker):
        tracker.observe("tariffs", 3)
        tracker.observe("tariffs", 4)
        tracker.observe("tariffs", 2)
        t = tracker.get("tariffs")
        assert t.last_seen == 4
        assert t.streak == 2
        assert t.mentions == 3

    def test_unknown_topic(self, tracker):
        assert tracker.get("nope") is None


class TestWindow:
    """Active means last_seen > current_cycle - window."""

    def test_inside_window(self, tracker):
        tracker.observe("tariffs", 3)
        assert "tariffs" in tracker.currently_active(3, current_cycle=5)

    def test_outside_window(self, tracker):
        tracker.observe("tariffs", 2)
        assert "tariffs" not in tracker.currently_active(3, current_cycle=5)

    def test_defaults_to_latest_cycle(self, tracker):
        tracker.observe("tariffs", 1)
        tracker.observe("inflation", 10)
        active = tracker.currently_active(3)
        assert set(active) == {"inflation"}

    def test_empty_tracker(self, tracker):
        assert tracker.currently_active(3) == {}

    def test_read_only(self, tracker):
        tracker.observe("tariffs", 1)
        tracker.currently_active(1, current_cycle=50)
        assert "tariffs" in tracker

    def test_weights_limited_to_window(self, tracker):
        tracker.observe("tariffs", 1, weight=0.4)
        tracker.observe("tariffs", 3, weight=1.5)
        active = tracker.currently_active(2, current_cycle=3)
        assert active["tariffs"].weights == (1.5,)
        assert active["tariffs"].mean_weight == 1.5

    def test_mean_weight(self, tracker):
        tracker.observe("tariffs", 1, weight=1.5)
        tracker.observe("tariffs", 1, weight=0.5)
        assert tracker.get("tariffs").mean_weight == 1.0


class TestRetention:
    def test_old_samples_pruned(self):
        tracker = CooccurrenceTracker(retention_cycles=2)
        tracker.observe("tariffs", 1, weight=0.4)
        tracker.observe("tariffs", 5, weight=1.5)
        assert tracker.get("tariffs").weights == (1.5,)

    def test_pruning_is_per_topic(self):
        tracker = CooccurrenceTracker(retention_cycles=2)
        tracker.observe("inflation", 1, weight=0.4)
        tracker.observe("tariffs", 5, weight=1.5)
        assert tracker.get("inflation").weights == (0.4,)

    def test_invalid_retention(self):
        with pytest.raises(ValueError):
            CooccurrenceTracker(retention_cycles=0)


class TestEviction:
    def test_expire_idle_topics(self, tracker):
        tracker.observe("tariffs", 1)
        tracker.observe("inflation", 5)
        expired = tracker.expire(current_cycle=7, max_idle_cycles=6)
        assert expired == ["tariffs"]
        assert "tariffs" not in tracker
        assert "inflation" in tracker

    def test_nothing_to_expire(self, tracker):
        tracker.observe("tariffs", 5)
        assert tracker.expire(current_cycle=6, max_idle_cycles=6) == []

    def test_reset(self, tracker):
        tracker.observe("tariffs", 1)
        tracker.reset()
        assert len(tracker) == 0
        assert tracker.latest_cycle is None


class TestConcurrency:
    def test_parallel_observe_same_topic(self, tracker):
        def worker():
            for _ in range(200):
                tracker.observe("tariffs", 1)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        t = tracker.get("tariffs")
        assert t.mentions == 1600
        assert t.streak == 1
        assert len(t.weights) == 1600


class TestLockLifecycle:
    def test_get_unknown_topic_creates_no_lock(self, tracker):
        tracker.get("nope")
        tracker.mentions_at("nope", 1)
        assert "nope" not in tracker._locks

    def test_expire_drops_lock(self, tracker):
        tracker.observe("tariffs", 1)
        tracker.expire(current_cycle=10, max_idle_cycles=6)
        assert "tariffs" not in tracker._locks

    def test_observe_after_expire(self, tracker):
        tracker.observe("tariffs", 1)
        tracker.expire(current_cycle=10, max_idle_cycles=6)
        tracker.observe("tariffs", 10)
        t = tracker.get("tariffs")
        assert (t.first_seen, t.streak, t.mentions) == (10, 1, 1)

    def test_locks_bounded_by_records(self, tracker):
        for cycle in range(1, 30):
            tracker.observe(f"topic-{cycle}", cycle)
            tracker.expire(current_cycle=cycle, max_idle_cycles=3)
        assert set(tracker._locks) == set(tracker._records)
        assert len(tracker._locks) == 3


class TestMentionsAt:
    def test_counts_one_cycle(self, tracker):
        tracker.observe("tariffs", 1)
        tracker.observe("tariffs", 2)
        tracker.observe("tariffs", 2)
        assert tracker.mentions_at("tariffs", 1) == 1
        assert tracker.mentions_at("tariffs", 2) == 2
        assert tracker.mentions_at("tariffs", 3) == 0

    def test_unknown_topic(self, tracker):
        assert tracker.mentions_at("nope", 1) == 0


class TestActiveTopic:
    def test_no_samples_means_neutral_weight(self):
        topic = ActiveTopic("tariffs", first_seen=1, last_seen=1, streak=1,
                            mentions=0, weights=())
        assert topic.mean_weight == 1.0
