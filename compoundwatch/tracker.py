"""
Co-occurrence Tracker

Remembers, per topic, when it was first and last seen, how many consecutive
refresh cycles it has persisted (its streak), how many times it was
mentioned, and the source weights of recent mentions.

Cycle rules for observe():
  - first observation          -> new record, streak 1
  - same cycle as last_seen    -> mention only
  - cycle == last_seen + 1     -> streak + 1
  - cycle >  last_seen + 1     -> streak reset to 1
  - cycle <  last_seen (late)  -> mention and weight sample only;
                                  first_seen moves back if needed

Writes to one topic are serialized by that topic's lock; reads take a
snapshot under the same lock, so a concurrent reader never sees a half
updated record. A topic's lock lives exactly as long as its record.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Optional

from compoundwatch.logging import get_logger

logger = get_logger("tracker")


@dataclass
class TopicOccurrence:
    first_seen: int
    last_seen: int
    streak: int = 1
    mentions: int = 0
    samples: list[tuple[int, float]] = field(default_factory=list)  # (cycle, weight)


@dataclass(frozen=True)
class ActiveTopic:
    """Read-only snapshot of a tracked topic."""
    topic_id: str
    first_seen: int
    last_seen: int
    streak: int
    mentions: int
    weights: tuple[float, ...]

    @property
    def mean_weight(self) -> float:
        if not self.weights:
            return 1.0
        return sum(self.weights) / len(self.weights)


class CooccurrenceTracker:
    """Per-topic occurrence records keyed by topic id."""

    def __init__(self, retention_cycles: int = 6):
        if retention_cycles < 1:
            raise ValueError(f"retention_cycles must be >= 1, got {retention_cycles}")
        self.retention_cycles = retention_cycles
        self._records: dict[str, TopicOccurrence] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()
        self._latest_cycle: Optional[int] = None

    @contextmanager
    def _writing(self, topic_id: str) -> Iterator[None]:
        """Hold the topic's current lock, creating it if needed."""
        while True:
            with self._registry_lock:
                lock = self._locks.setdefault(topic_id, threading.Lock())
            lock.acquire()
            with self._registry_lock:
                current = self._locks.get(topic_id) is lock
            if current:
                break
            # evicted while we waited
            lock.release()
        try:
            yield
        finally:
            lock.release()

    def _existing_lock(self, topic_id: str) -> Optional[threading.Lock]:
        with self._registry_lock:
            return self._locks.get(topic_id)

    def _topic_ids(self) -> list[str]:
        with self._registry_lock:
            return list(self._records)

    @property
    def latest_cycle(self) -> Optional[int]:
        return self._latest_cycle

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, topic_id: str) -> bool:
        return topic_id in self._records

    # ============================================================
    # WRITES
    # ============================================================

    def observe(self, topic_id: str, cycle: int, weight: float = 1.0) -> None:
        """Record one mention of `topic_id` in `cycle` from a source of `weight`."""
        with self._writing(topic_id):
            record = self._records.get(topic_id)
            if record is None:
                record = TopicOccurrence(first_seen=cycle, last_seen=cycle)
                with self._registry_lock:
                    self._records[topic_id] = record
            elif cycle == record.last_seen + 1:
                record.streak += 1
                record.last_seen = cycle
            elif cycle > record.last_seen + 1:
                record.streak = 1
                record.last_seen = cycle
            elif cycle < record.first_seen:
                record.first_seen = cycle

            record.mentions += 1
            record.samples.append((cycle, weight))
            cutoff = record.last_seen - self.retention_cycles
            record.samples = [s for s in record.samples if s[0] > cutoff]

        with self._registry_lock:
            if self._latest_cycle is None or cycle > self._latest_cycle:
                self._latest_cycle = cycle

    def expire(self, current_cycle: int, max_idle_cycles: int) -> list[str]:
        """
        Evict topics not seen for at least `max_idle_cycles` cycles.

        Returns:
            The evicted topic ids, sorted.
        """
        expired = []
        for topic_id in self._topic_ids():
            lock = self._existing_lock(topic_id)
            if lock is None:
                continue
            with lock:
                record = self._records.get(topic_id)
                if record is not None and current_cycle - record.last_seen >= max_idle_cycles:
                    with self._registry_lock:
                        del self._records[topic_id]
                        self._locks.pop(topic_id, None)
                    expired.append(topic_id)
        if expired:
            logger.debug(
                f"Expired {len(expired)} idle topic(s)",
                extra={"cycle": current_cycle, "expired": expired},
            )
        return sorted(expired)

    def reset(self) -> None:
        with self._registry_lock:
            self._records.clear()
            self._locks.clear()
            self._latest_cycle = None

    # ============================================================
    # READS
    # ============================================================

    def get(self, topic_id: str) -> Optional[ActiveTopic]:
        lock = self._existing_lock(topic_id)
        if lock is None:
            return None
        with lock:
            record = self._records.get(topic_id)
            if record is None:
                return None
            return self._snapshot(topic_id, record)

    def mentions_at(self, topic_id: str, cycle: int) -> int:
        """Mentions of `topic_id` recorded in exactly `cycle` (0 once pruned)."""
        lock = self._existing_lock(topic_id)
        if lock is None:
            return 0
        with lock:
            record = self._records.get(topic_id)
            if record is None:
                return 0
            return sum(1 for c, _ in record.samples if c == cycle)

    def currently_active(
        self,
        window_cycles: int,
        current_cycle: Optional[int] = None,
    ) -> dict[str, ActiveTopic]:
        """
        Topics seen within the last `window_cycles` cycles.

        A topic is active when last_seen > current_cycle - window_cycles.
        `current_cycle` defaults to the latest cycle observed. Only weight
        samples inside the window are included in the snapshot.
        """
        if current_cycle is None:
            current_cycle = self._latest_cycle
        if current_cycle is None:
            return {}

        floor = current_cycle - window_cycles
        active: dict[str, ActiveTopic] = {}
        for topic_id in self._topic_ids():
            lock = self._existing_lock(topic_id)
            if lock is None:
                continue
            with lock:
                record = self._records.get(topic_id)
                if record is None or record.last_seen <= floor:
                    continue
                active[topic_id] = self._snapshot(topic_id, record, floor=floor)
        return active

    @staticmethod
    def _snapshot(
        topic_id: str,
        record: TopicOccurrence,
        floor: Optional[int] = None,
    ) -> ActiveTopic:
        samples = record.samples
        if floor is not None:
            samples = [s for s in samples if s[0] > floor]
        return ActiveTopic(
            topic_id=topic_id,
            first_seen=record.first_seen,
            last_seen=record.last_seen,
            streak=record.streak,
            mentions=record.mentions,
            weights=tuple(w for _, w in samples),
        )
