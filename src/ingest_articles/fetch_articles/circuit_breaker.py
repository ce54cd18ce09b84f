"""Per-source circuit breaker with pluggable state storage."""

from __future__ import annotations

import json
import logging
import threading
import time
from pathlib import Path
from typing import Any, Callable, Protocol

logger = logging.getLogger(__name__)

CLOSED = "closed"
OPEN = "open"
HALF_OPEN = "half-open"


class StateStore(Protocol):
    """Keyed storage for breaker state, shared across runs."""

    def get(self, key: str) -> dict[str, Any] | None: ...

    def set(self, key: str, state: dict[str, Any]) -> None: ...


class InMemoryStateStore:
    def __init__(self) -> None:
        self._states: dict[str, dict[str, Any]] = {}

    def get(self, key: str) -> dict[str, Any] | None:
        state = self._states.get(key)
        return dict(state) if state is not None else None

    def set(self, key: str, state: dict[str, Any]) -> None:
        self._states[key] = dict(state)


class JsonFileStateStore:
    """Breaker state persisted as a single JSON object keyed by source."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> dict[str, dict[str, Any]]:
        """Stored states, or {} when the file is missing or unreadable."""
        if not self.path.exists():
            return {}
        try:
            with self.path.open() as f:
                states = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Could not read circuit breaker state from %s: %s", self.path, e)
            return {}
        return states if isinstance(states, dict) else {}

    def get(self, key: str) -> dict[str, Any] | None:
        with self._lock:
            return self._read().get(key)

    def set(self, key: str, state: dict[str, Any]) -> None:
        with self._lock:
            states = self._read()
            states[key] = state
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with self.path.open("w") as f:
                    json.dump(states, f, indent=2, sort_keys=True)
            except OSError as e:
                logger.error("Could not write circuit breaker state to %s: %s", self.path, e)


class CircuitBreaker:
    """
    Skip sources that keep failing.

    A source opens after `failure_threshold` failures and stays open for
    `timeout_seconds`. After that it is half-open: the next fetch is
    attempted, and a success closes it again.
    """

    def __init__(
        self,
        store: StateStore,
        failure_threshold: int = 3,
        timeout_seconds: float = 3600,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.store = store
        self.failure_threshold = failure_threshold
        self.timeout_seconds = timeout_seconds
        self.clock = clock

    def should_skip(self, source: str) -> bool:
        state = self.store.get(source)
        if not state or state.get("state") != OPEN:
            return False

        if self.clock() - state.get("last_failure", 0) > self.timeout_seconds:
            self.store.set(source, {**state, "state": HALF_OPEN, "count": 0})
            logger.info("Circuit breaker half-open for %s", source)
            return False

        logger.info("Circuit breaker open, skipping %s", source)
        return True

    def record_failure(self, source: str) -> None:
        state = self.store.get(source) or {"count": 0, "last_failure": 0, "state": CLOSED}
        state["count"] = state.get("count", 0) + 1
        state["last_failure"] = self.clock()

        if state["count"] >= self.failure_threshold:
            state["state"] = OPEN
            logger.warning("Circuit breaker opened for %s after %d failures", source, state["count"])

        self.store.set(source, state)

    def record_success(self, source: str) -> None:
        state = self.store.get(source)
        if state and state.get("state") == HALF_OPEN:
            self.store.set(source, {**state, "state": CLOSED, "count": 0})
            logger.info("Circuit breaker closed for %s", source)
