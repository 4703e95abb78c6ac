# forex_fetcher/tasks.py: fire-and-forget fetches off the script thread
from __future__ import annotations
import queue
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from forex_fetcher.api.exchangerate import RateClientError
from forex_fetcher.currencies import CurrencyPair
from forex_fetcher.logging_config import get_logger

logger = get_logger(__name__)


class TaskKind(str, Enum):
    RATE = "rate"
    HISTORY = "history"


@dataclass(frozen=True)
class TaskResult:
    kind: TaskKind
    pair: CurrencyPair
    value: Any = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


TaskKey = Tuple[CurrencyPair, TaskKind]
_RunKey = Tuple[CurrencyPair, TaskKind, str]


class TaskRunner:
    """
    Runs each fetch on its own daemon thread and hands back exactly one
    TaskResult per thread through a queue the view polls once per frame.

    A second submit for a (pair, kind, scope) that is still running is folded
    into the running one: no new thread, no extra result. The view passes the
    API key as `scope`, so a corrected key starts a fresh fetch.
    """

    def __init__(self):
        self._results: "queue.SimpleQueue[TaskResult]" = queue.SimpleQueue()
        self._in_flight: Dict[_RunKey, threading.Thread] = {}
        self._lock = threading.Lock()

    def submit(self, kind: TaskKind, pair: CurrencyPair, task: Callable[[], Any], scope: str = "") -> bool:
        key = (pair, kind, scope)
        with self._lock:
            if key in self._in_flight:
                logger.debug("%s fetch for %s already running, coalesced", kind.value, pair)
                return False
            thread = threading.Thread(
                target=self._run,
                args=(key, task),
                name=f"fetch-{kind.value}-{pair.wire}",
                daemon=True,
            )
            self._in_flight[key] = thread
        logger.info("Started %s fetch for %s", kind.value, pair)
        thread.start()
        return True

    def _run(self, key: _RunKey, task: Callable[[], Any]) -> None:
        pair, kind, _ = key
        try:
            result = TaskResult(kind, pair, value=task())
        except RateClientError as exc:
            logger.warning("%s fetch for %s failed: %s", kind.value, pair, exc)
            result = TaskResult(kind, pair, error=exc)
        except Exception as exc:
            logger.exception("%s fetch for %s crashed", kind.value, pair)
            result = TaskResult(kind, pair, error=exc)

        # publish and release together so submit() never sees a finished key
        with self._lock:
            self._results.put(result)
            del self._in_flight[key]

    def poll(self) -> Optional[TaskResult]:
        """Non-blocking: at most one result, or None when nothing is queued."""
        try:
            return self._results.get_nowait()
        except queue.Empty:
            return None

    def in_flight(self) -> List[TaskKey]:
        with self._lock:
            return [(pair, kind) for pair, kind, _ in self._in_flight]

    @property
    def busy(self) -> bool:
        with self._lock:
            return bool(self._in_flight)

    def wait_idle(self, timeout: Optional[float] = None) -> bool:
        """Join every running fetch; True if none is left running."""
        with self._lock:
            threads = list(self._in_flight.values())
        for t in threads:
            t.join(timeout)
        return not self.busy
