"""Background worker for blocking listing and preview loads."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from queue import Empty, Queue

logger = logging.getLogger(__name__)

CHANNEL_LISTING = "listing"
CHANNEL_PREVIEW = "preview"


@dataclass(frozen=True)
class LoadRequest:
    """One queued load job."""

    request_id: int
    channel: str
    job: Callable[[], object]


@dataclass(frozen=True)
class LoadResult:
    """Completed load job. ``error`` is set when the job raised."""

    request: LoadRequest
    value: object = None
    error: Exception | None = None


class BackgroundLoader:
    """Single-threaded latest-request-wins loader with one slot per channel.

    A new request replaces any pending request on its channel. Results for
    requests superseded while running are dropped by ``drain_results``.
    """

    def __init__(self, thread_name: str = "lazyfiles-loader") -> None:
        self._thread_name = thread_name
        self._lock = threading.Lock()
        self._pending: dict[str, LoadRequest] = {}
        self._latest: dict[str, int] = {}
        self._running = False
        self._next_request_id = 1
        self._results: Queue[LoadResult] = Queue()
        self._idle = threading.Event()
        self._idle.set()

    def _worker(self) -> None:
        while True:
            with self._lock:
                if not self._pending:
                    self._running = False
                    self._idle.set()
                    return
                channel = next(iter(self._pending))
                request = self._pending.pop(channel)

            try:
                value = request.job()
            except Exception as exc:
                logger.warning("%s load %d failed: %s", request.channel, request.request_id, exc)
                self._results.put(LoadResult(request=request, error=exc))
                continue
            self._results.put(LoadResult(request=request, value=value))

    def schedule(self, channel: str, job: Callable[[], object]) -> int:
        """Queue ``job`` on ``channel``, replacing pending work, and return its id."""
        with self._lock:
            request_id = self._next_request_id
            self._next_request_id += 1
            self._pending[channel] = LoadRequest(request_id=request_id, channel=channel, job=job)
            self._latest[channel] = request_id
            self._idle.clear()
            if self._running:
                return request_id
            self._running = True

        worker = threading.Thread(
            target=self._worker,
            name=self._thread_name,
            daemon=True,
        )
        worker.start()
        return request_id

    def latest_request_id(self, channel: str) -> int | None:
        with self._lock:
            return self._latest.get(channel)

    def is_current(self, result: LoadResult) -> bool:
        return self.latest_request_id(result.request.channel) == result.request.request_id

    def drain_results(self) -> list[LoadResult]:
        """Drain completed results, dropping ones superseded by newer requests."""
        out: list[LoadResult] = []
        while True:
            try:
                result = self._results.get_nowait()
            except Empty:
                break
            if not self.is_current(result):
                logger.debug(
                    "discarding stale %s load %d",
                    result.request.channel,
                    result.request.request_id,
                )
                continue
            out.append(result)
        return out

    def wait_idle(self, timeout: float | None = None) -> bool:
        """Block until no work is pending or running."""
        return self._idle.wait(timeout)


__all__ = [
    "CHANNEL_LISTING",
    "CHANNEL_PREVIEW",
    "LoadRequest",
    "LoadResult",
    "BackgroundLoader",
]
