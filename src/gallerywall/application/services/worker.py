"""Background worker running generation requests off the caller's thread.

The worker owns one thread and two queues: requests go in through ``send``
and response messages come out through ``receive``. Requests are handled one
at a time, in arrival order.
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import Iterator

from gallerywall.contracts.messages import (
    CancelRequest,
    GenerateRequest,
    RequestMessage,
    ResponseMessage,
    is_terminal,
)

from .recommender import RecommenderService

logger = logging.getLogger(__name__)


class RecommenderWorker:
    """Message-passing front end to a RecommenderService.

    Example:
        ```python
        with RecommenderWorker() as worker:
            worker.send(GenerateRequest(payload=data))
            for message in worker.responses(timeout=10):
                ...
        ```
    """

    def __init__(self, service: RecommenderService | None = None) -> None:
        self._service = service or RecommenderService()
        self._inbox: queue.Queue[GenerateRequest | None] = queue.Queue()
        self._outbox: queue.Queue[ResponseMessage] = queue.Queue()
        self._cancel = threading.Event()
        self._stopping = threading.Event()
        # Guards _busy, the cancel flag and the stopping check.
        self._lock = threading.Lock()
        self._busy = False
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def is_busy(self) -> bool:
        """True while a generation request is being processed."""
        with self._lock:
            return self._busy

    def start(self) -> None:
        """Start the worker thread. Calling it twice is a no-op."""
        if self.is_running:
            return
        self._cancel.clear()
        self._stopping.clear()
        self._thread = threading.Thread(
            target=self._loop, name="gallerywall-recommender", daemon=True
        )
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        """Cancel the in-flight request, drop queued ones and wait for the thread.

        Queued requests are discarded without any response messages.
        """
        if self._thread is None:
            return
        self._stopping.set()
        self._cancel_in_flight()
        dropped = self._drain_inbox()
        if dropped:
            logger.info(f"Worker stopping, dropped {dropped} queued requests")
        self._inbox.put(None)
        self._thread.join(timeout)
        self._thread = None

    def send(self, message: RequestMessage) -> None:
        """Deliver a request message.

        A ``CancelRequest`` takes effect immediately on the request being
        processed. It is ignored when the worker is idle, so it never affects
        requests sent afterwards.

        Raises:
            TypeError: If ``message`` is not a request message.
        """
        if isinstance(message, CancelRequest):
            if not self._cancel_in_flight():
                logger.debug("Cancellation requested while idle, ignoring")
        elif isinstance(message, GenerateRequest):
            self._inbox.put(message)
        else:
            raise TypeError(f"Unsupported request message: {message!r}")

    def receive(self, timeout: float | None = None) -> ResponseMessage:
        """Take the next response message.

        Raises:
            queue.Empty: If nothing arrives within ``timeout`` seconds.
        """
        return self._outbox.get(timeout=timeout)

    def responses(self, timeout: float | None = None) -> Iterator[ResponseMessage]:
        """Yield response messages up to and including the terminal one."""
        while True:
            message = self.receive(timeout=timeout)
            yield message
            if is_terminal(message):
                return

    def _cancel_in_flight(self) -> bool:
        with self._lock:
            if not self._busy:
                return False
            logger.debug("Cancelling in-flight request")
            self._cancel.set()
            return True

    def _drain_inbox(self) -> int:
        dropped = 0
        while True:
            try:
                request = self._inbox.get_nowait()
            except queue.Empty:
                return dropped
            if request is not None:
                dropped += 1

    def _loop(self) -> None:
        while True:
            request = self._inbox.get()
            if request is None:
                return
            with self._lock:
                if self._stopping.is_set():
                    return
                self._busy = True
                self._cancel.clear()
            try:
                for response in self._service.run_generation(
                    request.payload, should_stop=self._cancel.is_set
                ):
                    self._outbox.put(response)
            finally:
                with self._lock:
                    self._busy = False
                    self._cancel.clear()

    def __enter__(self) -> "RecommenderWorker":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


__all__ = ["RecommenderWorker"]
