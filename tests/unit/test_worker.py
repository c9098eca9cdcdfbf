"""Unit tests for the background recommender worker."""

import random
import time

import pytest

from gallerywall.application.generators import GeneratorFactory, SearchBudget
from gallerywall.application.services import RecommenderService, RecommenderWorker
from gallerywall.contracts import (
    CancelRequest,
    Done,
    GenerateRequest,
    SolutionFound,
)

TIMEOUT = 30.0

# Long enough that a request only finishes early when it is cancelled.
LONG_BUDGET = SearchBudget(time_limit=60.0, max_attempts=10_000_000)


def _service(budget: SearchBudget) -> RecommenderService:
    return RecommenderService(GeneratorFactory(budget=budget, rng=random.Random(11)))


def _wait_until_busy(worker: RecommenderWorker) -> None:
    deadline = time.monotonic() + TIMEOUT
    while not worker.is_busy:
        assert time.monotonic() < deadline, "worker never picked up the request"
        time.sleep(0.01)


@pytest.fixture
def unplaceable_request(make_request):
    """Two 60x60 frames pass the area check but never fit a 90x90 usable area.

    With force_all every candidate is discarded, so the search runs until
    its budget is spent or it is cancelled.
    """
    return make_request(
        wall=(100.0, 100.0),
        frames=[("big", 60.0, 60.0, 2)],
        algorithm="monte_carlo",
        force_all=True,
    )


class TestRecommenderWorker:
    """Tests for RecommenderWorker."""

    def test_generate_request_round_trip(self, grid_request, small_budget) -> None:
        with RecommenderWorker(_service(small_budget)) as worker:
            worker.send(GenerateRequest(payload=grid_request))
            messages = list(worker.responses(timeout=TIMEOUT))

        assert isinstance(messages[0], SolutionFound)
        assert messages[-1] == Done(count=1)

    def test_requests_are_answered_in_order(
        self, grid_request, make_request, small_budget
    ) -> None:
        with RecommenderWorker(_service(small_budget)) as worker:
            worker.send(GenerateRequest(payload=make_request()))
            worker.send(GenerateRequest(payload=grid_request))
            first = list(worker.responses(timeout=TIMEOUT))
            second = list(worker.responses(timeout=TIMEOUT))

        assert first == [Done(count=0)]
        assert second[-1] == Done(count=1)

    def test_cancel_stops_the_search_early(self, unplaceable_request) -> None:
        """A cancelled request still finishes with Done."""
        with RecommenderWorker(_service(LONG_BUDGET)) as worker:
            worker.send(GenerateRequest(payload=unplaceable_request))
            _wait_until_busy(worker)
            started = time.monotonic()
            worker.send(CancelRequest())
            messages = list(worker.responses(timeout=TIMEOUT))

        assert messages == [Done(count=0)]
        assert time.monotonic() - started < TIMEOUT

    def test_cancel_while_idle_does_not_affect_the_next_request(
        self, grid_request, small_budget
    ) -> None:
        with RecommenderWorker(_service(small_budget)) as worker:
            worker.send(CancelRequest())
            worker.send(GenerateRequest(payload=grid_request))
            messages = list(worker.responses(timeout=TIMEOUT))

        assert isinstance(messages[0], SolutionFound)
        assert messages[-1] == Done(count=1)

    def test_stop_drops_queued_requests(self, unplaceable_request) -> None:
        worker = RecommenderWorker(_service(LONG_BUDGET))
        worker.start()
        for _ in range(3):
            worker.send(GenerateRequest(payload=unplaceable_request))
        _wait_until_busy(worker)

        started = time.monotonic()
        worker.stop(timeout=TIMEOUT)

        assert not worker.is_running
        assert time.monotonic() - started < TIMEOUT
        assert list(worker.responses(timeout=1.0)) == [Done(count=0)]

    def test_rejects_non_request_messages(self) -> None:
        worker = RecommenderWorker()
        with pytest.raises(TypeError):
            worker.send(Done(count=0))  # type: ignore[arg-type]

    def test_start_and_stop(self) -> None:
        worker = RecommenderWorker()
        worker.start()
        assert worker.is_running
        assert not worker.is_busy
        worker.stop(timeout=TIMEOUT)
        assert not worker.is_running
