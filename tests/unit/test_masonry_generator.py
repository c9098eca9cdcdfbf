"""Unit tests for the masonry generator and its free-rectangle helpers."""

import random

import pytest

from gallerywall.application.generators import MasonryGenerator, SearchBudget
from gallerywall.application.generators.masonry import cut_free_rects, prune_free_rects
from gallerywall.domain.value_objects import Rect


@pytest.fixture
def generator(small_budget: SearchBudget, rng: random.Random) -> MasonryGenerator:
    return MasonryGenerator(budget=small_budget, rng=rng)


# =============================================================================
# Free rectangles
# =============================================================================


class TestPruneFreeRects:
    """Tests for prune_free_rects."""

    def test_drops_contained_rectangles(self) -> None:
        outer = Rect(0, 0, 10, 10)
        inner = Rect(2, 2, 3, 3)
        assert prune_free_rects([inner, outer]) == [outer]

    def test_keeps_one_of_identical_rectangles(self) -> None:
        rect = Rect(0, 0, 10, 10)
        assert prune_free_rects([rect, rect]) == [rect]

    def test_keeps_partially_overlapping_rectangles(self) -> None:
        a = Rect(0, 0, 10, 5)
        b = Rect(0, 0, 5, 10)
        assert prune_free_rects([a, b]) == [a, b]


class TestCutFreeRects:
    """Tests for cut_free_rects."""

    def test_cut_in_the_middle_leaves_four_pieces(self) -> None:
        pieces = cut_free_rects([Rect(0, 0, 10, 10)], Rect(4, 4, 2, 2))
        assert pieces == [
            Rect(0, 0, 10, 4),
            Rect(0, 6, 10, 4),
            Rect(0, 0, 4, 10),
            Rect(6, 0, 4, 10),
        ]

    def test_cut_in_the_corner_leaves_two_pieces(self) -> None:
        pieces = cut_free_rects([Rect(0, 0, 10, 10)], Rect(-1, -1, 5, 5))
        assert pieces == [Rect(0, 4, 10, 6), Rect(4, 0, 6, 10)]

    def test_untouched_rectangles_survive(self) -> None:
        far = Rect(50, 50, 5, 5)
        pieces = cut_free_rects([far], Rect(0, 0, 10, 10))
        assert pieces == [far]

    def test_pieces_never_overlap_the_cut(self) -> None:
        cut = Rect(3, 2, 4, 5)
        for piece in cut_free_rects([Rect(0, 0, 10, 10)], cut):
            assert piece.right <= cut.x or piece.x >= cut.right or (
                piece.bottom <= cut.y or piece.y >= cut.bottom
            )


# =============================================================================
# Generator
# =============================================================================


class TestMasonryGenerator:
    """Tests for MasonryGenerator."""

    def test_packs_around_a_central_obstacle(
        self, generator: MasonryGenerator, make_request, check_layout
    ) -> None:
        """Four 10x10 frames all fit around a 20x20 obstacle on a 100x100 wall."""
        data = make_request(
            wall=(100.0, 100.0),
            frames=[("square", 10.0, 10.0, 4)],
            obstacles=[(40.0, 40.0, 20.0, 20.0)],
            spacing=1.0,
            algorithm="masonry",
        )
        solutions = generator.generate(data)

        assert solutions
        best = solutions[0]
        assert best.score == 4
        check_layout(best, data)

    def test_uncentered_block_kept_when_centering_hits_an_obstacle(
        self, generator: MasonryGenerator, make_request
    ) -> None:
        data = make_request(
            wall=(100.0, 100.0),
            frames=[("square", 10.0, 10.0, 4)],
            obstacles=[(40.0, 40.0, 20.0, 20.0)],
            spacing=1.0,
            algorithm="masonry",
        )
        best = generator.generate(data)[0]
        assert {frame.y for frame in best.frames} == {5.0}

    def test_centers_block_without_obstacles(
        self, generator: MasonryGenerator, make_request, check_layout
    ) -> None:
        data = make_request(
            wall=(100.0, 100.0),
            frames=[("square", 10.0, 10.0, 2)],
            spacing=2.0,
            algorithm="masonry",
        )
        best = generator.generate(data)[0]

        check_layout(best, data)
        left = min(frame.x for frame in best.frames)
        right = max(frame.right for frame in best.frames)
        assert left == pytest.approx(100.0 - right)
        assert best.frames[0].y == pytest.approx(45.0)

    def test_top_most_then_left_most(
        self, generator: MasonryGenerator, make_request
    ) -> None:
        """Frames line up along the top edge before starting a new row."""
        data = make_request(
            wall=(100.0, 100.0),
            frames=[("square", 10.0, 10.0, 3)],
            obstacles=[(0.0, 60.0, 100.0, 10.0)],
            spacing=0.0,
            margin=0.0,
            algorithm="masonry",
        )
        best = generator.generate(data)[0]
        assert len({frame.y for frame in best.frames}) == 1

    def test_mixed_inventory_respects_constraints(
        self, generator: MasonryGenerator, mixed_request, check_layout
    ) -> None:
        solutions = generator.generate(mixed_request)

        assert solutions
        for solution in solutions:
            check_layout(solution, mixed_request)

    def test_force_all_discards_partial_layouts(
        self, generator: MasonryGenerator, make_request
    ) -> None:
        """Two 20x20 frames pass the area check but never fit a 30x30 wall."""
        data = make_request(
            wall=(30.0, 30.0),
            frames=[("square", 20.0, 20.0, 2)],
            margin=0.0,
            force_all=True,
            algorithm="masonry",
        )
        assert generator.generate(data) == []

    def test_force_all_solutions_place_everything(
        self, generator: MasonryGenerator, make_request, check_layout
    ) -> None:
        data = make_request(
            wall=(100.0, 100.0),
            frames=[("small", 10.0, 10.0, 4)],
            force_all=True,
            algorithm="masonry",
        )
        solutions = generator.generate(data)

        assert solutions
        for solution in solutions:
            assert solution.score == 4
            check_layout(solution, data)

    def test_same_seed_same_layouts(self, mixed_request) -> None:
        def positions() -> list[list[tuple[float, float, float, float]]]:
            generator = MasonryGenerator(
                budget=SearchBudget(time_limit=30.0, max_attempts=5),
                rng=random.Random(7),
            )
            return [
                [(f.x, f.y, f.width, f.height) for f in solution.frames]
                for solution in generator.generate(mixed_request)
            ]

        assert positions() == positions()
