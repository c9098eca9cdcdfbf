"""Unit tests for ASCII layout diagrams."""

from gallerywall.domain.value_objects import (
    LayoutSolution,
    Obstacle,
    PlacedFrame,
    Wall,
)
from gallerywall.infrastructure import LayoutDiagramRenderer


def _solution() -> LayoutSolution:
    frames = (
        PlacedFrame("1", "print", 10.0, 10.0, 40.0, 40.0),
        PlacedFrame("2", "poster", 100.0, 20.0, 60.0, 40.0, rotation=90),
    )
    return LayoutSolution(id="s", frames=frames, score=2)


class TestLayoutDiagramRenderer:
    """Tests for LayoutDiagramRenderer."""

    def test_border_matches_requested_width(self) -> None:
        diagram = LayoutDiagramRenderer().render_ascii(_solution(), Wall(200.0, 100.0))
        lines = diagram.splitlines()

        assert lines[0] == '2 frames on a 200x100" wall'
        assert lines[1] == "+" + "-" * 78 + "+"
        assert lines[-1] == lines[1]
        assert all(len(line) == 80 for line in lines[1:])

    def test_frames_are_labelled(self) -> None:
        diagram = LayoutDiagramRenderer().render_ascii(_solution(), Wall(200.0, 100.0))

        assert "print" in diagram
        assert "poster" in diagram
        assert "40x40" in diagram
        assert "60x40R" in diagram

    def test_obstacles_are_hatched(self) -> None:
        diagram = LayoutDiagramRenderer().render_ascii(
            LayoutSolution.empty(),
            Wall(200.0, 100.0),
            obstacles=[Obstacle(150.0, 70.0, 30.0, 20.0)],
        )
        assert "#" in diagram

    def test_custom_title(self) -> None:
        diagram = LayoutDiagramRenderer().render_ascii(
            _solution(), Wall(200.0, 100.0), title="Living room"
        )
        assert diagram.splitlines()[0] == "Living room"

    def test_render_all(self) -> None:
        renderer = LayoutDiagramRenderer()
        diagrams = renderer.render_all_ascii([_solution(), _solution()], Wall(200.0, 100.0))

        assert "Layout 1 of 2 - 2 frames" in diagrams
        assert "Layout 2 of 2 - 2 frames" in diagrams

    def test_render_all_without_solutions(self) -> None:
        assert (
            LayoutDiagramRenderer().render_all_ascii([], Wall(200.0, 100.0))
            == "No layouts to display."
        )
