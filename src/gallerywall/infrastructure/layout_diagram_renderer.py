"""ASCII wall diagrams for layout solutions.

Renders a solution as a character grid scaled to the terminal width: frames
as labelled boxes, obstacles as hatched blocks, the wall as the outer border.
"""

from __future__ import annotations

from typing import Sequence

from gallerywall.domain.value_objects import (
    LayoutSolution,
    Obstacle,
    PlacedFrame,
    Wall,
)

# Terminal cells are roughly twice as tall as they are wide.
CHAR_ASPECT = 0.5
MIN_GRID_HEIGHT = 10
OBSTACLE_FILL = "#"


class LayoutDiagramRenderer:
    """Renders layout solutions as ASCII wall diagrams."""

    def render_ascii(
        self,
        solution: LayoutSolution,
        wall: Wall,
        obstacles: Sequence[Obstacle] = (),
        width: int = 80,
        title: str | None = None,
    ) -> str:
        """Generate an ASCII diagram of one solution.

        Args:
            solution: The layout to draw.
            wall: Wall the layout was generated for.
            obstacles: Obstacles to hatch in.
            width: Terminal width in characters (default 80).
            title: Header line; defaults to a frame count summary.

        Returns:
            ASCII string representation of the wall.
        """
        usable_width = max(width - 2, 1)
        scale_x = usable_width / wall.width
        grid_height = max(
            int(usable_width * (wall.height / wall.width) * CHAR_ASPECT),
            MIN_GRID_HEIGHT,
        )
        scale_y = grid_height / wall.height

        grid = [[" " for _ in range(usable_width)] for _ in range(grid_height)]
        for obstacle in obstacles:
            self._fill_obstacle(grid, obstacle, scale_x, scale_y)
        for frame in solution.frames:
            self._draw_frame(grid, frame, scale_x, scale_y)

        header = title or (
            f'{solution.score} frames on a {wall.width:g}x{wall.height:g}" wall'
        )
        lines = [header, "+" + "-" * usable_width + "+"]
        lines.extend("|" + "".join(row) + "|" for row in grid)
        lines.append("+" + "-" * usable_width + "+")
        return "\n".join(lines)

    def render_all_ascii(
        self,
        solutions: Sequence[LayoutSolution],
        wall: Wall,
        obstacles: Sequence[Obstacle] = (),
        width: int = 80,
    ) -> str:
        """Render every solution, one diagram after another."""
        if not solutions:
            return "No layouts to display."
        diagrams = [
            self.render_ascii(
                solution,
                wall,
                obstacles,
                width=width,
                title=f"Layout {index} of {len(solutions)} - {solution.score} frames",
            )
            for index, solution in enumerate(solutions, start=1)
        ]
        return "\n\n".join(diagrams)

    @staticmethod
    def _cell_box(
        grid: list[list[str]],
        x: float,
        y: float,
        w: float,
        h: float,
        scale_x: float,
        scale_y: float,
    ) -> tuple[int, int, int, int]:
        grid_height = len(grid)
        grid_width = len(grid[0]) if grid else 0
        x1 = max(0, min(int(x * scale_x), grid_width - 1))
        x2 = max(0, min(int((x + w) * scale_x), grid_width - 1))
        y1 = max(0, min(int(y * scale_y), grid_height - 1))
        y2 = max(0, min(int((y + h) * scale_y), grid_height - 1))
        return x1, y1, x2, y2

    def _fill_obstacle(
        self,
        grid: list[list[str]],
        obstacle: Obstacle,
        scale_x: float,
        scale_y: float,
    ) -> None:
        x1, y1, x2, y2 = self._cell_box(
            grid, obstacle.x, obstacle.y, obstacle.width, obstacle.height,
            scale_x, scale_y,
        )
        for y in range(y1, y2 + 1):
            for x in range(x1, x2 + 1):
                grid[y][x] = OBSTACLE_FILL

    def _draw_frame(
        self,
        grid: list[list[str]],
        frame: PlacedFrame,
        scale_x: float,
        scale_y: float,
    ) -> None:
        x1, y1, x2, y2 = self._cell_box(
            grid, frame.x, frame.y, frame.width, frame.height, scale_x, scale_y
        )

        for x in range(x1, x2 + 1):
            grid[y1][x] = "-"
            grid[y2][x] = "-"
        for y in range(y1, y2 + 1):
            grid[y][x1] = "|"
            grid[y][x2] = "|"
        for cx, cy in ((x1, y1), (x2, y1), (x1, y2), (x2, y2)):
            grid[cy][cx] = "+"

        dims = f"{frame.width:.0f}x{frame.height:.0f}"
        if frame.rotation:
            dims += "R"
        for row, text in ((y1 + 1, frame.library_id), (y1 + 2, dims)):
            if row >= y2:
                break
            text = text[: max(x2 - x1 - 1, 0)]
            for i, char in enumerate(text):
                grid[row][x1 + 1 + i] = char


__all__ = ["LayoutDiagramRenderer"]
