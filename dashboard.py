import matplotlib.pyplot as plt
import matplotlib.patches as patches
import numpy as np

from robot_journeys.entities.document import ValidatedDocument
from robot_journeys.simulation.observers import TrajectoryRecorder
from robot_journeys.simulation.outcomes import Success
from robot_journeys.utils.consts import (
    HEADING_DEGREES,
    OUTCOME_COLORS,
    PLOT_DPI,
    PLOT_FIGSIZE,
)

# Above this many cells per side, per-cell ticks and grid lines are skipped
MAX_TICKED_CELLS = 40


class TrajectoryPlot:
    """
    Static picture of one run: the grid, its obstacles and every journey's
    path, with the last state marked in the colour of the journey's outcome.
    """

    def __init__(self, document: ValidatedDocument, recorder: TrajectoryRecorder, title: str = ""):
        self.document = document
        self.recorder = recorder
        self.fig, self.ax = plt.subplots(figsize=PLOT_FIGSIZE)
        self.title = title
        self.redraw()

    # =========================================================================
    # DRAWING
    # =========================================================================

    def _draw_grid(self):
        grid = self.document.grid
        self.ax.set_xlim(0, grid.width)
        self.ax.set_ylim(0, grid.height)
        self.ax.set_aspect('equal')
        if grid.width <= MAX_TICKED_CELLS and grid.height <= MAX_TICKED_CELLS:
            self.ax.set_xticks(range(grid.width + 1))
            self.ax.set_yticks(range(grid.height + 1))
            self.ax.grid(True, linestyle=':', alpha=0.6)

    def _draw_obstacles(self):
        for obs in self.document.obstacles:
            self.ax.add_patch(patches.Rectangle(
                (obs.x, obs.y), 1, 1,
                color='salmon', ec='darkred', linewidth=1, zorder=2
            ))

    def _draw_path_lines(self, path, cmap):
        """Draw the path lines between consecutive cell centres."""
        for i in range(len(path) - 1):
            p1, p2 = path[i], path[i + 1]
            if (p1.x, p1.y) == (p2.x, p2.y):
                continue  # turn on the spot
            color = cmap(i / max(len(path) - 1, 1))
            self.ax.plot(
                [p1.x + 0.5, p2.x + 0.5], [p1.y + 0.5, p2.y + 0.5],
                color=color, alpha=0.8, linewidth=2, zorder=3
            )

    def _draw_heading(self, state, color):
        """Arrow out of the cell centre showing which way the robot faces."""
        cx, cy = state.x + 0.5, state.y + 0.5
        angle = np.radians(HEADING_DEGREES[state.direction.letter])
        adx, ady = 0.35 * np.cos(angle), 0.35 * np.sin(angle)
        self.ax.arrow(cx, cy, adx, ady, color=color, width=0.05, head_width=0.2, zorder=5)

    def _draw_journey(self, index, path, outcome):
        self._draw_path_lines(path, plt.cm.winter)

        start = path[0]
        self.ax.plot(start.x + 0.5, start.y + 0.5, 'o', color='gray', markersize=6, zorder=4)
        self.ax.text(
            start.x + 0.5, start.y + 0.8, f"#{index + 1}",
            color='purple', fontsize=8, fontweight='bold', ha='center', zorder=6
        )

        color = OUTCOME_COLORS[outcome.kind]
        last = path[-1]
        self._draw_heading(last, color)

        if not isinstance(outcome, Success):
            # The cell the robot tried to enter (crash, off-grid) or ended in
            fail = outcome.state
            self.ax.plot(fail.x + 0.5, fail.y + 0.5, 'x', color=color, markersize=12, mew=3, zorder=6)

    def redraw(self):
        self.ax.clear()
        self._draw_grid()
        self._draw_obstacles()
        for i, (path, outcome) in enumerate(zip(self.recorder.paths, self.recorder.outcomes)):
            self._draw_journey(i, path, outcome)

        counts = {}
        for outcome in self.recorder.outcomes:
            counts[outcome.kind] = counts.get(outcome.kind, 0) + 1
        summary = " | ".join(f"{kind}: {n}" for kind, n in counts.items()) or "No journeys"
        heading = f"{self.title}\n" if self.title else ""
        self.ax.set_title(
            f"{heading}Grid {self.document.grid} | Obstacles: {len(self.document.obstacles)}\n{summary}",
            fontsize=9
        )

    def save(self, output_path: str):
        self.fig.savefig(output_path, dpi=PLOT_DPI)

    def close(self):
        plt.close(self.fig)


def save_run_plot(document: ValidatedDocument, recorder: TrajectoryRecorder, output_path: str, title: str = ""):
    plot = TrajectoryPlot(document, recorder, title)
    try:
        plot.save(output_path)
    finally:
        plot.close()
