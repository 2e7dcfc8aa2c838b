"""
Fixed Timestep Loop
===================

The simulation always advances in ticks of exactly 1000 / FPS milliseconds,
whatever the display refresh rate is. Real elapsed time is accumulated and
drained in whole ticks; the remainder carries over to the next frame.

Frames that took too long (window dragged, process suspended) are dropped
entirely instead of being replayed as a burst of ticks.
"""

from .render import Renderer
from .scenes import SceneManager


class FixedStepAccumulator:
    """Turns real elapsed time into a number of fixed simulation ticks."""

    def __init__(self, step_ms: float = 1000.0 / 60.0, max_frame_ms: float = 100.0):
        assert step_ms > 0, "Step must be positive"
        self.step_ms = step_ms
        self.max_frame_ms = max_frame_ms
        self.accumulated = 0.0

    def accepts(self, elapsed_ms: float) -> bool:
        """Whether a frame of this length is simulated and drawn at all."""
        return 0.0 <= elapsed_ms < self.max_frame_ms

    def advance(self, elapsed_ms: float) -> int:
        """
        Add a frame's elapsed time and drain it.

        Args:
            elapsed_ms: Real time since the previous frame

        Returns:
            Number of ticks to simulate (0 for dropped frames)
        """
        if not self.accepts(elapsed_ms):
            return 0
        self.accumulated += elapsed_ms
        steps = 0
        while self.accumulated >= self.step_ms:
            self.accumulated -= self.step_ms
            steps += 1
        return steps


def run_frame(manager: SceneManager, renderer: Renderer, accumulator: FixedStepAccumulator,
              elapsed_ms: float) -> bool:
    """
    Simulate and draw one display frame.

    Returns:
        True if the frame was drawn, False if it was dropped
    """
    if not accumulator.accepts(elapsed_ms):
        return False
    for _ in range(accumulator.advance(elapsed_ms)):
        manager.update(accumulator.step_ms)
    renderer.clear()
    manager.draw(renderer)
    return True
