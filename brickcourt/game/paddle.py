"""
Paddle
======

Player-controlled paddle at the bottom of the court.

The paddle moves only horizontally, is clamped between the side walls and
halves its width the first time the ball reaches the top wall during a life.
"""

from .entities import Entity, Motion, Wall, collides, move


class Paddle(Entity):
    """Horizontal paddle driven by left/right intents."""

    default_color = 'cyan'

    def __init__(self, x: float, y: float, width: float, height: float,
                 velocity: float, court_width: float):
        super().__init__(x, y, width, height)
        self.motion = Motion((0.0, 0.0), velocity)
        self.original_width = float(width)
        self.court_width = float(court_width)

    @property
    def shrunk(self) -> bool:
        return self.box.width != self.original_width

    def shrink(self) -> None:
        """Halve the width around the current center (only once per life)."""
        if self.box.width == self.original_width:
            self.box.set_width(self.original_width / 2)

    def reset(self) -> None:
        """Restore the original width and recenter horizontally."""
        self.box.set_width(self.original_width)
        self.box.x = self.court_width / 2 - self.box.width / 2

    def stretch(self, left_wall: Wall, right_wall: Wall) -> None:
        """Cover the whole gap between the side walls (end-game mode)."""
        self.box.set_width(right_wall.x - left_wall.box.right, keep_center=False)
        self.box.x = left_wall.box.right

    def steer(self, direction: int) -> None:
        """Start moving left (-1) or right (+1)."""
        self.motion.direction.update(float(direction), 0.0)

    def release(self, direction: int) -> None:
        """Stop moving, but only if still moving in the released direction."""
        if self.motion.direction.x == float(direction):
            self.motion.direction.update(0.0, 0.0)

    def update(self, dt: float, left_wall: Wall, right_wall: Wall) -> None:
        move(self, dt)
        if self.motion.direction.x < 0.0 and collides(self, left_wall):
            self.box.x = left_wall.box.right
        if self.motion.direction.x > 0.0 and collides(self, right_wall):
            self.box.x = right_wall.x - self.box.width
