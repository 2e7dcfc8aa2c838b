"""
Court Entities
==============

Building blocks of the court: rectangles, the collision test, movement and
the static pieces (walls, bricks and the out-of-bounds detector).

Every entity is a rectangle with a few flags. Capabilities are composed
rather than inherited:
    - visible/color   decide whether and how the renderer fills the box
    - enabled         decides whether the box takes part in collisions
    - motion          (Ball, Paddle only) direction + velocity for move()
"""

from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

import pygame

from .render import Renderer


Color = Union[str, Tuple[int, int, int]]


class Box:
    """Top-left anchored axis-aligned rectangle.

    center and extent are computed on every read, so moving or resizing the
    box can never leave them out of sync.
    """

    def __init__(self, x: float, y: float, width: float, height: float):
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)

    @property
    def extent(self) -> pygame.Vector2:
        """Half width and half height."""
        return pygame.Vector2(self.width / 2, self.height / 2)

    @property
    def center(self) -> pygame.Vector2:
        return pygame.Vector2(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def right(self) -> float:
        return self.x + self.width

    def move_to(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def center_on(self, cx: float, cy: float) -> None:
        """Place the box so that its center is at (cx, cy)."""
        self.move_to(cx - self.width / 2, cy - self.height / 2)

    def set_width(self, width: float, keep_center: bool = True) -> None:
        """Resize horizontally, optionally around the current center."""
        cx = self.x + self.width / 2
        self.width = float(width)
        if keep_center:
            self.x = cx - self.width / 2

    def __repr__(self) -> str:
        return f"Box(x={self.x:.1f}, y={self.y:.1f}, w={self.width:.1f}, h={self.height:.1f})"


class Motion:
    """Direction vector plus scalar speed (pixels per millisecond)."""

    def __init__(self, direction: Sequence[float] = (0.0, 0.0), velocity: float = 0.0):
        self.direction = pygame.Vector2(direction[0], direction[1])
        self.velocity = velocity


class Entity:
    """Anything placed on the court."""

    default_color: Color = 'white'

    def __init__(self, x: float, y: float, width: float, height: float,
                 color: Optional[Color] = None):
        self.box = Box(x, y, width, height)
        self.visible = True
        self.enabled = True
        self.color = color if color is not None else self.default_color

    # Shorthands used all over the collision code
    @property
    def x(self) -> float:
        return self.box.x

    @property
    def y(self) -> float:
        return self.box.y

    @property
    def width(self) -> float:
        return self.box.width

    @property
    def height(self) -> float:
        return self.box.height

    @property
    def center(self) -> pygame.Vector2:
        return self.box.center

    @property
    def extent(self) -> pygame.Vector2:
        return self.box.extent

    def collides(self, other: 'Entity') -> bool:
        return collides(self, other)

    def draw(self, renderer: Renderer) -> None:
        """Fill the box if the entity is visible."""
        if self.visible:
            renderer.fill_rect(self.box.x, self.box.y, self.box.width, self.box.height, self.color)


def collides(a: Entity, b: Entity) -> bool:
    """
    Axis-aligned bounding box overlap test.

    Touching edges do not count as a collision, and a disabled entity never
    collides with anything.
    """
    if not (a.enabled and b.enabled):
        return False
    ac, bc = a.box.center, b.box.center
    ae, be = a.box.extent, b.box.extent
    return abs(ac.x - bc.x) < ae.x + be.x and abs(ac.y - bc.y) < ae.y + be.y


def move(entity, dt: float) -> None:
    """Advance a movable entity along its direction for dt milliseconds."""
    motion = entity.motion
    if motion.direction.x != 0.0:
        entity.box.x += dt * motion.direction.x * motion.velocity
    if motion.direction.y != 0.0:
        entity.box.y += dt * motion.direction.y * motion.velocity


class Wall(Entity):
    """Static court boundary."""


class OutOfBoundsDetector(Entity):
    """Invisible sentinel below the court; touching it loses the ball."""

    def __init__(self, x: float, y: float, width: float, height: float):
        super().__init__(x, y, width, height)
        self.visible = False


class BrickTier(Enum):
    """Brick classes: (points, fill color, grants one-time speed bonus)."""

    YELLOW = (1, 'yellow', False)
    GREEN = (3, 'green', False)
    ORANGE = (5, 'orange', True)
    RED = (7, 'red', True)

    def __init__(self, points: int, color: str, speed_bonus: bool):
        self.points = points
        self.color = color
        self.speed_bonus = speed_bonus

    @classmethod
    def for_row(cls, row: int, rows: int) -> 'BrickTier':
        """Tier of a grid row; the top quarter is red, the bottom quarter yellow."""
        bands = (cls.RED, cls.ORANGE, cls.GREEN, cls.YELLOW)
        return bands[row * len(bands) // rows]


class Brick(Entity):
    """A destroyable brick; destroyed bricks keep their slot in the level."""

    def __init__(self, x: float, y: float, width: float, height: float, tier: BrickTier):
        super().__init__(x, y, width, height, color=tier.color)
        self.tier = tier

    @property
    def destroyed(self) -> bool:
        return not self.visible

    def destroy(self) -> None:
        self.visible = False
        self.enabled = False


def build_brick_grid(left: float, top: float, rows: int, columns: int,
                     brick_width: float, brick_height: float, spacing: float) -> List[Brick]:
    """Create one level of bricks, row by row from the top."""
    bricks: List[Brick] = []
    y = top
    for row in range(rows):
        tier = BrickTier.for_row(row, rows)
        x = left
        for _ in range(columns):
            bricks.append(Brick(x, y, brick_width, brick_height, tier))
            x += brick_width + spacing
        y += brick_height + spacing
    return bricks


def count_destroyed(bricks: Sequence[Brick]) -> int:
    """Number of destroyed bricks in a level."""
    return sum(1 for brick in bricks if brick.destroyed)
