"""
Ball
====

The ball owns the collision resolution and scoring state machine of the court.

States:
    NORMAL    - may hit bricks
    BRICK_HIT - just bounced off a brick; must touch a wall or the paddle
                before another brick can be hit (prevents double scoring on
                neighbouring bricks)

Collision priority per tick:
    top wall -> left wall -> right wall -> paddle -> out-of-bounds -> bricks

The ball never decides about turns or levels itself. It reports to the court
controller through three calls:
    court.lose_ball()            ball fell into the out-of-bounds detector
    court.award_points(points)   a brick was destroyed
    court.clear_level()          the last brick of the level was destroyed
"""

from enum import Enum
from typing import TYPE_CHECKING, Set, Tuple

import numpy as np

from .entities import BrickTier, Entity, Motion, collides, count_destroyed, move
from .geometry import normalize, random_launch_direction
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from .court import CourtScene


logger = get_logger(__name__)


class BallState(Enum):
    NORMAL = 0
    BRICK_HIT = 1


class Ball(Entity):
    """The bouncing ball."""

    def __init__(self, x: float, y: float, size: float, court_center: Tuple[float, float],
                 initial_velocity: float, velocity_step: float,
                 rng: np.random.Generator, speedup_hit_counts: Tuple[int, ...] = (4, 12)):
        super().__init__(x, y, size, size)
        self.rng = rng
        self.court_center = court_center
        self.initial_velocity = initial_velocity
        self.velocity_step = velocity_step
        self.speedup_hit_counts = tuple(speedup_hit_counts)

        self.motion = Motion(random_launch_direction(rng), 0.0)
        self.visible = False
        self.state = BallState.NORMAL
        self.end_game_mode = False
        self.hit_counter = 0
        self._bonus_tiers: Set[BrickTier] = set()

    @property
    def direction(self):
        return self.motion.direction

    @property
    def velocity(self) -> float:
        return self.motion.velocity

    @property
    def red_bricks_hit(self) -> bool:
        return BrickTier.RED in self._bonus_tiers

    @property
    def orange_bricks_hit(self) -> bool:
        return BrickTier.ORANGE in self._bonus_tiers

    @property
    def in_play(self) -> bool:
        return self.visible and self.motion.velocity > 0.0

    def increment_velocity(self) -> None:
        self.motion.velocity += self.velocity_step

    def increment_hit_count(self) -> None:
        self.hit_counter += 1
        if self.hit_counter in self.speedup_hit_counts:
            self.increment_velocity()

    def reset(self) -> None:
        """Recenter, hide and stop the ball with a fresh serve direction."""
        self.box.center_on(*self.court_center)
        self.motion.velocity = 0.0
        self.motion.direction = random_launch_direction(self.rng)
        self.visible = False
        self.state = BallState.NORMAL
        self.hit_counter = 0
        self._bonus_tiers.clear()

    def launch(self) -> bool:
        """Serve the ball if it is waiting at the center. Returns True if served."""
        if self.motion.velocity == 0.0 and not self.visible:
            self.motion.velocity = self.initial_velocity
            self.visible = True
            return True
        return False

    def start_end_game(self) -> None:
        """Bounce around forever without breaking bricks."""
        self.motion.velocity = self.initial_velocity
        self.visible = True
        self.end_game_mode = True

    def update(self, dt: float, court: 'CourtScene') -> None:
        if not self.visible:
            return

        direction = self.motion.direction
        if direction.y < 0.0 and collides(self, court.top_wall):
            direction.y = -direction.y
            self.state = BallState.NORMAL
            self.increment_hit_count()
            court.paddle.shrink()
        if direction.x < 0.0 and collides(self, court.left_wall):
            direction.x = -direction.x
            self.state = BallState.NORMAL
            self.increment_hit_count()
        if direction.x > 0.0 and collides(self, court.right_wall):
            direction.x = -direction.x
            self.state = BallState.NORMAL
            self.increment_hit_count()
        if direction.y > 0.0 and collides(self, court.paddle):
            paddle = court.paddle
            steer = (self.box.center.x - paddle.box.center.x) / (paddle.box.width / 2)
            self.motion.direction = normalize((steer, -direction.y))
            self.state = BallState.NORMAL
            self.increment_hit_count()

        if self.motion.direction.y > 0.0 and collides(self, court.out_of_bounds):
            court.lose_ball()
        elif self.state is not BallState.BRICK_HIT:
            if self._hit_bricks(court):
                return

        move(self, dt)

    def _hit_bricks(self, court: 'CourtScene') -> bool:
        """
        Resolve a collision with the first brick hit in storage order.

        Returns:
            True if the level was cleared and the tick must end here
        """
        bricks = court.match.active_bricks()
        for brick in bricks:
            if not collides(self, brick):
                continue

            if not self.end_game_mode:
                brick.destroy()
                court.award_points(brick.tier.points)
                if brick.tier.speed_bonus and brick.tier not in self._bonus_tiers:
                    self.increment_velocity()
                    self._bonus_tiers.add(brick.tier)
                self.increment_hit_count()
                logger.debug(f"Brick hit: tier={brick.tier.name} hits={self.hit_counter} "
                             f"velocity={self.motion.velocity:.4f}")

                if count_destroyed(bricks) == len(bricks):
                    court.clear_level()
                    return True

            self.state = BallState.BRICK_HIT
            self.motion.direction.y = -self.motion.direction.y
            break
        return False
