"""
Court Scene
===========

The Breakout match: owns every court entity and the MatchState, wires the
update order and reacts to the events the ball reports.

Layout (all sizes relative to the court width W and height H):
    slot width  = W / 16     brick and paddle width
    slot height = W / 45     brick, ball and wall thickness
    digit height = 5 slot heights

    +--------------------------------------+  top wall
    | [P]            [B]                   |  player index, ball index
    | [s][s][s][s]   [s][s][s][s]          |  score digits (player 1, player 2)
    | RRRRRRRRRRRRRR                       |
    | OOOOOOOOOOOOOO   8 rows x 14 columns |
    | GGGGGGGGGGGGGG                       |
    | YYYYYYYYYYYYYY                       |
    |                 o                    |  ball (served from the center)
    |               =====                  |  paddle, 100px above the bottom
    +--------------------------------------+
      out-of-bounds detector below the visible court

Update order per tick: paddle -> ball -> digits.
Draw order: top wall -> ball -> paddle -> status digits -> active bricks
            -> score digits -> side walls.
"""

from typing import Any, Dict, List, Optional

import numpy as np

from config import Config
from .ball import Ball
from .digit import Digit, ScoreDisplay
from .entities import OutOfBoundsDetector, Wall, build_brick_grid
from .match import MatchState, TurnOutcome
from .paddle import Paddle
from .render import Renderer
from .scenes import BaseScene, Intent
from ..utils.logger import get_logger, log_match_event


logger = get_logger(__name__)


class CourtScene(BaseScene):
    """
    Court (match) controller.

    Attributes created on enter():
        top_wall, left_wall, right_wall: Court boundaries
        ball: The ball
        paddle: The paddle
        out_of_bounds: Sentinel below the court
        player_index_digit: Shows the active player (1 or 2)
        ball_index_digit: Shows the active player's ball number
        score_displays: One four-digit display per player
        match: Per-player levels, balls and scores
    """

    name = 'court'

    def __init__(self, config: Optional[Config] = None, players: int = 1,
                 rng: Optional[np.random.Generator] = None,
                 width: Optional[float] = None, height: Optional[float] = None):
        """
        Initialize the court scene (entities are built on enter()).

        Args:
            config: Configuration object (uses default if None)
            players: Number of players (1 or 2)
            rng: Uniform random source for serve directions
            width: Viewport width in pixels (defaults to config.COURT_WIDTH)
            height: Viewport height in pixels (defaults to config.COURT_HEIGHT)
        """
        assert players in (1, 2), "Only one or two players are supported"
        self.config = config or Config()
        self.players = players
        self.rng = rng if rng is not None else np.random.default_rng(self.config.SEED)
        self.width = float(width if width is not None else self.config.COURT_WIDTH)
        self.height = float(height if height is not None else self.config.COURT_HEIGHT)

        self.match: Optional[MatchState] = None
        self.score_displays: List[ScoreDisplay] = []
        self.entered = False

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def enter(self) -> None:
        cfg = self.config
        width, height = self.width, self.height

        slot_width = width / cfg.SLOT_WIDTH_DIVISOR
        slot_height = width / cfg.SLOT_HEIGHT_DIVISOR
        digit_height = slot_height * 5
        # Free space after two walls and one row of bricks, shared between the gaps
        spacing = (width - 2 * slot_height - cfg.BRICK_COLUMNS * slot_width) / (cfg.BRICK_COLUMNS - 1)

        self.slot_width = slot_width
        self.slot_height = slot_height

        self.left_wall = Wall(0, 0, slot_height, height, color=cfg.COLOR_FOREGROUND)
        self.right_wall = Wall(width - slot_height, 0, slot_height, height, color=cfg.COLOR_FOREGROUND)
        self.top_wall = Wall(0, 0, width, slot_height, color=cfg.COLOR_FOREGROUND)

        self.ball = Ball(
            width / 2 - slot_height / 2, height / 2 - slot_height / 2, slot_height,
            court_center=(width / 2, height / 2),
            initial_velocity=height / cfg.BALL_VELOCITY_DIVISOR,
            velocity_step=height / cfg.BALL_VELOCITY_STEP_DIVISOR,
            rng=self.rng,
            speedup_hit_counts=cfg.SPEEDUP_HIT_COUNTS,
        )
        self.ball.color = cfg.COLOR_FOREGROUND

        self.paddle = Paddle(
            width / 2 - slot_width / 2, height - cfg.PADDLE_BOTTOM_OFFSET,
            slot_width, slot_height,
            velocity=height / cfg.PADDLE_VELOCITY_DIVISOR,
            court_width=width,
        )
        self.paddle.color = cfg.COLOR_PADDLE

        def make_digit(x: float, y: float) -> Digit:
            digit = Digit(x, y, slot_width, digit_height, cfg.BLINK_COUNT, cfg.BLINK_INTERVAL)
            digit.color = cfg.COLOR_FOREGROUND
            return digit

        y = slot_height
        self.player_index_digit = make_digit(slot_height, y)
        self.ball_index_digit = make_digit(width / 2, y)

        y += digit_height + spacing
        self.score_displays = []
        for start_x in (slot_height, width / 2):
            digits = [make_digit(start_x + i * (slot_width + spacing), y) for i in range(4)]
            self.score_displays.append(ScoreDisplay(digits))

        y += digit_height + spacing
        player_bricks = [
            [
                build_brick_grid(slot_height, y, cfg.BRICK_ROWS, cfg.BRICK_COLUMNS,
                                 slot_width, slot_height, spacing)
                for _ in range(cfg.LEVELS)
            ]
            for _ in range(2)
        ]
        self.match = MatchState(self.players, player_bricks, cfg.BALLS_PER_PLAYER)

        self.out_of_bounds = OutOfBoundsDetector(0, height + slot_height, width, 1000)

        self.player_index_digit.value = self.match.active_player + 1
        self.ball_index_digit.value = self.match.player_ball_index[self.match.active_player]
        self.entered = True
        logger.info(f"Court ready: {self.players} player(s), {width:.0f}x{height:.0f}, "
                    f"{cfg.BRICK_ROWS * cfg.BRICK_COLUMNS} bricks x {cfg.LEVELS} levels")

    def exit(self) -> None:
        if self.entered:
            self.paddle.motion.direction.update(0.0, 0.0)
        self.entered = False

    # =========================================================================
    # INPUT
    # =========================================================================

    def handle_intent(self, intent: Intent, pressed: bool) -> Optional[BaseScene]:
        if intent is Intent.MOVE_LEFT:
            if pressed:
                self.paddle.steer(-1)
            else:
                self.paddle.release(-1)
        elif intent is Intent.MOVE_RIGHT:
            if pressed:
                self.paddle.steer(1)
            else:
                self.paddle.release(1)
        elif intent is Intent.LAUNCH and pressed:
            if self.ball.launch():
                logger.debug(f"Ball served: player={self.match.active_player + 1} "
                             f"ball={self.match.player_ball_index[self.match.active_player]}")
        elif intent is Intent.BACK and not pressed:
            from .welcome import WelcomeScene
            return WelcomeScene(self.config, self.rng, self.width, self.height)
        return None

    # =========================================================================
    # SIMULATION
    # =========================================================================

    def update(self, dt: float) -> None:
        self.paddle.update(dt, self.left_wall, self.right_wall)
        self.ball.update(dt, self)
        for display in self.score_displays:
            display.update(dt)
        self.player_index_digit.update(dt)
        self.ball_index_digit.update(dt)

    def reset_ball_and_paddle(self) -> None:
        self.ball.reset()
        self.paddle.reset()

    def lose_ball(self) -> None:
        """The ball left the court: consume a ball and apply the turn rules."""
        match = self.match
        player = match.active_player
        had_bonus_level = match.bonus_level_granted
        outcome = match.resolve_ball_lost()
        self.ball_index_digit.value = match.player_ball_index[match.active_player]
        self.reset_ball_and_paddle()
        log_match_event('ball_lost', player=player + 1,
                        balls_used=match.player_ball_index[player] - 1,
                        outcome=outcome.value)
        if match.bonus_level_granted and not had_bonus_level:
            log_match_event('bonus_level', player=2, levels=len(match.player_bricks[1]))
        self._apply(outcome)

    def award_points(self, points: int) -> None:
        """Credit a destroyed brick to the active player and flash the score."""
        match = self.match
        score = match.add_score(points)
        display = self.score_displays[match.active_player]
        display.blink(score)
        display.refresh(score)

    def clear_level(self) -> None:
        """The last brick of the level is gone: advance or finish the player."""
        match = self.match
        player = match.active_player
        level = match.active_level()
        self.reset_ball_and_paddle()
        outcome = match.resolve_level_cleared()
        log_match_event('level_cleared', player=player + 1, level=level + 1,
                        score=match.player_scores[player], outcome=outcome.value)
        self._apply(outcome)

    def _apply(self, outcome: TurnOutcome) -> None:
        if outcome is TurnOutcome.SWITCHED:
            self._show_player_switch()
        elif outcome is TurnOutcome.GAME_OVER:
            self.end_game()

    def _show_player_switch(self) -> None:
        match = self.match
        self.player_index_digit.value = match.active_player + 1
        self.player_index_digit.set_blink(True)
        self.ball_index_digit.value = match.player_ball_index[match.active_player]
        log_match_event('switch', player=match.active_player + 1,
                        ball=match.player_ball_index[match.active_player])

    def end_game(self) -> None:
        """Stretch the paddle over the whole court and let the ball bounce forever."""
        self.paddle.stretch(self.left_wall, self.right_wall)
        self.ball.start_end_game()
        log_match_event('game_over', scores=self.match.player_scores[:self.players])

    @property
    def game_over(self) -> bool:
        return self.ball.end_game_mode

    # =========================================================================
    # RENDERING
    # =========================================================================

    def draw(self, renderer: Renderer) -> None:
        self.top_wall.draw(renderer)
        self.ball.draw(renderer)
        self.paddle.draw(renderer)
        self.player_index_digit.draw(renderer)
        self.ball_index_digit.draw(renderer)
        for brick in self.match.active_bricks():
            brick.draw(renderer)
        for display in self.score_displays:
            display.draw(renderer)
        self.left_wall.draw(renderer)
        self.right_wall.draw(renderer)

    def get_info(self) -> Dict[str, Any]:
        """Get a snapshot of the match."""
        match = self.match
        return {
            'players': self.players,
            'active_player': match.active_player,
            'scores': list(match.player_scores),
            'ball_index': list(match.player_ball_index),
            'levels': list(match.player_level),
            'bricks_remaining': match.bricks_remaining(),
            'ball_in_play': self.ball.in_play,
            'game_over': self.game_over,
        }
