"""
Tests for the court scene.

These tests verify:
    - Court layout
    - Intents (steering, serving, going back)
    - Full match flows: losing balls, scoring, switching players, end game
    - Draw order and the info snapshot
"""

import pytest
import numpy as np
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Config
from brickcourt.game.court import CourtScene
from brickcourt.game.entities import BrickTier
from brickcourt.game.geometry import normalize
from brickcourt.game.scenes import Intent
from brickcourt.game.welcome import WelcomeScene


def make_court(config, players=1, seed=3):
    court = CourtScene(config, players=players, rng=np.random.default_rng(seed))
    court.enter()
    return court


@pytest.fixture
def court(config):
    """Create an entered single player court."""
    return make_court(config)


@pytest.fixture
def duel(config):
    """Create an entered two player court."""
    return make_court(config, players=2)


def drop_ball(court):
    """Send the ball into the out-of-bounds detector."""
    ball = court.ball
    ball.box.center_on(court.width / 2, court.height + court.slot_height + 5)
    ball.motion.direction = normalize((0, 1))
    ball.motion.velocity = ball.initial_velocity
    ball.visible = True
    ball.update(1, court)


def hit_brick(court, brick):
    """Drive the ball into a brick from below."""
    ball = court.ball
    ball.box.center_on(brick.center.x, brick.center.y)
    ball.motion.direction = normalize((0, -1))
    ball.motion.velocity = ball.initial_velocity
    ball.visible = True
    ball.update(1, court)
    ball.reset()


class TestCourtLayout:
    """Test the entities built on enter()."""

    def test_walls(self, court, config):
        w, h = config.COURT_WIDTH, config.COURT_HEIGHT
        slot_height = w / config.SLOT_HEIGHT_DIVISOR
        assert court.top_wall.width == w
        assert court.left_wall.height == h
        assert court.right_wall.box.right == pytest.approx(w)
        assert court.top_wall.height == pytest.approx(slot_height)

    def test_paddle_position(self, court, config):
        assert court.paddle.y == config.COURT_HEIGHT - config.PADDLE_BOTTOM_OFFSET
        assert court.paddle.center.x == pytest.approx(config.COURT_WIDTH / 2)
        assert court.paddle.width == pytest.approx(config.COURT_WIDTH / config.SLOT_WIDTH_DIVISOR)

    def test_brick_grids_for_both_players(self, court, config):
        """Both player slots get every level, even in single player."""
        bricks = court.match.player_bricks
        assert len(bricks) == 2
        assert all(len(levels) == config.LEVELS for levels in bricks)
        assert len(bricks[0][0]) == config.BRICK_ROWS * config.BRICK_COLUMNS

    def test_bricks_fit_between_walls(self, court):
        bricks = court.match.active_bricks()
        assert bricks[0].x == pytest.approx(court.left_wall.box.right)
        assert bricks[-1].box.right == pytest.approx(court.right_wall.x)

    def test_bricks_below_scores(self, court):
        score_bottom = court.score_displays[0].thousands.box.y + court.score_displays[0].thousands.height
        assert court.match.active_bricks()[0].y > score_bottom

    def test_out_of_bounds_below_court(self, court):
        assert court.out_of_bounds.y > court.height
        assert not court.out_of_bounds.visible

    def test_status_digits(self, court):
        assert court.player_index_digit.value == 1
        assert court.ball_index_digit.value == 1

    def test_custom_viewport(self, config):
        court = CourtScene(config, players=1, rng=np.random.default_rng(0), width=400, height=500)
        court.enter()
        assert court.right_wall.box.right == pytest.approx(400)
        assert court.ball.center.y == pytest.approx(250)


class TestCourtIntents:
    """Test input handling."""

    def test_launch_serves(self, court):
        assert court.handle_intent(Intent.LAUNCH, True) is None
        assert court.ball.in_play

    def test_launch_on_release_ignored(self, court):
        court.handle_intent(Intent.LAUNCH, False)
        assert not court.ball.in_play

    def test_steering(self, court):
        court.handle_intent(Intent.MOVE_LEFT, True)
        x = court.paddle.x
        court.update(16)
        assert court.paddle.x < x
        court.handle_intent(Intent.MOVE_LEFT, False)
        x = court.paddle.x
        court.update(16)
        assert court.paddle.x == x

    def test_back_returns_welcome(self, court):
        assert court.handle_intent(Intent.BACK, True) is None
        scene = court.handle_intent(Intent.BACK, False)
        assert isinstance(scene, WelcomeScene)

    def test_player_selection_ignored(self, court):
        assert court.handle_intent(Intent.TWO_PLAYER, False) is None


class TestSinglePlayerFlow:
    """Test a one player match end to end."""

    def test_losing_ball_updates_digit(self, court):
        drop_ball(court)
        assert court.ball_index_digit.value == 2
        assert not court.game_over

    def test_lost_ball_restores_paddle(self, court):
        court.paddle.shrink()
        drop_ball(court)
        assert not court.paddle.shrunk
        assert court.paddle.center.x == pytest.approx(court.width / 2)

    def test_three_losses_start_end_game(self, court):
        """After the last ball the paddle spans the court and the ball bounces forever."""
        for _ in range(3):
            drop_ball(court)
        assert court.game_over
        assert court.paddle.x == pytest.approx(court.left_wall.box.right)
        assert court.paddle.width == pytest.approx(court.right_wall.x - court.left_wall.box.right)
        assert court.ball.in_play

    def test_scoring_updates_display(self, court):
        """A yellow brick scores one point and blinks the score."""
        brick = [b for b in court.match.active_bricks() if b.tier is BrickTier.YELLOW][0]
        hit_brick(court, brick)
        display = court.score_displays[0]
        assert court.match.player_scores[0] == 1
        assert display.value() == 1
        assert display.digits[3].blinking
        assert not display.thousands.blinking

    def test_clear_level_moves_on(self, court):
        court.clear_level()
        assert court.match.player_level[0] == 1
        assert not court.game_over

    def test_clearing_every_level_ends_game(self, court, config):
        for _ in range(config.LEVELS):
            court.clear_level()
        assert court.game_over

    @pytest.mark.slow
    def test_end_game_never_loses_ball(self, court):
        """The stretched paddle catches the ball indefinitely."""
        for _ in range(3):
            drop_ball(court)
        for _ in range(3000):
            court.update(1000 / 60)
        assert court.match.player_ball_index[0] == 4
        assert court.ball.in_play

    @pytest.mark.slow
    def test_idle_player_can_serve_again(self, court):
        """Without paddle input a lost ball can be served again."""
        court.handle_intent(Intent.LAUNCH, True)
        for _ in range(5000):
            court.update(1000 / 60)
            if not court.ball.visible:
                break
        assert court.match.player_ball_index[0] in (1, 2)
        if court.match.player_ball_index[0] == 2:
            assert court.handle_intent(Intent.LAUNCH, True) is None
            assert court.ball.in_play


class TestTwoPlayerFlow:
    """Test a two player match."""

    def test_loss_switches_player(self, duel):
        drop_ball(duel)
        assert duel.match.active_player == 1
        assert duel.player_index_digit.value == 2
        assert duel.player_index_digit.blinking
        assert duel.ball_index_digit.value == 1

    def test_switch_shows_other_grid(self, duel):
        """After a switch the second player's bricks are drawn."""
        brick = duel.match.active_bricks()[0]
        hit_brick(duel, brick)
        drop_ball(duel)
        assert duel.match.active_bricks() is duel.match.player_bricks[1][0]
        assert not duel.match.active_bricks()[0].destroyed

    def test_scores_are_separate(self, duel):
        yellow = [b for b in duel.match.active_bricks() if b.tier is BrickTier.YELLOW][0]
        hit_brick(duel, yellow)
        drop_ball(duel)
        red = duel.match.active_bricks()[0]
        hit_brick(duel, red)
        assert duel.match.player_scores == [1, 7]
        assert duel.score_displays[0].value() == 1
        assert duel.score_displays[1].value() == 7

    def test_six_losses_end_game(self, duel):
        for _ in range(6):
            drop_ball(duel)
        assert duel.game_over

    def test_bonus_level_granted(self, duel):
        """Player 2 inherits player 1's second level after player 1's last ball."""
        duel.clear_level()
        assert duel.match.player_level[0] == 1
        for _ in range(5):
            drop_ball(duel)
        assert duel.match.bonus_level_granted
        assert len(duel.match.player_bricks[1]) == 3
        assert duel.match.active_player == 1


class TestCourtRendering:
    """Test the draw order and snapshot."""

    def test_draw_order(self, court, renderer):
        """Top wall first, side walls last."""
        court.draw(renderer)
        rects = renderer.rects()
        top, left, right = court.top_wall, court.left_wall, court.right_wall
        assert rects[0][1:5] == (top.x, top.y, top.width, top.height)
        assert rects[-2][1:5] == (left.x, left.y, left.width, left.height)
        assert rects[-1][1:5] == (right.x, right.y, right.width, right.height)

    def test_hidden_ball_not_drawn(self, court, renderer):
        """The paddle follows the top wall while the ball waits."""
        court.draw(renderer)
        paddle = court.paddle
        assert renderer.rects()[1] == ('fill_rect', paddle.x, paddle.y, paddle.width, paddle.height, 'cyan')

    def test_served_ball_drawn_before_paddle(self, court, renderer):
        court.handle_intent(Intent.LAUNCH, True)
        court.draw(renderer)
        ball = court.ball
        assert renderer.rects()[1][1:5] == (ball.x, ball.y, ball.width, ball.height)

    def test_active_bricks_drawn(self, court, renderer, config):
        court.draw(renderer)
        red = [r for r in renderer.rects() if r[5] == 'red']
        assert len(red) == config.BRICK_ROWS // 4 * config.BRICK_COLUMNS

    def test_destroyed_bricks_not_drawn(self, court, renderer, config):
        for brick in court.match.active_bricks():
            if brick.tier is BrickTier.RED:
                brick.destroy()
        court.draw(renderer)
        assert not [r for r in renderer.rects() if r[5] == 'red']

    def test_get_info(self, court):
        info = court.get_info()
        assert info['players'] == 1
        assert info['active_player'] == 0
        assert info['scores'] == [0, 0]
        assert info['ball_index'] == [1, 1]
        assert info['bricks_remaining'] == 112
        assert info['ball_in_play'] is False
        assert info['game_over'] is False


class TestCourtConfig:
    """Test config driven variations."""

    def test_more_balls(self):
        cfg = Config()
        cfg.BALLS_PER_PLAYER = 5
        court = make_court(cfg)
        for _ in range(4):
            drop_ball(court)
        assert not court.game_over
        drop_ball(court)
        assert court.game_over
