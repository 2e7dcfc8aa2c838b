"""
Match State
===========

Per-player bookkeeping for a court session and the rules that move the match
forward: lost balls, cleared levels, turn switching and game over.

Ball indices are 1-based. A player whose ball index exceeds the number of
balls per player is out of the match.

Bonus level (two-player games only):
    When player 1 (index 0) loses their last ball while playing their second
    level, player 2 gets that very brick list appended as an extra level.
    Player 2 can then keep scoring on the bricks player 1 left behind
    (up to 1344 points instead of the regular 896 for two levels).
"""

from enum import Enum
from typing import List

from .entities import Brick, count_destroyed


Level = List[Brick]


class TurnOutcome(Enum):
    """What the court controller has to do after a match event."""
    CONTINUE = 'continue'
    SWITCHED = 'switched'
    GAME_OVER = 'game_over'


class MatchState:
    """
    Scores, levels and balls of both players.

    Attributes:
        players: 1 or 2
        active_player: Index of the player currently serving (0 or 1)
        player_level: Current level index per player
        player_ball_index: Current 1-based ball number per player
        player_scores: Score per player
        player_bricks: player -> level -> bricks
    """

    BONUS_LEVEL_SOURCE = 1

    def __init__(self, players: int, player_bricks: List[List[Level]], balls_per_player: int = 3):
        assert players in (1, 2), "Only one or two players are supported"
        assert len(player_bricks) == 2, "Brick grids are built for both player slots"
        self.players = players
        self.balls_per_player = balls_per_player
        self.player_bricks = player_bricks

        self.active_player = 0
        self.player_level = [0, 0]
        self.player_ball_index = [1, 1]
        self.player_scores = [0, 0]
        self.bonus_level_granted = False

    @property
    def other_player(self) -> int:
        return 1 - self.active_player

    def active_level(self) -> int:
        return self.player_level[self.active_player]

    def active_bricks(self) -> Level:
        return self.player_bricks[self.active_player][self.active_level()]

    def bricks_remaining(self) -> int:
        bricks = self.active_bricks()
        return len(bricks) - count_destroyed(bricks)

    def is_out_of_balls(self, player: int) -> bool:
        return self.player_ball_index[player] > self.balls_per_player

    def all_out_of_balls(self) -> bool:
        return self.is_out_of_balls(0) and self.is_out_of_balls(1)

    def add_score(self, points: int) -> int:
        """Add points to the active player and return the new score."""
        self.player_scores[self.active_player] += points
        return self.player_scores[self.active_player]

    def switch_player(self) -> bool:
        """
        Hand the turn to the other player.

        Returns:
            False (and keeps the current player) if the other player is out of balls
        """
        if self.is_out_of_balls(self.other_player):
            return False
        self.active_player = self.other_player
        return True

    def grant_bonus_level(self) -> bool:
        """Append player 1's second level to player 2's levels if the rule applies."""
        if (self.players == 2
                and not self.bonus_level_granted
                and self.active_player == 0
                and self.is_out_of_balls(0)
                and self.player_level[0] == self.BONUS_LEVEL_SOURCE):
            self.player_bricks[1].append(self.player_bricks[0][self.BONUS_LEVEL_SOURCE])
            self.bonus_level_granted = True
            return True
        return False

    def resolve_ball_lost(self) -> TurnOutcome:
        """Consume the active player's ball and decide who plays next."""
        self.player_ball_index[self.active_player] += 1

        if self.players == 1:
            if self.is_out_of_balls(self.active_player):
                return TurnOutcome.GAME_OVER
            return TurnOutcome.CONTINUE

        self.grant_bonus_level()
        if self.all_out_of_balls():
            return TurnOutcome.GAME_OVER
        return TurnOutcome.SWITCHED if self.switch_player() else TurnOutcome.CONTINUE

    def resolve_level_cleared(self) -> TurnOutcome:
        """Advance the active player's level; clearing the last level ends their match."""
        player = self.active_player
        if self.player_level[player] + 1 >= len(self.player_bricks[player]):
            self.player_ball_index[player] = self.balls_per_player + 1
        else:
            self.player_level[player] += 1

        if self.players == 1:
            if self.is_out_of_balls(player):
                return TurnOutcome.GAME_OVER
            return TurnOutcome.CONTINUE

        if self.all_out_of_balls():
            return TurnOutcome.GAME_OVER
        if self.is_out_of_balls(player):
            return TurnOutcome.SWITCHED if self.switch_player() else TurnOutcome.CONTINUE
        return TurnOutcome.CONTINUE
