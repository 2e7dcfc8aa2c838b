"""
Configuration file for Court Breakout
=====================================

All court geometry, physics tuning, timing and logging options are centralized here.
Sizes are expressed relative to the court, so changing COURT_HEIGHT rescales everything.

Usage:
    from config import Config
    cfg = Config()
    print(cfg.COURT_WIDTH)
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass
class Config:
    """
    Central configuration for the entire project.

    Sections:
    1. Court - Viewport and slot geometry
    2. Bricks - Grid and level layout
    3. Physics - Ball and paddle velocities
    4. Digits - Score display timing
    5. Loop - Fixed timestep settings
    6. Colors
    7. System - Logging and randomness
    """

    # =========================================================================
    # COURT SETTINGS
    # =========================================================================

    # Court height in pixels; the width follows from COURT_ASPECT
    COURT_HEIGHT: int = 800
    COURT_ASPECT: float = 0.8

    # A slot is the unit cell of the court layout:
    #   slot width  = court width / SLOT_WIDTH_DIVISOR  (brick and paddle width)
    #   slot height = court width / SLOT_HEIGHT_DIVISOR (brick, ball and wall thickness)
    SLOT_WIDTH_DIVISOR: int = 16
    SLOT_HEIGHT_DIVISOR: int = 45

    # Distance of the paddle top edge from the bottom of the court
    PADDLE_BOTTOM_OFFSET: int = 100

    @property
    def COURT_WIDTH(self) -> int:
        """Court width derived from the height and aspect ratio."""
        return int(self.COURT_HEIGHT * self.COURT_ASPECT)

    # =========================================================================
    # BRICK SETTINGS
    # =========================================================================

    # Rows are split into four equally tall tier bands (red, orange, green, yellow)
    BRICK_ROWS: int = 8
    BRICK_COLUMNS: int = 14

    # Every player gets an independent brick grid per level
    LEVELS: int = 2

    # Balls (lives) available to each player
    BALLS_PER_PLAYER: int = 3

    # =========================================================================
    # PHYSICS
    # =========================================================================

    # Velocities are pixels per millisecond, relative to the court height:
    #   velocity = COURT_HEIGHT / divisor
    BALL_VELOCITY_DIVISOR: float = 2370.0
    BALL_VELOCITY_STEP_DIVISOR: float = 6330.0
    PADDLE_VELOCITY_DIVISOR: float = 1350.0

    # Cumulative hit counts at which the ball permanently speeds up
    SPEEDUP_HIT_COUNTS: Tuple[int, ...] = (4, 12)

    # =========================================================================
    # DIGITS
    # =========================================================================

    # Blink cycles armed on a score change
    BLINK_COUNT: int = 5
    # Ticks between visibility toggles while blinking
    BLINK_INTERVAL: int = 10

    # =========================================================================
    # LOOP
    # =========================================================================

    # Simulation ticks per second (one tick = 1000 / FPS milliseconds)
    FPS: int = 60

    # Frames longer than this (e.g. after the window was dragged) are dropped
    MAX_FRAME_MS: float = 100.0

    # Upper bound for rendered frames per second in the pygame loop
    RENDER_FPS_CAP: int = 120

    @property
    def STEP_MS(self) -> float:
        """Duration of one simulation tick in milliseconds."""
        return 1000.0 / self.FPS

    # =========================================================================
    # COLORS
    # =========================================================================

    COLOR_BACKGROUND: Tuple[int, int, int] = (0, 0, 0)
    COLOR_FOREGROUND: str = 'white'
    COLOR_PADDLE: str = 'cyan'

    # =========================================================================
    # SYSTEM SETTINGS
    # =========================================================================

    # Logging: 'DEBUG', 'INFO', 'WARNING', 'ERROR'
    LOG_LEVEL: str = 'INFO'
    LOG_DIR: str = 'logs'
    LOG_TO_FILE: bool = True

    # Random seed for reproducible serves (None for random)
    SEED: Optional[int] = None

    def __post_init__(self):
        """Validation of settings that would otherwise break the court layout."""
        assert self.COURT_HEIGHT > 0, "Court height must be positive"
        assert 0 < self.COURT_ASPECT <= 2, "Court aspect must be in (0, 2]"
        assert self.BRICK_ROWS > 0 and self.BRICK_ROWS % 4 == 0, \
            "Brick rows must be a positive multiple of 4 (one band per tier)"
        assert self.BRICK_COLUMNS > 1, "Need at least two brick columns"
        assert self.LEVELS > 0, "Need at least one level"
        assert self.BALLS_PER_PLAYER > 0, "Need at least one ball per player"
        assert self.FPS > 0, "FPS must be positive"
        assert self.MAX_FRAME_MS > self.STEP_MS, "Max frame time must exceed one tick"
        assert self.BLINK_COUNT >= 0, "Blink count cannot be negative"
        assert self.BLINK_INTERVAL > 0, "Blink interval must be positive"
        assert self.LOG_LEVEL in ('DEBUG', 'INFO', 'WARNING', 'ERROR'), \
            f"Unknown log level {self.LOG_LEVEL}"
        # Bricks, walls and spacing must fit into the court width
        slot_width = self.COURT_WIDTH / self.SLOT_WIDTH_DIVISOR
        slot_height = self.COURT_WIDTH / self.SLOT_HEIGHT_DIVISOR
        assert 2 * slot_height + self.BRICK_COLUMNS * slot_width <= self.COURT_WIDTH, \
            "Brick columns do not fit between the side walls"


if __name__ == "__main__":
    # Print configuration summary
    cfg = Config()
    print("=" * 60)
    print("Court Breakout - Configuration Summary")
    print("=" * 60)
    print(f"\nCourt: {cfg.COURT_WIDTH}x{cfg.COURT_HEIGHT}")
    print(f"Bricks: {cfg.BRICK_ROWS}x{cfg.BRICK_COLUMNS} x {cfg.LEVELS} levels")
    print(f"Balls per player: {cfg.BALLS_PER_PLAYER}")
    print(f"Tick: {cfg.STEP_MS:.3f} ms")
    print("=" * 60)
