"""
Court Breakout - Main Entry Point
=================================

Opens a pygame window and runs the scenes on a fixed-timestep loop.

Usage:
    python main.py                  Show the welcome screen
    python main.py --players 2      Start a two player match directly
    python main.py --seed 42        Reproducible serve directions

Controls:
    [left-arrow] / [right-arrow]    Move the paddle
    [spacebar]                      Launch a ball
    [1] / [2]                       Start a 1 or 2 player game (welcome screen)
    [escape]                        Back to the welcome screen
"""

import argparse
import sys
from typing import Dict, Optional

import numpy as np
import pygame

from config import Config
from brickcourt.game import Intent, FixedStepAccumulator, PygameRenderer, SceneManager, get_scene, run_frame
from brickcourt.utils.logger import LogLevel, get_logger, setup_logging


# Raw key codes -> intents
KEY_BINDINGS: Dict[int, Intent] = {
    pygame.K_LEFT: Intent.MOVE_LEFT,
    pygame.K_RIGHT: Intent.MOVE_RIGHT,
    pygame.K_SPACE: Intent.LAUNCH,
    pygame.K_1: Intent.ONE_PLAYER,
    pygame.K_2: Intent.TWO_PLAYER,
    pygame.K_KP1: Intent.ONE_PLAYER,
    pygame.K_KP2: Intent.TWO_PLAYER,
    pygame.K_ESCAPE: Intent.BACK,
}


class DisplayInitError(RuntimeError):
    """Raised when no drawing surface can be created."""


def translate_event(event: pygame.event.Event) -> Optional[tuple]:
    """
    Map a pygame key event to an (intent, pressed) pair.

    Returns:
        None for events that carry no intent
    """
    if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
        return None
    intent = KEY_BINDINGS.get(event.key)
    if intent is None:
        return None
    return intent, event.type == pygame.KEYDOWN


def create_display(config: Config) -> pygame.Surface:
    """Open the game window sized to the court."""
    try:
        pygame.init()
        screen = pygame.display.set_mode((config.COURT_WIDTH, config.COURT_HEIGHT))
    except pygame.error as e:
        raise DisplayInitError(f"Unable to create the game window: {e}") from e
    pygame.display.set_caption("Breakout")
    return screen


def run(config: Config, players: Optional[int] = None) -> None:
    """
    Run the game until the window is closed.

    Args:
        config: Configuration object
        players: Start a court for this many players, skipping the welcome screen
    """
    logger = get_logger(__name__)
    screen = create_display(config)
    renderer = PygameRenderer(screen, config.COLOR_BACKGROUND, config.COLOR_FOREGROUND)
    rng = np.random.default_rng(config.SEED)

    if players:
        start_scene = get_scene('court')(config=config, players=players, rng=rng)
    else:
        start_scene = get_scene('welcome')(config=config, rng=rng)
    manager = SceneManager(start_scene)
    accumulator = FixedStepAccumulator(config.STEP_MS, config.MAX_FRAME_MS)
    clock = pygame.time.Clock()

    logger.info(f"Starting in {start_scene.name} scene ({config.COURT_WIDTH}x{config.COURT_HEIGHT})")

    running = True
    while running:
        elapsed_ms = clock.tick(config.RENDER_FPS_CAP)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                continue
            translated = translate_event(event)
            if translated is not None:
                manager.handle_intent(*translated)

        if run_frame(manager, renderer, accumulator, elapsed_ms):
            pygame.display.flip()
        else:
            logger.debug(f"Dropped frame ({elapsed_ms} ms)")

    if manager.scene is not None:
        manager.scene.exit()
    logger.info("Window closed")


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Breakout - one or two players, two levels each",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
EXAMPLES
========
    python main.py                       Welcome screen with player selection
    python main.py --players 1           Jump straight into a single player match
    python main.py --height 600          Smaller window (width is 80% of the height)
    python main.py --log-level DEBUG     Log every brick hit
        """
    )
    parser.add_argument(
        '--players', type=int, choices=[1, 2], default=None,
        help='Skip the welcome screen and start a match for 1 or 2 players'
    )
    parser.add_argument(
        '--height', type=int, default=None,
        help='Court height in pixels (default: %(default)s = config value)'
    )
    parser.add_argument(
        '--seed', type=int, default=None,
        help='Random seed for serve directions'
    )
    parser.add_argument(
        '--log-level', type=str, default=None,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging verbosity'
    )
    parser.add_argument(
        '--log-dir', type=str, default=None,
        help='Directory for log files'
    )
    parser.add_argument(
        '--no-log-file', action='store_true',
        help='Only log to the console'
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Apply CLI overrides to a fresh Config and validate it."""
    config = Config()
    if args.height:
        config.COURT_HEIGHT = args.height
    if args.seed is not None:
        config.SEED = args.seed
    if args.log_level:
        config.LOG_LEVEL = args.log_level
    if args.log_dir:
        config.LOG_DIR = args.log_dir
    if args.no_log_file:
        config.LOG_TO_FILE = False
    config.__post_init__()
    return config


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    try:
        config = build_config(args)
    except AssertionError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    setup_logging(
        log_dir=config.LOG_DIR,
        level=LogLevel[config.LOG_LEVEL],
        file_output=config.LOG_TO_FILE,
    )
    logger = get_logger(__name__)

    try:
        run(config, args.players)
    except DisplayInitError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
