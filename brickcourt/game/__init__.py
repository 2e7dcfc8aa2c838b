"""
Game Module
===========

Contains the Breakout court simulation and the scenes around it.

Classes:
    CourtScene    - The match: walls, ball, paddle, bricks and score digits
    WelcomeScene  - Title screen with the player selection
    SceneManager  - Switches between scenes
    MatchState    - Per-player levels, balls and scores

Scene Registry:
    Use get_scene(name) to get a scene class by name
    Use list_scenes() to get all available scenes
"""

from typing import Dict, List, Optional, Type

from .ball import Ball, BallState
from .court import CourtScene
from .digit import Digit, ScoreDisplay, decompose_score
from .entities import Box, Brick, BrickTier, Entity, Motion, OutOfBoundsDetector, Wall, collides, move
from .geometry import DegenerateVectorError, normalize
from .loop import FixedStepAccumulator, run_frame
from .match import MatchState, TurnOutcome
from .paddle import Paddle
from .render import PygameRenderer, Renderer
from .scenes import BaseScene, Intent, SceneManager
from .welcome import WelcomeScene


# =============================================================================
# SCENE REGISTRY
# =============================================================================
# Maps scene names to their classes. main.py uses it to pick the start scene.

SCENE_REGISTRY: Dict[str, Type[BaseScene]] = {
    WelcomeScene.name: WelcomeScene,
    CourtScene.name: CourtScene,
}


def get_scene(name: str) -> Optional[Type[BaseScene]]:
    """
    Get a scene class by name.

    Args:
        name: Scene identifier ('welcome' or 'court')

    Returns:
        The scene class, or None if not found
    """
    return SCENE_REGISTRY.get(name.lower())


def list_scenes() -> List[str]:
    """Get a list of all available scene names."""
    return list(SCENE_REGISTRY.keys())


__all__ = [
    # Entities
    'Ball',
    'BallState',
    'Box',
    'Brick',
    'BrickTier',
    'Digit',
    'Entity',
    'Motion',
    'OutOfBoundsDetector',
    'Paddle',
    'ScoreDisplay',
    'Wall',
    'collides',
    'move',
    'normalize',
    'decompose_score',
    'DegenerateVectorError',
    # Match and scenes
    'MatchState',
    'TurnOutcome',
    'BaseScene',
    'CourtScene',
    'WelcomeScene',
    'SceneManager',
    'Intent',
    # Rendering and loop
    'Renderer',
    'PygameRenderer',
    'FixedStepAccumulator',
    'run_frame',
    # Registry functions
    'SCENE_REGISTRY',
    'get_scene',
    'list_scenes',
]
