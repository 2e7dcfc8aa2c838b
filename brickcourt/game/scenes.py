"""
Scene Interface
===============

Abstract base class for the game scenes and the manager that switches
between them.

The game has two scenes:
1. Welcome - title, controls and the 1/2 player selection
2. Court   - the Breakout match itself

To add a new scene:
1. Create a new file in brickcourt/game/
2. Inherit from BaseScene
3. Implement all abstract methods
4. Return it from another scene's handle_intent() to switch to it
"""

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Optional

from .render import Renderer
from ..utils.logger import get_logger


logger = get_logger(__name__)


class Intent(Enum):
    """Discrete player inputs, translated upstream from raw key codes."""
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    LAUNCH = auto()
    ONE_PLAYER = auto()
    TWO_PLAYER = auto()
    BACK = auto()


class BaseScene(ABC):
    """
    Abstract base class for scenes.

    Methods:
        enter() -> None
            Build everything the scene needs
        exit() -> None
            Release whatever the scene holds on to
        update(dt: float) -> None
            Advance the scene by one fixed tick (milliseconds)
        draw(renderer) -> None
            Issue draw calls to the render sink
        handle_intent(intent, pressed) -> Optional[BaseScene]
            React to input, optionally returning the next scene
    """

    name: str = 'scene'

    @abstractmethod
    def enter(self) -> None:
        """Called when the scene becomes active."""
        pass

    @abstractmethod
    def exit(self) -> None:
        """Called when the scene is replaced."""
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """
        Advance the scene by one tick.

        Args:
            dt: Tick length in milliseconds
        """
        pass

    @abstractmethod
    def draw(self, renderer: Renderer) -> None:
        """
        Draw the scene.

        Args:
            renderer: Render sink implementing fill_rect/clear/draw_text
        """
        pass

    @abstractmethod
    def handle_intent(self, intent: Intent, pressed: bool) -> Optional['BaseScene']:
        """
        React to a player intent.

        Args:
            intent: The input intent
            pressed: True on key press, False on key release

        Returns:
            The scene to switch to, or None to stay
        """
        pass


class SceneManager:
    """Holds the active scene and runs the exit/enter handshake on changes."""

    def __init__(self, scene: Optional[BaseScene] = None):
        self.scene: Optional[BaseScene] = None
        if scene is not None:
            self.set_scene(scene)

    def set_scene(self, new_scene: Optional[BaseScene]) -> None:
        """Exit the current scene (if any) and enter the new one."""
        if new_scene is None:
            return
        if self.scene is not None:
            self.scene.exit()
            logger.info(f"Scene change: {self.scene.name} -> {new_scene.name}")
        self.scene = new_scene
        self.scene.enter()

    def handle_intent(self, intent: Intent, pressed: bool) -> None:
        if self.scene is None:
            return
        self.set_scene(self.scene.handle_intent(intent, pressed))

    def update(self, dt: float) -> None:
        if self.scene is not None:
            self.scene.update(dt)

    def draw(self, renderer: Renderer) -> None:
        if self.scene is not None:
            self.scene.draw(renderer)
