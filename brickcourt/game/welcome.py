"""
Welcome Scene
=============

The first screen: game title, controls and the player count selection.
Releasing [1] or [2] starts a court for one or two players.
"""

from typing import List, Optional, Tuple

import numpy as np

from config import Config
from .court import CourtScene
from .render import Renderer
from .scenes import BaseScene, Intent


# (text, vertical offset from the court center, font size)
WELCOME_LINES: List[Tuple[str, int, int]] = [
    ("BREAKOUT", -200, 64),
    ("Controls:", -100, 44),
    ("[spacebar] launch a ball", -50, 44),
    ("[left-arrow] move left", 0, 44),
    ("[right-arrow] move right", 50, 44),
    ("Press [1] to start a 1 player game", 150, 44),
    ("Press [2] to start a 2 player game", 200, 44),
]

PLAYER_SELECTION = {
    Intent.ONE_PLAYER: 1,
    Intent.TWO_PLAYER: 2,
}


class WelcomeScene(BaseScene):
    """Title screen with the player count selection."""

    name = 'welcome'

    def __init__(self, config: Optional[Config] = None,
                 rng: Optional[np.random.Generator] = None,
                 width: Optional[float] = None, height: Optional[float] = None):
        self.config = config or Config()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.SEED)
        self.width = float(width if width is not None else self.config.COURT_WIDTH)
        self.height = float(height if height is not None else self.config.COURT_HEIGHT)

    def enter(self) -> None:
        pass

    def exit(self) -> None:
        pass

    def update(self, dt: float) -> None:
        # Nothing moves on the title screen
        pass

    def draw(self, renderer: Renderer) -> None:
        cx, cy = self.width / 2, self.height / 2
        for text, offset, size in WELCOME_LINES:
            renderer.draw_text(text, (cx, cy + offset), size)

    def handle_intent(self, intent: Intent, pressed: bool) -> Optional[BaseScene]:
        players = PLAYER_SELECTION.get(intent)
        if players is None or pressed:
            return None
        return CourtScene(self.config, players, self.rng, self.width, self.height)
