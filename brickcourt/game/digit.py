"""
Seven-Segment Digits
====================

Scoreboard cells drawn as filled rectangles, plus the blink effect used to
highlight a changed value.

Blinking is counted in ticks, not milliseconds: the court always advances in
fixed steps, so a tick count is a stable duration.
"""

import math
from typing import Dict, Iterator, List, Tuple

from .entities import Entity
from .render import Renderer


Segment = Tuple[float, float, float, float]

# Segments lit for each value
SEGMENTS: Dict[int, Tuple[str, ...]] = {
    0: ('top', 'bottom', 'left_top', 'left_bottom', 'right_top', 'right_bottom'),
    1: ('right_top', 'right_bottom'),
    2: ('top', 'middle', 'bottom', 'left_bottom', 'right_top'),
    3: ('top', 'middle', 'bottom', 'right_top', 'right_bottom'),
    4: ('middle', 'left_top', 'right_top', 'right_bottom'),
    5: ('top', 'middle', 'bottom', 'left_top', 'right_bottom'),
    6: ('top', 'middle', 'bottom', 'left_top', 'left_bottom', 'right_bottom'),
    7: ('top', 'right_top', 'right_bottom'),
    8: ('top', 'middle', 'bottom', 'left_top', 'left_bottom', 'right_top', 'right_bottom'),
    9: ('top', 'middle', 'bottom', 'left_top', 'right_top', 'right_bottom'),
}


def decompose_score(score: int, places: int = 4) -> List[int]:
    """
    Split a score into decimal digits, most significant first.

    Args:
        score: Non-negative score
        places: Number of digits to produce

    Returns:
        List of `places` digit values; only the lowest `places` digits are kept

    Example:
        >>> decompose_score(307)
        [0, 3, 0, 7]
    """
    if score < 0:
        raise ValueError(f"Score cannot be negative: {score}")
    digits = [0] * places
    for i in range(places - 1, -1, -1):
        score, digits[i] = divmod(score, 10)
    return digits


class Digit(Entity):
    """A single 0-9 cell that can blink."""

    def __init__(self, x: float, y: float, width: float, height: float,
                 blink_count: int = 5, blink_interval: int = 10):
        super().__init__(x, y, width, height)
        self.value = 0
        self.blink_count = blink_count
        self.blink_interval = blink_interval
        self.blinks_left = 0
        self.blink_timer = 0

    @property
    def blinking(self) -> bool:
        return self.blinks_left > 0

    def set_blink(self, active: bool) -> None:
        if active:
            self.blinks_left = self.blink_count
            self.blink_timer = 0
        else:
            self.blinks_left = 0
            self.blink_timer = 0
            self.visible = True

    def update(self, dt: float) -> None:
        if self.blinks_left <= 0:
            return
        self.blink_timer -= 1
        if self.blink_timer > 0:
            return
        if self.visible:
            self.visible = False
            self.blink_timer = self.blink_interval
        else:
            # One blink completes each time the digit reappears
            self.visible = True
            self.blinks_left -= 1
            if self.blinks_left > 0:
                self.blink_timer = self.blink_interval

    def segments(self) -> Dict[str, Segment]:
        """Rectangles (x, y, w, h) of all seven segments for this cell."""
        x, y, w, h = self.box.x, self.box.y, self.box.width, self.box.height
        thickness = h / 5
        half = math.ceil(h / 2) - 1
        return {
            'top': (x, y, w, thickness),
            'middle': (x - 1, y + half - thickness / 2, w + 2, thickness),
            'bottom': (x, y + h - thickness, w, thickness),
            'left_top': (x - 1, y, thickness, half + 1),
            'left_bottom': (x - 1, y + half, thickness, half + 1),
            'right_top': (x + w - thickness, y, thickness + 1, half + 1),
            'right_bottom': (x + w - thickness, y + half, thickness + 1, half + 1),
        }

    def lit_segments(self) -> List[Segment]:
        layout = self.segments()
        return [layout[name] for name in SEGMENTS.get(self.value, ())]

    def draw(self, renderer: Renderer) -> None:
        if not self.visible:
            return
        for segment in self.lit_segments():
            renderer.fill_rect(*segment, self.color)


class ScoreDisplay:
    """Four digits showing one player's score; the thousands cell starts hidden."""

    def __init__(self, digits: List[Digit]):
        assert len(digits) == 4, "A score display has exactly four digits"
        self.digits = digits
        self.digits[0].visible = False

    @property
    def thousands(self) -> Digit:
        return self.digits[0]

    def __iter__(self) -> Iterator[Digit]:
        return iter(self.digits)

    def refresh(self, score: int) -> None:
        """Show the score; the thousands cell is revealed once needed."""
        if score >= 1000:
            self.thousands.visible = True
        for digit, value in zip(self.digits, decompose_score(score, len(self.digits))):
            digit.value = value

    def blink(self, score: int) -> None:
        """Blink the visible part of the score."""
        if score > 999:
            self.thousands.set_blink(True)
        for digit in self.digits[1:]:
            digit.set_blink(True)

    def value(self) -> int:
        """Recombine the displayed digits into a number."""
        total = 0
        for digit in self.digits:
            total = total * 10 + digit.value
        return total

    def update(self, dt: float) -> None:
        for digit in self.digits:
            digit.update(dt)

    def draw(self, renderer: Renderer) -> None:
        for digit in self.digits:
            digit.draw(renderer)
