"""
Court Geometry
==============

Vector helpers shared by the court entities.

Directions are stored as pygame vectors. A direction is only ever produced
through normalize(), which refuses zero-length input: a NaN direction would
corrupt every later collision test.
"""

import math
from typing import Sequence, Tuple

import numpy as np
import pygame


# Candidate serve directions: straight down, down-right, down-left
LAUNCH_DIRECTIONS: Tuple[Tuple[float, float], ...] = (
    (0.0, 1.0),
    (0.5, 0.5),
    (-0.5, 0.5),
)


class DegenerateVectorError(ValueError):
    """Raised when a zero-length vector is normalized."""


def normalize(vector: Sequence[float]) -> pygame.Vector2:
    """
    Get a unit-length copy of a 2D vector.

    Args:
        vector: Any (x, y) pair

    Returns:
        New pygame.Vector2 of length 1

    Raises:
        DegenerateVectorError: If the vector has zero length
    """
    x, y = float(vector[0]), float(vector[1])
    length = math.hypot(x, y)
    if length == 0.0:
        raise DegenerateVectorError(f"Cannot normalize zero-length vector ({x}, {y})")
    return pygame.Vector2(x / length, y / length)


def random_launch_direction(rng: np.random.Generator) -> pygame.Vector2:
    """Pick one of the serve directions uniformly using a [0, 1) source."""
    index = min(int(rng.random() * len(LAUNCH_DIRECTIONS)), len(LAUNCH_DIRECTIONS) - 1)
    return normalize(LAUNCH_DIRECTIONS[index])
