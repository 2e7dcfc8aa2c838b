"""
Pytest configuration for the test suite.

This file is automatically loaded by pytest and applies configuration
to all tests in the tests/ directory.
"""

import os
import sys

# Headless pygame: no window or audio device is needed for any test
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import pytest

from config import Config


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


class RecordingRenderer:
    """Render sink that records every call instead of drawing."""

    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(('clear',))

    def fill_rect(self, x, y, width, height, color):
        self.calls.append(('fill_rect', x, y, width, height, color))

    def draw_text(self, text, center, size):
        self.calls.append(('draw_text', text, center, size))

    def rects(self):
        return [call for call in self.calls if call[0] == 'fill_rect']

    def texts(self):
        return [call[1] for call in self.calls if call[0] == 'draw_text']


@pytest.fixture
def config():
    """Create a test configuration."""
    return Config()


@pytest.fixture
def rng():
    """Seeded random source for reproducible serves."""
    return np.random.default_rng(42)


@pytest.fixture
def renderer():
    """Create a recording renderer."""
    return RecordingRenderer()
