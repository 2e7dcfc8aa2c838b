"""
Court Breakout - Source Package
===============================

This package contains all the components of the Breakout court.

Modules:
    game/   - Court simulation, scenes, rendering and the frame loop
    utils/  - Logging helpers
"""

__version__ = "1.0.0"
