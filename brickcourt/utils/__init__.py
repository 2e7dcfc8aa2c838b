"""Utility modules for the Breakout court."""

from .logger import get_logger, setup_logging, log_match_event, LogLevel

__all__ = ['get_logger', 'setup_logging', 'log_match_event', 'LogLevel']
