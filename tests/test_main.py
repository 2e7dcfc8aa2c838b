"""
Tests for the entry point and the logging setup.

These tests verify:
    - Key to intent translation
    - Command line parsing and config overrides
    - Exit codes for invalid configs and missing displays
    - Logger naming and match event formatting
"""

import io
import logging
import os
import sys

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')

import pygame
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import main
from brickcourt.game.scenes import Intent
from brickcourt.utils import logger as logger_module
from brickcourt.utils.logger import LogLevel, get_log_path, get_logger, log_match_event, setup_logging


class TerminalStream(io.StringIO):
    """In-memory stdout that reports itself as a terminal."""

    def isatty(self):
        return True


class TestTranslateEvent:
    """Test raw key events to intents."""

    @pytest.mark.parametrize("key, intent", [
        (pygame.K_LEFT, Intent.MOVE_LEFT),
        (pygame.K_RIGHT, Intent.MOVE_RIGHT),
        (pygame.K_SPACE, Intent.LAUNCH),
        (pygame.K_1, Intent.ONE_PLAYER),
        (pygame.K_KP2, Intent.TWO_PLAYER),
        (pygame.K_ESCAPE, Intent.BACK),
    ])
    def test_key_down(self, key, intent):
        event = pygame.event.Event(pygame.KEYDOWN, key=key)
        assert main.translate_event(event) == (intent, True)

    def test_key_up(self):
        event = pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE)
        assert main.translate_event(event) == (Intent.LAUNCH, False)

    def test_unbound_key(self):
        event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q)
        assert main.translate_event(event) is None

    def test_non_key_event(self):
        event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0))
        assert main.translate_event(event) is None


class TestArguments:
    """Test CLI parsing and config overrides."""

    def test_defaults(self):
        args = main.parse_args([])
        assert args.players is None
        assert not args.no_log_file
        config = main.build_config(args)
        assert config.COURT_HEIGHT == 800
        assert config.LOG_TO_FILE

    def test_overrides(self):
        args = main.parse_args(['--players', '2', '--height', '600', '--seed', '9',
                                '--log-level', 'DEBUG', '--no-log-file'])
        config = main.build_config(args)
        assert args.players == 2
        assert config.COURT_HEIGHT == 600
        assert config.COURT_WIDTH == 480
        assert config.SEED == 9
        assert config.LOG_LEVEL == 'DEBUG'
        assert not config.LOG_TO_FILE

    def test_invalid_player_count(self):
        with pytest.raises(SystemExit):
            main.parse_args(['--players', '3'])

    def test_invalid_height_exit_code(self):
        assert main.main(['--height', '-5', '--no-log-file']) == 2


class TestMain:
    """Test the entry point error handling."""

    def test_display_failure_exit_code(self, monkeypatch):
        def broken_display(config):
            raise main.DisplayInitError("no video device")

        monkeypatch.setattr(main, 'create_display', broken_display)
        assert main.main(['--no-log-file']) == 1

    def test_display_error_is_runtime_error(self):
        assert issubclass(main.DisplayInitError, RuntimeError)


class TestLogger:
    """Test the logging helpers."""

    def test_names_are_namespaced(self):
        assert get_logger('match').name == 'brickcourt.match'
        assert get_logger('brickcourt.game.ball').name == 'brickcourt.game.ball'

    def test_match_event_format(self, caplog):
        with caplog.at_level(logging.INFO, logger='brickcourt'):
            log_match_event('ball_lost', player=1, outcome='switched')
        assert "BALL_LOST | player=1 | outcome=switched" in caplog.text

    def test_match_event_without_context(self, caplog):
        with caplog.at_level(logging.INFO, logger='brickcourt'):
            log_match_event('game_over')
        assert "GAME_OVER" in caplog.text

    def test_file_output(self, tmp_path, monkeypatch):
        monkeypatch.setattr(logger_module, '_initialized', False)
        setup_logging(log_dir=str(tmp_path), level=LogLevel.DEBUG,
                      console_output=False, log_filename='court.log')
        try:
            assert get_log_path() == tmp_path / 'court.log'
            get_logger('test').info("written to file")
            assert "written to file" in (tmp_path / 'court.log').read_text(encoding='utf-8')
        finally:
            # Back to console-only logging
            logger_module._initialized = False
            setup_logging(file_output=False)
        assert get_log_path() is None

    def test_file_has_no_color_codes(self, tmp_path, monkeypatch):
        """Colored console output leaves the file lines plain."""
        console = TerminalStream()
        monkeypatch.setattr(sys, 'stdout', console)
        monkeypatch.setattr(logger_module, '_initialized', False)
        setup_logging(log_dir=str(tmp_path), log_filename='court.log')
        try:
            log_match_event('game_over', scores=[1, 2])
            text = (tmp_path / 'court.log').read_text(encoding='utf-8')
            assert "GAME_OVER | scores=[1, 2]" in text
            assert '\033[' not in text
            assert '| INFO     |' in text
            assert '\033[32m' in console.getvalue()
        finally:
            logger_module._initialized = False
            setup_logging(file_output=False)

    def test_file_keeps_debug_at_info_level(self, tmp_path, monkeypatch):
        """The file receives DEBUG records while the console stays at INFO."""
        console = TerminalStream()
        monkeypatch.setattr(sys, 'stdout', console)
        monkeypatch.setattr(logger_module, '_initialized', False)
        setup_logging(log_dir=str(tmp_path), level=LogLevel.INFO, log_filename='court.log')
        try:
            get_logger('brickcourt.game.ball').debug("Brick hit: tier=RED")
            assert "Brick hit: tier=RED" in (tmp_path / 'court.log').read_text(encoding='utf-8')
            assert "Brick hit" not in console.getvalue()
        finally:
            logger_module._initialized = False
            setup_logging(file_output=False)
