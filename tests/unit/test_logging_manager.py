# tests/unit/test_logging_manager.py
"""
Unit tests for LoggingManager spam reduction and setup_logging.
"""

import logging

import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from autofollow.logging_manager import LoggingManager, setup_logging
from autofollow.parameters import Parameters


@pytest.fixture
def test_logger():
    logger = logging.getLogger('autofollow.tests.logging_manager')
    logger.setLevel(logging.DEBUG)
    return logger


class TestSpamReduction:

    @pytest.mark.unit
    def test_repeats_within_cooldown_suppressed(self, test_logger, caplog):
        manager = LoggingManager(spam_cooldown=60.0)

        with caplog.at_level(logging.DEBUG):
            assert manager.log_operation(test_logger, 'mount', "Mounting...") is True
            assert manager.log_operation(test_logger, 'mount', "Mounting...") is False
            assert manager.log_operation(test_logger, 'mount', "Mounting...") is False

        assert caplog.text.count("Mounting...") == 1
        assert manager.get_operation_count('mount') == 3

    @pytest.mark.unit
    def test_operations_filtered_independently(self, test_logger, caplog):
        manager = LoggingManager(spam_cooldown=60.0)

        with caplog.at_level(logging.DEBUG):
            assert manager.log_operation(test_logger, 'mount', "Mounting...") is True
            assert manager.log_operation(test_logger, 'sprint', "Sprinting...") is True

    @pytest.mark.unit
    def test_suppressed_count_reported(self, test_logger, caplog):
        manager = LoggingManager(spam_cooldown=60.0)

        with caplog.at_level(logging.DEBUG):
            manager.log_operation(test_logger, 'sprint', "Sprinting...")
            manager.log_operation(test_logger, 'sprint', "Sprinting...")
            manager.log_operation(test_logger, 'sprint', "Sprinting...")
            manager._spam_cooldown = 0.0
            manager.log_operation(test_logger, 'sprint', "Sprinting...")

        assert "(2 similar suppressed)" in caplog.text

    @pytest.mark.unit
    def test_cooldown_falls_back_to_parameters(self):
        Parameters.LOG_SPAM_COOLDOWN = 12.5

        assert LoggingManager().spam_cooldown == 12.5
        assert LoggingManager(spam_cooldown=1.0).spam_cooldown == 1.0

    @pytest.mark.unit
    def test_reset_clears_filter(self, test_logger):
        manager = LoggingManager(spam_cooldown=60.0)
        manager.log_operation(test_logger, 'mount', "Mounting...")

        manager.reset()

        assert manager.get_operation_count('mount') == 0
        assert manager.log_operation(test_logger, 'mount', "Mounting...") is True


class TestMessageFormatting:

    @pytest.mark.unit
    def test_caller_tag_and_args(self, test_logger, caplog, quiet_log_manager):
        with caplog.at_level(logging.DEBUG):
            quiet_log_manager.log_operation(test_logger, 'dismount',
                                            "Dismounting, %.2f <= %.2f...", 2.0, 3.5,
                                            caller="Movement.party_leader")

        assert "[Movement.party_leader] Dismounting, 2.00 <= 3.50..." in caplog.text

    @pytest.mark.unit
    def test_level_selection(self, test_logger, caplog, quiet_log_manager):
        with caplog.at_level(logging.DEBUG):
            quiet_log_manager.log_operation(test_logger, 'warn_op', "careful", level='warning')

        assert caplog.records[-1].levelno == logging.WARNING

    @pytest.mark.unit
    def test_bad_format_never_raises(self, test_logger, quiet_log_manager):
        assert quiet_log_manager.log_operation(test_logger, 'bad', "%d items", "not-a-number") is False


class TestSetupLogging:

    @pytest.mark.unit
    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, 'basicConfig', lambda **kwargs: calls.append(kwargs))

        setup_logging('chatty')

        assert calls[0]['level'] == logging.INFO

    @pytest.mark.unit
    def test_level_from_parameters(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, 'basicConfig', lambda **kwargs: calls.append(kwargs))
        Parameters.LOG_LEVEL = 'debug'

        setup_logging()

        assert calls[0]['level'] == logging.DEBUG
