# tests/conftest.py
"""
Root pytest configuration and fixtures for AutoFollow testing.

Provides shared fixtures for the mock game client, settings snapshots,
and test isolation. All fixtures here are available to all test modules.
"""

import pytest
import sys
import os

# Add src and project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from autofollow.circuit_breaker import MovementCircuitBreaker
from autofollow.follow_settings import FollowSettings
from autofollow.follow_types import FollowMode
from autofollow.logging_manager import LoggingManager
from autofollow.movement_controller import MovementController
from autofollow.parameters import Parameters
from autofollow.world_state import AgentState, Location

from tests.fixtures.mock_game_client import (
    CommandLog,
    MockWorldState,
    MockActionExecutor,
    MockNavigator,
    MockAvoidanceMonitor,
)


# =============================================================================
# Mock Game Client Fixtures
# =============================================================================

@pytest.fixture
def command_log():
    """Shared record of every command issued by the mocks."""
    return CommandLog()


@pytest.fixture
def world():
    """
    MockWorldState with the agent standing at the origin, in a party, not leading.

    Usage:
        def test_something(world):
            world.agent = AgentState(in_combat=True)
    """
    return MockWorldState(agent=AgentState(location=Location(0.0, 0.0, 0.0),
                                           is_in_party=True,
                                           is_party_leader=False))


@pytest.fixture
def actions(command_log):
    return MockActionExecutor(command_log)


@pytest.fixture
def navigator(command_log):
    return MockNavigator(command_log)


@pytest.fixture
def avoidance():
    return MockAvoidanceMonitor(active=False)


@pytest.fixture
def quiet_log_manager():
    """LoggingManager without spam suppression, so every log call emits."""
    return LoggingManager(spam_cooldown=0.0)


@pytest.fixture
def controller(world, actions, navigator, avoidance, quiet_log_manager):
    """MovementController wired to the mock game client."""
    return MovementController(world, actions, navigator, avoidance, quiet_log_manager)


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """
    Enabled settings following the party leader, 3.0 follow distance
    (follow range 3.5), graph navigation on.
    """
    return FollowSettings(
        is_paused=False,
        enable_following=True,
        follow_mode=FollowMode.PARTY_LEADER,
        follow_distance=3.0,
        follow_distance_tolerance=0.5,
        use_nav_graph=True,
        take_off_height=5.0,
        sprint_aura_id=50,
        mount_action_id=9,
    )


@pytest.fixture
def temp_config_file(tmp_path):
    """
    Create a temporary config file for testing.

    Usage:
        def test_config_loading(temp_config_file):
            config_path = temp_config_file({'Follow': {'FOLLOW_DISTANCE': 4.0}})
    """
    import yaml

    def _create_config(content) -> str:
        config_file = tmp_path / "test_config.yaml"
        with open(config_file, 'w') as f:
            yaml.safe_dump(content, f)
        return str(config_file)

    return _create_config


# =============================================================================
# Test Isolation Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def isolate_globals():
    """
    Restore Parameters and reset the circuit breaker singleton around each test.

    This runs automatically for all tests.
    """
    saved = {key: getattr(Parameters, key) for key in Parameters._DEFAULTS}
    saved_raw = Parameters._raw_config
    saved_file = Parameters._config_file
    MovementCircuitBreaker.reset_instance()

    yield

    for key, value in saved.items():
        setattr(Parameters, key, value)
    Parameters._raw_config = saved_raw
    Parameters._config_file = saved_file
    MovementCircuitBreaker.reset_instance()
