# tests/fixtures/__init__.py
"""
Test fixtures package for AutoFollow testing.

Provides reusable mocks, factories, and test utilities.
"""

from tests.fixtures.mock_game_client import (
    CommandLog,
    CommandRecord,
    MockWorldState,
    MockActionExecutor,
    MockNavigator,
    MockAvoidanceMonitor,
    make_character,
    make_party,
)

__all__ = [
    'CommandLog',
    'CommandRecord',
    'MockWorldState',
    'MockActionExecutor',
    'MockNavigator',
    'MockAvoidanceMonitor',
    'make_character',
    'make_party',
]
