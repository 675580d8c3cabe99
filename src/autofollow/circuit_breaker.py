# src/autofollow/circuit_breaker.py

"""
Movement Circuit Breaker Module
===============================

Global circuit breaker for dry-running the follow logic. When activated, all
movement commands (sprint, mount, dismount, take off, navigation, stop) are
logged instead of executed, so the decision flow can be observed in a live
client without the character moving.

Usage:
------
```python
if MovementCircuitBreaker.is_active():
    MovementCircuitBreaker.log_command_instead_of_execute(
        command_type="move_towards",
        x=10.0, y=0.0, z=4.5
    )
else:
    navigator.move_towards(location)
```

A blocked command still counts as issued: the controller reports the same
decision it would have made with the breaker off.
"""

import logging
import time
from typing import Dict, Any, Optional

from autofollow.parameters import Parameters

logger = logging.getLogger(__name__)


class MovementCircuitBreaker:
    """
    Global circuit breaker for movement commands.

    Singleton holding command statistics; the on/off state itself is read
    from ``Parameters.MOVEMENT_CIRCUIT_BREAKER`` on every call.
    """

    _instance: Optional['MovementCircuitBreaker'] = None

    def __init__(self):
        """Initialize circuit breaker - use get_instance() instead."""
        self._command_count = 0
        self._commands_blocked = 0
        self._commands_allowed = 0
        self._start_time = time.time()
        self._last_command_time = None
        self._last_blocked_command = None
        self._command_types: Dict[str, int] = {}

        logger.debug("MovementCircuitBreaker initialized")

    @classmethod
    def get_instance(cls) -> 'MovementCircuitBreaker':
        """Get singleton instance of circuit breaker."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset singleton for testing purposes."""
        cls._instance = None

    @classmethod
    def is_active(cls) -> bool:
        """
        Check if circuit breaker is currently active.

        Returns:
            bool: True if commands should be logged instead of executed
        """
        return bool(getattr(Parameters, 'MOVEMENT_CIRCUIT_BREAKER', False))

    @classmethod
    def log_command_instead_of_execute(cls, command_type: str, **command_data) -> bool:
        """
        Log a movement command instead of executing it.

        Args:
            command_type (str): Type of command (e.g., "mount_up", "move_towards")
            **command_data: Command parameters as keyword arguments

        Returns:
            bool: True (simulates successful command execution)
        """
        instance = cls.get_instance()
        current_time = time.time()

        instance._command_count += 1
        instance._commands_blocked += 1
        instance._last_command_time = current_time
        instance._command_types[command_type] = instance._command_types.get(command_type, 0) + 1

        command_str = ", ".join([f"{k}={v:.3f}" if isinstance(v, float) else f"{k}={v}"
                                 for k, v in command_data.items()])
        instance._last_blocked_command = f"{command_type}({command_str})"

        logger.info(f"[CIRCUIT BREAKER] {command_type}: {command_str}")

        if instance._command_count % 50 == 0:
            elapsed_time = current_time - instance._start_time
            rate = instance._command_count / max(elapsed_time, 1)
            logger.info(f"[CIRCUIT BREAKER] Stats: {instance._command_count} commands, "
                        f"Rate: {rate:.1f} Hz, Types: {list(instance._command_types.keys())}")

        return True

    @classmethod
    def log_command_allowed(cls, command_type: str) -> None:
        """
        Record that a command was allowed to execute (circuit breaker inactive).

        Args:
            command_type (str): Type of command being allowed
        """
        instance = cls.get_instance()

        instance._command_count += 1
        instance._commands_allowed += 1
        instance._last_command_time = time.time()
        instance._command_types[command_type] = instance._command_types.get(command_type, 0) + 1

        if instance._commands_allowed % 100 == 0:
            logger.debug(f"[CIRCUIT BREAKER] Allowed {instance._commands_allowed} commands")

    @classmethod
    def get_statistics(cls) -> Dict[str, Any]:
        """
        Get circuit breaker statistics for monitoring and debugging.

        Returns:
            Dict[str, Any]: Statistics including command counts, types, and timing
        """
        instance = cls.get_instance()
        elapsed_time = time.time() - instance._start_time

        return {
            'circuit_breaker_active': cls.is_active(),
            'total_commands': instance._command_count,
            'total_commands_blocked': instance._commands_blocked,
            'total_commands_allowed': instance._commands_allowed,
            'last_blocked_command': instance._last_blocked_command,
            'command_types': dict(instance._command_types),
            'elapsed_time_seconds': elapsed_time,
            'command_rate_hz': instance._command_count / max(elapsed_time, 1),
            'last_command_time': instance._last_command_time,
            'system_status': 'dry_run' if cls.is_active() else 'operational'
        }

    @classmethod
    def reset_statistics(cls) -> None:
        """Reset circuit breaker statistics."""
        instance = cls.get_instance()
        instance._command_count = 0
        instance._commands_blocked = 0
        instance._commands_allowed = 0
        instance._start_time = time.time()
        instance._last_command_time = None
        instance._last_blocked_command = None
        instance._command_types.clear()

        logger.info("Circuit breaker statistics reset")
