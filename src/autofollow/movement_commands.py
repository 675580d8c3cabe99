# src/autofollow/movement_commands.py
"""
Command facade over the action and navigation collaborators.

Every side-effecting call the follow pipeline makes goes through
MovementCommands, which consults the MovementCircuitBreaker first. With the
breaker active the command is logged and skipped; otherwise it is forwarded.
Exceptions raised by the collaborators propagate unchanged.
"""

import logging
from typing import Callable

from autofollow.circuit_breaker import MovementCircuitBreaker
from autofollow.interfaces import ActionExecutor, Navigator
from autofollow.world_state import Location

logger = logging.getLogger(__name__)


class MovementCommands:

    def __init__(self, actions: ActionExecutor, navigator: Navigator):
        self.actions = actions
        self.navigator = navigator

    def _intercept(self, command_type: str, **command_data) -> bool:
        """Returns True if the command was intercepted by the circuit breaker."""
        if MovementCircuitBreaker.is_active():
            MovementCircuitBreaker.log_command_instead_of_execute(command_type, **command_data)
            return True
        MovementCircuitBreaker.log_command_allowed(command_type)
        return False

    # ==================== Reads ====================

    def is_sprint_ready(self) -> bool:
        return self.actions.is_sprint_ready()

    # ==================== Actions ====================

    def sprint(self) -> None:
        if not self._intercept('sprint'):
            self.actions.sprint()

    async def mount_up(self) -> None:
        if not self._intercept('mount_up'):
            await self.actions.mount_up()

    async def stop_and_dismount(self) -> None:
        if not self._intercept('stop_and_dismount'):
            await self.actions.stop_and_dismount()

    async def take_off(self) -> None:
        if not self._intercept('take_off'):
            await self.actions.take_off()

    # ==================== Navigation ====================

    def move_towards(self, location: Location) -> None:
        if not self._intercept('move_towards', x=location.x, y=location.y, z=location.z):
            self.navigator.move_towards(location)

    async def move_and_stop(self, location_provider: Callable[[], Location],
                            stop_distance: float, stop_in_range: bool,
                            status_text: str) -> None:
        if self._intercept('move_and_stop', stop_distance=stop_distance, status=status_text):
            return
        await self.navigator.move_and_stop(location_provider, stop_distance,
                                           stop_in_range, status_text)

    def flight_move_to(self, location: Location) -> None:
        if not self._intercept('flight_move_to', x=location.x, y=location.y, z=location.z):
            self.navigator.flight_move_to(location)

    def move_stop(self) -> None:
        if not self._intercept('move_stop'):
            self.navigator.move_stop()
