# src/autofollow/interfaces.py
"""
Collaborator Interfaces
=======================

Abstract base classes for the services the movement controller calls into.
The host integration (game client bindings) implements these; tests use the
recording mocks under ``tests/fixtures``.

Blocking behaviour:
- ``ActionExecutor.mount_up``, ``stop_and_dismount``, ``take_off`` and
  ``Navigator.move_and_stop`` are coroutines. The controller awaits them in
  place, so a tick does not finish until they complete or yield.
- Everything else is a synchronous read or a fire-and-forget command.
- Timeouts and retries belong to the implementations, not to the controller.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence

from autofollow.world_state import AgentState, GameObject, Location, PartyState


class WorldStateProvider(ABC):
    """Read-only access to the agent, visible objects and party."""

    @abstractmethod
    def get_agent(self) -> AgentState:
        pass

    @abstractmethod
    def get_game_objects(self) -> Sequence[GameObject]:
        """Returns every object currently in the object manager."""
        pass

    @abstractmethod
    def get_party(self) -> PartyState:
        pass

    @abstractmethod
    def get_current_target(self) -> Optional[GameObject]:
        """Returns the agent's selected target, or None."""
        pass

    @abstractmethod
    def is_over_ground(self, location: Location, height: float) -> bool:
        """
        Checks whether a location is at least ``height`` units above the ground.

        Args:
            location (Location): Position to probe.
            height (float): Minimum clearance above ground level.

        Returns:
            bool: True if the location is elevated by at least ``height``.
        """
        pass


class ActionExecutor(ABC):
    """Low-level action primitives."""

    @abstractmethod
    def is_sprint_ready(self) -> bool:
        """True when the sprint ability is off cooldown."""
        pass

    @abstractmethod
    def sprint(self) -> None:
        pass

    @abstractmethod
    async def mount_up(self) -> None:
        pass

    @abstractmethod
    async def stop_and_dismount(self) -> None:
        pass

    @abstractmethod
    async def take_off(self) -> None:
        pass


class Navigator(ABC):
    """Navigation primitives backed by the pathfinding engine."""

    @abstractmethod
    def move_towards(self, location: Location) -> None:
        """Direct point-to-point movement, no pathfinding."""
        pass

    @abstractmethod
    async def move_and_stop(self,
                            location_provider: Callable[[], Location],
                            stop_distance: float,
                            stop_in_range: bool,
                            status_text: str) -> None:
        """
        Graph-assisted movement towards a location, stopping within range.

        Args:
            location_provider: Returns the destination; polled while moving.
            stop_distance: Radius around the destination at which to stop.
            stop_in_range: Whether to halt once inside ``stop_distance``.
            status_text: Human-readable status for the host's status bar.
        """
        pass

    @abstractmethod
    def flight_move_to(self, location: Location) -> None:
        pass

    @abstractmethod
    def move_stop(self) -> None:
        pass


class AvoidanceMonitor(ABC):
    """External hazard-avoidance system."""

    @abstractmethod
    def is_running_out_of_avoid(self) -> bool:
        """True while an emergency dodge is in progress."""
        pass
