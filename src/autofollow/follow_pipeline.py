# src/autofollow/follow_pipeline.py
"""
Follow Pipeline Module
======================

Shared follow mechanics for every follow mode. Given the reference entity
resolved for this tick, the pipeline runs its stages in strict priority order
and stops at the first one that acts:

    1. Auto-sprint      - sprint while the reference is sprinting
    2. Mount/dismount   - match the reference's mounted state
    3. Take-off         - take off when the reference is airborne
    4. Navigate-or-stop - close the gap, or halt when in range

At most one movement-affecting command is issued per call. When no stage
acts the pipeline issues a stop and reports no action.

Mount/dismount trigger:
    The stage fires on a mounted-state mismatch, or while the reference is
    casting the mount action. Mounting additionally accepts a reference whose
    ``casting_spell_id`` equals the mount action without checking
    ``is_casting``.
"""

import logging
from typing import Optional

from autofollow.follow_settings import FollowSettings
from autofollow.follow_types import FollowDecision
from autofollow.interfaces import WorldStateProvider
from autofollow.logging_manager import LoggingManager, logging_manager
from autofollow.movement_commands import MovementCommands
from autofollow.world_state import AgentState, BattleCharacter

logger = logging.getLogger(__name__)

NAVIGATION_STATUS_TEXT = "Following selected target"


class FollowPipeline:
    """
    Ordered follow stages with early return.

    Attributes:
        last_decision (Optional[FollowDecision]): Outcome of the most recent
            ``perform_follow_logic`` call.
    """

    def __init__(self, world: WorldStateProvider, commands: MovementCommands,
                 log_manager: Optional[LoggingManager] = None):
        self.world = world
        self.commands = commands
        self.log_manager = log_manager or logging_manager
        self.last_decision: Optional[FollowDecision] = None

    async def perform_follow_logic(self, reference: BattleCharacter, agent: AgentState,
                                   settings: FollowSettings) -> bool:
        """
        Core mechanics for the follow logic that are the same across all follow modes.

        Args:
            reference (BattleCharacter): Entity to follow this tick.
            agent (AgentState): Snapshot of the controlled entity.
            settings (FollowSettings): Configuration snapshot for this tick.

        Returns:
            bool: True if a stage acted, False if the pipeline only stopped movement.
        """
        # Sprint when the leader sprints
        if self.perform_auto_sprint(reference, settings):
            return True

        if await self.perform_mount_dismount(reference, agent, settings):
            return True

        if await self.perform_flight_take_off(reference, agent, settings):
            return True

        # Too far away, move closer
        if reference.distance_2d(agent.location) > settings.follow_range:
            if await self.perform_navigation(reference, agent, settings):
                return True

        self.commands.move_stop()
        self.last_decision = FollowDecision.STOP
        return False

    def perform_auto_sprint(self, reference: Optional[BattleCharacter],
                            settings: FollowSettings) -> bool:
        """Sprint if the reference has the sprint status and sprint is off cooldown."""
        if reference is None:
            return False

        if reference.has_aura(settings.sprint_aura_id) and self.commands.is_sprint_ready():
            self.log_manager.log_operation(logger, 'sprint', "Sprinting...",
                                           caller=self._caller(settings))
            self.commands.sprint()
            self.last_decision = FollowDecision.SPRINT
            return True

        return False

    async def perform_mount_dismount(self, reference: BattleCharacter, agent: AgentState,
                                     settings: FollowSettings) -> bool:
        """
        Mount up when the reference mounts; dismount once close to a dismounted reference.

        Mounting is never attempted in combat. Dismounting is suppressed while the
        reference is farther than the follow range.
        """
        casting_mount = (reference.is_casting
                         and reference.casting_spell_id == settings.mount_action_id)

        if reference.is_mounted != agent.is_mounted or casting_mount:
            if not agent.in_combat:
                if reference.is_mounted or reference.casting_spell_id == settings.mount_action_id:
                    self.log_manager.log_operation(logger, 'mount', "Mounting...",
                                                   caller=self._caller(settings))
                    await self.commands.mount_up()
                    self.last_decision = FollowDecision.MOUNT
                    return True

            distance = reference.distance_2d(agent.location)
            if distance <= settings.follow_range:
                self.log_manager.log_operation(logger, 'dismount', "Dismounting, %.2f <= %.2f...",
                                               distance, settings.follow_range,
                                               caller=self._caller(settings))
                await self.commands.stop_and_dismount()
                self.last_decision = FollowDecision.DISMOUNT
                return True

        return False

    async def perform_flight_take_off(self, reference: BattleCharacter, agent: AgentState,
                                      settings: FollowSettings) -> bool:
        """Take off if the reference is airborne and the agent is not flying yet."""
        if agent.is_flying:
            return False

        height = settings.take_off_height
        reference_airborne = (reference.is_mounted
                              and self.world.is_over_ground(reference.location, height))
        reference_above = reference.location.y > agent.location.y + height

        if reference_airborne or reference_above:
            logger.debug(f"Taking off: reference at y={reference.location.y:.2f}, "
                         f"agent at y={agent.location.y:.2f}")
            await self.commands.take_off()
            self.last_decision = FollowDecision.TAKE_OFF
            return True

        return False

    async def perform_navigation(self, reference: BattleCharacter, agent: AgentState,
                                 settings: FollowSettings) -> bool:
        """
        Navigate towards the reference with the configured strategy.

        Direct mode moves straight towards the reference. Graph mode runs the
        pathfinding move-and-stop routine on the ground, or a direct flight move
        while flying or diving.

        Returns:
            bool: Always True.
        """
        if not settings.use_nav_graph:
            self.commands.move_towards(reference.location)
            self.last_decision = FollowDecision.MOVE_TOWARDS
            return True

        if not agent.is_flying and not agent.is_diving:
            await self.commands.move_and_stop(lambda: reference.location,
                                              settings.follow_distance,
                                              True,
                                              NAVIGATION_STATUS_TEXT)
            self.last_decision = FollowDecision.MOVE_AND_STOP
        else:
            self.commands.flight_move_to(reference.location)
            self.last_decision = FollowDecision.FLIGHT_MOVE

        return True

    @staticmethod
    def _caller(settings: FollowSettings) -> str:
        return f"Movement.{settings.follow_mode.value}"
