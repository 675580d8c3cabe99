# src/autofollow/movement_controller.py
"""
Movement Controller Module
==========================

Tick entry point for autonomous follow movement. Once per tick the scheduler
calls ``MovementController.execute_logic(settings)``:

    1. Paused                        -> False
    2. Following disabled            -> False
    3. Avoidance dodge in progress   -> True, nothing issued
    4. Resolve the reference entity for the configured FollowMode
    5. Run the FollowPipeline against it

The controller is constructed explicitly and owned by the scheduler. It keeps
no world state between ticks; the only thing it remembers is telemetry about
its own decisions.

Collaborator exceptions are not handled here. They propagate to the
scheduler, which treats them as fatal for the tick only.
"""

import logging
from collections import Counter
from datetime import datetime
from typing import Any, Dict, Optional

from autofollow.follow_pipeline import FollowPipeline
from autofollow.follow_settings import FollowSettings
from autofollow.follow_types import FollowDecision
from autofollow.interfaces import ActionExecutor, AvoidanceMonitor, Navigator, WorldStateProvider
from autofollow.logging_manager import LoggingManager
from autofollow.logic_executor import LogicExecutor
from autofollow.movement_commands import MovementCommands
from autofollow.resolvers import get_resolver

logger = logging.getLogger(__name__)


class MovementController(LogicExecutor):
    """
    Logic for autonomous movement functions.

    Args:
        world: World-state provider (agent, objects, party, target).
        actions: Action primitives (sprint, mount, dismount, take off).
        navigator: Navigation primitives.
        avoidance: Hazard-avoidance indicator.
        log_manager: Optional spam-filtering log manager (defaults to the global one).
    """

    name = "Movement"

    def __init__(self, world: WorldStateProvider, actions: ActionExecutor,
                 navigator: Navigator, avoidance: AvoidanceMonitor,
                 log_manager: Optional[LoggingManager] = None):
        self.world = world
        self.avoidance = avoidance
        self.commands = MovementCommands(actions, navigator)
        self.pipeline = FollowPipeline(world, self.commands, log_manager)

        self.last_decision: Optional[FollowDecision] = None
        self.last_reference_name: Optional[str] = None
        self.last_tick_time: Optional[str] = None
        self._decision_counts: Counter = Counter()
        self._tick_count = 0

        logger.info("MovementController initialized")

    async def execute_logic(self, settings: FollowSettings) -> bool:
        """
        Main task executor for the Movement logic.

        Args:
            settings (FollowSettings): Configuration snapshot for this tick.

        Returns:
            bool: True if any action was executed, otherwise False.
        """
        self._tick_count += 1
        self.last_tick_time = datetime.now().isoformat()
        self.last_decision = None
        self.last_reference_name = None

        if settings.is_paused:
            return self._record(FollowDecision.PAUSED)

        if not self.should_execute_auto_movement(settings):
            return self._record(FollowDecision.DISABLED)

        if self.avoidance.is_running_out_of_avoid():
            return self._record(FollowDecision.AVOIDANCE)

        resolver = get_resolver(settings.follow_mode)
        if resolver is None:
            return self._record(FollowDecision.NO_MODE)

        agent = self.world.get_agent()
        reference = resolver(self.world, agent, settings)
        if reference is None:
            logger.debug(f"No reference entity for follow mode '{settings.follow_mode.value}'")
            return self._record(FollowDecision.NO_REFERENCE)

        self.last_reference_name = reference.name
        self.pipeline.last_decision = None
        result = await self.pipeline.perform_follow_logic(reference, agent, settings)
        self._record(self.pipeline.last_decision)
        return result

    def should_execute_auto_movement(self, settings: FollowSettings) -> bool:
        """Determines whether or not the bot is allowed to execute movement/follow logic."""
        return settings.enable_following

    def _record(self, decision: FollowDecision) -> bool:
        self.last_decision = decision
        self._decision_counts[decision.value] += 1
        return decision.is_action

    # ==================== Telemetry ====================

    def get_telemetry(self) -> Dict[str, Any]:
        """
        Returns controller telemetry.

        Returns:
            Dict[str, Any]: Last decision, reference, tick count and per-decision counters.
        """
        return {
            'last_decision': self.last_decision.value if self.last_decision else None,
            'last_reference': self.last_reference_name,
            'last_tick_time': self.last_tick_time,
            'tick_count': self._tick_count,
            'decision_counts': dict(self._decision_counts),
        }

    def get_status_report(self) -> str:
        """
        Generates a status report for debugging.

        Returns:
            str: Formatted status report.
        """
        telemetry = self.get_telemetry()
        report = f"\n{'=' * 60}\n"
        report += "Movement Controller Status Report\n"
        report += f"{'=' * 60}\n"
        report += f"Ticks: {telemetry['tick_count']}\n"
        report += f"Last Decision: {telemetry['last_decision']}\n"
        report += f"Last Reference: {telemetry['last_reference']}\n"
        for decision, count in sorted(telemetry['decision_counts'].items()):
            report += f"  {decision}: {count}\n"
        report += f"{'=' * 60}\n"
        return report
