# src/autofollow/logic_executor.py
"""
LogicExecutor Module
====================

Common interface for modules driven by the LogicScheduler. Executors are
asked in priority order once per tick and all receive the same
FollowSettings snapshot.
"""

from abc import ABC, abstractmethod

from autofollow.follow_settings import FollowSettings


class LogicExecutor(ABC):
    """
    Base class for logic modules driven by the LogicScheduler.

    Each tick the scheduler calls ``execute_logic`` on its executors in
    priority order and stops at the first one that returns True.
    """

    name: str = "LogicExecutor"

    @abstractmethod
    async def execute_logic(self, settings: FollowSettings) -> bool:
        """
        Run one tick of this module.

        Args:
            settings (FollowSettings): Configuration snapshot taken at tick start.

        Returns:
            bool: True if the module acted (or claims the tick), otherwise False.
        """
        pass
