# src/autofollow/logic_scheduler.py
"""
Logic Scheduler Module
======================

Drives logic executors (MovementController and any lower-priority modules)
from a single asyncio loop.

Per tick:
    - Build one FollowSettings snapshot (fresh read of Parameters)
    - Call executors in priority order; the first one returning True claims
      the tick and the rest are skipped
    - An exception from an executor is logged and ends that tick; the loop
      keeps running

Ticks never overlap: the next tick starts only after the previous one,
including any awaited mount/take-off/navigation routine, has finished.
"""

import asyncio
import logging
import time
from collections import Counter
from typing import Any, Callable, Dict, List, Optional, Sequence

from autofollow.follow_settings import FollowSettings
from autofollow.logic_executor import LogicExecutor
from autofollow.parameters import Parameters

logger = logging.getLogger(__name__)


class LogicScheduler:
    """
    Serial tick loop over prioritized logic executors.

    Args:
        executors: Executors in priority order (highest first).
        settings_provider: Builds the per-tick settings snapshot.
        tick_interval: Seconds between tick starts; defaults to Parameters.TICK_INTERVAL.
    """

    def __init__(self, executors: Sequence[LogicExecutor],
                 settings_provider: Callable[[], FollowSettings] = FollowSettings.from_parameters,
                 tick_interval: Optional[float] = None):
        if not executors:
            raise ValueError("LogicScheduler requires at least one executor")

        self.executors: List[LogicExecutor] = list(executors)
        self.settings_provider = settings_provider
        self._tick_interval = tick_interval

        self._tick_count = 0
        self._error_count = 0
        self._claimed_by: Counter = Counter()
        self._last_error: Optional[str] = None

    @property
    def tick_interval(self) -> float:
        if self._tick_interval is not None:
            return self._tick_interval
        return float(Parameters.TICK_INTERVAL)

    # ==================== Pause Control ====================

    @staticmethod
    def pause() -> None:
        Parameters.IS_PAUSED = True
        logger.info("Bot paused")

    @staticmethod
    def resume() -> None:
        Parameters.IS_PAUSED = False
        logger.info("Bot resumed")

    # ==================== Tick Execution ====================

    async def run_tick(self) -> Optional[str]:
        """
        Run one tick.

        Returns:
            Optional[str]: Name of the executor that claimed the tick, or None
            if no executor acted or the tick failed.
        """
        self._tick_count += 1
        current = None

        try:
            settings = self.settings_provider()

            for executor in self.executors:
                current = executor.name
                if await executor.execute_logic(settings):
                    self._claimed_by[executor.name] += 1
                    return executor.name

        except asyncio.CancelledError:
            raise
        except Exception as e:
            self._error_count += 1
            self._last_error = f"{current or 'settings'}: {e}"
            logger.exception(f"Tick {self._tick_count} failed in {current or 'settings snapshot'}: {e}")

        return None

    async def run(self, stop_event: asyncio.Event) -> None:
        """
        Run ticks until ``stop_event`` is set.

        Args:
            stop_event (asyncio.Event): Set to end the loop after the current tick.
        """
        logger.info(f"LogicScheduler started with executors: "
                    f"{[executor.name for executor in self.executors]}")

        while not stop_event.is_set():
            started = time.monotonic()
            await self.run_tick()

            remaining = self.tick_interval - (time.monotonic() - started)
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=max(remaining, 0.0))
            except asyncio.TimeoutError:
                pass

        logger.info(f"LogicScheduler stopped after {self._tick_count} ticks "
                    f"({self._error_count} failed)")

    def get_statistics(self) -> Dict[str, Any]:
        return {
            'tick_count': self._tick_count,
            'error_count': self._error_count,
            'last_error': self._last_error,
            'claimed_by': dict(self._claimed_by),
            'tick_interval': self.tick_interval,
        }
