# src/autofollow/logging_manager.py
"""
Logging Manager
Provides clean, informative logging for per-tick movement logic with spam
reduction and periodic summaries.
"""

import time
import logging
from collections import defaultdict
from typing import Dict, Optional
from threading import Lock

from autofollow.parameters import Parameters

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging from Parameters.LOG_LEVEL (or an explicit level).

    Unknown level names fall back to INFO.
    """
    level_name = str(level or Parameters.LOG_LEVEL).upper()
    numeric_level = getattr(logging, level_name, None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)


class LoggingManager:
    """
    Logging helper for code that runs every tick:
    - Spam reduction for repetitive messages (per operation key)
    - Operation counters
    - Status-at-a-glance summary

    Logging through this manager is best-effort: a failing handler or a bad
    format argument never propagates into movement logic.
    """

    def __init__(self, spam_cooldown: Optional[float] = None):
        self._lock = Lock()
        self._operation_counters: Dict[str, int] = defaultdict(int)
        self._spam_filter: Dict[str, float] = {}
        self._suppressed: Dict[str, int] = defaultdict(int)
        self._spam_cooldown = spam_cooldown

    @property
    def spam_cooldown(self) -> float:
        if self._spam_cooldown is not None:
            return self._spam_cooldown
        return float(Parameters.LOG_SPAM_COOLDOWN)

    def log_operation(self, logger: logging.Logger, operation: str,
                      details: str = "", *args, level: str = 'info',
                      caller: Optional[str] = None) -> bool:
        """
        Log an operation with spam reduction.

        The message is ``"[caller] details"`` with ``details % args`` applied.
        Repeats of the same operation within the cooldown are counted but not
        emitted; the next emitted line reports how many were suppressed.

        Args:
            logger: Logger instance
            operation: Operation key used for spam reduction and counters
            details: Message format string
            *args: Format arguments for ``details``
            level: Log level ('debug', 'info', 'warning', 'error')
            caller: Tag identifying the emitting code path (defaults to operation)

        Returns:
            bool: True if a line was emitted.
        """
        try:
            with self._lock:
                self._operation_counters[operation] += 1
                if not self._should_log_operation(operation):
                    self._suppressed[operation] += 1
                    return False
                suppressed = self._suppressed.pop(operation, 0)

            message = details % args if args else details
            tag = caller or operation
            line = f"[{tag}] {message}".strip() if message else f"[{tag}]"
            if suppressed:
                line += f" ({suppressed} similar suppressed)"

            log_func = getattr(logger, level, logger.info)
            log_func(line)
            return True

        except Exception:
            return False

    def get_operation_count(self, operation: str) -> int:
        with self._lock:
            return self._operation_counters.get(operation, 0)

    def log_system_summary(self, logger: logging.Logger) -> None:
        """Log the most frequent operations."""
        with self._lock:
            counters = dict(self._operation_counters)

        logger.info("=== MOVEMENT STATUS SUMMARY ===")
        if counters:
            top_ops = sorted(counters.items(), key=lambda x: x[1], reverse=True)[:5]
            logger.info("Top Operations:")
            for op, count in top_ops:
                logger.info(f"  {op}: {count}")
        else:
            logger.info("No operations recorded")
        logger.info("===============================")

    def reset(self) -> None:
        with self._lock:
            self._operation_counters.clear()
            self._spam_filter.clear()
            self._suppressed.clear()

    def _should_log_operation(self, operation: str) -> bool:
        """Determine if we should log an operation (spam reduction). Caller holds the lock."""
        current_time = time.monotonic()
        last_log = self._spam_filter.get(operation)

        if last_log is None or current_time - last_log >= self.spam_cooldown:
            self._spam_filter[operation] = current_time
            return True
        return False


# Global logging manager instance
logging_manager = LoggingManager()
