# src/autofollow/follow_types.py
"""
FollowMode and FollowDecision enums: canonical identifiers for follow modes
and for the outcome of a single movement tick.

Usage:
    from autofollow.follow_types import FollowMode
    mode = FollowMode.from_config('party_leader')
"""

from enum import Enum


class FollowMode(str, Enum):
    """
    Which entity the agent tracks.

    Values are the strings accepted in the YAML config (Follow.FOLLOW_MODE).
    """

    NONE               = 'none'
    PARTY_LEADER       = 'party_leader'
    FIXED_CHARACTER    = 'fixed_character'
    TANK               = 'tank'
    TARGETED_CHARACTER = 'targeted_character'

    @classmethod
    def from_config(cls, value) -> 'FollowMode':
        """
        Parse a config value (case-insensitive name or value) into a FollowMode.

        Raises:
            ValueError: If the value does not name a follow mode.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.NONE
        text = str(value).strip()
        for mode in cls:
            if text.lower() in (mode.value, mode.name.lower()):
                return mode
        raise ValueError(f"Invalid follow mode '{value}'. "
                         f"Available modes: {[m.value for m in cls]}")


class FollowDecision(str, Enum):
    """Outcome recorded for one tick of the movement controller."""

    # ── Tick gated before any lookup ─────────────────────────────────────────
    PAUSED        = 'paused'
    DISABLED      = 'disabled'
    AVOIDANCE     = 'avoidance'
    NO_MODE       = 'no_mode'
    NO_REFERENCE  = 'no_reference'

    # ── Pipeline stages ──────────────────────────────────────────────────────
    SPRINT        = 'sprint'
    MOUNT         = 'mount'
    DISMOUNT      = 'dismount'
    TAKE_OFF      = 'take_off'
    MOVE_TOWARDS  = 'move_towards'
    MOVE_AND_STOP = 'move_and_stop'
    FLIGHT_MOVE   = 'flight_move'
    STOP          = 'stop'

    @property
    def is_action(self) -> bool:
        """True for decisions that report "action taken" to the scheduler."""
        return self in _ACTION_DECISIONS


_ACTION_DECISIONS = frozenset({
    FollowDecision.AVOIDANCE,
    FollowDecision.SPRINT,
    FollowDecision.MOUNT,
    FollowDecision.DISMOUNT,
    FollowDecision.TAKE_OFF,
    FollowDecision.MOVE_TOWARDS,
    FollowDecision.MOVE_AND_STOP,
    FollowDecision.FLIGHT_MOVE,
})
