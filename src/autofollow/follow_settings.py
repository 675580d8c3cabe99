# src/autofollow/follow_settings.py
"""
Immutable per-tick configuration snapshot.

The scheduler builds one FollowSettings at the start of every tick and passes
it to each logic executor, so configuration changes made mid-tick only take
effect on the next tick.
"""

from dataclasses import dataclass, replace
from typing import Any

from autofollow.follow_types import FollowMode
from autofollow.parameters import Parameters
from autofollow.world_state import ObjectType

_TRUE_STRINGS = ('true', 'yes', 'on', '1')
_FALSE_STRINGS = ('false', 'no', 'off', '0')


def parse_bool(value: Any, key: str) -> bool:
    """
    Parse a boolean config value.

    Accepts real booleans, 0/1, and the strings true/false, yes/no, on/off
    (case-insensitive), so a quoted ``"false"`` in YAML stays False.

    Raises:
        ValueError: If the value is not a recognised boolean.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise ValueError(f"Invalid boolean for {key}: {value!r}")


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class FollowSettings:
    is_paused: bool = False
    enable_following: bool = False
    follow_mode: FollowMode = FollowMode.NONE
    follow_distance: float = 3.0
    follow_distance_tolerance: float = 0.5
    fixed_character_name: str = ""
    fixed_character_type: ObjectType = ObjectType.PC
    fixed_character_string: str = ""
    use_nav_graph: bool = True
    take_off_height: float = 5.0
    sprint_aura_id: int = 50
    mount_action_id: int = 9

    def __post_init__(self):
        if self.follow_distance < 0:
            raise ValueError(f"follow_distance must be >= 0, got {self.follow_distance}")
        if self.follow_distance_tolerance < 0:
            raise ValueError(f"follow_distance_tolerance must be >= 0, "
                             f"got {self.follow_distance_tolerance}")

    @property
    def follow_range(self) -> float:
        """Distance beyond which the agent moves and within which it may dismount."""
        return self.follow_distance + self.follow_distance_tolerance

    def with_changes(self, **changes) -> 'FollowSettings':
        return replace(self, **changes)

    @classmethod
    def from_parameters(cls) -> 'FollowSettings':
        """
        Snapshot the current Parameters values.

        Raises:
            ValueError: If FOLLOW_MODE, FIXED_CHARACTER_TYPE or a boolean key is
                not recognised, or a distance is negative.
        """
        return cls(
            is_paused=parse_bool(Parameters.IS_PAUSED, 'IS_PAUSED'),
            enable_following=parse_bool(Parameters.ENABLE_FOLLOWING, 'ENABLE_FOLLOWING'),
            follow_mode=FollowMode.from_config(Parameters.FOLLOW_MODE),
            follow_distance=float(Parameters.FOLLOW_DISTANCE),
            follow_distance_tolerance=float(Parameters.FOLLOW_DISTANCE_TOLERANCE),
            fixed_character_name=_as_text(Parameters.FIXED_CHARACTER_NAME),
            fixed_character_type=ObjectType.from_config(Parameters.FIXED_CHARACTER_TYPE),
            fixed_character_string=_as_text(Parameters.FIXED_CHARACTER_STRING),
            use_nav_graph=parse_bool(Parameters.USE_NAV_GRAPH, 'USE_NAV_GRAPH'),
            take_off_height=float(Parameters.TAKE_OFF_HEIGHT),
            sprint_aura_id=int(Parameters.SPRINT_AURA_ID),
            mount_action_id=int(Parameters.MOUNT_ACTION_ID),
        )
