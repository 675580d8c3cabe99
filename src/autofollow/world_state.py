# src/autofollow/world_state.py
"""
World State Types
=================

Read-only snapshots of the world as seen by the movement controller. The
host integration builds these from the game client each tick; the controller
never mutates them.

Conventions:
- Locations use a Y-up coordinate system: ``y`` is the vertical axis.
- "2D distance" is the horizontal distance over the X/Z plane.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, NamedTuple, Optional


class ObjectType(Enum):
    """Game object classification used for fixed-character lookups."""
    PC = "Pc"
    BATTLE_NPC = "BattleNpc"
    EVENT_NPC = "EventNpc"
    TREASURE = "Treasure"
    AETHERYTE = "Aetheryte"
    GATHERING_POINT = "GatheringPoint"
    EVENT_OBJECT = "EventObj"
    MOUNT = "Mount"
    COMPANION = "Companion"
    RETAINER = "Retainer"
    HOUSING_EVENT_OBJECT = "HousingEventObject"

    @classmethod
    def from_config(cls, value) -> 'ObjectType':
        """Parse a config value (enum name or value, case-insensitive)."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for object_type in cls:
            if text in (object_type.value.lower(), object_type.name.lower()):
                return object_type
        raise ValueError(f"Invalid object type '{value}'. "
                         f"Available types: {[t.value for t in cls]}")


class PartyRole(Enum):
    """Combat role of a party member."""
    TANK = "tank"
    HEALER = "healer"
    DPS = "dps"
    UNKNOWN = "unknown"


class Location(NamedTuple):
    """World position (Y is up)."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def distance_2d(self, other: 'Location') -> float:
        """Horizontal distance ignoring the vertical axis."""
        return math.hypot(self.x - other.x, self.z - other.z)

    def distance_3d(self, other: 'Location') -> float:
        return math.sqrt((self.x - other.x) ** 2 +
                         (self.y - other.y) ** 2 +
                         (self.z - other.z) ** 2)


@dataclass(frozen=True)
class GameObject:
    """Any entity in the observable world."""
    object_id: int
    name: str
    object_type: ObjectType = ObjectType.PC
    location: Location = Location()
    is_valid: bool = True

    def __str__(self) -> str:
        return f"{self.name} [{self.object_type.value}] 0x{self.object_id:X}"

    def distance_2d(self, location: Location) -> float:
        return self.location.distance_2d(location)


@dataclass(frozen=True)
class BattleCharacter(GameObject):
    """A battle-capable character: something the agent can follow."""
    is_mounted: bool = False
    is_casting: bool = False
    casting_spell_id: int = 0
    auras: FrozenSet[int] = field(default_factory=frozenset)

    def has_aura(self, aura_id: int) -> bool:
        return aura_id in self.auras


def as_battle_character(obj: Optional[GameObject]) -> Optional[BattleCharacter]:
    """
    Narrow a game object to a battle character.

    Returns:
        Optional[BattleCharacter]: ``obj`` if it is a valid battle character,
        otherwise ``None``.
    """
    if isinstance(obj, BattleCharacter) and obj.is_valid:
        return obj
    return None


@dataclass(frozen=True)
class AgentState:
    """The controlled entity."""
    location: Location = Location()
    is_mounted: bool = False
    is_flying: bool = False
    is_diving: bool = False
    in_combat: bool = False
    is_in_party: bool = False
    is_party_leader: bool = False


@dataclass(frozen=True)
class PartyMember:
    name: str
    role: PartyRole = PartyRole.UNKNOWN
    is_in_object_manager: bool = True
    battle_character: Optional[BattleCharacter] = None

    @property
    def is_tank(self) -> bool:
        return self.role is PartyRole.TANK


@dataclass(frozen=True)
class PartyState:
    """Party as observed this tick. ``visible_members`` keeps party order."""
    leader: Optional[PartyMember] = None
    visible_members: List[PartyMember] = field(default_factory=list)
