# src/autofollow/resolvers.py
"""
Reference-Entity Resolvers
==========================

One resolver per FollowMode. A resolver looks up the entity the agent should
follow this tick and returns it as a BattleCharacter, or None when nothing
suitable is found. Resolvers only read world state.

Dispatch goes through ``RESOLVER_REGISTRY``; ``get_resolver`` is the single
entry point. The registry is checked at import time to cover every mode
except ``FollowMode.NONE``.
"""

import logging
from typing import Callable, Dict, Optional

from autofollow.follow_settings import FollowSettings
from autofollow.follow_types import FollowMode
from autofollow.interfaces import WorldStateProvider
from autofollow.world_state import AgentState, BattleCharacter, as_battle_character

logger = logging.getLogger(__name__)

Resolver = Callable[[WorldStateProvider, AgentState, FollowSettings], Optional[BattleCharacter]]


def resolve_party_leader(world: WorldStateProvider, agent: AgentState,
                         settings: FollowSettings) -> Optional[BattleCharacter]:
    """
    Follow Mode: Party Leader.

    Requires the agent to be in a party without leading it, and the leader to
    be present in the object manager.
    """
    if not agent.is_in_party:
        return None

    if agent.is_party_leader:
        return None

    leader = world.get_party().leader
    if leader is None or not leader.is_in_object_manager:
        return None

    return as_battle_character(leader.battle_character)


def resolve_fixed_character(world: WorldStateProvider, agent: AgentState,
                            settings: FollowSettings) -> Optional[BattleCharacter]:
    """
    Follow Mode: Fixed Character.

    Looks up the configured character by its exact identity string first,
    then by (name, object type). No lookup happens when no name is configured.
    """
    if not settings.fixed_character_name:
        return None

    game_objects = world.get_game_objects()

    fixed_character = None
    if settings.fixed_character_string:
        fixed_character = next(
            (obj for obj in game_objects if str(obj) == settings.fixed_character_string),
            None)
    if fixed_character is None:
        fixed_character = next(
            (obj for obj in game_objects
             if obj.name == settings.fixed_character_name
             and obj.object_type == settings.fixed_character_type),
            None)

    return as_battle_character(fixed_character)


def resolve_tank(world: WorldStateProvider, agent: AgentState,
                 settings: FollowSettings) -> Optional[BattleCharacter]:
    """Follow Mode: Tank. First visible party member with the tank role."""
    if not agent.is_in_party:
        return None

    tank = next((member for member in world.get_party().visible_members if member.is_tank), None)
    if tank is None:
        return None

    return as_battle_character(tank.battle_character)


def resolve_targeted_character(world: WorldStateProvider, agent: AgentState,
                               settings: FollowSettings) -> Optional[BattleCharacter]:
    """Follow Mode: Targeted Character. The agent's current target."""
    return as_battle_character(world.get_current_target())


RESOLVER_REGISTRY: Dict[FollowMode, Resolver] = {
    FollowMode.PARTY_LEADER: resolve_party_leader,
    FollowMode.FIXED_CHARACTER: resolve_fixed_character,
    FollowMode.TANK: resolve_tank,
    FollowMode.TARGETED_CHARACTER: resolve_targeted_character,
}


def _verify_registry() -> None:
    missing = [mode for mode in FollowMode
               if mode is not FollowMode.NONE and mode not in RESOLVER_REGISTRY]
    if missing:
        raise RuntimeError(f"No reference resolver registered for follow modes: "
                           f"{[m.value for m in missing]}")


_verify_registry()


def get_resolver(mode: FollowMode) -> Optional[Resolver]:
    """
    Returns the resolver for a follow mode.

    Returns:
        Optional[Resolver]: None for ``FollowMode.NONE``.
    """
    if mode is FollowMode.NONE:
        return None
    return RESOLVER_REGISTRY[mode]
