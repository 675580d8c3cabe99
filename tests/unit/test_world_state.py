# tests/unit/test_world_state.py
"""
Unit tests for the world-state snapshot types.
"""

import math

import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from autofollow.world_state import (
    BattleCharacter, GameObject, Location, ObjectType, PartyMember, PartyRole,
    as_battle_character,
)


class TestLocation:

    @pytest.mark.unit
    def test_distance_2d_ignores_vertical_axis(self):
        a = Location(0.0, 0.0, 0.0)
        b = Location(3.0, 100.0, 4.0)

        assert a.distance_2d(b) == pytest.approx(5.0)

    @pytest.mark.unit
    def test_distance_3d(self):
        a = Location(0.0, 0.0, 0.0)
        b = Location(1.0, 2.0, 2.0)

        assert a.distance_3d(b) == pytest.approx(3.0)

    @pytest.mark.unit
    def test_distance_is_symmetric(self):
        a = Location(1.5, -2.0, 7.0)
        b = Location(-4.0, 3.0, 0.5)

        assert a.distance_2d(b) == pytest.approx(b.distance_2d(a))
        assert a.distance_2d(b) == pytest.approx(math.hypot(5.5, 6.5))


class TestGameObject:

    @pytest.mark.unit
    def test_identity_string(self):
        obj = GameObject(object_id=0x1040A2B3, name="Some Name", object_type=ObjectType.PC)

        assert str(obj) == "Some Name [Pc] 0x1040A2B3"

    @pytest.mark.unit
    def test_battle_character_identity_string_matches_base(self):
        character = BattleCharacter(object_id=0xAB, name="Tank", object_type=ObjectType.BATTLE_NPC)

        assert str(character) == "Tank [BattleNpc] 0xAB"

    @pytest.mark.unit
    def test_has_aura(self):
        character = BattleCharacter(object_id=1, name="A", auras=frozenset({50, 7}))

        assert character.has_aura(50)
        assert not character.has_aura(51)


class TestAsBattleCharacter:

    @pytest.mark.unit
    def test_valid_battle_character(self):
        character = BattleCharacter(object_id=1, name="A")

        assert as_battle_character(character) is character

    @pytest.mark.unit
    def test_invalid_battle_character(self):
        assert as_battle_character(BattleCharacter(object_id=1, name="A", is_valid=False)) is None

    @pytest.mark.unit
    def test_plain_game_object(self):
        assert as_battle_character(GameObject(object_id=1, name="Chest")) is None

    @pytest.mark.unit
    def test_none(self):
        assert as_battle_character(None) is None


class TestEnums:

    @pytest.mark.unit
    @pytest.mark.parametrize("raw, expected", [
        ('Pc', ObjectType.PC),
        ('pc', ObjectType.PC),
        ('BATTLE_NPC', ObjectType.BATTLE_NPC),
        ('battlenpc', ObjectType.BATTLE_NPC),
    ])
    def test_object_type_from_config(self, raw, expected):
        assert ObjectType.from_config(raw) is expected

    @pytest.mark.unit
    def test_party_member_is_tank(self):
        assert PartyMember(name="T", role=PartyRole.TANK).is_tank
        assert not PartyMember(name="H", role=PartyRole.HEALER).is_tank
