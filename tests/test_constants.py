"""
Tests for the closed enumerations
"""
import pytest

from hma_decoder.errors import HmaDecodeError, UnknownCodeError
from hma_decoder.parser.constants import (
    ArmorKind,
    ChassisKind,
    EngineKind,
    MovementKind,
    TechBase,
    TechLevel,
    WeaponLocation,
)


class TestFromCode:
    @pytest.mark.parametrize("enum,code", [
        (TechBase, 3),
        (ChassisKind, 9),
        (EngineKind, 2),
        (ArmorKind, 2),
        (WeaponLocation, 0),
        (WeaponLocation, 6),
    ])
    def test_unknown_codes_are_fatal(self, enum, code):
        with pytest.raises(UnknownCodeError) as exc:
            enum.from_code(code)
        assert exc.value.code == code
        assert isinstance(exc.value, HmaDecodeError)

    def test_known_codes(self):
        assert ArmorKind.from_code(1) == ArmorKind.FERRO_FIBROUS
        assert WeaponLocation.from_code(5) == WeaponLocation.BODY
        assert TechBase.from_code(2).label == 'Mixed'


class TestChassisKind:
    def test_movement_classes(self):
        aerodyne = {k for k in ChassisKind if k.movement == MovementKind.AERODYNE}
        spheroid = {k for k in ChassisKind if k.movement == MovementKind.SPHEROID}
        assert aerodyne == {
            ChassisKind.CONVENTIONAL_FIGHTER,
            ChassisKind.AEROSPACE_FIGHTER,
            ChassisKind.AERODYNE_SMALL_CRAFT,
            ChassisKind.AERODYNE_DROPSHIP,
        }
        assert spheroid == {ChassisKind.SPHEROID_SMALL_CRAFT, ChassisKind.SPHEROID_DROPSHIP}

    def test_supported(self):
        assert ChassisKind.SPHEROID_DROPSHIP.is_supported
        assert not ChassisKind.WARSHIP.is_supported


class TestTechLevel:
    @pytest.mark.parametrize("rules,tech,expected", [
        (1, TechBase.CLAN, TechLevel.IS_LEVEL_1),
        (2, TechBase.INNER_SPHERE, TechLevel.IS_LEVEL_2),
        (2, TechBase.CLAN, TechLevel.CLAN_LEVEL_2),
        (3, TechBase.MIXED, TechLevel.IS_LEVEL_3),
        (4, TechBase.CLAN, TechLevel.CLAN_LEVEL_3),
    ])
    def test_for_rules(self, rules, tech, expected):
        assert TechLevel.for_rules(rules, tech) == expected
