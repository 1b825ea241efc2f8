# hma_decoder/parser/constants.py
from enum import Enum, IntEnum

from ..errors import UnknownCodeError

TEXT_ENCODING = 'latin-1'

VERSION_TAG_SIZE = 5
OMNI_MARKER = b'omni'
CASE_MARKER = 0xFFFF
TARGETING_COMPUTER_PRESENT = 1
FLUFF_MIN_LENGTH = 60
SIGNED_SHORT_MAX = 0x7FFF

# Skip widths. Most of these regions are unconfirmed and only known to keep
# the cursor aligned on sample files.
SKIP_AFTER_CHASSIS = 18
SKIP_AFTER_NAME = 3
SKIP_BEFORE_CAPABILITY = 40
TECH_REGION_SIZE = 92
SKIP_OMNI = 12
SKIP_NON_OMNI = 14
WEAPON_TRAILER_SIZE = 4
SKIP_BEFORE_CASE = 12
SKIP_AFTER_ARTEMIS = 4
SKIP_AFTER_VTOL = 4


class TechBase(IntEnum):
    """Technology lineage of a unit or a catalog item."""
    INNER_SPHERE = 0
    CLAN = 1
    MIXED = 2

    @property
    def label(self) -> str:
        return _TECH_LABELS[self]

    @classmethod
    def from_code(cls, code: int) -> 'TechBase':
        try:
            return cls(code)
        except ValueError:
            raise UnknownCodeError('tech base', code) from None


_TECH_LABELS = {
    TechBase.INNER_SPHERE: 'Inner Sphere',
    TechBase.CLAN: 'Clan',
    TechBase.MIXED: 'Mixed',
}


class MovementKind(Enum):
    AERODYNE = 'Aerodyne'
    SPHEROID = 'Spheroid'
    SPACE_ONLY = 'Space Only'


class ChassisKind(IntEnum):
    """Airframe or vessel class stored in the chassis field."""
    CONVENTIONAL_FIGHTER = 0
    AEROSPACE_FIGHTER = 1
    AERODYNE_SMALL_CRAFT = 2
    SPHEROID_SMALL_CRAFT = 3
    AERODYNE_DROPSHIP = 4
    SPHEROID_DROPSHIP = 5
    JUMPSHIP = 6
    WARSHIP = 7
    SPACE_STATION = 8

    @property
    def movement(self) -> MovementKind:
        if self in (ChassisKind.SPHEROID_SMALL_CRAFT, ChassisKind.SPHEROID_DROPSHIP):
            return MovementKind.SPHEROID
        if self >= ChassisKind.JUMPSHIP:
            return MovementKind.SPACE_ONLY
        return MovementKind.AERODYNE

    @property
    def is_supported(self) -> bool:
        return self < ChassisKind.JUMPSHIP

    @classmethod
    def from_code(cls, code: int) -> 'ChassisKind':
        try:
            return cls(code)
        except ValueError:
            raise UnknownCodeError('chassis', code) from None


class EngineKind(IntEnum):
    TURBINE = 0
    FUSION = 1

    @classmethod
    def from_code(cls, code: int) -> 'EngineKind':
        try:
            return cls(code)
        except ValueError:
            raise UnknownCodeError('engine', code) from None


class ArmorKind(IntEnum):
    STANDARD = 0
    FERRO_FIBROUS = 1

    @classmethod
    def from_code(cls, code: int) -> 'ArmorKind':
        try:
            return cls(code)
        except ValueError:
            raise UnknownCodeError('armor', code) from None


class WeaponLocation(IntEnum):
    """Hardpoint a weapon is mounted on."""
    FRONT = 1
    LEFT = 2
    RIGHT = 3
    REAR = 4
    BODY = 5

    @classmethod
    def from_code(cls, code: int) -> 'WeaponLocation':
        try:
            return cls(code)
        except ValueError:
            raise UnknownCodeError('weapon location', code) from None


class TechLevel(Enum):
    IS_LEVEL_1 = 'IS Level 1'
    IS_LEVEL_2 = 'IS Level 2'
    IS_LEVEL_3 = 'IS Level 3'
    CLAN_LEVEL_2 = 'Clan Level 2'
    CLAN_LEVEL_3 = 'Clan Level 3'

    @classmethod
    def for_rules(cls, rules_level: int, tech_base: TechBase) -> 'TechLevel':
        clan = tech_base == TechBase.CLAN
        if rules_level == 1:
            return cls.IS_LEVEL_1
        if rules_level == 2:
            return cls.CLAN_LEVEL_2 if clan else cls.IS_LEVEL_2
        return cls.CLAN_LEVEL_3 if clan else cls.IS_LEVEL_3


FLUFF_HEADERS = (
    'Overview:\n\r',
    '\n\rCapability:\n\r',
    '\n\rBattle History:\n\r',
    '\n\rVariants:\n\r',
    '\n\rFamous Vehicles and Pilots:\n\r',
    '\n\rDeployment:\n\r',
)
