# layout.py
"""Record layouts of an HMA file, in stream order."""
from construct import Bytes, If, Padding, Struct, this

from .constants import (
    SKIP_AFTER_ARTEMIS,
    SKIP_AFTER_CHASSIS,
    SKIP_AFTER_NAME,
    SKIP_AFTER_VTOL,
    SKIP_BEFORE_CAPABILITY,
    SKIP_BEFORE_CASE,
    TECH_REGION_SIZE,
    VERSION_TAG_SIZE,
    WEAPON_TRAILER_SIZE,
    FLUFF_HEADERS,
    TechBase,
)
from .cursor import Float32, PrefixedBlob, PrefixedText, UInt16

# Version tag, design flags and chassis code
UnitPrefix = Struct(
    "version" / Bytes(VERSION_TAG_SIZE),
    "design_flags" / UInt16,  # standard=1, modified=2, custom=4
    "chassis_code" / UInt16,
)

DesignInfo = Struct(
    Padding(SKIP_AFTER_CHASSIS),
    "name" / PrefixedText,
    Padding(SKIP_AFTER_NAME),
    "rules_level" / UInt16,
    "year" / UInt16,
    Padding(SKIP_BEFORE_CAPABILITY),
    "capability" / PrefixedBlob,
)

ComponentTech = Struct(
    "structure" / UInt16,
    "engine" / UInt16,
    "targeting_computer" / UInt16,
    "armor" / UInt16,
)

# Fixed size region; only mixed tech units carry per-component tech codes.
TechRegion = Struct(
    "tech_code" / UInt16,
    "components" / If(this.tech_code == TechBase.MIXED, ComponentTech),
    Padding(lambda ctx: TECH_REGION_SIZE - UInt16.sizeof()
            - (ComponentTech.sizeof() if ctx.tech_code == TechBase.MIXED else 0)),
)

Drive = Struct(
    "engine_rating" / UInt16,
    "engine_code" / UInt16,
    "cruise_speed" / UInt16,
)

# Two open bytes follow most facings.
ArmorBlock = Struct(
    "front" / UInt16,
    Padding(2),
    "left" / UInt16,
    Padding(10),
    "rear" / UInt16,
    Padding(2),
    "right" / UInt16,
    Padding(2),
    Padding(8),
)

WeaponEntry = Struct(
    "stack_count" / UInt16,
    "code" / UInt16,
    "manufacturer" / PrefixedText,
    "location_code" / UInt16,
    "ammo" / UInt16,
    Padding(WEAPON_TRAILER_SIZE),
)

BayEntry = Struct(
    "size" / Float32,
    "label" / PrefixedText,
)

EquipmentFlags = Struct(
    Padding(SKIP_BEFORE_CASE),
    "case" / UInt16,
    "targeting_computer" / UInt16,
    "artemis" / UInt16,  # 1 = SRM IV, 2 = LRM IV, 4 = SRM V, 8 = LRM V
    Padding(SKIP_AFTER_ARTEMIS),
    "vtol_options" / UInt16,
    Padding(SKIP_AFTER_VTOL),
)

FluffSections = PrefixedText[len(FLUFF_HEADERS)]

Trailer = Struct(
    "notes" / PrefixedBlob,
    "supercharger" / UInt16,
)
