"""
Low level HMA reading: constants, the byte cursor and record layouts.
"""

from .constants import (
    ArmorKind,
    ChassisKind,
    EngineKind,
    MovementKind,
    TechBase,
    TechLevel,
    WeaponLocation,
)
from .cursor import HmaCursor

__all__ = [
    'ArmorKind',
    'ChassisKind',
    'EngineKind',
    'MovementKind',
    'TechBase',
    'TechLevel',
    'WeaponLocation',
    'HmaCursor',
]
