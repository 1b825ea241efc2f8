"""
Data models for decoded HMA units.
"""

from .descriptor import (
    ArmorFacings,
    ArtemisLink,
    EquipmentSymbol,
    Placement,
    PlacementTable,
    TechProfile,
    UnitDescriptor,
    UnresolvedReason,
    UnresolvedSymbol,
)

__all__ = [
    'ArmorFacings',
    'ArtemisLink',
    'EquipmentSymbol',
    'Placement',
    'PlacementTable',
    'TechProfile',
    'UnitDescriptor',
    'UnresolvedReason',
    'UnresolvedSymbol',
]
