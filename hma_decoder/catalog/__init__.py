"""
Equipment and ammunition catalog for HMA codes.
"""

from .ammo import AMMO_TYPES, AmmoFamily, AmmoType, half_lot_substitute, reconcile
from .catalog import DEFAULT_CATALOG, MissileFamily, SymbolCatalog
from .resolver import EquipmentResolver

__all__ = [
    'AMMO_TYPES',
    'AmmoFamily',
    'AmmoType',
    'half_lot_substitute',
    'reconcile',
    'DEFAULT_CATALOG',
    'MissileFamily',
    'SymbolCatalog',
    'EquipmentResolver',
]
