"""Tech base aware lookup over the HMA code tables."""
import re
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ..parser.constants import SIGNED_SHORT_MAX, TechBase
from . import tables
from .ammo import AMMO_TYPES, AmmoType

_LAUNCHER_PATTERN = re.compile(r'^(IS|CL)(LRM|SRM)\d+( \((I-)?OS\))?$')


class MissileFamily(Enum):
    LRM = 'LRM'
    SRM = 'SRM'


CodeTable = Mapping[int, str]


class SymbolCatalog:
    """Read-only equipment and ammunition tables keyed by tech base.

    The generic table is consulted before the tech base tables, so codes
    such as Jump Jet resolve identically for every tech base.
    """

    def __init__(
        self,
        equipment: Mapping[TechBase, CodeTable],
        ammo: Mapping[TechBase, CodeTable],
        generic: CodeTable,
        ammo_types: Mapping[str, AmmoType] = AMMO_TYPES,
        sentinels=tables.NON_EQUIPMENT_CODES,
    ):
        self._equipment = MappingProxyType({
            tech: MappingProxyType(dict(table)) for tech, table in equipment.items()
        })
        self._ammo = MappingProxyType({
            tech: MappingProxyType(dict(table)) for tech, table in ammo.items()
        })
        self._generic = MappingProxyType(dict(generic))
        self._ammo_types = ammo_types
        self._sentinels = frozenset(sentinels)

    @classmethod
    def default(cls) -> 'SymbolCatalog':
        """Catalog built from the bundled tables. Mixed overlays Clan codes on Inner Sphere."""
        return cls(
            equipment={
                TechBase.INNER_SPHERE: tables.IS_EQUIPMENT,
                TechBase.CLAN: tables.CLAN_EQUIPMENT,
                TechBase.MIXED: {**tables.IS_EQUIPMENT, **tables.MIXED_EQUIPMENT_OVERLAY},
            },
            ammo={
                TechBase.INNER_SPHERE: tables.IS_AMMO,
                TechBase.CLAN: tables.CLAN_AMMO,
                TechBase.MIXED: {**tables.IS_AMMO, **tables.MIXED_AMMO_OVERLAY},
            },
            generic=tables.GENERIC_EQUIPMENT,
        )

    @staticmethod
    def normalize_code(code: int) -> int:
        if code > SIGNED_SHORT_MAX:
            return code & 0xFFFF
        return code

    def is_sentinel(self, code: int) -> bool:
        return self.normalize_code(code) in self._sentinels

    def equipment_name(self, code: int, tech_base: TechBase) -> Optional[str]:
        code = self.normalize_code(code)
        name = self._generic.get(code)
        if name is None:
            name = self._equipment[tech_base].get(code)
        return name

    def ammo_name(self, code: int, tech_base: TechBase) -> Optional[str]:
        return self._ammo[tech_base].get(self.normalize_code(code))

    def ammo_for_code(self, code: int, tech_base: TechBase) -> Optional[AmmoType]:
        name = self.ammo_name(code, tech_base)
        if name is None:
            return None
        return self._ammo_types[name]

    @staticmethod
    def launcher_family(name: str) -> Optional[Tuple[MissileFamily, TechBase]]:
        """Missile family and tech base of an LRM or SRM launcher.

        Streak, MRM, torpedo and ATM launchers are not part of either family.
        """
        match = _LAUNCHER_PATTERN.match(name)
        if not match:
            return None
        tech_base = TechBase.CLAN if match.group(1) == 'CL' else TechBase.INNER_SPHERE
        return MissileFamily(match.group(2)), tech_base


DEFAULT_CATALOG = SymbolCatalog.default()
