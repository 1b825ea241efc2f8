"""
Decoded unit structures.
Everything here is immutable once a decode pass has finished.
"""
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from ..errors import UnsupportedUnitError
from ..parser.constants import (
    ArmorKind,
    ChassisKind,
    EngineKind,
    MovementKind,
    TechBase,
    TechLevel,
    WeaponLocation,
)


@dataclass(frozen=True)
class EquipmentSymbol:
    """Catalog item placed on a unit. Equal by name only."""
    name: str
    code: Optional[int] = field(default=None, compare=False)


class UnresolvedReason(Enum):
    UNKNOWN_CODE = 'unknown code'
    UNAVAILABLE = 'unavailable'


@dataclass(frozen=True)
class UnresolvedSymbol:
    """An item the decoder could not place on the unit."""
    code: Optional[int]
    tech_base: TechBase
    reason: UnresolvedReason = UnresolvedReason.UNKNOWN_CODE
    name: Optional[str] = None

    @property
    def description(self) -> str:
        if self.reason is UnresolvedReason.UNKNOWN_CODE:
            return f"unknown code 0x{self.code:02X} for tech base {self.tech_base.label}"
        code = f" (0x{self.code:02X})" if self.code is not None else ""
        return f"{self.name}{code} is not available"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'code': self.code,
            'tech_base': self.tech_base.label,
            'reason': self.reason.value,
            'name': self.name,
            'description': self.description,
        }


@dataclass(frozen=True)
class ArtemisLink:
    """Fire-control system tied to the launchers at one location."""
    location: WeaponLocation
    launcher: EquipmentSymbol
    fire_control: EquipmentSymbol
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'location': self.location.name,
            'launcher': self.launcher.name,
            'fire_control': self.fire_control.name,
            'count': self.count,
        }


@dataclass(frozen=True)
class TechProfile:
    """Tech base of each component that can differ on a mixed tech unit."""
    structure: TechBase
    engine: TechBase
    targeting_computer: TechBase
    armor: TechBase

    @classmethod
    def uniform(cls, tech_base: TechBase) -> 'TechProfile':
        return cls(tech_base, tech_base, tech_base, tech_base)

    def to_dict(self) -> Dict[str, str]:
        return {
            'structure': self.structure.label,
            'engine': self.engine.label,
            'targeting_computer': self.targeting_computer.label,
            'armor': self.armor.label,
        }


@dataclass(frozen=True)
class ArmorFacings:
    front: int
    left: int
    right: int
    rear: int

    def to_dict(self) -> Dict[str, int]:
        return {
            'front': self.front,
            'left': self.left,
            'right': self.right,
            'rear': self.rear,
        }


Placement = Mapping[WeaponLocation, Mapping[EquipmentSymbol, int]]


class PlacementTable:
    """Accumulates equipment counts per location during a decode."""

    def __init__(self):
        self._counts: Dict[WeaponLocation, Dict[EquipmentSymbol, int]] = {}

    def add(self, location: WeaponLocation, symbol: EquipmentSymbol, count: int = 1) -> None:
        """Add count copies of symbol. Non-positive counts place nothing."""
        if count <= 0:
            return
        slot = self._counts.setdefault(location, {})
        slot[symbol] = slot.get(symbol, 0) + count

    def contains(self, name: str) -> bool:
        return any(
            symbol.name == name
            for symbols in self._counts.values()
            for symbol in symbols
        )

    def items(self):
        for location, symbols in self._counts.items():
            for symbol, count in symbols.items():
                yield location, symbol, count

    def freeze(self) -> Placement:
        return MappingProxyType({
            location: MappingProxyType(dict(symbols))
            for location, symbols in self._counts.items()
        })


@dataclass(frozen=True)
class UnitDescriptor:
    """Fully decoded HMA unit.

    Consumers that build a game entity should call ensure_supported() first;
    JumpShips, WarShips and Space Stations decode but cannot be assembled.
    """
    version: str
    design_flags: int
    name: str
    rules_level: int
    year: int
    chassis: ChassisKind
    tech_base: TechBase
    tech_profile: TechProfile
    omni: bool
    engine_rating: int
    engine_kind: EngineKind
    cruise_speed: int
    armor: ArmorFacings
    armor_kind: ArmorKind
    bay_sizes: Tuple[float, ...]
    capacity: int
    artemis_flags: int
    fluff: Optional[str]
    placement: Placement
    artemis_links: Tuple[ArtemisLink, ...] = ()
    unresolved: Tuple[UnresolvedSymbol, ...] = ()

    @property
    def movement(self) -> MovementKind:
        return self.chassis.movement

    @property
    def is_supported(self) -> bool:
        return self.chassis.is_supported

    @property
    def tech_level(self) -> TechLevel:
        return TechLevel.for_rules(self.rules_level, self.tech_base)

    @property
    def clan_engine(self) -> bool:
        return self.tech_profile.engine == TechBase.CLAN

    @property
    def failed_equipment(self) -> Tuple[str, ...]:
        return tuple(symbol.description for symbol in self.unresolved)

    def count(self, name: str, location: Optional[WeaponLocation] = None) -> int:
        """Total number of items called name, optionally at one location."""
        total = 0
        for loc, symbols in self.placement.items():
            if location is not None and loc != location:
                continue
            total += sum(n for symbol, n in symbols.items() if symbol.name == name)
        return total

    def ensure_supported(self) -> 'UnitDescriptor':
        if not self.is_supported:
            raise UnsupportedUnitError(
                f"{self.name}: {self.chassis.name} units are not supported"
            )
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON ready dictionary"""
        return {
            'version': self.version,
            'design_flags': self.design_flags,
            'name': self.name,
            'rules_level': self.rules_level,
            'tech_level': self.tech_level.value,
            'year': self.year,
            'chassis': self.chassis.name,
            'movement': self.movement.value,
            'supported': self.is_supported,
            'tech_base': self.tech_base.label,
            'tech_profile': self.tech_profile.to_dict(),
            'omni': self.omni,
            'engine': {
                'rating': self.engine_rating,
                'kind': self.engine_kind.name,
                'clan': self.clan_engine,
            },
            'cruise_speed': self.cruise_speed,
            'armor': self.armor.to_dict(),
            'armor_kind': self.armor_kind.name,
            'bay_sizes': list(self.bay_sizes),
            'capacity': self.capacity,
            'artemis_flags': self.artemis_flags,
            'fluff': self.fluff,
            'equipment': {
                location.name: {symbol.name: count for symbol, count in symbols.items()}
                for location, symbols in self.placement.items()
            },
            'artemis_links': [link.to_dict() for link in self.artemis_links],
            'unresolved': [symbol.to_dict() for symbol in self.unresolved],
        }
