"""Ammunition types and lot reconciliation."""
import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

from ..errors import AmmoReconciliationError
from ..parser.constants import TechBase
from . import tables

logger = logging.getLogger(__name__)


class AmmoFamily(Enum):
    GENERAL = 'general'
    MACHINE_GUN = tables.MG
    LIGHT_MACHINE_GUN = tables.LIGHT_MG
    HEAVY_MACHINE_GUN = tables.HEAVY_MG


@dataclass(frozen=True)
class AmmoType:
    """One ton of ammunition for a weapon."""
    name: str
    shots_per_lot: int
    family: AmmoFamily = AmmoFamily.GENERAL
    tech_base: TechBase = TechBase.INNER_SPHERE

    @property
    def is_clan(self) -> bool:
        return self.tech_base == TechBase.CLAN


def _build_ammo_types() -> Mapping[str, AmmoType]:
    ammo_types = {}
    for name, lot in tables.AMMO_LOTS.items():
        shots, family = lot if isinstance(lot, tuple) else (lot, AmmoFamily.GENERAL.value)
        tech_base = TechBase.CLAN if name.startswith('CL') else TechBase.INNER_SPHERE
        ammo_types[name] = AmmoType(name, shots, AmmoFamily(family), tech_base)
    return MappingProxyType(ammo_types)


AMMO_TYPES = _build_ammo_types()


def half_lot_substitute(ammo: AmmoType) -> AmmoType:
    """Half ton variant of a machine gun ammunition type.

    Raises:
        AmmoReconciliationError: If the family has no half ton variant
    """
    name = tables.HALF_LOT_AMMO.get((ammo.family.value, ammo.is_clan))
    if name is None:
        raise AmmoReconciliationError(
            f"No half lot variant of {ammo.name}"
        )
    return AMMO_TYPES[name]


def reconcile(requested_shots: int, ammo: AmmoType) -> Tuple[AmmoType, int]:
    """Split a shot count into whole lots.

    Args:
        requested_shots: Shots recorded in the file
        ammo: Ammunition type the weapon uses

    Returns:
        The ammunition type to place and the number of lots. Allocated shots
        never exceed the request.

    Raises:
        AmmoReconciliationError: If the count is not a whole number of lots
            and no half lot variant exists
    """
    if requested_shots % ammo.shots_per_lot == 0:
        return ammo, requested_shots // ammo.shots_per_lot

    try:
        substitute = half_lot_substitute(ammo)
    except AmmoReconciliationError:
        raise AmmoReconciliationError(
            f"{requested_shots} shots of {ammo.name} is not a multiple of "
            f"{ammo.shots_per_lot}"
        ) from None

    lots = requested_shots // substitute.shots_per_lot
    leftover = requested_shots - lots * substitute.shots_per_lot
    if leftover:
        logger.warning(
            f"Dropping {leftover} shots of {ammo.name}: "
            f"{requested_shots} shots fill {lots} lots of {substitute.name}"
        )
    logger.debug(f"Substituted {substitute.name} x{lots} for {requested_shots} shots of {ammo.name}")
    return substitute, lots
