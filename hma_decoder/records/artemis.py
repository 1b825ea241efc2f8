"""Links Artemis fire-control systems to missile launchers."""
import logging
from typing import Iterable, List, Optional, Tuple

from ..catalog.catalog import MissileFamily, SymbolCatalog
from ..catalog.resolver import EquipmentResolver
from ..model.descriptor import ArtemisLink, EquipmentSymbol
from ..parser.constants import TechBase, WeaponLocation

logger = logging.getLogger(__name__)

ARTEMIS_IV = 'ArtemisIV'
ARTEMIS_V = 'ArtemisV'

# (Artemis IV bit, Artemis V bit) per launcher family
ARTEMIS_BITS = {
    MissileFamily.LRM: (0x2, 0x8),
    MissileFamily.SRM: (0x1, 0x4),
}


def artemis_kind(family: MissileFamily, artemis_flags: int) -> Optional[str]:
    """Artemis generation fitted to a launcher family. IV wins if both bits are set."""
    iv_bit, v_bit = ARTEMIS_BITS[family]
    if artemis_flags & iv_bit:
        return ARTEMIS_IV
    if artemis_flags & v_bit:
        return ARTEMIS_V
    return None


def link_artemis(
    placements: Iterable[Tuple[WeaponLocation, EquipmentSymbol, int]],
    artemis_flags: int,
    resolver: EquipmentResolver
) -> Tuple[ArtemisLink, ...]:
    """Build one link per placed LRM or SRM launcher covered by the flags.

    Args:
        placements: (location, symbol, count) triples of placed equipment
        artemis_flags: Artemis bitfield from the file
        resolver: Used to check the fire-control system is available
    """
    if not artemis_flags:
        return ()

    links: List[ArtemisLink] = []
    for location, launcher, count in placements:
        family = SymbolCatalog.launcher_family(launcher.name)
        if family is None:
            continue
        missile_family, tech_base = family
        kind = artemis_kind(missile_family, artemis_flags)
        if kind is None:
            continue

        prefix = 'CL' if tech_base == TechBase.CLAN else 'IS'
        fire_control = resolver.resolve_name(prefix + kind, tech_base=tech_base)
        if fire_control is None:
            continue

        logger.debug(f"Linked {fire_control.name} x{count} to {launcher.name} at {location.name}")
        links.append(ArtemisLink(location, launcher, fire_control, count))

    return tuple(links)
