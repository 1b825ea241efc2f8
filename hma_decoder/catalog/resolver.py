"""Turns raw equipment codes into placeable symbols."""
import logging
from typing import Container, List, Optional, Tuple

from ..model.descriptor import EquipmentSymbol, UnresolvedReason, UnresolvedSymbol
from ..parser.constants import TechBase
from .ammo import AmmoType
from .catalog import DEFAULT_CATALOG, SymbolCatalog

logger = logging.getLogger(__name__)


class EquipmentResolver:
    """Resolves codes for a single decode and collects what failed.

    Args:
        catalog: Code tables to resolve against
        known_equipment: Names the consumer can build. When given, catalog
            hits missing from it are reported as unavailable and not placed.
    """

    def __init__(
        self,
        catalog: SymbolCatalog = DEFAULT_CATALOG,
        known_equipment: Optional[Container[str]] = None
    ):
        self.catalog = catalog
        self.known_equipment = known_equipment
        self._unresolved: List[UnresolvedSymbol] = []

    @property
    def unresolved(self) -> Tuple[UnresolvedSymbol, ...]:
        return tuple(self._unresolved)

    def resolve_equipment(self, code: int, tech_base: TechBase) -> Optional[EquipmentSymbol]:
        """Look up an equipment code.

        Sentinel codes return None without a report. Unknown codes are
        recorded as unresolved and also return None.
        """
        if self.catalog.is_sentinel(code):
            return None

        name = self.catalog.equipment_name(code, tech_base)
        if name is None:
            self._report(UnresolvedSymbol(code, tech_base, UnresolvedReason.UNKNOWN_CODE))
            return None

        return self.resolve_name(name, code, tech_base)

    def resolve_ammo(self, code: int, tech_base: TechBase) -> Optional[AmmoType]:
        """Companion ammunition for a weapon code, if it takes any."""
        ammo = self.catalog.ammo_for_code(code, tech_base)
        if ammo is None:
            logger.debug(f"No ammunition entry for code 0x{code:02X} ({tech_base.label})")
        return ammo

    def resolve_name(
        self,
        name: str,
        code: Optional[int] = None,
        tech_base: TechBase = TechBase.INNER_SPHERE
    ) -> Optional[EquipmentSymbol]:
        """Symbol for an item known by name, checked against known_equipment."""
        if self.known_equipment is not None and name not in self.known_equipment:
            self._report(UnresolvedSymbol(code, tech_base, UnresolvedReason.UNAVAILABLE, name))
            return None
        return EquipmentSymbol(name, code)

    def _report(self, symbol: UnresolvedSymbol) -> None:
        logger.warning(f"Could not place equipment: {symbol.description}")
        self._unresolved.append(symbol)
