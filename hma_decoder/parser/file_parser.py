# file_parser.py
import logging
from pathlib import Path
from typing import Container, List, Optional, Tuple, Union

from ..catalog.ammo import reconcile
from ..catalog.catalog import DEFAULT_CATALOG, SymbolCatalog
from ..catalog.resolver import EquipmentResolver
from ..errors import HmaDecodeError, UnknownCodeError
from ..model.descriptor import (
    ArmorFacings,
    PlacementTable,
    TechProfile,
    UnitDescriptor,
)
from ..records.artemis import link_artemis
from ..records.bays import aggregate_bays
from ..records.fluff import assemble_fluff
from .constants import (
    CASE_MARKER,
    OMNI_MARKER,
    SKIP_NON_OMNI,
    SKIP_OMNI,
    TARGETING_COMPUTER_PRESENT,
    TEXT_ENCODING,
    ArmorKind,
    ChassisKind,
    EngineKind,
    TechBase,
    WeaponLocation,
)
from .cursor import HmaCursor
from .layout import (
    ArmorBlock,
    BayEntry,
    DesignInfo,
    Drive,
    EquipmentFlags,
    FluffSections,
    TechRegion,
    Trailer,
    UnitPrefix,
    WeaponEntry,
)

logger = logging.getLogger(__name__)


class HmaDecoder:
    """Single forward pass over one HMA byte stream.

    A decoder instance is used for one decode only. Fatal problems raise an
    HmaDecodeError subclass; unknown or unavailable equipment is collected
    on the resulting UnitDescriptor instead.
    """

    def __init__(
        self,
        data: bytes,
        catalog: SymbolCatalog = DEFAULT_CATALOG,
        known_equipment: Optional[Container[str]] = None
    ):
        self.cursor = HmaCursor(data)
        self.resolver = EquipmentResolver(catalog, known_equipment)
        self.placement = PlacementTable()

    def decode(self) -> UnitDescriptor:
        prefix = self.cursor.parse(UnitPrefix, 'unit header')
        chassis = ChassisKind.from_code(prefix.chassis_code)

        info = self.cursor.parse(DesignInfo, 'design info')
        omni = OMNI_MARKER in info.capability
        logger.debug(f"Decoding {info.name!r}: {chassis.name}, omni={omni}")

        tech_base, tech_profile = self._read_tech()

        drive = self.cursor.parse(Drive, 'engine')
        engine_kind = EngineKind.from_code(drive.engine_code)

        armor_block = self.cursor.parse(ArmorBlock, 'armor')
        armor = ArmorFacings(
            front=armor_block.front,
            left=armor_block.left,
            right=armor_block.right,
            rear=armor_block.rear,
        )

        self.cursor.skip(SKIP_OMNI if omni else SKIP_NON_OMNI, 'omni padding')

        self._read_weapons(tech_base)
        bay_sizes = self._read_bays()

        flags = self.cursor.parse(EquipmentFlags, 'equipment flags')
        self._place_fixed_equipment(flags, tech_profile)

        fluff = assemble_fluff(self.cursor.parse(FluffSections, 'fluff'))

        trailer = self.cursor.parse(Trailer, 'trailer')
        if trailer.supercharger > 0:
            self._place_named("Supercharger", WeaponLocation.BODY)

        if not self.cursor.exhausted:
            logger.warning(
                f"Ignoring {self.cursor.remaining} trailing bytes after offset {self.cursor.offset}"
            )

        armor_kind = (
            ArmorKind.FERRO_FIBROUS if self.placement.contains("Ferro-Fibrous")
            else ArmorKind.STANDARD
        )
        artemis_links = link_artemis(self.placement.items(), flags.artemis, self.resolver)

        return UnitDescriptor(
            version=prefix.version.decode(TEXT_ENCODING).rstrip('\x00'),
            design_flags=prefix.design_flags,
            name=info.name,
            rules_level=info.rules_level,
            year=info.year,
            chassis=chassis,
            tech_base=tech_base,
            tech_profile=tech_profile,
            omni=omni,
            engine_rating=drive.engine_rating,
            engine_kind=engine_kind,
            cruise_speed=drive.cruise_speed,
            armor=armor,
            armor_kind=armor_kind,
            bay_sizes=bay_sizes,
            capacity=aggregate_bays(bay_sizes),
            artemis_flags=flags.artemis,
            fluff=fluff,
            placement=self.placement.freeze(),
            artemis_links=artemis_links,
            unresolved=self.resolver.unresolved,
        )

    def _read_tech(self) -> Tuple[TechBase, TechProfile]:
        region = self.cursor.parse(TechRegion, 'tech region')
        tech_base = TechBase.from_code(region.tech_code)
        if region.components is None:
            return tech_base, TechProfile.uniform(tech_base)

        components = region.components
        profile = TechProfile(
            structure=TechBase.from_code(components.structure),
            engine=TechBase.from_code(components.engine),
            targeting_computer=TechBase.from_code(components.targeting_computer),
            armor=TechBase.from_code(components.armor),
        )
        logger.debug(f"Mixed tech components: {profile.to_dict()}")
        return tech_base, profile

    def _read_weapons(self, tech_base: TechBase) -> None:
        count = self.cursor.read_u16('weapon count')
        logger.debug(f"Reading {count} weapon entries at offset {self.cursor.offset}")

        for _ in range(count):
            start = self.cursor.offset
            entry = self.cursor.parse(WeaponEntry, 'weapon entry')

            # Empty slots and unresolved items carry no meaningful location.
            symbol = self.resolver.resolve_equipment(entry.code, tech_base)
            if symbol is None:
                continue

            try:
                location = WeaponLocation.from_code(entry.location_code)
            except UnknownCodeError:
                raise UnknownCodeError('weapon location', entry.location_code, start) from None
            self.placement.add(location, symbol, entry.stack_count)

            if entry.ammo > 0:
                self._place_ammo(entry.code, entry.ammo, tech_base)

    def _place_ammo(self, code: int, shots: int, tech_base: TechBase) -> None:
        ammo = self.resolver.resolve_ammo(code, tech_base)
        if ammo is None:
            return
        ammo, lots = reconcile(shots, ammo)
        if lots <= 0:
            return
        symbol = self.resolver.resolve_name(ammo.name, code, tech_base)
        if symbol is not None:
            self.placement.add(WeaponLocation.BODY, symbol, lots)

    def _read_bays(self) -> Tuple[float, ...]:
        count = self.cursor.read_u16('bay count')
        sizes: List[float] = []
        for _ in range(count):
            bay = self.cursor.parse(BayEntry, 'bay entry')
            logger.debug(f"Bay {bay.label!r}: {bay.size}")
            sizes.append(bay.size)
        return tuple(sizes)

    def _place_fixed_equipment(self, flags, tech_profile: TechProfile) -> None:
        if flags.case == CASE_MARKER:
            name = "ISCASE" if tech_profile.structure == TechBase.INNER_SPHERE else "CLCASE"
            self._place_named(name, WeaponLocation.REAR, tech_profile.structure)

        if flags.targeting_computer == TARGETING_COMPUTER_PRESENT:
            clan = tech_profile.targeting_computer == TechBase.CLAN
            name = "CLTargeting Computer" if clan else "ISTargeting Computer"
            self._place_named(name, WeaponLocation.BODY, tech_profile.targeting_computer)

        mast, rotor = divmod(flags.vtol_options, 100)
        logger.debug(f"VTOL options {flags.vtol_options}: mast {mast}, rotor {rotor}")

    def _place_named(
        self,
        name: str,
        location: WeaponLocation,
        tech_base: TechBase = TechBase.INNER_SPHERE
    ) -> None:
        symbol = self.resolver.resolve_name(name, tech_base=tech_base)
        if symbol is not None:
            self.placement.add(location, symbol)


def decode_hma(
    data: bytes,
    catalog: SymbolCatalog = DEFAULT_CATALOG,
    known_equipment: Optional[Container[str]] = None
) -> UnitDescriptor:
    """Decode one HMA byte stream.

    Args:
        data: Complete file contents
        catalog: Code tables to resolve equipment against
        known_equipment: Optional registry of names the consumer can build

    Raises:
        HmaDecodeError: If the stream is truncated or holds an unknown
            chassis, engine, tech base or location code, or an ammunition
            quantity that cannot be split into lots
    """
    return HmaDecoder(data, catalog, known_equipment).decode()


class HmaFileParser:
    """Reads and decodes HMA files from disk."""

    def __init__(
        self,
        catalog: SymbolCatalog = DEFAULT_CATALOG,
        known_equipment: Optional[Container[str]] = None
    ):
        self.catalog = catalog
        self.known_equipment = known_equipment

    def parse_file(self, file_path: Union[str, Path]) -> UnitDescriptor:
        """Parse an HMA file.

        Args:
            file_path: Path to HMA file

        Returns:
            Decoded unit
        """
        path = Path(file_path)
        try:
            with open(path, 'rb') as f:
                data = f.read()
            logger.info(f"Parsing {path.name} ({len(data)} bytes)")
            return decode_hma(data, self.catalog, self.known_equipment)
        except HmaDecodeError as e:
            logger.error(f"Failed to decode {path}: {e}")
            raise
