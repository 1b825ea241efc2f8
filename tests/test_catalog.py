"""
Tests for the symbol catalog, equipment resolver and ammunition reconciler
"""
import pytest

from hma_decoder.catalog import (
    AMMO_TYPES,
    DEFAULT_CATALOG,
    AmmoFamily,
    EquipmentResolver,
    MissileFamily,
    SymbolCatalog,
    reconcile,
)
from hma_decoder.catalog import tables
from hma_decoder.errors import AmmoReconciliationError
from hma_decoder.model import EquipmentSymbol, UnresolvedReason
from hma_decoder.parser.constants import TechBase

IS = TechBase.INNER_SPHERE
CLAN = TechBase.CLAN
MIXED = TechBase.MIXED


class TestSymbolCatalog:
    """Code lookup per tech base"""

    def test_generic_codes_resolve_for_every_tech_base(self):
        for tech_base in TechBase:
            assert DEFAULT_CATALOG.equipment_name(0x0B, tech_base) == "Jump Jet"
            assert DEFAULT_CATALOG.equipment_name(0x15, tech_base) == "Ferro-Fibrous"
            assert DEFAULT_CATALOG.equipment_name(0x09, tech_base) == "Heat Sink"

    def test_generic_table_wins_over_tech_table(self):
        catalog = SymbolCatalog(
            equipment={IS: {0x0B: "Something Else", 0x33: "ISERLargeLaser"}},
            ammo={IS: {}},
            generic={0x0B: "Jump Jet"},
        )
        assert catalog.equipment_name(0x0B, IS) == "Jump Jet"
        assert catalog.equipment_name(0x33, IS) == "ISERLargeLaser"

    def test_tech_tables_do_not_repeat_generic_codes(self):
        for table in (tables.IS_EQUIPMENT, tables.CLAN_EQUIPMENT, tables.MIXED_EQUIPMENT_OVERLAY):
            assert not set(table) & set(tables.GENERIC_EQUIPMENT)

    def test_tech_tables_differ(self):
        assert DEFAULT_CATALOG.equipment_name(0x34, IS) == "ISERPPC"
        assert DEFAULT_CATALOG.equipment_name(0x34, CLAN) == "CLERMediumLaser"

    def test_mixed_inherits_inner_sphere(self):
        assert DEFAULT_CATALOG.equipment_name(0x4F, MIXED) == "ISMachine Gun"
        assert DEFAULT_CATALOG.equipment_name(0x60, MIXED) == "ISLRM5"

    def test_mixed_overlay(self):
        assert DEFAULT_CATALOG.equipment_name(0xBA, MIXED) == "CLMG"
        assert DEFAULT_CATALOG.equipment_name(0xBA, IS) is None
        assert DEFAULT_CATALOG.ammo_name(0xBA, MIXED) == "CLMG Ammo"

    def test_mixed_overlay_one_shot_launchers(self):
        assert DEFAULT_CATALOG.equipment_name(0xD4, MIXED) == "CLSRM2 (OS)"
        assert DEFAULT_CATALOG.equipment_name(0xD5, MIXED) == "CLSRM4 (OS)"
        assert DEFAULT_CATALOG.equipment_name(0xD6, MIXED) == "CLSRM6 (OS)"

    def test_high_codes_are_masked(self):
        assert SymbolCatalog.normalize_code(0x10009) == 0x0009
        assert SymbolCatalog.normalize_code(0x7FFF) == 0x7FFF
        assert DEFAULT_CATALOG.equipment_name(0x1000B, CLAN) == "Jump Jet"

    def test_sentinels(self):
        for code in (0x00, 0x07, 0x08, 0x0F):
            assert DEFAULT_CATALOG.is_sentinel(code)
        assert not DEFAULT_CATALOG.is_sentinel(0x0B)

    def test_companion_ammo(self):
        ammo = DEFAULT_CATALOG.ammo_for_code(0x3F, IS)
        assert ammo.name == "ISAC5 Ammo"
        assert ammo.shots_per_lot == 20
        assert DEFAULT_CATALOG.ammo_for_code(0x38, IS) is None

    def test_every_ammo_name_has_a_lot_size(self):
        for table in (tables.IS_AMMO, tables.CLAN_AMMO, tables.MIXED_AMMO_OVERLAY):
            for name in table.values():
                assert name in AMMO_TYPES, name

    def test_ammo_tech_from_prefix(self):
        assert AMMO_TYPES["CLGauss Ammo"].tech_base == CLAN
        assert AMMO_TYPES["ISGauss Ammo"].tech_base == IS
        assert AMMO_TYPES["Long Tom Cannon Ammo"].tech_base == IS

    @pytest.mark.parametrize("name,expected", [
        ("ISLRM10", (MissileFamily.LRM, IS)),
        ("CLLRM20 (OS)", (MissileFamily.LRM, CLAN)),
        ("ISSRM4 (I-OS)", (MissileFamily.SRM, IS)),
        ("CLSRM6", (MissileFamily.SRM, CLAN)),
        ("ISStreakSRM2", None),
        ("ISMRM10", None),
        ("CLLRTorpedo5", None),
        ("CLATM6", None),
    ])
    def test_launcher_family(self, name, expected):
        assert SymbolCatalog.launcher_family(name) == expected


class TestEquipmentResolver:
    """Soft failure handling"""

    def test_known_code(self):
        resolver = EquipmentResolver()
        symbol = resolver.resolve_equipment(0x38, IS)
        assert symbol == EquipmentSymbol("ISMediumLaser")
        assert symbol.code == 0x38
        assert resolver.unresolved == ()

    def test_sentinels_are_silent(self):
        resolver = EquipmentResolver()
        for code in (0x00, 0x07, 0x08, 0x0F):
            assert resolver.resolve_equipment(code, IS) is None
        assert resolver.unresolved == ()

    def test_unknown_code_is_recorded(self):
        resolver = EquipmentResolver()
        assert resolver.resolve_equipment(0x01, CLAN) is None
        assert len(resolver.unresolved) == 1
        entry = resolver.unresolved[0]
        assert entry.code == 0x01
        assert entry.reason is UnresolvedReason.UNKNOWN_CODE
        assert entry.description == "unknown code 0x01 for tech base Clan"

    def test_unavailable_equipment(self):
        resolver = EquipmentResolver(known_equipment={"ISMediumLaser"})
        assert resolver.resolve_equipment(0x38, IS) is not None
        assert resolver.resolve_equipment(0x39, IS) is None
        entry, = resolver.unresolved
        assert entry.reason is UnresolvedReason.UNAVAILABLE
        assert entry.name == "ISSmallLaser"
        assert entry.code == 0x39

    def test_resolve_ammo_without_companion(self):
        resolver = EquipmentResolver()
        assert resolver.resolve_ammo(0x38, IS) is None
        assert resolver.unresolved == ()

    def test_symbols_compare_by_name(self):
        assert EquipmentSymbol("ISCASE", 0x19) == EquipmentSymbol("ISCASE")
        assert hash(EquipmentSymbol("ISCASE", 0x19)) == hash(EquipmentSymbol("ISCASE"))


class TestReconcile:
    """Ammunition lot reconciliation"""

    def test_exact_multiple(self):
        ammo = AMMO_TYPES["ISAC5 Ammo"]
        assert reconcile(40, ammo) == (ammo, 2)

    def test_inner_sphere_mg_half_lot(self):
        ammo, lots = reconcile(300, AMMO_TYPES["ISMG Ammo (200)"])
        assert ammo.name == "ISMG Ammo (100)"
        assert lots == 3

    def test_clan_mg_half_lot(self):
        ammo, lots = reconcile(100, AMMO_TYPES["CLMG Ammo (200)"])
        assert ammo.name == "CLMG Ammo (100)"
        assert lots == 1

    def test_mixed_overlay_mg_is_clan(self):
        ammo, lots = reconcile(500, AMMO_TYPES["CLMG Ammo"])
        assert ammo.name == "CLMG Ammo (100)"
        assert lots == 5

    def test_light_and_heavy_mg(self):
        ammo, lots = reconcile(300, AMMO_TYPES["CLLightMG Ammo (200)"])
        assert (ammo.name, lots) == ("CLLightMG Ammo (100)", 3)
        ammo, lots = reconcile(150, AMMO_TYPES["CLHeavyMG Ammo (100)"])
        assert (ammo.name, lots) == ("CLHeavyMG Ammo (50)", 3)

    def test_leftover_shots_are_dropped(self):
        ammo, lots = reconcile(250, AMMO_TYPES["ISMG Ammo (200)"])
        assert (ammo.name, lots) == ("ISMG Ammo (100)", 2)

    def test_below_half_lot_places_nothing(self):
        ammo, lots = reconcile(50, AMMO_TYPES["ISMG Ammo (200)"])
        assert lots == 0

    def test_other_families_are_fatal(self):
        with pytest.raises(AmmoReconciliationError):
            reconcile(30, AMMO_TYPES["ISAC5 Ammo"])

    def test_families(self):
        assert AMMO_TYPES["ISMG Ammo (200)"].family is AmmoFamily.MACHINE_GUN
        assert AMMO_TYPES["CLHeavyMG Ammo"].family is AmmoFamily.HEAVY_MACHINE_GUN
        assert AMMO_TYPES["ISLRM5 Ammo"].family is AmmoFamily.GENERAL

    @pytest.mark.parametrize("name", [
        "ISMG Ammo (200)",
        "CLLightMG Ammo (200)",
        "CLHeavyMG Ammo (100)",
    ])
    def test_conservation_and_maximality(self, name):
        ammo = AMMO_TYPES[name]
        for requested in range(1, 1001):
            placed, lots = reconcile(requested, ammo)
            allocated = lots * placed.shots_per_lot
            assert allocated <= requested
            assert requested - allocated < placed.shots_per_lot
