"""
Builders for synthetic HMA byte streams
"""
import struct
from typing import Iterable, Optional, Sequence, Tuple

# (stack count, code, location, ammo, manufacturer)
Weapon = Tuple[int, int, int, int, str]

EMPTY_FLUFF = ('',) * 6


def u16(value: int) -> bytes:
    return struct.pack('<H', value)


def text(value: str) -> bytes:
    """Length prefixed Latin-1 text"""
    data = value.encode('latin-1')
    return u16(len(data)) + data


def blob(value: bytes) -> bytes:
    return u16(len(value)) + value


def tech_region(tech: int, components: Optional[Sequence[int]] = None) -> bytes:
    """92 byte tech region"""
    data = u16(tech)
    if components is not None:
        data += struct.pack('<4H', *components)
    return data + b'\x00' * (92 - len(data))


def armor_block(front: int, left: int, right: int, rear: int) -> bytes:
    return (
        u16(front) + b'\x00' * 2 +
        u16(left) + b'\x00' * 10 +
        u16(rear) + b'\x00' * 2 +
        u16(right) + b'\x00' * 2 +
        b'\x00' * 8
    )


def weapon_entry(stack: int, code: int, location: int, ammo: int = 0,
                 manufacturer: str = '') -> bytes:
    return (
        u16(stack) + u16(code) + text(manufacturer) +
        u16(location) + u16(ammo) + b'\x00' * 4
    )


def build_hma(
    name: str = 'Test Fighter',
    chassis: int = 1,
    version: bytes = b'V1.00',
    design_flags: int = 1,
    rules_level: int = 2,
    year: int = 3050,
    capability: bytes = b'',
    tech: int = 0,
    components: Optional[Sequence[int]] = None,
    engine_rating: int = 200,
    engine_kind: int = 1,
    cruise_speed: int = 5,
    armor: Tuple[int, int, int, int] = (10, 8, 8, 6),
    weapons: Iterable[Weapon] = (),
    bays: Iterable[Tuple[float, str]] = (),
    case: int = 0,
    targeting_computer: int = 0,
    artemis: int = 0,
    vtol_options: int = 0,
    fluff: Sequence[str] = EMPTY_FLUFF,
    notes: bytes = b'',
    supercharger: int = 0,
    trailing: bytes = b''
) -> bytes:
    """Build a complete HMA stream. Armor is (front, left, right, rear)."""
    if tech == 2 and components is None:
        components = (0, 0, 0, 0)
    omni = b'omni' in capability

    data = version + u16(design_flags) + u16(chassis)
    data += b'\x00' * 18
    data += text(name)
    data += b'\x00' * 3
    data += u16(rules_level) + u16(year)
    data += b'\x00' * 40
    data += blob(capability)
    data += tech_region(tech, components)
    data += u16(engine_rating) + u16(engine_kind) + u16(cruise_speed)
    data += armor_block(*armor)
    data += b'\x00' * (12 if omni else 14)

    weapons = list(weapons)
    data += u16(len(weapons))
    for stack, code, location, ammo, manufacturer in weapons:
        data += weapon_entry(stack, code, location, ammo, manufacturer)

    bays = list(bays)
    data += u16(len(bays))
    for size, label in bays:
        data += struct.pack('<f', size) + text(label)

    data += b'\x00' * 12
    data += u16(case) + u16(targeting_computer) + u16(artemis)
    data += b'\x00' * 4
    data += u16(vtol_options)
    data += b'\x00' * 4

    for section in fluff:
        data += text(section)
    data += blob(notes)
    data += u16(supercharger)
    return data + trailing


def weapon(code: int, location: int = 1, stack: int = 1, ammo: int = 0,
           manufacturer: str = 'Defiance') -> Weapon:
    return (stack, code, location, ammo, manufacturer)
