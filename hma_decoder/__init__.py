"""
HMA aerospace unit decoder.
Reads HMA design files into immutable UnitDescriptor objects.
"""

from .catalog import DEFAULT_CATALOG, EquipmentResolver, SymbolCatalog, reconcile
from .diagnostics import report_unresolved, summarize_unresolved
from .errors import (
    AmmoReconciliationError,
    HmaDecodeError,
    TruncatedInput,
    UnknownCodeError,
    UnsupportedUnitError,
)
from .model import EquipmentSymbol, UnitDescriptor, UnresolvedSymbol
from .parser.file_parser import HmaFileParser, decode_hma

__version__ = '0.1.0'

__all__ = [
    'DEFAULT_CATALOG',
    'EquipmentResolver',
    'SymbolCatalog',
    'reconcile',
    'report_unresolved',
    'summarize_unresolved',
    'AmmoReconciliationError',
    'HmaDecodeError',
    'TruncatedInput',
    'UnknownCodeError',
    'UnsupportedUnitError',
    'EquipmentSymbol',
    'UnitDescriptor',
    'UnresolvedSymbol',
    'HmaFileParser',
    'decode_hma',
]
