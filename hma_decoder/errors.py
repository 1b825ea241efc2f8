"""Errors raised while decoding HMA files."""
from typing import Optional


class HmaDecodeError(Exception):
    """Raised when an HMA file cannot be decoded.

    No partial unit is ever returned alongside this error.
    """
    pass


class TruncatedInput(HmaDecodeError):
    """Raised when the stream ends before a field could be read."""

    def __init__(self, message: str, offset: int):
        super().__init__(message)
        self.offset = offset


class UnknownCodeError(HmaDecodeError):
    """Raised for a code outside one of the closed enumerations."""

    def __init__(self, field: str, code: int, offset: Optional[int] = None):
        where = f" at offset {offset}" if offset is not None else ""
        super().__init__(f"Unknown {field} code {code}{where}")
        self.field = field
        self.code = code
        self.offset = offset


class AmmoReconciliationError(HmaDecodeError):
    """Raised when an ammunition quantity fits no known lot size."""
    pass


class UnsupportedUnitError(HmaDecodeError):
    """Raised when a decoded unit class cannot be turned into an entity."""
    pass
