"""Forward-only byte cursor over an HMA stream."""
import io
import logging
from typing import Any

from construct import (
    Bytes,
    Construct,
    Float32l,
    GreedyBytes,
    Int16ul,
    Padding,
    PascalString,
    Prefixed,
    StreamError,
)

from ..errors import TruncatedInput
from .constants import TEXT_ENCODING

logger = logging.getLogger(__name__)

# HMA stores 16-bit values as a low byte followed by a high byte.
UInt16 = Int16ul
# 32-bit floats are stored byte-reversed relative to a big-endian word.
Float32 = Float32l
PrefixedBlob = Prefixed(UInt16, GreedyBytes)
PrefixedText = PascalString(UInt16, TEXT_ENCODING)


class HmaCursor:
    """Reads HMA primitives from an in-memory buffer.

    The cursor never moves backwards. Every read that runs past the end of
    the buffer raises TruncatedInput with the offset the read started at.
    """

    def __init__(self, data: bytes):
        self._stream = io.BytesIO(data)
        self._size = len(data)

    @property
    def offset(self) -> int:
        return self._stream.tell()

    @property
    def remaining(self) -> int:
        return self._size - self.offset

    @property
    def exhausted(self) -> bool:
        return self.remaining <= 0

    def parse(self, subcon: Construct, what: str) -> Any:
        """Parse a construct layout at the current offset.

        Args:
            subcon: Layout to parse
            what: Field description used in error messages

        Raises:
            TruncatedInput: If the stream ends inside the layout
        """
        start = self.offset
        try:
            return subcon.parse_stream(self._stream)
        except StreamError as e:
            raise TruncatedInput(
                f"Truncated input reading {what} at offset {start} "
                f"({self._size - start} bytes left)",
                offset=start
            ) from e

    def read_u16(self, what: str = 'u16') -> int:
        return self.parse(UInt16, what)

    def read_float32(self, what: str = 'float32') -> float:
        return self.parse(Float32, what)

    def read_blob(self, size: int, what: str = 'blob') -> bytes:
        return self.parse(Bytes(size), what)

    def read_prefixed_blob(self, what: str = 'blob') -> bytes:
        return self.parse(PrefixedBlob, what)

    def read_text(self, what: str = 'text') -> str:
        return self.parse(PrefixedText, what)

    def skip(self, size: int, what: str = 'padding') -> None:
        if size:
            logger.debug(f"Skipping {size} bytes of {what} at offset {self.offset}")
            self.parse(Padding(size), what)
