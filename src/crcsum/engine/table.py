"""Lookup table generation and the incremental CRC update.

A CRC family is defined by its width, its generator polynomial and the order
in which bits are fed into the register. Given those, a 256-entry table lets
the register absorb one whole byte per step instead of one bit.

Tables are built on first use and then shared read-only for the lifetime of
the process. Building is guarded so that concurrent first callers produce a
single table and never observe a partially filled one.
"""

from __future__ import annotations

import enum
import logging
import threading
from typing import Callable, Optional, Tuple, Union

BytesLike = Union[bytes, bytearray, memoryview]

_logger = logging.getLogger(__name__)


class Reflection(enum.Enum):
    """Bit order in which the register consumes input."""

    MSB_FIRST = "msb-first"
    """Non-reflected: the top bit of the register is tested and the register shifts left."""

    LSB_FIRST = "lsb-first"
    """Reflected: the low bit is tested and the register shifts right."""


def generate_table(polynomial: int, width: int, reflection: Reflection) -> Tuple[int, ...]:
    """Generate the 256-entry lookup table for a CRC family.

    The result depends only on the arguments, so two independent generations
    always produce identical tables.

    Args:
        polynomial: Generator polynomial. For LSB-first families this is the
            bit-reversed form (e.g. 0xEDB88320 for CRC-32).
        width: Register width in bits (8 or more)
        reflection: Bit order of the family

    Returns:
        Tuple of 256 register values

    Example:
        >>> table = generate_table(0xEDB88320, 32, Reflection.LSB_FIRST)
        >>> hex(table[1])
        '0x77073096'
    """
    if width < 8:
        raise ValueError(f"CRC width must be at least 8 bits, got {width}")

    mask = (1 << width) - 1
    top_bit = 1 << (width - 1)
    entries = []

    for i in range(256):
        if reflection is Reflection.LSB_FIRST:
            crc = i
            for _ in range(8):
                if crc & 1:
                    crc = (crc >> 1) ^ polynomial
                else:
                    crc >>= 1
        else:
            crc = i << (width - 8)
            for _ in range(8):
                if crc & top_bit:
                    crc = (crc << 1) ^ polynomial
                else:
                    crc <<= 1
                crc &= mask

        entries.append(crc & mask)

    return tuple(entries)


class CRCTable:
    """Lookup table context for one CRC family.

    The table itself is generated lazily, the first time :attr:`entries` is
    read (which every :meth:`update` does). The instance holds no
    per-computation state: the running CRC is always passed in and returned.

    Attributes:
        polynomial: Generator polynomial in the form matching ``reflection``
        width: Register width in bits
        reflection: Bit order of the family
        mask: All-ones value of the register width

    Example:
        >>> table = CRCTable(0x1021, 16, Reflection.MSB_FIRST)
        >>> table.initialized
        False
        >>> table.update(0x0000, 0x00)
        0
        >>> table.initialized
        True
    """

    def __init__(self, polynomial: int, width: int, reflection: Reflection) -> None:
        self.polynomial = polynomial
        self.width = width
        self.reflection = reflection
        self.mask = (1 << width) - 1
        self._shift = width - 8
        self._entries: Optional[Tuple[int, ...]] = None
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(polynomial=0x{self.polynomial:0{self.width // 4}X}, "
            f"width={self.width}, reflection={self.reflection.name})"
        )

    @property
    def initialized(self) -> bool:
        """True once the table has been built."""
        return self._entries is not None

    @property
    def entries(self) -> Tuple[int, ...]:
        """The 256 table entries, built on first access."""
        entries = self._entries
        if entries is None:
            with self._lock:
                if self._entries is None:
                    self._entries = generate_table(self.polynomial, self.width, self.reflection)
                    _logger.debug("Built lookup table %r", self)
                entries = self._entries
        return entries

    def update(self, crc: int, byte: int) -> int:
        """Absorb one byte into a running CRC.

        Values outside 0..255 are truncated to their low 8 bits and the CRC to
        the register width; neither is rejected.

        Args:
            crc: Current register value
            byte: Next input byte

        Returns:
            New register value
        """
        entries = self.entries
        crc &= self.mask
        if self.reflection is Reflection.LSB_FIRST:
            return (crc >> 8) ^ entries[(crc ^ byte) & 0xFF]
        return ((crc << 8) & self.mask) ^ entries[((crc >> self._shift) ^ byte) & 0xFF]


def byte_view(data: BytesLike, length: Optional[int] = None) -> memoryview:
    """Return the leading bytes of a buffer as a flat unsigned-byte view.

    Non-contiguous views (e.g. strided slices) are copied first.
    """
    view = memoryview(data)
    if not view.c_contiguous:
        view = memoryview(view.tobytes())
    view = view.cast("B")
    if length is not None:
        view = view[: max(length, 0)]
    return view


def fold(
    update: Callable[[int, int], int],
    seed: int,
    data: Optional[BytesLike],
    length: Optional[int] = None,
) -> int:
    """Fold an update function over the bytes of a buffer.

    Args:
        update: ``(crc, byte) -> crc`` primitive
        seed: Initial register value
        data: Input buffer; ``None`` is treated as empty
        length: Number of leading bytes to process (default: all of them)

    Returns:
        Register value after the last byte, without any finalization
    """
    crc = seed
    if data is None:
        return crc

    for byte in byte_view(data, length):
        crc = update(crc, byte)

    return crc
