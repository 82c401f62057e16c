"""CRC-CCITT family.

The three CRC-CCITT variants use the non-reflected 0x1021 polynomial and
differ only in their start value. CRC-Kermit uses the same polynomial in
reflected form and byte-swaps its result.
"""

from __future__ import annotations

from typing import Optional

from ..engine.table import BytesLike, CRCTable, Reflection, fold
from .crc16 import swap_bytes

CRC_POLY_CCITT = 0x1021
CRC_POLY_KERMIT = 0x8408

CRC_START_XMODEM = 0x0000
CRC_START_CCITT_1D0F = 0x1D0F
CRC_START_CCITT_FFFF = 0xFFFF
CRC_START_KERMIT = 0x0000

CCITT_TABLE = CRCTable(CRC_POLY_CCITT, 16, Reflection.MSB_FIRST)
KERMIT_TABLE = CRCTable(CRC_POLY_KERMIT, 16, Reflection.LSB_FIRST)


def update_crc_ccitt(crc: int, byte: int) -> int:
    """Update a CRC-CCITT value with the next byte.

    Used by all three start-value variants.

    Args:
        crc: Current CRC value
        byte: Next byte of the data (truncated to 8 bits)

    Returns:
        New 16-bit CRC value
    """
    return CCITT_TABLE.update(crc, byte)


def crc_ccitt_generic(data: Optional[BytesLike], start_value: int, length: Optional[int] = None) -> int:
    """Calculate a CRC-CCITT checksum with an arbitrary start value."""
    return fold(update_crc_ccitt, start_value, data, length)


def crc_xmodem(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """Calculate the CRC-CCITT checksum with start value 0x0000 (XModem).

    Example:
        >>> hex(crc_xmodem(b"123456789"))
        '0x31c3'
    """
    return crc_ccitt_generic(data, CRC_START_XMODEM, length)


def crc_ccitt_1d0f(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """Calculate the CRC-CCITT checksum with start value 0x1D0F."""
    return crc_ccitt_generic(data, CRC_START_CCITT_1D0F, length)


def crc_ccitt_ffff(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """Calculate the CRC-CCITT checksum with start value 0xFFFF.

    Example:
        >>> hex(crc_ccitt_ffff(b"123456789"))
        '0x29b1'
    """
    return crc_ccitt_generic(data, CRC_START_CCITT_FFFF, length)


crc_ccitt_0000 = crc_xmodem


def update_crc_kermit(crc: int, byte: int) -> int:
    """Update a CRC-Kermit value with the next byte.

    The returned value is the raw register; apply :func:`finalize_kermit`
    after the last byte.
    """
    return KERMIT_TABLE.update(crc, byte)


def finalize_kermit(crc: int) -> int:
    """Swap the bytes of a CRC-Kermit register."""
    return swap_bytes(crc)


def crc_kermit(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """Calculate the CRC-Kermit checksum of a buffer in one pass.

    The register value over "123456789" is 0x2189; it is returned with its
    bytes swapped, low byte first.

    Example:
        >>> hex(crc_kermit(b"123456789"))
        '0x8921'
    """
    return finalize_kermit(fold(update_crc_kermit, CRC_START_KERMIT, data, length))
