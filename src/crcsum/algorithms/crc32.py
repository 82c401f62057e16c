"""32-bit CRC family.

This module provides the standard reflected CRC-32 (IEEE 802.3, as used by
zlib) and the non-reflected CCITT32 variant with start value 0xFFFFFFFF.
"""

from __future__ import annotations

from typing import Optional

from ..engine.table import BytesLike, CRCTable, Reflection, fold

CRC_POLY_32 = 0xEDB88320
CRC_POLY_CCITT32 = 0x04C11DB7

CRC_START_32 = 0xFFFFFFFF
CRC_START_CCITT32_FFFFFFFF = 0xFFFFFFFF

CRC32_TABLE = CRCTable(CRC_POLY_32, 32, Reflection.LSB_FIRST)
CCITT32_TABLE = CRCTable(CRC_POLY_CCITT32, 32, Reflection.MSB_FIRST)


def update_crc_32(crc: int, byte: int) -> int:
    """Update a CRC-32 value with the next byte.

    Args:
        crc: Current CRC value (start with 0xFFFFFFFF)
        byte: Next byte of the data (truncated to 8 bits)

    Returns:
        New 32-bit register value, before the final complement
    """
    return CRC32_TABLE.update(crc, byte)


def finalize_crc_32(crc: int) -> int:
    """Apply the final XOR with 0xFFFFFFFF."""
    return (crc ^ 0xFFFFFFFF) & 0xFFFFFFFF


def crc_32(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """Calculate the CRC-32 checksum of a buffer in one pass.

    Compatible with ``zlib.crc32()`` and ``binascii.crc32()``.

    Example:
        >>> hex(crc_32(b"123456789"))
        '0xcbf43926'
    """
    return finalize_crc_32(fold(update_crc_32, CRC_START_32, data, length))


def update_crc_ccitt32(crc: int, byte: int) -> int:
    """Update a CRC-CCITT32 value with the next byte."""
    return CCITT32_TABLE.update(crc, byte)


def crc_ccitt32_ffffffff(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """Calculate the CRC-CCITT32 checksum with start value 0xFFFFFFFF.

    No final XOR is applied.

    Example:
        >>> hex(crc_ccitt32_ffffffff(b"123456789"))
        '0x376e6e7'
    """
    return fold(update_crc_ccitt32, CRC_START_CCITT32_FFFFFFFF, data, length)
