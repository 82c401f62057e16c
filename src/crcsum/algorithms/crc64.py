"""64-bit CRC family.

CRC-64/ECMA-182 and CRC-64/WE share the non-reflected 0x42F0E1EBA9EA3693
polynomial. WE starts from all ones and complements its result.
"""

from __future__ import annotations

from typing import Optional

from ..engine.table import BytesLike, CRCTable, Reflection, fold

CRC_POLY_64 = 0x42F0E1EBA9EA3693

CRC_START_64_ECMA = 0x0000000000000000
CRC_START_64_WE = 0xFFFFFFFFFFFFFFFF

CRC64_TABLE = CRCTable(CRC_POLY_64, 64, Reflection.MSB_FIRST)


def update_crc_64(crc: int, byte: int) -> int:
    """Update a CRC-64 (ECMA or WE) value with the next byte.

    Args:
        crc: Current CRC value
        byte: Next byte of the data (truncated to 8 bits)

    Returns:
        New 64-bit register value
    """
    return CRC64_TABLE.update(crc, byte)


def finalize_crc_64_we(crc: int) -> int:
    """Apply the final XOR with all ones."""
    return (crc ^ 0xFFFFFFFFFFFFFFFF) & 0xFFFFFFFFFFFFFFFF


def crc_64_ecma(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """Calculate the CRC-64/ECMA-182 checksum of a buffer in one pass.

    Example:
        >>> hex(crc_64_ecma(b"123456789"))
        '0x6c40df5f0b497347'
    """
    return fold(update_crc_64, CRC_START_64_ECMA, data, length)


def crc_64_we(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """Calculate the CRC-64/WE checksum of a buffer in one pass.

    Example:
        >>> hex(crc_64_we(b"123456789"))
        '0x62ec59e3f1a4f00a'
    """
    return finalize_crc_64_we(fold(update_crc_64, CRC_START_64_WE, data, length))
