"""Reflected 16-bit CRC family.

This module provides CRC-16 (also known as CRC-16/ARC), CRC-16/Modbus and
CRC-DNP, which share the reflected table-driven update, plus CRC-16/Sick,
which uses its own bitwise recurrence that depends on the previous input byte.
"""

from __future__ import annotations

from typing import Optional

from ..engine.table import BytesLike, CRCTable, Reflection, byte_view, fold

CRC_POLY_16 = 0xA001
CRC_POLY_DNP = 0xA6BC
CRC_POLY_SICK = 0x8005

CRC_START_16 = 0x0000
CRC_START_MODBUS = 0xFFFF
CRC_START_DNP = 0x0000
CRC_START_SICK = 0x0000

CRC16_TABLE = CRCTable(CRC_POLY_16, 16, Reflection.LSB_FIRST)
DNP_TABLE = CRCTable(CRC_POLY_DNP, 16, Reflection.LSB_FIRST)


def swap_bytes(crc: int) -> int:
    """Exchange the two bytes of a 16-bit value."""
    return ((crc & 0xFF00) >> 8) | ((crc & 0x00FF) << 8)


def update_crc_16(crc: int, byte: int) -> int:
    """Update a CRC-16 or CRC-16/Modbus value with the next byte.

    Args:
        crc: Current CRC value
        byte: Next byte of the data (truncated to 8 bits)

    Returns:
        New 16-bit CRC value
    """
    return CRC16_TABLE.update(crc, byte)


def crc_16(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """Calculate the CRC-16 (ARC) checksum of a buffer in one pass.

    Args:
        data: Data to checksum; ``None`` is treated as empty
        length: Number of leading bytes to include (default: all)

    Returns:
        16-bit CRC value

    Example:
        >>> hex(crc_16(b"123456789"))
        '0xbb3d'
    """
    return fold(update_crc_16, CRC_START_16, data, length)


def crc_modbus(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """Calculate the CRC-16/Modbus checksum of a buffer in one pass.

    Identical to :func:`crc_16` except for the 0xFFFF start value.

    Example:
        >>> hex(crc_modbus(b"123456789"))
        '0x4b37'
    """
    return fold(update_crc_16, CRC_START_MODBUS, data, length)


def update_crc_dnp(crc: int, byte: int) -> int:
    """Update a CRC-DNP value with the next byte.

    The returned value is the raw register; apply :func:`finalize_dnp` after
    the last byte.
    """
    return DNP_TABLE.update(crc, byte)


def finalize_dnp(crc: int) -> int:
    """Complement the register and swap its bytes."""
    return swap_bytes(~crc & 0xFFFF)


def crc_dnp(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """Calculate the CRC-DNP checksum of a buffer in one pass.

    The result is complemented and byte-swapped, so it can be appended to a
    DNP3 frame in transmission order.

    Example:
        >>> hex(crc_dnp(b"123456789"))
        '0x82ea'
    """
    return finalize_dnp(fold(update_crc_dnp, CRC_START_DNP, data, length))


def update_crc_sick(crc: int, byte: int, previous_byte: int) -> int:
    """Update a CRC-16/Sick value with the next byte.

    Sick folds each byte together with the one before it, so callers
    streaming data must pass the previously processed byte, or 0 for the
    first byte. Both byte arguments are truncated to 8 bits.

    Args:
        crc: Current CRC value
        byte: Next byte of the data
        previous_byte: Byte processed in the preceding call

    Returns:
        New 16-bit register value (not byte-swapped)
    """
    crc &= 0xFFFF
    if crc & 0x8000:
        crc = ((crc << 1) ^ CRC_POLY_SICK) & 0xFFFF
    else:
        crc = (crc << 1) & 0xFFFF
    return crc ^ ((byte & 0xFF) | ((previous_byte & 0xFF) << 8))


def finalize_sick(crc: int) -> int:
    """Swap the bytes of a CRC-16/Sick register."""
    return swap_bytes(crc)


def crc_sick(data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """Calculate the CRC-16/Sick checksum of a buffer in one pass.

    Args:
        data: Data to checksum; ``None`` is treated as empty
        length: Number of leading bytes to include (default: all)

    Returns:
        16-bit CRC value, byte-swapped
    """
    crc = CRC_START_SICK
    if data is not None:
        previous = 0
        for byte in byte_view(data, length):
            crc = update_crc_sick(crc, byte, previous)
            previous = byte

    return finalize_sick(crc)
