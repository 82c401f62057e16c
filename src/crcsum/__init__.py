"""crcsum: table-driven CRC checksums

A Python library computing the classic CRC variants over byte buffers:
CRC-16, CRC-16/Modbus, CRC-16/Sick, CRC-CCITT with start values 0x0000,
0xFFFF and 0x1D0F, CRC-Kermit, CRC-DNP, CRC-32, CRC-32/CCITT and the ECMA
and WE flavors of CRC-64.

Key Features:
- One-pass functions over whole buffers
- Byte-at-a-time update functions for streaming data
- Lookup tables built once, on first use, and shared between threads
- A catalog to pick variants by name at run time

Quick Start:
    >>> from crcsum import crc_32, update_crc_32, finalize_crc_32
    >>> hex(crc_32(b"123456789"))
    '0xcbf43926'
    >>> crc = 0xFFFFFFFF
    >>> for byte in b"123456789":
    ...     crc = update_crc_32(crc, byte)
    >>> hex(finalize_crc_32(crc))
    '0xcbf43926'
"""

from __future__ import annotations

__version__ = "0.1.0"

from .algorithms import (
    crc_16,
    crc_32,
    crc_64_ecma,
    crc_64_we,
    crc_ccitt32_ffffffff,
    crc_ccitt_0000,
    crc_ccitt_1d0f,
    crc_ccitt_ffff,
    crc_ccitt_generic,
    crc_dnp,
    crc_kermit,
    crc_modbus,
    crc_sick,
    crc_xmodem,
    finalize_crc_32,
    finalize_crc_64_we,
    finalize_dnp,
    finalize_kermit,
    finalize_sick,
    update_crc_16,
    update_crc_32,
    update_crc_64,
    update_crc_ccitt,
    update_crc_ccitt32,
    update_crc_dnp,
    update_crc_kermit,
    update_crc_sick,
)
from .catalog import VARIANTS, Variant, compute, get_variant, list_variants, to_bytes, verify
from .engine import CRCTable, Reflection, generate_table
from .exceptions import CRCError, UnknownVariantError

__all__ = [
    # One-pass
    "crc_16",
    "crc_modbus",
    "crc_sick",
    "crc_dnp",
    "crc_ccitt_0000",
    "crc_xmodem",
    "crc_ccitt_ffff",
    "crc_ccitt_1d0f",
    "crc_ccitt_generic",
    "crc_kermit",
    "crc_32",
    "crc_ccitt32_ffffffff",
    "crc_64_ecma",
    "crc_64_we",
    # Incremental
    "update_crc_16",
    "update_crc_dnp",
    "update_crc_sick",
    "update_crc_ccitt",
    "update_crc_kermit",
    "update_crc_32",
    "update_crc_ccitt32",
    "update_crc_64",
    # Finalization
    "finalize_dnp",
    "finalize_sick",
    "finalize_kermit",
    "finalize_crc_32",
    "finalize_crc_64_we",
    # Catalog
    "Variant",
    "VARIANTS",
    "get_variant",
    "list_variants",
    "compute",
    "to_bytes",
    "verify",
    # Engine
    "CRCTable",
    "Reflection",
    "generate_table",
    # Exceptions
    "CRCError",
    "UnknownVariantError",
    # Version
    "__version__",
]
