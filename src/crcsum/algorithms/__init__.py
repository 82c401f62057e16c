"""CRC algorithms grouped by family.

Every variant offers a one-pass function over a whole buffer and an
incremental ``update_*`` function over a single byte.
"""

from __future__ import annotations

from .crc16 import (
    crc_16,
    crc_dnp,
    crc_modbus,
    crc_sick,
    finalize_dnp,
    finalize_sick,
    swap_bytes,
    update_crc_16,
    update_crc_dnp,
    update_crc_sick,
)
from .crc32 import crc_32, crc_ccitt32_ffffffff, finalize_crc_32, update_crc_32, update_crc_ccitt32
from .crc64 import crc_64_ecma, crc_64_we, finalize_crc_64_we, update_crc_64
from .crcccitt import (
    crc_ccitt_0000,
    crc_ccitt_1d0f,
    crc_ccitt_ffff,
    crc_ccitt_generic,
    crc_kermit,
    crc_xmodem,
    finalize_kermit,
    update_crc_ccitt,
    update_crc_kermit,
)

__all__ = [
    # CRC-16
    "crc_16",
    "crc_modbus",
    "update_crc_16",
    "crc_dnp",
    "update_crc_dnp",
    "finalize_dnp",
    "crc_sick",
    "update_crc_sick",
    "finalize_sick",
    "swap_bytes",
    # CRC-CCITT
    "crc_ccitt_generic",
    "crc_ccitt_0000",
    "crc_xmodem",
    "crc_ccitt_ffff",
    "crc_ccitt_1d0f",
    "update_crc_ccitt",
    "crc_kermit",
    "update_crc_kermit",
    "finalize_kermit",
    # CRC-32
    "crc_32",
    "update_crc_32",
    "finalize_crc_32",
    "crc_ccitt32_ffffffff",
    "update_crc_ccitt32",
    # CRC-64
    "crc_64_ecma",
    "crc_64_we",
    "update_crc_64",
    "finalize_crc_64_we",
]
