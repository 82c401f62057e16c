"""Catalog of the supported CRC variants.

Each named standard is described by a :class:`Variant` and bound to the
one-pass, update and finalize functions of its family. This gives callers a
single entry point that works for any variant chosen at run time.

Example:
    >>> from crcsum.catalog import compute, get_variant
    >>> hex(compute("crc-32", b"123456789"))
    '0xcbf43926'
    >>> get_variant("CRC-16/Modbus").seed
    65535
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .algorithms import crc16, crc32, crc64, crcccitt
from .engine.table import BytesLike
from .exceptions import UnknownVariantError


class Variant(BaseModel):
    """Parameters of a named CRC standard.

    Attributes:
        name: Canonical lower-case name
        label: Human-readable name used in reports
        width: Register width in bits
        polynomial: Generator polynomial, in reflected form when ``reflected`` is set
        seed: Start value of the register
        reflected: True if bits are consumed least-significant first
        xor_output: Value XORed into the register after the last byte
        complement_output: True if the register is bit-complemented after the last byte
        swap_output: True if the two bytes of the result are exchanged
        history: True if each update also depends on the previous input byte
        check: Result over the ASCII bytes "123456789"
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    label: str
    width: int = Field(ge=8, le=64)
    polynomial: int = Field(ge=0)
    seed: int = Field(ge=0)
    reflected: bool
    xor_output: int = Field(default=0, ge=0)
    complement_output: bool = False
    swap_output: bool = False
    history: bool = False
    check: Optional[int] = None

    @property
    def mask(self) -> int:
        """All-ones value of the register width."""
        return (1 << self.width) - 1

    @property
    def digest_size(self) -> int:
        """Size of the CRC in bytes."""
        return self.width // 8


@dataclass(frozen=True)
class _Binding:
    variant: Variant
    one_pass: Callable[..., int]
    update: Callable[[int, int, int], int]
    finalize: Callable[[int], int]


def _stateless(update: Callable[[int, int], int]) -> Callable[[int, int, int], int]:
    def wrapper(crc: int, byte: int, previous_byte: int) -> int:
        return update(crc, byte)

    return wrapper


def _identity(crc: int) -> int:
    return crc


_BINDINGS: Dict[str, _Binding] = {}


def _register(
    variant: Variant,
    one_pass: Callable[..., int],
    update: Callable[[int, int, int], int],
    finalize: Callable[[int], int] = _identity,
) -> Variant:
    _BINDINGS[variant.name] = _Binding(variant, one_pass, update, finalize)
    return variant


CRC_16 = _register(
    Variant(
        name="crc-16",
        label="CRC16",
        width=16,
        polynomial=crc16.CRC_POLY_16,
        seed=crc16.CRC_START_16,
        reflected=True,
        check=0xBB3D,
    ),
    crc16.crc_16,
    _stateless(crc16.update_crc_16),
)

CRC_16_MODBUS = _register(
    Variant(
        name="crc-16/modbus",
        label="CRC16 (Modbus)",
        width=16,
        polynomial=crc16.CRC_POLY_16,
        seed=crc16.CRC_START_MODBUS,
        reflected=True,
        check=0x4B37,
    ),
    crc16.crc_modbus,
    _stateless(crc16.update_crc_16),
)

CRC_16_SICK = _register(
    Variant(
        name="crc-16/sick",
        label="CRC16 (Sick)",
        width=16,
        polynomial=crc16.CRC_POLY_SICK,
        seed=crc16.CRC_START_SICK,
        reflected=False,
        swap_output=True,
        history=True,
        check=0x56A6,
    ),
    crc16.crc_sick,
    crc16.update_crc_sick,
    crc16.finalize_sick,
)

CRC_CCITT_0000 = _register(
    Variant(
        name="crc-ccitt/0000",
        label="CRC-CCITT (0x0000)",
        width=16,
        polynomial=crcccitt.CRC_POLY_CCITT,
        seed=crcccitt.CRC_START_XMODEM,
        reflected=False,
        check=0x31C3,
    ),
    crcccitt.crc_xmodem,
    _stateless(crcccitt.update_crc_ccitt),
)

CRC_CCITT_FFFF = _register(
    Variant(
        name="crc-ccitt/ffff",
        label="CRC-CCITT (0xffff)",
        width=16,
        polynomial=crcccitt.CRC_POLY_CCITT,
        seed=crcccitt.CRC_START_CCITT_FFFF,
        reflected=False,
        check=0x29B1,
    ),
    crcccitt.crc_ccitt_ffff,
    _stateless(crcccitt.update_crc_ccitt),
)

CRC_CCITT_1D0F = _register(
    Variant(
        name="crc-ccitt/1d0f",
        label="CRC-CCITT (0x1d0f)",
        width=16,
        polynomial=crcccitt.CRC_POLY_CCITT,
        seed=crcccitt.CRC_START_CCITT_1D0F,
        reflected=False,
        check=0xE5CC,
    ),
    crcccitt.crc_ccitt_1d0f,
    _stateless(crcccitt.update_crc_ccitt),
)

CRC_KERMIT = _register(
    Variant(
        name="crc-kermit",
        label="CRC-CCITT (Kermit)",
        width=16,
        polynomial=crcccitt.CRC_POLY_KERMIT,
        seed=crcccitt.CRC_START_KERMIT,
        reflected=True,
        swap_output=True,
        check=0x8921,
    ),
    crcccitt.crc_kermit,
    _stateless(crcccitt.update_crc_kermit),
    crcccitt.finalize_kermit,
)

CRC_DNP = _register(
    Variant(
        name="crc-dnp",
        label="CRC-DNP",
        width=16,
        polynomial=crc16.CRC_POLY_DNP,
        seed=crc16.CRC_START_DNP,
        reflected=True,
        complement_output=True,
        swap_output=True,
        check=0x82EA,
    ),
    crc16.crc_dnp,
    _stateless(crc16.update_crc_dnp),
    crc16.finalize_dnp,
)

CRC_32 = _register(
    Variant(
        name="crc-32",
        label="CRC32",
        width=32,
        polynomial=crc32.CRC_POLY_32,
        seed=crc32.CRC_START_32,
        reflected=True,
        xor_output=0xFFFFFFFF,
        check=0xCBF43926,
    ),
    crc32.crc_32,
    _stateless(crc32.update_crc_32),
    crc32.finalize_crc_32,
)

CRC_32_CCITT_EXT = _register(
    Variant(
        name="crc-32/ccitt-ext",
        label="CRC32 (CCITT)",
        width=32,
        polynomial=crc32.CRC_POLY_CCITT32,
        seed=crc32.CRC_START_CCITT32_FFFFFFFF,
        reflected=False,
        check=0x0376E6E7,
    ),
    crc32.crc_ccitt32_ffffffff,
    _stateless(crc32.update_crc_ccitt32),
)

CRC_64_ECMA = _register(
    Variant(
        name="crc-64/ecma",
        label="CRC64 (ECMA)",
        width=64,
        polynomial=crc64.CRC_POLY_64,
        seed=crc64.CRC_START_64_ECMA,
        reflected=False,
        check=0x6C40DF5F0B497347,
    ),
    crc64.crc_64_ecma,
    _stateless(crc64.update_crc_64),
)

CRC_64_WE = _register(
    Variant(
        name="crc-64/we",
        label="CRC64 (WE)",
        width=64,
        polynomial=crc64.CRC_POLY_64,
        seed=crc64.CRC_START_64_WE,
        reflected=False,
        xor_output=0xFFFFFFFFFFFFFFFF,
        check=0x62EC59E3F1A4F00A,
    ),
    crc64.crc_64_we,
    _stateless(crc64.update_crc_64),
    crc64.finalize_crc_64_we,
)

VARIANTS: Dict[str, Variant] = {name: binding.variant for name, binding in _BINDINGS.items()}


def _binding(name: str) -> _Binding:
    try:
        return _BINDINGS[name.lower()]
    except KeyError:
        raise UnknownVariantError(name) from None


def get_variant(name: str) -> Variant:
    """Look up a variant by name (case-insensitive).

    Raises:
        UnknownVariantError: If no variant has that name
    """
    return _binding(name).variant


def list_variants() -> List[Variant]:
    """Return all variants in catalog order."""
    return list(VARIANTS.values())


def compute(name: str, data: Optional[BytesLike], length: Optional[int] = None) -> int:
    """Calculate the CRC of a buffer in one pass using the named variant.

    Args:
        name: Variant name, e.g. ``"crc-16/modbus"``
        data: Data to checksum; ``None`` is treated as empty
        length: Number of leading bytes to include (default: all)

    Returns:
        Finalized CRC value
    """
    return _binding(name).one_pass(data, length)


def update(name: str, crc: int, byte: int, previous_byte: int = 0) -> int:
    """Update a running CRC of the named variant with one byte.

    ``previous_byte`` is only used by variants with ``history`` set and is
    ignored by all others.
    """
    return _binding(name).update(crc, byte, previous_byte)


def finalize(name: str, crc: int) -> int:
    """Apply the named variant's output transform to a running CRC."""
    return _binding(name).finalize(crc)


_STRUCT_FORMATS = {16: ">H", 32: ">I", 64: ">Q"}


def to_bytes(name: str, value: int) -> bytes:
    """Serialize a CRC value big-endian in the variant's width.

    Example:
        >>> to_bytes("crc-32", 0xCBF43926).hex()
        'cbf43926'
    """
    variant = get_variant(name)
    return struct.pack(_STRUCT_FORMATS[variant.width], value & variant.mask)


def verify(name: str, data: Optional[BytesLike], expected_crc: int | bytes) -> bool:
    """Verify data against an expected CRC.

    Args:
        name: Variant name
        data: Data to verify
        expected_crc: Expected CRC value (int, or big-endian bytes of the variant's width)

    Returns:
        True if CRC matches, False otherwise

    Raises:
        ValueError: If ``expected_crc`` is bytes of the wrong length
    """
    variant = get_variant(name)
    if isinstance(expected_crc, (bytes, bytearray)):
        if len(expected_crc) != variant.digest_size:
            raise ValueError(
                f"{variant.label} must be {variant.digest_size} bytes, got {len(expected_crc)}"
            )
        expected_crc = struct.unpack(_STRUCT_FORMATS[variant.width], bytes(expected_crc))[0]

    return compute(name, data) == expected_crc
