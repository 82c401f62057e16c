"""Exception hierarchy for crcsum.

CRC computations themselves never fail: every buffer, byte and register
value is accepted. Errors only arise when looking up variants by name.
All exceptions inherit from CRCError for easy catching of any crcsum-specific error.
"""

from __future__ import annotations


class CRCError(Exception):
    """Base exception for all crcsum errors."""

    pass


class UnknownVariantError(CRCError, KeyError):
    """Raised when a CRC variant name is not in the catalog.

    Examples:
        - Misspelled name (``"crc32"`` instead of ``"crc-32"``)
        - Variant not supported by this library (e.g. CRC-8)
    """

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown CRC variant: {self.name!r}"
