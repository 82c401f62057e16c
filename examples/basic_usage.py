#!/usr/bin/env python3
"""Basic usage example for crcsum.

This example demonstrates:
1. One-pass CRCs over a whole buffer
2. Byte-at-a-time updates for streamed data
3. Picking a variant by name from the catalog
"""

from __future__ import annotations

from crcsum import (
    compute,
    crc_16,
    crc_32,
    crc_kermit,
    finalize_crc_32,
    list_variants,
    update_crc_32,
)


def main() -> None:
    """Run the basic usage example."""
    data = b"123456789"

    print("=" * 60)
    print("crcsum Basic Usage Example")
    print("=" * 60)
    print()

    print("1. One-pass calculation...")
    print(f"   CRC-16:     0x{crc_16(data):04X}")
    print(f"   CRC-Kermit: 0x{crc_kermit(data):04X}")
    print(f"   CRC-32:     0x{crc_32(data):08X}")
    print()

    print("2. Incremental calculation...")
    crc = 0xFFFFFFFF
    for byte in data:
        crc = update_crc_32(crc, byte)
    print(f"   CRC-32:     0x{finalize_crc_32(crc):08X}")
    print()

    print("3. All catalog variants...")
    for variant in list_variants():
        value = compute(variant.name, data)
        print(f"   {variant.label:<20} 0x{value:0{variant.width // 4}X}")


if __name__ == "__main__":
    main()
