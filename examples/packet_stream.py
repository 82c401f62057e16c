#!/usr/bin/env python3
"""Protect a stream of packets with a trailing CRC-16/Modbus.

Each packet is sent as payload followed by its CRC in big-endian order.
The receiver recomputes the CRC and drops packets that do not match.
"""

from __future__ import annotations

import random

from crcsum import compute, to_bytes, verify

VARIANT = "crc-16/modbus"


def make_frame(payload: bytes) -> bytes:
    """Append the CRC to a payload."""
    return payload + to_bytes(VARIANT, compute(VARIANT, payload))


def check_frame(frame: bytes) -> bool:
    """Check a received frame."""
    return verify(VARIANT, frame[:-2], frame[-2:])


def main() -> None:
    """Send a few packets over a noisy channel."""
    rng = random.Random(1)
    payloads = [bytes(rng.getrandbits(8) for _ in range(16)) for _ in range(5)]

    for i, payload in enumerate(payloads):
        frame = bytearray(make_frame(payload))
        if i == 2:
            frame[3] ^= 0x40  # single bit error
        status = "ok" if check_frame(bytes(frame)) else "CRC mismatch, dropped"
        print(f"packet {i}: {bytes(frame).hex()} {status}")


if __name__ == "__main__":
    main()
