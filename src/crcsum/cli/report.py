"""CRC report for text, hexadecimal or file input."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, TextIO

from ..catalog import Variant, finalize, list_variants, update

_HEX_DIGITS = "0123456789abcdefABCDEF"
_CHUNK_SIZE = 64 * 1024


def parse_hex(text: str) -> bytes:
    """Decode a line of hexadecimal digits.

    Characters that are not hex digits are skipped. An odd trailing digit
    becomes the high nibble of a final byte whose low nibble is zero.

    Example:
        >>> parse_hex("31 32 3")
        b'120'
    """
    nibbles = [int(ch, 16) for ch in text if ch in _HEX_DIGITS]
    if len(nibbles) % 2:
        nibbles.append(0)
    return bytes((nibbles[i] << 4) | nibbles[i + 1] for i in range(0, len(nibbles), 2))


def iter_file(path: Path) -> Iterator[int]:
    """Yield the bytes of a file one at a time."""
    with open(path, "rb") as f:
        while True:
            chunk = f.read(_CHUNK_SIZE)
            if not chunk:
                return
            yield from chunk


def compute_all(data: Iterable[int], variants: Optional[List[Variant]] = None) -> Dict[str, int]:
    """Feed a byte stream through every variant's incremental update.

    Args:
        data: Input bytes
        variants: Variants to compute (default: the whole catalog)

    Returns:
        Finalized CRC per variant name, in catalog order
    """
    if variants is None:
        variants = list_variants()

    state = {variant.name: variant.seed for variant in variants}
    previous = 0
    for byte in data:
        for name, crc in state.items():
            state[name] = update(name, crc, byte, previous)
        previous = byte

    return {name: finalize(name, crc) for name, crc in state.items()}


def format_results(title: str, results: Dict[str, int], out: TextIO) -> None:
    """Print one line per variant with hexadecimal and decimal values."""
    print(f"{title} :", file=out)
    if not results:
        return

    variants = {variant.name: variant for variant in list_variants()}
    label_width = max(len(variants[name].label) for name in results)
    hex_width = max(variants[name].width // 4 for name in results)

    for name, value in results.items():
        variant = variants[name]
        digits = f"0x{value:0{variant.width // 4}X}"
        print(f"{variant.label:<{label_width}} = {digits:<{hex_width + 2}}  /  {value}", file=out)


def report_bytes(title: str, data: bytes, out: TextIO, variants: Optional[List[Variant]] = None) -> None:
    """Compute and print the CRCs of an in-memory buffer (default: every variant)."""
    format_results(title, compute_all(data, variants), out)


def report_file(path: Path, out: TextIO) -> bool:
    """Compute and print all CRCs of a file.

    Returns:
        False if the file could not be opened (a message is printed instead)
    """
    try:
        results = compute_all(iter_file(path))
    except OSError:
        print(f"{path} : cannot open file", file=out)
        return False

    format_results(str(path), results, out)
    return True
