"""Property-based tests using hypothesis."""

from __future__ import annotations

import binascii
import zlib

from hypothesis import given
from hypothesis import strategies as st

from crcsum.algorithms import crc_32, crc_ccitt_ffff, crc_sick, crc_xmodem, update_crc_sick
from crcsum.catalog import VARIANTS, compute, finalize, update

variant_names = st.sampled_from(sorted(VARIANTS))


class TestIncrementalProperties:
    """Incremental and one-pass computation must agree."""

    @given(name=variant_names, data=st.binary(min_size=0, max_size=512))
    def test_fold_matches_one_pass(self, name: str, data: bytes) -> None:
        """Test update folded from the seed, then finalized, equals compute."""
        crc = VARIANTS[name].seed
        previous = 0
        for byte in data:
            crc = update(name, crc, byte, previous)
            previous = byte

        assert finalize(name, crc) == compute(name, data)

    @given(name=variant_names, data=st.binary(min_size=0, max_size=256), split=st.integers(min_value=0))
    def test_length_equals_prefix(self, name: str, data: bytes, split: int) -> None:
        """Test length-limited computation equals computing the prefix."""
        split = split % (len(data) + 1)

        assert compute(name, data, split) == compute(name, data[:split])

    @given(name=variant_names, data=st.binary(min_size=0, max_size=256))
    def test_result_within_width(self, name: str, data: bytes) -> None:
        """Test results fit the variant's width."""
        assert 0 <= compute(name, data) <= VARIANTS[name].mask


class TestReferenceImplementations:
    """Agreement with the standard library."""

    @given(data=st.binary(min_size=0, max_size=1000))
    def test_crc32_matches_zlib(self, data: bytes) -> None:
        """Test CRC-32 equals zlib.crc32()."""
        assert crc_32(data) == zlib.crc32(data) & 0xFFFFFFFF

    @given(data=st.binary(min_size=0, max_size=1000))
    def test_ccitt_matches_binascii(self, data: bytes) -> None:
        """Test CRC-CCITT equals binascii.crc_hqx()."""
        assert crc_xmodem(data) == binascii.crc_hqx(data, 0x0000)
        assert crc_ccitt_ffff(data) == binascii.crc_hqx(data, 0xFFFF)


class TestSickProperties:
    """Properties of the history-dependent CRC-16/Sick update."""

    @given(first=st.integers(min_value=1, max_value=255), second=st.integers(min_value=0, max_value=255))
    def test_previous_byte_folded_in(self, first: int, second: int) -> None:
        """Test a nonzero previous byte changes the update result."""
        crc = update_crc_sick(0, first, 0)

        assert update_crc_sick(crc, second, first) != update_crc_sick(crc, second, 0)

    @given(first=st.integers(min_value=0, max_value=255), second=st.integers(min_value=0, max_value=255))
    def test_two_byte_order(self, first: int, second: int) -> None:
        """Test reversing a two-byte input changes the result unless the bytes are equal."""
        forward = crc_sick(bytes([first, second]))
        backward = crc_sick(bytes([second, first]))

        assert (forward == backward) == (first == second)
