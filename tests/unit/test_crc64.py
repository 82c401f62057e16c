"""Unit tests for the 64-bit CRC family."""

from __future__ import annotations

from crcsum.algorithms.crc64 import crc_64_ecma, crc_64_we, finalize_crc_64_we, update_crc_64


class TestCRC64:
    """Test CRC-64/ECMA and CRC-64/WE."""

    def test_ecma_check_value(self, check_input: bytes) -> None:
        """Test CRC-64/ECMA-182 of the standard check input."""
        assert crc_64_ecma(check_input) == 0x6C40DF5F0B497347

    def test_we_check_value(self, check_input: bytes) -> None:
        """Test CRC-64/WE of the standard check input."""
        assert crc_64_we(check_input) == 0x62EC59E3F1A4F00A

    def test_empty_data(self) -> None:
        """Test CRC-64 of empty data."""
        assert crc_64_ecma(b"") == 0
        assert crc_64_we(b"") == 0
        assert crc_64_we(None) == 0

    def test_stays_within_64_bits(self) -> None:
        """Test the register never grows beyond 64 bits."""
        crc = 0xFFFFFFFFFFFFFFFF
        for byte in b"\xff" * 64:
            crc = update_crc_64(crc, byte)
            assert 0 <= crc <= 0xFFFFFFFFFFFFFFFF

    def test_incremental_matches_one_pass(self, check_input: bytes) -> None:
        """Test byte-at-a-time update agrees with one-pass calculation."""
        ecma = 0
        we = 0xFFFFFFFFFFFFFFFF
        for byte in check_input:
            ecma = update_crc_64(ecma, byte)
            we = update_crc_64(we, byte)

        assert ecma == crc_64_ecma(check_input)
        assert finalize_crc_64_we(we) == crc_64_we(check_input)
