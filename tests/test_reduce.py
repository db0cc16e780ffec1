"""Tests for byte reduction."""

import os

import pytest

from s3kv.reduce import UINT32_MODULUS, fold_bytes, reduce_bytes


class TestReduceBytes:
    """Test folding byte sequences into uint32 values."""

    @pytest.mark.parametrize(
        "data,expected",
        [
            (b"", 0),
            (b"\x00", 0),
            (b"\x01", 1),
            (bytes([105]), 105),
            (b"\xff", 255),
            (b"\x01\x02", 258),
            (b"\xff" * 17, 4294967295),
        ],
    )
    def test_known_values(self, data, expected):
        """Test small inputs and a long all-ones input."""
        assert reduce_bytes(data) == expected

    @pytest.mark.parametrize("value", [912395, 883848199, 4294967295])
    def test_four_bytes_round_trip(self, value):
        """Test that a 4 byte big-endian value reduces to itself."""
        assert reduce_bytes(value.to_bytes(4, "big")) == value

    def test_wraps_past_uint32(self):
        """Test 8 byte values above 2**32 - 1 wrap modulo 2**32."""
        for i in range(0, 99999, 977):
            v = 4294967295 + i * 13
            assert reduce_bytes(v.to_bytes(8, "big")) == (v - 4294967295 - 1) % UINT32_MODULUS

    def test_only_last_four_bytes_matter(self):
        """Test equivalence with the big-endian uint32 of the last 4 bytes."""
        for length in (4, 5, 16, 33):
            data = os.urandom(length)
            assert reduce_bytes(data) == int.from_bytes(data[-4:], "big")
            assert reduce_bytes(b"prefix" + data) == reduce_bytes(data)

    def test_result_in_range(self):
        """Test results always fit in 32 bits."""
        for _ in range(50):
            assert 0 <= reduce_bytes(os.urandom(64)) < UINT32_MODULUS


class TestFoldBytes:
    """Test the general modular fold."""

    def test_matches_integer_modulo(self):
        """Test fold equals the big-endian integer modulo the modulus."""
        data = bytes(range(1, 40))
        for modulus in (1, 7, 255, 256, 4096, 1 << 61, (1 << 64) + 13):
            assert fold_bytes(data, modulus) == int.from_bytes(data, "big") % modulus

    def test_empty(self):
        """Test empty input folds to zero."""
        assert fold_bytes(b"", 97) == 0

    @pytest.mark.parametrize("modulus", [0, -5])
    def test_invalid_modulus(self, modulus):
        """Test non-positive moduli are rejected."""
        with pytest.raises(ValueError, match="modulus must be positive"):
            fold_bytes(b"abc", modulus)
