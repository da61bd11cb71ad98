"""Test suite for byte count unit conversions."""

import sys
import os

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from configuration import BINARY_BASE, DECIMAL_BASE, UNIT_BASE
from speedtest.units import ByteCount


class TestByteCount:
    """Conversions in binary and decimal units."""

    def test_binary_conversions(self):
        n = ByteCount(1024 ** 3)
        assert n.kib(BINARY_BASE) == 1024 ** 2
        assert n.mib(BINARY_BASE) == 1024
        assert n.gib(BINARY_BASE) == 1.0

    def test_decimal_conversions(self):
        n = ByteCount(1_000_000_000)
        assert n.kib(DECIMAL_BASE) == 1_000_000
        assert n.mib(DECIMAL_BASE) == 1000
        assert n.gib(DECIMAL_BASE) == 1.0

    @pytest.mark.parametrize("value", [0, 1, 1023, 10 * 1024 ** 2, 7_340_032_123])
    @pytest.mark.parametrize("base", [BINARY_BASE, DECIMAL_BASE])
    def test_unit_chain(self, value, base):
        n = ByteCount(value)
        assert n.gib(base) == pytest.approx(n.mib(base) / base)
        assert n.gib(base) == pytest.approx(n.kib(base) / base / base)

    def test_default_base_from_configuration(self):
        assert ByteCount(UNIT_BASE ** 2).mib() == 1.0

    def test_behaves_like_int(self):
        n = ByteCount(42)
        assert n == 42
        assert n + 1 == 43
        assert repr(n) == "ByteCount(42)"
