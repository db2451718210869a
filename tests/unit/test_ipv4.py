"""
Unit tests for the IPv4 address value type.

Run: pytest tests/unit/test_ipv4.py -v
"""

import random

import pytest

from subnet_quiz.core.errors import ParseError, RangeError
from subnet_quiz.core.ipv4 import (
    IPv4Address,
    from_integer,
    parse,
    random_private_address,
    to_display_string,
    to_integer,
)


class TestRandomPrivateAddress:
    """Test random_private_address."""

    def test_prefix_is_private(self, rng):
        """Every address should start with 10.10 or 192.168."""
        for _ in range(500):
            ip = random_private_address(rng)
            assert ip.octets[:2] in {(10, 10), (192, 168)}
            assert all(0 <= o <= 255 for o in ip.octets)

    def test_both_prefixes_appear(self, rng):
        """Both prefixes should be drawn with roughly equal frequency."""
        prefixes = [random_private_address(rng).octets[:2] for _ in range(2000)]
        ten_ten = prefixes.count((10, 10))
        assert 800 < ten_ten < 1200

    def test_default_source(self):
        """Should work without an explicit random source."""
        ip = random_private_address()
        assert ip.octets[:2] in {(10, 10), (192, 168)}


class TestDisplayString:
    """Test to_display_string / str()."""

    @pytest.mark.parametrize("octets, expected", [
        ((192, 168, 1, 1), "192.168.1.1"),
        ((0, 0, 0, 0), "0.0.0.0"),
        ((255, 255, 255, 255), "255.255.255.255"),
        ((10, 0, 0, 1), "10.0.0.1"),
    ])
    def test_renders_dotted_decimal(self, octets, expected):
        """Should render without leading zeros."""
        ip = IPv4Address(octets)
        assert to_display_string(ip) == expected
        assert str(ip) == expected


class TestIntegerConversion:
    """Test to_integer / from_integer."""

    @pytest.mark.parametrize("octets, number", [
        ((192, 168, 1, 1), 0xC0A80101),
        ((10, 0, 0, 1), 0x0A000001),
        ((172, 16, 0, 1), 0xAC100001),
        ((0, 0, 0, 0), 0),
        ((255, 255, 255, 255), 0xFFFFFFFF),
        ((128, 0, 0, 0), 0x80000000),
        ((127, 255, 255, 255), 0x7FFFFFFF),
    ])
    def test_known_values(self, octets, number):
        """Big-endian mapping, including values with the top bit set."""
        assert to_integer(IPv4Address(octets)) == number
        assert from_integer(number).octets == octets

    def test_round_trip_random_integers(self):
        """fromInteger(toInteger(a)) == a, with plenty of values >= 2^31."""
        rng = random.Random(7)
        for _ in range(5000):
            value = rng.randrange(0, 1 << 32)
            assert to_integer(from_integer(value)) == value

    def test_high_values_stay_unsigned(self):
        """Values above 2^31 never come back negative."""
        for value in (0x80000000, 0xC0A80101, 0xFFFFFFFE, 0xFFFFFFFF):
            assert to_integer(from_integer(value)) == value
            assert to_integer(from_integer(value)) > 0

    @pytest.mark.parametrize("value", [-1, 1 << 32, 2 ** 40])
    def test_out_of_range_integer(self, value):
        """Integers outside the 32-bit space raise RangeError."""
        with pytest.raises(RangeError):
            from_integer(value)

    def test_int_dunder(self):
        assert int(IPv4Address((192, 168, 1, 1))) == 0xC0A80101


class TestParse:
    """Test parse."""

    def test_valid_address(self):
        assert parse("192.168.1.100").octets == (192, 168, 1, 100)

    def test_surrounding_whitespace_ignored(self):
        assert parse("  10.10.0.5 ").octets == (10, 10, 0, 5)

    @pytest.mark.parametrize("text", [
        "192.168.1",
        "192.168.1.1.1",
        "192.168.1.256",
        "192.168.1.-1",
        "192.168..1",
        "a.b.c.d",
        "",
        "192.168.1.1/24",
    ])
    def test_invalid_strings(self, text):
        """Malformed strings raise ParseError."""
        with pytest.raises(ParseError):
            parse(text)

    def test_parse_error_is_value_error(self):
        """Callers catching ValueError still see parse failures."""
        with pytest.raises(ValueError):
            parse("300.1.1.1")


class TestIPv4AddressValue:
    """Test the value type itself."""

    def test_wrong_octet_count(self):
        with pytest.raises(ParseError):
            IPv4Address((1, 2, 3))

    def test_octet_out_of_range(self):
        with pytest.raises(ParseError):
            IPv4Address((1, 2, 3, 256))

    def test_immutable(self):
        ip = IPv4Address((10, 10, 0, 1))
        with pytest.raises(AttributeError):
            ip.octets = (1, 1, 1, 1)

    def test_equality_and_hash(self):
        assert IPv4Address((10, 0, 0, 1)) == parse("10.0.0.1")
        assert len({IPv4Address((10, 0, 0, 1)), parse("10.0.0.1")}) == 1

    def test_offset_wraps(self):
        """Offsets wrap around the 32-bit space."""
        assert IPv4Address((255, 255, 255, 255)).offset(1) == IPv4Address((0, 0, 0, 0))
        assert IPv4Address((0, 0, 0, 0)).offset(-1) == IPv4Address((255, 255, 255, 255))
        assert IPv4Address((192, 168, 1, 255)).offset(1) == IPv4Address((192, 168, 2, 0))
