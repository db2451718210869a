"""
IPv4 address value type.

An address is four unsigned bytes, equivalently one unsigned 32-bit integer
in big-endian order (octet 0 is the most significant byte). Python ints are
arbitrary precision, so every conversion masks with 0xFFFFFFFF and never
relies on a sign bit.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from .errors import ParseError, RangeError
from .rng import get_rng

ADDRESS_BITS = 32
MAX_ADDRESS = 0xFFFFFFFF

# First two octets of the private ranges used for generated scenarios
PRIVATE_PREFIXES: tuple[tuple[int, int], ...] = ((10, 10), (192, 168))


@dataclass(frozen=True, order=True)
class IPv4Address:
    """Immutable IPv4 address stored as four octets."""

    octets: tuple[int, int, int, int]

    def __post_init__(self):
        octets = tuple(self.octets)
        if len(octets) != 4:
            raise ParseError(f"IPv4 address needs exactly 4 octets, got {len(octets)}")
        for octet in octets:
            if isinstance(octet, bool) or not isinstance(octet, int) or not 0 <= octet <= 255:
                raise ParseError(f"Octet out of range 0-255: {octet!r}")
        object.__setattr__(self, "octets", octets)

    def __str__(self) -> str:
        return to_display_string(self)

    def __int__(self) -> int:
        return to_integer(self)

    @classmethod
    def from_integer(cls, value: int) -> "IPv4Address":
        return from_integer(value)

    @classmethod
    def parse(cls, text: str) -> "IPv4Address":
        return parse(text)

    def offset(self, delta: int) -> "IPv4Address":
        """Address `delta` positions away, wrapping around the 32-bit space."""
        return from_integer((to_integer(self) + delta) & MAX_ADDRESS)


def random_private_address(rng: random.Random | None = None) -> IPv4Address:
    """Random address in 10.10.x.x or 192.168.x.x, each prefix equally likely."""
    rng = get_rng(rng)
    first, second = rng.choice(PRIVATE_PREFIXES)
    return IPv4Address((first, second, rng.randint(0, 255), rng.randint(0, 255)))


def to_display_string(addr: IPv4Address) -> str:
    """Dotted-decimal rendering without leading zeros."""
    return ".".join(str(octet) for octet in addr.octets)


def to_integer(addr: IPv4Address) -> int:
    a, b, c, d = addr.octets
    return ((a << 24) | (b << 16) | (c << 8) | d) & MAX_ADDRESS


def from_integer(value: int) -> IPv4Address:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= MAX_ADDRESS:
        raise RangeError(f"IPv4 integer must be in [0, {MAX_ADDRESS}], got {value!r}")
    return IPv4Address((
        (value >> 24) & 0xFF,
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        value & 0xFF,
    ))


def parse(text: str) -> IPv4Address:
    """
    Parse a dotted-decimal string such as "192.168.1.10".

    Raises:
        ParseError: if there are not exactly 4 tokens or a token is not
            a decimal integer in [0, 255]
    """
    if not isinstance(text, str):
        raise ParseError(f"Expected a string, got {type(text).__name__}")

    tokens = text.strip().split(".")
    if len(tokens) != 4:
        raise ParseError(f"Invalid IPv4 address {text!r}: expected 4 dot-separated octets")

    octets = []
    for token in tokens:
        if not token or not (token.isascii() and token.isdigit()):
            raise ParseError(f"Invalid IPv4 address {text!r}: octet {token!r} is not a number")
        value = int(token)
        if value > 255:
            raise ParseError(f"Invalid IPv4 address {text!r}: octet {value} exceeds 255")
        octets.append(value)

    return IPv4Address(tuple(octets))
