"""
Subnet arithmetic on IPv4 addresses.

All functions are pure and deterministic. Any CIDR outside [0, 32] fails
fast with RangeError; callers in the generation layer only ever pass
bounded values, so seeing one here means a programming defect.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ParseError, RangeError, ValidationError
from .ipv4 import ADDRESS_BITS, MAX_ADDRESS, IPv4Address, from_integer, parse, to_integer


def _check_cidr(cidr: int) -> None:
    if isinstance(cidr, bool) or not isinstance(cidr, int) or not 0 <= cidr <= ADDRESS_BITS:
        raise RangeError(f"CIDR must be between 0 and 32, got {cidr!r}")


def _mask_bits(cidr: int) -> int:
    # /0 is the all-zero mask by definition
    if cidr == 0:
        return 0
    return (MAX_ADDRESS << (ADDRESS_BITS - cidr)) & MAX_ADDRESS


def mask_for_cidr(cidr: int) -> IPv4Address:
    """Subnet mask with the top `cidr` bits set, e.g. 24 -> 255.255.255.0."""
    _check_cidr(cidr)
    return from_integer(_mask_bits(cidr))


def network_address(ip: IPv4Address, cidr: int) -> IPv4Address:
    """Lowest address of the subnet: ip AND mask."""
    _check_cidr(cidr)
    return from_integer(to_integer(ip) & _mask_bits(cidr))


def broadcast_address(ip: IPv4Address, cidr: int) -> IPv4Address:
    """Highest address of the subnet: ip OR (NOT mask). A /32 is the ip itself."""
    _check_cidr(cidr)
    if cidr == ADDRESS_BITS:
        return ip
    return from_integer(to_integer(ip) | (~_mask_bits(cidr) & MAX_ADDRESS))


def cidr_from_mask(mask: IPv4Address) -> int:
    """
    Count the leading 1-bits of a subnet mask.

    Raises:
        ValidationError: if a 1-bit follows a 0-bit (discontiguous mask)
    """
    value = to_integer(mask)
    cidr = 0
    found_zero = False

    for bit in range(ADDRESS_BITS - 1, -1, -1):
        is_set = (value >> bit) & 1
        if is_set and found_zero:
            raise ValidationError(
                f"Invalid subnet mask {mask}: must be continuous 1s followed by continuous 0s"
            )
        if is_set:
            cidr += 1
        else:
            found_zero = True

    return cidr


def is_in_subnet(ip: IPv4Address, network: IPv4Address, cidr: int) -> bool:
    """True if `ip` lies in `network`/`cidr`. /0 matches everything (default route)."""
    _check_cidr(cidr)
    if cidr == 0:
        return True
    mask = _mask_bits(cidr)
    return (to_integer(ip) & mask) == (to_integer(network) & mask)


def usable_host_count(cidr: int) -> int:
    """
    2^(32-cidr) - 2 usable hosts (network and broadcast excluded).

    /31 and /32 have no usable hosts under this rule and return 0.
    """
    _check_cidr(cidr)
    return max(0, (1 << (ADDRESS_BITS - cidr)) - 2)


def block_size(cidr: int) -> int:
    """Total number of addresses in a /cidr block, including network and broadcast."""
    _check_cidr(cidr)
    return 1 << (ADDRESS_BITS - cidr)


def first_usable(ip: IPv4Address, cidr: int) -> IPv4Address:
    return network_address(ip, cidr).offset(1)


def last_usable(ip: IPv4Address, cidr: int) -> IPv4Address:
    return broadcast_address(ip, cidr).offset(-1)


@dataclass(frozen=True)
class SubnetInfo:
    """Everything the calculator reports about one address/prefix pair."""

    address: IPv4Address
    cidr: int
    mask: IPv4Address
    network: IPv4Address
    broadcast: IPv4Address
    first_usable: IPv4Address
    last_usable: IPv4Address
    usable_hosts: int
    total_addresses: int

    @property
    def host_range(self) -> str:
        return f"{self.first_usable} - {self.last_usable}"


def describe_subnet(ip: IPv4Address, cidr: int) -> SubnetInfo:
    """Compute the full set of subnet facts for `ip`/`cidr`."""
    return SubnetInfo(
        address=ip,
        cidr=cidr,
        mask=mask_for_cidr(cidr),
        network=network_address(ip, cidr),
        broadcast=broadcast_address(ip, cidr),
        first_usable=first_usable(ip, cidr),
        last_usable=last_usable(ip, cidr),
        usable_hosts=usable_host_count(cidr),
        total_addresses=block_size(cidr),
    )


def parse_cidr_notation(text: str) -> tuple[IPv4Address, int]:
    """
    Parse "a.b.c.d/n" into an address and prefix length.

    Raises:
        ParseError: on a missing or non-numeric prefix, or a bad address
        RangeError: if the prefix is outside [0, 32]
    """
    address_part, sep, prefix_part = text.strip().partition("/")
    if not sep:
        raise ParseError(f"Expected ADDRESS/CIDR notation, got {text!r}")
    if not (prefix_part.isascii() and prefix_part.isdigit()):
        raise ParseError(f"CIDR prefix must be a number, got {prefix_part!r}")

    cidr = int(prefix_part)
    _check_cidr(cidr)
    return parse(address_part), cidr
