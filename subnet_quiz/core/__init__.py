"""
Core Module - IPv4 values and subnet arithmetic.

Components:
- ipv4: IPv4Address value type, parsing and integer conversion
- subnet: mask, network, broadcast, containment and host-count math
- errors: RangeError, ParseError, ValidationError and friends

Everything here is pure and deterministic except random_private_address,
which reads the shared random source in `rng`.
"""

from subnet_quiz.core.errors import (
    OptionBuildError,
    ParseError,
    QuizFinishedError,
    RangeError,
    SubnetQuizError,
    ValidationError,
)
from subnet_quiz.core.ipv4 import (
    IPv4Address,
    from_integer,
    parse,
    random_private_address,
    to_display_string,
    to_integer,
)
from subnet_quiz.core.subnet import (
    SubnetInfo,
    block_size,
    broadcast_address,
    cidr_from_mask,
    describe_subnet,
    first_usable,
    is_in_subnet,
    last_usable,
    mask_for_cidr,
    network_address,
    parse_cidr_notation,
    usable_host_count,
)

__all__ = [
    # Errors
    "OptionBuildError",
    "ParseError",
    "QuizFinishedError",
    "RangeError",
    "SubnetQuizError",
    "ValidationError",
    # IPv4 values
    "IPv4Address",
    "from_integer",
    "parse",
    "random_private_address",
    "to_display_string",
    "to_integer",
    # Subnet arithmetic
    "SubnetInfo",
    "block_size",
    "broadcast_address",
    "cidr_from_mask",
    "describe_subnet",
    "first_usable",
    "is_in_subnet",
    "last_usable",
    "mask_for_cidr",
    "network_address",
    "parse_cidr_notation",
    "usable_host_count",
]
