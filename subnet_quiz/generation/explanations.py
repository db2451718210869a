"""
How-to text, quick tips and worked solutions per archetype.

Guides are static per archetype; worked solutions embed the concrete
numbers of one question and are attached to it by the generators.
"""

from __future__ import annotations

from dataclasses import dataclass

from subnet_quiz.core.ipv4 import IPv4Address, to_integer
from subnet_quiz.core.subnet import SubnetInfo, mask_for_cidr
from subnet_quiz.quiz.models import QuestionArchetype


@dataclass(frozen=True)
class ArchetypeGuide:
    title: str
    how_to: str
    tip: str


_CONTAINMENT_HOW_TO = (
    "Convert the IP and subnet mask to binary, perform a bitwise AND against the IP, "
    "and if the result equals the network address the IP is in the subnet."
)
_CONTAINMENT_TIP = (
    "Think of the subnet mask as a filter: ANDing an IP with its mask filters out the host bits, "
    "leaving only the network portion. If that matches the network address, the IP belongs to the subnet."
)

GUIDES: dict[QuestionArchetype, ArchetypeGuide] = {
    QuestionArchetype.USABLE_HOST_COUNT: ArchetypeGuide(
        title="Usable hosts",
        how_to=(
            "Use the formula 2^(32-CIDR) - 2. Subtract 2 because the network address and "
            "broadcast address can't be used as host addresses."
        ),
        tip=(
            "32 - CIDR is the number of host bits. In a /24 you have 8 host bits, so "
            "2^8 = 256 total addresses, minus 2 reserved addresses = 254 usable hosts."
        ),
    ),
    QuestionArchetype.HOST_RANGE: ArchetypeGuide(
        title="Host range",
        how_to=(
            "The host range goes from the first usable IP (network address + 1) to the last "
            "usable IP (broadcast address - 1)."
        ),
        tip=(
            "Network and broadcast addresses are the walls of the subnet; the usable space "
            "sits between them."
        ),
    ),
    QuestionArchetype.SUBNET_MASK_LOOKUP: ArchetypeGuide(
        title="Subnet mask",
        how_to=(
            "Write CIDR 1s followed by 0s up to 32 bits, then convert each octet back to decimal. "
            "/24 is 11111111.11111111.11111111.00000000 or 255.255.255.0."
        ),
        tip=(
            "The 1s in the mask are network bits, the 0s are host bits. Partial octets only ever "
            "take the values 128, 192, 224, 240, 248, 252, 254."
        ),
    ),
    QuestionArchetype.CIDR_FROM_MASK: ArchetypeGuide(
        title="CIDR notation",
        how_to=(
            "CIDR notation is the number of 1s in the binary subnet mask, written after a slash. "
            "255.255.255.0 has 24 consecutive 1s, so it is /24."
        ),
        tip="The higher the CIDR number, the smaller the subnet.",
    ),
    QuestionArchetype.IP_CONTAINMENT: ArchetypeGuide(
        title="IP containment",
        how_to=_CONTAINMENT_HOW_TO,
        tip=_CONTAINMENT_TIP,
    ),
    QuestionArchetype.IP_CONTAINMENT_YES_NO: ArchetypeGuide(
        title="IP containment (yes/no)",
        how_to=_CONTAINMENT_HOW_TO,
        tip=_CONTAINMENT_TIP,
    ),
    QuestionArchetype.BROADCAST_ADDRESS: ArchetypeGuide(
        title="Broadcast address",
        how_to=(
            "Convert the network address to binary, set all host bits to 1 and convert back "
            "to decimal. Or subtract 1 from the next network address."
        ),
        tip="Broadcast is all ones in the host bits.",
    ),
    QuestionArchetype.NETWORK_ADDRESS: ArchetypeGuide(
        title="Network address",
        how_to=(
            "Convert the IP and subnet mask to binary, AND them together and convert the "
            "result back to decimal. All host bits end up 0."
        ),
        tip=(
            "The network address is the floor of the subnet: ANDing with the mask zeroes out "
            "every host bit."
        ),
    ),
}


def get_guide(archetype: QuestionArchetype) -> ArchetypeGuide:
    return GUIDES[archetype]


def to_binary(addr: IPv4Address) -> str:
    """Dotted binary form, e.g. 11111111.11111111.11111111.00000000."""
    return ".".join(f"{octet:08b}" for octet in addr.octets)


# =============================================================================
# Worked solutions
# =============================================================================


def worked_usable_hosts(cidr: int, hosts: int) -> str:
    host_bits = 32 - cidr
    return f"/{cidr} leaves {host_bits} host bits: 2^{host_bits} - 2 = {hosts} usable hosts."


def worked_host_range(info: SubnetInfo) -> str:
    return (
        f"Network {info.network} + 1 = {info.first_usable}; "
        f"broadcast {info.broadcast} - 1 = {info.last_usable}."
    )


def worked_mask(cidr: int) -> str:
    mask = mask_for_cidr(cidr)
    return f"/{cidr} = {to_binary(mask)} = {mask}."


def worked_cidr(mask: IPv4Address, cidr: int) -> str:
    return f"{mask} = {to_binary(mask)}, which has {cidr} leading 1s: /{cidr}."


def worked_containment(ip: IPv4Address, network: IPv4Address, cidr: int, inside: bool) -> str:
    mask = mask_for_cidr(cidr)
    masked = IPv4Address.from_integer(to_integer(ip) & to_integer(mask))
    verdict = "matches" if inside else "does not match"
    return f"{ip} AND {mask} = {masked}, which {verdict} the network address {network}."


def worked_broadcast(info: SubnetInfo) -> str:
    return (
        f"Set the {32 - info.cidr} host bits of {info.network} to 1: {info.broadcast} "
        f"(next network {info.broadcast.offset(1)} - 1)."
    )


def worked_network(info: SubnetInfo) -> str:
    return f"{info.address} AND {info.mask} = {info.network}."
