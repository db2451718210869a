"""
Question archetype generators.

Each generator samples a prefix length and a base address, computes the
correct answer with the subnet arithmetic, builds distractors through the
option builder and renders a prompt. Generators are registered in
GENERATORS by archetype, the same way atom handlers are looked up by type.

Every generator accepts an optional `rng` and optional fixed `ip` / `cidr`
so a specific scenario can be reproduced (e.g. 10.10.0.5/24).
"""

from __future__ import annotations

import random
from collections.abc import Callable

from loguru import logger

from subnet_quiz.core.errors import RangeError
from subnet_quiz.core.ipv4 import IPv4Address, random_private_address
from subnet_quiz.core.rng import get_rng
from subnet_quiz.core.subnet import (
    block_size,
    broadcast_address,
    cidr_from_mask,
    describe_subnet,
    is_in_subnet,
    mask_for_cidr,
    network_address,
    usable_host_count,
)
from subnet_quiz.quiz.models import NO, YES, Question, QuestionArchetype

from . import explanations
from .distractors import build_options
from .sampling import random_cidr

ArchetypeGenerator = Callable[..., Question]

# Prefixes an explicit override may use: every archetype needs at least
# two usable hosts between network and broadcast
MIN_QUESTION_CIDR = 1
MAX_QUESTION_CIDR = 30

# Generator registry - populated by @register decorator
GENERATORS: dict[QuestionArchetype, ArchetypeGenerator] = {}


def register(archetype: QuestionArchetype):
    """Decorator to register a question generator."""
    def decorator(func: ArchetypeGenerator) -> ArchetypeGenerator:
        GENERATORS[archetype] = func
        return func
    return decorator


def get_generator(archetype: str | QuestionArchetype) -> ArchetypeGenerator | None:
    """Get the generator for an archetype, or None for an unknown name."""
    if isinstance(archetype, str):
        try:
            archetype = QuestionArchetype(archetype.lower())
        except ValueError:
            return None
    return GENERATORS.get(archetype)


def generate_question(
    archetype: str | QuestionArchetype,
    rng: random.Random | None = None,
    **overrides,
) -> Question:
    """Generate one question of the given archetype."""
    generator = get_generator(archetype)
    if generator is None:
        raise ValueError(f"Unknown question archetype: {archetype!r}")
    return generator(rng=rng, **overrides)


# =============================================================================
# Helpers
# =============================================================================


def _resolve_cidr(cidr: int | None, rng: random.Random) -> int:
    if cidr is None:
        return random_cidr(rng)
    if not MIN_QUESTION_CIDR <= cidr <= MAX_QUESTION_CIDR:
        raise RangeError(
            f"Question CIDR must be between {MIN_QUESTION_CIDR} and {MAX_QUESTION_CIDR}, got {cidr}"
        )
    return cidr


def _resolve_ip(ip: IPv4Address | None, rng: random.Random) -> IPv4Address:
    return ip if ip is not None else random_private_address(rng)


def _random_usable(network: IPv4Address, cidr: int, rng: random.Random) -> IPv4Address:
    """Uniform address strictly between network and broadcast."""
    return network.offset(rng.randint(1, block_size(cidr) - 2))


def _range_string(first: IPv4Address, last: IPv4Address) -> str:
    return f"{first} - {last}"


def _make_question(
    archetype: QuestionArchetype,
    prompt: str,
    options: tuple[str, ...],
    correct_index: int,
    explanation: str = "",
) -> Question:
    logger.debug(f"Generated {archetype.value}: {prompt}")
    return Question(
        id=0,
        prompt=prompt,
        options=options,
        correct_index=correct_index,
        archetype=archetype,
        points=archetype.points,
        explanation=explanation,
    )


def _prefix_deltas(level: int) -> tuple[int, ...]:
    # Level 0 is the classic cidr+1, cidr-1, cidr+2 trio; later levels reach further out
    if level == 0:
        return (1, -1, 2)
    return (-(level + 1), level + 2, -(level + 2), level + 3)


# =============================================================================
# Archetypes
# =============================================================================


@register(QuestionArchetype.USABLE_HOST_COUNT)
def generate_usable_hosts_question(
    rng: random.Random | None = None,
    ip: IPv4Address | None = None,
    cidr: int | None = None,
) -> Question:
    """How many usable hosts does ip/cidr have?"""
    rng = get_rng(rng)
    cidr = _resolve_cidr(cidr, rng)
    ip = _resolve_ip(ip, rng)

    hosts = usable_host_count(cidr)
    total = block_size(cidr)

    def candidates(level: int) -> list[str]:
        if level == 0:
            values = [hosts + 2, hosts - 2, hosts * 2]
        else:
            step = 2 * (level + 1)
            values = [total, total - 1, hosts + step, hosts - step, hosts * 2 ** (level + 1), hosts // 2]
        return [str(v) for v in values if v > 0]

    option_set = build_options(str(hosts), candidates, rng)
    return _make_question(
        QuestionArchetype.USABLE_HOST_COUNT,
        f"Given the IP address {ip}/{cidr}, how many usable host addresses are available in this subnet?",
        option_set.options,
        option_set.correct_index,
        explanations.worked_usable_hosts(cidr, hosts),
    )


@register(QuestionArchetype.HOST_RANGE)
def generate_host_range_question(
    rng: random.Random | None = None,
    ip: IPv4Address | None = None,
    cidr: int | None = None,
) -> Question:
    """What is the usable host range of the subnet containing ip/cidr?"""
    rng = get_rng(rng)
    cidr = _resolve_cidr(cidr, rng)
    ip = _resolve_ip(ip, rng)

    info = describe_subnet(ip, cidr)
    size = info.total_addresses
    half = max(1, size // 2)

    def candidates(level: int) -> list[str]:
        spread = half * (level + 1)
        values = [
            # Network/broadcast swapped in for first/last usable
            (info.network, info.broadcast),
            (info.first_usable, info.broadcast),
            (info.network, info.last_usable),
            # Random start in the first half, random end in the second half
            (info.network.offset(rng.randrange(spread)), info.broadcast.offset(-rng.randrange(spread))),
            # Extends into the next subnet / starts in the previous one
            (info.first_usable, info.broadcast.offset(rng.randint(1, spread))),
            (info.network.offset(-rng.randint(1, spread)), info.last_usable),
        ]
        if level > 0:
            # Whole range shifted by one or more blocks
            shift = size * level
            values.append((info.first_usable.offset(shift), info.last_usable.offset(shift)))
            values.append((info.first_usable.offset(-shift), info.last_usable.offset(-shift)))
        return [_range_string(first, last) for first, last in values]

    option_set = build_options(info.host_range, candidates, rng)
    return _make_question(
        QuestionArchetype.HOST_RANGE,
        f"Given the IP address {ip}/{cidr}, what is the range of usable host addresses in this subnet?",
        option_set.options,
        option_set.correct_index,
        explanations.worked_host_range(info),
    )


@register(QuestionArchetype.SUBNET_MASK_LOOKUP)
def generate_subnet_mask_question(
    rng: random.Random | None = None,
    cidr: int | None = None,
) -> Question:
    """Which dotted-decimal mask corresponds to /cidr?"""
    rng = get_rng(rng)
    cidr = _resolve_cidr(cidr, rng)

    def candidates(level: int) -> list[str]:
        return [
            str(mask_for_cidr(cidr + delta))
            for delta in _prefix_deltas(level)
            if 0 <= cidr + delta <= 32
        ]

    option_set = build_options(str(mask_for_cidr(cidr)), candidates, rng)
    return _make_question(
        QuestionArchetype.SUBNET_MASK_LOOKUP,
        f"What is the subnet mask in dotted decimal notation for a /{cidr} network?",
        option_set.options,
        option_set.correct_index,
        explanations.worked_mask(cidr),
    )


@register(QuestionArchetype.CIDR_FROM_MASK)
def generate_cidr_notation_question(
    rng: random.Random | None = None,
    cidr: int | None = None,
) -> Question:
    """Which CIDR prefix corresponds to a dotted-decimal mask?"""
    rng = get_rng(rng)
    cidr = _resolve_cidr(cidr, rng)
    mask = mask_for_cidr(cidr)
    # Computed back from the mask so the answer goes through the same check a user mask would
    correct = cidr_from_mask(mask)

    def candidates(level: int) -> list[str]:
        return [
            str(correct + delta)
            for delta in _prefix_deltas(level)
            if 0 <= correct + delta <= 32
        ]

    option_set = build_options(str(correct), candidates, rng)
    return _make_question(
        QuestionArchetype.CIDR_FROM_MASK,
        f"What is the CIDR notation for the subnet mask {mask}?",
        option_set.options,
        option_set.correct_index,
        explanations.worked_cidr(mask, correct),
    )


def _outside_candidates(
    network: IPv4Address,
    broadcast: IPv4Address,
    cidr: int,
    level: int,
    rng: random.Random,
) -> list[IPv4Address]:
    """Addresses from adjacent and more distant blocks, never inside network/cidr."""
    size = block_size(cidr)
    half = max(1, size // 2)
    spread = size * (level + 1)

    if rng.random() < 0.5:
        nearby = network.offset(-rng.randint(1, half))
    else:
        nearby = broadcast.offset(rng.randint(1, half))

    values = [
        nearby,
        network.offset(size + rng.randrange(spread)),
        network.offset(-size - rng.randrange(spread)),
    ]
    if level > 0:
        distance = size * (level + 2)
        values.append(network.offset(distance + rng.randrange(size)))
        values.append(network.offset(-distance + rng.randrange(size)))

    return [v for v in values if not is_in_subnet(v, network, cidr)]


@register(QuestionArchetype.IP_CONTAINMENT)
def generate_ip_containment_question(
    rng: random.Random | None = None,
    ip: IPv4Address | None = None,
    cidr: int | None = None,
) -> Question:
    """Which of four addresses is a usable host of network/cidr?"""
    rng = get_rng(rng)
    cidr = _resolve_cidr(cidr, rng)
    ip = _resolve_ip(ip, rng)

    network = network_address(ip, cidr)
    broadcast = broadcast_address(ip, cidr)
    correct = _random_usable(network, cidr, rng)

    def candidates(level: int) -> list[str]:
        return [str(v) for v in _outside_candidates(network, broadcast, cidr, level, rng)]

    option_set = build_options(str(correct), candidates, rng)
    return _make_question(
        QuestionArchetype.IP_CONTAINMENT,
        f"Which usable IP address is contained within the subnet {network}/{cidr}?",
        option_set.options,
        option_set.correct_index,
        explanations.worked_containment(correct, network, cidr, inside=True),
    )


@register(QuestionArchetype.IP_CONTAINMENT_YES_NO)
def generate_ip_containment_yes_no_question(
    rng: random.Random | None = None,
    ip: IPv4Address | None = None,
    cidr: int | None = None,
    test_ip: IPv4Address | None = None,
) -> Question:
    """Is a test address inside network/cidr? Options are always ("Yes", "No")."""
    rng = get_rng(rng)
    cidr = _resolve_cidr(cidr, rng)
    ip = _resolve_ip(ip, rng)

    network = network_address(ip, cidr)
    broadcast = broadcast_address(ip, cidr)

    if test_ip is None:
        if rng.random() < 0.5:
            test_ip = network.offset(rng.randrange(block_size(cidr)))
        else:
            test_ip = rng.choice(_outside_candidates(network, broadcast, cidr, 0, rng))

    answer = YES if is_in_subnet(test_ip, network, cidr) else NO
    options = (YES, NO)
    return _make_question(
        QuestionArchetype.IP_CONTAINMENT_YES_NO,
        f"Is the IP address {test_ip} within the subnet {network}/{cidr}?",
        options,
        options.index(answer),
        explanations.worked_containment(test_ip, network, cidr, inside=answer == YES),
    )


@register(QuestionArchetype.BROADCAST_ADDRESS)
def generate_broadcast_address_question(
    rng: random.Random | None = None,
    ip: IPv4Address | None = None,
    cidr: int | None = None,
) -> Question:
    """What is the broadcast address of the subnet containing ip/cidr?"""
    rng = get_rng(rng)
    cidr = _resolve_cidr(cidr, rng)
    ip = _resolve_ip(ip, rng)

    info = describe_subnet(ip, cidr)
    size = info.total_addresses

    def candidates(level: int) -> list[str]:
        if level == 0:
            values = [
                info.network,
                info.first_usable,
                info.last_usable,
                info.broadcast.offset(1),
                info.broadcast.offset(-1),
                _random_usable(info.network, cidr, rng),
                broadcast_address(info.network.offset(size), cidr),
            ]
        else:
            values = [
                broadcast_address(info.network.offset(-size * level), cidr),
                broadcast_address(info.network.offset(size * (level + 1)), cidr),
                info.broadcast.offset(level + 1),
                info.broadcast.offset(-(level + 1)),
                _random_usable(info.network.offset(size * level), cidr, rng),
            ]
        return [str(v) for v in values]

    option_set = build_options(str(info.broadcast), candidates, rng)
    return _make_question(
        QuestionArchetype.BROADCAST_ADDRESS,
        f"What is the broadcast address for the subnet containing {ip}/{cidr}?",
        option_set.options,
        option_set.correct_index,
        explanations.worked_broadcast(info),
    )


@register(QuestionArchetype.NETWORK_ADDRESS)
def generate_network_address_question(
    rng: random.Random | None = None,
    ip: IPv4Address | None = None,
    cidr: int | None = None,
) -> Question:
    """What is the network address of the subnet containing ip/cidr?"""
    rng = get_rng(rng)
    cidr = _resolve_cidr(cidr, rng)
    ip = _resolve_ip(ip, rng)

    info = describe_subnet(ip, cidr)
    size = info.total_addresses

    def candidates(level: int) -> list[str]:
        if level == 0:
            values = [
                info.broadcast,
                info.first_usable,
                info.last_usable,
                info.network.offset(1),
                info.network.offset(-1),
                _random_usable(info.network, cidr, rng),
                network_address(info.network.offset(size), cidr),
            ]
        else:
            values = [
                network_address(info.network.offset(-size * level), cidr),
                network_address(info.network.offset(size * (level + 1)), cidr),
                info.network.offset(level + 1),
                info.network.offset(-(level + 1)),
                _random_usable(info.network.offset(-size * level), cidr, rng),
            ]
        return [str(v) for v in values]

    option_set = build_options(str(info.network), candidates, rng)
    return _make_question(
        QuestionArchetype.NETWORK_ADDRESS,
        f"What is the network address for the subnet containing {ip}/{cidr}?",
        option_set.options,
        option_set.correct_index,
        explanations.worked_network(info),
    )
