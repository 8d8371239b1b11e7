"""
Exclusion engine and range-to-CIDR decomposition.

Any inclusive address range can be written as a minimal list of CIDR blocks
by repeatedly taking the largest aligned block that starts at the current
address and does not run past the end of the range. Exclusion is built on that
decomposition; aggregation and summarization go through netaddr.
"""

import logging
from typing import Iterable

from netaddr import IPAddress, cidr_merge, spanning_cidr

from subnetkit.ip.convert import from_network, to_network
from subnetkit.ip.core import contains, overlaps
from subnetkit.ip.models import MAX_PREFIX, Subnet

logger = logging.getLogger(__name__)


def _largest_block_prefix(start: int, end: int) -> int:
    """Shortest prefix whose block starts at `start`, is aligned and ends by `end`."""
    prefix = 0
    while prefix < MAX_PREFIX:
        size = 1 << (MAX_PREFIX - prefix)
        if start % size == 0 and start + size - 1 <= end:
            break
        prefix += 1
    return prefix


def range_to_subnets(start: int, end: int) -> list[Subnet]:
    """Decompose the inclusive range [start, end] into minimal CIDR blocks.

    Returns an empty list when start > end. Blocks are in ascending order.
    """
    blocks: list[Subnet] = []
    current = start
    while current <= end:
        prefix = _largest_block_prefix(current, end)
        blocks.append(Subnet(current, prefix))
        current += 1 << (MAX_PREFIX - prefix)
    return blocks


def exclude(base: Subnet, remove: Subnet) -> list[Subnet]:
    """Subtract `remove` from `base`, returning the remaining blocks.

    The result is the minimal list of CIDR blocks covering exactly the
    addresses of `base` that are not in `remove`, in ascending order. A
    fully removed block gives an empty list.
    """
    if not overlaps(base, remove):
        return [base.canonical()]

    if contains(remove, base):
        return []

    left = range_to_subnets(base.network, remove.network - 1)
    right = range_to_subnets(remove.broadcast + 1, base.broadcast)
    return left + right


def exclude_all(base: Subnet, removes: Iterable[Subnet]) -> list[Subnet]:
    """Subtract every block in `removes` from `base`.

    Each exclusion is applied to all blocks remaining from the previous
    one. The addresses covered by the result do not depend on the order of
    `removes`; the number of intermediate blocks can.
    """
    remaining = [base.canonical()]

    for remove in removes:
        next_remaining: list[Subnet] = []
        for subnet in remaining:
            next_remaining.extend(exclude(subnet, remove))
        logger.debug(
            f"Excluded {remove.canonical()}: {len(remaining)} -> {len(next_remaining)} blocks"
        )
        remaining = next_remaining
        if not remaining:
            break

    return remaining


def aggregate(subnets: Iterable[Subnet]) -> list[Subnet]:
    """Aggregate blocks into the minimal list of CIDR blocks covering them all.

    Duplicates and blocks contained in others are dropped; adjacent blocks
    are merged wherever the result stays CIDR aligned.
    """
    networks = [to_network(s) for s in subnets]
    merged = cidr_merge(networks)
    logger.debug(f"Aggregated {len(networks)} blocks into {len(merged)}")
    return [from_network(net) for net in merged]


def summarize(subnets: Iterable[Subnet]) -> Subnet:
    """Find the smallest single block containing every given block.

    Unlike aggregate(), the result may include addresses outside the inputs.
    """
    subnets = list(subnets)
    if not subnets:
        raise ValueError("Cannot summarize an empty list of subnets")

    # spanning_cidr ranks inputs by network start; give it the outermost addresses
    low = IPAddress(min(s.network for s in subnets), 4)
    high = IPAddress(max(s.broadcast for s in subnets), 4)
    return from_network(spanning_cidr([low, high]))
