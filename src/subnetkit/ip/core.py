"""
Core subnet arithmetic: relations, navigation and sizing.
"""

import logging

from subnetkit.ip.errors import (
    AddressSpaceExhaustedError,
    InvalidHostCountError,
    InvalidPrefixError,
)
from subnetkit.ip.models import MAX_ADDRESS, MAX_HOSTS, MAX_PREFIX, Subnet, block_size

logger = logging.getLogger(__name__)


def usable_hosts(prefix: int) -> int:
    """Usable host addresses for a prefix, as counted by `Subnet.host_count`."""
    return Subnet(0, prefix).host_count


class CIDROperations:
    """Relations between CIDR blocks, compared as integer ranges."""

    @staticmethod
    def overlaps(a: Subnet, b: Subnet) -> bool:
        """Check if two blocks share at least one address."""
        return a.network <= b.broadcast and b.network <= a.broadcast

    @staticmethod
    def contains(a: Subnet, b: Subnet) -> bool:
        """Check if block `a` covers every address of block `b`."""
        return a.network <= b.network and b.broadcast <= a.broadcast

    @staticmethod
    def is_contained_in(a: Subnet, b: Subnet) -> bool:
        return CIDROperations.contains(b, a)

    @staticmethod
    def equals(a: Subnet, b: Subnet) -> bool:
        """Same network address and same prefix, regardless of base."""
        return a.network == b.network and a.prefix == b.prefix

    @staticmethod
    def contains_address(subnet: Subnet, address: int) -> bool:
        return subnet.network <= address <= subnet.broadcast


class SubnetCalculator:
    """Calculator for same-size navigation and sizing."""

    @staticmethod
    def next(subnet: Subnet) -> Subnet:
        """Get the block of the same size directly after `subnet`."""
        if subnet.broadcast == MAX_ADDRESS:
            raise AddressSpaceExhaustedError(
                f"No /{subnet.prefix} after {subnet.canonical()}: end of IPv4 address space"
            )
        return Subnet(subnet.network + subnet.address_count, subnet.prefix)

    @staticmethod
    def previous(subnet: Subnet) -> Subnet:
        """Get the block of the same size directly before `subnet`."""
        if subnet.network == 0:
            raise AddressSpaceExhaustedError(
                f"No /{subnet.prefix} before {subnet.canonical()}: start of IPv4 address space"
            )
        return Subnet(subnet.network - subnet.address_count, subnet.prefix)

    @staticmethod
    def adjacent(subnet: Subnet, count: int) -> list[Subnet]:
        """Get `abs(count)` neighbours, after (count > 0) or before (count < 0).

        Both directions are returned in ascending address order. Nothing is
        returned if any step would leave the address space.
        """
        size = subnet.address_count
        if count > 0:
            if subnet.broadcast + count * size > MAX_ADDRESS:
                raise AddressSpaceExhaustedError(
                    f"Cannot take {count} /{subnet.prefix} blocks after {subnet.canonical()}: "
                    f"end of IPv4 address space"
                )
            first = subnet.network + size
        elif count < 0:
            if subnet.network + count * size < 0:
                raise AddressSpaceExhaustedError(
                    f"Cannot take {-count} /{subnet.prefix} blocks before {subnet.canonical()}: "
                    f"start of IPv4 address space"
                )
            first = subnet.network + count * size
        else:
            return []

        return [Subnet(first + i * size, subnet.prefix) for i in range(abs(count))]

    @staticmethod
    def for_hosts(address: int, host_count: int) -> Subnet:
        """Smallest block around `address` with room for `host_count` hosts."""
        prefix = SubnetCalculator.optimal_prefix_for_hosts(host_count)
        return Subnet(address, prefix).canonical()

    @staticmethod
    def split(subnet: Subnet, new_prefix: int) -> list[Subnet]:
        """Split a block into every smaller block of `new_prefix`."""
        if new_prefix <= subnet.prefix:
            raise InvalidPrefixError(
                f"New prefix /{new_prefix} must be larger than current /{subnet.prefix}"
            )
        if new_prefix > MAX_PREFIX:
            raise InvalidPrefixError(f"New prefix /{new_prefix} cannot exceed /32")

        size = block_size(new_prefix)
        logger.debug(
            f"Splitting {subnet.canonical()} into {subnet.address_count // size} /{new_prefix} blocks"
        )
        return [
            Subnet(start, new_prefix)
            for start in range(subnet.network, subnet.broadcast + 1, size)
        ]

    @staticmethod
    def optimal_prefix_for_hosts(host_count: int) -> int:
        """Longest prefix (smallest block) with at least `host_count` usable hosts."""
        if host_count <= 0:
            raise InvalidHostCountError(f"Host count must be positive, got {host_count}")
        if host_count > MAX_HOSTS:
            raise InvalidHostCountError(
                f"Host count {host_count} exceeds maximum possible hosts in IPv4 ({MAX_HOSTS})"
            )

        for prefix in range(MAX_PREFIX, -1, -1):
            if usable_hosts(prefix) >= host_count:
                return prefix

        # unreachable: /0 holds MAX_HOSTS usable hosts
        raise InvalidHostCountError(f"No prefix can hold {host_count} hosts")


def overlaps(a: Subnet, b: Subnet) -> bool:
    """Check if two blocks overlap."""
    return CIDROperations.overlaps(a, b)


def contains(a: Subnet, b: Subnet) -> bool:
    """Check if `a` fully contains `b` (a block contains itself)."""
    return CIDROperations.contains(a, b)


def is_contained_in(a: Subnet, b: Subnet) -> bool:
    """Check if `a` is fully contained in `b`."""
    return CIDROperations.is_contained_in(a, b)


def subnets_equal(a: Subnet, b: Subnet) -> bool:
    return CIDROperations.equals(a, b)


def contains_address(subnet: Subnet, address: int) -> bool:
    """Check if an integer address falls inside a block."""
    return CIDROperations.contains_address(subnet, address)


def next_subnet(subnet: Subnet) -> Subnet:
    """Get the next block of the same size."""
    return SubnetCalculator.next(subnet)


def previous_subnet(subnet: Subnet) -> Subnet:
    """Get the previous block of the same size."""
    return SubnetCalculator.previous(subnet)


def adjacent_subnets(subnet: Subnet, count: int) -> list[Subnet]:
    """Get neighbouring blocks of the same size, in ascending order."""
    return SubnetCalculator.adjacent(subnet, count)


def split_subnet(subnet: Subnet, new_prefix: int) -> list[Subnet]:
    """Split a block into smaller blocks."""
    return SubnetCalculator.split(subnet, new_prefix)


def optimal_prefix_for_hosts(host_count: int) -> int:
    """Get the prefix length best fitting a host count."""
    return SubnetCalculator.optimal_prefix_for_hosts(host_count)


def subnet_for_hosts(address: int, host_count: int) -> Subnet:
    """Get the smallest block containing `address` that fits `host_count` hosts."""
    return SubnetCalculator.for_hosts(address, host_count)
