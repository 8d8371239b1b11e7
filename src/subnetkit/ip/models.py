"""
Value types for IPv4 range arithmetic.

Addresses are plain integers in 0 .. 2**32 - 1. A Subnet is stored as the
(base, prefix) pair it was built from; network, broadcast and masks are
always derived from that pair and never stored separately.
"""

from dataclasses import dataclass
from typing import Iterator

from netaddr import IPAddress

from subnetkit.ip.errors import (
    InvalidAddressError,
    InvalidHostCountError,
    InvalidPrefixError,
    InvalidRangeError,
)


MAX_ADDRESS = 0xFFFFFFFF     # 255.255.255.255
ADDRESS_SPACE = 1 << 32      # addresses in 0.0.0.0/0
MAX_HOSTS = ADDRESS_SPACE - 2
MAX_PREFIX = 32


def prefix_to_mask(prefix: int) -> int:
    """Return the 32-bit netmask for a prefix length."""
    if not 0 <= prefix <= MAX_PREFIX:
        raise InvalidPrefixError(f"Prefix must be between 0 and 32, got {prefix}")
    if prefix == 0:
        return 0
    return (MAX_ADDRESS << (MAX_PREFIX - prefix)) & MAX_ADDRESS


def block_size(prefix: int) -> int:
    """Number of addresses in a block of the given prefix length."""
    if not 0 <= prefix <= MAX_PREFIX:
        raise InvalidPrefixError(f"Prefix must be between 0 and 32, got {prefix}")
    return 1 << (MAX_PREFIX - prefix)


def _check_address(value: int) -> None:
    if not 0 <= value <= MAX_ADDRESS:
        raise InvalidAddressError(f"Address {value} does not fit in 32 bits")


def _check_required(required: int) -> None:
    if required < 0:
        raise InvalidHostCountError(f"Required host count cannot be negative, got {required}")


@dataclass(frozen=True)
class AddressRange:
    """Inclusive range of IPv4 addresses, not necessarily CIDR aligned."""
    start: int
    end: int

    def __post_init__(self):
        _check_address(self.start)
        _check_address(self.end)
        if self.start > self.end:
            raise InvalidRangeError(
                f"Range start {IPAddress(self.start, 4)} is greater than end {IPAddress(self.end, 4)}"
            )

    @property
    def size(self) -> int:
        """Number of addresses in the range (2**32 for the whole space)."""
        return self.end - self.start + 1

    def overlaps(self, other: "AddressRange") -> bool:
        """Return True if the two closed intervals share any address."""
        return self.start <= other.end and other.start <= self.end

    def contains(self, other: "int | AddressRange") -> bool:
        """Return True if an address or a whole range lies inside this range."""
        if isinstance(other, AddressRange):
            return self.start <= other.start and other.end <= self.end
        return self.start <= other <= self.end

    def addresses(self) -> Iterator[int]:
        """Iterate over every address in the range, lowest first."""
        return iter(range(self.start, self.end + 1))

    def __str__(self) -> str:
        return f"{IPAddress(self.start, 4)} - {IPAddress(self.end, 4)}"


@dataclass(frozen=True, eq=False)
class Subnet:
    """A CIDR block given by any address inside it and a prefix length.

    Special handling per RFC 3021:
      - /32 is a single host (first and last host are the address itself)
      - /31 is a point-to-point link (both addresses usable)
    """
    base: int
    prefix: int

    def __post_init__(self):
        if not isinstance(self.prefix, int) or not 0 <= self.prefix <= MAX_PREFIX:
            raise InvalidPrefixError(f"Prefix must be between 0 and 32, got {self.prefix}")
        _check_address(self.base)

    # Masks

    @property
    def mask(self) -> int:
        return prefix_to_mask(self.prefix)

    @property
    def hostmask(self) -> int:
        return ~self.mask & MAX_ADDRESS

    # Boundaries

    @property
    def network(self) -> int:
        return self.base & self.mask

    @property
    def broadcast(self) -> int:
        return self.network | self.hostmask

    @property
    def range(self) -> AddressRange:
        return AddressRange(self.network, self.broadcast)

    @property
    def address_count(self) -> int:
        return block_size(self.prefix)

    # Hosts

    @property
    def host_count(self) -> int:
        """Usable host addresses: /32 -> 1, /31 -> 2, otherwise size - 2."""
        if self.prefix == 32:
            return 1
        if self.prefix == 31:
            return 2
        return self.address_count - 2

    @property
    def first_host(self) -> int:
        if self.prefix == 32:
            return self.base
        if self.prefix == 31:
            return self.network
        return self.network + 1

    @property
    def last_host(self) -> int:
        if self.prefix == 32:
            return self.base
        if self.prefix == 31:
            return self.broadcast
        return self.broadcast - 1

    @property
    def host_range(self) -> AddressRange:
        return AddressRange(self.first_host, self.last_host)

    # Utilization

    @property
    def unusable_address_count(self) -> int:
        """Addresses lost to the network and broadcast reservations."""
        return self.address_count - self.host_count

    @property
    def usable_host_percentage(self) -> float:
        return self.host_count / self.address_count * 100

    def utilization_for(self, required: int) -> float:
        """Percentage of usable hosts taken by `required` hosts.

        May exceed 100 when the block is too small for the request.
        """
        _check_required(required)
        return required / self.host_count * 100

    def wasted_addresses_for(self, required: int) -> int:
        """Usable hosts left over once `required` hosts are placed.

        Negative when the block is too small for the request.
        """
        _check_required(required)
        return self.host_count - required

    def canonical(self) -> "Subnet":
        """Return the same block with its base moved to the network address."""
        if self.base == self.network:
            return self
        return Subnet(self.network, self.prefix)

    # Two subnets are the same block when network and prefix match,
    # whatever address inside the block they were written with.

    def __eq__(self, other):
        if not isinstance(other, Subnet):
            return NotImplemented
        return self.network == other.network and self.prefix == other.prefix

    def __hash__(self):
        return hash((self.network, self.prefix))

    def __str__(self) -> str:
        return f"{IPAddress(self.base, 4)}/{self.prefix}"
