"""
Conversion between IPv4 strings and the integer values used by the core.
"""

from netaddr import AddrFormatError, IPAddress, IPNetwork

from subnetkit.ip.errors import InvalidAddressError, InvalidPrefixError
from subnetkit.ip.models import MAX_ADDRESS, MAX_PREFIX, Subnet


def parse_address(text: str) -> int:
    """Parse a dotted-quad IPv4 address into an integer.

    >>> parse_address('192.168.0.1')
    3232235521
    """
    try:
        ip = IPAddress(text.strip())
    except (AddrFormatError, ValueError, TypeError) as e:
        raise InvalidAddressError(f"Invalid IPv4 address: '{text}'") from e
    if ip.version != 4:
        raise InvalidAddressError(f"Not an IPv4 address: '{text}'")
    return int(ip)


def format_address(value: int) -> str:
    """Format an integer as a dotted-quad IPv4 address.

    >>> format_address(3232235521)
    '192.168.0.1'
    """
    if not 0 <= value <= MAX_ADDRESS:
        raise InvalidAddressError(f"Address {value} does not fit in 32 bits")
    return str(IPAddress(value, 4))


def parse_subnet(text: str) -> Subnet:
    """Parse CIDR notation into a Subnet.

    Accepts "a.b.c.d/prefix", "a.b.c.d/netmask" and a bare address, which
    is taken as a /32. The base address is kept as given.

    >>> parse_subnet('192.168.1.100/24')
    Subnet(base=3232235876, prefix=24)
    """
    text = text.strip()
    if "/" in text:
        _, _, suffix = text.partition("/")
        if suffix.isdigit() and int(suffix) > MAX_PREFIX:
            raise InvalidPrefixError(f"Prefix must be between 0 and 32 in '{text}'")

    try:
        net = IPNetwork(text)
    except (AddrFormatError, ValueError, TypeError) as e:
        raise InvalidAddressError(f"Invalid IPv4 CIDR: '{text}'") from e
    if net.version != 4:
        raise InvalidAddressError(f"Not an IPv4 network: '{text}'")

    return Subnet(int(net.ip), net.prefixlen)


def format_subnet(subnet: Subnet) -> str:
    """Canonical CIDR string, using the network address.

    >>> format_subnet(Subnet(3232235876, 24))
    '192.168.1.0/24'
    """
    return f"{format_address(subnet.network)}/{subnet.prefix}"


def to_network(subnet: Subnet) -> IPNetwork:
    """netaddr view of a block, normalized to its network address."""
    return IPNetwork((subnet.network, subnet.prefix), version=4)


def from_network(net: IPNetwork) -> Subnet:
    if net.version != 4:
        raise InvalidAddressError(f"Not an IPv4 network: '{net}'")
    return Subnet(net.first, net.prefixlen)
