"""
Subnet report records for display.
"""

from dataclasses import dataclass

from subnetkit.ip.convert import format_address, format_subnet, parse_subnet
from subnetkit.ip.models import Subnet


@dataclass
class SubnetInfo:
    """Information about a subnet."""
    cidr: str
    network: str
    broadcast: str
    netmask: str
    hostmask: str
    prefix_length: int
    num_addresses: int
    num_hosts: int
    num_unusable: int
    usable_percent: float
    first_host: str
    last_host: str


def subnet_info(subnet: Subnet) -> SubnetInfo:
    """Build a report for a Subnet.

    /32 reports the single host, /31 reports both addresses as hosts
    (RFC 3021).
    """
    return SubnetInfo(
        cidr=format_subnet(subnet),
        network=format_address(subnet.network),
        broadcast=format_address(subnet.broadcast),
        netmask=format_address(subnet.mask),
        hostmask=format_address(subnet.hostmask),
        prefix_length=subnet.prefix,
        num_addresses=subnet.address_count,
        num_hosts=subnet.host_count,
        num_unusable=subnet.unusable_address_count,
        usable_percent=subnet.usable_host_percentage,
        first_host=format_address(subnet.first_host),
        last_host=format_address(subnet.last_host),
    )


def calculate_subnet(cidr: str) -> SubnetInfo:
    """Calculate subnet information from CIDR notation."""
    return subnet_info(parse_subnet(cidr))
