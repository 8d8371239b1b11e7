"""
IP/CIDR Arithmetic Module

Provides IPv4 subnet values, overlap and containment checks, adjacent
subnet navigation, and exclusion of subnets from larger blocks.
"""

from subnetkit.ip.models import (
    ADDRESS_SPACE,
    MAX_ADDRESS,
    MAX_HOSTS,
    AddressRange,
    Subnet,
    prefix_to_mask,
)
from subnetkit.ip.errors import (
    SubnetError,
    InvalidPrefixError,
    InvalidAddressError,
    AddressSpaceExhaustedError,
    InvalidHostCountError,
    InvalidRangeError,
)
from subnetkit.ip.core import (
    CIDROperations,
    SubnetCalculator,
    overlaps,
    contains,
    is_contained_in,
    subnets_equal,
    contains_address,
    next_subnet,
    previous_subnet,
    adjacent_subnets,
    split_subnet,
    optimal_prefix_for_hosts,
    subnet_for_hosts,
)
from subnetkit.ip.exclusion import (
    range_to_subnets,
    exclude,
    exclude_all,
    aggregate,
    summarize,
)
from subnetkit.ip.convert import (
    parse_address,
    format_address,
    parse_subnet,
    format_subnet,
)
from subnetkit.ip.report import SubnetInfo, calculate_subnet, subnet_info

__all__ = [
    "ADDRESS_SPACE",
    "MAX_ADDRESS",
    "MAX_HOSTS",
    "AddressRange",
    "Subnet",
    "prefix_to_mask",
    "SubnetError",
    "InvalidPrefixError",
    "InvalidAddressError",
    "AddressSpaceExhaustedError",
    "InvalidHostCountError",
    "InvalidRangeError",
    "CIDROperations",
    "SubnetCalculator",
    "overlaps",
    "contains",
    "is_contained_in",
    "subnets_equal",
    "contains_address",
    "next_subnet",
    "previous_subnet",
    "adjacent_subnets",
    "split_subnet",
    "optimal_prefix_for_hosts",
    "subnet_for_hosts",
    "range_to_subnets",
    "exclude",
    "exclude_all",
    "aggregate",
    "summarize",
    "parse_address",
    "format_address",
    "parse_subnet",
    "format_subnet",
    "SubnetInfo",
    "calculate_subnet",
    "subnet_info",
]
