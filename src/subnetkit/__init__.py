"""
subnetkit - IPv4 Subnet Arithmetic

A toolkit for network engineers and IPAM tooling, providing range
arithmetic over the IPv4 address space: overlap and containment checks,
adjacent block navigation, and exclusion of blocks from larger blocks.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "0.1.0"
__author__ = "DNS Science.io"
__copyright__ = "Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company"
