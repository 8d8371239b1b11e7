"""
Exceptions raised by the subnet arithmetic core.
"""


class SubnetError(Exception):
    """Base exception for subnet errors."""
    pass


class InvalidPrefixError(SubnetError, ValueError):
    """Prefix length outside 0-32, or not usable for the requested operation."""
    pass


class InvalidAddressError(SubnetError, ValueError):
    """Address does not fit in 32 bits or could not be parsed."""
    pass


class AddressSpaceExhaustedError(SubnetError):
    """Navigation would step outside 0.0.0.0 - 255.255.255.255."""
    pass


class InvalidHostCountError(SubnetError, ValueError):
    """Host count is not positive or cannot be satisfied by any prefix."""
    pass


class InvalidRangeError(SubnetError, ValueError):
    """Range start lies after its end."""
    pass
