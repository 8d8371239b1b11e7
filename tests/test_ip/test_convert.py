"""Tests for string conversion and subnet reports."""

import pytest

from subnetkit.ip.convert import format_address, format_subnet, parse_address, parse_subnet
from subnetkit.ip.errors import InvalidAddressError, InvalidPrefixError, SubnetError
from subnetkit.ip.models import MAX_ADDRESS, Subnet
from subnetkit.ip.report import SubnetInfo, calculate_subnet, subnet_info


class TestParseAddress:
    def test_dotted_quad(self):
        assert parse_address('192.168.0.1') == 0xC0A80001

    def test_bounds(self):
        assert parse_address('0.0.0.0') == 0
        assert parse_address('255.255.255.255') == MAX_ADDRESS

    def test_whitespace(self):
        assert parse_address(' 10.0.0.1\n') == 0x0A000001

    def test_invalid(self):
        with pytest.raises(InvalidAddressError):
            parse_address('not-an-ip')

    def test_octet_out_of_range(self):
        with pytest.raises(InvalidAddressError):
            parse_address('256.1.1.1')

    def test_ipv6_rejected(self):
        with pytest.raises(InvalidAddressError, match="Not an IPv4"):
            parse_address('2001:db8::1')


class TestFormatAddress:
    def test_format(self):
        assert format_address(0xC0A80001) == '192.168.0.1'
        assert format_address(0) == '0.0.0.0'
        assert format_address(MAX_ADDRESS) == '255.255.255.255'

    def test_out_of_range(self):
        with pytest.raises(InvalidAddressError):
            format_address(MAX_ADDRESS + 1)
        with pytest.raises(InvalidAddressError):
            format_address(-1)

    def test_round_trip(self):
        for text in ['1.2.3.4', '10.255.0.1', '172.16.31.254']:
            assert format_address(parse_address(text)) == text


class TestParseSubnet:
    def test_cidr(self):
        assert parse_subnet('192.168.1.100/24') == Subnet(0xC0A80164, 24)

    def test_bare_address_is_host_route(self):
        assert parse_subnet('10.0.0.1') == Subnet(0x0A000001, 32)

    def test_dotted_mask(self):
        assert parse_subnet('192.168.1.0/255.255.255.0').prefix == 24

    def test_zero_prefix(self):
        assert parse_subnet('0.0.0.0/0') == Subnet(0, 0)

    def test_prefix_too_large(self):
        with pytest.raises(InvalidPrefixError):
            parse_subnet('10.0.0.0/33')

    def test_garbage_prefix(self):
        with pytest.raises(InvalidAddressError):
            parse_subnet('10.0.0.0/abc')

    def test_bad_address(self):
        with pytest.raises(SubnetError):
            parse_subnet('300.0.0.0/8')

    def test_ipv6_rejected(self):
        with pytest.raises(InvalidAddressError):
            parse_subnet('2001:db8::/32')

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_subnet('nonsense')


class TestFormatSubnet:
    def test_canonical_form(self):
        assert format_subnet(Subnet(0xC0A80164, 24)) == '192.168.1.0/24'

    def test_str_keeps_base(self):
        assert str(Subnet(0xC0A80164, 24)) == '192.168.1.100/24'


class TestSubnetInfo:
    def test_slash_24(self):
        info = calculate_subnet('192.168.1.100/24')
        assert info == SubnetInfo(
            cidr='192.168.1.0/24',
            network='192.168.1.0',
            broadcast='192.168.1.255',
            netmask='255.255.255.0',
            hostmask='0.0.0.255',
            prefix_length=24,
            num_addresses=256,
            num_hosts=254,
            num_unusable=2,
            usable_percent=99.21875,
            first_host='192.168.1.1',
            last_host='192.168.1.254',
        )

    def test_slash_31(self):
        info = calculate_subnet('10.0.0.0/31')
        assert info.num_hosts == 2
        assert info.first_host == '10.0.0.0'
        assert info.last_host == '10.0.0.1'

    def test_slash_32(self):
        info = calculate_subnet('10.0.0.7/32')
        assert info.num_hosts == 1
        assert info.first_host == info.last_host == '10.0.0.7'
        assert info.netmask == '255.255.255.255'

    def test_slash_0(self):
        info = subnet_info(Subnet(0, 0))
        assert info.num_addresses == 2 ** 32
        assert info.netmask == '0.0.0.0'
        assert info.hostmask == '255.255.255.255'
        assert info.last_host == '255.255.255.254'
