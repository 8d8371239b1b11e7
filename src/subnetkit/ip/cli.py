"""
IP/CIDR CLI commands.
"""

import click
from rich.console import Console
from rich.table import Table

from subnetkit.config import get_config
from subnetkit.ip.convert import format_subnet, parse_address, parse_subnet
from subnetkit.ip.core import (
    adjacent_subnets,
    contains as subnet_contains,
    is_contained_in,
    optimal_prefix_for_hosts,
    overlaps,
    split_subnet,
    subnet_for_hosts,
)
from subnetkit.ip.errors import SubnetError
from subnetkit.ip.exclusion import aggregate, exclude_all, summarize as summarize_subnets
from subnetkit.ip.models import Subnet
from subnetkit.ip.report import subnet_info
from subnetkit.logging_config import get_logger

logger = get_logger(__name__)


def _fail(console: Console, error: Exception) -> None:
    logger.debug(f"Command failed: {error!r}")
    console.print(f"[red]Error:[/red] {error}")
    raise SystemExit(1)


def _print_subnets(console: Console, subnets: list[Subnet]) -> None:
    """Print one CIDR per line, truncated at the configured display limit."""
    limit = get_config().max_display
    if len(subnets) > limit:
        console.print(f"[yellow]Showing first {limit} subnets...[/yellow]\n")
        for subnet in subnets[:limit]:
            console.print(format_subnet(subnet))
        console.print(f"\n[dim]... and {len(subnets) - limit:,} more[/dim]")
    else:
        for subnet in subnets:
            console.print(format_subnet(subnet))


@click.group()
def ip():
    """IPv4 subnet arithmetic."""
    pass


@ip.command()
@click.argument("cidr")
def calc(cidr: str):
    """Calculate subnet information from CIDR notation.

    Examples:
        subnetkit ip calc 10.0.0.0/8
        subnetkit ip calc 192.168.1.100/24
    """
    console = Console()

    try:
        subnet = subnet_info(parse_subnet(cidr))
    except (SubnetError, ValueError) as e:
        _fail(console, e)

    table = Table(title=f"Subnet Calculator: {cidr}", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("CIDR", subnet.cidr)
    table.add_row("Network", subnet.network)
    table.add_row("Broadcast", subnet.broadcast)
    table.add_row("Netmask", subnet.netmask)
    table.add_row("Hostmask", subnet.hostmask)
    table.add_row("Prefix Length", f"/{subnet.prefix_length}")
    table.add_row("Total Addresses", f"{subnet.num_addresses:,}")
    table.add_row("Usable Hosts", f"{subnet.num_hosts:,}")
    table.add_row("Reserved", f"{subnet.num_unusable:,}")
    table.add_row("Usable %", f"{subnet.usable_percent:.2f}%")
    table.add_row("First Host", subnet.first_host)
    table.add_row("Last Host", subnet.last_host)

    console.print(table)


@ip.command()
@click.argument("cidr1")
@click.argument("cidr2")
def overlap(cidr1: str, cidr2: str):
    """Check if two CIDRs overlap.

    Examples:
        subnetkit ip overlap 10.0.0.0/8 10.1.0.0/16
        subnetkit ip overlap 192.168.0.0/24 192.168.1.0/24
    """
    console = Console()

    try:
        result = overlaps(parse_subnet(cidr1), parse_subnet(cidr2))
    except (SubnetError, ValueError) as e:
        _fail(console, e)

    if result:
        console.print(f"[yellow]Yes[/yellow] - {cidr1} and {cidr2} overlap")
    else:
        console.print(f"[green]No[/green] - {cidr1} and {cidr2} do not overlap")


@ip.command()
@click.argument("cidr")
@click.argument("other")
def contains(cidr: str, other: str):
    """Check if a CIDR contains another CIDR or address.

    Examples:
        subnetkit ip contains 10.0.0.0/8 10.1.2.3
        subnetkit ip contains 192.168.0.0/16 192.168.1.0/24
    """
    console = Console()

    try:
        outer = parse_subnet(cidr)
        inner = parse_subnet(other)
    except (SubnetError, ValueError) as e:
        _fail(console, e)

    if subnet_contains(outer, inner):
        console.print(f"[green]Yes[/green] - {other} is within {cidr}")
    elif is_contained_in(outer, inner):
        console.print(f"[red]No[/red] - {other} contains {cidr}")
    else:
        console.print(f"[red]No[/red] - {other} is not within {cidr}")


@ip.command()
@click.argument("base")
@click.argument("excludes", nargs=-1, required=True)
def diff(base: str, excludes: tuple[str, ...]):
    """Subtract one or more CIDRs from a base CIDR.

    Examples:
        subnetkit ip diff 10.0.0.0/8 10.1.0.0/16
        subnetkit ip diff 192.168.0.0/24 192.168.0.64/26 192.168.0.200/32
    """
    console = Console()

    try:
        base_subnet = parse_subnet(base)
        removes = [parse_subnet(cidr) for cidr in excludes]
    except (SubnetError, ValueError) as e:
        _fail(console, e)

    result = exclude_all(base_subnet, removes)

    console.print(f"[cyan]{base} - {' - '.join(excludes)} =[/cyan]\n")

    if not result:
        console.print("[dim]Empty set (excluded CIDRs cover the whole base)[/dim]")
    else:
        _print_subnets(console, result)


def _navigate(cidr: str, count: int) -> None:
    console = Console()

    try:
        result = adjacent_subnets(parse_subnet(cidr), count)
    except (SubnetError, ValueError) as e:
        _fail(console, e)

    _print_subnets(console, result)


@ip.command("next")
@click.argument("cidr")
@click.option("--count", "-n", default=1, show_default=True, type=click.IntRange(min=1),
              help="Number of following subnets to list")
def next_cmd(cidr: str, count: int):
    """List the subnets of the same size after a CIDR.

    Examples:
        subnetkit ip next 192.168.0.0/24
        subnetkit ip next 10.0.0.0/30 --count 4
    """
    _navigate(cidr, count)


@ip.command("prev")
@click.argument("cidr")
@click.option("--count", "-n", default=1, show_default=True, type=click.IntRange(min=1),
              help="Number of preceding subnets to list")
def prev_cmd(cidr: str, count: int):
    """List the subnets of the same size before a CIDR, in ascending order.

    Examples:
        subnetkit ip prev 192.168.1.0/24
        subnetkit ip prev 10.0.0.16/30 --count 4
    """
    _navigate(cidr, -count)


@ip.command()
@click.argument("cidr")
@click.argument("new_prefix")
def split(cidr: str, new_prefix: str):
    """Split a CIDR into smaller subnets.

    Examples:
        subnetkit ip split 10.0.0.0/8 /16
        subnetkit ip split 192.168.0.0/24 28
    """
    console = Console()

    try:
        prefix = int(new_prefix.lstrip("/"))
        subnets = split_subnet(parse_subnet(cidr), prefix)
    except (SubnetError, ValueError) as e:
        _fail(console, e)

    console.print(f"[cyan]Splitting {cidr} into /{prefix} subnets:[/cyan]")
    console.print(f"[dim]Total subnets: {len(subnets):,}[/dim]\n")
    _print_subnets(console, subnets)


@ip.command()
@click.argument("cidrs", nargs=-1, required=True)
def summarize(cidrs: tuple[str, ...]):
    """Aggregate multiple CIDRs into the minimum set.

    Examples:
        subnetkit ip summarize 192.168.0.0/24 192.168.1.0/24
        subnetkit ip summarize 10.0.0.0/24 10.0.1.0/24 10.0.2.0/24 10.0.3.0/24
    """
    console = Console()

    try:
        result = aggregate(parse_subnet(cidr) for cidr in cidrs)
    except (SubnetError, ValueError) as e:
        _fail(console, e)

    console.print(f"[cyan]Input CIDRs:[/cyan] {len(cidrs)}")
    console.print(f"[cyan]Summarized:[/cyan] {len(result)}\n")
    _print_subnets(console, result)


@ip.command()
@click.argument("cidrs", nargs=-1, required=True)
def supernet(cidrs: tuple[str, ...]):
    """Find the smallest single CIDR containing all given CIDRs.

    Examples:
        subnetkit ip supernet 192.168.0.0/24 192.168.3.0/24
    """
    console = Console()

    try:
        result = summarize_subnets(parse_subnet(cidr) for cidr in cidrs)
    except (SubnetError, ValueError) as e:
        _fail(console, e)

    console.print(format_subnet(result))


@ip.command()
@click.argument("host_count", type=int)
@click.option("--address", "-a", default=None, help="Place the block around this address")
def hosts(host_count: int, address: str | None):
    """Find the prefix length that best fits a number of hosts.

    Examples:
        subnetkit ip hosts 254
        subnetkit ip hosts 2
        subnetkit ip hosts 50 --address 10.20.30.40
    """
    console = Console()

    try:
        if address is None:
            subnet = Subnet(0, optimal_prefix_for_hosts(host_count))
        else:
            subnet = subnet_for_hosts(parse_address(address), host_count)
    except SubnetError as e:
        _fail(console, e)

    if address is None:
        console.print(
            f"[green]/{subnet.prefix}[/green] - {subnet.host_count:,} usable hosts "
            f"for {host_count:,} requested"
        )
    else:
        console.print(
            f"[green]{format_subnet(subnet)}[/green] - {subnet.host_count:,} usable hosts "
            f"for {host_count:,} requested"
        )
    console.print(f"Utilization: {subnet.utilization_for(host_count):.2f}%")
    console.print(f"Wasted addresses: {subnet.wasted_addresses_for(host_count):,}")
