"""
Command line entry point for subnetkit.
"""

import click

from subnetkit import __version__
from subnetkit.config import get_config
from subnetkit.ip.cli import ip
from subnetkit.logging_config import configure_logging


@click.group()
@click.version_option(__version__, prog_name="subnetkit")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None,
              help="Also write logs to this file")
def main(debug: bool, log_file: str | None):
    """subnetkit - IPv4 subnet arithmetic for network engineers."""
    config = get_config()
    configure_logging(
        debug=debug,
        log_file=log_file or config.log_file or None,
        level=config.log_level,
    )


main.add_command(ip)


if __name__ == "__main__":
    main()
