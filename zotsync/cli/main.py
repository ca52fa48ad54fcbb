"""
zotsync CLI - inspect and initialize extension settings.

Examples:
    zotsync defaults --section other
    zotsync init --store data/settings.json
    zotsync requests
    zotsync legacy roam-config.json
"""

import click

from zotsync import __version__
from zotsync.config import AppConfig, configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="zotsync")
@click.pass_context
def cli(ctx):
    """
    zotsync - settings reconciliation for the Zotero/Roam integration.
    """
    config = AppConfig.from_env()
    configure_logging(config)
    ctx.obj = config


from zotsync.cli.commands import settings

cli.add_command(settings.defaults)
cli.add_command(settings.init)
cli.add_command(settings.legacy)
cli.add_command(settings.requests)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
