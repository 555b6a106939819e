"""
Main CLI entry point for Launch Lens.
"""

import logging
import sys

import click
from rich.console import Console
from web3 import Web3

from config import Config
from config.settings import REGISTRY_TYPES
from launchlens.classifier import interface_id
from launchlens.display import display_record, display_records, render_json
from launchlens.errors import LensError
from launchlens.lens import LaunchLens
from launchlens.utils import checksum_address, setup_logging

console = Console()
logger = logging.getLogger(__name__)


def _registry_type(value: str) -> int:
    if value in REGISTRY_TYPES:
        return REGISTRY_TYPES[value]
    try:
        return int(value)
    except ValueError:
        raise click.BadParameter(f"expected one of {sorted(REGISTRY_TYPES)} or an integer type code")


def _open_lens(block) -> LaunchLens:
    if not Config.REGISTRY_ADDRESS:
        console.print("[red]❌ REGISTRY_ADDRESS not set in .env[/red]")
        sys.exit(1)
    return LaunchLens(Config.RPC_URL, Config.REGISTRY_ADDRESS, block_identifier=block)


def _address(ctx, param, value):
    if value is None:
        return None
    if not Web3.is_address(value):
        raise click.BadParameter(f"{value!r} is not a valid address")
    return checksum_address(value)


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug):
    """Launch Lens - aggregated views of collection launches."""
    log_level = "DEBUG" if debug else Config.LOG_LEVEL
    setup_logging(log_level, Config.LOG_FILE or None)


@cli.command()
def check():
    """Validate configuration and test connection."""
    errors = Config.validate()
    if errors:
        console.print("[bold red]Configuration errors:[/bold red]")
        for error in errors:
            console.print(f"  ❌ {error}")
        sys.exit(1)

    console.print("✅ Configuration valid")

    try:
        lens = LaunchLens(Config.RPC_URL, Config.REGISTRY_ADDRESS)
        block = lens.get_latest_block()
        console.print(f"✅ Connected to RPC (block: {block})")
        for name, code in REGISTRY_TYPES.items():
            console.print(f"   {name}: {lens.count(code)} records")
    except Exception as e:
        console.print(f"[red]❌ RPC connection failed: {e}[/red]")
        sys.exit(1)


@cli.command()
@click.argument("address", callback=_address)
@click.option("--block", type=int, help="Pin reads to a block number")
def classify(address, block):
    """Print the capability profile of a launch record."""
    lens = _open_lens(block)
    try:
        profile = lens.classify(address)
    except LensError as e:
        console.print(f"[red]❌ {e}[/red]")
        sys.exit(1)
    console.print(profile.name)


@cli.command()
@click.argument("address", callback=_address)
@click.option("--user", callback=_address, help="Wallet address for participation counters")
@click.option("--block", type=int, help="Pin reads to a block number")
@click.option("--format", "output_format", type=click.Choice(["rich", "json"]), default="rich")
def show(address, user, block, output_format):
    """Aggregate one launch record."""
    lens = _open_lens(block)
    try:
        record = lens.aggregate(address, user)
    except LensError as e:
        console.print(f"[red]❌ {e}[/red]")
        sys.exit(1)

    if output_format == "json":
        click.echo(render_json([record]))
    else:
        display_record(record)


@cli.command(name="list")
@click.option("--type", "registry_type", default="auction", help="Registry type (auction, flat or an integer code)")
@click.option("--offset", default=0, type=click.IntRange(min=0), help="First registry index")
@click.option("--limit", default=Config.DEFAULT_PAGE_SIZE, type=click.IntRange(min=0), help="Page size")
@click.option("--user", callback=_address, help="Wallet address for participation counters")
@click.option("--block", type=int, help="Pin reads to a block number")
@click.option("--format", "output_format", type=click.Choice(["rich", "json"]), default="rich")
def list_records(registry_type, offset, limit, user, block, output_format):
    """Aggregate a page of launch records from the registry."""
    code = _registry_type(registry_type)
    lens = _open_lens(block)
    try:
        records = lens.collect(code, offset, limit, user)
    except LensError as e:
        console.print(f"[red]❌ {e}[/red]")
        logger.debug("Collect error", exc_info=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(render_json(records))
    elif not records:
        console.print("[yellow]No records in this range[/yellow]")
    else:
        display_records(records, offset)


@cli.command(name="interface-id")
@click.argument("signatures", nargs=-1, required=True)
def interface_id_command(signatures):
    """Compute an ERC-165 interface id from function signatures.

    Pass every function of the interface, e.g. "salePrice()" "allowlistMint(uint256)".
    """
    click.echo("0x" + interface_id(signatures).hex())


if __name__ == "__main__":
    cli()
