#!/usr/bin/env python3
"""
Staking Genesis CLI

Command-line interface for generating the staking contract genesis account.
Prints the alloc entry (code, storage, balance) for a set of validators.
"""

import json
import logging
from typing import Optional, Tuple

import click
from dotenv import load_dotenv
from eth_utils import to_canonical_address
from rich.console import Console
from rich.table import Table

from .models import PredeployParams
from .predeploy import PredeployError, predeploy_staking_contract
from .storage import (
    STAKING_SCHEMA,
    StakingStorageError,
    get_address_mapping,
    hex_to_bytes,
    parse_uint,
    word_to_hex,
)
from .validators import new_validator

# Load environment variables
load_dotenv()

# Configure rich console
console = Console()
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def parse_validator(value: str):
    """
    Parse a ``ADDRESS[:BLS_PUBLIC_KEY]`` option value into a validator.

    Raises:
        click.BadParameter: If the address or the key is not valid hex
    """
    address_part, _, bls_part = value.partition(":")
    try:
        address = to_canonical_address(address_part)
    except ValueError as e:
        raise click.BadParameter(f"Invalid validator address {address_part!r}: {e}")

    bls_public_key = None
    if bls_part:
        try:
            bls_public_key = hex_to_bytes(bls_part)
        except ValueError as e:
            raise click.BadParameter(f"Invalid BLS public key for {address_part}: {e}")

    return new_validator(address, bls_public_key)


def parse_uint_option(ctx, param, value):
    """Click callback turning a hex/decimal string into an int."""
    if value is None:
        return None
    try:
        return parse_uint(str(value))
    except ValueError as e:
        raise click.BadParameter(str(e))


def print_storage_table(account):
    """Print the storage map of the account as a table."""
    table = Table(title="Staking Contract Storage")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")

    for key, value in sorted(account.storage.items()):
        table.add_row(word_to_hex(key), word_to_hex(value))

    console.print(table)
    console.print(f"[bold]Balance:[/bold] {account.balance} ({hex(account.balance)})")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx, verbose: bool):
    """
    Staking Genesis CLI - Pre-populate the staking contract for a genesis file.
    """
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command()
@click.option(
    "--validator",
    "validators",
    multiple=True,
    help="Validator as ADDRESS or ADDRESS:BLS_PUBLIC_KEY (repeatable, in order)",
)
@click.option(
    "--min-validators",
    envvar="STAKING_MIN_VALIDATORS",
    callback=parse_uint_option,
    help="Minimum number of validators",
)
@click.option(
    "--max-validators",
    envvar="STAKING_MAX_VALIDATORS",
    callback=parse_uint_option,
    help="Maximum number of validators",
)
@click.option(
    "--staked-balance",
    envvar="STAKING_DEFAULT_BALANCE",
    callback=parse_uint_option,
    help="Stake per validator in wei (decimal or 0x-hex)",
)
@click.option(
    "--format",
    "format_output",
    type=click.Choice(["json", "table"]),
    default="json",
    help="Output format",
)
@click.option(
    "--include-code/--no-include-code",
    default=True,
    help="Include the contract bytecode in JSON output",
)
def alloc(
    validators: Tuple[str, ...],
    min_validators: Optional[int],
    max_validators: Optional[int],
    staked_balance: Optional[int],
    format_output: str,
    include_code: bool,
):
    """Generate the genesis alloc entry of the staking contract."""
    parsed = [parse_validator(v) for v in validators]

    overrides = {
        "min_validator_count": min_validators,
        "max_validator_count": max_validators,
        "default_staked_balance": staked_balance,
    }
    try:
        params = PredeployParams(**{k: v for k, v in overrides.items() if v is not None})
    except ValueError as e:
        raise click.ClickException(f"Invalid predeploy parameters: {e}")

    try:
        account = predeploy_staking_contract(parsed, params)
    except PredeployError as e:
        raise click.ClickException(str(e))

    if format_output == "table":
        print_storage_table(account)
        return

    click.echo(json.dumps(account.to_dict(include_code), indent=2))


@cli.command(name="slot")
@click.argument("address")
@click.argument("slot", type=int)
def slot_key(address: str, slot: int):
    """Print the storage key of ADDRESS in the mapping declared at SLOT."""
    try:
        key = get_address_mapping(to_canonical_address(address), slot)
    except (ValueError, StakingStorageError) as e:
        raise click.ClickException(str(e))

    click.echo(word_to_hex(key))


@cli.command()
def schema():
    """Print the storage slot schema of the staking contract."""
    table = Table(title="Staking Contract Slots")
    table.add_column("Variable", style="cyan")
    table.add_column("Slot", style="green")

    for name, number in STAKING_SCHEMA.as_dict().items():
        table.add_row(name, str(number))

    console.print(table)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
