"""Command line interface for converting and inspecting lengths.

Commands:
    convert LENGTH UNIT   Convert a length string to another unit.
    normalize LENGTH      Re-express a length in its most natural unit.
    units [--system S]    List the known units as a table.

Example:
    $ python -m lengthkit convert "1 mi" km
    1 mi = 1.609344km
    $ python -m lengthkit normalize 5000m
    5000m = 5km
    $ python -m lengthkit units --system nautical
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from lengthkit.config import DEFAULT_CLI_PRECISION
from lengthkit.errors import LengthError
from lengthkit.formatting import format_value
from lengthkit.log import enable_console_logging, get_logger
from lengthkit.parser import parse
from lengthkit.unit import REGISTRY, UnitSystem

LOG = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lengthkit", description="Parse, convert and normalize lengths.")
    parser.add_argument("-v", "--verbose", action="store_true", help="log parsing and conversion details")
    commands = parser.add_subparsers(dest="command", required=True)

    convert = commands.add_parser("convert", help="convert a length to another unit")
    convert.add_argument("length", help='length string such as "3.2 km"')
    convert.add_argument("unit", help="target unit symbol or name")
    convert.add_argument("-p", "--precision", type=int, default=DEFAULT_CLI_PRECISION, help="digits after the point")

    normalize = commands.add_parser("normalize", help="express a length in its most natural unit")
    normalize.add_argument("length", help='length string such as "5000m"')
    normalize.add_argument("-p", "--precision", type=int, default=DEFAULT_CLI_PRECISION, help="digits after the point")

    units = commands.add_parser("units", help="list known units")
    units.add_argument("-s", "--system", choices=[system.value for system in UnitSystem], help="only this family")
    return parser


def _units_table(system: UnitSystem | None) -> Table:
    table = Table(title="Length units")
    table.add_column("System")
    table.add_column("Unit")
    table.add_column("Symbols")
    table.add_column("Names")
    table.add_column("Meters", justify="right")
    for unit in REGISTRY.units(system):
        table.add_row(
            unit.system.value,
            unit.name.lower(),
            ", ".join(unit.symbols),
            ", ".join(unit.names),
            format_value(unit.factor),
        )
    return table


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Run the command line interface.

    Args:
        argv: Arguments without the program name. None reads sys.argv.
        console: Console to print results to. Defaults to stdout.

    Returns:
        int: Process exit code, 0 on success and 1 on invalid input.
    """
    args = build_parser().parse_args(argv)
    console = console or Console()
    if args.verbose:
        enable_console_logging(logging.DEBUG)

    try:
        if args.command == "convert":
            length = parse(args.length)
            target = REGISTRY.lookup(args.unit.strip())
            result = length.format(target, precision=args.precision)
            console.print(f"{args.length} = {result}", markup=False, highlight=False)
        elif args.command == "normalize":
            length = parse(args.length)
            result = length.normalize().format(precision=args.precision)
            console.print(f"{args.length} = {result}", markup=False, highlight=False)
        else:
            system = UnitSystem(args.system) if args.system else None
            console.print(_units_table(system))
    except LengthError as exc:
        LOG.debug("Command %s failed", args.command, exc_info=True)
        console.print(f"error: {exc}", markup=False, highlight=False, style="bold red")
        return 1
    return 0
