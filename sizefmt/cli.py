"""
Sizefmt CLI: print magnitudes with scaled unit prefixes.

    $ sizefmt 1999999999 -p 4 --unit B
    1.9999GB
"""

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import sys
from collections.abc import Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .config import FormatConf, Separator, get_prefix_system, get_separator, load_prefix_systems
from .formatter import SizeFormatter
from .numeric import INT_TYPES, BaseTypeTooSmall, get_int_type


# Methods --------------------------------------------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sizefmt",
        description="Format unsigned integers with scaled unit prefixes, truncating to the requested precision.",
    )
    parser.add_argument("values", nargs="+", metavar="VALUE", help="Unsigned integer magnitudes, e.g. byte counts.")
    parser.add_argument(
        "-p", "--precision",
        type=int,
        default=None,
        help=f"Fractional digits to show (default: {FormatConf.DEFAULT_PRECISION}).",
    )

    system = parser.add_mutually_exclusive_group()
    system.add_argument("--si", dest="system", action="store_const", const="si", help="SI prefixes (default).")
    system.add_argument("--binary", dest="system", action="store_const", const="binary", help="Binary prefixes.")
    system.add_argument("--system", dest="system", metavar="NAME", help="Prefix system by name.")
    parser.add_argument(
        "--prefix-file",
        metavar="FILE",
        help="TOML file with custom [prefixes.<name>] systems, selectable with --system.",
    )

    separator = parser.add_mutually_exclusive_group()
    separator.add_argument(
        "--comma", dest="separator", action="store_const", const=Separator.COMMA, help="Comma decimal separator."
    )
    separator.add_argument("--separator", metavar="CHAR", help="Decimal separator character (default: '.').")

    parser.add_argument("--unit", default="", help="Base unit appended after the prefix, e.g. 'B'.")
    parser.add_argument(
        "--int-type",
        default="u128",
        choices=tuple(INT_TYPES),
        help="Integer base type the values must fit into (default: u128).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.precision is not None and args.precision < 0:
        parser.error(f"precision must be >= 0, got {args.precision}")

    try:
        custom = load_prefix_systems(args.prefix_file) if args.prefix_file else None
        prefixes = get_prefix_system(args.system or "si", custom)
        separator = get_separator(args.separator or Separator.POINT)
        int_type = get_int_type(args.int_type)
    except (OSError, TypeError, ValueError) as e:
        parser.error(str(e))

    formatters = []
    for value in args.values:
        try:
            formatters.append(SizeFormatter(_parse_int(value), prefixes, separator, int_type))
        except (TypeError, ValueError) as e:
            parser.error(f"invalid value {value!r}: {e}")

    try:
        for formatter in formatters:
            print(f"{formatter.format(args.precision)}{args.unit}")
    except BaseTypeTooSmall as e:
        parser.exit(1, f"{parser.prog}: error: {e}\n")
    return 0


# Private Methods ------------------------------------------------------------------------------------------------------

def _parse_int(value: str) -> int:
    """Parse a decimal integer, or a hex, octal or binary one with its 0x, 0o or 0b prefix."""
    if value.lstrip("+-")[:2].lower() in ("0x", "0o", "0b"):
        return int(value, 0)
    return int(value)


if __name__ == "__main__":
    sys.exit(main())
