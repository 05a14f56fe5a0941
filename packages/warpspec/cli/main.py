"""Command-line interface for warpspec.

Examples:
    warpspec list
    warpspec map freq 0.5
    warpspec unmap db -6
    warpspec table attack --steps 5
    warpspec midi 60
"""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from warpspec.core.config.loader import configure_logging, load_warp_config, with_log_level
from warpspec.core.curves.catalog import SpecCatalog
from warpspec.core.curves.defaults import UnknownDefaultNameError
from warpspec.core.curves.sampling import sample_spec
from warpspec.core.pitch import freq_to_midi, midi_to_freq
from warpspec.core.utils.logging import get_logger

console = Console()


def _cmd_list(catalog: SpecCatalog, args: argparse.Namespace) -> int:
    table = Table(title="Warp specs")
    table.add_column("Name", style="cyan")
    table.add_column("Curve")
    table.add_column("Min", justify="right")
    table.add_column("Max", justify="right")

    for name, spec in catalog.items():
        table.add_row(name, spec.shape, f"{spec.minval:g}", f"{spec.maxval:g}")

    console.print(table)
    return 0


def _cmd_map(catalog: SpecCatalog, args: argparse.Namespace) -> int:
    spec = catalog.get(args.name)
    console.print(f"{spec.map(args.value):.6g}")
    return 0


def _cmd_unmap(catalog: SpecCatalog, args: argparse.Namespace) -> int:
    spec = catalog.get(args.name)
    console.print(f"{spec.unmap(args.value):.6g}")
    return 0


def _cmd_table(catalog: SpecCatalog, args: argparse.Namespace) -> int:
    spec = catalog.get(args.name)
    table = Table(title=f"{args.name}: {spec.describe()}")
    table.add_column("Control", justify="right")
    table.add_column("Value", justify="right", style="green")

    for point in sample_spec(spec, args.steps):
        table.add_row(f"{point.control:.3f}", f"{point.value:.6g}")

    console.print(table)
    return 0


def _cmd_midi(catalog: SpecCatalog, args: argparse.Namespace) -> int:
    console.print(f"{midi_to_freq(args.note):.6g}")
    return 0


def _cmd_freq(catalog: SpecCatalog, args: argparse.Namespace) -> int:
    console.print(f"{freq_to_midi(args.hz):.6g}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="warpspec",
        description="Convert between normalized control values and parameter values",
    )
    parser.add_argument("--config", type=Path, help="Config file with presets (.json/.yaml)")
    parser.add_argument("--log-level", help="Override the configured log level")

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List available specs")
    list_parser.set_defaults(handler=_cmd_list)

    map_parser = subparsers.add_parser("map", help="Control value [0, 1] -> parameter value")
    map_parser.add_argument("name", help="Spec name")
    map_parser.add_argument("value", type=float, help="Control value")
    map_parser.set_defaults(handler=_cmd_map)

    unmap_parser = subparsers.add_parser("unmap", help="Parameter value -> control value")
    unmap_parser.add_argument("name", help="Spec name")
    unmap_parser.add_argument("value", type=float, help="Parameter value")
    unmap_parser.set_defaults(handler=_cmd_unmap)

    table_parser = subparsers.add_parser("table", help="Sample a spec over the control range")
    table_parser.add_argument("name", help="Spec name")
    table_parser.add_argument("--steps", type=int, default=11, help="Number of samples (>= 2)")
    table_parser.set_defaults(handler=_cmd_table)

    midi_parser = subparsers.add_parser("midi", help="Midi note -> frequency")
    midi_parser.add_argument("note", type=float, help="Midi note number")
    midi_parser.set_defaults(handler=_cmd_midi)

    freq_parser = subparsers.add_parser("freq", help="Frequency -> midi note")
    freq_parser.add_argument("hz", type=float, help="Frequency in hertz")
    freq_parser.set_defaults(handler=_cmd_freq)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_warp_config(args.config)
        if args.log_level:
            config = with_log_level(config, args.log_level)
        configure_logging(config)
        catalog = SpecCatalog.from_config(config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: Could not load config: {escape(str(e))}[/red]")
        return 1

    get_logger(__name__, command=args.command).debug(f"Running {args.command}")

    try:
        return int(args.handler(catalog, args))
    except (UnknownDefaultNameError, ValueError) as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
