"""Net-JSON CLI - Command Line Interface.

This module provides a small command-line front end to the netlist codec,
for inspecting JSON netlists written by synthesis tools and re-encoding them.

The CLI is built using Typer and uses Rich for formatted output.

Typical usage example:

  $ netjson parse design.json
  $ netjson parse design.json --output design.min.json
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

app = typer.Typer(
    name="netjson",
    help="Net-JSON: JSON netlist codec",
    no_args_is_help=True,
)
console = Console()

from .log_utils import setup_logging


@app.callback(invoke_without_command=False)
def main(
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress debug logs (show warnings/errors only)"
    ),
):
    """Net-JSON: JSON netlist codec."""
    setup_logging(quiet=quiet)


@app.command()
def parse(
    file: Path = typer.Argument(..., help="Path to JSON netlist (.json or .json.gz)"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Re-encode the netlist to this file"
    ),
    indent: Optional[int] = typer.Option(
        None, "--indent", "-i", help="Indent the re-encoded JSON (default: compact)"
    ),
):
    """Parses a JSON netlist and displays a summary.

    Decodes the file, prints the creator and the size of every module, and
    reports validation warnings such as modules without ports or fields the
    codec does not recognise. Optionally writes the netlist back out.

    Args:
        file: The path to the netlist file.
        output: Optional. Path to write the re-encoded netlist to.
        indent: Optional. Indentation for the re-encoded JSON.

    Raises:
        typer.Exit: If the file is not found or is not a valid netlist.
    """
    if not file.exists():
        console.print(f"[red]Error:[/red] File not found: {file}")
        raise typer.Exit(1)

    from .exceptions import NetlistFormatError
    from .parsers.netlist_json import NetlistJSONParser

    logger = logging.getLogger("netjson.cli")
    logger.info(f"Starting parse for {file}")

    parser = NetlistJSONParser()
    try:
        netlist = parser.parse(file)
    except NetlistFormatError as e:
        console.print(f"[red]Error:[/red] Invalid netlist: {escape(str(e))}")
        raise typer.Exit(1)

    console.print(
        Panel.fit(
            f"[bold green]Creator:[/] {escape(netlist.creator)}\n"
            f"[bold]Modules:[/] {len(netlist.modules)}\n"
            f"[bold]Cells:[/] {sum(len(m.cells) for m in netlist.modules.values())}",
            title="Netlist Summary",
        )
    )

    if netlist.modules:
        table = Table(title="Modules")
        table.add_column("Name")
        table.add_column("Ports", justify="right")
        table.add_column("Cells", justify="right")
        table.add_column("Memories", justify="right")
        table.add_column("Nets", justify="right")
        table.add_column("Signals", justify="right")

        for name, module in netlist.modules.items():
            table.add_row(
                escape(name),
                str(len(module.ports)),
                str(len(module.cells)),
                str(len(module.memories)),
                str(len(module.nets)),
                str(len(module.signals())),
            )

        console.print(table)

    # Validation warnings
    warnings = parser.validate(netlist)
    if warnings:
        for w in warnings:
            console.print(f"[yellow]Warning:[/yellow] {escape(w)}")

    if output:
        from .writers.netlist_json import NetlistJSONWriter

        NetlistJSONWriter(indent=indent).write(netlist, output)
        console.print(f"[green]Saved to:[/green] {output}")


if __name__ == "__main__":
    app()
