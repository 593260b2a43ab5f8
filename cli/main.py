#!/usr/bin/env python3
"""
tdux CLI - typed two-phase action dispatcher

Main entrypoint for the tdux command-line tool.
"""

import sys

import typer
from rich.console import Console
from rich.table import Table

from cli.commands import demo
from tdux.logging_config import setup_logging

# Initialize Typer app
app = typer.Typer(
    name="tdux",
    help="Typed two-phase action dispatcher CLI",
    add_completion=False,
)

# Console for rich output
console = Console()

# Add standalone commands
app.command(name="demo")(demo.demo_command)


@app.command()
def version():
    """Show version information."""
    from cli import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]tdux[/bold]", f"v{__version__}")
    table.add_row("Phases", "should -> did")

    console.print(table)


def main():
    """Main entrypoint."""
    # stdout carries command output (tables, --json)
    setup_logging(stream=sys.stderr)
    app()


if __name__ == "__main__":
    main()
