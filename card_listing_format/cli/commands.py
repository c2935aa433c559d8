"""
Command-line interface for card-listing-format.

This module provides the CLI command that loads a card list file and
reports which listing format it uses.
"""

import sys
import click
import logging
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..core.aggregator import FormatAggregator
from ..core.loader import read_listing_file

DEFAULT_FILENAME = "assets/cardlistingformat_number_example_00.txt"

# Initialize Rich console for output
console = Console()

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


@click.command()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.argument('filename', required=False, default=DEFAULT_FILENAME,
                type=click.Path(dir_okay=False))
def main(verbose, filename):
    """Detect the listing format of the card list in FILENAME."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        console.print("[dim]Verbose mode enabled[/dim]")

    try:
        content = read_listing_file(filename)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Failed loading file {escape(filename)}: {escape(str(e))}[/red]")
        sys.exit(1)

    result = FormatAggregator().classify_text(content)

    display_detection(content, result)


def display_detection(content, result):
    """Print the raw file content followed by the detection result."""
    click.echo(content, nl=False)
    if not content.endswith('\n'):
        click.echo()

    style = "green" if result.matched else "yellow"
    console.print(f"[bold]Detected format:[/bold] [{style}]{result}[/{style}]")


if __name__ == '__main__':
    main()
