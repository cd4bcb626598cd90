"""Command definition for the fetchit CLI.

A single Typer command: download a URL and save the body to the fixed
output path in the working directory.
"""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from .config import load_config
from .console import console, debug_print
from .download import DownloadError, download, write_output
from .size import format_size

app = typer.Typer(
    help="Download a file over HTTP with a progress bar",
    add_completion=False,
)


@app.command()
def fetch(
    url: Optional[str] = typer.Option(
        None, "--url", "-u", help="Source to download the file from"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config-file", "-c", help="Select a custom config file"
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Show detailed debug information"
    ),
) -> None:
    """Download URL and write it to the output file.

    The config file is read once at startup; a missing file is fine.
    Without --url nothing is downloaded and the output file is left alone.
    """
    config = load_config(config_file, debug=debug)
    debug_print(
        f"Loaded {len(config.values)} value(s) from {config.config_file}", debug
    )

    if url is None:
        console.warning("No URL given, nothing to download.")
        return

    try:
        data = asyncio.run(download(url, config=config))
        destination = write_output(data, config.destination)
    except DownloadError as e:
        console.error(str(e))
        raise typer.Exit(1)

    console.saved(format_size(len(data)), str(destination))
