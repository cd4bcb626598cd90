"""Writing the downloaded body to disk."""

from pathlib import Path

from fetchit.cli.download.errors import OutputWriteError


def write_output(data: bytes, destination: Path) -> Path:
    """
    Write the full buffer to the destination, replacing any previous content.

    Args:
        data: The downloaded bytes
        destination: The file to create or truncate

    Returns:
        Path: The path that was written

    Raises:
        OutputWriteError: If the file cannot be created or written
    """
    try:
        with open(destination, "wb") as f:
            f.write(data)
    except OSError as e:
        raise OutputWriteError(destination, e) from e
    return destination
