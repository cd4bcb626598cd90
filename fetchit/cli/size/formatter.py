"""File size formatting utilities."""

UNITS = ("KB", "MB", "GB")


def format_size(size_bytes: int) -> str:
    """
    Format a size in bytes to a human-readable string.

    Args:
        size_bytes: Size in bytes

    Returns:
        str: Formatted size string (e.g., "12 B", "1.50 KB", "2.00 MB")

    Raises:
        ValueError: If size_bytes is negative
    """
    if size_bytes < 0:
        raise ValueError("Size cannot be negative")

    if size_bytes < 1024:
        return f"{size_bytes} B"

    size = size_bytes / 1024
    for unit in UNITS[:-1]:
        if size < 1024:
            return f"{size:.2f} {unit}"
        size /= 1024
    return f"{size:.2f} {UNITS[-1]}"
