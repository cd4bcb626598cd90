"""Process entry point for ``python -m fetchit.cli`` and the fetchit script."""

from .cli import app
from .console import console


def main() -> int:
    """Run the fetch command.

    Expected failures are reported by the command itself; anything that
    escapes it is printed through the console instead of as a traceback.

    Returns:
        int: Exit code (0 for success, 1 for an unexpected error)
    """
    try:
        app()
        return 0
    except Exception as e:
        console.error(f"{type(e).__name__}: {e}")
        return 1


if __name__ == "__main__":
    import sys
    sys.exit(main())
