"""fetchit CLI package.

A command-line tool that downloads a file over HTTP with a progress bar.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("fetchit")
except PackageNotFoundError:
    # Package is not installed
    __version__ = "0.1.0"

# Export the app for external use
from .cli import app

__all__ = ["app", "__version__"]
