"""File download utilities."""

from .downloader import download
from .errors import (
    DownloadError,
    HttpStatusError,
    InvalidUrlError,
    OutputWriteError,
    TransferError,
)
from .progress import NullProgress, ProgressTracker
from .writer import write_output

__all__ = [
    "download",
    "write_output",
    "ProgressTracker",
    "NullProgress",
    "DownloadError",
    "InvalidUrlError",
    "TransferError",
    "HttpStatusError",
    "OutputWriteError",
]
