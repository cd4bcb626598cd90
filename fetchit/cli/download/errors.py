"""Exceptions raised while downloading and saving a file."""

from pathlib import Path


class DownloadError(Exception):
    """Base class for every failure of a fetch run."""

    def __init__(self, message: str, url: str | None = None):
        """Initialize download error.

        Args:
            message: Error message
            url: The URL being downloaded, if known
        """
        super().__init__(message)
        self.url = url


class InvalidUrlError(DownloadError):
    """Raised when the URL is not an absolute http(s) URL."""

    def __init__(self, url: str, detail: str = ""):
        message = f"Invalid URL: {url!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message, url)


class TransferError(DownloadError):
    """Raised when the request cannot be sent or the body cannot be read."""

    def __init__(self, url: str, cause: BaseException):
        """Initialize transfer error.

        Args:
            url: The URL being downloaded
            cause: The underlying network exception
        """
        error_type = type(cause).__name__
        detail = str(cause)
        message = f"{error_type} while downloading {url}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, url)
        self.cause = cause


class HttpStatusError(DownloadError):
    """Raised when the server answers with a non-2xx status."""

    def __init__(self, url: str, status: int, reason: str | None = None):
        message = f"Unable to download data from {url}: HTTP {status}"
        if reason:
            message = f"{message} {reason}"
        super().__init__(message, url)
        self.status = status
        self.reason = reason


class OutputWriteError(DownloadError):
    """Raised when the destination file cannot be created or written."""

    def __init__(self, path: Path, cause: OSError):
        super().__init__(f"Unable to write {path}: {cause}")
        self.path = path
        self.cause = cause
