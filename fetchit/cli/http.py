"""HTTP client utilities."""

import ipaddress
import re

import aiohttp
from yarl import URL

from fetchit.cli.console import debug_print
from fetchit.cli.download.errors import InvalidUrlError

ALLOWED_SCHEMES = ("http", "https")

# Dot separated labels of letters, digits, '-' and '_' (IDNs arrive punycoded)
HOSTNAME_PATTERN = re.compile(
    r"^(?!-)[A-Za-z0-9_-]{1,63}(?<!-)(\.(?!-)[A-Za-z0-9_-]{1,63}(?<!-))*\.?$"
)


def is_valid_host(host: str) -> bool:
    """Check a host against the hostname and IP address grammar."""
    try:
        ipaddress.ip_address(host)
        return True
    except ValueError:
        pass
    return len(host) <= 253 and HOSTNAME_PATTERN.match(host) is not None


def parse_url(target: str) -> URL:
    """Parse a download target into an absolute http(s) URL.

    Args:
        target: The URL string given on the command line

    Returns:
        URL: The parsed URL

    Raises:
        InvalidUrlError: If the string is not an absolute http(s) URL with a
            well-formed host
    """
    try:
        url = URL(target)
    except (TypeError, ValueError) as e:
        raise InvalidUrlError(target, str(e)) from e

    if not url.is_absolute() or not url.scheme:
        raise InvalidUrlError(target, "URL must be absolute")
    if url.scheme not in ALLOWED_SCHEMES:
        raise InvalidUrlError(target, f"unsupported scheme '{url.scheme}'")
    if not url.raw_host:
        raise InvalidUrlError(target, "missing host")
    if not is_valid_host(url.raw_host):
        raise InvalidUrlError(target, f"invalid host '{url.raw_host}'")
    return url


def create_client_session(
    user_agent: str, debug: bool = False
) -> aiohttp.ClientSession:
    """Create an aiohttp client session sending the identifying User-Agent.

    Args:
        user_agent: Value for the User-Agent header on every request
        debug: Whether to print debug information

    Returns:
        aiohttp.ClientSession: A client session with trust_env=True
    """
    debug_print(f"Creating HTTP session (User-Agent: {user_agent})", debug)
    return aiohttp.ClientSession(
        headers={"User-Agent": user_agent}, trust_env=True
    )
