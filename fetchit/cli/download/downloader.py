"""Streaming download of a single URL into memory."""

import asyncio
from collections.abc import Callable, Mapping

import aiohttp
from yarl import URL

from fetchit.cli.config import FetchConfig
from fetchit.cli.console import console, debug_print
from fetchit.cli.download.errors import HttpStatusError, TransferError
from fetchit.cli.download.progress import ProgressReporter, create_progress
from fetchit.cli.http import create_client_session, parse_url

ProgressFactory = Callable[[int], ProgressReporter]


def content_length(headers: Mapping[str, str]) -> int:
    """Expected body size from the response headers, 0 when unknown."""
    value = headers.get("Content-Length")
    if value is None:
        return 0
    try:
        size = int(value)
    except ValueError:
        return 0
    return max(size, 0)


def request_headers(config: FetchConfig) -> dict[str, str]:
    """Headers sent with the GET.

    Compressed bodies are refused so Content-Length counts the same bytes
    the progress bar is advanced by.
    """
    return {"User-Agent": config.user_agent, "Accept-Encoding": "identity"}


async def download(
    url: str,
    config: FetchConfig | None = None,
    progress_factory: ProgressFactory | None = None,
    session: aiohttp.ClientSession | None = None,
) -> bytes:
    """
    Download a URL with a progress bar and return the full body.

    Args:
        url: The URL to download from
        config: Runtime configuration (User-Agent, debug flag)
        progress_factory: Builds the progress reporter from the expected size
        session: Existing client session to use instead of opening a new one

    Returns:
        bytes: The response body, in arrival order

    Raises:
        InvalidUrlError: If the URL is malformed (no request is made)
        TransferError: If the connection fails or the body cannot be read
        HttpStatusError: If the server answers with a non-2xx status
    """
    config = config or FetchConfig()
    target = parse_url(url)
    progress_factory = progress_factory or create_progress

    if session is not None:
        return await _fetch(session, target, url, config, progress_factory)

    async with create_client_session(config.user_agent, config.debug) as own_session:
        return await _fetch(own_session, target, url, config, progress_factory)


async def _fetch(
    session: aiohttp.ClientSession,
    target: URL,
    url: str,
    config: FetchConfig,
    progress_factory: ProgressFactory,
) -> bytes:
    debug_print(f"GET {target}", config.debug)
    buffer = bytearray()
    try:
        async with session.get(target, headers=request_headers(config)) as response:
            console.request_sent()
            debug_print(f"Response status: {response.status}", config.debug)

            if not 200 <= response.status < 300:
                raise HttpStatusError(url, response.status, response.reason)

            total = content_length(response.headers)
            if total == 0:
                debug_print("No usable Content-Length, size unknown", config.debug)

            with progress_factory(total) as progress:
                async for chunk in response.content.iter_any():
                    progress.advance(len(chunk))
                    buffer.extend(chunk)
                progress.finish()
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise TransferError(url, e) from e

    debug_print(f"Received {len(buffer)} bytes", config.debug)
    return bytes(buffer)
