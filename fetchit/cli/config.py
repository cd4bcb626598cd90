"""Runtime configuration for the fetchit CLI."""

from pathlib import Path

from dotenv import dotenv_values
from pydantic import BaseModel, Field

from fetchit.cli.console import console, debug_print

# The downloaded file always lands here, relative to the working directory
OUTPUT_PATH = Path(".env")
DEFAULT_CONFIG_PATH = Path(".env")
USER_AGENT = "API Request"


class FetchConfig(BaseModel):
    """Configuration loaded once at startup and passed explicitly.

    Attributes:
        config_file: Location of the optional key/value config file
        values: Key/value pairs read from the config file
        destination: Path the downloaded body is written to
        user_agent: Value of the identifying User-Agent request header
        debug: Whether to print debug information
    """

    config_file: Path = Field(default=DEFAULT_CONFIG_PATH)
    values: dict[str, str | None] = Field(default_factory=dict)
    destination: Path = Field(default=OUTPUT_PATH)
    user_agent: str = Field(default=USER_AGENT)
    debug: bool = Field(default=False)


def load_config(config_file: Path | None = None, debug: bool = False) -> FetchConfig:
    """Read the optional config file and build a FetchConfig.

    A missing config file is not an error; the values are simply empty.

    Args:
        config_file: Alternate config file location (defaults to ./.env)
        debug: Whether to enable debug output

    Returns:
        FetchConfig: The loaded configuration
    """
    path = config_file or DEFAULT_CONFIG_PATH
    values: dict[str, str | None] = {}
    if path.is_file():
        try:
            values = dict(dotenv_values(path))
        except (OSError, UnicodeDecodeError) as e:
            # The default config file doubles as the download target and may be binary
            console.warning(f"Ignoring unreadable config file {path}: {type(e).__name__}")
            debug_print(str(e), debug)
    return FetchConfig(config_file=path, values=values, debug=debug)
