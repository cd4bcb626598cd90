"""Tests for the CLI command."""

from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from fetchit.cli.cli import app
from fetchit.cli.config import FetchConfig
from fetchit.cli.download import HttpStatusError, TransferError

runner = CliRunner()

URL = "https://example.test/file.bin"
PAYLOAD = bytes(range(12))


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    """Run every command from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@patch("fetchit.cli.cli.download", new_callable=AsyncMock)
def test_no_url_does_nothing(mock_download, workdir):
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "No URL given" in result.stdout
    mock_download.assert_not_called()
    assert not (workdir / ".env").exists()


@patch("fetchit.cli.cli.download", new_callable=AsyncMock)
def test_download_writes_output_file(mock_download, workdir):
    """The body lands in .env in the working directory."""
    mock_download.return_value = PAYLOAD

    result = runner.invoke(app, ["--url", URL])

    assert result.exit_code == 0
    assert (workdir / ".env").read_bytes() == PAYLOAD
    assert "Saved 12 B" in result.stdout

    # Verify the URL and an explicit config were passed
    assert mock_download.call_args[0][0] == URL
    config = mock_download.call_args[1]["config"]
    assert isinstance(config, FetchConfig)
    assert config.user_agent == "API Request"


@patch("fetchit.cli.cli.download", new_callable=AsyncMock)
def test_download_twice_is_idempotent(mock_download, workdir):
    mock_download.return_value = PAYLOAD

    assert runner.invoke(app, ["-u", URL]).exit_code == 0
    first = (workdir / ".env").read_bytes()
    assert runner.invoke(app, ["-u", URL]).exit_code == 0

    assert (workdir / ".env").read_bytes() == first == PAYLOAD


@patch("fetchit.cli.cli.download", new_callable=AsyncMock)
def test_http_status_error_leaves_file_untouched(mock_download, workdir):
    """A 404 exits with 1 and keeps the previous output."""
    (workdir / ".env").write_bytes(b"OLD=1\n")
    mock_download.side_effect = HttpStatusError(URL, 404, "Not Found")

    result = runner.invoke(app, ["--url", URL])

    assert result.exit_code == 1
    assert "ERROR" in result.stdout
    assert "404" in result.stdout
    assert (workdir / ".env").read_bytes() == b"OLD=1\n"


@patch("fetchit.cli.cli.download", new_callable=AsyncMock)
def test_transfer_error_exits_nonzero(mock_download, workdir):
    mock_download.side_effect = TransferError(URL, ConnectionResetError("reset"))

    result = runner.invoke(app, ["--url", URL])

    assert result.exit_code == 1
    assert "ConnectionResetError" in result.stdout
    assert not (workdir / ".env").exists()


def test_invalid_url_makes_no_request(workdir):
    with patch("fetchit.cli.download.downloader.create_client_session") as mock_create:
        result = runner.invoke(app, ["--url", "not a url"])

    assert result.exit_code == 1
    assert "Invalid URL" in result.stdout
    mock_create.assert_not_called()
    assert not (workdir / ".env").exists()


def test_write_failure_exits_nonzero(workdir):
    (workdir / ".env").mkdir()
    with patch("fetchit.cli.cli.download", new_callable=AsyncMock) as mock_download:
        mock_download.return_value = PAYLOAD
        result = runner.invoke(app, ["--url", URL])

    assert result.exit_code == 1
    assert "Unable to write" in result.stdout


@patch("fetchit.cli.cli.download", new_callable=AsyncMock)
def test_custom_config_file(mock_download, workdir):
    """--config-file is loaded and reported in debug mode."""
    config_file = workdir / "custom.env"
    config_file.write_text("A=1\nB=2\n")
    mock_download.return_value = b"x"

    result = runner.invoke(
        app, ["--url", URL, "--config-file", str(config_file), "--debug"]
    )

    assert result.exit_code == 0
    assert "Loaded 2 value(s)" in result.stdout
    config = mock_download.call_args[1]["config"]
    assert config.values == {"A": "1", "B": "2"}
    assert config.debug


@patch("fetchit.cli.cli.download", new_callable=AsyncMock)
def test_binary_download_twice(mock_download, workdir):
    """A binary body in .env is not parsed as config on the next run."""
    png = b"\x89PNG\r\n\x1a\n\xff\xfe"
    mock_download.return_value = png

    first = runner.invoke(app, ["--url", URL])
    second = runner.invoke(app, ["--url", URL])

    assert first.exit_code == 0
    assert second.exit_code == 0, second.exception
    assert (workdir / ".env").read_bytes() == png
    assert mock_download.call_count == 2
    assert mock_download.call_args[1]["config"].values == {}
