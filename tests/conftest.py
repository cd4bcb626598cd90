"""Shared fixtures for the downloader tests."""

import pytest

from fetchit.cli.download import NullProgress


class RecordingProgress:
    """Progress factory that keeps every NullProgress it creates."""

    def __init__(self):
        self.created: list[NullProgress] = []

    def __call__(self, total: int) -> NullProgress:
        progress = NullProgress(total)
        self.created.append(progress)
        return progress


@pytest.fixture
def progress():
    return RecordingProgress()
