"""Shared fixtures for FileRemover tests."""

import pytest


class RecordingHost:
    """Deployment host that keeps every formatted message."""

    def __init__(self):
        self.messages: list[str] = []

    def log_message(self, message: str, *args: object) -> None:
        self.messages.append(message % args)


@pytest.fixture
def host():
    """Create a recording host."""
    return RecordingHost()


@pytest.fixture
def base_path(tmp_path):
    """Create a deployed application root."""
    base = tmp_path / "website"
    base.mkdir()
    return base
