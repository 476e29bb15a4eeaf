"""Test configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from newsletter.core.subject import Subject  # noqa: E402
from newsletter.subscribers.inbox import Inbox  # noqa: E402


@pytest.fixture
def subject() -> Subject:
    """Fresh strict-mode subject."""
    return Subject()


@pytest.fixture
def journal() -> list:
    """Shared, ordered delivery log for inbox subscribers."""
    return []


@pytest.fixture
def make_inbox(journal):
    """Factory for inboxes that all write to the same journal."""

    def factory(name: str) -> Inbox:
        return Inbox(name, journal=journal)

    return factory


@pytest.fixture
def failing_subscriber() -> Mock:
    """Subscriber whose receive() always raises."""
    subscriber = Mock()
    subscriber.receive.side_effect = RuntimeError("Subscriber failed!")
    return subscriber


@pytest.fixture
def mock_subject(monkeypatch):
    """Mock Subject for CLI tests."""
    mock = Mock()
    mock.notify.return_value = []
    monkeypatch.setattr("newsletter.cli.Subject", lambda isolate_failures: mock)
    return mock


@pytest.fixture
def mock_script_runner(monkeypatch):
    """Mock ScriptRunner with default configuration."""
    mock_runner = Mock()
    mock_runner.run.return_value = []
    monkeypatch.setattr(
        "newsletter.cli.ScriptRunner",
        lambda subject, script_path, subscriber_factory: mock_runner,
    )
    return mock_runner
