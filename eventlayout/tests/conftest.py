"""
Shared pytest fixtures for eventlayout tests

Supports both development mode (python -m pytest from the repo root) and installed mode (pip install -e .)
"""
import pytest
from datetime import date, datetime, time, timezone
from pathlib import Path
import sys

BASE_DAY = date(2024, 1, 1)


@pytest.fixture(scope="session", autouse=True)
def setup_eventlayout_path():
    """
    Add repository root to Python path for development mode

    Structure:
      repo root/                    <- need to add this to sys.path
      └── eventlayout/              <- package
          └── tests/
              └── conftest.py       <- we are here
    """
    repo_root = Path(__file__).parent.parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


@pytest.fixture(scope="session")
def base_day() -> date:
    """Day all test events are placed on"""
    return BASE_DAY


@pytest.fixture(scope="session")
def at():
    """
    Build a UTC instant on the base day from 'HH:MM'

    Example:
        at("09:30") -> 2024-01-01 09:30 UTC
    """
    def _at(hhmm: str, day: date = BASE_DAY) -> datetime:
        return datetime.combine(day, time.fromisoformat(hhmm), tzinfo=timezone.utc)
    return _at


@pytest.fixture(scope="session")
def make_event(at):
    """
    Build a CalendarEvent on the base day

    Example:
        make_event("a", "09:00", "10:00")
    """
    from eventlayout.types import CalendarEvent

    def _make_event(event_id: str, start: str, end: str, title: str = None) -> "CalendarEvent":
        return CalendarEvent(id=event_id, start=at(start), end=at(end), title=title or event_id.upper())
    return _make_event


@pytest.fixture
def events_tsv(tmp_path) -> Path:
    """Small events file with two clusters"""
    path = tmp_path / "events.tsv"
    path.write_text(
        "# day column fixture\n"
        "id\tstart\tend\ttitle\n"
        "a\t2024-01-01T09:00:00Z\t2024-01-01T10:00:00Z\tStandup\n"
        "b\t2024-01-01T09:30:00Z\t2024-01-01T09:45:00Z\tCall\n"
        "c\t2024-01-01T10:00:00Z\t2024-01-01T11:00:00Z\tReview\n"
        "d\t2024-01-02T09:00:00Z\t2024-01-02T10:00:00Z\tTomorrow\n"
    )
    return path


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual functions"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests running the full read/layout/write pipeline"
    )
    config.addinivalue_line(
        "markers", "invariants: Property checks over generated event sets"
    )
