"""Shared pytest fixtures for BuildStamp tests."""

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable

import pytest

from buildconfig.schema import BuildInfoConfig, ProjectCoordinates
from timecode import ZERO_INSTANT, TimeKeeper


class FakeClock:
    """Clock returning a settable instant and counting reads."""

    def __init__(self, instant: datetime):
        self.instant = instant
        self.reads = 0

    def __call__(self) -> datetime:
        self.reads += 1
        return self.instant

    def advance(self, seconds: float) -> None:
        self.instant = self.instant + timedelta(seconds=seconds)


@pytest.fixture
def build_instant() -> datetime:
    """A fixed build moment: 2024-01-01 12:00:00 UTC."""
    return datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fake_clock(build_instant: datetime) -> FakeClock:
    return FakeClock(build_instant)


@pytest.fixture
def time_keeper(fake_clock: FakeClock) -> TimeKeeper:
    """TimeKeeper reading the fake clock."""
    return TimeKeeper(ZERO_INSTANT, clock=fake_clock)


@pytest.fixture
def coordinates() -> ProjectCoordinates:
    return ProjectCoordinates(group="com.example", name="App", version="2.1.0", root_name="Suite")


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., BuildInfoConfig]:
    """Factory for configs whose destinations live under tmp_path."""

    def _make(*dirs: str, **options) -> BuildInfoConfig:
        destinations = [str(tmp_path / d) for d in dirs]
        return BuildInfoConfig(destinations=destinations, **options)

    return _make
