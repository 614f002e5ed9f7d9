import os
import random
from datetime import datetime, timedelta, timezone

import pytest

# Keep the background refresh from firing while API tests run
os.environ.setdefault("REFRESH_INTERVAL_SECONDS", "3600")

from citysafety.services.store.memory_store import AlertLog, RegionStore, RouteStore, UserReportStore


class FixedRandom(random.Random):
    """Random whose random() always returns the same value."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


class ManualClock:
    def __init__(self, start: datetime = None):
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def region_store(clock):
    return RegionStore(clock=clock)


@pytest.fixture
def alert_log(clock):
    return AlertLog(clock=clock)


@pytest.fixture
def report_store(clock):
    return UserReportStore(clock=clock)


@pytest.fixture
def route_store(clock):
    return RouteStore(clock=clock)


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def make_region(region_store):
    """Factory adding a region with well-formed signals to the region store."""

    def _make(name: str, lat: float, lng: float, score: int = 70):
        return region_store.create(
            name=name,
            latitude=lat,
            longitude=lng,
            safety_score=score,
            lighting=80,
            crowd_density=30,
            incidents_24h=1,
            sentiment=0.5,
            weather_risk=0.1,
            police_nearby=True,
            night_factor=0.1,
        )

    return _make
