"""Synthetic signal source standing in for the sensing pipeline."""

import random
from datetime import datetime
from typing import Optional

from citysafety.models.region import SafetySignals
from citysafety.services.utils import clamp, round_half_up

# Regions drift up to +/- half of this around their baseline on every draw
BASE_VARIANCE = 20.0

NIGHT_START_HOUR = 20
NIGHT_END_HOUR = 6


def is_night(hour: int) -> bool:
    return hour >= NIGHT_START_HOUR or hour < NIGHT_END_HOUR


def generate_signals(
    base_score: float,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> SafetySignals:
    """
    Generate a signal tuple loosely correlated with ``base_score``.

    Safer regions get brighter lighting, busier streets, better sentiment,
    more police and fewer incidents. Weather risk is independent noise and
    the night factor is elevated during night hours.

    Args:
        base_score: Baseline safety score of the region (0-100)
        rng: Source of randomness
        now: Local time used to decide night hours (default: now)
    """
    rng = rng or random.Random()
    now = now or datetime.now()

    target = clamp(base_score + (rng.random() - 0.5) * BASE_VARIANCE, 20, 100)
    safe = target > 60

    if is_night(now.hour):
        night_factor = 0.3 + rng.random() * 0.4
    else:
        night_factor = rng.random() * 0.2

    lighting = 60 + rng.random() * 40 if safe else 30 + rng.random() * 40
    crowd_density = 20 + rng.random() * 30 if safe else 5 + rng.random() * 25
    incidents_24h = rng.randrange(3) if safe else rng.randrange(7)
    sentiment = 0.3 + rng.random() * 0.7 if safe else -0.5 + rng.random() * 0.8
    weather_risk = rng.random() * 0.3
    if target > 50:
        police_nearby = rng.random() > 0.3
    else:
        police_nearby = rng.random() > 0.7

    return SafetySignals(
        lighting=int(clamp(round_half_up(lighting), 0, 100)),
        crowd_density=int(clamp(round_half_up(crowd_density), 0, 100)),
        incidents_24h=incidents_24h,
        sentiment=clamp(round_half_up(sentiment, 2), -1.0, 1.0),
        weather_risk=clamp(round_half_up(weather_risk, 2), 0.0, 1.0),
        police_nearby=police_nearby,
        night_factor=clamp(round_half_up(night_factor, 2), 0.0, 1.0),
    )
