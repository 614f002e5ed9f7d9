"""
Weighted safety score calculation.

Each raw signal is normalized to a 0-1 "goodness" value, combined with fixed
weights into a 0-100 raw score, and blended with the previous score of the
region to dampen tick-to-tick volatility:

    lighting 20%, crowd density 15%, incidents 25%, sentiment 15%,
    weather 10%, police presence 5%, night factor 10%
"""

from typing import Dict

from citysafety.models.region import SafetySignals
from citysafety.services.utils import clamp, round_half_up

SIGNAL_WEIGHTS: Dict[str, float] = {
    "lighting": 0.20,
    "crowd_density": 0.15,
    "incidents": 0.25,
    "sentiment": 0.15,
    "weather": 0.10,
    "police": 0.05,
    "night": 0.10,
}

# Weight of the freshly computed score against the previous one
CURRENT_WEIGHT = 0.7
PREVIOUS_WEIGHT = 0.3

DEFAULT_PREVIOUS_SCORE = 70.0

# Crowd density stops improving safety above this level
CROWD_SATURATION = 50.0
INCIDENT_SATURATION = 10.0
POLICE_ABSENT_FACTOR = 0.7


def normalize_signals(signals: SafetySignals) -> Dict[str, float]:
    """Map each raw signal to a 0-1 value where higher is safer."""
    return {
        "lighting": min(signals.lighting / 100, 1.0),
        "crowd_density": min(signals.crowd_density / CROWD_SATURATION, 1.0),
        "incidents": 1 - min(signals.incidents_24h / INCIDENT_SATURATION, 1.0),
        "sentiment": (signals.sentiment + 1) / 2,
        "weather": 1 - signals.weather_risk,
        "police": 1.0 if signals.police_nearby else POLICE_ABSENT_FACTOR,
        "night": 1 - signals.night_factor,
    }


def compute_safety_score(
    signals: SafetySignals,
    previous_score: float = DEFAULT_PREVIOUS_SCORE,
) -> float:
    """
    Compute the smoothed safety score for a signal tuple.

    Args:
        signals: Raw signals for the region
        previous_score: Smoothing anchor (the region's current score)

    Returns:
        Score rounded to two decimals. Inputs are not re-clamped, so the
        result lies in [0, 100] whenever the signals respect their ranges.
    """
    normalized = normalize_signals(signals)
    raw = 100 * sum(SIGNAL_WEIGHTS[name] * value for name, value in normalized.items())

    final = CURRENT_WEIGHT * raw + PREVIOUS_WEIGHT * previous_score
    return round_half_up(final, 2)


def to_stored_score(score: float) -> int:
    """Integer region score, clamped to [0, 100]."""
    return int(clamp(round_half_up(score), 0, 100))


def risk_level(score: float) -> str:
    """Map legend label for a region score."""
    if score >= 70:
        return "Safe"
    if score >= 40:
        return "Moderate"
    return "Unsafe"
