import random
from datetime import datetime

import pytest
from hypothesis import given, strategies as st

from citysafety.models import SafetySignals
from citysafety.services.scoring import (
    compute_safety_score,
    generate_signals,
    normalize_signals,
    risk_level,
    to_stored_score,
)
from citysafety.services.scoring.safety_score import SIGNAL_WEIGHTS

signals_strategy = st.builds(
    SafetySignals,
    lighting=st.integers(min_value=0, max_value=100),
    crowd_density=st.integers(min_value=0, max_value=100),
    incidents_24h=st.integers(min_value=0, max_value=50),
    sentiment=st.floats(min_value=-1.0, max_value=1.0),
    weather_risk=st.floats(min_value=0.0, max_value=1.0),
    police_nearby=st.booleans(),
    night_factor=st.floats(min_value=0.0, max_value=1.0),
)

BEST = SafetySignals(
    lighting=100, crowd_density=50, incidents_24h=0, sentiment=1.0,
    weather_risk=0.0, police_nearby=True, night_factor=0.0,
)
WORST = SafetySignals(
    lighting=0, crowd_density=0, incidents_24h=10, sentiment=-1.0,
    weather_risk=1.0, police_nearby=False, night_factor=1.0,
)


def raw_score(signals: SafetySignals) -> float:
    normalized = normalize_signals(signals)
    return 100 * sum(SIGNAL_WEIGHTS[name] * value for name, value in normalized.items())


def test_best_signals_with_default_anchor():
    # 0.7 * 100 + 0.3 * 70
    assert compute_safety_score(BEST) == pytest.approx(91.0)


def test_worst_signals_keep_police_floor():
    # Only the absent-police factor (0.7 * 5%) contributes
    assert compute_safety_score(WORST, previous_score=0) == pytest.approx(2.45)


def test_mixed_signals():
    signals = SafetySignals(
        lighting=80, crowd_density=25, incidents_24h=2, sentiment=0.0,
        weather_risk=0.2, police_nearby=False, night_factor=0.5,
    )
    assert raw_score(signals) == pytest.approx(67.5)
    assert compute_safety_score(signals, previous_score=70) == pytest.approx(68.25)


def test_crowd_density_saturates_at_fifty():
    busy = SafetySignals(**{**BEST.__dict__, "crowd_density": 100})
    assert compute_safety_score(busy) == compute_safety_score(BEST)


def test_incidents_saturate_at_ten():
    many = SafetySignals(**{**WORST.__dict__, "incidents_24h": 40})
    assert compute_safety_score(many, 50) == compute_safety_score(WORST, 50)


@given(signals=signals_strategy, previous=st.floats(min_value=0, max_value=100))
def test_score_is_bounded_and_two_decimal(signals, previous):
    score = compute_safety_score(signals, previous)

    assert 0 <= score <= 100
    assert abs(score * 100 - round(score * 100)) < 1e-6
    assert 0 <= to_stored_score(score) <= 100
    assert isinstance(to_stored_score(score), int)


@given(signals=signals_strategy)
def test_smoothing_is_stable_when_raw_equals_previous(signals):
    raw = raw_score(signals)
    assert compute_safety_score(signals, raw) == pytest.approx(raw, abs=0.01)


def test_to_stored_score_rounds_half_up_and_clamps():
    assert to_stored_score(72.5) == 73
    assert to_stored_score(72.49) == 72
    assert to_stored_score(140.0) == 100
    assert to_stored_score(-3.0) == 0


@pytest.mark.parametrize(
    "score,label",
    [(100, "Safe"), (70, "Safe"), (69, "Moderate"), (40, "Moderate"), (39, "Unsafe"), (0, "Unsafe")],
)
def test_risk_level(score, label):
    assert risk_level(score) == label


@given(
    base_score=st.floats(min_value=0, max_value=100),
    seed=st.integers(min_value=0, max_value=10_000),
    hour=st.integers(min_value=0, max_value=23),
)
def test_generated_signals_stay_in_range(base_score, seed, hour):
    signals = generate_signals(base_score, random.Random(seed), datetime(2024, 5, 1, hour))

    assert 0 <= signals.lighting <= 100
    assert 0 <= signals.crowd_density <= 100
    assert signals.incidents_24h >= 0
    assert -1.0 <= signals.sentiment <= 1.0
    assert 0.0 <= signals.weather_risk <= 1.0
    assert isinstance(signals.police_nearby, bool)
    assert 0.0 <= signals.night_factor <= 1.0


def test_night_hours_raise_night_factor():
    rng = random.Random(7)
    night = [generate_signals(70, rng, datetime(2024, 5, 1, 23)).night_factor for _ in range(50)]
    day = [generate_signals(70, rng, datetime(2024, 5, 1, 13)).night_factor for _ in range(50)]

    assert min(night) >= 0.3
    assert max(day) <= 0.2


def test_safe_base_biases_signals_upward():
    rng = random.Random(3)
    safe = [generate_signals(95, rng) for _ in range(200)]
    unsafe = [generate_signals(25, rng) for _ in range(200)]

    assert sum(s.lighting for s in safe) > sum(s.lighting for s in unsafe)
    assert sum(s.incidents_24h for s in safe) < sum(s.incidents_24h for s in unsafe)
