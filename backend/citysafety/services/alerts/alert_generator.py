"""Probabilistic alert emission keyed to region risk tier."""

import logging
import random
from typing import Dict, List, Optional, Sequence

from citysafety.models import Alert, Region, Severity
from citysafety.services.store.memory_store import AlertLog

logger = logging.getLogger(__name__)

ALERT_TEMPLATES: Dict[str, List[str]] = {
    "critical": [
        "Major incident detected near {area} - high police activity reported",
        "Safety alert: Avoid {area} - critical incident in progress",
        "Emergency response active in {area} - seek alternate routes",
    ],
    "warning": [
        "Incident detected near {area} - low lighting and sparse crowd",
        "Safety concern in {area} - multiple incidents reported in last hour",
        "Increased crowd density in {area} - exercise caution",
        "Poor lighting conditions reported in {area}",
    ],
    "info": [
        "Heavy rainfall affecting visibility in {area}",
        "Increased police presence in {area} - routine patrol",
        "Traffic congestion in {area} may affect safety perception",
    ],
}

UNSAFE_THRESHOLD = 40
SAFE_THRESHOLD = 70


def classify_severity(score: float, rng: Optional[random.Random] = None) -> Severity:
    """
    Draw an alert severity for a region score.

    - score < 40: critical or warning, 50/50
    - 40 <= score < 70: warning (70%) or info (30%)
    - score >= 70: always info
    """
    rng = rng or random.Random()
    if score < UNSAFE_THRESHOLD:
        return "critical" if rng.random() < 0.5 else "warning"
    if score < SAFE_THRESHOLD:
        return "warning" if rng.random() < 0.7 else "info"
    return "info"


def render_alert_message(severity: Severity, area: str, rng: Optional[random.Random] = None) -> str:
    rng = rng or random.Random()
    template = rng.choice(ALERT_TEMPLATES[severity])
    return template.format(area=area)


class AlertGenerator:
    """Emits severity-tagged alerts for regions into an alert log."""

    def __init__(self, alert_log: AlertLog, rng: Optional[random.Random] = None):
        self.alert_log = alert_log
        self.rng = rng or random.Random()

    def classify(self, score: float) -> Severity:
        return classify_severity(score, self.rng)

    def emit(self, region: Region, severity: Severity) -> Alert:
        message = render_alert_message(severity, region.name, self.rng)
        alert = self.alert_log.create(region_id=str(region.id), severity=severity, message=message)
        logger.debug(f"Emitted {severity} alert for {region.name}")
        return alert

    def emit_for_region(self, region: Region) -> Alert:
        """Classify the region's current score and emit one alert."""
        return self.emit(region, self.classify(region.safety_score))

    def emit_random(self, regions: Sequence[Region], count: int = 1) -> List[Alert]:
        """Emit ``count`` alerts, each for a uniformly chosen region."""
        if not regions:
            return []
        return [self.emit_for_region(self.rng.choice(regions)) for _ in range(count)]
