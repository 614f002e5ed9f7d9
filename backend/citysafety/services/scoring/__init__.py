from citysafety.services.scoring.safety_score import (  # noqa
    compute_safety_score,
    normalize_signals,
    risk_level,
    to_stored_score,
)
from citysafety.services.scoring.signal_generator import generate_signals  # noqa
