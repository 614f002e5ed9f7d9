from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import List


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    environment: str = "development"
    api_v1_prefix: str = "/api/v1"
    log_level: str = "INFO"

    cors_origins: List[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Refresh scheduler
    refresh_enabled: bool = True
    refresh_interval_seconds: float = 5.0
    default_previous_score: float = 70.0

    # Alert log
    alert_retention_hours: float = 2.0
    tick_alert_probability: float = 0.3
    initial_alerts_min: int = 3
    initial_alerts_max: int = 7

    # City centre (Mumbai) used for unresolved place names
    city_center_lat: float = 19.0760
    city_center_lng: float = 72.8777
    fallback_jitter_degrees: float = 0.05

    # Route safety aggregation
    route_interpolation_steps: int = 5  # 5 steps -> 6 waypoints
    route_nearby_regions: int = 3
    route_default_score: int = 70
    average_speed_kmh: float = 30.0

    # Real-time updates settings
    realtime_enabled: bool = True
    risk_update_broadcast_enabled: bool = True
    websocket_heartbeat_interval: int = 30  # Heartbeat interval in seconds


@lru_cache
def get_settings() -> Settings:
    return Settings()
