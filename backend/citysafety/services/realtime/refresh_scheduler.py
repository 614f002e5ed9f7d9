"""Periodic re-scoring of every region, alert emission and alert pruning."""

import asyncio
import dataclasses
import logging
import random
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from citysafety.core.config import get_settings
from citysafety.models import Alert, CatalogRegion, Region
from citysafety.schemas.alert import AlertRead
from citysafety.schemas.region import RegionRead
from citysafety.services.alerts.alert_generator import AlertGenerator
from citysafety.services.catalog import SEED_CATALOG
from citysafety.services.realtime.websocket_manager import WebSocketManager
from citysafety.services.scoring import compute_safety_score, generate_signals, to_stored_score
from citysafety.services.store.memory_store import AlertLog, RegionStore

logger = logging.getLogger(__name__)


class RefreshScheduler:
    """
    Keeps region scores current on a fixed interval.

    Every tick re-scores all regions against their catalog baseline, with a
    configurable chance emits one new alert, and prunes alerts older than the
    retention window. A failure on one region is logged and the tick moves on.
    """

    def __init__(
        self,
        region_store: RegionStore,
        alert_log: AlertLog,
        catalog: Sequence[CatalogRegion] = SEED_CATALOG,
        rng: Optional[random.Random] = None,
        interval_seconds: Optional[float] = None,
        websocket_manager: Optional[WebSocketManager] = None,
    ):
        settings = get_settings()

        self.region_store = region_store
        self.alert_log = alert_log
        self.catalog = list(catalog)
        self.rng = rng or random.Random()
        self.alert_generator = AlertGenerator(alert_log, self.rng)
        self.websocket_manager = websocket_manager

        self.interval_seconds = interval_seconds or settings.refresh_interval_seconds
        self.default_previous_score = settings.default_previous_score
        self.retention_hours = settings.alert_retention_hours
        self.tick_alert_probability = settings.tick_alert_probability
        self.initial_alerts = (settings.initial_alerts_min, settings.initial_alerts_max)
        self.broadcast_enabled = settings.realtime_enabled and settings.risk_update_broadcast_enabled

        self._base_scores: Dict[str, int] = {entry.name: entry.base_score for entry in self.catalog}
        self._task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def seed_if_empty(self) -> int:
        """
        Create every catalog region when the store is empty, then raise an
        initial batch of alerts.

        Returns:
            Number of regions created
        """
        if self.region_store.count() > 0:
            return 0

        created = 0
        for entry in self.catalog:
            try:
                signals = generate_signals(entry.base_score, self.rng)
                score = compute_safety_score(signals, self.default_previous_score)
                self.region_store.create(
                    name=entry.name,
                    latitude=entry.lat,
                    longitude=entry.lng,
                    safety_score=to_stored_score(score),
                    **dataclasses.asdict(signals),
                )
                created += 1
            except Exception as e:
                logger.error(f"Failed to seed region {entry.name}: {str(e)}", exc_info=True)

        count = self.rng.randint(*self.initial_alerts)
        alerts = self.alert_generator.emit_random(self.region_store.list(), count)
        logger.info(f"Seeded {created} regions and {len(alerts)} initial alerts")
        return created

    def refresh_region(self, region: Region) -> Optional[Region]:
        """
        Draw fresh signals for a region and re-score it.

        The smoothing anchor is the score stored at write time, read under
        the store lock, so concurrent updates are never overwritten.
        """
        base_score = self._base_scores.get(region.name, self.default_previous_score)
        signals = generate_signals(base_score, self.rng)

        def rescore(current: Region) -> dict:
            score = compute_safety_score(signals, current.safety_score)
            return {"safety_score": to_stored_score(score), **dataclasses.asdict(signals)}

        return self.region_store.update_with(region.id, rescore)

    def refresh_regions(self) -> int:
        """Re-score all regions. Returns the number successfully updated."""
        updated = 0
        for region in self.region_store.list():
            try:
                if self.refresh_region(region) is not None:
                    updated += 1
            except Exception as e:
                logger.error(f"Failed to refresh region {region.name}: {str(e)}", exc_info=True)
        return updated

    def run_tick(self) -> List[Alert]:
        """
        One synchronous refresh pass.

        Returns:
            Alerts emitted during this tick
        """
        updated = self.refresh_regions()

        new_alerts: List[Alert] = []
        try:
            if self.rng.random() < self.tick_alert_probability:
                new_alerts = self.alert_generator.emit_random(self.region_store.list(), 1)
        except Exception as e:
            logger.error(f"Failed to emit tick alert: {str(e)}", exc_info=True)

        try:
            self.alert_log.prune(self.retention_hours)
        except Exception as e:
            logger.error(f"Failed to prune alerts: {str(e)}", exc_info=True)

        logger.debug(f"Tick complete: {updated} regions updated, {len(new_alerts)} alerts emitted")
        return new_alerts

    async def tick(self):
        new_alerts = self.run_tick()
        if self.broadcast_enabled and self.websocket_manager is not None:
            await self._broadcast(new_alerts)

    async def _broadcast(self, new_alerts: List[Alert]):
        regions_data = {
            "regions": [
                RegionRead.from_region(r).model_dump(mode="json") for r in self.region_store.list()
            ],
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        try:
            await self.websocket_manager.broadcast_regions_update(regions_data)
            for alert in new_alerts:
                await self.websocket_manager.broadcast_alert(
                    AlertRead.model_validate(alert).model_dump(mode="json")
                )
        except Exception as e:
            logger.error(f"Error broadcasting safety update: {str(e)}", exc_info=True)

    async def _run_loop(self):
        try:
            while True:
                await asyncio.sleep(self.interval_seconds)
                try:
                    await self.tick()
                except Exception as e:
                    logger.error(f"Refresh tick failed: {str(e)}", exc_info=True)
        except asyncio.CancelledError:
            logger.debug("Refresh loop cancelled")
            raise

    async def start(self):
        """Seed the store if needed and start the periodic refresh task."""
        if self.is_running:
            return
        self.seed_if_empty()
        self._task = asyncio.create_task(self._run_loop())
        logger.info(f"Refresh scheduler started (every {self.interval_seconds}s)")

    async def stop(self):
        """Cancel the refresh task and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Refresh scheduler stopped")


# Singleton instance
_scheduler: Optional[RefreshScheduler] = None


def get_refresh_scheduler() -> RefreshScheduler:
    global _scheduler
    if _scheduler is None:
        from citysafety.services.realtime.websocket_manager import get_websocket_manager
        from citysafety.services.store.memory_store import get_alert_log, get_region_store

        _scheduler = RefreshScheduler(
            region_store=get_region_store(),
            alert_log=get_alert_log(),
            websocket_manager=get_websocket_manager(),
        )
    return _scheduler
