"""
Thread-safe in-memory stores.

Each collection is guarded by its own lock. Records are frozen dataclasses
and an update swaps the whole record under the lock, so a reader always sees
either the previous or the next generation of a region, never a mix.
"""

import dataclasses
import logging
import threading
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from citysafety.core.errors import InvalidInputError
from citysafety.models import Alert, Region, Route, UserReport

logger = logging.getLogger(__name__)

T = TypeVar("T")

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class _KeyedStore(Generic[T]):
    """Lock-guarded id -> record map preserving insertion order."""

    def __init__(self, clock: Optional[Clock] = None):
        self._records: Dict[uuid.UUID, T] = {}
        self._lock = threading.RLock()
        self._clock = clock or utc_now

    def _insert(self, record: T) -> T:
        with self._lock:
            self._records[record.id] = record
        return record

    def get(self, record_id: uuid.UUID) -> Optional[T]:
        with self._lock:
            return self._records.get(record_id)

    def list(self) -> List[T]:
        with self._lock:
            return list(self._records.values())

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self):
        with self._lock:
            self._records.clear()


class RegionStore(_KeyedStore[Region]):
    """Single source of truth for current region scores."""

    _immutable_fields = {"id", "last_updated"}

    def create(self, **fields) -> Region:
        region = Region(**fields, id=uuid.uuid4(), last_updated=self._clock())
        return self._insert(region)

    def update(self, region_id: uuid.UUID, **changes) -> Optional[Region]:
        """
        Replace the given fields of a region and advance its timestamp.

        Returns:
            The updated region, or None if the id is unknown (nothing is created)
        """
        forbidden = self._immutable_fields.intersection(changes)
        if forbidden:
            raise InvalidInputError(f"Cannot update fields: {', '.join(sorted(forbidden))}")
        return self.update_with(region_id, lambda existing: changes)

    def update_with(
        self, region_id: uuid.UUID, compute_changes: Callable[[Region], Dict[str, Any]]
    ) -> Optional[Region]:
        """
        Read-modify-write a region as one step under the store lock.

        Args:
            region_id: Region to update
            compute_changes: Called with the currently stored region, returns
                the fields to replace

        Returns:
            The updated region, or None if the id is unknown (nothing is created)
        """
        with self._lock:
            existing = self._records.get(region_id)
            if existing is None:
                return None

            changes = compute_changes(existing)
            forbidden = self._immutable_fields.intersection(changes)
            if forbidden:
                raise InvalidInputError(f"Cannot update fields: {', '.join(sorted(forbidden))}")
            try:
                updated = dataclasses.replace(existing, **changes, last_updated=self._clock())
            except TypeError as e:
                raise InvalidInputError(f"Invalid region fields: {str(e)}")
            self._records[region_id] = updated
            return updated


class AlertLog(_KeyedStore[Alert]):
    """Time-bounded log of alerts."""

    def create(self, region_id: str, severity: str, message: str) -> Alert:
        alert = Alert(
            region_id=region_id,
            severity=severity,
            message=message,
            id=uuid.uuid4(),
            timestamp=self._clock(),
        )
        return self._insert(alert)

    def list(self) -> List[Alert]:
        """All alerts, newest first."""
        return sorted(super().list(), key=lambda a: a.timestamp, reverse=True)

    def prune(self, max_age_hours: float, now: Optional[datetime] = None) -> int:
        """
        Remove alerts older than ``max_age_hours``.

        Returns:
            Number of alerts removed
        """
        cutoff = (now or self._clock()) - timedelta(hours=max_age_hours)
        with self._lock:
            expired = [alert_id for alert_id, alert in self._records.items() if alert.timestamp < cutoff]
            for alert_id in expired:
                del self._records[alert_id]

        if expired:
            logger.debug(f"Pruned {len(expired)} alerts older than {max_age_hours}h")
        return len(expired)


class UserReportStore(_KeyedStore[UserReport]):
    def create(self, **fields) -> UserReport:
        report = UserReport(**fields, id=uuid.uuid4(), timestamp=self._clock())
        return self._insert(report)

    def list(self) -> List[UserReport]:
        return sorted(super().list(), key=lambda r: r.timestamp, reverse=True)


class RouteStore(_KeyedStore[Route]):
    def create(self, **fields) -> Route:
        route = Route(**fields, id=uuid.uuid4(), created_at=self._clock())
        return self._insert(route)

    def list(self) -> List[Route]:
        return sorted(super().list(), key=lambda r: r.created_at, reverse=True)


# Singleton instances
_region_store: Optional[RegionStore] = None
_alert_log: Optional[AlertLog] = None
_report_store: Optional[UserReportStore] = None
_route_store: Optional[RouteStore] = None


def get_region_store() -> RegionStore:
    global _region_store
    if _region_store is None:
        _region_store = RegionStore()
    return _region_store


def get_alert_log() -> AlertLog:
    global _alert_log
    if _alert_log is None:
        _alert_log = AlertLog()
    return _alert_log


def get_report_store() -> UserReportStore:
    global _report_store
    if _report_store is None:
        _report_store = UserReportStore()
    return _report_store


def get_route_store() -> RouteStore:
    global _route_store
    if _route_store is None:
        _route_store = RouteStore()
    return _route_store
