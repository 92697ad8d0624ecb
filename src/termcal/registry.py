"""Holiday registry: forced holidays, forced work days and the weekend rule."""

import threading
from dataclasses import dataclass
from datetime import date
from typing import Any

from termcal.config import get_calendar_config
from termcal.errors import OverlapError, StorageCapabilityError
from termcal.logging import get_logger
from termcal.parser import OverrideSpec, parse_days
from termcal.storage import MemoryStore, Store, copy_config, probe_store
from termcal.utils import to_date

HOLIDAYS = "holidays"
WORK_DAYS = "work_days"


@dataclass(frozen=True)
class CalendarSnapshot:
    """Parsed, immutable view of the override configuration."""

    holidays: frozenset[date]
    work_days: frozenset[date]
    weekend_days: tuple[int, ...]

    def is_holiday(self, day: date) -> bool:
        """Classify ``day``; forced holidays win over forced work days."""
        if day in self.holidays:
            return True
        if day.weekday() not in self.weekend_days:
            return False
        return day not in self.work_days


class HolidayRegistry:
    """Holds the forced holiday and forced work day overrides.

    The raw override specifications live in a Store and are re-parsed on
    every read. Writes replace the whole configuration blob under a lock,
    so readers see either the previous or the new configuration.
    """

    def __init__(self, store: Store | None = None) -> None:
        self._store = store if store is not None else MemoryStore()
        self._lock = threading.Lock()
        self._log = get_logger(__name__)

    @property
    def store(self) -> Store:
        return self._store

    def config(self) -> dict[str, Any]:
        """Return a copy of the stored configuration blob."""
        return copy_config(self._store.get() or {})

    def _spec(self, key: str) -> OverrideSpec:
        return self.config().get(key) or {}

    def holidays(self) -> list[date]:
        return parse_days(self._spec(HOLIDAYS))

    def work_days(self) -> list[date]:
        return parse_days(self._spec(WORK_DAYS))

    def _set_override(self, key: str, other_key: str, spec: OverrideSpec) -> OverrideSpec:
        spec = dict(spec)
        days = parse_days(spec)
        with self._lock:
            current = self.config()
            others = parse_days(current.get(other_key) or {})
            clash = sorted(set(days).intersection(others))
            if clash:
                self._log.warning(
                    "override_overlap_rejected",
                    kind=key,
                    dates=[d.isoformat() for d in clash],
                )
                raise OverlapError(key, clash)
            self._store.set({**current, key: spec})
        self._log.info(f"{key}_set", days=len(days))
        return dict(spec)

    def set_holidays(self, spec: OverrideSpec) -> OverrideSpec:
        """Store forced holidays.

        Raises:
            OverlapError: If any date is already a forced work day. The
                stored configuration is left unchanged.
        """
        return self._set_override(HOLIDAYS, WORK_DAYS, spec)

    def set_work_days(self, spec: OverrideSpec) -> OverrideSpec:
        """Store forced work days.

        Raises:
            OverlapError: If any date is already a forced holiday. The
                stored configuration is left unchanged.
        """
        return self._set_override(WORK_DAYS, HOLIDAYS, spec)

    def snapshot(self) -> CalendarSnapshot:
        config = self.config()
        return CalendarSnapshot(
            holidays=frozenset(parse_days(config.get(HOLIDAYS) or {})),
            work_days=frozenset(parse_days(config.get(WORK_DAYS) or {})),
            weekend_days=tuple(get_calendar_config().weekend_days),
        )

    def is_holiday(self, day: date) -> bool:
        return self.snapshot().is_holiday(to_date(day))

    def reset(self) -> None:
        """Clear both override sets."""
        with self._lock:
            self._store.set({})
        self._log.info("overrides_reset")

    def configure_storage(self, store: Any) -> bool:
        """Swap the backing store.

        Returns:
            True if ``store`` was accepted, False if it lacks the Store
            contract (the active store is then kept).
        """
        try:
            probe_store(store)
        except StorageCapabilityError as e:
            self._log.warning(
                "storage_rejected", store=type(store).__name__, reason=str(e)
            )
            return False
        with self._lock:
            self._store = store
        self._log.info("storage_configured", store=type(store).__name__)
        return True

    def __repr__(self) -> str:
        return f"HolidayRegistry(store={self._store!r})"


# Module-level singleton
_registry: HolidayRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> HolidayRegistry:
    """Get the process-wide default registry."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = HolidayRegistry()
    return _registry


def set_holidays(spec: OverrideSpec) -> OverrideSpec:
    return get_registry().set_holidays(spec)


def set_work_days(spec: OverrideSpec) -> OverrideSpec:
    return get_registry().set_work_days(spec)


def holidays() -> list[date]:
    return get_registry().holidays()


def work_days() -> list[date]:
    return get_registry().work_days()


def is_holiday(day: date) -> bool:
    return get_registry().is_holiday(day)


def reset() -> None:
    """Clear both override sets of the default registry."""
    get_registry().reset()


def configure_storage(store: Any) -> bool:
    return get_registry().configure_storage(store)


def reset_registry() -> None:
    """Replace the default registry with a fresh one. Useful for testing."""
    global _registry
    with _registry_lock:
        _registry = HolidayRegistry()
