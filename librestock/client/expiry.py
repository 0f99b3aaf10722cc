"""Expiry status for inventory batches, plus a shared ticker that tells
listeners when "now" has moved on so they can recompute statuses.
"""

import logging
import threading
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Callable

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

logger = logging.getLogger("librestock.client")

EXPIRING_SOON_WINDOW = timedelta(days=30)
TICK_INTERVAL_SECONDS = 60

Listener = Callable[[datetime], None]


@dataclass(frozen=True)
class ExpiryDateStatus:
    expiry_date: datetime | None
    is_expired: bool
    is_expiring_soon: bool


def _parse(value) -> datetime | None:
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def get_expiry_status(expiry_date, now: datetime | None = None) -> ExpiryDateStatus:
    parsed = _parse(expiry_date)
    if parsed is None:
        return ExpiryDateStatus(expiry_date=None, is_expired=False, is_expiring_soon=False)

    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    remaining = parsed - now
    return ExpiryDateStatus(
        expiry_date=parsed,
        is_expired=remaining < timedelta(0),
        is_expiring_soon=timedelta(0) < remaining < EXPIRING_SOON_WINDOW,
    )


class ExpiryTicker:
    """Publishes the current time to listeners every TICK_INTERVAL_SECONDS.

    The ticker does nothing until start() is called and must be stopped
    explicitly; subscribing does not start it.
    """

    def __init__(
        self,
        interval_seconds: int = TICK_INTERVAL_SECONDS,
        clock: Callable[[], datetime] | None = None,
    ):
        self.interval_seconds = interval_seconds
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._listeners: set[Listener] = set()
        self._lock = threading.Lock()
        self._now = self._clock()
        self._scheduler: BackgroundScheduler | None = None

    @property
    def running(self) -> bool:
        return self._scheduler is not None

    def now(self) -> datetime:
        return self._now

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        with self._lock:
            self._listeners.add(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        with self._lock:
            self._listeners.discard(listener)

    def tick(self) -> datetime:
        self._now = self._clock()
        with self._lock:
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener(self._now)
            except Exception:
                logger.exception("Expiry ticker listener failed")

        return self._now

    def start(self) -> None:
        if self._scheduler is not None:
            return

        scheduler = BackgroundScheduler(timezone="UTC")
        scheduler.add_job(
            self.tick,
            trigger=IntervalTrigger(seconds=self.interval_seconds),
            id="expiry_ticker",
            replace_existing=True,
        )
        scheduler.start()
        self._scheduler = scheduler
        logger.info(f"Expiry ticker started ({self.interval_seconds}s interval)")

    def stop(self) -> None:
        if self._scheduler is None:
            return

        self._scheduler.shutdown(wait=False)
        self._scheduler = None
        logger.info("Expiry ticker stopped")
