from datetime import date, datetime, timedelta, timezone

import pytest

from librestock.client.expiry import ExpiryTicker, get_expiry_status

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "expiry, expired, expiring_soon",
    [
        (NOW - timedelta(days=1), True, False),
        (NOW + timedelta(days=5), False, True),
        (NOW + timedelta(days=29, hours=23), False, True),
        (NOW + timedelta(days=31), False, False),
        ("2024-05-01T00:00:00Z", True, False),
        (date(2024, 6, 10), False, True),
    ],
)
def test_expiry_status(expiry, expired, expiring_soon):
    result = get_expiry_status(expiry, now=NOW)

    assert result.is_expired is expired
    assert result.is_expiring_soon is expiring_soon
    assert result.expiry_date is not None


@pytest.mark.parametrize("value", [None, "", "not-a-date", 42])
def test_missing_or_invalid_expiry(value):
    result = get_expiry_status(value, now=NOW)

    assert result.expiry_date is None
    assert result.is_expired is False
    assert result.is_expiring_soon is False


def test_naive_now_is_treated_as_utc():
    result = get_expiry_status(NOW + timedelta(days=1), now=NOW.replace(tzinfo=None))

    assert result.is_expiring_soon is True


class FakeClock:
    def __init__(self, start):
        self.current = start

    def __call__(self):
        return self.current


def test_tick_notifies_subscribers():
    clock = FakeClock(NOW)
    ticker = ExpiryTicker(clock=clock)
    seen = []
    unsubscribe = ticker.subscribe(seen.append)

    clock.current = NOW + timedelta(minutes=1)
    ticker.tick()
    unsubscribe()
    clock.current = NOW + timedelta(minutes=2)
    ticker.tick()

    assert seen == [NOW + timedelta(minutes=1)]
    assert ticker.now() == NOW + timedelta(minutes=2)


def test_failing_listener_does_not_block_others():
    ticker = ExpiryTicker(clock=FakeClock(NOW))
    seen = []

    def broken(_):
        raise RuntimeError("boom")

    ticker.subscribe(broken)
    ticker.subscribe(seen.append)
    ticker.tick()

    assert seen == [NOW]


def test_start_and_stop():
    ticker = ExpiryTicker(interval_seconds=3600)
    assert ticker.running is False

    ticker.start()
    ticker.start()
    try:
        assert ticker.running is True
    finally:
        ticker.stop()

    assert ticker.running is False
    ticker.stop()
