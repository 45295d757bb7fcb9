# tests/unit/core/test_ticker.py
# Unit tests for the cancellable periodic ticker

import threading

import pytest

from cutlog.core.ticker import Ticker


class TestTicker:

    def test_rejects_non_positive_interval(self):
        with pytest.raises(ValueError):
            Ticker(0, lambda: None)

    # * Callback returning False stops the chain
    def test_stops_when_callback_returns_false(self):
        done = threading.Event()
        calls = []

        def callback():
            calls.append(1)
            if len(calls) == 3:
                done.set()
                return False
            return True

        ticker = Ticker(0.01, callback)
        ticker.start()
        assert done.wait(2.0)
        ticker.stop()
        assert ticker.ticks == 3
        assert ticker.running is False

    # * stop() prevents further ticks
    def test_stop_cancels(self):
        ticked = threading.Event()

        def callback():
            ticked.set()
            return True

        with Ticker(0.01, callback) as ticker:
            assert ticked.wait(2.0)
            assert ticker.running is True
        assert ticker.running is False
        count = ticker.ticks
        threading.Event().wait(0.05)
        assert ticker.ticks <= count + 1

    # * start() twice does not double-schedule
    def test_start_idempotent(self):
        ticker = Ticker(10.0, lambda: True)
        ticker.start()
        ticker.start()
        assert ticker.running is True
        ticker.stop()
        ticker.stop()
        assert ticker.running is False
        assert ticker.ticks == 0
