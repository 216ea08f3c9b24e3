# tests/test_ticker.py
import threading
import time

from fitplanner.controller import get_controller
from fitplanner.ticker import IntervalTicker


def test_interval_ticker_fires_until_cancelled():
    ticks = []
    enough = threading.Event()

    def on_tick():
        ticks.append(1)
        if len(ticks) >= 3:
            enough.set()

    ticker = IntervalTicker(interval=0.01)
    handle = ticker.start(on_tick)
    assert enough.wait(2)

    ticker.cancel(handle)
    handle.thread.join(1)
    seen = len(ticks)
    time.sleep(0.05)

    assert handle.cancelled
    assert len(ticks) == seen


def test_app_controller_uses_configured_ticker(app):
    app.config["TICK_INTERVAL_SECONDS"] = 0.5
    with app.app_context():
        controller = get_controller()
        assert isinstance(controller.ticker, IntervalTicker)
        assert controller.ticker.interval == 0.5
        assert get_controller() is controller
