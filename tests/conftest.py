# tests/conftest.py
import pytest

from fitplanner import create_app
from fitplanner.controller import SessionController
from fitplanner.models.store import KeyValueStore
from fitplanner.models.workout import DayWorkout, Exercise


class ManualTicker:
    """Ticker that only fires when the test calls advance()."""

    def __init__(self):
        self.active = {}
        self.started = 0
        self.cancelled = 0
        self._next = 0

    def start(self, callback):
        self._next += 1
        self.active[self._next] = callback
        self.started += 1
        return self._next

    def cancel(self, handle):
        self.active.pop(handle, None)
        self.cancelled += 1

    def advance(self, seconds=1):
        for _ in range(seconds):
            for callback in list(self.active.values()):
                callback()


@pytest.fixture
def app():
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": "sqlite://",
        }
    )
    yield app


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def ticker():
    return ManualTicker()


@pytest.fixture
def store(app_ctx):
    return KeyValueStore()


@pytest.fixture
def controller(store, ticker):
    return SessionController(store, ticker=ticker)


@pytest.fixture
def client(app, ticker):
    with app.app_context():
        app.extensions["fitplanner"] = SessionController(KeyValueStore(), ticker=ticker)
    return app.test_client()


@pytest.fixture
def two_exercise_day():
    return DayWorkout(
        day="Monday",
        exercises=[
            Exercise(id="ex-1", name="Push-ups", category="Chest", mets=3.8, reps=10),
            Exercise(id="ex-2", name="Squats", category="Legs", mets=5.0, reps=12),
        ],
    )
