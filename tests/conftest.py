from datetime import datetime, timedelta, timezone

import pytest

from liftlog import WorkoutStore


class StepClock:
    """Deterministic clock: each call is one minute after the previous one."""
    def __init__(self, start=datetime(2025, 10, 20, 9, 0, tzinfo=timezone.utc), step=timedelta(minutes=1)):
        self.current = start - step
        self.step = step

    def __call__(self):
        self.current += self.step
        return self.current


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def store(clock):
    s = WorkoutStore.in_memory(clock=clock)
    yield s
    s.close()


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'liftlog.db'}"


@pytest.fixture
def file_store(db_url, clock):
    s = WorkoutStore(db_url, clock=clock)
    s.create_schema()
    yield s
    s.close()


@pytest.fixture
def push_day(store):
    """Template with Bench Press (order 1) and Overhead Press (order 2)."""
    tpl = store.create_template("Push Day")
    bench = store.create_exercise(tpl.id, "Bench Press", 4)
    ohp = store.create_exercise(tpl.id, "Overhead Press", 3)
    return tpl, bench, ohp
