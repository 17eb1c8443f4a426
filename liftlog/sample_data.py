"""Preview dataset: one "Push Day" template with two finished sessions."""
import logging
from datetime import datetime, timedelta
from typing import Optional

from liftlog.db import utcnow
from liftlog.repositories import ExerciseRepository, SessionRepository, SetRepository, TemplateRepository
from liftlog.store import WorkoutStore

log = logging.getLogger(__name__)


def seed_sample_data(store: WorkoutStore, now: Optional[datetime] = None) -> bool:
    """Fill an empty store. Returns False (and writes nothing) if templates exist."""
    now = now or utcnow()
    day = timedelta(days=1)

    with store.unit_of_work() as db:
        templates = TemplateRepository(db)
        if templates.list():
            log.info("store already contains templates, not seeding")
            return False

        push_day = templates.create(name="Push Day", created_at=now - 30 * day)

        exercises = ExerciseRepository(db)
        bench = exercises.create(push_day.id, name="Barbell Bench Press", target_sets=4)
        ohp = exercises.create(push_day.id, name="Overhead Press", target_sets=3)

        sessions = SessionRepository(db)
        week_ago = sessions.start(push_day.id, started_at=now - 7 * day)
        sessions.complete(week_ago, completed_at=week_ago.started_at + timedelta(hours=1))
        yesterday = sessions.start(push_day.id, started_at=now - day)
        sessions.complete(yesterday, completed_at=yesterday.started_at + timedelta(minutes=45))

        sets = SetRepository(db)
        sets.create(bench.id, week_ago.id, weight=135.0, reps=10, logged_at=week_ago.completed_at)
        sets.create(bench.id, yesterday.id, weight=140.0, reps=8, logged_at=yesterday.completed_at)
        sets.create(ohp.id, yesterday.id, weight=60.0, reps=12,
                    logged_at=yesterday.completed_at + timedelta(minutes=1))

    log.info("seeded sample data")
    return True
