from __future__ import annotations
from datetime import datetime
from typing import Optional

from sqlalchemy import delete, select

from liftlog.models import LoggedSet, TemplateExercise
from liftlog.ordering import EXERCISE_ORDERING
from liftlog.repositories.base import BaseRepository

# Newest first; equal timestamps fall back to insertion order
MOST_RECENT_FIRST = (LoggedSet.logged_at.desc(), LoggedSet.id.desc())
OLDEST_FIRST = (LoggedSet.logged_at.asc(), LoggedSet.id.asc())

class SetRepository(BaseRepository[LoggedSet]):
    model = LoggedSet
    entity_name = "logged set"

    def create(self, exercise_id: int, session_id: int, *, weight: float, reps: int,
               logged_at: datetime) -> LoggedSet:
        s = LoggedSet(exercise_id=exercise_id, session_id=session_id, weight=weight, reps=reps,
                      logged_at=logged_at)
        return self.add_and_refresh(s)

    def delete(self, set_id: int) -> None:
        self.get_or_raise(set_id)
        self.db.execute(delete(LoggedSet).where(LoggedSet.id == set_id))

    def list_for_exercise(self, exercise_id: int) -> list[LoggedSet]:
        stmt = select(LoggedSet).where(LoggedSet.exercise_id == exercise_id).order_by(*OLDEST_FIRST)
        return list(self.db.execute(stmt).scalars().all())

    def list_for_session(self, session_id: int) -> list[tuple[TemplateExercise, LoggedSet]]:
        """Sets of one session paired with their exercise, in logging sequence."""
        stmt = (
            select(TemplateExercise, LoggedSet)
            .join(LoggedSet, LoggedSet.exercise_id == TemplateExercise.id)
            .where(LoggedSet.session_id == session_id)
            .order_by(*EXERCISE_ORDERING, *OLDEST_FIRST)
        )
        return [(ex, s) for ex, s in self.db.execute(stmt).all()]

    def list_all_with_exercise(self) -> list[tuple[TemplateExercise, LoggedSet]]:
        stmt = (
            select(TemplateExercise, LoggedSet)
            .join(LoggedSet, LoggedSet.exercise_id == TemplateExercise.id)
            .order_by(*MOST_RECENT_FIRST)
        )
        return [(ex, s) for ex, s in self.db.execute(stmt).all()]

    def latest(self, exercise_id: int, *, session_id: Optional[int] = None) -> Optional[LoggedSet]:
        """Most recently logged set for an exercise, optionally within one session."""
        stmt = select(LoggedSet).where(LoggedSet.exercise_id == exercise_id)
        if session_id is not None:
            stmt = stmt.where(LoggedSet.session_id == session_id)
        stmt = stmt.order_by(*MOST_RECENT_FIRST).limit(1)
        return self.db.execute(stmt).scalars().first()
