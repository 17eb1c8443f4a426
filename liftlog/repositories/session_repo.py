from __future__ import annotations
from datetime import datetime

from sqlalchemy import func, select

from liftlog.cascade import CascadeResult, delete_session_cascade
from liftlog.errors import InvalidState
from liftlog.models import WorkoutSession
from liftlog.repositories.base import BaseRepository

# Finished sessions by completion time, unfinished ones by start time
SESSION_RECENCY = func.coalesce(WorkoutSession.completed_at, WorkoutSession.started_at)

class SessionRepository(BaseRepository[WorkoutSession]):
    model = WorkoutSession
    entity_name = "session"

    def list(self) -> list[WorkoutSession]:
        stmt = select(WorkoutSession).order_by(SESSION_RECENCY.desc(), WorkoutSession.id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def start(self, template_id: int, *, started_at: datetime) -> WorkoutSession:
        return self.add_and_refresh(WorkoutSession(template_id=template_id, started_at=started_at))

    def complete(self, sess: WorkoutSession, *, completed_at: datetime) -> WorkoutSession:
        """Finish ``sess``. A finished session is never re-opened or re-stamped."""
        if sess.completed_at is not None:
            raise InvalidState(f"session {sess.id} is already completed")
        sess.completed_at = completed_at
        self.db.flush()
        self.db.refresh(sess)
        return sess

    def delete(self, session_id: int) -> CascadeResult:
        self.get_or_raise(session_id)
        return delete_session_cascade(self.db, session_id)
