from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import aliased

from liftlog.models import LoggedSet, TemplateExercise, WorkoutSession, WorkoutTemplate
from liftlog.schemas import DanglingReference

# (child model, foreign key column name, parent model)
FOREIGN_KEYS = (
    (TemplateExercise, "template_id", WorkoutTemplate),
    (WorkoutSession, "template_id", WorkoutTemplate),
    (LoggedSet, "exercise_id", TemplateExercise),
    (LoggedSet, "session_id", WorkoutSession),
)

class IntegrityRepository:
    """Store-wide scan for rows whose parent row no longer exists."""
    def __init__(self, db):
        self.db = db

    def dangling_references(self) -> list[DanglingReference]:
        found: list[DanglingReference] = []
        for child, column, parent in FOREIGN_KEYS:
            fk = getattr(child, column)
            p = aliased(parent)
            stmt = (
                select(child.id, fk)
                .outerjoin(p, p.id == fk)
                .where(p.id.is_(None))
                .order_by(child.id)
            )
            for row_id, missing_id in self.db.execute(stmt).all():
                found.append(DanglingReference(
                    table=child.__tablename__, row_id=row_id, column=column, missing_id=missing_id,
                ))
        return found
