"""What else goes when a template, exercise or session is deleted.

The deletes run as bulk statements inside the caller's transaction, children
first, so the store never holds a row whose parent is gone. The schema's
``ON DELETE CASCADE`` foreign keys are a backstop, not the mechanism.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlalchemy import delete, or_, select
from sqlalchemy.orm import Session

from liftlog.models import LoggedSet, TemplateExercise, WorkoutSession, WorkoutTemplate

log = logging.getLogger(__name__)


@dataclass(slots=True)
class CascadeResult:
    """Rows removed per table by one cascading delete."""
    deleted: dict[str, int] = field(default_factory=dict)

    def add(self, table: str, count: int) -> None:
        self.deleted[table] = self.deleted.get(table, 0) + (count or 0)


def _delete(db: Session, result: CascadeResult, model, *criteria) -> None:
    res = db.execute(delete(model).where(*criteria).execution_options(synchronize_session=False))
    result.add(model.__tablename__, res.rowcount)


def delete_template_cascade(db: Session, template_id: int) -> CascadeResult:
    result = CascadeResult()
    exercise_ids = select(TemplateExercise.id).where(TemplateExercise.template_id == template_id)
    session_ids = select(WorkoutSession.id).where(WorkoutSession.template_id == template_id)

    _delete(db, result, LoggedSet,
            or_(LoggedSet.exercise_id.in_(exercise_ids), LoggedSet.session_id.in_(session_ids)))
    _delete(db, result, WorkoutSession, WorkoutSession.template_id == template_id)
    _delete(db, result, TemplateExercise, TemplateExercise.template_id == template_id)
    _delete(db, result, WorkoutTemplate, WorkoutTemplate.id == template_id)

    log.debug("template %s cascade: %s", template_id, result.deleted)
    return result


def delete_exercise_cascade(db: Session, exercise_id: int) -> CascadeResult:
    result = CascadeResult()
    _delete(db, result, LoggedSet, LoggedSet.exercise_id == exercise_id)
    _delete(db, result, TemplateExercise, TemplateExercise.id == exercise_id)
    log.debug("exercise %s cascade: %s", exercise_id, result.deleted)
    return result


def delete_session_cascade(db: Session, session_id: int) -> CascadeResult:
    result = CascadeResult()
    _delete(db, result, LoggedSet, LoggedSet.session_id == session_id)
    _delete(db, result, WorkoutSession, WorkoutSession.id == session_id)
    log.debug("session %s cascade: %s", session_id, result.deleted)
    return result
