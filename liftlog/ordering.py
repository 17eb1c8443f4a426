"""Sequence numbers for exercises within a template.

A new exercise is appended after the current highest ``order`` in its
template. Deleting an exercise never renumbers its siblings, so gaps are
normal; every listing sorts with :data:`EXERCISE_ORDERING` and the gaps never
show. ``renumber`` is the only operation that rewrites existing positions.
"""
from __future__ import annotations

from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from liftlog.errors import InvalidInput
from liftlog.models import TemplateExercise

# Canonical display/logging order for a template's exercises
EXERCISE_ORDERING = (TemplateExercise.order.asc(), TemplateExercise.id.asc())


def next_exercise_order(db: Session, template_id: int) -> int:
    max_order = db.execute(
        select(func.max(TemplateExercise.order)).where(TemplateExercise.template_id == template_id)
    ).scalar_one()
    return (max_order or 0) + 1


def renumber(exercises: Sequence[TemplateExercise], exercise_ids: Sequence[int]) -> None:
    """Assign positions 1..N to ``exercises`` following ``exercise_ids``.

    ``exercise_ids`` must name every exercise exactly once.
    """
    by_id = {ex.id: ex for ex in exercises}
    if len(exercise_ids) != len(by_id) or set(exercise_ids) != set(by_id):
        raise InvalidInput("exercise_ids must list every exercise of the template exactly once")
    for position, exercise_id in enumerate(exercise_ids, start=1):
        by_id[exercise_id].order = position
