from __future__ import annotations
from typing import Sequence

from sqlalchemy import select

from liftlog.cascade import CascadeResult, delete_exercise_cascade
from liftlog.models import TemplateExercise
from liftlog.ordering import EXERCISE_ORDERING, next_exercise_order, renumber
from liftlog.repositories.base import BaseRepository

class ExerciseRepository(BaseRepository[TemplateExercise]):
    model = TemplateExercise
    entity_name = "exercise"

    def list_for_template(self, template_id: int) -> list[TemplateExercise]:
        stmt = select(TemplateExercise).where(TemplateExercise.template_id == template_id)\
                                       .order_by(*EXERCISE_ORDERING)
        return list(self.db.execute(stmt).scalars().all())

    def create(self, template_id: int, *, name: str, target_sets: int) -> TemplateExercise:
        ex = TemplateExercise(
            template_id=template_id,
            name=name,
            target_sets=target_sets,
            order=next_exercise_order(self.db, template_id),
        )
        return self.add_and_refresh(ex)

    def update(self, exercise: TemplateExercise, *, name: str | None = None,
               target_sets: int | None = None) -> TemplateExercise:
        if name is not None:
            exercise.name = name
        if target_sets is not None:
            exercise.target_sets = target_sets
        self.db.flush()
        return exercise

    def reorder(self, template_id: int, exercise_ids: Sequence[int]) -> list[TemplateExercise]:
        exercises = self.list_for_template(template_id)
        renumber(exercises, exercise_ids)
        self.db.flush()
        return self.list_for_template(template_id)

    def delete(self, exercise_id: int) -> CascadeResult:
        self.get_or_raise(exercise_id)
        return delete_exercise_cascade(self.db, exercise_id)
