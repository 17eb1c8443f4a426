from __future__ import annotations
from datetime import datetime

from sqlalchemy import func, select

from liftlog.cascade import CascadeResult, delete_template_cascade
from liftlog.models import TemplateExercise, WorkoutTemplate
from liftlog.repositories.base import BaseRepository

class TemplateRepository(BaseRepository[WorkoutTemplate]):
    model = WorkoutTemplate
    entity_name = "template"

    # READS
    def list(self) -> list[WorkoutTemplate]:
        stmt = select(WorkoutTemplate).order_by(WorkoutTemplate.created_at.desc(), WorkoutTemplate.id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def exercise_count(self, template_id: int) -> int:
        stmt = select(func.count()).select_from(TemplateExercise).where(TemplateExercise.template_id == template_id)
        return self.db.execute(stmt).scalar_one()

    # WRITES
    def create(self, *, name: str, created_at: datetime) -> WorkoutTemplate:
        return self.add_and_refresh(WorkoutTemplate(name=name, created_at=created_at))

    def rename(self, template: WorkoutTemplate, *, name: str) -> WorkoutTemplate:
        template.name = name
        self.db.flush()
        return template

    def delete(self, template_id: int) -> CascadeResult:
        self.get_or_raise(template_id)
        return delete_template_cascade(self.db, template_id)
