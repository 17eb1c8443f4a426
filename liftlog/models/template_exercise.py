from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String
from liftlog.db import Base

class TemplateExercise(Base):
    __tablename__ = "template_exercises"
    __table_args__ = (
        CheckConstraint("target_sets >= 1", name="ck_template_exercises_target_sets"),
        Index("ix_template_exercises_template_order", "template_id", "order"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    template_id: Mapped[int] = mapped_column(
        ForeignKey("workout_templates.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    target_sets: Mapped[int] = mapped_column(Integer, nullable=False)
    # display/logging sequence within the template; gaps are allowed
    order: Mapped[int] = mapped_column(Integer, nullable=False)
