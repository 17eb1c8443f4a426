from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import CheckConstraint, Float, ForeignKey, Index, Integer
from liftlog.db import Base, UTCDateTime

class LoggedSet(Base):
    __tablename__ = "logged_sets"
    __table_args__ = (
        CheckConstraint("reps > 0", name="ck_logged_sets_reps"),
        CheckConstraint("weight >= 0", name="ck_logged_sets_weight"),
        # backs the last-performance lookup
        Index("ix_logged_sets_exercise_logged_at", "exercise_id", "logged_at"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    exercise_id: Mapped[int] = mapped_column(
        ForeignKey("template_exercises.id", ondelete="CASCADE"), nullable=False
    )
    session_id: Mapped[int] = mapped_column(
        ForeignKey("workout_sessions.id", ondelete="CASCADE"), index=True, nullable=False
    )
    weight: Mapped[float] = mapped_column(Float, nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    logged_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
