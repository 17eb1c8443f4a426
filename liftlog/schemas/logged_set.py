from typing import Annotated
from datetime import date, datetime
from pydantic import BaseModel, Field

PosInt = Annotated[int, Field(strict=True, gt=0)]
NonNegFloat = Annotated[float, Field(strict=True, ge=0, allow_inf_nan=False)]

class SetCreate(BaseModel):
    exercise_id: int
    session_id: int
    weight: NonNegFloat
    reps: PosInt

class SetRead(BaseModel):
    id: int
    exercise_id: int
    session_id: int
    weight: float
    reps: int
    logged_at: datetime

    model_config = {"from_attributes": True, "frozen": True}

class ExerciseSets(BaseModel):
    """One exercise's sets within a session (or within a history day)."""
    exercise_id: int
    exercise_name: str
    sets: tuple[SetRead, ...]

    model_config = {"frozen": True}

class DayHistory(BaseModel):
    day: date
    exercises: tuple[ExerciseSets, ...]

    model_config = {"frozen": True}
