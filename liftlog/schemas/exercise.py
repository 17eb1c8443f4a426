from typing import Annotated
from pydantic import BaseModel, Field

from liftlog.schemas.template import NameStr

TargetSets = Annotated[int, Field(strict=True, ge=1)]

class ExerciseCreate(BaseModel):
    name: NameStr
    target_sets: TargetSets

class ExerciseUpdate(BaseModel):
    # None means "leave unchanged"
    name: NameStr | None = None
    target_sets: TargetSets | None = None

class ExerciseRead(BaseModel):
    id: int
    template_id: int
    name: str
    target_sets: int
    order: int

    model_config = {"from_attributes": True, "frozen": True}
