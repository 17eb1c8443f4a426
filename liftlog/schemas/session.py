from enum import Enum
from datetime import datetime
from pydantic import BaseModel, computed_field

class SessionStatus(str, Enum):
    in_progress = "in_progress"
    completed = "completed"

class SessionRead(BaseModel):
    id: int
    template_id: int
    started_at: datetime
    completed_at: datetime | None = None

    model_config = {"from_attributes": True, "frozen": True}

    @computed_field
    @property
    def status(self) -> SessionStatus:
        if self.completed_at is None:
            return SessionStatus.in_progress
        return SessionStatus.completed
