from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, BeforeValidator, Field


def strip_non_blank(v):
    if isinstance(v, str):
        v = v.strip()
        if not v:
            raise ValueError("name cannot be blank")
    return v


# Trimmed, non-blank, up to 120 chars
NameStr = Annotated[str, BeforeValidator(strip_non_blank), Field(max_length=120)]

class TemplateCreate(BaseModel):
    name: NameStr

class TemplateRead(BaseModel):
    id: int
    name: str
    created_at: datetime

    model_config = {"from_attributes": True, "frozen": True}
