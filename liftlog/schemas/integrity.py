from pydantic import BaseModel

class DanglingReference(BaseModel):
    table: str
    row_id: int
    column: str
    missing_id: int

    model_config = {"frozen": True}
