# liftlog/repositories/base.py
from __future__ import annotations
from typing import Generic, TypeVar

from sqlalchemy.orm import Session

from liftlog.errors import NotFound

T = TypeVar("T")  # SQLAlchemy model type

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style.

    Repositories flush but never commit; the caller owns the transaction.
    """
    model: type[T]
    entity_name: str

    def __init__(self, db: Session):
        self.db = db

    def get(self, entity_id: int) -> T | None:
        return self.db.get(self.model, entity_id)

    def get_or_raise(self, entity_id: int) -> T:
        entity = self.get(entity_id)
        if entity is None:
            raise NotFound(self.entity_name, entity_id)
        return entity

    def add_and_refresh(self, entity: T) -> T:
        self.db.add(entity)
        self.db.flush()
        self.db.refresh(entity)
        return entity
