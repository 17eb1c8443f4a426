"""Typed failures raised by the workout store.

Every store operation either returns a snapshot or raises one of these.
Validation and lookup failures are raised before anything is written.
"""
from __future__ import annotations


class WorkoutStoreError(Exception):
    """Base class for all store failures."""


class InvalidInput(WorkoutStoreError, ValueError):
    """Input rejected at the boundary (blank name, reps <= 0, ...)."""


class NotFound(WorkoutStoreError, LookupError):
    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class InvalidState(WorkoutStoreError):
    """Operation not allowed in the current lifecycle state."""


class PersistenceFailure(WorkoutStoreError):
    """The durable write did not succeed; nothing was committed."""
