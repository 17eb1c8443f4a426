from liftlog.repositories.template_repo import TemplateRepository
from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.repositories.session_repo import SessionRepository
from liftlog.repositories.set_repo import SetRepository
from liftlog.repositories.integrity_repo import IntegrityRepository

__all__ = [
    "TemplateRepository",
    "ExerciseRepository",
    "SessionRepository",
    "SetRepository",
    "IntegrityRepository",
]
