from liftlog.schemas.template import TemplateCreate, TemplateRead
from liftlog.schemas.exercise import ExerciseCreate, ExerciseRead, ExerciseUpdate
from liftlog.schemas.session import SessionRead, SessionStatus
from liftlog.schemas.logged_set import DayHistory, ExerciseSets, SetCreate, SetRead
from liftlog.schemas.integrity import DanglingReference

__all__ = [
    "TemplateCreate", "TemplateRead",
    "ExerciseCreate", "ExerciseRead", "ExerciseUpdate",
    "SessionRead", "SessionStatus",
    "SetCreate", "SetRead", "ExerciseSets", "DayHistory",
    "DanglingReference",
]
