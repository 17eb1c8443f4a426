from liftlog.models.workout_template import WorkoutTemplate
from liftlog.models.template_exercise import TemplateExercise
from liftlog.models.workout_session import WorkoutSession
from liftlog.models.logged_set import LoggedSet

__all__ = ["WorkoutTemplate", "TemplateExercise", "WorkoutSession", "LoggedSet"]
