"""The workout store: one object owning the database, passed to whoever needs it.

Each public method is one unit of work. Input is validated first, then the
transaction runs, commits, and a frozen snapshot is returned. On any failure
the transaction is rolled back and a :mod:`liftlog.errors` exception is raised,
so a rejected call leaves the store exactly as it was.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime, tzinfo
from itertools import groupby
from typing import Callable, Iterator, Optional, Sequence

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from liftlog.db import IN_MEMORY_URL, Base, as_utc, create_db_engine, make_session_factory, utcnow
from liftlog.errors import InvalidInput, InvalidState, PersistenceFailure, WorkoutStoreError
from liftlog.repositories import (
    ExerciseRepository,
    IntegrityRepository,
    SessionRepository,
    SetRepository,
    TemplateRepository,
)
from liftlog.schemas import (
    DanglingReference,
    DayHistory,
    ExerciseCreate,
    ExerciseRead,
    ExerciseSets,
    ExerciseUpdate,
    SessionRead,
    SetCreate,
    SetRead,
    TemplateCreate,
    TemplateRead,
)
from liftlog.settings import get_settings

log = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _validate(schema: type[BaseModel], **data) -> BaseModel:
    try:
        return schema(**data)
    except ValidationError as exc:
        log.debug("rejected %s: %s", schema.__name__, exc)
        raise InvalidInput(str(exc)) from exc


def _group_by_exercise(pairs) -> list[ExerciseSets]:
    groups = []
    for _, items in groupby(pairs, key=lambda pair: pair[0].id):
        items = list(items)
        exercise = items[0][0]
        groups.append(ExerciseSets(
            exercise_id=exercise.id,
            exercise_name=exercise.name,
            sets=tuple(SetRead.model_validate(s) for _, s in items),
        ))
    return groups


class WorkoutStore:
    def __init__(self, database_url: Optional[str] = None, *, clock: Optional[Clock] = None,
                 echo: Optional[bool] = None):
        settings = get_settings()
        self.database_url = database_url or settings.DATABASE_URL
        self.engine = create_db_engine(
            self.database_url, echo=settings.SQL_ECHO if echo is None else echo
        )
        self._session_factory = make_session_factory(self.engine)
        self._clock = clock or utcnow

    @classmethod
    def in_memory(cls, *, clock: Optional[Clock] = None) -> "WorkoutStore":
        """A private, schema-ready store that vanishes on close."""
        store = cls(IN_MEMORY_URL, clock=clock, echo=False)
        store.create_schema()
        return store

    # lifecycle
    def create_schema(self) -> None:
        Base.metadata.create_all(self.engine)

    def close(self) -> None:
        self.engine.dispose()

    def __enter__(self) -> "WorkoutStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @contextmanager
    def unit_of_work(self) -> Iterator[Session]:
        """Commit on success, roll back and raise a store error otherwise."""
        db = self._session_factory()
        try:
            yield db
            db.commit()
        except WorkoutStoreError:
            db.rollback()
            raise
        except SQLAlchemyError as exc:
            db.rollback()
            log.warning("database write failed, rolled back", exc_info=True)
            raise PersistenceFailure(str(exc)) from exc
        finally:
            db.close()

    def _now(self) -> datetime:
        return as_utc(self._clock())

    # TEMPLATES
    def create_template(self, name: str) -> TemplateRead:
        data = _validate(TemplateCreate, name=name)
        with self.unit_of_work() as db:
            tpl = TemplateRepository(db).create(name=data.name, created_at=self._now())
            log.info("created template id=%s", tpl.id)
            return TemplateRead.model_validate(tpl)

    def rename_template(self, template_id: int, name: str) -> TemplateRead:
        data = _validate(TemplateCreate, name=name)
        with self.unit_of_work() as db:
            repo = TemplateRepository(db)
            tpl = repo.rename(repo.get_or_raise(template_id), name=data.name)
            return TemplateRead.model_validate(tpl)

    def get_template(self, template_id: int) -> TemplateRead:
        with self.unit_of_work() as db:
            return TemplateRead.model_validate(TemplateRepository(db).get_or_raise(template_id))

    def list_templates(self) -> list[TemplateRead]:
        with self.unit_of_work() as db:
            return [TemplateRead.model_validate(t) for t in TemplateRepository(db).list()]

    def exercise_count(self, template_id: int) -> int:
        with self.unit_of_work() as db:
            repo = TemplateRepository(db)
            repo.get_or_raise(template_id)
            return repo.exercise_count(template_id)

    def delete_template(self, template_id: int) -> None:
        with self.unit_of_work() as db:
            TemplateRepository(db).delete(template_id)
        log.info("deleted template id=%s", template_id)

    # EXERCISES
    def create_exercise(self, template_id: int, name: str, target_sets: int) -> ExerciseRead:
        data = _validate(ExerciseCreate, name=name, target_sets=target_sets)
        with self.unit_of_work() as db:
            TemplateRepository(db).get_or_raise(template_id)
            ex = ExerciseRepository(db).create(template_id, name=data.name, target_sets=data.target_sets)
            log.info("created exercise id=%s template=%s order=%s", ex.id, template_id, ex.order)
            return ExerciseRead.model_validate(ex)

    def update_exercise(self, exercise_id: int, *, name: Optional[str] = None,
                        target_sets: Optional[int] = None) -> ExerciseRead:
        data = _validate(ExerciseUpdate, name=name, target_sets=target_sets)
        with self.unit_of_work() as db:
            repo = ExerciseRepository(db)
            ex = repo.update(repo.get_or_raise(exercise_id), name=data.name, target_sets=data.target_sets)
            return ExerciseRead.model_validate(ex)

    def reorder_exercises(self, template_id: int, exercise_ids: Sequence[int]) -> list[ExerciseRead]:
        """Rewrite a template's exercise positions to 1..N in the given order."""
        with self.unit_of_work() as db:
            TemplateRepository(db).get_or_raise(template_id)
            exercises = ExerciseRepository(db).reorder(template_id, list(exercise_ids))
            return [ExerciseRead.model_validate(ex) for ex in exercises]

    def get_exercise(self, exercise_id: int) -> ExerciseRead:
        with self.unit_of_work() as db:
            return ExerciseRead.model_validate(ExerciseRepository(db).get_or_raise(exercise_id))

    def list_exercises(self, template_id: int) -> list[ExerciseRead]:
        with self.unit_of_work() as db:
            TemplateRepository(db).get_or_raise(template_id)
            return [ExerciseRead.model_validate(ex) for ex in ExerciseRepository(db).list_for_template(template_id)]

    def delete_exercise(self, exercise_id: int) -> None:
        with self.unit_of_work() as db:
            ExerciseRepository(db).delete(exercise_id)
        log.info("deleted exercise id=%s", exercise_id)

    # SESSIONS
    def start_session(self, template_id: int) -> SessionRead:
        with self.unit_of_work() as db:
            TemplateRepository(db).get_or_raise(template_id)
            sess = SessionRepository(db).start(template_id, started_at=self._now())
            log.info("started session id=%s template=%s", sess.id, template_id)
            return SessionRead.model_validate(sess)

    def complete_session(self, session_id: int) -> SessionRead:
        """Finish a session. Raises InvalidState if it was already finished."""
        with self.unit_of_work() as db:
            repo = SessionRepository(db)
            sess = repo.complete(repo.get_or_raise(session_id), completed_at=self._now())
            log.info("completed session id=%s", session_id)
            return SessionRead.model_validate(sess)

    def get_session(self, session_id: int) -> SessionRead:
        with self.unit_of_work() as db:
            return SessionRead.model_validate(SessionRepository(db).get_or_raise(session_id))

    def list_sessions(self) -> list[SessionRead]:
        with self.unit_of_work() as db:
            return [SessionRead.model_validate(s) for s in SessionRepository(db).list()]

    def delete_session(self, session_id: int) -> None:
        with self.unit_of_work() as db:
            SessionRepository(db).delete(session_id)
        log.info("deleted session id=%s", session_id)

    # LOGGED SETS
    def log_set(self, exercise_id: int, session_id: int, weight: float, reps: int) -> SetRead:
        data = _validate(SetCreate, exercise_id=exercise_id, session_id=session_id, weight=weight, reps=reps)
        with self.unit_of_work() as db:
            ex = ExerciseRepository(db).get_or_raise(data.exercise_id)
            sess = SessionRepository(db).get_or_raise(data.session_id)
            if sess.completed_at is not None:
                raise InvalidState(f"session {sess.id} is already completed")
            if ex.template_id != sess.template_id:
                raise InvalidInput(
                    f"exercise {ex.id} belongs to template {ex.template_id}, "
                    f"session {sess.id} to template {sess.template_id}"
                )
            s = SetRepository(db).create(ex.id, sess.id, weight=data.weight, reps=data.reps,
                                         logged_at=self._now())
            log.info("logged set id=%s exercise=%s session=%s", s.id, ex.id, sess.id)
            return SetRead.model_validate(s)

    def get_set(self, set_id: int) -> SetRead:
        with self.unit_of_work() as db:
            return SetRead.model_validate(SetRepository(db).get_or_raise(set_id))

    def delete_set(self, set_id: int) -> None:
        with self.unit_of_work() as db:
            SetRepository(db).delete(set_id)
        log.info("deleted set id=%s", set_id)

    def list_sets_for_exercise(self, exercise_id: int) -> list[SetRead]:
        # unknown ids are not an error: an exercise deleted by a cascade simply has no sets
        with self.unit_of_work() as db:
            return [SetRead.model_validate(s) for s in SetRepository(db).list_for_exercise(exercise_id)]

    def list_sets_for_session(self, session_id: int) -> list[ExerciseSets]:
        with self.unit_of_work() as db:
            SessionRepository(db).get_or_raise(session_id)
            return _group_by_exercise(SetRepository(db).list_for_session(session_id))

    def last_performance(self, exercise_id: int, *, session_id: Optional[int] = None) -> Optional[SetRead]:
        """Most recent set for an exercise (within one session if given), or None."""
        with self.unit_of_work() as db:
            s = SetRepository(db).latest(exercise_id, session_id=session_id)
            return SetRead.model_validate(s) if s is not None else None

    def history_by_day(self, tz: Optional[tzinfo] = None) -> list[DayHistory]:
        """All sets, newest day first; exercises by name, sets oldest first."""
        tz = tz or get_settings().history_tz
        with self.unit_of_work() as db:
            pairs = SetRepository(db).list_all_with_exercise()

        days: dict = {}
        for ex, s in pairs:
            day = s.logged_at.astimezone(tz).date()
            days.setdefault(day, []).append((ex, s))

        history = []
        for day in sorted(days, reverse=True):
            pairs_for_day = sorted(
                days[day], key=lambda pair: (pair[0].name, pair[0].id, pair[1].logged_at, pair[1].id)
            )
            history.append(DayHistory(day=day, exercises=tuple(_group_by_exercise(pairs_for_day))))
        return history

    # INTEGRITY
    def dangling_references(self) -> list[DanglingReference]:
        with self.unit_of_work() as db:
            return IntegrityRepository(db).dangling_references()
