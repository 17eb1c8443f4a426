import pytest

from liftlog import NotFound


def _populate(store, name):
    tpl = store.create_template(name)
    exercises = [store.create_exercise(tpl.id, f"{name} ex{i}", 3) for i in range(3)]
    sessions = []
    for _ in range(2):
        sess = store.start_session(tpl.id)
        for ex in exercises:
            store.log_set(ex.id, sess.id, 100.0, 5)
        sessions.append(sess)
    store.complete_session(sessions[0].id)
    return tpl, exercises, sessions


def test_delete_template_cascades(store):
    tpl, exercises, sessions = _populate(store, "Push")
    other_tpl, other_exercises, other_sessions = _populate(store, "Pull")

    store.delete_template(tpl.id)

    assert [t.id for t in store.list_templates()] == [other_tpl.id]
    for ex in exercises:
        assert store.list_sets_for_exercise(ex.id) == []
        with pytest.raises(NotFound):
            store.get_exercise(ex.id)
    remaining_sessions = {s.id for s in store.list_sessions()}
    assert remaining_sessions == {s.id for s in other_sessions}
    assert all(s.template_id != tpl.id for s in store.list_sessions())
    assert store.dangling_references() == []

    # the other template is untouched
    assert len(store.list_exercises(other_tpl.id)) == 3
    for ex in other_exercises:
        assert len(store.list_sets_for_exercise(ex.id)) == 2


def test_delete_exercise_keeps_template_and_siblings(store):
    tpl, exercises, sessions = _populate(store, "Push")
    victim, *siblings = exercises

    store.delete_exercise(victim.id)

    assert store.get_template(tpl.id) == tpl
    assert store.list_exercises(tpl.id) == siblings
    assert store.list_sets_for_exercise(victim.id) == []
    for ex in siblings:
        assert len(store.list_sets_for_exercise(ex.id)) == 2
    assert {s.id for s in store.list_sessions()} == {s.id for s in sessions}
    assert store.dangling_references() == []


def test_delete_unknown_exercise(store):
    with pytest.raises(NotFound):
        store.delete_exercise(55)


def test_integrity_scan_reports_orphans(store):
    """Rows slipped in behind the store's back show up in the scan."""
    from sqlalchemy import text

    tpl, exercises, sessions = _populate(store, "Push")
    with store.engine.connect() as conn:
        # the pragma is ignored inside a transaction, so toggle it around the commit
        conn.exec_driver_sql("PRAGMA foreign_keys=OFF")
        conn.execute(text("DELETE FROM workout_sessions WHERE id = :id"), {"id": sessions[1].id})
        conn.commit()
        conn.exec_driver_sql("PRAGMA foreign_keys=ON")

    dangling = store.dangling_references()
    assert {(d.table, d.column, d.missing_id) for d in dangling} == {
        ("logged_sets", "session_id", sessions[1].id),
    }
    assert len(dangling) == len(exercises)
