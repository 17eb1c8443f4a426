import pytest

from liftlog import InvalidInput, NotFound


def test_orders_follow_insertion(store):
    tpl = store.create_template("Full Body")
    orders = [store.create_exercise(tpl.id, f"Ex {i}", 3).order for i in range(1, 6)]
    assert orders == [1, 2, 3, 4, 5]


def test_orders_unaffected_by_other_templates(store):
    a = store.create_template("A")
    b = store.create_template("B")
    a1 = store.create_exercise(a.id, "a1", 3)
    b1 = store.create_exercise(b.id, "b1", 3)
    store.delete_exercise(b1.id)
    a2 = store.create_exercise(a.id, "a2", 3)
    b2 = store.create_exercise(b.id, "b2", 3)
    store.delete_exercise(b2.id)
    a3 = store.create_exercise(a.id, "a3", 3)
    assert [a1.order, a2.order, a3.order] == [1, 2, 3]


def test_delete_leaves_gap_and_listing_stays_sorted(store):
    tpl = store.create_template("T")
    e1 = store.create_exercise(tpl.id, "one", 3)
    e2 = store.create_exercise(tpl.id, "two", 3)
    e3 = store.create_exercise(tpl.id, "three", 3)
    store.delete_exercise(e2.id)
    listed = store.list_exercises(tpl.id)
    assert [(e.id, e.order) for e in listed] == [(e1.id, 1), (e3.id, 3)]
    e4 = store.create_exercise(tpl.id, "four", 3)
    assert e4.order == 4


def test_create_exercise_validation(store):
    tpl = store.create_template("T")
    with pytest.raises(InvalidInput):
        store.create_exercise(tpl.id, "Squat", 0)
    with pytest.raises(InvalidInput):
        store.create_exercise(tpl.id, "Squat", -2)
    with pytest.raises(InvalidInput):
        store.create_exercise(tpl.id, "  ", 3)
    with pytest.raises(InvalidInput):
        store.create_exercise(tpl.id, "Squat", 2.5)
    with pytest.raises(NotFound):
        store.create_exercise(999, "Squat", 3)
    assert store.list_exercises(tpl.id) == []


def test_update_exercise_is_partial(store, push_day):
    _, bench, _ = push_day
    updated = store.update_exercise(bench.id, target_sets=5)
    assert (updated.name, updated.target_sets, updated.order) == ("Bench Press", 5, 1)
    updated = store.update_exercise(bench.id, name=" Incline Bench ")
    assert (updated.name, updated.target_sets) == ("Incline Bench", 5)
    assert store.get_exercise(bench.id) == updated


def test_update_exercise_rejects_bad_input_without_writing(store, push_day):
    _, bench, _ = push_day
    with pytest.raises(InvalidInput):
        store.update_exercise(bench.id, name="Dips", target_sets=0)
    assert store.get_exercise(bench.id) == bench


def test_update_unknown_exercise(store):
    with pytest.raises(NotFound):
        store.update_exercise(777, name="x")
    with pytest.raises(NotFound):
        store.update_exercise(777)


def test_list_exercises_unknown_template(store):
    with pytest.raises(NotFound):
        store.list_exercises(31337)


def test_reorder_exercises_renumbers(store):
    tpl = store.create_template("T")
    a = store.create_exercise(tpl.id, "a", 3)
    b = store.create_exercise(tpl.id, "b", 3)
    c = store.create_exercise(tpl.id, "c", 3)
    store.delete_exercise(b.id)
    d = store.create_exercise(tpl.id, "d", 3)

    result = store.reorder_exercises(tpl.id, [d.id, a.id, c.id])
    assert [(e.id, e.order) for e in result] == [(d.id, 1), (a.id, 2), (c.id, 3)]
    assert store.list_exercises(tpl.id) == result
    # appending continues after the renumbered block
    assert store.create_exercise(tpl.id, "e", 3).order == 4


def test_reorder_requires_full_permutation(store, push_day):
    tpl, bench, ohp = push_day
    for bad in ([bench.id], [bench.id, bench.id], [bench.id, ohp.id, 999]):
        with pytest.raises(InvalidInput):
            store.reorder_exercises(tpl.id, bad)
    assert [e.id for e in store.list_exercises(tpl.id)] == [bench.id, ohp.id]
    with pytest.raises(NotFound):
        store.reorder_exercises(999, [])
