import logging
from datetime import date

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError

from vikfit.errors import ParseError, PersistenceError
from vikfit.repositories.log_repo import LogRepository
from vikfit.repositories.schedule_repo import ScheduleRepository

# Sunday 2025-11-02 ... Saturday 2025-11-08
WEEK = date(2025, 11, 2)

def db_down(*a, **kw):
    raise OperationalError("SELECT 1", {}, Exception("db down"))

def test_assign_then_read_roundtrip(db, workouts):
    w = workouts.create(name="Push")
    repo = ScheduleRepository(db)
    assert repo.get_scheduled_days(w.id) == set()
    repo.assign_days(w.id, {1, 3, 5})
    assert repo.get_scheduled_days(w.id) == {1, 3, 5}

def test_assign_replaces_rather_than_unions(db, workouts):
    w = workouts.create(name="Pull")
    repo = ScheduleRepository(db)
    repo.assign_days(w.id, {1, 3, 5})
    repo.assign_days(w.id, {2})
    assert repo.get_scheduled_days(w.id) == {2}
    repo.assign_days(w.id, set())
    assert repo.get_scheduled_days(w.id) == set()

def test_assignments_are_per_workout(db, workouts):
    a, b = workouts.create(name="A"), workouts.create(name="B")
    repo = ScheduleRepository(db)
    repo.assign_days(a.id, {0, 6})
    repo.assign_days(b.id, {6})
    repo.assign_days(a.id, {1})
    assert repo.get_scheduled_days(b.id) == {6}
    assert [w.name for w in repo.get_scheduled_workouts_for_day(6)] == ["B"]

def test_unknown_workout_has_no_days(db):
    assert ScheduleRepository(db).get_scheduled_days(4242) == set()

@pytest.mark.parametrize("days", [{7}, {-1}, {0, 9}])
def test_out_of_range_days_rejected_before_writing(db, workouts, days):
    w = workouts.create(name="Legs")
    repo = ScheduleRepository(db)
    repo.assign_days(w.id, {4})
    with pytest.raises(ParseError):
        repo.assign_days(w.id, days)
    assert repo.get_scheduled_days(w.id) == {4}

def test_remove_days(db, workouts):
    w = workouts.create(name="Core")
    repo = ScheduleRepository(db)
    repo.assign_days(w.id, {1, 2, 3})
    repo.remove_days(w.id, {2, 5})
    assert repo.get_scheduled_days(w.id) == {1, 3}

def test_scheduled_workouts_for_day_sorted_by_name(db, workouts):
    repo = ScheduleRepository(db)
    for name in ("Zumba", "Arms", "Mobility"):
        repo.assign_days(workouts.create(name=name).id, {3})
    assert [w.name for w in repo.get_scheduled_workouts_for_day(3)] == ["Arms", "Mobility", "Zumba"]
    assert repo.get_scheduled_workouts_for_day(4) == []

def test_completions_in_range_inclusive(db, workouts, complete_session):
    w = workouts.create(name="Run")
    complete_session(w, date(2025, 11, 1))   # day before
    complete_session(w, date(2025, 11, 2))   # first day
    complete_session(w, date(2025, 11, 8))   # last day
    complete_session(w, date(2025, 11, 9))   # day after
    repo = ScheduleRepository(db)
    assert repo.get_completions_in_range(w.id, "2025-11-02", "2025-11-08") == 2

def test_only_completed_logs_count(db, workouts, complete_session):
    w = workouts.create(name="Swim")
    logs = LogRepository(db)
    logs.start(w.id, date(2025, 11, 3))                        # in progress
    logs.cancel(logs.start(w.id, date(2025, 11, 4)).id)        # cancelled
    complete_session(w, date(2025, 11, 5))
    assert ScheduleRepository(db).get_completions_in_range(w.id, WEEK, date(2025, 11, 8)) == 1

def test_completed_workouts_for_date_counts_distinct_exercises(db, workouts, complete_session):
    w = workouts.create(name="Upper")
    bench = workouts.add_exercise(w.id, name="Bench")
    row = workouts.add_exercise(w.id, name="Row")
    wl = complete_session(w, date(2025, 11, 3), exercises=[bench, row])
    # a second set of the same exercise does not add to the count
    LogRepository(db).log_set(wl.id, exercise_id=bench.id, set_number=2, reps_completed=8)
    bare = workouts.create(name="Stretch")
    complete_session(bare, date(2025, 11, 3))

    got = ScheduleRepository(db).get_completed_workouts_for_date("2025-11-03")
    assert [(wk.name, n) for wk, n in got] == [("Stretch", 0), ("Upper", 2)]
    assert ScheduleRepository(db).get_completed_workouts_for_date("2025-11-04") == []

def test_reads_fail_soft_and_log_degraded(db, workouts, monkeypatch, caplog):
    wid = workouts.create(name="Yoga").id
    repo = ScheduleRepository(db)
    repo.assign_days(wid, {1})
    # ids are bound first: touching an expired instance would itself hit the store
    monkeypatch.setattr(db, "execute", db_down)
    with caplog.at_level(logging.WARNING, logger="vikfit.repositories"):
        assert repo.get_scheduled_days(wid) == set()
        assert repo.get_completions_in_range(wid, WEEK, date(2025, 11, 8)) == 0
        assert repo.get_scheduled_workouts_for_day(1) == []
        assert repo.get_completed_workouts_for_date(WEEK) == []
    degraded = [r for r in caplog.records if getattr(r, "degraded_read", False)]
    assert {r.op for r in degraded} == {
        "get_scheduled_days", "get_completions_in_range",
        "get_scheduled_workouts_for_day", "get_completed_workouts_for_date",
    }

def test_strict_reads_raise(db, monkeypatch):
    repo = ScheduleRepository(db)
    monkeypatch.setattr(db, "execute", db_down)
    with pytest.raises(PersistenceError):
        repo.get_scheduled_workouts_for_day(2, strict=True)

def test_assign_fails_hard_on_store_error(db, workouts, monkeypatch):
    wid = workouts.create(name="HIIT").id
    repo = ScheduleRepository(db)
    monkeypatch.setattr(db, "execute", db_down)
    with pytest.raises(PersistenceError):
        repo.assign_days(wid, {1})
    monkeypatch.undo()
    assert repo.get_scheduled_days(wid) == set()

def test_failed_assign_leaves_previous_schedule_intact(db, workouts, monkeypatch):
    wid = workouts.create(name="Boxing").id
    repo = ScheduleRepository(db)
    repo.assign_days(wid, {1, 3, 5})
    # the delete runs, then the insert fails: the whole replacement must roll back
    monkeypatch.setattr(db, "flush", db_down)
    with pytest.raises(PersistenceError):
        repo.assign_days(wid, {2})
    monkeypatch.undo()
    assert repo.get_scheduled_days(wid) == {1, 3, 5}

def test_schedule_writes_lock_the_workout_row_first(db, workouts, monkeypatch):
    wid = workouts.create(name="Rowing").id
    repo = ScheduleRepository(db)
    seen = []
    real_execute = db.execute

    def recording(stmt, *a, **kw):
        seen.append(str(stmt.compile(dialect=postgresql.dialect())))
        return real_execute(stmt, *a, **kw)
    monkeypatch.setattr(db, "execute", recording)

    repo.assign_days(wid, {1, 2})
    repo.remove_days(wid, {2})
    locks = [i for i, sql in enumerate(seen) if "FOR UPDATE" in sql]
    assert len(locks) == 2
    # each lock precedes the DELETE of its own write
    assert seen[locks[0] + 1].startswith("DELETE FROM schedule_entries")
    assert seen[locks[1] + 1].startswith("DELETE FROM schedule_entries")
    assert "FROM workouts" in seen[locks[0]]
    monkeypatch.undo()
    assert repo.get_scheduled_days(wid) == {1}

def test_deleting_workout_clears_schedule(db, workouts):
    w = workouts.create(name="Temp")
    repo = ScheduleRepository(db)
    repo.assign_days(w.id, {0})
    workouts.delete(w.id)
    assert repo.get_scheduled_workouts_for_day(0) == []
