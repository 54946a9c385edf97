import logging

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

def mk_workout(client, name):
    return client.post("/workouts", json={"name": name}).json()

def finish(client, workout_id, day, exercise_ids=()):
    wl = client.post(f"/workouts/{workout_id}/logs", json={"log_date": day}).json()
    for i, ex_id in enumerate(exercise_ids, start=1):
        client.post(f"/logs/{wl['id']}/sets", json={"exercise_id": ex_id, "set_number": i})
    client.post(f"/logs/{wl['id']}/complete", json={"total_duration_seconds": 900})
    return wl

def test_completions_for_week(client):
    w = mk_workout(client, "Full body")
    client.put(f"/workouts/{w['id']}/schedule", json={"days": [1, 3]})
    finish(client, w["id"], "2025-11-03")
    finish(client, w["id"], "2025-11-10")  # following week

    # any date in the week anchors to its Sunday
    r = client.get(f"/stats/workouts/{w['id']}/completions", params={"week_of": "2025-11-06"})
    assert r.status_code == 200
    assert r.json() == {
        "workout_id": w["id"],
        "week_start": "2025-11-02",
        "week_end": "2025-11-08",
        "completions": 1,
        "assigned_days": 2,
        "completion_percentage": 50.0,
    }

def test_breakdown(client):
    w = mk_workout(client, "Full body")
    ex = client.post(f"/workouts/{w['id']}/exercises", json={"name": "Deadlift"}).json()
    client.put(f"/workouts/{w['id']}/schedule", json={"days": [1, 3]})
    finish(client, w["id"], "2025-11-03", [ex["id"]])

    body = client.get("/stats/weeks/2025-11-05/breakdown").json()
    assert body["week_start"] == "2025-11-02"
    days = body["days"]
    assert [d["day_label"] for d in days] == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert [d["date"] for d in days][:2] == ["2025-11-02", "2025-11-03"]
    mon, wed = days[1], days[3]
    assert [a["name"] for a in mon["assigned"]] == ["Full body"]
    assert mon["completed"][0]["workout"]["id"] == w["id"]
    assert mon["completed"][0]["exercise_count"] == 1
    assert mon["total_exercises_completed"] == 1
    assert wed["total_assigned"] == 1 and wed["completed"] == []

def test_empty_week_breakdown(client):
    days = client.get("/stats/weeks/2025-11-02/breakdown").json()["days"]
    assert len(days) == 7
    assert all(d["total_assigned"] == 0 and d["total_exercises_completed"] == 0 for d in days)

def test_metrics_and_summary(client):
    a = mk_workout(client, "A")
    client.put(f"/workouts/{a['id']}/schedule", json={"days": [2]})
    finish(client, a["id"], "2025-11-04")

    metrics = client.get("/stats/weeks/2025-11-04/metrics").json()
    assert metrics[0]["completion_percentage"] == 100.0
    assert metrics[0]["progress_band"] == "on_track"

    summary = client.get("/stats/weeks/2025-11-04/summary").json()
    assert summary["workouts_completed"] == 1
    assert summary["exercises_completed"] == 0

def test_progress_endpoint(client):
    r = client.get("/stats/progress", params={"completed": 3, "assigned": 2})
    assert r.json() == {"completed": 3, "assigned": 2, "percentage": 100.0, "ratio": 1.5, "band": "on_track"}
    r = client.get("/stats/progress", params={"completed": 1, "assigned": 0})
    assert r.json()["percentage"] == 0 and r.json()["band"] == "at_risk"

def test_bad_week_date_422(client):
    w = mk_workout(client, "Rower")
    assert client.get("/stats/weeks/2025-13-40/breakdown").status_code == 422
    r = client.get(f"/stats/workouts/{w['id']}/completions", params={"week_of": "nope"})
    assert r.status_code == 422
    assert r.json()["detail"][0]["loc"] == ["query", "week_of"]

def test_completions_for_unknown_workout_are_zero(client):
    r = client.get("/stats/workouts/999/completions", params={"week_of": "2025-11-04"})
    assert r.status_code == 200
    body = r.json()
    assert (body["completions"], body["assigned_days"], body["completion_percentage"]) == (0, 0, 0)

def test_completions_survive_store_outage(client, monkeypatch, caplog):
    w = mk_workout(client, "Sprints")
    client.put(f"/workouts/{w['id']}/schedule", json={"days": [1]})
    finish(client, w["id"], "2025-11-03")

    def down(self, *a, **kw):
        raise OperationalError("SELECT", {}, Exception("database is locked"))
    monkeypatch.setattr(Session, "execute", down)
    monkeypatch.setattr(Session, "get", down)
    with caplog.at_level(logging.WARNING, logger="vikfit.repositories"):
        r = client.get(f"/stats/workouts/{w['id']}/completions", params={"week_of": "2025-11-03"})
    assert r.status_code == 200
    assert r.json()["completions"] == 0 and r.json()["assigned_days"] == 0
    assert any(getattr(rec, "degraded_read", False) for rec in caplog.records)
