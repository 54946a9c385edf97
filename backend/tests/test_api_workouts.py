def mk_workout(client, name="Push day", **extra):
    r = client.post("/workouts", json={"name": name, **extra})
    assert r.status_code == 201, r.text
    return r.json()

def test_create_get_update_delete(client):
    w = mk_workout(client, description="chest + triceps")
    assert w["name"] == "Push day"

    r = client.get(f"/workouts/{w['id']}")
    assert r.status_code == 200
    assert r.json()["description"] == "chest + triceps"

    r = client.patch(f"/workouts/{w['id']}", json={"name": "  Push A  "})
    assert r.status_code == 200
    assert r.json()["name"] == "Push A"
    assert r.json()["description"] == "chest + triceps"

    assert client.delete(f"/workouts/{w['id']}").status_code == 204
    assert client.get(f"/workouts/{w['id']}").status_code == 404

def test_blank_name_rejected(client):
    assert client.post("/workouts", json={"name": "   "}).status_code == 422
    assert client.post("/workouts", json={}).status_code == 422

def test_list_is_paged_and_sorted(client):
    for n in ("Zeta", "Alpha", "Mid"):
        mk_workout(client, n)
    r = client.get("/workouts", params={"limit": 2})
    assert r.status_code == 200
    body = r.json()
    assert [w["name"] for w in body["items"]] == ["Alpha", "Mid"]
    assert body["total"] == 3 and body["limit"] == 2 and body["offset"] == 0

def test_exercises(client):
    w = mk_workout(client)
    r = client.post(f"/workouts/{w['id']}/exercises",
                    json={"name": "Bench", "sets": 3, "reps": 8, "weight": 60})
    assert r.status_code == 201, r.text
    ex = r.json()
    assert ex["workout_id"] == w["id"] and ex["weight"] == 60

    r = client.get(f"/workouts/{w['id']}/exercises")
    assert [e["name"] for e in r.json()] == ["Bench"]

    assert client.delete(f"/exercises/{ex['id']}").status_code == 204
    assert client.delete(f"/exercises/{ex['id']}").status_code == 404

def test_missing_workout_404s(client):
    assert client.get("/workouts/999999").status_code == 404
    assert client.patch("/workouts/999999", json={"name": "x"}).status_code == 404
    assert client.post("/workouts/999999/exercises", json={"name": "x"}).status_code == 404
