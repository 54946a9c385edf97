def mk_meal(client, name="Oats", **extra):
    r = client.post("/meals", json={"name": name, **extra})
    assert r.status_code == 201, r.text
    return r.json()

def test_meal_templates_crud(client):
    oats = mk_meal(client, category="breakfast", calories=350, protein=12)
    mk_meal(client, "Steak", category="dinner", calories=700)
    assert oats["carbs"] == 0

    assert [m["name"] for m in client.get("/meals").json()] == ["Oats", "Steak"]
    assert [m["name"] for m in client.get("/meals", params={"category": "dinner"}).json()] == ["Steak"]
    assert [m["name"] for m in client.get("/meals", params={"q": "oat"}).json()] == ["Oats"]

    r = client.patch(f"/meals/{oats['id']}", json={"calories": 380})
    assert r.status_code == 200
    assert r.json()["calories"] == 380 and r.json()["name"] == "Oats"

    assert client.delete(f"/meals/{oats['id']}").status_code == 204
    assert client.patch(f"/meals/{oats['id']}", json={"calories": 1}).status_code == 404

def test_meal_validation(client):
    assert client.post("/meals", json={"name": "  "}).status_code == 422
    assert client.post("/meals", json={"name": "Bad", "calories": -5}).status_code == 422

def test_log_meals_and_daily_totals(client):
    bowl = mk_meal(client, "Bowl", calories=600, protein=40, carbs=70, fats=15)
    r = client.post(f"/meals/{bowl['id']}/logs", json={"meal_date": "2025-11-03"})
    assert r.status_code == 201, r.text
    first = r.json()
    assert first["calories"] == 600 and first["meal_date"] == "2025-11-03"
    client.post(f"/meals/{bowl['id']}/logs", json={"meal_date": "2025-11-03", "calories": 400})

    logs = client.get("/meal-logs", params={"on": "2025-11-03"}).json()
    assert len(logs) == 2
    totals = client.get("/meal-logs/totals", params={"on": "2025-11-03"}).json()
    assert totals == {"calories": 1000.0, "protein": 80.0, "carbs": 140.0, "fats": 30.0}

    r = client.patch(f"/meal-logs/{first['id']}", json={"fats": 20})
    assert r.json()["fats"] == 20 and r.json()["calories"] == 600
    assert client.delete(f"/meal-logs/{first['id']}").status_code == 204
    assert client.delete(f"/meal-logs/{first['id']}").status_code == 404

def test_logging_unknown_meal_404(client):
    assert client.post("/meals/999/logs", json={}).status_code == 404

def test_macro_goals_timeline(client):
    assert client.get("/macro-goals/2025-11-03").json() == {
        "calories": 2500.0, "protein": 120.0, "carbs": 300.0, "fats": 80.0,
    }
    r = client.put("/macro-goals/2025-11-01",
                   json={"calorie_goal": 2000, "protein_goal": 100, "carbs_goal": 250, "fats_goal": 70})
    assert r.status_code == 200
    assert r.json()["goal_date"] == "2025-11-01"
    assert client.get("/macro-goals/2025-11-03").json()["calories"] == 2000
    assert client.get("/macro-goals/2025-10-31").json()["calories"] == 2500

def test_weekly_nutrition_endpoint(client):
    plate = mk_meal(client, "Plate", calories=1000, protein=50)
    client.post(f"/meals/{plate['id']}/logs", json={"meal_date": "2025-11-04"})
    client.put("/macro-goals/2025-11-01",
               json={"calorie_goal": 2000, "protein_goal": 100, "carbs_goal": 250, "fats_goal": 70})

    body = client.get("/stats/weeks/2025-11-05/nutrition").json()
    assert body["week_start"] == "2025-11-02" and body["week_end"] == "2025-11-08"
    assert [d["day_label"] for d in body["days"]] == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert body["days"][2]["totals"]["calories"] == 1000
    assert body["totals"]["calories"] == 1000
    assert body["goals"]["calories"] == 14000
    assert body["change"]["calories"] == 100
    assert body["progress"][0]["macro"] == "calories"

def test_weight_tracking(client):
    assert client.get("/weight/latest").json() is None
    r = client.put("/weight/2025-11-03", json={"current_weight": 82.5, "target_weight": 78})
    assert r.status_code == 200
    client.put("/weight/2025-11-03", json={"current_weight": 82.0, "target_weight": 78})
    client.put("/weight/2025-11-06", json={"current_weight": 81.6, "target_weight": 78})

    entries = client.get("/weight", params={"start": "2025-11-01", "end": "2025-11-30"}).json()
    assert [(e["weight_date"], e["current_weight"]) for e in entries] == [
        ("2025-11-03", 82.0), ("2025-11-06", 81.6),
    ]
    assert client.get("/weight/latest").json()["weight_date"] == "2025-11-06"

    assert client.put("/weight/2025-11-07", json={"current_weight": 0, "target_weight": 78}).status_code == 422
    assert client.delete("/weight/2025-11-03").status_code == 204
    assert client.delete("/weight/2025-11-03").status_code == 404
