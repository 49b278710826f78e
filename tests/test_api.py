from __future__ import annotations


def _create_employee(client, name: str, **extra) -> dict:
    resp = client.post("/api/employees", json={"full_name": name, **extra})
    assert resp.status_code == 201
    return resp.get_json()["data"]


def test_supervisor_and_employee_crud(client):
    resp = client.post("/api/supervisors", json={"full_name": "Dana Ortiz"})
    assert resp.status_code == 201
    supervisor = resp.get_json()["data"]

    alex = _create_employee(client, "Alex", supervisor_id=supervisor["supervisor_id"])
    assert alex["leaves"] == 12
    assert alex["absences"] == 0

    crew = client.get(f"/api/supervisors/{supervisor['supervisor_id']}/employees").get_json()["data"]
    assert [e["full_name"] for e in crew] == ["Alex"]

    resp = client.put(f"/api/employees/{alex['employee_id']}", json={"leaves": 3})
    assert resp.get_json()["data"]["leaves"] == 3

    resp = client.put(f"/api/supervisors/{supervisor['supervisor_id']}", json={"email": "dana@plant.local"})
    assert resp.get_json()["data"]["email"] == "dana@plant.local"

    assert client.delete(f"/api/employees/{alex['employee_id']}").status_code == 200
    assert client.get(f"/api/employees/{alex['employee_id']}").status_code == 404
    assert client.get("/api/employees").get_json()["data"] == []


def test_initialize_then_mark_and_absent(client):
    alex = _create_employee(client, "Alex")
    priya = _create_employee(client, "Priya")

    first = client.post("/api/attendance/initialize", json={"date": "2026-03-02"}).get_json()
    assert first["date"] == "2026-03-02"
    assert sorted(r["employee_id"] for r in first["data"]) == [alex["employee_id"], priya["employee_id"]]
    assert all(r["status"] is None for r in first["data"])

    again = client.post("/api/attendance/initialize", json={"date": "2026-03-02"}).get_json()
    assert sorted(r["attendance_id"] for r in again["data"]) == sorted(r["attendance_id"] for r in first["data"])

    resp = client.post(
        "/api/attendance/mark",
        json={"employee_id": alex["employee_id"], "date": "2026-03-02", "clock_in": "08:05", "clock_out": "17:00:30"},
    )
    marked = resp.get_json()["data"]
    assert marked["status"] == "present"
    assert marked["clock_in"] == "08:05:00"
    assert marked["clock_out"] == "17:00:30"

    priya_row = next(r for r in first["data"] if r["employee_id"] == priya["employee_id"])
    resp = client.post(f"/api/attendance/{priya_row['attendance_id']}/absent")
    body = resp.get_json()
    assert body["data"]["status"] == "absent"
    assert body["employee"]["absences"] == 1
    assert body["employee"]["leaves"] == 11

    day = client.get("/api/attendance?date=2026-03-02").get_json()["data"]
    assert {r["employee_name"]: r["status"] for r in day} == {"Alex": "present", "Priya": "absent"}

    history = client.get(f"/api/employees/{alex['employee_id']}/attendance").get_json()["data"]
    assert [r["date"] for r in history] == ["2026-03-02"]

    one = client.get(f"/api/attendance/{marked['attendance_id']}").get_json()["data"]
    assert one["employee_name"] == "Alex"


def test_mark_without_clock_in_is_absent(client):
    alex = _create_employee(client, "Alex")

    resp = client.post("/api/attendance/mark", json={"employee_id": alex["employee_id"], "date": "2026-03-02"})

    assert resp.get_json()["data"]["status"] == "absent"
    # Marking absent through clock times does not charge leave.
    assert client.get(f"/api/employees/{alex['employee_id']}").get_json()["data"]["leaves"] == 12


def test_error_responses(client):
    resp = client.post("/api/attendance/mark", json={"employee_id": 404, "date": "2026-03-02", "clock_in": "08:00"})
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Employee not found with ID: 404"

    assert client.post("/api/attendance/mark", json={"date": "2026-03-02"}).status_code == 400
    assert client.get("/api/attendance?date=02/03/2026").status_code == 400
    assert client.post("/api/attendance/initialize", json={"date": "2026-13-01"}).status_code == 400
    assert client.post("/api/employees", json={"full_name": ""}).status_code == 400
    assert client.post("/api/employees", json=["not", "an", "object"]).status_code == 400
    assert client.post("/api/attendance/77/absent").status_code == 404
    assert client.get("/api/attendance/77").status_code == 404
    assert client.get("/api/employees/77/attendance").status_code == 404
    assert client.get("/api/supervisors/77").status_code == 404

    alex = _create_employee(client, "Alex")
    resp = client.post(
        "/api/attendance/mark", json={"employee_id": alex["employee_id"], "date": "2026-03-02", "clock_in": "8am"}
    )
    assert resp.status_code == 400


def test_non_string_names_are_rejected(client):
    resp = client.post("/api/employees", json={"full_name": 5})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "full_name must be a string"

    resp = client.post("/api/supervisors", json={"full_name": ["x"]})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "full_name must be a string"

    assert client.get("/api/employees").get_json()["data"] == []
    assert client.get("/api/supervisors").get_json()["data"] == []


def test_booleans_and_fractions_are_not_integers(client):
    resp = client.post("/api/employees", json={"full_name": "A", "leaves": True})
    assert resp.status_code == 400

    resp = client.post("/api/employees", json={"full_name": "A", "absences": 2.9})
    assert resp.status_code == 400
    assert client.get("/api/employees").get_json()["data"] == []

    alex = _create_employee(client, "Alex", leaves="4", absences=1.0)
    assert (alex["leaves"], alex["absences"]) == (4, 1)

    resp = client.post("/api/attendance/mark", json={"employee_id": 1.7, "date": "2026-03-02", "clock_in": "08:00"})
    assert resp.status_code == 400
    assert client.get("/api/attendance?date=2026-03-02").get_json()["data"] == []

    resp = client.put(f"/api/employees/{alex['employee_id']}", json={"leaves": False})
    assert resp.status_code == 400


def test_missing_date_defaults_to_today(client, monkeypatch):
    from datetime import date

    from plant_management.attendance import controller

    monkeypatch.setattr(controller, "today_local", lambda: date(2026, 5, 4))
    alex = _create_employee(client, "Alex")

    body = client.post("/api/attendance/initialize", json={}).get_json()
    assert body["date"] == "2026-05-04"
    assert [r["employee_id"] for r in body["data"]] == [alex["employee_id"]]

    marked = client.post("/api/attendance/mark", json={"employee_id": alex["employee_id"], "clock_in": "08:00"})
    assert marked.get_json()["data"]["date"] == "2026-05-04"

    day = client.get("/api/attendance").get_json()
    assert day["date"] == "2026-05-04"
    assert [r["status"] for r in day["data"]] == ["present"]
