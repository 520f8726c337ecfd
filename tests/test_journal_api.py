"""Journal entries API tests."""


def test_create_entry_returns_alert_flag(client, make_patient):
    """POST returns the stored entry plus its crisis flag."""
    patient_id = make_patient("Ana")
    r = client.post(
        f"/patients/{patient_id}/journal",
        json={"mood": 2, "anxiety": 4, "sleep": 6.5, "text": "rough day", "date": "2025-04-01"},
    )
    assert r.status_code == 201
    data = r.json()
    assert data["patient_id"] == patient_id
    assert data["mood"] == 2
    assert data["date"] == "2025-04-01"
    assert data["alert_flag"] == "high"
    assert data["id"] is not None


def test_create_entry_flags_critical_text(client, make_patient):
    patient_id = make_patient("Ana")
    r = client.post(
        f"/patients/{patient_id}/journal",
        json={"mood": 7, "text": "I keep thinking I want to die"},
    )
    assert r.status_code == 201
    assert r.json()["alert_flag"] == "critical"


def test_create_entry_without_signals_flags_none(client, make_patient):
    patient_id = make_patient("Ana")
    r = client.post(f"/patients/{patient_id}/journal", json={"mood": 6})
    assert r.status_code == 201
    assert r.json()["alert_flag"] == "none"


def test_flag_is_not_stored_with_entry(client, make_patient):
    """Stored entries never carry the advisory flag."""
    patient_id = make_patient("Ana")
    client.post(f"/patients/{patient_id}/journal", json={"mood": 0, "stress": 10})
    entries = client.get(f"/patients/{patient_id}/journal").json()
    assert len(entries) == 1
    assert "alert_flag" not in entries[0]
    assert entries[0]["stress"] == 10


def test_score_validation(client, make_patient):
    """mood is required and scores must stay in range."""
    patient_id = make_patient("Ana")
    url = f"/patients/{patient_id}/journal"

    assert client.post(url, json={"mood": 0}).status_code == 201
    assert client.post(url, json={"mood": 10}).status_code == 201
    assert client.post(url, json={"mood": 11}).status_code == 422
    assert client.post(url, json={"mood": -1}).status_code == 422
    assert client.post(url, json={"anxiety": 3}).status_code == 422
    assert client.post(url, json={"mood": 5, "anxiety": 11}).status_code == 422
    assert client.post(url, json={"mood": 5, "stress": -2}).status_code == 422
    assert client.post(url, json={"mood": 5, "sleep": 25}).status_code == 422


def test_unknown_patient_returns_404(client):
    r = client.post("/patients/987654321/journal", json={"mood": 5})
    assert r.status_code == 404
    assert r.json()["detail"] == "Patient not found"

    r = client.get("/patients/987654321/journal")
    assert r.status_code == 404


def test_list_entries_oldest_first(client, make_patient):
    patient_id = make_patient("Ana")
    for day in ("2025-04-03", "2025-04-01", "2025-04-02"):
        client.post(f"/patients/{patient_id}/journal", json={"mood": 5, "date": day})

    entries = client.get(f"/patients/{patient_id}/journal").json()
    assert [e["date"] for e in entries] == ["2025-04-01", "2025-04-02", "2025-04-03"]


def test_same_day_entries_are_all_kept(client, make_patient):
    patient_id = make_patient("Ana")
    for mood in (4, 6):
        client.post(f"/patients/{patient_id}/journal", json={"mood": mood, "date": "2025-04-01"})
    assert len(client.get(f"/patients/{patient_id}/journal").json()) == 2
