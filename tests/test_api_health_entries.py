from conftest import scores

BASE = "/api/v1/health-entries"


def _save(client, headers, day, *values):
    return client.post(BASE, json={"date": day, **scores(*values)}, headers=headers)


def test_save_creates_entry_with_overall_score(client, headers_a):
    response = _save(client, headers_a, "2024-01-01", 90, 80, 70, 60, 50)
    assert response.status_code == 200
    body = response.json()
    assert body["date"] == "2024-01-01"
    assert body["overall_score"] == 70
    assert body["user_id"] == "user-a"


def test_save_twice_for_same_day_overwrites(client, headers_a):
    _save(client, headers_a, "2024-01-01", 10, 10, 10, 10, 10)
    second = _save(client, headers_a, "2024-01-01", 100, 100, 100, 100, 95)
    assert second.status_code == 200
    assert second.json()["overall_score"] == 99

    listed = client.get(BASE, headers=headers_a).json()
    assert len(listed) == 1
    assert listed[0]["sleep_score"] == 100


def test_out_of_range_metric_returns_400_naming_the_field(client, headers_a):
    response = _save(client, headers_a, "2024-01-01", 101, 50, 50, 50, 50)
    assert response.status_code == 400
    body = response.json()
    assert body["detail"] == "Invalid data"
    assert "sleep_score" in [error["field"] for error in body["errors"]]

    negative = _save(client, headers_a, "2024-01-01", 50, 50, 50, 50, -1)
    assert negative.status_code == 400
    assert "mood_score" in [error["field"] for error in negative.json()["errors"]]

    assert client.get(BASE, headers=headers_a).json() == []


def test_malformed_date_returns_400(client, headers_a):
    response = _save(client, headers_a, "01/02/2024", 50, 50, 50, 50, 50)
    assert response.status_code == 400
    assert client.get(f"{BASE}/not-a-date", headers=headers_a).status_code == 400


def test_get_by_date_and_missing_date(client, headers_a):
    _save(client, headers_a, "2024-01-05", 50, 60, 70, 80, 90)

    found = client.get(f"{BASE}/2024-01-05", headers=headers_a)
    assert found.status_code == 200
    assert found.json()["overall_score"] == 70

    missing = client.get(f"{BASE}/2024-01-06", headers=headers_a)
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Health entry not found"


def test_list_with_date_range(client, headers_a):
    for day in ("2024-01-01", "2024-01-05", "2024-01-10"):
        _save(client, headers_a, day, 50, 50, 50, 50, 50)

    ranged = client.get(BASE, params={"start_date": "2024-01-02", "end_date": "2024-01-09"}, headers=headers_a)
    assert [e["date"] for e in ranged.json()] == ["2024-01-05"]

    everything = client.get(BASE, headers=headers_a)
    assert [e["date"] for e in everything.json()] == ["2024-01-10", "2024-01-05", "2024-01-01"]


def test_partial_update_recomputes_overall(client, headers_a):
    _save(client, headers_a, "2024-01-01", 80, 80, 80, 80, 80)

    response = client.put(f"{BASE}/2024-01-01", json={"sleep_score": 30}, headers=headers_a)
    assert response.status_code == 200
    body = response.json()
    assert body["sleep_score"] == 30
    assert body["overall_score"] == 70


def test_update_missing_entry_returns_404(client, headers_a):
    response = client.put(f"{BASE}/2024-01-01", json={"sleep_score": 30}, headers=headers_a)
    assert response.status_code == 404


def test_update_out_of_range_returns_400(client, headers_a):
    _save(client, headers_a, "2024-01-01", 80, 80, 80, 80, 80)
    response = client.put(f"{BASE}/2024-01-01", json={"hydration_score": 150}, headers=headers_a)
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "hydration_score"


def test_delete_then_delete_again(client, headers_a):
    _save(client, headers_a, "2024-01-01", 80, 80, 80, 80, 80)

    first = client.delete(f"{BASE}/2024-01-01", headers=headers_a)
    assert first.status_code == 200
    assert first.json() == {"message": "Health entry deleted successfully"}

    second = client.delete(f"{BASE}/2024-01-01", headers=headers_a)
    assert second.status_code == 404


def test_users_cannot_see_each_others_entries(client, headers_a, headers_b):
    _save(client, headers_a, "2024-01-01", 80, 80, 80, 80, 80)

    assert client.get(BASE, headers=headers_b).json() == []
    assert client.get(f"{BASE}/2024-01-01", headers=headers_b).status_code == 404
    assert client.delete(f"{BASE}/2024-01-01", headers=headers_b).status_code == 404
    assert client.get(f"{BASE}/2024-01-01", headers=headers_a).status_code == 200


def test_requests_without_valid_token_are_refused(client, user_a):
    assert client.get(BASE).status_code == 401
    bad = client.get(BASE, headers={"Authorization": "Bearer not-a-jwt"})
    assert bad.status_code == 403


def test_non_numeric_metrics_are_rejected_without_writing(client, headers_a):
    payload = {"date": "2024-01-01", **scores(True, 50, 50, 50, "50")}
    response = client.post(BASE, json=payload, headers=headers_a)

    assert response.status_code == 400
    fields = [error["field"] for error in response.json()["errors"]]
    assert "sleep_score" in fields
    assert "mood_score" in fields
    assert client.get(BASE, headers=headers_a).json() == []


def test_partial_update_rejects_string_metric(client, headers_a):
    _save(client, headers_a, "2024-01-01", 50, 50, 50, 50, 50)

    response = client.put(f"{BASE}/2024-01-01", json={"hydration_score": "90"}, headers=headers_a)
    assert response.status_code == 400
    assert client.get(f"{BASE}/2024-01-01", headers=headers_a).json()["hydration_score"] == 50
