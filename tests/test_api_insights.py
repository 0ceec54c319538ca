from conftest import scores

ENTRIES = "/api/v1/health-entries"
INSIGHTS = "/api/v1/insights"


def test_overview_without_todays_entry(client, headers_a):
    response = client.get(f"{INSIGHTS}/overview", params={"today": "2024-02-14"}, headers=headers_a)
    assert response.status_code == 200
    body = response.json()
    assert body["entry"] is None
    assert body["overall_score"] is None
    assert [i["title"] for i in body["insights"]] == ["Get Started"]


def test_overview_with_todays_entry(client, headers_a):
    client.post(ENTRIES, json={"date": "2024-02-14", **scores(80, 90, 100, 60, 70)}, headers=headers_a)

    body = client.get(f"{INSIGHTS}/overview", params={"today": "2024-02-14"}, headers=headers_a).json()

    assert body["overall_score"] == 80
    assert body["label"] == "Fair"
    assert body["band"] == "fair"
    assert body["entry"]["date"] == "2024-02-14"
    sleep = next(m for m in body["metrics"] if m["metric"] == "sleep_score")
    assert sleep["measurement"] == "7-8 hours"
    assert "Hydration Alert" in [i["title"] for i in body["insights"]]


def test_overview_requires_today(client, headers_a):
    assert client.get(f"{INSIGHTS}/overview", headers=headers_a).status_code == 400


def test_trends_window(client, headers_a):
    client.post(ENTRIES, json={"date": "2024-02-14", **scores(80, 80, 80, 80, 80)}, headers=headers_a)
    client.post(ENTRIES, json={"date": "2024-02-10", **scores(60, 60, 60, 60, 60)}, headers=headers_a)
    client.post(ENTRIES, json={"date": "2024-01-01", **scores(0, 0, 0, 0, 0)}, headers=headers_a)

    body = client.get(
        f"{INSIGHTS}/trends", params={"end_date": "2024-02-14", "days": 7}, headers=headers_a
    ).json()

    assert body["start_date"] == "2024-02-08"
    assert body["days_logged"] == 2
    assert len(body["points"]) == 7
    assert body["averages"]["overall_score"] == 70


def test_overview_metric_messages_compare_with_previous_logged_day(client, headers_a):
    client.post(ENTRIES, json={"date": "2024-02-10", **scores(60, 90, 70, 90, 90)}, headers=headers_a)
    client.post(ENTRIES, json={"date": "2024-02-14", **scores(80, 90, 75, 90, 50)}, headers=headers_a)

    body = client.get(f"{INSIGHTS}/overview", params={"today": "2024-02-14"}, headers=headers_a).json()
    messages = {m["metric"]: m["message"] for m in body["metrics"]}

    assert messages["sleep_score"].startswith("Great improvement in Sleep")
    assert messages["exercise_score"].startswith("Nice progress in Exercise")
    assert messages["nutrition_score"].startswith("Excellent Nutrition")
    assert messages["mood_score"].startswith("Mood needs attention")


def test_overview_only_counts_the_last_two_weeks_of_entries(client, headers_a):
    # Seven strong exercise days, every other day; the oldest falls outside the 14-day lookback
    for day in ("2024-01-31", "2024-02-02", "2024-02-04", "2024-02-06",
                "2024-02-08", "2024-02-10", "2024-02-12"):
        client.post(ENTRIES, json={"date": day, **scores(70, 70, 90, 90, 70)}, headers=headers_a)

    inside = client.get(f"{INSIGHTS}/overview", params={"today": "2024-02-13"}, headers=headers_a).json()
    assert "Exercise Streak" in [i["title"] for i in inside["insights"]]

    outside = client.get(f"{INSIGHTS}/overview", params={"today": "2024-02-14"}, headers=headers_a).json()
    assert [i["title"] for i in outside["insights"]] == ["Get Started"]


def test_windows_near_the_earliest_date_are_cut_short(client, headers_a):
    client.post(ENTRIES, json={"date": "0001-01-02", **scores(50, 50, 50, 50, 50)}, headers=headers_a)

    trends = client.get(
        f"{INSIGHTS}/trends", params={"end_date": "0001-01-03", "days": 7}, headers=headers_a
    )
    assert trends.status_code == 200
    body = trends.json()
    assert body["start_date"] == "0001-01-01"
    assert len(body["points"]) == 3
    assert body["days_logged"] == 1

    overview = client.get(f"{INSIGHTS}/overview", params={"today": "0001-01-01"}, headers=headers_a)
    assert overview.status_code == 200
