from __future__ import annotations

from fastapi.testclient import TestClient

from rtis_audit.api import app

client = TestClient(app)

META = {"trainNo": 12951, "journeyDate": "2024-03-05", "rakeType": "GOODS", "mps": 75}


def _rows() -> list[dict]:
    speeds = [30, 20, 14, 10, 0, 0, 8]
    return [
        {"Gps Time": f"2024-03-05T10:00:{i:02d}Z", "Speed": v, "Distance": 20 * i}
        for i, v in enumerate(speeds)
    ]


def test_health_returns_ok_status() -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_analyze_returns_report() -> None:
    response = client.post(
        "/api/analyze",
        json={
            "meta": META,
            "rows": _rows() + [{"Speed": 1}],
            "stations": [{"signalName": "BTE HOME", "distance": 90}],
            "disambiguator": "a1",
        },
    )

    assert response.status_code == 200
    payload = response.json()
    report = payload["report"]
    assert report["trip_id"] == "12951_2024-03-05_a1"
    assert report["meta"]["trainNo"] == "12951"
    assert report["rejected_rows"] == 1
    assert report["bft"]["status"] == "PASS"
    assert report["bft"]["window"]["start_index"] == 1
    assert [s["location"] for s in report["stops"]] == ["BTE HOME"]
    assert report["stops"][0]["speeds"]["0"] == 0
    assert report["stops"][0]["result"] == "Late Braking"
    assert payload["summary_md"].startswith("# Journey Analysis Summary")


def test_analyze_without_valid_samples_is_unprocessable() -> None:
    response = client.post("/api/analyze", json={"meta": META, "rows": [{"Speed": 3}]})

    assert response.status_code == 422
    assert "no valid samples" in response.json()["detail"]


def test_analyze_rejects_invalid_metadata() -> None:
    response = client.post(
        "/api/analyze",
        json={"meta": {**META, "mps": 0}, "rows": _rows()},
    )

    assert response.status_code == 422
