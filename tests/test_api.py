"""Tests for the FastAPI web backend."""

import asyncio

from fastapi.testclient import TestClient

from hateguard.detection import ScoringEngine
from web.backend.app.main import app
from web.backend.app.routers import detector

client = TestClient(app)


def test_root_and_health():
    assert client.get("/").json()["name"] == "HateGuard API"
    assert client.get("/health").json() == {"status": "healthy"}


def test_analyze_hateful_text():
    resp = client.post("/api/analyze", json={"text": "I hate you, you idiot, just die"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["prediction"] == "HateSpeechDetected"
    assert body["label"] == "Hate Speech Detected"
    assert body["risk_level"] in ("medium", "high")
    assert body["triggered_features"] == ["profanity_detected", "negative_sentiment", "personal_attack"]
    assert 85.0 <= body["confidence"] <= 99.0
    assert "toxicity_score" not in body


def test_analyze_safe_text_has_one_feature():
    resp = client.post("/api/analyze", json={"text": "have a nice day"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["prediction"] == "SafeContent"
    assert body["risk_level"] == "low"
    assert body["triggered_features"] == ["profanity_detected"]


def test_analyze_empty_text_is_validation_error():
    for payload in ({"text": ""}, {"text": "   "}, {}):
        resp = client.post("/api/analyze", json=payload)
        assert resp.status_code == 422
    assert client.post("/api/analyze", json={"text": " "}).json()["detail"] == (
        "Please enter some text to analyze"
    )


def test_dashboard_metrics():
    body = client.get("/api/dashboard/metrics").json()
    assert body["model_metrics"]["accuracy"] == 94.7
    assert body["model_metrics"]["f1_score"] == 94.2
    assert body["training_details"]["Test Samples"] == "20,000"


def test_dashboard_methodology():
    steps = client.get("/api/dashboard/methodology").json()["steps"]
    assert len(steps) == 6
    assert steps[0]["title"] == "Data Acquisition"
    assert steps[-1]["order"] == 6


def test_dashboard_features():
    body = client.get("/api/dashboard/features").json()
    assert {f["name"] for f in body["feature_engineering"]} == {
        "N-grams",
        "TF-IDF",
        "Sentiment",
        "Linguistic",
        "Contextual",
    }
    assert "URL and mention cleanup" in body["preprocessing"]


def test_dashboard_stats():
    body = client.get("/api/dashboard/stats").json()
    assert body == {"texts_analyzed_today": 1247, "hate_speech_detected": 89, "model_uptime": 99.9}


def test_dashboard_error_is_500(tmp_path, monkeypatch):
    monkeypatch.setenv("HATEGUARD_DASHBOARD_PATH", str(tmp_path / "gone.yaml"))
    resp = client.get("/api/dashboard/stats")
    assert resp.status_code == 500
    assert "not found" in resp.json()["detail"]


def test_dashboard_undecodable_file_is_500_with_detail(tmp_path, monkeypatch):
    path = tmp_path / "dashboard.yaml"
    path.write_bytes(b"model_metrics:\n  accuracy: \xff\xfe 90\n")
    monkeypatch.setenv("HATEGUARD_DASHBOARD_PATH", str(path))
    resp = client.get("/api/dashboard/stats")
    assert resp.status_code == 500
    assert "Invalid YAML" in resp.json()["detail"]


def _record_sleeps(monkeypatch) -> list:
    waits = []
    real_sleep = asyncio.sleep

    async def fake_sleep(delay, *args, **kwargs):
        waits.append(delay)
        await real_sleep(0)

    monkeypatch.setattr(detector.asyncio, "sleep", fake_sleep)
    return waits


def test_analyze_applies_configured_latency(monkeypatch):
    monkeypatch.setenv("HATEGUARD_LATENCY_SECONDS", "1.5")
    waits = _record_sleeps(monkeypatch)
    resp = client.post("/api/analyze", json={"text": "have a nice day"})
    assert resp.status_code == 200
    assert 1.5 in waits


def test_analyze_without_latency_does_not_wait(monkeypatch):
    monkeypatch.delenv("HATEGUARD_LATENCY_SECONDS", raising=False)
    waits = _record_sleeps(monkeypatch)
    resp = client.post("/api/analyze", json={"text": "have a nice day"})
    assert resp.status_code == 200
    assert all(w == 0 for w in waits)


def test_analyze_uses_configured_seed(monkeypatch):
    monkeypatch.setenv("HATEGUARD_SEED", "987654")
    text = "you are the worst"
    body = client.post("/api/analyze", json={"text": text}).json()
    assert body == ScoringEngine(seed=987654).analyze(text).to_dict()
