import pytest
from fastapi.testclient import TestClient

from app.adapters.recommendation_log import InMemoryRecommendationLog, SqlRecommendationLog
from app.api.v1.deps import get_recommend, get_recommendation_log
from app.api.v1.routers import recommend as recommend_router
from app.config import settings
from app.core.observability import REGISTRY
from app.db.core import get_engine
from app.main import app

client = TestClient(app)

SEWING = {
    "skills": ["Sewing"],
    "experience": "expert",
    "location": "urban",
    "education": "graduate",
    "businessType": "goods",
    "workEnvironment": "solo",
}


@pytest.fixture
def sink():
    log = InMemoryRecommendationLog()
    app.dependency_overrides[get_recommendation_log] = lambda: log
    yield log
    app.dependency_overrides.clear()


def test_recommend_default(sink):
    response = client.post("/api/v1/recommend", json=SEWING)
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["algorithm"]["model"] == "Rule-based Algorithm"
    assert len(body["recommendations"]) == 1
    rec = body["recommendations"][0]
    assert rec["name"] == "Tailoring & Sewing Services"
    assert rec["confidenceScore"] == 98
    assert len(rec["mentors"]) == 3
    assert len(sink) == 1
    assert sink.snapshot()[0].algorithm == "default"


def test_recommend_ml(sink):
    response = client.post("/api/v1/recommend?algorithm=ml", json=SEWING)
    assert response.status_code == 200
    body = response.json()
    assert body["algorithm"]["model"] == "Machine Learning Model"
    assert body["algorithm"]["accuracy"] == "85-92%"
    rec = body["recommendations"][0]
    assert rec["mlScore"] == pytest.approx(1.1)
    assert rec["algorithmInfo"]["model"] == "Neural Network"


def test_empty_business_type_is_open(sink):
    payload = dict(SEWING, skills=["technology"], businessType="")
    response = client.post("/api/v1/recommend", json=payload)
    assert response.status_code == 200
    assert response.json()["recommendations"][0]["businessType"] == "both"


def test_no_relevant_match_is_success_with_empty_list(sink):
    payload = dict(SEWING, skills=["sewing", "gardening", "plumbing", "driving", "singing"], businessType="")
    response = client.post("/api/v1/recommend", json=payload)
    assert response.status_code == 200
    assert response.json()["recommendations"] == []


@pytest.mark.parametrize("payload", [
    {k: v for k, v in SEWING.items() if k != "skills"},
    dict(SEWING, skills=[]),
    dict(SEWING, skills=["  "]),
    dict(SEWING, businessType="retail"),
    dict(SEWING, workEnvironment="remote"),
    {k: v for k, v in SEWING.items() if k != "experience"},
])
def test_invalid_input_is_400(sink, payload):
    response = client.post("/api/v1/recommend", json=payload)
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Invalid input data"
    assert body["details"]
    assert len(sink) == 0


def test_internal_failure_is_500(sink):
    def broken(*args, **kwargs):
        raise RuntimeError("boom")

    app.dependency_overrides[get_recommend] = lambda: broken
    response = client.post("/api/v1/recommend", json=SEWING)
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to generate recommendations"}
    assert len(sink) == 0


def test_health_and_metrics(sink):
    assert client.get("/health").json() == {"ok": True}
    client.post("/api/v1/recommend", json=SEWING)
    metrics = client.get("/metrics")
    assert metrics.status_code == 200
    assert "recommendations_total" in metrics.text


@pytest.fixture
def fake_cache(monkeypatch):
    store = {}
    monkeypatch.setattr(recommend_router, "cache_get", lambda key: store.get(key))
    monkeypatch.setattr(
        recommend_router, "cache_set",
        lambda key, value, ttl_seconds=60: store.__setitem__(key, value),
    )
    return store


def test_cache_hit_still_logs_and_counts(sink, fake_cache):
    before = REGISTRY.get_sample_value(
        "recommendations_total", {"algorithm": "default", "outcome": "matched"}
    ) or 0.0

    first = client.post("/api/v1/recommend", json=SEWING)
    second = client.post("/api/v1/recommend", json=SEWING)

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.json() == first.json()
    assert len(fake_cache) == 1
    assert len(sink) == 2
    after = REGISTRY.get_sample_value(
        "recommendations_total", {"algorithm": "default", "outcome": "matched"}
    )
    assert after == before + 2


def test_database_url_selects_sql_log(monkeypatch):
    monkeypatch.setattr(settings, "database_url", "sqlite://")
    get_engine.cache_clear()
    get_recommendation_log.cache_clear()
    try:
        assert isinstance(get_recommendation_log(), SqlRecommendationLog)
    finally:
        monkeypatch.undo()
        get_engine.cache_clear()
        get_recommendation_log.cache_clear()
    assert isinstance(get_recommendation_log(), InMemoryRecommendationLog)
