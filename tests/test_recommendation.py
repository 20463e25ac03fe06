import pytest

from app.domain.services.recommendation import rank_candidates, recommend
from app.domain.types import AlgorithmHint, BusinessType, UserProfile

PROFILES = [
    UserProfile.build(["sewing"], "expert", "urban", "goods"),
    UserProfile.build(["quantum computing"], "beginner", "rural", ""),
    UserProfile.build(["sewing", "cooking"], "none", "semi-urban", "service"),
    UserProfile.build(["sewing", "cooking", "baking", "teaching"], "intermediate", "urban", ""),
    UserProfile.build(["Digital Marketing", "social media", "writing"], "guru", "mars", "service"),
]


def test_sewing_expert_gets_tailoring_at_98():
    out = rank_candidates(PROFILES[0])
    assert [c.name for c in out] == ["Tailoring & Sewing Services"]
    assert out[0].skill_score == 1.0
    assert out[0].confidence_score == 98


def test_unknown_skill_is_recommended_via_synthesis():
    out = rank_candidates(PROFILES[1])
    assert [c.name for c in out] == ["Quantum Computing Business"]
    assert out[0].skill_score == 1.0
    assert 65 <= out[0].confidence_score <= 98


def test_service_request_overrides_goods_skills():
    out = rank_candidates(PROFILES[2])
    assert sorted(c.name for c in out) == ["Cooking Business", "Sewing Business"]
    assert all(c.type is BusinessType.SERVICE for c in out)


def test_weak_overlap_yields_empty_result():
    profile = UserProfile.build(["sewing", "gardening", "plumbing", "driving", "singing"], "expert", "urban", "")
    assert rank_candidates(profile) == []


@pytest.mark.parametrize("profile", PROFILES)
def test_result_invariants(profile):
    out = rank_candidates(profile)
    assert len(out) <= 3
    assert all(c.skill_score >= 0.25 for c in out)
    assert all(65 <= c.confidence_score <= 98 for c in out)
    scores = [c.raw_score for c in out]
    assert scores == sorted(scores, reverse=True)


@pytest.mark.parametrize("profile", PROFILES)
def test_ml_never_lowers_raw_score(profile):
    default = {c.id: c.raw_score for c in rank_candidates(profile, AlgorithmHint.DEFAULT)}
    ml = {c.id: c.raw_score for c in rank_candidates(profile, AlgorithmHint.ML)}
    for cid, raw in default.items():
        assert ml[cid] >= raw


@pytest.mark.parametrize("profile", PROFILES)
def test_idempotent(profile):
    assert rank_candidates(profile, "ml") == rank_candidates(profile, "ml")
    assert recommend(profile) == recommend(profile)


def test_top_three_of_four_catalog_hits():
    out = rank_candidates(PROFILES[3])
    assert len(out) == 3


def test_unknown_algorithm_string_behaves_as_default():
    assert rank_candidates(PROFILES[0], "neural") == rank_candidates(PROFILES[0], "default")


def test_recommend_payload_shape():
    payload = recommend(PROFILES[0], "ml")
    assert payload["algorithm"]["model"] == "Machine Learning Model"
    rec = payload["recommendations"][0]
    assert rec["id"] == "sewing"
    assert rec["businessType"] == "goods"
    assert rec["confidenceScore"] == 98
    assert rec["mlScore"] == pytest.approx(1.1)
    assert rec["algorithmInfo"]["model"] == "Neural Network"
