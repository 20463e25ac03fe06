import pytest

from app.domain.services.generator import generate
from app.domain.services.scoring import (
    confidence,
    experience_score,
    location_score,
    match_skills,
    score,
    type_fit,
)
from app.domain.types import AlgorithmHint, BusinessTemplate, BusinessType, UserProfile


def _sewing_profile():
    return UserProfile.build(["sewing"], experience="expert", location="urban", business_type="goods")


def test_exact_match_scores_full_credit():
    m = match_skills(["sewing"], ["sewing", "fashion design", "alterations"])
    assert m.score == 1.0
    assert m.exact == 1
    # 0.85 earns credit but is not counted as a semantic match
    assert m.semantic == 0


def test_contains_match():
    assert match_skills(["baking"], ["home baking"]).score == 0.9


def test_semantic_match_counts():
    m = match_skills(["cooking"], ["culinary", "food preparation"])
    assert m.score == 0.95
    assert m.semantic == 2
    assert m.exact == 0


def test_skill_score_is_averaged_over_user_skills():
    assert match_skills(["sewing", "gardening"], ["sewing"]).score == 0.5


def test_exact_matches_counted_per_pair():
    assert match_skills(["sewing", "cooking"], ["sewing", "cooking", "x"]).exact == 2


def test_empty_skills_do_not_divide_by_zero():
    assert match_skills([], ["sewing"]).score == 0.0


def test_type_fit():
    assert type_fit(BusinessType.GOODS, BusinessType.GOODS) == 0.25
    assert type_fit(BusinessType.BOTH, BusinessType.BOTH) == 0.25
    assert type_fit(BusinessType.BOTH, BusinessType.GOODS) == 0.15
    assert type_fit(BusinessType.SERVICE, BusinessType.BOTH) == 0.15
    assert type_fit(BusinessType.SERVICE, BusinessType.GOODS) == 0.0


def test_unrecognized_experience_and_location_use_defaults():
    assert experience_score("guru") == 0.75
    assert experience_score("Expert") == 1.0
    assert location_score("moon") == 0.9
    assert location_score("semi-urban") == 0.9
    assert location_score("rural") == 0.8


def test_confidence_bonuses_and_clamp():
    assert confidence(0.0, 0, 0) == 65
    assert confidence(0.5, 1, 0) == 65
    assert confidence(0.7, 1, 0) == 80
    assert confidence(0.7, 2, 2) == 93
    assert confidence(0.9, 0, 0) == 90
    assert confidence(1.0, 3, 3) == 98


def test_sewing_expert_urban_caps_at_98():
    template = generate(["sewing"], BusinessType.GOODS)[0]
    s = score(template, _sewing_profile())
    assert s.skill_score == 1.0
    assert s.exact_match_count == 1
    assert s.raw_score == pytest.approx(1.0)
    assert s.confidence_score == 98


def test_ml_hint_boosts_raw_score_only():
    template = generate(["sewing"], BusinessType.GOODS)[0]
    default = score(template, _sewing_profile(), AlgorithmHint.DEFAULT)
    ml = score(template, _sewing_profile(), AlgorithmHint.ML)
    assert ml.raw_score == pytest.approx(default.raw_score * 1.1)
    assert ml.ml_score == ml.raw_score
    assert ml.confidence_score == default.confidence_score


def test_no_match_still_reports_minimum_confidence():
    template = BusinessTemplate(
        id="x", name="X", type=BusinessType.SERVICE,
        skill_keywords=("plumbing",), description="",
    )
    profile = UserProfile.build(["sewing"], experience="none", location="rural", business_type="goods")
    s = score(template, profile)
    assert s.skill_score == 0.0
    assert s.raw_score == pytest.approx(0.06 + 0.04)
    assert s.confidence_score == 65
