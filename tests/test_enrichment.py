from app.domain.services.enrichment import enrich, get_business_resources
from app.domain.services.recommendation import rank_candidates
from app.domain.types import AlgorithmHint, UserProfile


def _tailoring():
    return rank_candidates(UserProfile.build(["sewing"], "expert", "urban", "goods"))[0]


def test_resources_by_id_with_general_fallback():
    assert get_business_resources("tutoring")[0]["title"] == "Online Teaching Methodology"
    general = get_business_resources("sewing")
    assert [r["title"] for r in general] == ["General Business Setup Guide", "Small Business Management"]


def test_mentors_are_personalized():
    rec = enrich(_tailoring())
    assert [m["id"] for m in rec["mentors"]] == ["mentor_sewing_001", "mentor_sewing_002", "mentor_sewing_003"]
    assert all(m["businessType"] == "goods" for m in rec["mentors"])
    assert "Tailoring & Sewing Services" in rec["mentors"][0]["specialization"]


def test_text_placeholders_are_filled():
    rec = enrich(_tailoring())
    assert "tailoring & sewing services" in rec["caseStudies"][0]["story"]
    assert "{" not in rec["guidance"]["goalBased"]["primaryGoal"]
    assert len(rec["dataSources"]) == 4
    assert rec["workforcePlan"]["initialTeamSize"] == 1


def test_payload_is_a_fresh_copy():
    first = enrich(_tailoring())
    first["financials"]["toolsNeeded"].append("Laser cutter")
    first["resources"][0]["title"] = "changed"
    second = enrich(_tailoring())
    assert "Laser cutter" not in second["financials"]["toolsNeeded"]
    assert second["resources"][0]["title"] == "General Business Setup Guide"


def test_algorithm_info_follows_hint():
    assert enrich(_tailoring(), AlgorithmHint.DEFAULT)["algorithmInfo"]["accuracy"] == "75-85%"
    assert enrich(_tailoring(), AlgorithmHint.ML)["algorithmInfo"]["accuracy"] == "85-92%"
