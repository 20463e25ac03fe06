# app/domain/services/enrichment.py
"""
Enrichment Assembler: merges a ranked candidate with static content.

Only key lookups and placeholder substitution happen here; none of it feeds
back into scoring. Every call returns freshly built dicts, so callers may
mutate the payload without touching the shared catalogs.
"""
from typing import Any, Dict, List

from app.content import catalogs
from app.domain.types import AlgorithmHint, ScoredCandidate


def _fill(value: Any, subs: Dict[str, str]) -> Any:
    if isinstance(value, str):
        for key, repl in subs.items():
            value = value.replace("{" + key + "}", repl)
        return value
    if isinstance(value, dict):
        return {k: _fill(v, subs) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_fill(v, subs) for v in value]
    return value


def get_business_resources(business_id: str) -> List[Dict[str, str]]:
    found = catalogs.RESOURCES.get(business_id, catalogs.GENERAL_RESOURCES)
    return [dict(r) for r in found]


def algorithm_info(algorithm: AlgorithmHint, *, per_item: bool = False) -> Dict[str, Any]:
    """
    Model metadata reported alongside results. Informational only.
    The per-recommendation block names the ml model "Neural Network"; the
    response-level block calls it "Machine Learning Model".
    """
    ml = algorithm is AlgorithmHint.ML
    if ml:
        model = "Neural Network" if per_item else "Machine Learning Model"
    else:
        model = "Rule-based Algorithm"
    return {
        "model": model,
        "features": list(catalogs.ALGORITHM_FEATURES),
        "trainingData": catalogs.TRAINING_DATA,
        "accuracy": "85-92%" if ml else "75-85%",
    }


def enrich(candidate: ScoredCandidate, algorithm: AlgorithmHint = AlgorithmHint.DEFAULT) -> Dict[str, Any]:
    subs = {
        "id": candidate.id,
        "name": candidate.name,
        "name_lower": candidate.name.lower(),
        "type": candidate.type.value,
    }
    return {
        "name": candidate.name,
        "id": candidate.id,
        "description": candidate.description,
        "businessType": candidate.type.value,
        "confidenceScore": candidate.confidence_score,
        "mlScore": candidate.ml_score,
        "resources": get_business_resources(candidate.id),
        "financials": _fill(catalogs.FINANCIAL_PLAN, subs),
        "caseStudies": _fill(catalogs.CASE_STUDIES, subs),
        "workforcePlan": _fill(catalogs.WORKFORCE_PLAN, subs),
        "mentors": _fill(catalogs.MENTORS, subs),
        "dataSources": _fill(catalogs.DATA_SOURCES, subs),
        "guidance": _fill(catalogs.GUIDANCE, subs),
        "algorithmInfo": algorithm_info(algorithm, per_item=True),
    }
