# app/domain/services/generator.py
"""
Business Generator: turns a user's skills into candidate business templates.

Generation is an ordered list of strategies. Each strategy sees the skills and
the requested business type and returns templates; the first non-empty result
wins:

1. catalog     - exact skill keys in TEMPLATE_CATALOG, filtered by type
2. synthesized - one generic "<Skill> Business" per unmatched skill
3. last resort - a single template named after all skills together

The last strategy never returns an empty list, so callers always get at
least one candidate.
"""
from __future__ import annotations

import re
from typing import Callable, List, Mapping, Sequence, Set, Tuple

from app.domain.catalog import (
    GOODS_KEYWORDS,
    SERVICE_KEYWORDS,
    SYNTHESIZED_COMPANION_SKILLS,
    TEMPLATE_CATALOG,
    CatalogEntry,
)
from app.domain.types import BusinessTemplate, BusinessType, normalize_skill
from app.core.logging import get_logger

log = get_logger("generator")

Strategy = Callable[[Sequence[str], BusinessType], List[BusinessTemplate]]

LAST_RESORT_ID = "custom_skill_business"


def template_id(skill: str) -> str:
    """'art & craft' -> 'art_and_craft'"""
    return re.sub(r"\s+", "_", skill).replace("&", "and")


def infer_business_type(skill: str, requested: BusinessType) -> BusinessType:
    # An explicit preference always wins over the keyword heuristics
    if requested is not BusinessType.BOTH:
        return requested
    is_goods = any(k in skill for k in GOODS_KEYWORDS)
    is_service = any(k in skill for k in SERVICE_KEYWORDS)
    if is_goods and not is_service:
        return BusinessType.GOODS
    if is_service and not is_goods:
        return BusinessType.SERVICE
    return BusinessType.BOTH


def from_catalog(
    skills: Sequence[str],
    requested: BusinessType,
    catalog: Mapping[str, CatalogEntry] = TEMPLATE_CATALOG,
) -> List[BusinessTemplate]:
    out: List[BusinessTemplate] = []
    used: Set[str] = set()
    for skill in skills:
        entry = catalog.get(skill)
        if entry is None or entry.name in used:
            continue
        if not requested.accepts(entry.type):
            continue
        out.append(BusinessTemplate(
            id=template_id(skill),
            name=entry.name,
            type=entry.type,
            skill_keywords=entry.skills,
            description=(
                f"A {entry.name.lower()} business leveraging your {skill} skills "
                f"along with complementary abilities."
            ),
        ))
        used.add(entry.name)
    return out


def synthesize(skills: Sequence[str], requested: BusinessType) -> List[BusinessTemplate]:
    out: List[BusinessTemplate] = []
    seen: Set[str] = set()
    for skill in skills:
        if not skill or skill in seen:
            continue
        seen.add(skill)
        title = " ".join(w[:1].upper() + w[1:] for w in skill.split(" "))
        out.append(BusinessTemplate(
            id=template_id(skill),
            name=f"{title} Business",
            type=infer_business_type(skill, requested),
            skill_keywords=(skill,) + SYNTHESIZED_COMPANION_SKILLS,
            description=f"A professional {skill} business offering specialized services and products.",
        ))
    return out


def last_resort(skills: Sequence[str], requested: BusinessType) -> List[BusinessTemplate]:
    kind = BusinessType.SERVICE if requested is BusinessType.BOTH else requested
    return [BusinessTemplate(
        id=LAST_RESORT_ID,
        name=f"{' & '.join(skills)} Business",
        type=kind,
        skill_keywords=tuple(skills),
        description=f"A professional business leveraging your skills in {', '.join(skills)}.",
    )]


STRATEGIES: Tuple[Tuple[str, Strategy], ...] = (
    ("catalog", from_catalog),
    ("synthesized", synthesize),
    ("last_resort", last_resort),
)


def generate(
    skills: Sequence[str],
    business_type: BusinessType,
    strategies: Sequence[Tuple[str, Strategy]] = STRATEGIES,
) -> List[BusinessTemplate]:
    normalized = [normalize_skill(s) for s in skills]
    for name, strategy in strategies:
        templates = strategy(normalized, business_type)
        if templates:
            log.debug("generator strategy=%s produced %d template(s)", name, len(templates))
            return templates
    # only reachable with a custom strategy list that lacks a terminal fallback
    return last_resort(normalized, business_type)
