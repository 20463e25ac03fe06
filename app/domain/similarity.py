# app/domain/similarity.py
import re
from typing import List, Mapping

from app.domain.catalog import SIMILARITY_TABLE

_TOKEN_SPLIT = re.compile(r"[\s&-]+")

PARTIAL_WORD_SIMILARITY = 0.6


def _related(text: str, related: Mapping[str, float]) -> float:
    for term, similarity in related.items():
        if term in text:
            return similarity
    return 0.0


def _tokens(text: str) -> List[str]:
    return [t for t in _TOKEN_SPLIT.split(text) if t]


def semantic_similarity(a: str, b: str, table: Mapping[str, Mapping[str, float]] = SIMILARITY_TABLE) -> float:
    """
    Similarity in [0, 1] between two normalized skill strings.

    Anchors are scanned in table order and the first hit wins:
    `a` holds the anchor and `b` a related term, or the other way round.
    Without an anchor hit, any pair of long (>3 chars) word tokens where one
    contains the other scores PARTIAL_WORD_SIMILARITY.
    """
    for anchor, related in table.items():
        if anchor in a:
            hit = _related(b, related)
            if hit:
                return hit
        if anchor in b:
            hit = _related(a, related)
            if hit:
                return hit

    for w1 in _tokens(a):
        if len(w1) <= 3:
            continue
        for w2 in _tokens(b):
            if len(w2) > 3 and (w1 in w2 or w2 in w1):
                return PARTIAL_WORD_SIMILARITY
    return 0.0
