"""
Rank-Tabelle: kanonischer Satz-Key -> Summe der Intersection-Scores.

Jeder Satz wird gegen jeden anderen Satz des Textes verglichen (O(n²)
Vergleiche, jeder Vergleich linear in der Satzlänge). Der Vergleich eines
Satzes mit sich selbst wird übersprungen.
"""

import logging
from typing import Literal

from summary_tool.services.summarization.errors import DuplicateSentenceKeyError
from summary_tool.services.summarization.segmenter import (
    canonicalize_sentence,
    split_to_sentences,
)
from summary_tool.services.summarization.similarity import intersection_score

logger = logging.getLogger(__name__)

CollisionPolicy = Literal["overwrite", "sum", "error"]
COLLISION_POLICIES = ("overwrite", "sum", "error")


def rank_sentences(
    content: str,
    collision_policy: CollisionPolicy = "overwrite",
) -> dict[str, int]:
    """
    Baut die Rank-Tabelle für einen kompletten Text.

    Kollidieren zwei Sätze auf denselben kanonischen Key, entscheidet
    collision_policy:
    - "overwrite": der zuletzt segmentierte Satz gewinnt (Default)
    - "sum": die Scores werden addiert
    - "error": DuplicateSentenceKeyError
    """
    if collision_policy not in COLLISION_POLICIES:
        raise ValueError(f"Unknown collision policy: {collision_policy!r}")

    sentences = split_to_sentences(content)
    n = len(sentences)

    # Paarweise Scores, Diagonale bleibt 0
    values = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            if i == j:
                continue
            values[i][j] = intersection_score(sentences[i], sentences[j])

    ranks: dict[str, int] = {}
    collisions = 0
    for i, sentence in enumerate(sentences):
        score = sum(values[i][j] for j in range(n) if j != i)
        key = canonicalize_sentence(sentence)

        if key in ranks:
            collisions += 1
            if collision_policy == "error":
                raise DuplicateSentenceKeyError(sentence, key)
            if collision_policy == "sum":
                score += ranks[key]

        ranks[key] = score

    logger.debug(
        "rank_sentences: %d sentences, %d keys, %d collisions (policy=%s)",
        n,
        len(ranks),
        collisions,
        collision_policy,
    )
    return ranks
