"""
Naive Text-Zusammenfassung über Satz-Intersection.

Ablauf:
- Text in Sätze zerlegen und jeden Satz gegen jeden anderen scoren
- Scores pro Satz zur Rank-Tabelle aufsummieren
- pro Absatz den bestbewerteten Satz in die Summary übernehmen
"""

from summary_tool.services.summarization.errors import (
    DuplicateSentenceKeyError,
    MissingSentenceKeyError,
    SummaryError,
)
from summary_tool.services.summarization.ranking import rank_sentences
from summary_tool.services.summarization.segmenter import (
    canonicalize_sentence,
    split_to_paragraphs,
    split_to_sentences,
)
from summary_tool.services.summarization.similarity import intersection_score
from summary_tool.services.summarization.summarizer import best_sentence, build_summary

__all__ = [
    "DuplicateSentenceKeyError",
    "MissingSentenceKeyError",
    "SummaryError",
    "best_sentence",
    "build_summary",
    "canonicalize_sentence",
    "intersection_score",
    "rank_sentences",
    "split_to_paragraphs",
    "split_to_sentences",
]
