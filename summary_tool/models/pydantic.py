from typing import Dict

from pydantic import BaseModel, Field


class SummaryRequest(BaseModel):
    """
    Eingabe für eine Zusammenfassung: Titel + Fließtext.
    """
    title: str
    content: str


class SummaryResult(BaseModel):
    """
    Ergebnis einer Zusammenfassung.

    rank_table enthält den kanonischen Satz-Key und den aggregierten
    Intersection-Score über den gesamten Text.
    """
    title: str
    summary: str
    rank_table: Dict[str, int] = Field(default_factory=dict)
    original_length: int
    summary_length: int
    # 100 - 100 * summary_length / original_length (Integer-Division)
    summary_ratio: int
