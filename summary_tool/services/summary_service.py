import logging

from summary_tool.core.config import settings
from summary_tool.models.pydantic import SummaryRequest, SummaryResult
from summary_tool.services.summarization import build_summary, rank_sentences
from summary_tool.services.summarization.ranking import CollisionPolicy
from summary_tool.services.summarization.summarizer import MissingKeyPolicy

logger = logging.getLogger(__name__)


def summary_ratio(original_length: int, summary_length: int) -> int:
    """Prozentuale Kürzung, Integer-Division wie im Ranking."""
    if original_length == 0:
        return 0
    return 100 - (100 * summary_length // original_length)


class SummaryService:
    def __init__(
        self,
        collision_policy: CollisionPolicy | None = None,
        missing_key_policy: MissingKeyPolicy | None = None,
    ) -> None:
        # Ohne explizite Policies gelten die Werte aus der Config (.env / ENV)
        self.collision_policy = collision_policy or settings.collision_policy
        self.missing_key_policy = missing_key_policy or settings.missing_key_policy

    def summarize(self, req: SummaryRequest) -> SummaryResult:
        # 1. Rank-Tabelle über den gesamten Text
        rank_table = rank_sentences(req.content, collision_policy=self.collision_policy)

        # 2. Summary aus den Absätzen
        summary = build_summary(
            req.title,
            req.content,
            rank_table,
            missing_key_policy=self.missing_key_policy,
        )

        # 3. Längenstatistik
        original_length = len(req.title) + len(req.content)
        summary_length = len(summary)
        ratio = summary_ratio(original_length, summary_length)

        logger.info(
            "Summarized %r: %d ranked sentences, %d -> %d chars (ratio %d%%)",
            req.title.strip(),
            len(rank_table),
            original_length,
            summary_length,
            ratio,
        )

        return SummaryResult(
            title=req.title,
            summary=summary,
            rank_table=rank_table,
            original_length=original_length,
            summary_length=summary_length,
            summary_ratio=ratio,
        )
