"""
Zusammenbau der Summary: pro Absatz der Satz mit dem höchsten Rank.

Die Rank-Tabelle muss aus demselben Text stammen wie die Absätze. Fehlt ein
Satz trotzdem in der Tabelle, entscheidet missing_key_policy:
- "skip": der Satz ist kein Kandidat (Default)
- "error": MissingSentenceKeyError mit dem betroffenen Satz
"""

from typing import Literal, Mapping, Optional

from summary_tool.services.summarization.errors import MissingSentenceKeyError
from summary_tool.services.summarization.segmenter import (
    canonicalize_sentence,
    split_to_paragraphs,
    split_to_sentences,
)

MissingKeyPolicy = Literal["skip", "error"]
MISSING_KEY_POLICIES = ("skip", "error")


def _check_policy(missing_key_policy: str) -> None:
    if missing_key_policy not in MISSING_KEY_POLICIES:
        raise ValueError(f"Unknown missing key policy: {missing_key_policy!r}")


def best_sentence(
    paragraph: str,
    rank_table: Mapping[str, int],
    missing_key_policy: MissingKeyPolicy = "skip",
) -> Optional[str]:
    """
    Liefert den Satz des Absatzes mit dem strikt höchsten Score (> 0).

    Absätze mit weniger als zwei Sätzen werden ignoriert (None). Bei Gleichstand
    gewinnt der erste Satz. Zurückgegeben wird der Originaltext, ungetrimmt.
    """
    _check_policy(missing_key_policy)

    sentences = split_to_sentences(paragraph)
    if len(sentences) < 2:
        return None

    best: Optional[str] = None
    max_value = 0
    for sentence in sentences:
        key = canonicalize_sentence(sentence)
        if not key.strip():
            continue

        if key not in rank_table:
            if missing_key_policy == "error":
                raise MissingSentenceKeyError(sentence, key)
            continue

        if rank_table[key] > max_value:
            max_value = rank_table[key]
            best = sentence

    return best


def build_summary(
    title: str,
    content: str,
    rank_table: Mapping[str, int],
    missing_key_policy: MissingKeyPolicy = "skip",
) -> str:
    """
    Titel, Leerzeile, danach je qualifizierendem Absatz eine Zeile.

    Jede Zeile wird mit "\\n" abgeschlossen, auch die letzte.
    """
    _check_policy(missing_key_policy)

    lines = [title.strip(), ""]
    for paragraph in split_to_paragraphs(content):
        sentence = best_sentence(paragraph, rank_table, missing_key_policy)
        if sentence is not None and sentence.strip():
            lines.append(sentence.strip())

    return "".join(f"{line}\n" for line in lines)
