"""
Naive, delimiter-basierte Zerlegung von Texten in Sätze und Absätze.

- kein NLP
- keine Abhängigkeiten
- deterministisch

Die Fragmente werden NICHT getrimmt.
Getrimmt wird erst beim Zusammenbau der Summary.
"""

import re

SENTENCE_DELIMITERS = ("\n", ". ")
PARAGRAPH_DELIMITERS = ("\n\n", "\n\t\n")

_SENTENCE_SPLIT = re.compile("|".join(re.escape(d) for d in SENTENCE_DELIMITERS))
_PARAGRAPH_SPLIT = re.compile("|".join(re.escape(d) for d in PARAGRAPH_DELIMITERS))
_NON_WORD = re.compile(r"\W+")


def _split(pattern: re.Pattern, text: str) -> list[str]:
    # Leerer oder reiner Whitespace-Input ergibt keine Fragmente.
    if not text or text.isspace():
        return []
    return [part for part in pattern.split(text) if part]


def split_to_sentences(text: str) -> list[str]:
    """Trennt an "\\n" und ". " und verwirft leere Fragmente."""
    return _split(_SENTENCE_SPLIT, text)


def split_to_paragraphs(text: str) -> list[str]:
    """Trennt an "\\n\\n" und "\\n\\t\\n" und verwirft leere Fragmente."""
    return _split(_PARAGRAPH_SPLIT, text)


def canonicalize_sentence(sentence: str) -> str:
    """
    Entfernt alle Nicht-Wort-Zeichen (Regex \\W+) aus einem Satz.

    Das Ergebnis dient nur als Key in der Rank-Tabelle. Keine Kleinschreibung,
    keine Diakritika-Normalisierung.
    """
    return _NON_WORD.sub("", sentence)
