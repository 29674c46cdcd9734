"""
Fehlertypen der Satz-Ranking- und Summary-Logik.

Degenerierte Eingaben (leere Texte, einzelne Sätze) sind keine Fehler.
Fehler entstehen nur, wenn eine strikte Policy explizit gewählt wurde.
"""


class SummaryError(Exception):
    """Basisklasse für alle Fehler beim Zusammenfassen."""


class MissingSentenceKeyError(SummaryError, KeyError):
    """
    Ein Satz eines Absatzes hat keinen Eintrag in der Rank-Tabelle.

    Tritt nur auf, wenn Absatz und Rank-Tabelle aus unterschiedlichen Texten
    stammen und missing_key_policy="error" gesetzt ist.
    """

    def __init__(self, sentence: str, key: str):
        self.sentence = sentence
        self.key = key
        super().__init__(sentence, key)

    def __str__(self) -> str:
        return f"Sentence not found in rank table: {self.sentence!r} (key: {self.key!r})"


class DuplicateSentenceKeyError(SummaryError):
    """Zwei Sätze ergeben denselben kanonischen Key (collision_policy="error")."""

    def __init__(self, sentence: str, key: str):
        self.sentence = sentence
        self.key = key
        super().__init__(f"Duplicate sentence key {key!r} for sentence {sentence!r}")
