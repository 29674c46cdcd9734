"""
Lexikalische Überlappung zweier Sätze.
"""


def _tokens(sentence: str) -> set[str]:
    # Ein leerer Satz hat keine Tokens; "a  b" dagegen enthält das leere Token.
    if not sentence:
        return set()
    return set(sentence.split(" "))


def intersection_score(sentence_a: str, sentence_b: str) -> int:
    """
    Anteil gemeinsamer Tokens in Prozent, normalisiert auf die mittlere Set-Größe.

    Tokens entstehen durch Split an einzelnen Leerzeichen; doppelte Leerzeichen
    erzeugen leere Tokens, die mitgezählt werden. Gerechnet wird durchgehend
    mit Integer-Division, der Wert wird nicht auf 100 begrenzt.
    """
    tokens_a = _tokens(sentence_a)
    tokens_b = _tokens(sentence_b)

    average_size = (len(tokens_a) + len(tokens_b)) // 2
    if average_size == 0:
        return 0

    overlap = len(tokens_a & tokens_b)
    return overlap * 100 // average_size
