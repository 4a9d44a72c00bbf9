"""Phonetic codes for spoken-word matching.

``soundex`` is the classic four-character American Soundex.  ``metaphone``
is a deliberately simplified, single-code variant driven by a small rule
table; it is *not* Double Metaphone (no alternate code, no initial
``X`` -> ``S``, no ``WH`` handling), so canonical Double Metaphone test
vectors do not apply to it.
"""

from __future__ import annotations

import re

_NON_LETTERS = re.compile(r"[^A-Z]")

_SOUNDEX_CLASSES: dict[str, str] = {
    **dict.fromkeys("BFPV", "1"),
    **dict.fromkeys("CGJKQSXZ", "2"),
    **dict.fromkeys("DT", "3"),
    "L": "4",
    **dict.fromkeys("MN", "5"),
    "R": "6",
}

_VOWELS = frozenset("AEIOU")
_SOFTENERS = frozenset("IEY")
_SILENT_INITIALS = ("KN", "GN", "PN", "AE", "WR")
_DOUBLED = frozenset("BFLMNR")

METAPHONE_MAX_LEN = 4


def _letters(word: object) -> str:
    if not isinstance(word, str) or not word:
        return ""
    return _NON_LETTERS.sub("", word.upper())


def soundex(word: str) -> str:
    """Four-character Soundex code, or ``""`` when *word* has no A-Z letters.

    Adjacent letters of the same class collapse; vowels and ``H``/``W``/``Y``
    carry no class and do not separate equal neighbours.
    """
    letters = _letters(word)
    if not letters:
        return ""

    code = letters[0]
    prev = _SOUNDEX_CLASSES.get(letters[0], "")
    for ch in letters[1:]:
        if len(code) >= 4:
            break
        cls = _SOUNDEX_CLASSES.get(ch, "")
        if cls and cls != prev:
            code += cls
        if cls:
            prev = cls
    return (code + "000")[:4]


def metaphone(word: str) -> str:
    """Simplified single-code Metaphone.

    Building stops once four symbols are emitted; ``X`` -> ``KS`` may push the
    result to five.
    """
    w = _letters(word)
    if not w:
        return ""
    if w.startswith(_SILENT_INITIALS):
        w = w[1:]

    out: list[str] = []
    size = 0
    i = 0
    n = len(w)
    while i < n and size < METAPHONE_MAX_LEN:
        ch = w[i]
        nxt = w[i + 1] if i + 1 < n else ""
        after = w[i + 2] if i + 2 < n else ""
        prev = w[i - 1] if i > 0 else ""
        emit = ""

        if ch in _VOWELS:
            if i == 0:
                emit = ch
        elif ch in _DOUBLED:
            emit = ch
            if nxt == ch:
                i += 1
        elif ch == "C":
            if nxt == "H":
                emit = "X"
                i += 1
            elif nxt in _SOFTENERS:
                emit = "S"
            else:
                emit = "K"
        elif ch == "D":
            if nxt == "G" and after in _SOFTENERS:
                emit = "J"
                i += 2
            else:
                emit = "T"
        elif ch == "G":
            if nxt == "H" and after not in _VOWELS:
                pass  # silent GH
            elif nxt in _SOFTENERS:
                emit = "J"
            else:
                emit = "K"
        elif ch == "H":
            if prev in _VOWELS and nxt in _VOWELS:
                emit = "H"
        elif ch == "J":
            emit = "J"
        elif ch == "K":
            if prev != "C":
                emit = "K"
        elif ch == "P":
            if nxt == "H":
                emit = "F"
                i += 1
            else:
                emit = "P"
        elif ch == "Q":
            emit = "K"
        elif ch == "S":
            if nxt == "H":
                emit = "X"
                i += 1
            else:
                emit = "S"
        elif ch == "T":
            if nxt == "H":
                emit = "0"
                i += 1
            elif nxt in _SOFTENERS:
                emit = "S"
            else:
                emit = "T"
        elif ch == "V":
            emit = "F"
        elif ch in ("W", "Y"):
            if nxt in _VOWELS:
                emit = ch
        elif ch == "X":
            emit = "KS"
        elif ch == "Z":
            emit = "S"

        if emit:
            out.append(emit)
            size += len(emit)
        i += 1

    return "".join(out)


def soundex_similarity(a: str, b: str) -> float:
    return 1.0 if soundex(a) == soundex(b) else 0.0


def metaphone_similarity(a: str, b: str) -> float:
    return 1.0 if metaphone(a) == metaphone(b) else 0.0
