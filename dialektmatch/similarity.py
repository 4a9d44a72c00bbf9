"""String similarity measures for matching noisy transcripts.

Every ``*_similarity`` function returns a float in ``[0, 1]``: ``1`` for equal
inputs (both empty counts as equal), ``0`` when exactly one side is empty or
not a string.  Nothing here raises on bad input.
"""

from __future__ import annotations

import math
import re
import unicodedata
from collections import Counter
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum

from dialektmatch.phonetic import metaphone_similarity, soundex_similarity


class Algorithm(str, Enum):
    LEVENSHTEIN = "levenshtein"
    DAMERAU = "damerau"
    JARO = "jaro"
    JARO_WINKLER = "jaro_winkler"
    COSINE = "cosine"
    JACCARD = "jaccard"
    JACCARD_NGRAM = "jaccard_ngram"
    SOUNDEX = "soundex"
    METAPHONE = "metaphone"
    COMBINED = "combined"

    @classmethod
    def parse(cls, value: Algorithm | str | None) -> Algorithm:
        """Accept enum members, values and camelCase names; default Jaro-Winkler."""
        if isinstance(value, Algorithm):
            return value
        if isinstance(value, str):
            key = re.sub(r"[\s_\-]", "", value).lower()
            for a in cls:
                if a.value.replace("_", "") == key:
                    return a
        return cls.JARO_WINKLER


DEFAULT_WEIGHTS: Mapping[str, float] = {
    "jaro_winkler": 0.4,
    "levenshtein": 0.2,
    "cosine": 0.2,
    "jaccard": 0.1,
    "soundex": 0.05,
    "metaphone": 0.05,
}


@dataclass(frozen=True)
class SearchOptions:
    threshold: float = 0.3
    limit: int = 10
    algorithm: Algorithm = Algorithm.JARO_WINKLER
    n: int = 2
    prefix_length: int = 4
    weights: Mapping[str, float] = field(default_factory=dict)
    include_matches: bool = False


@dataclass(frozen=True)
class MatchCandidate:
    item: str
    index: int
    score: float
    matches: tuple[int, ...] | None = None


def _text(s: object) -> str:
    return s if isinstance(s, str) else ""


# --- Edit distance ---


def levenshtein_distance(a: str, b: str) -> int:
    a, b = _text(a), _text(b)
    if not a or not b:
        return max(len(a), len(b))
    if a == b:
        return 0

    la, lb = len(a), len(b)
    d = [[0] * (lb + 1) for _ in range(la + 1)]
    for i in range(la + 1):
        d[i][0] = i
    for j in range(lb + 1):
        d[0][j] = j

    for i in range(1, la + 1):
        for j in range(1, lb + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            d[i][j] = min(
                d[i - 1][j] + 1,
                d[i][j - 1] + 1,
                d[i - 1][j - 1] + cost,
            )
    return d[la][lb]


def levenshtein_similarity(a: str, b: str) -> float:
    a, b = _text(a), _text(b)
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    return 1.0 - levenshtein_distance(a, b) / max(len(a), len(b))


def damerau_levenshtein_distance(a: str, b: str) -> int:
    """Edit distance with adjacent transpositions (unrestricted variant).

    Uses the ``(len(a)+2) x (len(b)+2)`` matrix whose outer row and column hold
    ``len(a)+len(b)`` so the transposition term never reads a real cell it
    should not.
    """
    a, b = _text(a), _text(b)
    if not a or not b:
        return max(len(a), len(b))
    if a == b:
        return 0

    la, lb = len(a), len(b)
    max_dist = la + lb
    h = [[0] * (lb + 2) for _ in range(la + 2)]
    h[0][0] = max_dist
    for i in range(la + 1):
        h[i + 1][0] = max_dist
        h[i + 1][1] = i
    for j in range(lb + 1):
        h[0][j + 1] = max_dist
        h[1][j + 1] = j

    last_row: dict[str, int] = {}
    for i in range(1, la + 1):
        db = 0
        for j in range(1, lb + 1):
            k = last_row.get(b[j - 1], 0)
            l = db
            if a[i - 1] == b[j - 1]:
                h[i + 1][j + 1] = h[i][j]
                db = j
            else:
                h[i + 1][j + 1] = min(
                    h[i][j] + 1,
                    h[i + 1][j] + 1,
                    h[i][j + 1] + 1,
                    h[k][l] + (i - k - 1) + 1 + (j - l - 1),
                )
        last_row[a[i - 1]] = i
    return h[la + 1][lb + 1]


def damerau_levenshtein_similarity(a: str, b: str) -> float:
    a, b = _text(a), _text(b)
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    return 1.0 - damerau_levenshtein_distance(a, b) / max(len(a), len(b))


# --- Alignment ---


def jaro_similarity(a: str, b: str) -> float:
    a, b = _text(a), _text(b)
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0

    la, lb = len(a), len(b)
    window = max(la, lb) // 2 - 1
    if window < 0:
        return 0.0

    a_hit = [False] * la
    b_hit = [False] * lb
    matches = 0
    for i in range(la):
        lo = max(0, i - window)
        hi = min(i + window + 1, lb)
        for j in range(lo, hi):
            if b_hit[j] or a[i] != b[j]:
                continue
            a_hit[i] = b_hit[j] = True
            matches += 1
            break

    if matches == 0:
        return 0.0

    transpositions = 0
    k = 0
    for i in range(la):
        if not a_hit[i]:
            continue
        while not b_hit[k]:
            k += 1
        if a[i] != b[k]:
            transpositions += 1
        k += 1

    m = float(matches)
    return (m / la + m / lb + (m - transpositions / 2) / m) / 3


def jaro_winkler(a: str, b: str, prefix_length: int = 4) -> float:
    """Jaro similarity plus a bonus for a shared prefix of up to *prefix_length*.

    No bonus is given below a Jaro score of 0.7.  The result is symmetric only
    because the prefix comparison is; the measure is not a metric.
    """
    jaro = jaro_similarity(a, b)
    if jaro < 0.7:
        return jaro

    a, b = _text(a), _text(b)
    prefix = 0
    for ca, cb in zip(a[: max(prefix_length, 0)], b):
        if ca != cb:
            break
        prefix += 1
    return jaro + 0.1 * prefix * (1 - jaro)


# --- Vector based ---


def ngrams(s: str, n: int = 2) -> Counter[str]:
    """Frequency of lower-cased character n-grams, padded with ``n-1`` spaces."""
    n = max(int(n), 1)
    pad = " " * (n - 1)
    padded = pad + _text(s).lower() + pad
    return Counter(padded[i : i + n] for i in range(len(padded) - n + 1))


def cosine_similarity(a: str, b: str, n: int = 2) -> float:
    a, b = _text(a), _text(b)
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0

    va, vb = ngrams(a, n), ngrams(b, n)
    dot = sum(va[g] * vb[g] for g in va.keys() & vb.keys())
    mag_a = math.sqrt(sum(c * c for c in va.values()))
    mag_b = math.sqrt(sum(c * c for c in vb.values()))
    if mag_a == 0 or mag_b == 0:
        return 0.0
    return min(dot / (mag_a * mag_b), 1.0)


def _jaccard(sa: set[str], sb: set[str]) -> float:
    union = sa | sb
    if not union:
        return 1.0
    return len(sa & sb) / len(union)


def jaccard_similarity(a: str, b: str) -> float:
    a, b = _text(a), _text(b)
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0
    return _jaccard(set(a.lower()), set(b.lower()))


def jaccard_ngram_similarity(a: str, b: str, n: int = 2) -> float:
    a, b = _text(a), _text(b)
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0
    return _jaccard(set(ngrams(a, n)), set(ngrams(b, n)))


# --- Combined ---


def combined_similarity(
    a: str,
    b: str,
    weights: Mapping[str, float] | None = None,
    *,
    n: int = 2,
    prefix_length: int = 4,
) -> float:
    """Weighted mean of several measures.

    *weights* is merged over ``DEFAULT_WEIGHTS``.  Measures whose weight is
    zero or negative are not computed at all and do not count towards the
    normalizing total.
    """
    w = {**DEFAULT_WEIGHTS, **(weights or {})}
    measures: list[tuple[str, Callable[[str, str], float]]] = [
        ("jaro_winkler", lambda x, y: jaro_winkler(x, y, prefix_length)),
        ("levenshtein", levenshtein_similarity),
        ("cosine", lambda x, y: cosine_similarity(x, y, n)),
        ("jaccard", jaccard_similarity),
        ("soundex", soundex_similarity),
        ("metaphone", metaphone_similarity),
    ]

    total = 0.0
    acc = 0.0
    for name, fn in measures:
        weight = float(w.get(name, 0.0) or 0.0)
        if weight <= 0:
            continue
        acc += weight * fn(a, b)
        total += weight
    return acc / total if total > 0 else 0.0


def scorer(options: SearchOptions | None = None) -> Callable[[str, str], float]:
    """Return the two-argument similarity function selected by *options*."""
    opts = options or SearchOptions()
    n = opts.n
    prefix_length = opts.prefix_length
    table: dict[Algorithm, Callable[[str, str], float]] = {
        Algorithm.LEVENSHTEIN: levenshtein_similarity,
        Algorithm.DAMERAU: damerau_levenshtein_similarity,
        Algorithm.JARO: jaro_similarity,
        Algorithm.JARO_WINKLER: lambda a, b: jaro_winkler(a, b, prefix_length),
        Algorithm.COSINE: lambda a, b: cosine_similarity(a, b, n),
        Algorithm.JACCARD: jaccard_similarity,
        Algorithm.JACCARD_NGRAM: lambda a, b: jaccard_ngram_similarity(a, b, n),
        Algorithm.SOUNDEX: soundex_similarity,
        Algorithm.METAPHONE: metaphone_similarity,
        Algorithm.COMBINED: lambda a, b: combined_similarity(
            a, b, opts.weights, n=n, prefix_length=prefix_length
        ),
    }
    return table[Algorithm.parse(opts.algorithm)]


# --- Search ---


def find_matches(query: str, target: str) -> tuple[int, ...]:
    """Greedy left-to-right subsequence scan of *query* over *target*.

    Never backtracks, so with repeated characters the highlighted indices can
    be a poor alignment (``"aab"`` over ``"abab"`` gives ``(0, 2, 3)``).
    """
    q = _text(query).lower()
    t = _text(target).lower()
    hits: list[int] = []
    qi = 0
    for i, ch in enumerate(t):
        if qi >= len(q):
            break
        if ch == q[qi]:
            hits.append(i)
            qi += 1
    return tuple(hits)


def fuzzy_search(
    query: str,
    items: Sequence[str],
    options: SearchOptions | None = None,
) -> list[MatchCandidate]:
    """Rank *items* against *query*, best first.

    Both sides are compared lower-cased.  Only candidates scoring at least
    ``options.threshold`` are kept, at most ``options.limit`` of them; equal
    scores keep their input order.
    """
    opts = options or SearchOptions()
    if not items:
        return []
    fn = scorer(opts)
    q = _text(query).lower()

    results: list[MatchCandidate] = []
    for index, item in enumerate(items):
        text = _text(item)
        score = fn(q, text.lower())
        if score < opts.threshold:
            continue
        results.append(
            MatchCandidate(
                item=text,
                index=index,
                score=score,
                matches=find_matches(q, text) if opts.include_matches else None,
            )
        )

    results.sort(key=lambda r: r.score, reverse=True)
    return results[: max(opts.limit, 0)]


# --- Utilities ---


def normalize_string(s: str) -> str:
    """Lower-case, strip accents, turn punctuation into spaces, squeeze spaces."""
    t = _text(s)
    if not t:
        return ""
    t = unicodedata.normalize("NFD", t.lower())
    t = "".join(ch for ch in t if not unicodedata.combining(ch))
    t = re.sub(r"[^\w\s]", " ", t)
    return re.sub(r"\s+", " ", t).strip()


def similarity_ratio(a: str, b: str, algorithm: Algorithm | str = Algorithm.JARO_WINKLER) -> float:
    """Compare *a* and *b* after ``normalize_string`` with the given algorithm."""
    fn = scorer(SearchOptions(algorithm=Algorithm.parse(algorithm)))
    return fn(normalize_string(a), normalize_string(b))
