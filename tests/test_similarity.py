"""Tests for dialektmatch.similarity."""

from __future__ import annotations

import pytest

from dialektmatch.similarity import (
    Algorithm,
    SearchOptions,
    combined_similarity,
    cosine_similarity,
    damerau_levenshtein_distance,
    find_matches,
    fuzzy_search,
    jaccard_ngram_similarity,
    jaccard_similarity,
    jaro_similarity,
    jaro_winkler,
    levenshtein_distance,
    levenshtein_similarity,
    normalize_string,
    similarity_ratio,
)

PAIRS = [
    ("kitten", "sitting"),
    ("MARTHA", "MARHTA"),
    ("DWAYNE", "DUANE"),
    ("grüezi", "grüessech"),
    ("pizza", "Pizza Margherita"),
    ("a", "b"),
    ("abc", ""),
    ("", ""),
]

SIMILARITIES = [
    levenshtein_similarity,
    jaro_similarity,
    jaro_winkler,
    cosine_similarity,
    jaccard_similarity,
    jaccard_ngram_similarity,
    combined_similarity,
]


class TestLevenshtein:
    def test_kitten_sitting(self) -> None:
        assert levenshtein_distance("kitten", "sitting") == 3

    @pytest.mark.parametrize("s", ["", "a", "chuchichäschtli", "Es isch guet"])
    def test_identity(self, s: str) -> None:
        assert levenshtein_distance(s, s) == 0

    @pytest.mark.parametrize(("a", "b"), PAIRS)
    def test_symmetric(self, a: str, b: str) -> None:
        assert levenshtein_distance(a, b) == levenshtein_distance(b, a)

    def test_empty_side_is_length_of_other(self) -> None:
        assert levenshtein_distance("", "abc") == 3
        assert levenshtein_distance(None, "ab") == 2  # type: ignore[arg-type]

    def test_similarity(self) -> None:
        assert levenshtein_similarity("", "") == 1.0
        assert levenshtein_similarity("abc", "") == 0.0
        assert levenshtein_similarity("abc", "abc") == 1.0
        assert levenshtein_similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)


class TestDamerauLevenshtein:
    def test_transposition_costs_one(self) -> None:
        assert damerau_levenshtein_distance("ca", "ac") == 1
        assert levenshtein_distance("ca", "ac") == 2

    def test_equal_and_empty(self) -> None:
        assert damerau_levenshtein_distance("abc", "abc") == 0
        assert damerau_levenshtein_distance("", "abcd") == 4


class TestJaro:
    def test_martha(self) -> None:
        assert jaro_similarity("MARTHA", "MARHTA") == pytest.approx(17 / 18)

    def test_dwayne_duane_symmetric(self) -> None:
        assert jaro_similarity("DWAYNE", "DUANE") == pytest.approx(0.822, abs=1e-3)
        assert jaro_similarity("DUANE", "DWAYNE") == pytest.approx(jaro_similarity("DWAYNE", "DUANE"))

    def test_degenerate(self) -> None:
        assert jaro_similarity("", "") == 1.0
        assert jaro_similarity("abc", "") == 0.0
        assert jaro_similarity("a", "b") == 0.0
        assert jaro_similarity("abc", "xyz") == 0.0


class TestJaroWinkler:
    def test_martha(self) -> None:
        assert jaro_winkler("MARTHA", "MARHTA") == pytest.approx(0.961, abs=1e-3)

    def test_no_bonus_below_threshold(self) -> None:
        # shared "p" prefix, but Jaro is only 0.6
        assert jaro_winkler("pasta", "pizza") == pytest.approx(0.6)
        assert jaro_winkler("pasta", "pizza") == pytest.approx(jaro_similarity("pasta", "pizza"))

    def test_prefix_length_zero_is_plain_jaro(self) -> None:
        assert jaro_winkler("MARTHA", "MARHTA", prefix_length=0) == pytest.approx(17 / 18)

    @pytest.mark.parametrize(("a", "b"), PAIRS)
    def test_symmetric_prefix_check(self, a: str, b: str) -> None:
        assert jaro_winkler(a, b) == pytest.approx(jaro_winkler(b, a))


class TestVectorMeasures:
    def test_cosine_degenerate(self) -> None:
        assert cosine_similarity("", "") == 1.0
        assert cosine_similarity("abc", "") == 0.0
        assert cosine_similarity("abc", "abc") == 1.0

    def test_cosine_ignores_case(self) -> None:
        assert cosine_similarity("Pizza", "pizza") == pytest.approx(1.0)

    def test_cosine_partial(self) -> None:
        score = cosine_similarity("bestellung", "bestellig")
        assert 0.0 < score < 1.0

    def test_jaccard_chars(self) -> None:
        assert jaccard_similarity("abc", "abd") == pytest.approx(0.5)

    def test_jaccard_ngrams(self) -> None:
        # {" a", "ab", "bc", "c "} vs {" a", "ab", "bd", "d "}
        assert jaccard_ngram_similarity("abc", "abd") == pytest.approx(1 / 3)


class TestCombined:
    @pytest.mark.parametrize("s", ["pizza", "Zürich", "x", "Chuchichäschtli"])
    def test_self_similarity_is_one(self, s: str) -> None:
        assert combined_similarity(s, s) == pytest.approx(1.0)

    def test_zero_weights_skip_measure(self) -> None:
        only_lev = {
            "jaro_winkler": 0.0,
            "cosine": 0.0,
            "jaccard": 0.0,
            "soundex": 0.0,
            "metaphone": 0.0,
            "levenshtein": 1.0,
        }
        assert combined_similarity("kitten", "sitting", only_lev) == pytest.approx(
            levenshtein_similarity("kitten", "sitting")
        )

    def test_no_weights_applied(self) -> None:
        zero = dict.fromkeys(["jaro_winkler", "levenshtein", "cosine", "jaccard", "soundex", "metaphone"], 0.0)
        assert combined_similarity("a", "a", zero) == 0.0


@pytest.mark.parametrize("fn", SIMILARITIES)
@pytest.mark.parametrize(("a", "b"), PAIRS)
def test_similarity_in_unit_interval(fn, a: str, b: str) -> None:
    score = fn(a, b)
    assert 0.0 <= score <= 1.0


class TestAlgorithm:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("jaroWinkler", Algorithm.JARO_WINKLER),
            ("Levenshtein", Algorithm.LEVENSHTEIN),
            ("jaccard-ngram", Algorithm.JACCARD_NGRAM),
            (Algorithm.COSINE, Algorithm.COSINE),
            ("bogus", Algorithm.JARO_WINKLER),
            (None, Algorithm.JARO_WINKLER),
        ],
    )
    def test_parse(self, name, expected: Algorithm) -> None:
        assert Algorithm.parse(name) is expected


class TestFuzzySearch:
    def test_pizza_ranks_first(self) -> None:
        results = fuzzy_search("pizza", ["Pizza Margherita", "Pasta", "Salat"], SearchOptions(threshold=0.3))
        assert results
        assert results[0].item == "Pizza Margherita"
        assert results[0].index == 0

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_threshold_order_and_limit(self, algorithm: Algorithm) -> None:
        items = ["Bier", "Bierli", "Wein", "Mineralwasser", "Kafi", "Kaffee", "Tee", "Rivella"]
        opts = SearchOptions(threshold=0.2, limit=3, algorithm=algorithm)
        results = fuzzy_search("kafe", items, opts)
        assert len(results) <= 3
        assert all(r.score >= 0.2 for r in results)
        scores = [r.score for r in results]
        assert scores == sorted(scores, reverse=True)

    def test_equal_scores_keep_input_order(self) -> None:
        results = fuzzy_search("abc", ["abc", "abc"])
        assert [r.index for r in results] == [0, 1]

    def test_empty_items(self) -> None:
        assert fuzzy_search("pizza", []) == []

    def test_matches_only_when_requested(self) -> None:
        plain = fuzzy_search("piz", ["Pizza"])
        assert plain[0].matches is None
        marked = fuzzy_search("piz", ["Pizza"], SearchOptions(include_matches=True))
        assert marked[0].matches == (0, 1, 2)

    def test_greedy_highlight_with_repeated_chars(self) -> None:
        assert find_matches("aab", "abab") == (0, 2, 3)


class TestUtilities:
    def test_normalize_string(self) -> None:
        assert normalize_string("  Grüezi,   Zürich! ") == "gruezi zurich"
        assert normalize_string(None) == ""  # type: ignore[arg-type]

    def test_similarity_ratio(self) -> None:
        assert similarity_ratio("Café", "cafe") == pytest.approx(1.0)
        assert similarity_ratio("kitten", "sitting", "levenshtein") == pytest.approx(1 - 3 / 7)
