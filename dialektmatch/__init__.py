"""Swiss-German transcript normalization and fuzzy voice-command matching."""

from dialektmatch.context import Context
from dialektmatch.matcher import MatchResult, VoiceMatcher
from dialektmatch.phonetic import metaphone, soundex
from dialektmatch.processor import ProcessedTranscript, ProcessingStats, SwissGermanProcessor
from dialektmatch.similarity import (
    Algorithm,
    MatchCandidate,
    SearchOptions,
    combined_similarity,
    cosine_similarity,
    damerau_levenshtein_distance,
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

__all__ = [
    "Algorithm",
    "Context",
    "MatchCandidate",
    "MatchResult",
    "ProcessedTranscript",
    "ProcessingStats",
    "SearchOptions",
    "SwissGermanProcessor",
    "VoiceMatcher",
    "combined_similarity",
    "cosine_similarity",
    "damerau_levenshtein_distance",
    "fuzzy_search",
    "jaccard_ngram_similarity",
    "jaccard_similarity",
    "jaro_similarity",
    "jaro_winkler",
    "levenshtein_distance",
    "levenshtein_similarity",
    "metaphone",
    "normalize_string",
    "similarity_ratio",
    "soundex",
]
