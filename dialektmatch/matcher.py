from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from dialektmatch.processor import SwissGermanProcessor
from dialektmatch.similarity import MatchCandidate, SearchOptions, fuzzy_search


@dataclass(frozen=True)
class MatchResult:
    transcript: str
    normalized: str
    confidence: float
    candidates: tuple[MatchCandidate, ...]

    @property
    def best(self) -> MatchCandidate | None:
        return self.candidates[0] if self.candidates else None


@dataclass
class VoiceMatcher:
    """Transcript -> normalized text -> ranked vocabulary entries."""

    processor: SwissGermanProcessor
    options: SearchOptions = field(default_factory=SearchOptions)
    min_confidence: float = 0.5

    def match(self, transcript: str, vocabulary: Sequence[str]) -> MatchResult:
        raw = transcript if isinstance(transcript, str) else ""
        normalized = self.processor.process_transcript(raw)
        query = normalized.lower() or raw.strip().lower()
        candidates = fuzzy_search(query, vocabulary, self.options) if query else []
        return MatchResult(
            transcript=raw,
            normalized=normalized,
            confidence=self.processor.calculate_swiss_confidence(raw, normalized),
            candidates=tuple(candidates),
        )

    def best(
        self,
        transcript: str,
        vocabulary: Sequence[str],
        *,
        min_confidence: float | None = None,
    ) -> MatchCandidate | None:
        """Top candidate, or ``None`` if the utterance is below the confidence bar."""
        result = self.match(transcript, vocabulary)
        floor = self.min_confidence if min_confidence is None else min_confidence
        if result.confidence < floor:
            return None
        return result.best
