from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, NonNegativeInt, ValidationError

from dialektmatch.context import Context, boosts_for, is_context_relevant, parse_context
from dialektmatch.tables import (
    COMMON_SWISS_WORDS,
    DEFAULT_DIALECT,
    DIALECT_MAPPINGS,
    PHONETIC_REPLACEMENTS,
    RESTAURANT_TERMS,
)
from dialektmatch.tts import preprocess_for_tts

if TYPE_CHECKING:
    from dialektmatch.config import ProcessorConfig


log = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_PUNCTUATION = re.compile(r"[.,!?;:]")
_CHF = re.compile(r"\bchf\b")
_FR = re.compile(r"\bfr\.")
_AMPERSAND = re.compile(r"\s*&\s*")

_DIMINUTIVE = re.compile(r"(\w+)li\b")
_SPECIAL_FIXES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bwär\b"), "wer"),
    (re.compile(r"\bwänn\b"), "wann"),
    (re.compile(r"\bin de[rm]\b"), "in der"),
    (re.compile(r"\buf(?:em|ere|e)\b"), "auf dem"),
    (re.compile(r"\bvo(?:m|re)\b"), "von dem"),
)
_BOOST_MARKER = re.compile(r"\[\+[^\]]*\]")


def _word_pattern(word: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE)


@dataclass
class ProcessingStats:
    total_processed: int = 0
    dialect_words_found: int = 0
    replacements_made: int = 0
    confidence_boosts: int = 0

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class ProcessedTranscript:
    original: str | None
    normalized: str
    text: str
    confidence: float


class _StatsSnapshot(BaseModel):
    model_config = ConfigDict(extra="ignore")

    total_processed: NonNegativeInt = 0
    dialect_words_found: NonNegativeInt = 0
    replacements_made: NonNegativeInt = 0
    confidence_boosts: NonNegativeInt = 0


class SessionSnapshot(BaseModel):
    model_config = ConfigDict(extra="ignore")

    dialect: str | None = None
    vocabulary_boosts: dict[str, float] | None = None
    stats: _StatsSnapshot | None = None


class SwissGermanProcessor:
    """Turns Swiss-German transcripts into Standard German.

    One instance per session: the statistics and the vocabulary boost map are
    plain mutable fields and are not guarded against concurrent use.  The
    lookup tables are shared read-only mappings.
    """

    def __init__(
        self,
        dialect: str = DEFAULT_DIALECT,
        *,
        strict_mode: bool = False,
        preserve_original: bool = False,
        context_aware: bool = True,
        tts_voice: str = "de-CH",
        expand_numbers: bool = False,
        dialect_mappings: Mapping[str, Mapping[str, str]] = DIALECT_MAPPINGS,
        common_words: Mapping[str, str] = COMMON_SWISS_WORDS,
        phonetic_map: Mapping[str, str] = PHONETIC_REPLACEMENTS,
        restaurant_terms: Mapping[str, str] = RESTAURANT_TERMS,
    ) -> None:
        self.strict_mode = strict_mode
        self.preserve_original = preserve_original
        self.context_aware = context_aware
        self.tts_voice = tts_voice
        self.expand_numbers = expand_numbers

        self._dialect_mappings = dialect_mappings
        self.common_words = common_words
        self.phonetic_map = phonetic_map
        self.restaurant_terms = restaurant_terms

        code = dialect.strip().upper() if isinstance(dialect, str) else ""
        if code not in dialect_mappings:
            log.warning("Unknown dialect %r, falling back to %s", dialect, DEFAULT_DIALECT)
            code = DEFAULT_DIALECT
        self.dialect = code
        self.dialect_map = dialect_mappings[code]

        self._patterns = self._compile_patterns()
        self._phonetic_patterns = [
            (re.compile(re.escape(src), re.IGNORECASE), dst) for src, dst in phonetic_map.items()
        ]

        self.current_context: Context | None = None
        self.vocabulary_boost: dict[str, float] = {}

        self.stats = ProcessingStats()

    @classmethod
    def from_config(cls, cfg: ProcessorConfig) -> SwissGermanProcessor:
        proc = cls(
            cfg.dialect,
            strict_mode=cfg.strict_mode,
            preserve_original=cfg.preserve_original,
            context_aware=cfg.context_aware,
            tts_voice=cfg.tts_voice,
            expand_numbers=cfg.expand_numbers,
        )
        if cfg.default_context:
            proc.set_context(cfg.default_context)
        return proc

    def _compile_patterns(self) -> dict[str, re.Pattern[str]]:
        patterns: dict[str, re.Pattern[str]] = {}
        for table in (self.dialect_map, self.common_words, self.restaurant_terms):
            for word in table:
                if word not in patterns:
                    patterns[word] = _word_pattern(word)
        return patterns

    # --- Pipeline ---

    def normalize_text(self, text: str) -> str:
        if not text or not isinstance(text, str):
            return ""
        s = _WHITESPACE.sub(" ", text.lower().strip())
        s = _CHF.sub("franken", s)
        s = _FR.sub("franken", s)
        s = _AMPERSAND.sub(" und ", s)
        s = _PUNCTUATION.sub("", s)
        return _WHITESPACE.sub(" ", s).strip()

    def process_transcript(self, transcript: str) -> str:
        if not transcript or not isinstance(transcript, str):
            return ""

        self.stats.total_processed += 1

        normalized = self.normalize_text(transcript)
        s = self._apply_table(normalized, self.dialect_map)
        s = self._apply_table(s, self.common_words)
        if self.context_aware and self.current_context is Context.RESTAURANT:
            s = self._apply_table(s, self.restaurant_terms)
        s = self._apply_phonetic_corrections(s)
        s = self._handle_special_constructions(s)
        s = self._apply_vocabulary_boost(s)
        s = self._cleanup(s)

        if s != normalized:
            self.stats.replacements_made += 1
        log.debug("[%s] %r -> %r", self.dialect, transcript, s)
        return s

    def process(self, transcript: str) -> ProcessedTranscript:
        text = self.process_transcript(transcript)
        raw = transcript if isinstance(transcript, str) else ""
        return ProcessedTranscript(
            original=raw if self.preserve_original else None,
            normalized=self.normalize_text(raw),
            text=text,
            confidence=self.calculate_swiss_confidence(raw, text),
        )

    def _apply_table(self, text: str, table: Mapping[str, str]) -> str:
        for src, dst in table.items():
            pattern = self._patterns.get(src) or _word_pattern(src)
            text, hits = pattern.subn(lambda _m, d=dst: d, text)
            if hits:
                self.stats.dialect_words_found += 1
        return text

    def _apply_phonetic_corrections(self, text: str) -> str:
        for pattern, dst in self._phonetic_patterns:
            text = pattern.sub(lambda _m, d=dst: d, text)
        return text

    def _handle_special_constructions(self, text: str) -> str:
        def diminutive(m: re.Match[str]) -> str:
            root = m.group(1)
            return root + "chen" if len(root) > 2 else m.group(0)

        s = _DIMINUTIVE.sub(diminutive, text)
        for pattern, dst in _SPECIAL_FIXES:
            s = pattern.sub(dst, s)
        return s

    def _apply_vocabulary_boost(self, text: str) -> str:
        hits = {term.lower(): boost for term, boost in self.vocabulary_boost.items() if term.lower() in text}
        if not hits:
            return text
        self.stats.confidence_boosts += len(hits)

        # one pass, so a term can never match inside an inserted marker
        alternation = "|".join(re.escape(t) for t in sorted(hits, key=len, reverse=True))
        pattern = re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)

        def annotate(m: re.Match[str]) -> str:
            boost = hits.get(m.group(0).lower())
            return m.group(0) if boost is None else f"{m.group(0)}[+{boost}]"

        return pattern.sub(annotate, text)

    def _cleanup(self, text: str) -> str:
        s = _BOOST_MARKER.sub("", text)
        s = _WHITESPACE.sub(" ", s).strip()
        return s[:1].upper() + s[1:]

    # --- TTS ---

    def preprocess_for_tts(self, text: str) -> str:
        return preprocess_for_tts(
            text,
            voice=self.tts_voice,
            strict_mode=self.strict_mode,
            expand_digits=self.expand_numbers,
        )

    # --- Context & confidence ---

    def set_context(self, context: Context | str | None) -> bool:
        ctx = parse_context(context)
        known = ctx is not None or context is None
        if not known:
            log.warning("Unknown context %r, clearing context", context)

        self.current_context = ctx
        self.vocabulary_boost = boosts_for(ctx)
        return known

    def calculate_swiss_confidence(self, original_text: str, processed_text: str) -> float:
        if not original_text or not processed_text:
            return 0.0
        if not isinstance(original_text, str) or not isinstance(processed_text, str):
            return 0.0

        confidence = 0.5
        confidence += 0.1 * len(self.find_swiss_markers(original_text))
        if original_text != processed_text:
            confidence += 0.2
        if self.current_context is not None and is_context_relevant(processed_text, self.current_context):
            confidence += 0.1

        low = processed_text.lower()
        for term, boost in self.vocabulary_boost.items():
            if term.lower() in low:
                confidence += boost

        return max(0.0, min(confidence, 1.0))

    def find_swiss_markers(self, text: str) -> list[str]:
        if not text or not isinstance(text, str):
            return []
        low = text.lower()
        markers: list[str] = []
        for table in (self.dialect_map, self.common_words):
            for word in table:
                if word in markers:
                    continue
                if self._patterns[word].search(low):
                    markers.append(word)
        return markers

    # --- Dialects & statistics ---

    def get_supported_dialects(self) -> list[str]:
        return list(self._dialect_mappings.keys())

    def set_dialect(self, dialect: str) -> bool:
        code = dialect.strip().upper() if isinstance(dialect, str) else ""
        if code not in self._dialect_mappings:
            log.warning("Unsupported dialect %r, keeping %s", dialect, self.dialect)
            return False
        self.dialect = code
        self.dialect_map = self._dialect_mappings[code]
        self._patterns = self._compile_patterns()
        return True

    def get_statistics(self) -> dict[str, float]:
        out: dict[str, float] = dict(self.stats.as_dict())
        total = self.stats.total_processed
        out["dialect_words_ratio"] = self.stats.dialect_words_found / total if total else 0.0
        out["replacement_ratio"] = self.stats.replacements_made / total if total else 0.0
        return out

    def reset_statistics(self) -> None:
        self.stats = ProcessingStats()

    # --- Session snapshot ---

    def export_custom_mappings(self) -> dict[str, Any]:
        return {
            "dialect": self.dialect,
            "vocabulary_boosts": dict(self.vocabulary_boost),
            "stats": self.stats.as_dict(),
        }

    def import_custom_mappings(self, mappings: Any) -> bool:
        """Restore a snapshot from :meth:`export_custom_mappings`.

        All or nothing: a malformed snapshot or an unknown dialect leaves the
        processor untouched and returns ``False``.
        """
        try:
            snap = SessionSnapshot.model_validate(mappings)
        except ValidationError as e:
            log.warning("Failed to import custom mappings: %s", e)
            return False

        if snap.dialect is not None and snap.dialect.strip().upper() not in self._dialect_mappings:
            log.warning("Failed to import custom mappings: unsupported dialect %r", snap.dialect)
            return False

        if snap.dialect is not None:
            self.set_dialect(snap.dialect)
        if snap.vocabulary_boosts is not None:
            self.vocabulary_boost = dict(snap.vocabulary_boosts)
        if snap.stats is not None:
            self.stats = ProcessingStats(**snap.stats.model_dump())
        return True
