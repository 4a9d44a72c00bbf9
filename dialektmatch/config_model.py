from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, PositiveInt, field_validator

from dialektmatch.similarity import DEFAULT_WEIGHTS
from dialektmatch.tables import DIALECT_MAPPINGS


class ProcessorModel(BaseModel):
    dialect: str = "ZH"
    strict_mode: bool = False
    preserve_original: bool = False
    context_aware: bool = True
    tts_voice: str = "de-CH"
    expand_numbers: bool = False
    default_context: Literal["restaurant", "shopping", "navigation"] | None = None

    @field_validator("dialect")
    @classmethod
    def _known_dialect(cls, v: str) -> str:
        code = v.strip().upper()
        if code not in DIALECT_MAPPINGS:
            raise ValueError(f"unsupported dialect {v!r}, expected one of {', '.join(DIALECT_MAPPINGS)}")
        return code


class SearchModel(BaseModel):
    threshold: float = Field(default=0.3, ge=0.0, le=1.0)
    limit: PositiveInt = 10
    algorithm: Literal[
        "levenshtein",
        "damerau",
        "jaro",
        "jaro_winkler",
        "cosine",
        "jaccard",
        "jaccard_ngram",
        "soundex",
        "metaphone",
        "combined",
    ] = "jaro_winkler"
    n: int = Field(default=2, ge=1, le=5)
    prefix_length: int = Field(default=4, ge=0, le=10)
    include_matches: bool = False
    # Overrides for the combined measure, e.g. {"soundex": 0.0}.
    weights: dict[str, float] = Field(default_factory=dict)

    @field_validator("weights")
    @classmethod
    def _known_weights(cls, v: dict[str, float]) -> dict[str, float]:
        unknown = sorted(set(v) - set(DEFAULT_WEIGHTS))
        if unknown:
            raise ValueError(f"unknown weight keys: {', '.join(unknown)}")
        return v


class MatcherModel(BaseModel):
    min_confidence: float = Field(default=0.5, ge=0.0, le=1.0)


class ConfigModel(BaseModel):
    processor: ProcessorModel = Field(default_factory=ProcessorModel)
    search: SearchModel = Field(default_factory=SearchModel)
    matcher: MatcherModel = Field(default_factory=MatcherModel)
