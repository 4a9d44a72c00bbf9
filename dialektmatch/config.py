from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from dialektmatch.config_model import ConfigModel
from dialektmatch.similarity import Algorithm, SearchOptions


PROJECT_ROOT = Path(__file__).resolve().parents[1]


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ProcessorConfig:
    dialect: str = "ZH"
    strict_mode: bool = False
    preserve_original: bool = False
    context_aware: bool = True
    tts_voice: str = "de-CH"
    expand_numbers: bool = False
    default_context: str | None = None  # restaurant|shopping|navigation


@dataclass(frozen=True)
class MatcherConfig:
    min_confidence: float = 0.5


@dataclass(frozen=True)
class Config:
    processor: ProcessorConfig = field(default_factory=ProcessorConfig)
    search: SearchOptions = field(default_factory=SearchOptions)
    matcher: MatcherConfig = field(default_factory=MatcherConfig)


def config_from_model(model: ConfigModel) -> Config:
    p = model.processor
    s = model.search
    return Config(
        processor=ProcessorConfig(
            dialect=p.dialect,
            strict_mode=p.strict_mode,
            preserve_original=p.preserve_original,
            context_aware=p.context_aware,
            tts_voice=p.tts_voice,
            expand_numbers=p.expand_numbers,
            default_context=p.default_context,
        ),
        search=SearchOptions(
            threshold=s.threshold,
            limit=s.limit,
            algorithm=Algorithm(s.algorithm),
            n=s.n,
            prefix_length=s.prefix_length,
            weights=dict(s.weights),
            include_matches=s.include_matches,
        ),
        matcher=MatcherConfig(min_confidence=model.matcher.min_confidence),
    )


def validate_config(raw: Any, *, source: str = "config") -> ConfigModel:
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{source}: top level must be a mapping")
    try:
        return ConfigModel.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"{source}: {e}") from e


def load_config(config_path: str | Path | None = None) -> Config:
    if config_path is None:
        return Config()

    path = Path(config_path)
    if not path.is_absolute():
        path = PROJECT_ROOT / path

    raw: Any = {}
    if path.exists():
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"{path}: {e}") from e

    return config_from_model(validate_config(raw, source=str(path)))
