"""Standard German -> dialect-flavoured text for a Swiss-German TTS voice."""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType

from num2words import num2words


TTS_REVERSIONS: Mapping[str, str] = MappingProxyType(
    {
        "können": "chönd",
        "wollen": "wänd",
        "haben": "hei",
        "sind": "si",
        "ist": "isch",
        "gibt": "git",
        "kommt": "chunt",
        "geht": "gaht",
        "nichts": "nüt",
        "etwas": "öppis",
        "jemand": "öpper",
    }
)

PRONUNCIATION_GUIDES: Mapping[str, str] = MappingProxyType(
    {
        "chuchichäschtli": "chu-chi-chäscht-li",
        "chörbli": "chörb-li",
        "grüezi": "grüe-zi",
        "öppis": "öp-pis",
        "öpper": "öp-per",
    }
)

# "sch" must come before "ch", otherwise it is never seen.
PHONEME_ADJUSTMENTS: tuple[tuple[str, str], ...] = (
    ("sch", "sh"),
    ("ch", "kh"),
    ("üe", "ue"),
    ("ie", "i"),
    ("ei", "ai"),
)


def _word_patterns(table: Mapping[str, str]) -> list[tuple[re.Pattern[str], str]]:
    return [(re.compile(rf"\b{re.escape(src)}\b", re.IGNORECASE), dst) for src, dst in table.items()]


_REVERSION_PATTERNS = _word_patterns(TTS_REVERSIONS)
_GUIDE_PATTERNS = _word_patterns(PRONUNCIATION_GUIDES)
_PHONEME_PATTERNS = [(re.compile(re.escape(src), re.IGNORECASE), dst) for src, dst in PHONEME_ADJUSTMENTS]

_MONEY_PREFIX = re.compile(r"\b(?:chf|fr\.)\s*(\d+)(?:[.,](\d{1,2}))?(?!\d)", re.IGNORECASE)
_MONEY_SUFFIX = re.compile(r"(?<![\d.,])(\d+)(?:[.,](\d{1,2}))?\s*(?:chf|fr\.|franken)(?!\w)", re.IGNORECASE)
_DECIMAL = re.compile(r"(?<![\d.,])(\d+)[.,](\d+)(?![\d.,]?\d)")
_INTEGER = re.compile(r"(?<![\d.,])\d+(?![\d.,]?\d)")


def is_swiss_voice(voice: str | None) -> bool:
    return bool(voice) and str(voice).strip().upper().endswith("CH")


def _words(n: int) -> str:
    return num2words(n, lang="de")


def _money(francs: str, cents: str | None) -> str:
    out = f"{_words(int(francs))} Franken"
    if cents:
        rappen = int(cents) * (10 if len(cents) == 1 else 1)
        if rappen:
            out += f" {_words(rappen)}"
    return out


def expand_numbers(text: str) -> str:
    """Spell out franc amounts, decimals and integers in German words."""
    s = _MONEY_PREFIX.sub(lambda m: _money(m.group(1), m.group(2)), text)
    s = _MONEY_SUFFIX.sub(lambda m: _money(m.group(1), m.group(2)), s)
    s = _DECIMAL.sub(lambda m: f"{_words(int(m.group(1)))} komma {' '.join(_words(int(d)) for d in m.group(2))}", s)
    s = _INTEGER.sub(lambda m: _words(int(m.group(0))), s)
    return s


def _keep_case(replacement: str):
    def repl(m: re.Match[str]) -> str:
        if m.group(0)[:1].isupper():
            return replacement[:1].upper() + replacement[1:]
        return replacement

    return repl


def _apply(text: str, patterns: list[tuple[re.Pattern[str], str]]) -> str:
    for pattern, dst in patterns:
        text = pattern.sub(_keep_case(dst), text)
    return text


def preprocess_for_tts(
    text: str,
    *,
    voice: str | None = "de-CH",
    strict_mode: bool = False,
    expand_digits: bool = False,
) -> str:
    """Prepare Standard German *text* for a Swiss-German voice.

    Returns *text* unchanged unless *voice* is a Swiss locale (``de-CH``,
    ``gsw-CH``, ...).  Phoneme adjustments make the text harder to read but
    closer to the spoken form, so they only run in *strict_mode*.
    """
    if not text or not isinstance(text, str):
        return ""
    if not is_swiss_voice(voice):
        return text

    s = expand_numbers(text) if expand_digits else text
    s = _apply(s, _REVERSION_PATTERNS)
    s = _apply(s, _GUIDE_PATTERNS)
    if strict_mode:
        for pattern, dst in _PHONEME_PATTERNS:
            s = pattern.sub(dst, s)
    return re.sub(r"\s+", " ", s).strip()
