from __future__ import annotations

import pytest

from dialektmatch.processor import SwissGermanProcessor
from dialektmatch.tts import expand_numbers, is_swiss_voice, preprocess_for_tts


class TestVoice:
    @pytest.mark.parametrize(("voice", "swiss"), [("de-CH", True), ("gsw-ch", True), ("de-DE", False), (None, False)])
    def test_is_swiss_voice(self, voice, swiss: bool) -> None:
        assert is_swiss_voice(voice) is swiss

    def test_non_swiss_voice_unchanged(self) -> None:
        assert preprocess_for_tts("Das ist gut", voice="de-DE") == "Das ist gut"


class TestReversions:
    def test_standard_to_dialect(self) -> None:
        assert preprocess_for_tts("Das ist gut") == "Das isch gut"

    def test_capitalization_kept(self) -> None:
        assert preprocess_for_tts("Ist das alles") == "Isch das alles"

    def test_guide_after_reversion(self) -> None:
        assert preprocess_for_tts("Er hat etwas") == "Er hat öp-pis"

    @pytest.mark.parametrize("value", ["", None])
    def test_empty(self, value) -> None:
        assert preprocess_for_tts(value) == ""


class TestStrictMode:
    def test_sch_before_ch(self) -> None:
        assert preprocess_for_tts("Schön", strict_mode=True) == "shön"
        assert preprocess_for_tts("Schön") == "Schön"

    def test_guide_then_phonemes(self) -> None:
        assert preprocess_for_tts("Grüezi") == "Grüe-zi"
        assert preprocess_for_tts("Grüezi", strict_mode=True) == "Grue-zi"


class TestNumbers:
    def test_integer(self) -> None:
        assert expand_numbers("3 Bier") == "drei Bier"
        assert expand_numbers("42") == "zweiundvierzig"

    def test_franc_prefix(self) -> None:
        assert expand_numbers("CHF 12.50") == "zwölf Franken fünfzig"

    def test_franc_suffix_single_digit_cents(self) -> None:
        assert expand_numbers("4.5 Franken") == "vier Franken fünfzig"

    def test_decimal(self) -> None:
        assert expand_numbers("2.5 Liter") == "zwei komma fünf Liter"

    def test_processor_flag(self) -> None:
        proc = SwissGermanProcessor("ZH", expand_numbers=True)
        assert proc.preprocess_for_tts("Das kostet 3 Franken") == "Das kostet drei Franken"
        assert SwissGermanProcessor("ZH").preprocess_for_tts("Das kostet 3 Franken") == "Das kostet 3 Franken"

    def test_processor_voice(self) -> None:
        proc = SwissGermanProcessor("ZH", tts_voice="de-AT")
        assert proc.preprocess_for_tts("Das ist gut") == "Das ist gut"
