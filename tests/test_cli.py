from __future__ import annotations

from pathlib import Path

import pytest

from dialektmatch import cli
from dialektmatch.paths import ensure_default_config, template_path


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "setup_logging", lambda **_kw: None)


@pytest.fixture
def cfg(tmp_path: Path) -> str:
    return str(tmp_path / "config.yaml")


def run(capsys: pytest.CaptureFixture[str], *argv: str) -> tuple[int, str]:
    code = cli.main(list(argv))
    return code, capsys.readouterr().out


class TestNormalize:
    def test_default_dialect(self, capsys, cfg: str) -> None:
        code, out = run(capsys, "--config", cfg, "normalize", "Es", "isch", "guet")
        assert code == 0
        assert out == "Es ist guet\n"

    def test_dialect_flag(self, capsys, cfg: str) -> None:
        code, out = run(capsys, "--config", cfg, "--dialect", "be", "normalize", "Er het öppis")
        assert code == 0
        assert out.strip() == "Er hat etwas"

    def test_confidence(self, capsys, cfg: str) -> None:
        code, out = run(capsys, "--config", cfg, "normalize", "isch", "--confidence")
        assert code == 0
        assert "confidence=0.80" in out

    def test_unknown_dialect(self, capsys, cfg: str) -> None:
        code = cli.main(["--config", cfg, "--dialect", "XX", "normalize", "hoi"])
        assert code == 2
        assert "unsupported dialect" in capsys.readouterr().err


class TestSearchAndMatch:
    def test_search(self, capsys, cfg: str) -> None:
        code, out = run(capsys, "--config", cfg, "search", "pizza", "Pizza Margherita", "Pasta", "Salat")
        assert code == 0
        assert "Pizza Margherita" in out.splitlines()[0]

    def test_search_no_match(self, capsys, cfg: str) -> None:
        code, out = run(capsys, "--config", cfg, "search", "zzz", "Pizza", "--threshold", "0.99")
        assert code == 1
        assert "(no match)" in out

    def test_search_matches(self, capsys, cfg: str) -> None:
        code, out = run(capsys, "--config", cfg, "search", "piz", "Pizza", "--matches")
        assert code == 0
        assert "matches=[0, 1, 2]" in out

    def test_match(self, capsys, cfg: str) -> None:
        code, out = run(capsys, "--config", cfg, "match", "röschti", "Kaffee", "Bier", "Rösti")
        assert code == 0
        assert "normalized: Rösti" in out
        assert "[2] Rösti" in out


class TestTts:
    def test_swiss(self, capsys, cfg: str) -> None:
        code, out = run(capsys, "--config", cfg, "tts", "Das", "ist", "gut")
        assert code == 0
        assert out.strip() == "Das isch gut"

    def test_numbers_and_voice(self, capsys, cfg: str) -> None:
        _, out = run(capsys, "--config", cfg, "tts", "--numbers", "3", "Bier")
        assert out.strip() == "drei Bier"
        _, out = run(capsys, "--config", cfg, "tts", "--voice", "de-DE", "Das ist gut")
        assert out.strip() == "Das ist gut"


class TestMisc:
    def test_phonetic(self, capsys) -> None:
        code, out = run(capsys, "phonetic", "Robert")
        assert code == 0
        assert "soundex=R163" in out

    def test_dialects(self, capsys) -> None:
        code, out = run(capsys, "dialects")
        assert code == 0
        assert out.split() == ["ZH", "BE", "BS"]

    def test_no_command(self, capsys) -> None:
        assert cli.main([]) == 2


class TestConfigCommands:
    @pytest.fixture
    def cfg_file(self, tmp_path: Path) -> str:
        dest = tmp_path / "config.yaml"
        ensure_default_config(template=template_path(), dest_path=dest)
        return str(dest)

    def test_set_then_get(self, capsys, cfg_file: str) -> None:
        code, _ = run(capsys, "--config", cfg_file, "config", "set", "processor.dialect", "BS")
        assert code == 0
        code, out = run(capsys, "--config", cfg_file, "config", "get", "processor.dialect")
        assert code == 0
        assert out.strip() == "BS"

    def test_set_invalid(self, capsys, cfg_file: str) -> None:
        code = cli.main(["--config", cfg_file, "config", "set", "search.threshold", "2"])
        assert code == 2
        assert "Config error" in capsys.readouterr().err

    def test_config_drives_processor(self, capsys, cfg_file: str) -> None:
        run(capsys, "--config", cfg_file, "config", "set", "processor.dialect", "BE")
        _, out = run(capsys, "--config", cfg_file, "normalize", "es geit")
        assert out.strip() == "Es geht"

    @pytest.mark.parametrize("argv", [["config", "get", ""], ["config", "set", "", "1"]])
    def test_empty_key(self, capsys, cfg_file: str, argv: list[str]) -> None:
        assert cli.main(["--config", cfg_file, *argv]) == 2
        assert "Config error" in capsys.readouterr().err
