from __future__ import annotations

import argparse
import dataclasses
import sys

from dialektmatch.config import Config, ConfigError, load_config
from dialektmatch.logging_setup import setup_logging
from dialektmatch.matcher import VoiceMatcher
from dialektmatch.paths import ensure_default_config, find_config_path, get_paths, template_path
from dialektmatch.phonetic import metaphone, soundex
from dialektmatch.processor import SwissGermanProcessor
from dialektmatch.similarity import Algorithm, SearchOptions, fuzzy_search
from dialektmatch.tables import supported_dialects
from dialektmatch.yaml_config import get_dotted, set_dotted


def _load(args: argparse.Namespace) -> Config:
    path = find_config_path(args.config)
    return load_config(path if path.exists() else None)


def _processor(args: argparse.Namespace, cfg: Config) -> SwissGermanProcessor:
    proc = SwissGermanProcessor.from_config(cfg.processor)
    if args.dialect and not proc.set_dialect(args.dialect):
        raise ConfigError(f"unsupported dialect {args.dialect!r}, expected one of {', '.join(supported_dialects())}")
    if args.context:
        proc.set_context(args.context)
    return proc


def _search_options(args: argparse.Namespace, base: SearchOptions) -> SearchOptions:
    changes: dict[str, object] = {}
    if getattr(args, "algorithm", None):
        changes["algorithm"] = Algorithm.parse(args.algorithm)
    if getattr(args, "threshold", None) is not None:
        changes["threshold"] = args.threshold
    if getattr(args, "limit", None) is not None:
        changes["limit"] = args.limit
    if getattr(args, "matches", False):
        changes["include_matches"] = True
    return dataclasses.replace(base, **changes)


def _fmt_candidate(c) -> str:
    line = f"{c.score:.3f}  [{c.index}] {c.item}"
    if c.matches is not None:
        line += f"  matches={list(c.matches)}"
    return line


def _cmd_normalize(args: argparse.Namespace) -> int:
    cfg = _load(args)
    proc = _processor(args, cfg)
    text = " ".join(args.text)
    out = proc.process_transcript(text)
    print(out)
    if args.confidence:
        print(f"confidence={proc.calculate_swiss_confidence(text, out):.2f}")
    return 0


def _cmd_search(args: argparse.Namespace) -> int:
    cfg = _load(args)
    opts = _search_options(args, cfg.search)
    results = fuzzy_search(args.query, args.items, opts)
    if not results:
        print("(no match)")
        return 1
    for c in results:
        print(_fmt_candidate(c))
    return 0


def _cmd_match(args: argparse.Namespace) -> int:
    cfg = _load(args)
    proc = _processor(args, cfg)
    matcher = VoiceMatcher(
        processor=proc,
        options=_search_options(args, cfg.search),
        min_confidence=cfg.matcher.min_confidence,
    )
    result = matcher.match(args.text, args.items)
    print(f"normalized: {result.normalized}")
    print(f"confidence: {result.confidence:.2f}")
    if not result.candidates:
        print("(no match)")
        return 1
    for c in result.candidates:
        print(_fmt_candidate(c))
    return 0


def _cmd_tts(args: argparse.Namespace) -> int:
    cfg = _load(args)
    proc = _processor(args, cfg)
    if args.strict:
        proc.strict_mode = True
    if args.numbers:
        proc.expand_numbers = True
    if args.voice:
        proc.tts_voice = args.voice
    print(proc.preprocess_for_tts(" ".join(args.text)))
    return 0


def _cmd_phonetic(args: argparse.Namespace) -> int:
    for w in args.words:
        print(f"{w}\tsoundex={soundex(w) or '-'}\tmetaphone={metaphone(w) or '-'}")
    return 0


def _cmd_dialects(_args: argparse.Namespace) -> int:
    for code in supported_dialects():
        print(code)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    paths = get_paths()
    dest = paths.config_path if args.dest is None else find_config_path(args.dest)
    ensure_default_config(template=template_path(), dest_path=dest)
    print(f"Config: {dest}")
    print(f"Log: {paths.log_path}")
    return 0


def _cmd_config_get(args: argparse.Namespace) -> int:
    cfg_path = find_config_path(args.config)
    print(get_dotted(cfg_path, args.key, default=None))
    return 0


def _cmd_config_set(args: argparse.Namespace) -> int:
    cfg_path = find_config_path(args.config)
    ensure_default_config(template=template_path(), dest_path=cfg_path)
    set_dotted(cfg_path, args.key, args.value)
    print(f"OK: {args.key} = {args.value}")
    return 0


def _add_search_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--algorithm", default=None, choices=[a.value for a in Algorithm])
    p.add_argument("--threshold", default=None, type=float)
    p.add_argument("--limit", default=None, type=int)
    p.add_argument("--matches", action="store_true", help="Show highlighted character positions")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dialektmatch", description="Swiss-German voice command normalization and matching")
    p.add_argument("--config", default=None, help="Path to config.yaml (default: env, user config dir, ./config.yaml)")
    p.add_argument("--dialect", default=None, help="Dialect code, e.g. ZH, BE, BS")
    p.add_argument("--context", default=None, help="restaurant | shopping | navigation")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    p.add_argument("--log-file", action="store_true", help="Also log to the user state dir")
    sub = p.add_subparsers(dest="cmd", required=False)

    p_norm = sub.add_parser("normalize", help="Dialect transcript -> Standard German")
    p_norm.add_argument("text", nargs="+")
    p_norm.add_argument("--confidence", action="store_true", help="Also print the confidence score")
    p_norm.set_defaults(func=_cmd_normalize)

    p_search = sub.add_parser("search", help="Fuzzy-search a query in a list of items")
    p_search.add_argument("query")
    p_search.add_argument("items", nargs="+")
    _add_search_flags(p_search)
    p_search.set_defaults(func=_cmd_search)

    p_match = sub.add_parser("match", help="Normalize a transcript and rank it against items")
    p_match.add_argument("text")
    p_match.add_argument("items", nargs="+")
    _add_search_flags(p_match)
    p_match.set_defaults(func=_cmd_match)

    p_tts = sub.add_parser("tts", help="Standard German -> text for a Swiss-German voice")
    p_tts.add_argument("text", nargs="+")
    p_tts.add_argument("--strict", action="store_true", help="Apply phoneme adjustments")
    p_tts.add_argument("--numbers", action="store_true", help="Spell out numbers and amounts")
    p_tts.add_argument("--voice", default=None, help="Voice locale, e.g. de-CH")
    p_tts.set_defaults(func=_cmd_tts)

    p_ph = sub.add_parser("phonetic", help="Soundex and Metaphone codes")
    p_ph.add_argument("words", nargs="+")
    p_ph.set_defaults(func=_cmd_phonetic)

    p_dia = sub.add_parser("dialects", help="List supported dialects")
    p_dia.set_defaults(func=_cmd_dialects)

    p_init = sub.add_parser("init", help="Create config.yaml in the user config dir")
    p_init.add_argument("--dest", default=None, help="Where to write config.yaml")
    p_init.set_defaults(func=_cmd_init)

    p_cfg = sub.add_parser("config", help="Read or change config.yaml values")
    cfg_sub = p_cfg.add_subparsers(dest="cfg_cmd", required=True)

    p_get = cfg_sub.add_parser("get", help="Read a key")
    p_get.add_argument("key", help="e.g. search.threshold")
    p_get.set_defaults(func=_cmd_config_get)

    p_set = cfg_sub.add_parser("set", help="Set a key")
    p_set.add_argument("key", help="e.g. processor.dialect")
    p_set.add_argument("value", help="e.g. BE / 0.4 / true")
    p_set.set_defaults(func=_cmd_config_set)

    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    func = getattr(args, "func", None)
    if func is None:
        p.print_help()
        return 2

    setup_logging(level="DEBUG" if args.verbose else None, log_file=args.log_file)
    try:
        return int(func(args))
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
