"""Round-trip editing of config.yaml by dotted key (``search.threshold``).

Comments and quoting in the user's file survive edits.  Every write is
validated against :class:`ConfigModel` first, so a bad value never reaches
disk.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML

from dialektmatch.config import ConfigError, validate_config


def _yaml() -> YAML:
    y = YAML()
    y.preserve_quotes = True
    y.indent(mapping=2, sequence=4, offset=2)
    return y


def read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        data = _yaml().load(f)
    return data if isinstance(data, dict) else {}


def write_yaml(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    with tmp.open("w", encoding="utf-8") as f:
        _yaml().dump(data, f)
    tmp.replace(path)


def _split(dotted_key: str) -> list[str]:
    parts = [p for p in (dotted_key or "").split(".") if p]
    if not parts:
        raise ConfigError(f"invalid key {dotted_key!r}, expected 'section.key'")
    return parts


def get_dotted(path: Path, dotted_key: str, default: Any = None) -> Any:
    cur: Any = read_yaml(path)
    for p in _split(dotted_key):
        if not isinstance(cur, dict) or p not in cur:
            return default
        cur = cur[p]
    return cur


def parse_scalar(s: str) -> Any:
    """CLI string -> YAML value: null/bool/int/float, JSON objects, else str."""
    text = s.strip()
    low = text.lower()
    if low in ("null", "none", "~"):
        return None
    if low in ("true", "yes", "on"):
        return True
    if low in ("false", "no", "off"):
        return False
    if text.startswith("{") or text.startswith("["):
        try:
            return json.loads(text)
        except ValueError:
            return s
    try:
        if "." in low or "," in low:
            return float(low.replace(",", "."))
        return int(low)
    except ValueError:
        return s


def set_dotted(path: Path, dotted_key: str, value: Any) -> None:
    parts = _split(dotted_key)
    data = read_yaml(path)
    cur: Any = data
    for p in parts[:-1]:
        nxt = cur.get(p)
        if not isinstance(nxt, dict):
            nxt = {}
            cur[p] = nxt
        cur = nxt
    cur[parts[-1]] = parse_scalar(value) if isinstance(value, str) else value

    # raises ConfigError before anything is written
    validate_config(_plain(data), source=f"{path} ({dotted_key})")
    write_yaml(path, data)


def _plain(node: Any) -> Any:
    if isinstance(node, dict):
        return {str(k): _plain(v) for k, v in node.items()}
    if isinstance(node, list):
        return [_plain(v) for v in node]
    # ruamel wraps scalars in str/float subclasses that carry formatting
    if isinstance(node, bool) or node is None:
        return node
    if isinstance(node, str):
        return str(node)
    if isinstance(node, float):
        return float(node)
    if isinstance(node, int):
        return int(node)
    return node


__all__ = ["ConfigError", "get_dotted", "parse_scalar", "read_yaml", "set_dotted", "write_yaml"]
