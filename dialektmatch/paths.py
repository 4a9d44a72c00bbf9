from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_path, user_state_path


APP_NAME = "dialektmatch"
CONFIG_NAME = "config.yaml"

ENV_ROOT = "DIALEKTMATCH_ROOT"
ENV_CONFIG = "DIALEKTMATCH_CONFIG"


@dataclass(frozen=True)
class AppPaths:
    root: Path
    config_dir: Path
    state_dir: Path

    @classmethod
    def for_app(cls, app_name: str = APP_NAME) -> AppPaths:
        return cls(
            root=get_root(),
            config_dir=Path(user_config_path(app_name, ensure_exists=True)),
            state_dir=Path(user_state_path(app_name, ensure_exists=True)),
        )

    @property
    def config_path(self) -> Path:
        return self.config_dir / CONFIG_NAME

    @property
    def log_path(self) -> Path:
        return self.state_dir / f"{APP_NAME}.log"


def _env_path(var: str) -> Path | None:
    value = os.environ.get(var)
    return Path(value).expanduser().resolve() if value else None


def get_root() -> Path:
    return _env_path(ENV_ROOT) or Path.cwd().resolve()


def get_paths(*, app_name: str = APP_NAME) -> AppPaths:
    return AppPaths.for_app(app_name)


def find_config_path(explicit: str | None = None) -> Path:
    """Pick config.yaml: *explicit*, ``$DIALEKTMATCH_CONFIG``, the user
    config dir if the file exists there, else ``<root>/config.yaml``."""
    if explicit:
        return Path(explicit).expanduser().resolve()

    env = _env_path(ENV_CONFIG)
    if env is not None:
        return env

    user = get_paths().config_path
    return user if user.exists() else get_root() / CONFIG_NAME


def template_path() -> Path:
    return Path(__file__).resolve().parents[1] / CONFIG_NAME


def ensure_default_config(*, template: Path, dest_path: Path) -> None:
    if dest_path.exists():
        return
    dest_path.parent.mkdir(parents=True, exist_ok=True)
    body = template.read_text(encoding="utf-8") if template.exists() else "{}\n"
    dest_path.write_text(body, encoding="utf-8")
