from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from .errors import ConfigError, InvalidAppNameError
from .log import get_logger
from .paths import APP_NAME, search_dirs, validate_app_name
from .xdg import BaseDirKind

log = get_logger(__name__)

CONFIG_FILENAME = "config.yml"


@dataclass(frozen=True)
class Config:
    # None: fall back to $STDPATHS_APPNAME, then "stdpaths"
    app_name: str | None = None
    verbose: bool = False


def find_config_file() -> Path | None:
    """First existing config.yml in the stdpaths config search path."""
    for d in search_dirs(BaseDirKind.CONFIG_DIRS, app_name=APP_NAME):
        candidate = Path(d) / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path) -> Config:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(path, f"cannot read config: {e.strerror or e}") from e

    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(path, f"invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(path, "top level must be a mapping")

    known = {f.name for f in fields(Config)}
    for key in sorted(set(map(str, data)) - known):
        log.warning("%s: ignoring unknown key %r", path, key)

    app_name = data.get("app_name")
    if app_name is not None:
        if not isinstance(app_name, str) or not app_name.strip():
            raise ConfigError(path, "app_name must be a non-empty string")
        try:
            app_name = validate_app_name(app_name.strip())
        except InvalidAppNameError:
            raise ConfigError(path, f"app_name must be a plain directory name, got {app_name!r}") from None

    verbose = data.get("verbose", False)
    if not isinstance(verbose, bool):
        raise ConfigError(path, "verbose must be true or false")

    return Config(app_name=app_name, verbose=verbose)


def resolve_config(arg: str | None = None) -> Config:
    """
    Load the effective configuration.

    Priority:
      1) --config value (if provided)
      2) first config.yml in $XDG_CONFIG_HOME/stdpaths, $XDG_CONFIG_DIRS/stdpaths
      3) built-in defaults
    """
    if arg:
        return load_config(Path(arg).expanduser())

    path = find_config_file()
    if path is None:
        log.debug("no config file found, using defaults")
        return Config()
    log.debug("loading config from %s", path)
    return load_config(path)
