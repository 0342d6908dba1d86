from __future__ import annotations

import enum
import ntpath
import os
import posixpath
import sys
from dataclasses import dataclass
from types import MappingProxyType, ModuleType
from typing import Mapping

from .errors import UnknownKindError
from .log import get_logger

"""
XDG base directory resolution for stdpaths.

Every lookup reads os.environ afresh:
- the XDG_* variable wins if it is set at all, even to ""
- on Windows, LOCALAPPDATA / TEMP stand in for the missing XDG variables
- otherwise a home-relative default is expanded

Nothing is cached and no directory is created or checked here.
"""

log = get_logger(__name__)


class BaseDirKind(enum.Enum):
    CONFIG_HOME = "config_home"
    DATA_HOME = "data_home"
    CACHE_HOME = "cache_home"
    STATE_HOME = "state_home"
    RUNTIME_DIR = "runtime_dir"
    CONFIG_DIRS = "config_dirs"
    DATA_DIRS = "data_dirs"

    @property
    def is_list(self) -> bool:
        """True for the kinds whose value is a separator-delimited list."""
        return self in (BaseDirKind.CONFIG_DIRS, BaseDirKind.DATA_DIRS)

    @property
    def env(self) -> str:
        return "XDG_" + self.name

    @classmethod
    def from_name(cls, text: str) -> BaseDirKind:
        """
        Parse a kind from user input.

        Accepts "config_home", "config-home", "CONFIG_HOME" and the variable
        name "XDG_CONFIG_HOME".
        """
        if isinstance(text, cls):
            return text
        key = str(text).strip().lower().replace("-", "_")
        if key.startswith("xdg_"):
            key = key[len("xdg_"):]
        try:
            return cls(key)
        except ValueError:
            raise UnknownKindError(text, [k.value for k in cls]) from None


@dataclass(frozen=True)
class VariableSpec:
    env: str
    fallback_env: str | None = None
    default: str | None = None


def _specs(table: dict[BaseDirKind, VariableSpec]) -> Mapping[BaseDirKind, VariableSpec]:
    missing = [k.name for k in BaseDirKind if k not in table]
    if missing:
        raise RuntimeError(f"variable table is missing kinds: {missing}")
    return MappingProxyType(table)


POSIX_SPECS = _specs({
    BaseDirKind.CONFIG_HOME: VariableSpec("XDG_CONFIG_HOME", None, "~/.config"),
    BaseDirKind.DATA_HOME: VariableSpec("XDG_DATA_HOME", None, "~/.local/share"),
    BaseDirKind.CACHE_HOME: VariableSpec("XDG_CACHE_HOME", None, "~/.cache"),
    BaseDirKind.STATE_HOME: VariableSpec("XDG_STATE_HOME", None, "~/.local/state"),
    BaseDirKind.RUNTIME_DIR: VariableSpec("XDG_RUNTIME_DIR"),
    BaseDirKind.CONFIG_DIRS: VariableSpec("XDG_CONFIG_DIRS", None, "/etc/xdg/"),
    BaseDirKind.DATA_DIRS: VariableSpec("XDG_DATA_DIRS", None, "/usr/local/share/:/usr/share/"),
})

# Windows has no XDG variables of its own; config, data and state all land
# under LOCALAPPDATA, see paths.app_name_for for how they are kept apart.
WINDOWS_SPECS = _specs({
    BaseDirKind.CONFIG_HOME: VariableSpec("XDG_CONFIG_HOME", "LOCALAPPDATA", "~\\AppData\\Local"),
    BaseDirKind.DATA_HOME: VariableSpec("XDG_DATA_HOME", "LOCALAPPDATA", "~\\AppData\\Local"),
    BaseDirKind.CACHE_HOME: VariableSpec("XDG_CACHE_HOME", "TEMP", "~\\AppData\\Local\\Temp"),
    BaseDirKind.STATE_HOME: VariableSpec("XDG_STATE_HOME", "LOCALAPPDATA", "~\\AppData\\Local"),
    BaseDirKind.RUNTIME_DIR: VariableSpec("XDG_RUNTIME_DIR"),
    BaseDirKind.CONFIG_DIRS: VariableSpec("XDG_CONFIG_DIRS"),
    BaseDirKind.DATA_DIRS: VariableSpec("XDG_DATA_DIRS"),
})


def is_windows(platform: str | None = None) -> bool:
    return (platform or sys.platform) == "win32"


def path_module(platform: str | None = None) -> ModuleType:
    """ntpath on Windows, posixpath everywhere else."""
    return ntpath if is_windows(platform) else posixpath


def list_separator(platform: str | None = None) -> str:
    return ";" if is_windows(platform) else ":"


def variable_spec(kind: BaseDirKind, platform: str | None = None) -> VariableSpec:
    table = WINDOWS_SPECS if is_windows(platform) else POSIX_SPECS
    return table[BaseDirKind.from_name(kind)]


def expand_default(template: str, platform: str | None = None) -> str:
    """Expand ``~`` and ``$VAR`` references in a default template."""
    pathmod = path_module(platform)
    return pathmod.expandvars(pathmod.expanduser(template))


def remove_duplicate_directories(value: str, sep: str = ":") -> str:
    """
    Drop repeated entries from a separator-delimited directory list.

    Order is kept and the first occurrence wins. Entries are compared as
    exact strings, so "/usr/share" and "/usr/share/" are different.
    Empty entries are dropped.

    e.g. "/usr/local/share:/usr/share:/usr/share" -> "/usr/local/share:/usr/share"
    """
    return sep.join(split_dirs(value, sep))


def split_dirs(value: str | None, sep: str = ":") -> list[str]:
    """Split a directory list into its unique, non-empty entries."""
    if not value:
        return []
    seen: set[str] = set()
    out: list[str] = []
    for entry in value.split(sep):
        if not entry or entry in seen:
            continue
        seen.add(entry)
        out.append(entry)
    return out


def get_xdg_var(kind: BaseDirKind | str, *, platform: str | None = None) -> str | None:
    """
    Return the raw value of an XDG base directory.

    Returns:
      str: the path (or list of paths for CONFIG_DIRS / DATA_DIRS)
      "": the XDG variable is set but empty
      None: nothing applies (e.g. RUNTIME_DIR with XDG_RUNTIME_DIR unset)
    """
    kind = BaseDirKind.from_name(kind)
    spec = variable_spec(kind, platform)

    value: str | None = None
    source = "unset"
    if spec.env in os.environ:
        value = os.environ[spec.env]
        source = "env"
    elif spec.fallback_env and os.environ.get(spec.fallback_env):
        value = os.environ[spec.fallback_env]
        source = spec.fallback_env
    elif spec.default is not None:
        value = expand_default(spec.default, platform)
        source = "default"

    if value is not None and kind.is_list:
        value = remove_duplicate_directories(value, list_separator(platform))

    log.debug("%s from %s: %r", spec.env, source, value)
    return value
