"""
stdpaths.paths

Application directories built on top of the XDG base directories.

    xdg_home(CONFIG_HOME)             -> $XDG_CONFIG_HOME/<app>
    user_conf_subpath("init.yml")     -> $XDG_CONFIG_HOME/<app>/init.yml
    user_data_subpath("swap", 2)      -> $XDG_DATA_HOME/<app>/swap//
    search_dirs(CONFIG_DIRS)          -> [$XDG_CONFIG_HOME/<app>, /etc/xdg/<app>]

On Windows config, data and state all default to %LOCALAPPDATA%, so data and
state use "<app>-data" instead of "<app>".
"""

from __future__ import annotations

import os

from .errors import InvalidAppNameError, UnknownKindError
from .log import get_logger
from .xdg import BaseDirKind, get_xdg_var, is_windows, list_separator, path_module, split_dirs

log = get_logger(__name__)

APP_NAME = "stdpaths"
APP_NAME_ENV = "STDPATHS_APPNAME"

HOME_KINDS = (
    BaseDirKind.CONFIG_HOME,
    BaseDirKind.DATA_HOME,
    BaseDirKind.CACHE_HOME,
    BaseDirKind.STATE_HOME,
)

# list kind -> the per-user kind searched before it
_LIST_HOMES = {
    BaseDirKind.CONFIG_DIRS: BaseDirKind.CONFIG_HOME,
    BaseDirKind.DATA_DIRS: BaseDirKind.DATA_HOME,
}


def validate_app_name(name: str) -> str:
    """
    Return *name* if it is a plain directory name, else raise InvalidAppNameError.

    Separators, ".", ".." and NUL would let the name escape its base directory.
    """
    if not isinstance(name, str) or not name:
        raise InvalidAppNameError(name)
    if "/" in name or "\\" in name or "\0" in name or name in (".", ".."):
        raise InvalidAppNameError(name)
    return name


def get_app_name() -> str:
    """
    Default application directory name.

    $STDPATHS_APPNAME if it is a plain name, otherwise "stdpaths".
    """
    name = os.environ.get(APP_NAME_ENV)
    if not name:
        return APP_NAME
    try:
        return validate_app_name(name)
    except InvalidAppNameError:
        log.warning("ignoring %s=%r: not a plain directory name", APP_NAME_ENV, name)
        return APP_NAME


def resolve_app_name(app_name: str | None = None) -> str:
    """*app_name* if given (validated), otherwise get_app_name()."""
    if app_name:
        return validate_app_name(app_name)
    return get_app_name()


def app_name_for(kind: BaseDirKind, app_name: str | None = None, platform: str | None = None) -> str:
    name = resolve_app_name(app_name)
    if is_windows(platform) and kind in (BaseDirKind.DATA_HOME, BaseDirKind.STATE_HOME):
        return name + "-data"
    return name


def concat_fnames(base: str | None, name: str, platform: str | None = None) -> str:
    """
    Join *name* onto *base*.

    A separator is inserted only if *base* is non-empty and does not already
    end in one. Unlike os.path.join, an absolute *name* does not discard *base*.
    """
    if not base:
        return name
    pathmod = path_module(platform)
    seps = pathmod.sep + (pathmod.altsep or "")
    if base[-1] in seps:
        return base + name
    return base + pathmod.sep + name


def escape_path_commas(path: str) -> str:
    """Backslash-escape every comma so *path* can sit in a comma-separated option."""
    out: list[str] = []
    for ch in path:
        if ch == ",":
            out.append("\\")
        out.append(ch)
    return "".join(out)


def _home_kind(kind: BaseDirKind | str) -> BaseDirKind:
    kind = BaseDirKind.from_name(kind)
    if kind not in HOME_KINDS:
        raise UnknownKindError(kind.value, [k.value for k in HOME_KINDS], reason="is not valid here")
    return kind


def xdg_home(
    kind: BaseDirKind | str,
    *,
    app_name: str | None = None,
    platform: str | None = None,
) -> str | None:
    """
    Return the application's directory inside a per-user base directory.

    None if the base directory is unknown, "" if it was explicitly set empty.
    """
    kind = _home_kind(kind)
    name = app_name_for(kind, app_name, platform)
    base = get_xdg_var(kind, platform=platform)
    if not base:
        return base
    return concat_fnames(base, name, platform)


def subpath(
    kind: BaseDirKind | str,
    component: str,
    trailing_pathseps: int = 0,
    escape_commas: bool = False,
    *,
    app_name: str | None = None,
    platform: str | None = None,
) -> str:
    """
    Return ``{xdg_home(kind)}/{component}``.

    Args:
      trailing_pathseps: number of path separators to append
      escape_commas: escape commas in the joined path (not in the padding)
    """
    if not isinstance(component, str):
        raise TypeError(f"component must be a str, not {type(component).__name__}")
    if trailing_pathseps < 0:
        raise ValueError("trailing_pathseps must be >= 0")

    ret = concat_fnames(xdg_home(kind, app_name=app_name, platform=platform), component, platform)
    if escape_commas:
        ret = escape_path_commas(ret)
    if trailing_pathseps:
        ret += path_module(platform).sep * trailing_pathseps
    return ret


def user_conf_subpath(fname: str, *, app_name: str | None = None, platform: str | None = None) -> str:
    """Return ``$XDG_CONFIG_HOME/<app>/{fname}``."""
    return subpath(BaseDirKind.CONFIG_HOME, fname, app_name=app_name, platform=platform)


def user_data_subpath(
    fname: str,
    trailing_pathseps: int = 0,
    escape_commas: bool = False,
    *,
    app_name: str | None = None,
    platform: str | None = None,
) -> str:
    """Return ``$XDG_DATA_HOME/<app>/{fname}``."""
    return subpath(
        BaseDirKind.DATA_HOME,
        fname,
        trailing_pathseps,
        escape_commas,
        app_name=app_name,
        platform=platform,
    )


def user_state_subpath(
    fname: str,
    trailing_pathseps: int = 0,
    escape_commas: bool = False,
    *,
    app_name: str | None = None,
    platform: str | None = None,
) -> str:
    return subpath(
        BaseDirKind.STATE_HOME,
        fname,
        trailing_pathseps,
        escape_commas,
        app_name=app_name,
        platform=platform,
    )


def search_dirs(
    kind: BaseDirKind | str,
    *,
    app_name: str | None = None,
    platform: str | None = None,
) -> list[str]:
    """
    Application directories to search, most important first.

    The per-user directory comes first, then each system directory from
    XDG_CONFIG_DIRS / XDG_DATA_DIRS with the application name appended.
    """
    kind = BaseDirKind.from_name(kind)
    if kind not in _LIST_HOMES:
        raise UnknownKindError(kind.value, [k.value for k in _LIST_HOMES], reason="is not valid here")

    name = resolve_app_name(app_name)
    dirs: list[str] = []
    home = xdg_home(_LIST_HOMES[kind], app_name=name, platform=platform)
    if home:
        dirs.append(home)
    for entry in split_dirs(get_xdg_var(kind, platform=platform), list_separator(platform)):
        dirs.append(concat_fnames(entry, name, platform))

    return list(dict.fromkeys(dirs))
