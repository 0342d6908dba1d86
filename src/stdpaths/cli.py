"""
stdpaths.cli

Command-line interface for stdpaths: print where an application's config,
data, cache and state files live.

Responsibilities:
- Parse CLI arguments and dispatch subcommands.
- Print raw XDG values, application homes, subpaths and search paths.
- Create a default configuration file.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml

from .config import CONFIG_FILENAME, Config, resolve_config
from .errors import ConfigError, StdPathsError
from .log import get_logger, setup_logging
from .paths import (
    APP_NAME,
    HOME_KINDS,
    get_app_name,
    search_dirs,
    subpath,
    user_conf_subpath,
    validate_app_name,
    xdg_home,
)
from .xdg import BaseDirKind, get_xdg_var

log = get_logger(__name__)

# ---------------------------------------------------------------------------
# Config template
# ---------------------------------------------------------------------------

CONFIG_HEADER = """\
# stdpaths configuration
#
# app_name: directory name appended to the XDG base directories
#   (e.g. ~/.config/<app_name>). --app overrides it per command; when it is
#   not set, $STDPATHS_APPNAME or "stdpaths" is used.
# verbose: log where each value came from (environment, fallback or default).

"""


def config_template(cfg: Config) -> str:
    """Render the YAML written by `stdpaths init`."""
    data: dict[str, object] = {}
    if cfg.app_name:
        data["app_name"] = cfg.app_name
    data["verbose"] = cfg.verbose
    return CONFIG_HEADER + yaml.safe_dump(data, default_flow_style=False, sort_keys=False)

# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------

def kind_arg(text: str) -> BaseDirKind:
    try:
        return BaseDirKind.from_name(text)
    except StdPathsError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def count_arg(text: str) -> int:
    n = int(text)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def app_name_arg(text: str) -> str:
    try:
        return validate_app_name(text)
    except StdPathsError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def app_name(args: argparse.Namespace) -> str:
    """--app, then the config file, then $STDPATHS_APPNAME, then "stdpaths"."""
    return args.app or args.cfg.app_name or get_app_name()

# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------

def cmd_get(args: argparse.Namespace) -> int:
    """Print the raw value of an XDG variable (defaults applied)."""
    value = get_xdg_var(args.kind, platform=args.platform)
    if value is None:
        print(f"{args.kind.env} is not set and has no default", file=sys.stderr)
        return 1
    print(value)
    return 0


def cmd_home(args: argparse.Namespace) -> int:
    value = xdg_home(args.kind, app_name=app_name(args), platform=args.platform)
    if value is None:
        print(f"{args.kind.env} is not set and has no default", file=sys.stderr)
        return 1
    print(value)
    return 0


def cmd_subpath(args: argparse.Namespace) -> int:
    print(
        subpath(
            args.kind,
            args.component,
            args.trailing,
            args.escape_commas,
            app_name=app_name(args),
            platform=args.platform,
        )
    )
    return 0


def cmd_dirs(args: argparse.Namespace) -> int:
    """Print the search path for config or data files, one directory per line."""
    for d in search_dirs(args.kind, app_name=app_name(args), platform=args.platform):
        print(d)
    return 0


def cmd_init(args: argparse.Namespace) -> int:
    """
    Create the user config at $XDG_CONFIG_HOME/stdpaths/config.yml.
    """
    cfg_path = Path(user_conf_subpath(CONFIG_FILENAME, app_name=APP_NAME))

    if cfg_path.exists() and not args.force:
        print(f"Config already exists: {cfg_path}")
        print("Use --force to overwrite.")
        return 0

    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    cfg = Config(app_name=args.app or args.cfg.app_name, verbose=args.cfg.verbose)
    cfg_path.write_text(config_template(cfg), encoding="utf-8")
    print(f"Wrote config: {cfg_path}")
    return 0

# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct top-level argument parser and subcommands.
    """
    kinds = ", ".join(k.value for k in BaseDirKind)
    homes = ", ".join(k.value for k in HOME_KINDS)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--app", type=app_name_arg, default=None, help="Application directory name (overrides config)")
    common.add_argument("--platform", default=None, help="Resolve as if on this sys.platform (e.g. win32)")

    p = argparse.ArgumentParser(prog="stdpaths")
    p.add_argument("--config", default=None, help="Path to config YAML (overrides user config)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log where each value comes from")
    sub = p.add_subparsers(dest="cmd", required=True)

    pg = sub.add_parser("get", parents=[common], help="Print the raw value of an XDG base directory")
    pg.add_argument("kind", type=kind_arg, help=f"One of: {kinds}")
    pg.set_defaults(func=cmd_get)

    ph = sub.add_parser("home", parents=[common], help="Print the application directory for a base directory")
    ph.add_argument("kind", type=kind_arg, help=f"One of: {homes}")
    ph.set_defaults(func=cmd_home)

    ps = sub.add_parser("subpath", parents=[common], help="Print a path inside the application directory")
    ps.add_argument("kind", type=kind_arg, help=f"One of: {homes}")
    ps.add_argument("component", help="Relative path to append")
    ps.add_argument("--trailing", type=count_arg, default=0, help="Number of path separators to append")
    ps.add_argument("--escape-commas", action="store_true", help="Escape commas with a backslash")
    ps.set_defaults(func=cmd_subpath)

    pd = sub.add_parser("dirs", parents=[common], help="Print the search path for config or data files")
    pd.add_argument("kind", type=kind_arg, help="config_dirs or data_dirs")
    pd.set_defaults(func=cmd_dirs)

    pi = sub.add_parser("init", parents=[common], help="Create a user config at ~/.config/stdpaths/config.yml")
    pi.add_argument("--force", action="store_true", help="Overwrite existing config")
    pi.set_defaults(func=cmd_init)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        try:
            args.cfg = resolve_config(args.config)
        except ConfigError as e:
            # init must be able to overwrite a broken config
            if args.func is not cmd_init:
                raise
            log.warning("%s; starting from defaults", e)
            args.cfg = Config()
        if args.cfg.verbose:
            setup_logging(True)
        return int(args.func(args))
    except StdPathsError as e:
        log.debug("command failed", exc_info=True)
        print(f"stdpaths: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
