from __future__ import annotations

import logging

import pytest

from stdpaths import log as stdpaths_log

XDG_VARS = (
    "XDG_CONFIG_HOME",
    "XDG_DATA_HOME",
    "XDG_CACHE_HOME",
    "XDG_STATE_HOME",
    "XDG_RUNTIME_DIR",
    "XDG_CONFIG_DIRS",
    "XDG_DATA_DIRS",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No XDG variables, HOME in a temp dir, a fake Windows profile."""
    for name in XDG_VARS + ("LOCALAPPDATA", "TEMP", "HOMEPATH", "HOMEDRIVE", "STDPATHS_APPNAME"):
        monkeypatch.delenv(name, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", r"C:\Users\tester")
    return home


@pytest.fixture
def isolated_config(clean_env, monkeypatch, tmp_path):
    """Point both config locations at empty temp dirs."""
    cfg_home = tmp_path / "config"
    sys_dir = tmp_path / "etc-xdg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(cfg_home))
    monkeypatch.setenv("XDG_CONFIG_DIRS", str(sys_dir))
    return cfg_home, sys_dir


@pytest.fixture(autouse=True)
def reset_logging():
    logger = logging.getLogger(stdpaths_log.ROOT)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for h in logger.handlers:
        if h not in handlers:
            logger.removeHandler(h)
    logger.setLevel(level)
    logger.propagate = True
    stdpaths_log._setup_done = False
