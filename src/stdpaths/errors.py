"""Exceptions raised by stdpaths.

Resolving a directory never raises: a missing variable is a normal outcome
(``None``). These types only show up at the edges, when parsing user input
or reading the configuration file.
"""

from __future__ import annotations


class StdPathsError(Exception):
    """Base exception for stdpaths errors."""


class UnknownKindError(StdPathsError, ValueError):
    """A base-directory kind name was not recognised, or is not valid here."""

    def __init__(self, kind: object, allowed: list[str] | None = None, reason: str | None = None) -> None:
        self.kind = kind
        self.allowed = allowed or []
        self.reason = reason
        if reason:
            message = f"base directory kind {kind!r} {reason}"
        else:
            message = f"unknown base directory kind: {kind!r}"
        if self.allowed:
            message += f" (expected one of: {', '.join(self.allowed)})"
        super().__init__(message)


class ConfigError(StdPathsError):
    """The configuration file could not be read or has invalid values."""

    def __init__(self, path: object, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class InvalidAppNameError(StdPathsError, ValueError):
    """An application name would not stay inside its base directory."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"invalid application name {name!r}: must be a plain directory name")
