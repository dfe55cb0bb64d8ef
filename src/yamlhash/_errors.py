"""
Exception types raised by yamlhash.

All errors derive from YamlHashError so callers can catch everything the
package raises with a single except clause.
"""

from __future__ import annotations

import os as _os


class YamlHashError(Exception):
    """Base class for all yamlhash errors."""

    pass


class ParseError(YamlHashError):
    """YAML text is malformed or its top level is not a mapping."""

    def __init__(self, message: str, source: str | _os.PathLike[str] | None = None) -> None:
        self.source = source
        if source is not None:
            message = f"{source}: {message}"
        super().__init__(message)


class FileReadError(YamlHashError):
    """A YAML file could not be read."""

    def __init__(self, path: str | _os.PathLike[str], message: str) -> None:
        self.path = path
        super().__init__(f"Cannot read {path}: {message}")


class KeyNotFoundError(YamlHashError):
    """A dotted path segment does not exist at its level."""

    def __init__(self, key: str, path: str) -> None:
        self.key = key
        self.path = path
        where = repr(path) if path else "<root>"
        super().__init__(f"Invalid key {key!r} under {where}")


class TypeMismatchError(YamlHashError):
    """A dotted path reached a value that is not a mapping."""

    def __init__(self, path: str, type_name: str) -> None:
        self.path = path
        self.type_name = type_name
        where = repr(path) if path else "<root>"
        super().__init__(f"Value for key {where} is not a hash (got {type_name})")


class RenderError(YamlHashError):
    """A value in the mapping cannot be serialized as YAML."""

    pass
