"""
Dotted path lookup into nested mappings.

A path like "fruit.cherry.tart" names the value reached by looking up
"fruit", then "cherry", then "tart". The empty path names the root.
There is no escape syntax, so keys containing "." cannot be addressed.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import yamlhash._errors as _errors

SEPARATOR = "."


def split(path: str) -> list[str]:
    """Split a dotted path into segments. The empty path has no segments."""
    if path == "":
        return []
    return path.split(SEPARATOR)


def resolve(data: _abc.Mapping[_typing.Any, _typing.Any], path: str) -> _typing.Any:
    """
    Return the value at a dotted path.

    Segments only match string keys. A mapping keyed by the integer 1 has
    no value at path "1".

    Args:
        data: The root mapping.
        path: Dotted path; "" returns `data` itself.

    Returns:
        The value stored at the path (not copied).

    Raises:
        KeyNotFoundError: If a segment is missing from its mapping.
        TypeMismatchError: If a non-final segment holds a non-mapping value.
    """
    current: _typing.Any = data
    consumed: list[str] = []

    for segment in split(path):
        if not isinstance(current, _abc.Mapping):
            raise _errors.TypeMismatchError(
                SEPARATOR.join(consumed), type(current).__name__
            )
        if segment not in current:
            raise _errors.KeyNotFoundError(segment, SEPARATOR.join(consumed))
        current = current[segment]
        consumed.append(segment)

    return current

