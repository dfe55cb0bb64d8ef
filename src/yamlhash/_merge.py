"""
Deep, order-preserving merge of two mappings.

Example:
    >>> deep_merge({"a": 1, "b": {"x": 1, "y": 2}}, {"b": {"y": 9, "z": 3}, "c": 4})
    YamlMapping({'a': 1, 'b': YamlMapping({'x': 1, 'y': 9, 'z': 3}), 'c': 4})
"""

from __future__ import annotations

import collections.abc as _abc
import copy as _copy
import typing as _typing

import yamlhash._mapping as _mapping


def deep_merge(
    base: _abc.Mapping[_typing.Any, _typing.Any],
    override: _abc.Mapping[_typing.Any, _typing.Any],
) -> _mapping.YamlMapping:
    """
    Deep merge two mappings, with override taking priority.

    Keys already in base keep their position even when override replaces
    their value. Keys only in override are appended in override's order.
    Nested mappings present on both sides are merged recursively; any other
    pair of values is resolved by taking override's value whole.

    Keys are matched as YAML matches them, so 1, 1.0 and true in override
    are three different keys.

    Neither argument is modified. Values copied from override are deep
    copies; values kept from base are shared with it.

    Args:
        base: The base mapping.
        override: The mapping to merge in (takes priority).

    Returns:
        New merged YamlMapping.
    """
    result = _mapping.YamlMapping(base)
    for key, value in override.items():
        # Assigning to an existing key keeps its slot
        if (
            key in result
            and isinstance(result[key], _abc.Mapping)
            and isinstance(value, _abc.Mapping)
        ):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = _copy.deepcopy(value)
    return result
