"""
YamlMapping: insertion-ordered mapping with YAML key identity.

Python dicts treat 1, 1.0 and True as the same key. In YAML they are three
different scalars, so `{1: one, true: yes}` is a mapping with two entries.
YamlMapping stores each key under a token that includes its type, so such
keys stay distinct while lookups by an ordinary str/int key still work.

Example:
    >>> data = YamlMapping([(1, "one"), (True, "yes")])
    >>> len(data)
    2
    >>> data[True]
    'yes'
"""

from __future__ import annotations

import collections.abc as _abc
import copy as _copy
import typing as _typing


def _token(key: _typing.Any) -> _typing.Hashable:
    """Key identity: the value together with its type, recursively for tuples."""
    if isinstance(key, tuple):
        return (tuple, tuple(_token(item) for item in key))
    return (type(key), key)


class YamlMapping(_abc.MutableMapping[_typing.Any, _typing.Any]):
    """
    An insertion-ordered mapping whose keys compare by type and value.

    Assigning to an existing key keeps its position. Equality is
    structural and order-sensitive (see structurally_equal) and works
    against any Mapping.
    """

    __slots__ = ("_data",)

    def __init__(
        self,
        data: _abc.Mapping[_typing.Any, _typing.Any]
        | _abc.Iterable[tuple[_typing.Any, _typing.Any]]
        | None = None,
        /,
    ) -> None:
        """
        Create a YamlMapping.

        Args:
            data: Initial items, as a mapping or an iterable of pairs.
                Values are stored as given (not copied).
        """
        self._data: dict[_typing.Hashable, tuple[_typing.Any, _typing.Any]] = {}
        if data is None:
            return
        pairs = data.items() if isinstance(data, _abc.Mapping) else data
        for key, value in pairs:
            self[key] = value

    # -------------------------------------------------------------------------
    # MutableMapping abstract methods
    # -------------------------------------------------------------------------

    def __getitem__(self, key: _typing.Any) -> _typing.Any:
        try:
            return self._data[_token(key)][1]
        except TypeError:
            raise KeyError(key) from None

    def __setitem__(self, key: _typing.Any, value: _typing.Any) -> None:
        """Set a value; an existing key keeps its original key object and position."""
        token = _token(key)
        if token in self._data:
            self._data[token] = (self._data[token][0], value)
        else:
            self._data[token] = (key, value)

    def __delitem__(self, key: _typing.Any) -> None:
        try:
            del self._data[_token(key)]
        except TypeError:
            raise KeyError(key) from None

    def __iter__(self) -> _typing.Iterator[_typing.Any]:
        for key, _ in self._data.values():
            yield key

    def __len__(self) -> int:
        return len(self._data)

    # -------------------------------------------------------------------------
    # Additional dict-like methods
    # -------------------------------------------------------------------------

    def __contains__(self, key: object) -> bool:
        try:
            return _token(key) in self._data
        except TypeError:
            # Unhashable key
            return False

    def __repr__(self) -> str:
        return f"YamlMapping({format_items(self)})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _abc.Mapping):
            return structurally_equal(self, other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> YamlMapping:
        """Return a shallow copy."""
        result = YamlMapping()
        result._data = dict(self._data)
        return result

    def __deepcopy__(self, memo: dict[int, _typing.Any]) -> YamlMapping:
        result = YamlMapping()
        memo[id(self)] = result
        for key, value in self._data.values():
            result[_copy.deepcopy(key, memo)] = _copy.deepcopy(value, memo)
        return result

    def to_dict(self) -> dict[_typing.Any, _typing.Any]:
        """
        Return a deep copy as plain dicts and lists.

        Raises:
            ValueError: If two keys that YAML distinguishes (such as 1 and
                true) would collapse into one dict key.
        """
        return _to_plain(self)


def format_items(mapping: _abc.Mapping[_typing.Any, _typing.Any]) -> str:
    """Dict-style rendering of a mapping's items: {'a': 1}."""
    return "{" + ", ".join(f"{key!r}: {value!r}" for key, value in mapping.items()) + "}"


def _to_plain(value: _typing.Any) -> _typing.Any:
    if isinstance(value, _abc.Mapping):
        result: dict[_typing.Any, _typing.Any] = {}
        for key, item in value.items():
            if key in result:
                raise ValueError(f"key {key!r} collides with an equal key in a plain dict")
            result[key] = _to_plain(item)
        return result
    if isinstance(value, list):
        return [_to_plain(item) for item in value]
    return _copy.deepcopy(value)


def structurally_equal(left: _typing.Any, right: _typing.Any) -> bool:
    """
    Compare two YAML values including mapping key order.

    Mapping keys and scalars must also share a type, so 1, 1.0 and True
    are all different. NaN equals NaN.
    """
    if isinstance(left, _abc.Mapping) and isinstance(right, _abc.Mapping):
        if len(left) != len(right):
            return False
        return all(
            structurally_equal(left_key, right_key)
            and structurally_equal(left[left_key], right[right_key])
            for left_key, right_key in zip(left, right)
        )
    if isinstance(left, (list, tuple)) and type(left) is type(right):
        return len(left) == len(right) and all(
            structurally_equal(a, b) for a, b in zip(left, right)
        )
    if type(left) is not type(right):
        return False
    if isinstance(left, float) and left != left:
        return right != right
    return bool(left == right)
