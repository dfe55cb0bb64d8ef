"""
YamlHash: an ordered YAML mapping with dotted-path lookup and deep merge.

Construction:
- YamlHash() / YamlHash(mapping): from nothing or an existing mapping
- YamlHash.from_str(text): from YAML text holding one mapping document
- YamlHash.from_file(path): from a YAML file holding one mapping document

Lookup:
- get(path): nested mapping at a dotted path, as a YamlHash
- get_yaml(path): raw value at a dotted path

Merge (always returns a new YamlHash):
- merge(other), merge_str(text), merge_file(path)

A YamlHash is never modified after construction. Instances may share
nested mappings internally; values handed out to callers are deep copies.
"""

from __future__ import annotations

import collections.abc as _abc
import copy as _copy
import logging as _logging
import os as _os
import pathlib as _pathlib
import typing as _typing

import yamlhash._errors as _errors
import yamlhash._mapping as _mapping
import yamlhash._merge as _merge
import yamlhash._path as _path
import yamlhash._yaml as _yaml
import yamlhash.settings as settings

_logger = _logging.getLogger(__name__)

PathLike: _typing.TypeAlias = str | _os.PathLike[str]


class YamlHash:
    """
    Improved YAML hash.

    Wraps an insertion-ordered YamlMapping parsed from YAML (or built from any
    mapping) and adds dotted-key lookup and order-preserving deep merge.

    Example:
        >>> fruit = YamlHash.from_str("fruit:\\n  apple: 1\\n  banana: 2")
        >>> fruit = fruit.merge_str("fruit:\\n  cherry:\\n    sweet: 1")
        >>> fruit.get_yaml("fruit.cherry.sweet")
        1
        >>> print(fruit)
        fruit:
          apple: 1
          banana: 2
          cherry:
            sweet: 1

    Equality is structural and order-sensitive: two hashes with the same
    items in a different order are not equal.
    """

    __slots__ = ("_data",)

    _data: _mapping.YamlMapping

    def __init__(self, data: _abc.Mapping[_typing.Any, _typing.Any] | None = None) -> None:
        """
        Create a YamlHash.

        Args:
            data: Mapping to wrap. It is deep-copied, with nested mappings
                converted to YamlMappings and tuples to lists. None creates an
                empty hash.

        Raises:
            TypeError: If data is not a mapping.
        """
        if data is None:
            self._data = _mapping.YamlMapping()
        elif isinstance(data, YamlHash):
            self._data = data._data
        elif isinstance(data, _abc.Mapping):
            self._data = _normalize(data)
        else:
            raise TypeError(f"YamlHash requires a mapping, got {type(data).__name__}")

    @classmethod
    def _wrap(cls, data: _mapping.YamlMapping) -> YamlHash:
        """Wrap a mapping this module owns, without copying it."""
        instance = cls.__new__(cls)
        instance._data = data
        return instance

    # -------------------------------------------------------------------------
    # Construction from text
    # -------------------------------------------------------------------------

    @classmethod
    def from_str(cls, text: str) -> YamlHash:
        """
        Create a YamlHash from YAML text.

        Raises:
            ParseError: If the text is not exactly one YAML mapping document.
        """
        return cls._wrap(_yaml.load_mapping(text))

    @classmethod
    def from_file(
        cls,
        path: PathLike,
        *,
        encoding: str | None = None,
        config: settings.Settings | None = None,
    ) -> YamlHash:
        """
        Create a YamlHash from a YAML file.

        Args:
            path: File to read.
            encoding: Text encoding; defaults to Settings.encoding.
            config: Settings to use instead of reading them from the environment.

        Raises:
            FileReadError: If the file cannot be read.
            ParseError: If the file is not exactly one YAML mapping document.
        """
        text = _read_file(path, encoding, config)
        return cls._wrap(_yaml.load_mapping(text, source=path))

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get(self, key: str) -> YamlHash:
        """
        Get the mapping at a dotted key as a YamlHash.

        The empty key returns a hash equal to this one.

        Raises:
            KeyNotFoundError: If any segment of the key is missing.
            TypeMismatchError: If the value, or a value on the way to it,
                is not a mapping.
        """
        value = _path.resolve(self._data, key)
        if not isinstance(value, _abc.Mapping):
            raise _errors.TypeMismatchError(key, type(value).__name__)
        return YamlHash._wrap(value)

    def get_yaml(self, key: str) -> _typing.Any:
        """
        Get the value at a dotted key, whatever its type.

        The empty key returns the whole mapping as a YamlMapping. The result is a
        deep copy and may be modified freely.

        Example:
            >>> YamlHash.from_str("fruit:\\n  cherry:\\n    tart: 2").get_yaml("fruit.cherry.tart")
            2

        Raises:
            KeyNotFoundError: If any segment of the key is missing.
            TypeMismatchError: If a value on the way to the key is not a mapping.
        """
        return _copy.deepcopy(_path.resolve(self._data, key))

    # -------------------------------------------------------------------------
    # Merge
    # -------------------------------------------------------------------------

    def merge(self, other: YamlHash | _abc.Mapping[_typing.Any, _typing.Any]) -> YamlHash:
        """
        Merge another hash into this one, returning a new YamlHash.

        Values from other win. Nested mappings present on both sides are
        merged recursively. Keys of this hash keep their positions; keys
        only in other are appended in other's order.

        Raises:
            TypeError: If other is not a mapping.
        """
        overlay = other if isinstance(other, YamlHash) else YamlHash(other)
        _logger.debug("Merging %d top-level keys into %d", len(overlay), len(self))
        return YamlHash._wrap(_merge.deep_merge(self._data, overlay._data))

    def merge_str(self, text: str) -> YamlHash:
        """
        Merge YAML text into this hash, returning a new YamlHash.

        Every document of a multi-document stream is merged in order.

        Raises:
            ParseError: If the text is malformed, empty, or holds a document
                that is not a mapping. Nothing is merged in that case.
        """
        return self._merge_documents(_yaml.load_documents(text))

    def merge_file(
        self,
        path: PathLike,
        *,
        encoding: str | None = None,
        config: settings.Settings | None = None,
    ) -> YamlHash:
        """
        Merge a YAML file into this hash, returning a new YamlHash.

        Args:
            path: File to read.
            encoding: Text encoding; defaults to Settings.encoding.
            config: Settings to use instead of reading them from the environment.

        Raises:
            FileReadError: If the file cannot be read.
            ParseError: If the file content cannot be merged (see merge_str).
        """
        text = _read_file(path, encoding, config)
        return self._merge_documents(_yaml.load_documents(text, source=path))

    def _merge_documents(self, documents: list[_mapping.YamlMapping]) -> YamlHash:
        data = self._data
        for document in documents:
            data = _merge.deep_merge(data, document)
        _logger.debug("Merged %d YAML document(s)", len(documents))
        return YamlHash._wrap(data)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[_typing.Any, _typing.Any]:
        """
        Return a deep copy of the mapping as plain dicts and lists.

        Raises:
            ValueError: If keys such as 1 and true, distinct in YAML, would
                collapse into one dict key.
        """
        return self._data.to_dict()

    def to_string(self, config: settings.Settings | None = None) -> str:
        """
        Render as block-style YAML without a leading `---` or trailing newline.

        Raises:
            RenderError: If a value cannot be represented as YAML.
        """
        if config is None:
            config = settings.Settings()
        return _yaml.dump(self._data, config)

    def keys(self) -> _abc.KeysView[_typing.Any]:
        """Top-level keys in order."""
        return self._data.keys()

    # -------------------------------------------------------------------------
    # Dunder methods
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"YamlHash({_mapping.format_items(self._data)})"

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> _typing.Iterator[_typing.Any]:
        return iter(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __eq__(self, other: object) -> bool:
        """Order-sensitive structural comparison with a YamlHash or mapping."""
        if isinstance(other, YamlHash):
            return _mapping.structurally_equal(self._data, other._data)
        if isinstance(other, _abc.Mapping):
            return _mapping.structurally_equal(self._data, _normalize(other))
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


def _normalize(value: _typing.Any) -> _typing.Any:
    """Deep copy a value, turning mappings into YamlMappings and tuples into lists."""
    if isinstance(value, YamlHash):
        return _copy.deepcopy(value._data)
    if isinstance(value, _abc.Mapping):
        return _mapping.YamlMapping(
            (_copy.deepcopy(key), _normalize(item)) for key, item in value.items()
        )
    if isinstance(value, (list, tuple)):
        return [_normalize(item) for item in value]
    return _copy.deepcopy(value)


def _read_file(
    path: PathLike,
    encoding: str | None,
    config: settings.Settings | None,
) -> str:
    """
    Read a whole text file.

    Raises:
        FileReadError: If the file cannot be read or decoded, or the
            encoding is unknown.
    """
    if encoding is None:
        if config is None:
            config = settings.Settings()
        encoding = config.encoding

    try:
        text = _pathlib.Path(path).read_text(encoding=encoding)
    except PermissionError as e:
        raise _errors.FileReadError(path, f"permission denied: {e}") from e
    except OSError as e:
        raise _errors.FileReadError(path, f"cannot read file: {e}") from e
    except UnicodeDecodeError as e:
        raise _errors.FileReadError(path, f"cannot decode as {encoding}: {e}") from e
    except LookupError as e:
        raise _errors.FileReadError(path, f"unknown encoding {encoding!r}") from e

    _logger.debug("Read %d characters from %s", len(text), path)
    return text
