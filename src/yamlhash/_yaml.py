"""
YAML loading and dumping for YamlHash.

Provides:
- HashLoader: SafeLoader that builds YamlMappings and rejects duplicate and
  unhashable mapping keys
- load_documents / load_mapping: parse text into top-level mappings
- HashDumper: SafeDumper that never emits anchors or aliases
- dump: render a mapping as block-style YAML

PyYAML does all of the actual parsing and emitting. This module only
enforces the shape YamlHash needs (every document is a mapping) and turns
library errors into ParseError / RenderError.
"""

from __future__ import annotations

import collections.abc as _abc
import os as _os
import typing as _typing

import yaml as _yaml

import yamlhash._errors as _errors
import yamlhash._mapping as _mapping

if _typing.TYPE_CHECKING:
    import yamlhash.settings as settings

_MERGE_TAG = "tag:yaml.org,2002:merge"


class HashLoader(_yaml.SafeLoader):
    """YAML loader that keeps mapping keys unique.

    SafeLoader silently lets the last occurrence of a repeated key win.
    HashLoader raises a ConstructorError instead, except for keys pulled in
    through a `<<` merge key, which explicit keys are allowed to override.
    """

    def construct_mapping(
        self, node: _yaml.MappingNode, deep: bool = False
    ) -> _mapping.YamlMapping:
        """Override to reject duplicate and unhashable keys."""
        if not isinstance(node, _yaml.MappingNode):
            raise _yaml.constructor.ConstructorError(
                None,
                None,
                f"expected a mapping node, but found {node.id}",
                node.start_mark,
            )

        explicit_count = sum(1 for key_node, _ in node.value if key_node.tag != _MERGE_TAG)
        self.flatten_mapping(node)
        # flatten_mapping puts inherited pairs in front of the explicit ones
        inherited_count = len(node.value) - explicit_count

        result = _mapping.YamlMapping()
        explicit_keys = _mapping.YamlMapping()
        for index, (key_node, value_node) in enumerate(node.value):
            key = self.construct_object(key_node, deep=True)
            if not isinstance(key, _abc.Hashable):
                raise _yaml.constructor.ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    "found unhashable key",
                    key_node.start_mark,
                )
            if index >= inherited_count:
                if key in explicit_keys:
                    raise _yaml.constructor.ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"found duplicate key {key!r}",
                        key_node.start_mark,
                    )
                explicit_keys[key] = None
            result[key] = self.construct_object(value_node, deep=deep)

        return result

    def construct_yaml_map(
        self, node: _yaml.MappingNode
    ) -> _typing.Iterator[_mapping.YamlMapping]:
        data = _mapping.YamlMapping()
        yield data
        data.update(self.construct_mapping(node))


HashLoader.add_constructor("tag:yaml.org,2002:map", HashLoader.construct_yaml_map)


class HashDumper(_yaml.SafeDumper):
    """SafeDumper that writes repeated objects out in full instead of as aliases."""

    def ignore_aliases(self, data: _typing.Any) -> bool:
        return True


HashDumper.add_representer(_mapping.YamlMapping, HashDumper.represent_dict)


def load_documents(
    text: str,
    source: str | _os.PathLike[str] | None = None,
) -> list[_mapping.YamlMapping]:
    """
    Parse every document of a YAML stream.

    Args:
        text: YAML content, possibly several `---` separated documents.
        source: Where the text came from, used in error messages.

    Returns:
        One YamlMapping per document, in stream order.

    Raises:
        ParseError: If the text is malformed, holds no document, or any
            document is not a mapping.
    """
    try:
        documents = list(_yaml.load_all(text, Loader=HashLoader))
    except _yaml.YAMLError as e:
        raise _errors.ParseError(f"invalid YAML: {e}", source) from e

    if not documents:
        raise _errors.ParseError("no YAML document found", source)

    for document in documents:
        if not isinstance(document, _mapping.YamlMapping):
            type_name = type(document).__name__
            raise _errors.ParseError(f"YAML document is not a hash (got {type_name})", source)

    return documents


def load_mapping(
    text: str,
    source: str | _os.PathLike[str] | None = None,
) -> _mapping.YamlMapping:
    """
    Parse text that must hold exactly one YAML mapping document.

    Raises:
        ParseError: If the text does not hold exactly one mapping document.
    """
    documents = load_documents(text, source)
    if len(documents) != 1:
        raise _errors.ParseError(
            f"expected a single YAML document, found {len(documents)}", source
        )
    return documents[0]


def dump(data: _abc.Mapping[_typing.Any, _typing.Any], config: settings.Settings) -> str:
    """
    Render a mapping as block-style YAML.

    Keys keep their insertion order. The trailing newline the emitter adds
    is removed; an empty mapping renders as `{}`.

    Raises:
        RenderError: If a value cannot be represented by HashDumper.
    """
    try:
        text = _yaml.dump(
            data,
            Dumper=HashDumper,
            default_flow_style=False,
            sort_keys=False,
            indent=config.indent,
            width=config.width,
            allow_unicode=config.allow_unicode,
        )
    except _yaml.YAMLError as e:
        raise _errors.RenderError(f"cannot render mapping as YAML: {e}") from e

    if text.endswith("\n"):
        text = text[:-1]
    return text
