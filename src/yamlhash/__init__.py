"""
yamlhash - Improved YAML hash

An ordered YAML mapping with dotted-key lookup and order-preserving
deep merge, built on PyYAML.

Example:
    >>> import yamlhash
    >>> base = yamlhash.YamlHash.from_str("a: 1\\nb:\\n  x: 1\\n  y: 2")
    >>> merged = base.merge_str("b:\\n  y: 9\\n  z: 3\\nc: 4")
    >>> merged.get_yaml("b")
    YamlMapping({'x': 1, 'y': 9, 'z': 3})
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("yamlhash")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)

from yamlhash._core import YamlHash  # noqa: E402
from yamlhash._errors import (  # noqa: E402
    FileReadError,
    KeyNotFoundError,
    ParseError,
    RenderError,
    TypeMismatchError,
    YamlHashError,
)
from yamlhash._mapping import YamlMapping  # noqa: E402
from yamlhash.settings import Settings  # noqa: E402

__all__ = [
    "__version__",
    "__version_info__",
    "FileReadError",
    "KeyNotFoundError",
    "ParseError",
    "RenderError",
    "Settings",
    "TypeMismatchError",
    "YamlHash",
    "YamlHashError",
    "YamlMapping",
]
