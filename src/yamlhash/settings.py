"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with YAMLHASH_ prefix
3. Field defaults

Example:
    YAMLHASH_INDENT=4 YAMLHASH_ENCODING=latin-1 python app.py
"""

import codecs as _codecs

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings


class Settings(_pydantic_settings.BaseSettings):
    """
    Options for reading YAML files and rendering YamlHash values.

    All settings can be overridden via environment variables with the
    YAMLHASH_ prefix, e.g. YAMLHASH_WIDTH=120.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="YAMLHASH_",
        extra="ignore",
    )

    encoding: str = "utf-8"
    """Text encoding used when reading YAML files."""

    indent: int = _pydantic.Field(default=2, ge=2, le=9)
    """Indentation step of rendered block mappings."""

    width: int = _pydantic.Field(default=80, ge=20)
    """Preferred line width of rendered YAML."""

    allow_unicode: bool = True
    """Write non-ASCII characters as-is instead of escaping them."""

    @_pydantic.field_validator("encoding")
    @classmethod
    def _validate_encoding(cls, v: str) -> str:
        """Reject encodings Python does not know."""
        try:
            _codecs.lookup(v)
        except LookupError:
            raise ValueError(f"unknown encoding: {v!r}") from None
        return v
