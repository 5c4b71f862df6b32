"""ContextVar-based footnotes configuration for Notula.

A FootnotesConfig is an immutable bundle of construction options for
FootnoteCollector. Collectors snapshot their config when created, so the
context default only influences collectors created afterwards.

Usage:
    # Explicit config
    from notula import FootnoteCollector, FootnotesConfig

    notes = FootnoteCollector(FootnotesConfig(prefix="note", title="Notes"))

    # Keyword overrides on top of the context default
    notes = FootnoteCollector(encode_footnote=False)

    # Site-wide default for a block of work
    with footnotes_config_context(FootnotesConfig(title_tag="h3")):
        notes = FootnoteCollector()

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from notula.errors import ConfigError


def _frozen(mapping: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True, slots=True)
class FootnotesConfig:
    """Immutable footnotes configuration.

    Attributes:
        options: Attributes for the footnotes container element. A ``tag`` key
            selects the container tag (default ``section``) and an ``id`` key
            the container id (default ``"{prefix}s"``).
        prefix: Prefix for generated footnote ids and list item ids
        reference_options: Default attributes for every footnote reference
        return_text: Markup for the return link body
        return_aria_label: Accessible label for the return link
        title: Markup for the footnotes heading
        title_tag: Tag for the footnotes heading
        encode_reference: Encode reference text by default
        encode_footnote: Encode footnote text by default
        double_encode: Re-encode entities already present in encoded text
        register_assets: Register the stylesheet bundle with the view
        strict_ids: Raise DuplicateFootnoteError instead of overwriting
        render_empty: Render the section even when no footnotes were added

    """

    options: Mapping[str, Any] = field(default_factory=lambda: _frozen({"class": "footnotes"}))
    prefix: str = "footnote"
    reference_options: Mapping[str, Any] = field(default_factory=lambda: _frozen(None))
    return_text: str = "&larrhk;"
    return_aria_label: str = "Return to content"
    title: str = "Footnotes"
    title_tag: str = "h2"
    encode_reference: bool = True
    encode_footnote: bool = True
    double_encode: bool = True
    register_assets: bool = True
    strict_ids: bool = False
    render_empty: bool = True

    def __post_init__(self) -> None:
        # Freeze caller-supplied dicts so shared configs cannot be mutated
        object.__setattr__(self, "options", _frozen(self.options))
        object.__setattr__(self, "reference_options", _frozen(self.reference_options))

        if not self.prefix:
            raise ConfigError("prefix", "must be a non-empty string")
        if not self.title_tag:
            raise ConfigError("title_tag", "must be a non-empty tag name")
        if "tag" in self.options and not self.options["tag"]:
            raise ConfigError("options", "'tag' must be a non-empty tag name")

    @property
    def container_tag(self) -> str:
        """Tag for the footnotes container."""
        return str(self.options.get("tag", "section"))

    @property
    def container_id(self) -> str:
        """Id of the footnotes container."""
        return str(self.options.get("id") or f"{self.prefix}s")

    @property
    def label_id(self) -> str:
        """Id of the heading that references are described by."""
        return f"{self.prefix}-label"

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "FootnotesConfig":
        """Create FootnotesConfig from a dictionary.

        Useful when options come from templates or settings files. Unknown
        keys are silently ignored. camelCase spellings of the options
        (``encodeFootnote``, ``returnAriaLabel``, ...) are accepted.

        Example:
            >>> config = FootnotesConfig.from_dict({
            ...     "prefix": "note",
            ...     "encodeFootnote": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.encode_footnote
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered: dict[str, Any] = {}
        for key, value in config_dict.items():
            name = _CAMEL_ALIASES.get(key, key)
            if name in valid_fields:
                filtered[name] = value
        return cls(**filtered)


_CAMEL_ALIASES: dict[str, str] = {
    "referenceOptions": "reference_options",
    "returnText": "return_text",
    "returnAriaLabel": "return_aria_label",
    "titleTag": "title_tag",
    "encodeReference": "encode_reference",
    "encodeFootnote": "encode_footnote",
    "doubleEncode": "double_encode",
    "registerAssets": "register_assets",
    "strictIds": "strict_ids",
    "renderEmpty": "render_empty",
}

# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: FootnotesConfig = FootnotesConfig()

_footnotes_config: ContextVar[FootnotesConfig] = ContextVar(
    "footnotes_config",
    default=_DEFAULT_CONFIG,
)


def get_footnotes_config() -> FootnotesConfig:
    """Get the footnotes configuration for the current context."""
    return _footnotes_config.get()


def set_footnotes_config(config: FootnotesConfig) -> None:
    """Set the footnotes configuration for the current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _footnotes_config.set(config)


def reset_footnotes_config() -> None:
    """Reset to the default configuration."""
    _footnotes_config.set(_DEFAULT_CONFIG)


@contextmanager
def footnotes_config_context(config: FootnotesConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Example:
        >>> with footnotes_config_context(FootnotesConfig(prefix="note")):
        ...     notes = FootnoteCollector()
        >>> # Previous config restored, even if an exception was raised

    """
    previous = _footnotes_config.get()
    _footnotes_config.set(config)
    try:
        yield
    finally:
        _footnotes_config.set(previous)


__all__ = [
    "FootnotesConfig",
    "get_footnotes_config",
    "set_footnotes_config",
    "reset_footnotes_config",
    "footnotes_config_context",
]
