"""HTML helpers for footnote markup.

Entity encoding plus tag and attribute assembly. Attribute rendering is
deterministic: well-known attributes come first in a fixed order, the rest
follow in insertion order, so the same options always yield the same markup.

Example:
    >>> from notula.html import a, encode
    >>> encode("Fish & Chips")
    'Fish &amp; Chips'
    >>> a("Note", "#footnote-1", {"class": "ref"})
    '<a class="ref" href="#footnote-1">Note</a>'
"""

import html
import json
import re
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from notula.stringbuilder import StringBuilder

# Attributes rendered first, in this order; everything else keeps insertion order
ATTRIBUTE_ORDER: tuple[str, ...] = (
    "type",
    "id",
    "class",
    "name",
    "value",
    "href",
    "src",
    "for",
    "title",
    "alt",
    "role",
)

# Attributes whose dict values expand to prefixed attributes (data={"a": 1} -> data-a="1")
DATA_ATTRIBUTES: frozenset[str] = frozenset(("data", "data-ng", "ng", "aria"))

VOID_ELEMENTS: frozenset[str] = frozenset(
    ("area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "wbr")
)

_ENTITY_PATTERN = re.compile(r"&(?:[a-zA-Z][a-zA-Z0-9]*|#[0-9]+|#[xX][0-9a-fA-F]+);")


def _escape(text: str) -> str:
    return html.escape(text, quote=False).replace('"', "&quot;").replace("'", "&#039;")


def encode(text: object, double_encode: bool = True) -> str:
    """Encode special characters into HTML entities.

    Escapes &, <, >, double and single quotes. Single quotes become ``&#039;``.

    Args:
        text: Text to encode; other values are converted with str()
        double_encode: When False, entities already present in ``text``
            (``&amp;``, ``&#8617;``, ``&#x21a9;``) are left untouched

    Returns:
        Encoded text safe for element content and attribute values

    Examples:
        >>> encode("<b>x</b>")
        '&lt;b&gt;x&lt;/b&gt;'
        >>> encode("&amp; more", double_encode=False)
        '&amp; more'
    """
    text = str(text)
    if not text:
        return ""
    if double_encode:
        return _escape(text)

    sb = StringBuilder()
    pos = 0
    for match in _ENTITY_PATTERN.finditer(text):
        sb.append(_escape(text[pos : match.start()]))
        sb.append(match.group(0))
        pos = match.end()
    sb.append(_escape(text[pos:]))
    return sb.build()


def merge_attributes(*attribute_sets: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge attribute mappings, later values winning.

    Nested mappings (``data``, ``aria``) are merged recursively instead of
    replaced, so per-reference data attributes extend the defaults.
    """
    merged: dict[str, Any] = {}
    for attrs in attribute_sets:
        if not attrs:
            continue
        for key, value in attrs.items():
            current = merged.get(key)
            if isinstance(current, Mapping) and isinstance(value, Mapping):
                merged[key] = merge_attributes(current, value)
            else:
                merged[key] = value
    return merged


def _attribute_value(value: Any) -> str:
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def render_attributes(attributes: Mapping[str, Any] | None) -> str:
    """Render a mapping as HTML tag attributes.

    Rules:
        - ``True`` renders a bare attribute (``hidden``)
        - ``None`` and ``False`` omit the attribute
        - ``class`` accepts a list of class names
        - ``style`` accepts a mapping of property -> value
        - ``data``/``aria`` mappings expand to ``data-*``/``aria-*``

    Returns:
        Attribute string with a leading space, or "" when nothing renders
    """
    if not attributes:
        return ""

    ordered: dict[str, Any] = {}
    for name in ATTRIBUTE_ORDER:
        if name in attributes:
            ordered[name] = attributes[name]
    for name, value in attributes.items():
        if name not in ordered:
            ordered[name] = value

    sb = StringBuilder()
    for name, value in ordered.items():
        if value is None or value is False:
            continue
        if value is True:
            sb.append(f" {name}")
            continue
        match name:
            case _ if name in DATA_ATTRIBUTES and isinstance(value, Mapping):
                for sub_name, sub_value in value.items():
                    if sub_value is None or sub_value is False:
                        continue
                    if sub_value is True:
                        sb.append(f" {name}-{sub_name}")
                    else:
                        sb.append(f' {name}-{sub_name}="{encode(_attribute_value(sub_value))}"')
            case "class" if isinstance(value, (list, tuple)):
                if value:
                    sb.append(f' class="{encode(" ".join(str(v) for v in value))}"')
            case "style" if isinstance(value, Mapping):
                css = " ".join(f"{prop}: {val};" for prop, val in value.items())
                if css:
                    sb.append(f' style="{encode(css)}"')
            case _:
                sb.append(f' {name}="{encode(_attribute_value(value))}"')
    return sb.build()


def begin_tag(name: str, attributes: Mapping[str, Any] | None = None) -> str:
    """Render an opening tag."""
    return f"<{name}{render_attributes(attributes)}>"


def end_tag(name: str) -> str:
    """Render a closing tag."""
    return f"</{name}>"


def tag(name: str, content: str = "", attributes: Mapping[str, Any] | None = None) -> str:
    """Render a complete element.

    ``content`` is inserted as-is; encode it first if it is plain text.
    Void elements (``link``, ``br``, ...) ignore content and have no end tag.
    """
    if name.lower() in VOID_ELEMENTS:
        return begin_tag(name, attributes)
    return f"{begin_tag(name, attributes)}{content}{end_tag(name)}"


def a(text: str, href: str | None = None, attributes: Mapping[str, Any] | None = None) -> str:
    """Render a hyperlink.

    Args:
        text: Link body, inserted as-is
        href: Link target; overrides any ``href`` in ``attributes``
        attributes: Additional attributes
    """
    attrs = dict(attributes or {})
    if href is not None:
        attrs["href"] = href
    return tag("a", text, attrs)


def ol(
    items: Mapping[str, str] | Iterable[str],
    attributes: Mapping[str, Any] | None = None,
    *,
    item: Callable[[str, Any], str] | None = None,
) -> str:
    """Render an ordered list.

    Args:
        items: Item contents; a mapping passes its keys to ``item`` as the index
        attributes: Attributes for the ``<ol>`` element
        item: Callback ``(content, index) -> markup`` producing each ``<li>``

    Returns:
        ``<ol>`` markup, one item per line; ``<ol></ol>`` when empty
    """
    pairs = items.items() if isinstance(items, Mapping) else enumerate(items)
    lines: list[str] = []
    for index, content in pairs:
        if item is not None:
            lines.append(item(content, index))
        else:
            lines.append(tag("li", encode(content)))

    if not lines:
        return tag("ol", "", attributes)
    return tag("ol", "\n" + "\n".join(lines) + "\n", attributes)


__all__ = [
    "ATTRIBUTE_ORDER",
    "a",
    "begin_tag",
    "encode",
    "end_tag",
    "merge_attributes",
    "ol",
    "render_attributes",
    "tag",
]
