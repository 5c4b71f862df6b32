"""Footnote collection and rendering.

A FootnoteCollector is created before the first footnote reference on a page,
hands out reference anchors while the page body is generated, and renders the
collected footnotes as a single accessible list where the page wants them.

Usage:
    >>> notes = FootnoteCollector()
    >>> para = f"<p>Built with {notes.add('Notula', 'A footnotes library.')}.</p>"
    >>> para
    '<p>Built with <a id="footnote-0" href="#footnote-footnote-0" aria-describedby="footnote-label">Notula</a>.</p>'
    >>> html = para + notes.render()

Markup:
    Each reference is an anchor whose ``id`` is the footnote id and whose
    ``href`` targets the list item ``{prefix}-{id}``. Each list item ends with a
    return link back to ``#{id}``. References are described by the section
    heading (``aria-describedby="{prefix}-label"``) so screen readers announce
    them as footnotes.

Lifecycle:
    One collector per page. ``render()`` may be called exactly once; after
    that the collector rejects further use.

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from notula import html
from notula.assets import AssetProvider, FootnotesAsset
from notula.config import FootnotesConfig, get_footnotes_config
from notula.errors import AlreadyRenderedError, DuplicateFootnoteError
from notula.stringbuilder import StringBuilder
from notula.utils.logger import get_logger

if TYPE_CHECKING:
    from notula.view import View

logger = get_logger(__name__)

# camelCase spellings of the add() control keys
_CONTROL_ALIASES: dict[str, str] = {
    "encodeReference": "encode_reference",
    "encodeFootnote": "encode_footnote",
}


def _normalize_controls(options: Mapping[str, Any] | None) -> dict[str, Any]:
    """Copy ``options`` with camelCase control keys renamed to snake_case."""
    return {_CONTROL_ALIASES.get(key, key): value for key, value in (options or {}).items()}


@dataclass(frozen=True, slots=True)
class FootnoteEntry:
    """A collected footnote.

    Attributes:
        id: Footnote id, also the id of its reference anchor
        content: Footnote markup (already encoded if encoding was on)
        target: Id of the rendered list item
    """

    id: str
    content: str
    target: str


class FootnoteCollector:
    """Collects footnotes for one page and renders them as a list.

    Thread Safety:
        Not thread-safe. A collector belongs to one page render; create one
        per page instead of sharing.

    """

    __slots__ = ("_config", "_footnotes", "_counter", "_rendered")

    def __init__(
        self,
        config: FootnotesConfig | None = None,
        *,
        view: View | None = None,
        asset_provider: AssetProvider | None = None,
        **overrides: Any,
    ) -> None:
        """Initialize collector.

        Args:
            config: Footnotes configuration (context default if None)
            view: Page view that the stylesheet bundle registers with
            asset_provider: Stylesheet provider (FootnotesAsset if None)
            **overrides: FootnotesConfig fields overriding ``config``
        """
        base = config if config is not None else get_footnotes_config()
        self._config = replace(base, **overrides) if overrides else base
        self._footnotes: dict[str, str] = {}
        self._counter = 0
        self._rendered = False

        if self._config.register_assets:
            if view is None:
                logger.debug("No view given; skipping footnotes asset registration")
            else:
                provider = asset_provider if asset_provider is not None else FootnotesAsset()
                provider.register(view)

    @property
    def config(self) -> FootnotesConfig:
        return self._config

    @property
    def rendered(self) -> bool:
        """Whether render() has been called."""
        return self._rendered

    @property
    def entries(self) -> tuple[FootnoteEntry, ...]:
        """Collected footnotes in render order."""
        prefix = self._config.prefix
        return tuple(
            FootnoteEntry(id=footnote_id, content=content, target=f"{prefix}-{footnote_id}")
            for footnote_id, content in self._footnotes.items()
        )

    def add(
        self,
        reference: str,
        footnote: str,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Add a footnote and return the markup for its reference.

        Args:
            reference: Text of the inline reference
            footnote: Text of the footnote
            options: Per-reference options. ``id`` sets the footnote id
                (otherwise ``{prefix}-{n}`` is generated), ``encode_reference``
                and ``encode_footnote`` (or ``encodeReference``/``encodeFootnote``)
                override encoding set in ``reference_options`` or the config, and
                every other key is an attribute of the reference anchor.

        Returns:
            Reference anchor markup

        Raises:
            AlreadyRenderedError: If the footnotes were already rendered
            DuplicateFootnoteError: If ``id`` is in use and ``strict_ids`` is on
        """
        if self._rendered:
            raise AlreadyRenderedError("add")

        config = self._config
        call_options = _normalize_controls(options)
        # Per-call options win over reference_options, which win over config
        attributes = html.merge_attributes(
            _normalize_controls(config.reference_options),
            call_options,
        )
        encode_footnote = attributes.pop("encode_footnote", config.encode_footnote)
        encode_reference = attributes.pop("encode_reference", config.encode_reference)

        footnote_id = call_options.get("id")
        if footnote_id is None:
            footnote_id = f"{config.prefix}-{self._counter}"
            self._counter += 1
        else:
            footnote_id = str(footnote_id)
        attributes["id"] = footnote_id

        if footnote_id in self._footnotes:
            if config.strict_ids:
                raise DuplicateFootnoteError(footnote_id)
            logger.warning("Footnote id %r added twice; replacing earlier footnote", footnote_id)

        self._footnotes[footnote_id] = (
            html.encode(footnote, config.double_encode) if encode_footnote else footnote
        )
        logger.debug("Added footnote %r", footnote_id)

        attributes["aria-describedby"] = config.label_id
        label = html.encode(reference, config.double_encode) if encode_reference else reference
        return html.a(label, f"#{config.prefix}-{footnote_id}", attributes)

    def render(self) -> str:
        """Render the collected footnotes and empty the collector.

        Returns:
            Footnotes section markup, or "" when nothing was added and
            ``render_empty`` is off

        Raises:
            AlreadyRenderedError: If called a second time
        """
        if self._rendered:
            raise AlreadyRenderedError("render")
        self._rendered = True

        config = self._config
        footnotes, self._footnotes = self._footnotes, {}
        if not footnotes and not config.render_empty:
            logger.debug("No footnotes to render")
            return ""

        attributes = {k: v for k, v in config.options.items() if k != "tag"}
        attributes["id"] = config.container_id
        tag = config.container_tag

        sb = StringBuilder()
        sb.append_line(html.begin_tag(tag, attributes))
        sb.append_line(html.tag(config.title_tag, config.title, {"id": config.label_id}))
        sb.append_line(html.ol(footnotes, item=self._render_item))
        sb.append_line(html.end_tag(tag))

        logger.debug("Rendered %d footnotes", len(footnotes))
        return sb.build()

    def _render_item(self, content: str, footnote_id: str) -> str:
        """Render one list item with its return link."""
        config = self._config
        back = html.a(
            config.return_text,
            f"#{footnote_id}",
            {"aria-label": config.return_aria_label, "class": "back-to-content"},
        )
        return html.tag("li", content + back, {"id": f"{config.prefix}-{footnote_id}"})

    def __len__(self) -> int:
        return len(self._footnotes)

    def __contains__(self, footnote_id: object) -> bool:
        return footnote_id in self._footnotes

    def __bool__(self) -> bool:
        # An empty collector is still a live collector
        return True

    def __repr__(self) -> str:
        state = "rendered" if self._rendered else f"{len(self._footnotes)} footnotes"
        return f"FootnoteCollector(prefix={self._config.prefix!r}, {state})"


@contextmanager
def footnote_scope(
    out: StringBuilder | list[str],
    config: FootnotesConfig | None = None,
    *,
    view: View | None = None,
    asset_provider: AssetProvider | None = None,
    **overrides: Any,
) -> Iterator[FootnoteCollector]:
    """Collect footnotes for a block of page generation.

    Opens a collector, yields it, and appends its rendered footnotes to
    ``out`` when the block finishes. If the block raises, nothing is rendered
    and the exception propagates. If the block already rendered the
    collector itself, nothing more is appended.

    Example:
        >>> page = StringBuilder()
        >>> with footnote_scope(page) as notes:
        ...     page.append(f"<p>{notes.add('Yes', 'Indeed.')}</p>")
        >>> html = page.build()  # paragraph followed by the footnotes section

    """
    collector = FootnoteCollector(config, view=view, asset_provider=asset_provider, **overrides)
    yield collector
    if not collector.rendered:
        out.append(collector.render())


__all__ = ["FootnoteCollector", "FootnoteEntry", "footnote_scope"]
