"""Rendering-context handle for Notula.

A View stands in for the page being generated. Asset providers register
stylesheets with it while the body is built, and ``render_head()`` emits the
matching ``<link>`` or ``<style>`` tags once the body is done.

Usage:
    >>> view = View(base_url="/static")
    >>> notes = FootnoteCollector(view=view)
    >>> body = f"<p>See {notes.add('this', 'A note.')}.</p>" + notes.render()
    >>> view.render_head()
    '<link href="/static/footnotes.css" rel="stylesheet">'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from notula.html import tag
from notula.utils.logger import get_logger

if TYPE_CHECKING:
    from notula.assets import FootnotesAsset

logger = get_logger(__name__)


class View:
    """Collects stylesheets registered during one page render.

    Bundles are deduplicated by name: registering the footnotes bundle from
    several collectors on the same page links the stylesheet once.

    """

    __slots__ = ("_base_url", "_inline_css", "_bundles", "_css_files")

    def __init__(self, *, base_url: str = "", inline_css: bool = False) -> None:
        """Initialize view.

        Args:
            base_url: URL prefix for bundle stylesheets
            inline_css: Emit bundle stylesheets as ``<style>`` blocks
                instead of ``<link>`` tags
        """
        self._base_url = base_url.rstrip("/")
        self._inline_css = inline_css
        self._bundles: dict[str, FootnotesAsset] = {}
        self._css_files: list[str] = []

    @property
    def bundles(self) -> list[str]:
        """Names of registered bundles, in registration order."""
        return list(self._bundles)

    def register_asset_bundle(self, bundle: FootnotesAsset) -> bool:
        """Register an asset bundle.

        Returns:
            True if the bundle was new, False if already registered
        """
        if bundle.name in self._bundles:
            return False
        self._bundles[bundle.name] = bundle
        logger.debug("Registered asset bundle %r", bundle.name)
        return True

    def register_css_file(self, url: str) -> None:
        """Register an external stylesheet URL (linked as-is)."""
        if url not in self._css_files:
            self._css_files.append(url)

    def render_head(self) -> str:
        """Render stylesheet tags for everything registered.

        Raises:
            AssetError: If an inlined bundle stylesheet cannot be read
        """
        tags: list[str] = []
        for bundle in self._bundles.values():
            for filename in bundle.css:
                if self._inline_css:
                    tags.append(tag("style", bundle.read_css(filename)))
                else:
                    href = f"{self._base_url}/{filename}" if self._base_url else filename
                    tags.append(tag("link", attributes={"href": href, "rel": "stylesheet"}))
        for url in self._css_files:
            tags.append(tag("link", attributes={"href": url, "rel": "stylesheet"}))
        return "\n".join(tags)

    def __repr__(self) -> str:
        return f"View(bundles={self.bundles!r}, base_url={self._base_url!r})"


__all__ = ["View"]
