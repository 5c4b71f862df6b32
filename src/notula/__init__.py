"""
Notula: accessible, auto-numbered footnotes for generated HTML pages.

Register footnote references inline while a page is built, then render the
collected footnotes as one accessible list. Zero runtime dependencies.

Quick Start:
    >>> from notula import FootnoteCollector
    >>> notes = FootnoteCollector()
    >>> body = f"<p>Notula{notes.add('*', 'Latin for a little note.')} renders footnotes.</p>"
    >>> body += notes.render()

    >>> # Or as a scope around page generation
    >>> from notula import StringBuilder, footnote_scope
    >>> page = StringBuilder()
    >>> with footnote_scope(page) as notes:
    ...     page.append(f"<p>{notes.add('Yes', 'Indeed.')}</p>")
    >>> html = page.build()

Stylesheet:
    >>> from notula import View
    >>> view = View(base_url="/static")
    >>> notes = FootnoteCollector(view=view)
    >>> head = view.render_head()  # <link> for footnotes.css
"""

from notula.assets import AssetProvider, FootnotesAsset
from notula.collector import FootnoteCollector, FootnoteEntry, footnote_scope
from notula.config import (
    FootnotesConfig,
    footnotes_config_context,
    get_footnotes_config,
    reset_footnotes_config,
    set_footnotes_config,
)
from notula.errors import (
    AlreadyRenderedError,
    AssetError,
    ConfigError,
    DuplicateFootnoteError,
    NotulaError,
    RenderError,
)
from notula.html import encode
from notula.stringbuilder import StringBuilder
from notula.view import View

__version__ = "0.1.0"

__all__ = [
    # Collector
    "FootnoteCollector",
    "FootnoteEntry",
    "footnote_scope",
    # Configuration
    "FootnotesConfig",
    "footnotes_config_context",
    "get_footnotes_config",
    "reset_footnotes_config",
    "set_footnotes_config",
    # Assets
    "AssetProvider",
    "FootnotesAsset",
    "View",
    # Errors
    "AlreadyRenderedError",
    "AssetError",
    "ConfigError",
    "DuplicateFootnoteError",
    "NotulaError",
    "RenderError",
    # Utilities
    "StringBuilder",
    "encode",
    "__version__",
]
