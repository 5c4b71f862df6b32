"""Exception classes for Notula.

Provides standardized exceptions for error handling throughout Notula.
"""

from __future__ import annotations


class NotulaError(Exception):
    """Base exception for all Notula errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(NotulaError):
    """Invalid footnotes configuration.

    Raised when a FootnotesConfig value cannot produce valid markup,
    such as an empty id prefix or container tag.
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending config field
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Config '{field}': {message}")


class DuplicateFootnoteError(NotulaError):
    """A footnote id was added twice to the same collector.

    Only raised when the collector runs with ``strict_ids=True``; otherwise
    the later footnote replaces the earlier one.
    """

    def __init__(self, footnote_id: str) -> None:
        """Initialize duplicate footnote error.

        Args:
            footnote_id: The id that was already in use
        """
        self.footnote_id = footnote_id
        super().__init__(f"Footnote id {footnote_id!r} is already in use")


class RenderError(NotulaError):
    """Error during footnotes rendering."""

    pass


class AlreadyRenderedError(RenderError):
    """The collector was used after its footnotes were rendered.

    A collector renders exactly once. Both a second ``render()`` and an
    ``add()`` after rendering raise this error.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation}(): footnotes have already been rendered")


class AssetError(NotulaError):
    """Error loading a bundled asset.

    Raised when an asset bundle's stylesheet cannot be located or read.
    """

    def __init__(self, bundle: str, filename: str, message: str) -> None:
        """Initialize asset error.

        Args:
            bundle: Name of the asset bundle (e.g., "footnotes")
            filename: File within the bundle that failed
            message: Description of the failure
        """
        self.bundle = bundle
        self.filename = filename
        super().__init__(f"Asset bundle '{bundle}' ({filename}): {message}")
