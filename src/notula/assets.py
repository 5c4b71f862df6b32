"""Asset bundles for Notula.

The footnotes stylesheet is shipped inside the package and handed to the
page through an asset provider. A provider is anything with
``register(view)``; the built-in FootnotesAsset registers itself as a bundle
so the view can link or inline ``footnotes.css`` in the page head.

Custom providers:
    class CdnFootnotesAsset:
        def register(self, view: View) -> None:
            view.register_css_file("https://cdn.example.com/footnotes.css")

    notes = FootnoteCollector(view=view, asset_provider=CdnFootnotesAsset())

Set ``register_assets=False`` to provide your own CSS instead.
"""

from __future__ import annotations

from importlib import resources
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from notula.errors import AssetError
from notula.utils.logger import get_logger

if TYPE_CHECKING:
    from notula.view import View

logger = get_logger(__name__)


@runtime_checkable
class AssetProvider(Protocol):
    """Protocol for stylesheet providers.

    Called once per collector, at construction, with the page's view.
    """

    def register(self, view: View) -> None:
        """Register assets with the view."""
        ...


class FootnotesAsset:
    """Asset bundle for the footnotes stylesheet.

    Attributes:
        name: Bundle name; views register each name once
        package: Package holding the bundle files
        css: Stylesheet file names within ``package``

    """

    __slots__ = ("name", "package", "css")

    def __init__(
        self,
        *,
        name: str = "footnotes",
        package: str = "notula.static",
        css: tuple[str, ...] = ("footnotes.css",),
    ) -> None:
        self.name = name
        self.package = package
        self.css = css

    def register(self, view: View) -> None:
        """Register this bundle with ``view``."""
        view.register_asset_bundle(self)

    def read_css(self, filename: str) -> str:
        """Read one of the bundle's stylesheets.

        Raises:
            AssetError: If the file is not part of the bundle or cannot be read
        """
        if filename not in self.css:
            raise AssetError(self.name, filename, "not part of this bundle")
        try:
            return resources.files(self.package).joinpath(filename).read_text(encoding="utf-8")
        except (FileNotFoundError, ModuleNotFoundError) as e:
            raise AssetError(self.name, filename, str(e)) from e

    def __repr__(self) -> str:
        return f"FootnotesAsset(name={self.name!r}, css={self.css!r})"


__all__ = ["AssetProvider", "FootnotesAsset"]
