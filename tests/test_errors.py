"""Tests for the exception hierarchy."""

import pytest

from notula.errors import (
    AlreadyRenderedError,
    AssetError,
    ConfigError,
    DuplicateFootnoteError,
    NotulaError,
    RenderError,
)


class TestErrorMessages:
    def test_duplicate(self) -> None:
        err = DuplicateFootnoteError("custom")
        assert err.footnote_id == "custom"
        assert str(err) == "Footnote id 'custom' is already in use"

    def test_already_rendered(self) -> None:
        err = AlreadyRenderedError("add")
        assert err.operation == "add"
        assert "add()" in str(err)

    def test_config(self) -> None:
        err = ConfigError("prefix", "must be a non-empty string")
        assert str(err) == "Config 'prefix': must be a non-empty string"

    def test_asset(self) -> None:
        err = AssetError("footnotes", "footnotes.css", "not found")
        assert str(err) == "Asset bundle 'footnotes' (footnotes.css): not found"


class TestHierarchy:
    @pytest.mark.parametrize(
        "err",
        [
            DuplicateFootnoteError("x"),
            AlreadyRenderedError("render"),
            ConfigError("prefix", "bad"),
            AssetError("b", "f", "m"),
            RenderError("r"),
        ],
    )
    def test_all_are_notula_errors(self, err: Exception) -> None:
        assert isinstance(err, NotulaError)

    def test_already_rendered_is_render_error(self) -> None:
        assert issubclass(AlreadyRenderedError, RenderError)
