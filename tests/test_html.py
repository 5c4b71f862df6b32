"""Tests for HTML encoding and tag helpers."""

import pytest

from notula.html import (
    a,
    begin_tag,
    encode,
    end_tag,
    merge_attributes,
    ol,
    render_attributes,
    tag,
)


class TestEncode:
    """Tests for encode()."""

    def test_special_characters(self) -> None:
        assert encode("<b>x</b>") == "&lt;b&gt;x&lt;/b&gt;"
        assert encode("Tom & Jerry's \"show\"") == "Tom &amp; Jerry&#039;s &quot;show&quot;"

    def test_empty(self) -> None:
        assert encode("") == ""

    def test_non_string_values(self) -> None:
        assert encode(0) == "0"
        assert encode(3.5) == "3.5"
        assert encode(None) == "None"

    def test_plain_text_unchanged(self) -> None:
        assert encode("Hello, world") == "Hello, world"

    def test_double_encode_default(self) -> None:
        assert encode("&amp;") == "&amp;amp;"

    @pytest.mark.parametrize(
        "entity",
        ["&amp;", "&larrhk;", "&#8617;", "&#x21a9;", "&#X21A9;"],
    )
    def test_double_encode_off_keeps_entities(self, entity: str) -> None:
        assert encode(f"a {entity} <b>", double_encode=False) == f"a {entity} &lt;b&gt;"

    def test_double_encode_off_bare_ampersand(self) -> None:
        assert encode("R & D", double_encode=False) == "R &amp; D"
        assert encode("&nosemicolon", double_encode=False) == "&amp;nosemicolon"


class TestRenderAttributes:
    """Tests for render_attributes()."""

    def test_empty(self) -> None:
        assert render_attributes({}) == ""
        assert render_attributes(None) == ""

    def test_known_attributes_first(self) -> None:
        attrs = {"aria-label": "x", "href": "#a", "class": "c", "id": "i"}
        assert render_attributes(attrs) == ' id="i" class="c" href="#a" aria-label="x"'

    def test_unknown_attributes_keep_insertion_order(self) -> None:
        assert render_attributes({"rel": "a", "lang": "b"}) == ' rel="a" lang="b"'

    def test_boolean_and_none(self) -> None:
        attrs = {"hidden": True, "title": None, "disabled": False}
        assert render_attributes(attrs) == " hidden"

    def test_class_list(self) -> None:
        assert render_attributes({"class": ["a", "b"]}) == ' class="a b"'
        assert render_attributes({"class": []}) == ""

    def test_style_mapping(self) -> None:
        attrs = {"style": {"color": "red", "margin": "0"}}
        assert render_attributes(attrs) == ' style="color: red; margin: 0;"'

    def test_data_mapping(self) -> None:
        attrs = {"data": {"id": 5, "cfg": {"a": 1}, "on": True, "off": False}}
        assert render_attributes(attrs) == (
            ' data-id="5" data-cfg="{&quot;a&quot;:1}" data-on'
        )

    def test_aria_mapping(self) -> None:
        assert render_attributes({"aria": {"hidden": "true"}}) == ' aria-hidden="true"'

    def test_values_encoded(self) -> None:
        assert render_attributes({"title": '"quoted" <tag>'}) == (
            ' title="&quot;quoted&quot; &lt;tag&gt;"'
        )

    def test_numbers(self) -> None:
        assert render_attributes({"value": 3}) == ' value="3"'


class TestTags:
    """Tests for tag builders."""

    def test_tag(self) -> None:
        assert tag("p", "Hi", {"class": "x"}) == '<p class="x">Hi</p>'

    def test_tag_content_not_encoded(self) -> None:
        assert tag("p", "<b>bold</b>") == "<p><b>bold</b></p>"

    def test_void_element(self) -> None:
        assert tag("link", "ignored", {"rel": "stylesheet"}) == '<link rel="stylesheet">'

    def test_begin_end(self) -> None:
        assert begin_tag("section", {"id": "s"}) == '<section id="s">'
        assert end_tag("section") == "</section>"

    def test_anchor(self) -> None:
        assert a("Go", "#top") == '<a href="#top">Go</a>'

    def test_anchor_href_argument_wins(self) -> None:
        assert a("Go", "#top", {"href": "#other"}) == '<a href="#top">Go</a>'

    def test_anchor_without_href(self) -> None:
        assert a("Go", attributes={"id": "x"}) == '<a id="x">Go</a>'


class TestOrderedList:
    """Tests for ol()."""

    def test_items_encoded(self) -> None:
        assert ol(["a<b", "c"]) == "<ol>\n<li>a&lt;b</li>\n<li>c</li>\n</ol>"

    def test_empty(self) -> None:
        assert ol([]) == "<ol></ol>"

    def test_mapping_with_item_callback(self) -> None:
        result = ol({"k": "v"}, {"class": "x"}, item=lambda content, index: f"<li>{index}:{content}</li>")
        assert result == '<ol class="x">\n<li>k:v</li>\n</ol>'

    def test_sequence_indexes(self) -> None:
        result = ol(["a", "b"], item=lambda content, index: f"<li>{index}</li>")
        assert result == "<ol>\n<li>0</li>\n<li>1</li>\n</ol>"


class TestMergeAttributes:
    """Tests for merge_attributes()."""

    def test_later_wins(self) -> None:
        assert merge_attributes({"a": 1, "b": 1}, {"b": 2}) == {"a": 1, "b": 2}

    def test_nested_merge(self) -> None:
        merged = merge_attributes({"data": {"a": 1}}, {"data": {"b": 2}})
        assert merged == {"data": {"a": 1, "b": 2}}

    def test_none_skipped(self) -> None:
        assert merge_attributes(None, {"a": 1}, None) == {"a": 1}

    def test_inputs_not_mutated(self) -> None:
        first = {"data": {"a": 1}}
        merge_attributes(first, {"data": {"b": 2}})
        assert first == {"data": {"a": 1}}
