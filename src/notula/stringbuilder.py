"""StringBuilder for assembling footnote markup.

Collects markup fragments in a list and joins them once, so building a
footnotes section with many entries stays linear in output size.

Also serves as the output buffer for ``footnote_scope()``: page content is
appended while footnotes are collected, and the rendered list is appended
when the scope closes.

"""

from __future__ import annotations


class StringBuilder:
    """Markup fragment accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<ol>").append("<li>One</li>").append("</ol>")
            >>> sb.build()
            '<ol><li>One</li></ol>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a fragment (empty strings are skipped).

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def append_line(self, s: str = "") -> StringBuilder:
        """Append a fragment followed by a newline."""
        if s:
            self._parts.append(s)
        self._parts.append("\n")
        return self

    def build(self) -> str:
        """Join all fragments into the final markup."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of fragments (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
