"""Markdown rendering helpers for question text shown in the console.

Question cards are displayed in ``QTextBrowser`` widgets, which understand a
subset of HTML 4 and no scripts, so the renderer produces plain fragments
and inline markup only. Raw HTML in question text is escaped.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into block-level HTML."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_inline(self, markdown_text: str) -> str:
        """Render a single line (e.g. an option) without wrapping paragraphs."""

        return self._markdown.renderInline(markdown_text.strip())


# Shared instance; only used from the Qt GUI thread.
renderer = MarkdownRenderer()
