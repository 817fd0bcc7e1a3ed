"""Markup Normalizer for turning documentation comments into chat markdown."""

from typing import Iterable

from .description_visitor import html_to_markdown
from .model import Tag

CODE_TAG = "@code"
LINK_TAGS = ("@link", "@linkplain")
LITERAL_TAG = "@literal"


def escape_html(text: str) -> str:
    """Escape a string for safe inclusion in HTML."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


class MarkupNormalizer:
    """Converts the inline tags of a documentation comment to markdown."""

    def __init__(self, parser: str = "html.parser"):
        self.parser = parser

    def to_markdown(self, inline_tags: Iterable[Tag]) -> str:
        """
        Convert a comment's inline content to markdown.

        Inline tags such as {@code ...} are first folded into HTML so the whole
        comment can be parsed as one HTML fragment, then the parsed tree is
        rendered as markdown.

        Args:
            inline_tags: The comment's inline fragments in document order

        Returns:
            The markdown text
        """
        html = self.to_html(inline_tags)
        return html_to_markdown(html, self.parser)

    def to_html(self, inline_tags: Iterable[Tag]) -> str:
        """Combine the inline fragments into a single HTML string."""
        parts = []
        for tag in inline_tags or []:
            text = tag.text or ""
            if tag.name == CODE_TAG:
                parts.append(f"<code>{escape_html(text)}</code>")
            elif tag.name in LINK_TAGS:
                # TODO: render as an <a> element once link targets can be resolved to URLs
                _, space, label = text.partition(" ")
                parts.append(label if space else text)
            elif tag.name == LITERAL_TAG:
                parts.append(escape_html(text))
            else:
                parts.append(text)
        return "".join(parts)
