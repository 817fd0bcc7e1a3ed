"""Description Visitor for converting parsed HTML into chat markdown."""

import re
from typing import List, Optional

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

BOLD_TAGS = {"b", "strong"}
ITALIC_TAGS = {"i", "em"}
CODE_TAGS = {"code", "tt"}
STRIKE_TAGS = {"strike", "s", "del"}
HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}
BLOCK_TAGS = {"p", "div", "blockquote", "table", "dl", "ul", "ol", "pre"} | HEADING_TAGS

WHITESPACE = re.compile(r"\s+")
BLANK_LINES = re.compile(r"\n{3,}")
LIST_MARKER = re.compile(r"- |\d+\. ")
PRE_INDENT = "    "


class DescriptionVisitor:
    """Walks an HTML tree and builds a markdown string from it."""

    def __init__(self):
        self.parts: List[str] = []
        self.pre_depth = 0
        self.lists: List[dict] = []
        self.link_urls: List[Optional[str]] = []

    def visit(self, root) -> str:
        """
        Convert an HTML tree to markdown.

        Args:
            root: Parsed BeautifulSoup document or tag

        Returns:
            The markdown text
        """
        for child in root.children:
            self._traverse(child)
        return self.get_description()

    def get_description(self) -> str:
        text = "".join(self.parts)
        text = "\n".join(line.rstrip() for line in text.split("\n"))
        text = BLANK_LINES.sub("\n\n", text)
        return text.strip("\n")

    def _traverse(self, node) -> None:
        if isinstance(node, Comment):
            return
        if isinstance(node, NavigableString):
            self._text(str(node))
            return
        if not isinstance(node, Tag):
            return

        self.head(node)
        for child in node.children:
            self._traverse(child)
        self.tail(node)

    def head(self, node: Tag) -> None:
        name = node.name
        if name in BLOCK_TAGS:
            self._paragraph_break()

        if name in BOLD_TAGS or name in HEADING_TAGS:
            self.parts.append("**")
        elif name in ITALIC_TAGS:
            self.parts.append("*")
        elif name in CODE_TAGS:
            if not self.pre_depth:
                self.parts.append("`")
        elif name in STRIKE_TAGS:
            self.parts.append("---")
        elif name == "a":
            href = node.get("href")
            self.link_urls.append(href)
            if href:
                self.parts.append("[")
        elif name == "br":
            self.parts.append("\n")
        elif name == "pre":
            self.pre_depth += 1
            self.parts.append(PRE_INDENT)
        elif name in ("ul", "ol"):
            self.lists.append({"ordered": name == "ol", "count": 0})
        elif name == "li":
            self._list_item()

    def tail(self, node: Tag) -> None:
        name = node.name
        if name in BOLD_TAGS or name in HEADING_TAGS:
            self.parts.append("**")
        elif name in ITALIC_TAGS:
            self.parts.append("*")
        elif name in CODE_TAGS:
            if not self.pre_depth:
                self.parts.append("`")
        elif name in STRIKE_TAGS:
            self.parts.append("---")
        elif name == "a":
            href = self.link_urls.pop() if self.link_urls else None
            if href:
                self.parts.append(f"]({href})")
        elif name == "pre":
            self.pre_depth -= 1
        elif name in ("ul", "ol"):
            if self.lists:
                self.lists.pop()

        if name in BLOCK_TAGS:
            self._paragraph_break()

    def _text(self, text: str) -> None:
        if self.pre_depth:
            # the first newline after <pre> is not content
            if self.parts and self.parts[-1] == PRE_INDENT and text.startswith("\n"):
                text = text[1:]
            self.parts.append(text.replace("\n", "\n" + PRE_INDENT))
            return

        text = WHITESPACE.sub(" ", text)
        if self._at_line_start():
            text = text.lstrip(" ")
        if text:
            self.parts.append(text)

    def _list_item(self) -> None:
        current = self.lists[-1] if self.lists else {"ordered": False, "count": 0}
        current["count"] += 1
        marker = f"{current['count']}. " if current["ordered"] else "- "
        if not self._at_line_start():
            self.parts.append("\n")
        self.parts.append(marker)

    def _paragraph_break(self) -> None:
        if not self.parts:
            return
        tail = "".join(self.parts[-2:])
        if tail.endswith("\n\n"):
            return
        self.parts.append("\n" if tail.endswith("\n") else "\n\n")

    def _at_line_start(self) -> bool:
        for part in reversed(self.parts):
            if part:
                return part.endswith("\n") or LIST_MARKER.fullmatch(part) is not None
        return True


def html_to_markdown(html: str, parser: str = "html.parser") -> str:
    """Parse an HTML fragment and convert it to markdown."""
    document = BeautifulSoup(html, parser)
    return DescriptionVisitor().visit(document)
