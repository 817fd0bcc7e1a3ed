"""Tests for Description Visitor."""

from doclet_archive.doclet_processor.description_visitor import html_to_markdown


class TestDescriptionVisitor:
    """Test cases for DescriptionVisitor."""

    def test_plain_text(self):
        """Test plain text passes through with whitespace collapsed."""
        assert html_to_markdown("Hello\n   world") == "Hello world"

    def test_inline_formatting(self):
        """Test bold, italics, code and strike-through."""
        html = "<b>bold</b> <strong>strong</strong> <i>it</i> <em>em</em> <code>x()</code> <tt>y</tt> <s>old</s>"

        assert html_to_markdown(html) == "**bold** **strong** *it* *em* `x()` `y` ---old---"

    def test_entities_are_decoded(self):
        """Test HTML entities become their characters."""
        assert html_to_markdown("<code>a &lt; b &amp;&amp; c</code>") == "`a < b && c`"

    def test_links(self):
        """Test links with and without href."""
        assert html_to_markdown('See <a href="https://example.com">the docs</a>.') == (
            "See [the docs](https://example.com)."
        )
        assert html_to_markdown('<a name="anchor">Anchor</a> text') == "Anchor text"

    def test_paragraphs_and_line_breaks(self):
        """Test paragraphs are separated by a blank line and <br> by a newline."""
        html = "Intro<p>One<br>Two</p><p>Three</p>"

        assert html_to_markdown(html) == "Intro\n\nOne\nTwo\n\nThree"

    def test_unordered_list(self):
        """Test list items start with a dash."""
        html = "Options:<ul>\n<li>first</li>\n<li>second</li>\n</ul>Done."

        assert html_to_markdown(html) == "Options:\n\n- first\n- second\n\nDone."

    def test_ordered_list(self):
        """Test ordered list items are numbered."""
        html = "<ol><li>one</li><li>two</li><li>three</li></ol>"

        assert html_to_markdown(html) == "1. one\n2. two\n3. three"

    def test_heading(self):
        """Test headings become bold lines."""
        assert html_to_markdown("<h3>Usage</h3>Call it.") == "**Usage**\n\nCall it."

    def test_preformatted_block(self):
        """Test <pre> content keeps its line breaks and is indented."""
        html = "Example:<pre>\nint x = 1;\nif (x &lt; 2) {\n  x++;\n}</pre>"

        assert html_to_markdown(html) == (
            "Example:\n\n    int x = 1;\n    if (x < 2) {\n      x++;\n    }"
        )

    def test_code_inside_pre_has_no_backticks(self):
        """Test code elements inside <pre> are not wrapped again."""
        assert html_to_markdown("Run:<pre><code>make all</code></pre>") == "Run:\n\n    make all"

    def test_comments_are_dropped(self):
        """Test HTML comments do not appear in the output."""
        assert html_to_markdown("Visible<!-- hidden --> text") == "Visible text"

    def test_unknown_tags_are_transparent(self):
        """Test tags without a mapping keep only their content."""
        assert html_to_markdown('<span class="x">inside</span> <font>font</font>') == "inside font"
