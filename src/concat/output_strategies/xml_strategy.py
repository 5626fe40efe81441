"""XML output strategy for the concatenated document.

The document has the following shape::

    <files>
    <file path="src/main.rs"><![CDATA[fn main() {}]]></file>
    <tree>
    Directory tree:
    src
      main.rs

    </tree>
    </files>

The ``<tree>`` element only appears when a tree listing was requested.
"""

from typing import Sequence
from xml.sax.saxutils import escape as xml_escape

from .base_strategy import OutputStrategy

_ATTRIBUTE_ENTITIES = {'"': "&quot;"}


class XMLOutputStrategy(OutputStrategy):
    """Output strategy that wraps each file in a ``<file>`` element with a CDATA block.

    File content and tree text are escaped with xml.sax.saxutils.escape, which replaces
    ``&``, ``<`` and ``>`` in that order so that ampersands introduced by the other
    substitutions are never escaped twice. The original text can therefore be recovered
    by reversing the three substitutions. Content is escaped even inside the CDATA block.

    The path attribute receives the same escaping plus ``"`` so the attribute stays
    well-formed.

    Note:
        Content containing the CDATA terminator ``]]>`` is escaped to ``]]&gt;`` and so
        cannot close the block early, but no other guard is applied to the block.

    Example:
        >>> strategy = XMLOutputStrategy()
        >>> print(strategy.format_header(), end='')
        <files>
        >>> strategy.format_start("src/main.rs")
        '<file path="src/main.rs"><![CDATA['
        >>> print(strategy.format_content('if a < b && c > d {}'))
        if a &lt; b &amp;&amp; c &gt; d {}
        >>> print(strategy.format_end(), end='')
        ]]></file>
        >>> print(strategy.format_footer(), end='')
        </files>
    """

    def format_header(self) -> str:
        return "<files>\n"

    def format_start(self, path: str) -> str:
        """Format the opening of a ``<file>`` element and its CDATA block.

        Example:
            >>> XMLOutputStrategy().format_start('a "quoted" & <odd> name.rs')
            '<file path="a &quot;quoted&quot; &amp; &lt;odd&gt; name.rs"><![CDATA['
        """
        return f'<file path="{xml_escape(path, _ATTRIBUTE_ENTITIES)}"><![CDATA['

    def format_content(self, content: str) -> str:
        return xml_escape(content)

    def format_end(self) -> str:
        return "]]></file>\n"

    def format_tree(self, lines: Sequence[str]) -> str:
        """Format the tree listing as an escaped ``<tree>`` element.

        Each line is terminated by a newline and the whole text is followed by one more
        newline before the closing tag.

        Example:
            >>> XMLOutputStrategy().format_tree(["Directory tree:", "a&b"])
            '<tree>\\nDirectory tree:\\na&amp;b\\n\\n</tree>\\n'
        """
        text = "".join(line + "\n" for line in lines)
        return f"<tree>\n{xml_escape(text)}\n</tree>\n"

    def format_footer(self) -> str:
        return "</files>\n"
