import pytest

from concat.output_strategies.xml_strategy import XMLOutputStrategy


@pytest.fixture
def xml_strategy():
    """Fixture to provide a clean XMLOutputStrategy instance for each test."""
    return XMLOutputStrategy()


def test_format_header_and_footer(xml_strategy):
    assert xml_strategy.format_header() == "<files>\n"
    assert xml_strategy.format_footer() == "</files>\n"


def test_format_start(xml_strategy):
    """Test the format_start method with various inputs."""
    assert xml_strategy.format_start("test.py") == '<file path="test.py"><![CDATA['

    # Special characters in the path are escaped, including quotes
    assert xml_strategy.format_start("test & file.py") == '<file path="test &amp; file.py"><![CDATA['
    assert xml_strategy.format_start('say "hi".txt') == '<file path="say &quot;hi&quot;.txt"><![CDATA['


def test_format_content(xml_strategy):
    """Test the format_content method with various inputs."""
    assert xml_strategy.format_content("Hello, world!") == "Hello, world!"
    assert xml_strategy.format_content("<test>&</test>") == "&lt;test&gt;&amp;&lt;/test&gt;"
    assert xml_strategy.format_content("line1\r\nline2\n") == "line1\r\nline2\n"

    # Existing entities are escaped again rather than passed through
    assert xml_strategy.format_content("&amp;") == "&amp;amp;"

    # Quotes are left alone in content
    assert xml_strategy.format_content("'\"") == "'\""


def test_cdata_terminator_in_content_is_neutralized(xml_strategy):
    assert xml_strategy.format_content("a ]]> b") == "a ]]&gt; b"


def test_format_end(xml_strategy):
    assert xml_strategy.format_end() == "]]></file>\n"


def test_format_tree(xml_strategy):
    lines = ["Directory tree:", "src", "  a<b>.rs"]
    assert xml_strategy.format_tree(lines) == "<tree>\nDirectory tree:\nsrc\n  a&lt;b&gt;.rs\n\n</tree>\n"


@pytest.mark.parametrize("content", ["", "plain", "a < b && c > d", "&lt; already escaped", "]]>", "\r\n\t"])
def test_escaping_is_reversible(xml_strategy, content):
    escaped = xml_strategy.format_content(content)
    restored = escaped.replace("&gt;", ">").replace("&lt;", "<").replace("&amp;", "&")
    assert restored == content
