"""Single-wildcard pattern matching against path strings.

Patterns consist of literal characters plus ``*``, which matches zero or more of
any character. There is no escaping and no other metacharacter: ``?`` and ``[...]``
are literals, and consecutive ``*`` behave like a single one.

Matching is a left-to-right scan over the literal segments between wildcards.
Each segment is located at its first occurrence at or after the current scan
position, and the scan never backtracks. This means some inputs a full glob engine
would accept are rejected, for example ``*.rs`` against ``a.rs.rs``: the ``.rs``
segment is consumed at its first occurrence and the remaining ``.rs`` is left
unmatched.
"""

WILDCARD = "*"


def matches(pattern: str, text: str) -> bool:
    """Check whether a wildcard pattern matches a text.

    Args:
        pattern: Pattern using ``*`` as its only metacharacter.
        text: Text to match, typically a full path string.

    Returns:
        True if the pattern matches the text, False otherwise.

    Example:
        >>> matches("*", "")
        True
        >>> matches("*.rs", "src/main.rs")
        True
        >>> matches("src/*", "src/main.rs")
        True
        >>> matches("src/*.rs", "tests/main.rs")
        False
        >>> matches("main.rs", "src/main.rs")
        False
        >>> matches("*.rs", "a.rs.rs")
        False
    """
    if pattern == WILDCARD:
        return True

    anchored = not pattern.startswith(WILDCARD)
    rest = text
    first = True
    for segment in pattern.split(WILDCARD):
        if not segment:
            continue
        index = rest.find(segment)
        if index < 0:
            return False
        if first and anchored and index != 0:
            return False
        rest = rest[index + len(segment) :]  # noqa: E203
        first = False

    return pattern.endswith(WILDCARD) or not rest
