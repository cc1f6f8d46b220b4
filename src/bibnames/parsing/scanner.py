from collections.abc import Callable, Iterator


def iter_depths(text: str) -> Iterator[tuple[int, str, int]]:
    """
    Yields ``(index, char, depth)`` for every character of `text`.

    `depth` is the brace nesting level the character sits in. Both braces of a group report the level outside of it,
    so a top-level ``{`` and its matching ``}`` are at depth 0 while everything between them is at depth 1 or deeper.
    A ``}`` without an open group is reported at depth 0 and otherwise ignored. An unmatched ``{`` keeps the level
    raised until the end of the text.
    """
    depth = 0
    for i, c in enumerate(text):
        if c == "{":
            yield i, c, depth
            depth += 1
        elif c == "}" and depth > 0:
            depth -= 1
            yield i, c, depth
        else:
            yield i, c, depth


def matching_brace(text: str, start: int) -> int:
    """Returns the index of the ``}`` closing the group opened at `start`, or -1."""
    if start >= len(text) or text[start] != "{":
        return -1

    depth = 0
    for i in range(start, len(text)):
        c = text[i]
        if c == "{":
            depth += 1
        elif c == "}":
            depth -= 1
            if depth == 0:
                return i

    return -1


def is_wrapped(text: str) -> bool:
    """Tells whether `text` is a single brace group spanning its full extent, like ``{JabRef Developers}``."""
    return len(text) >= 2 and matching_brace(text, 0) == len(text) - 1


def is_empty_group(text: str) -> bool:
    """Tells whether `text` holds nothing but braces and whitespace, like ``{}``."""
    return has_balanced_braces(text) and not text.replace("{", "").replace("}", "").strip()


def has_balanced_braces(text: str) -> bool:
    depth = 0
    for c in text:
        if c == "{":
            depth += 1
        elif c == "}":
            depth -= 1
            if depth < 0:
                return False

    return depth == 0


def split_top_level(text: str, is_separator: Callable[[str], bool]) -> list[tuple[str, str]]:
    """
    Splits `text` at depth-0 characters for which `is_separator` holds.

    Returns ``(piece, separator)`` pairs, where `separator` is the character that ended the piece (empty for the
    last one). Pieces are not trimmed and may be empty.
    """
    result = []
    start = 0
    for i, c, depth in iter_depths(text):
        if depth == 0 and is_separator(c):
            result.append((text[start:i], c))
            start = i + 1

    result.append((text[start:], ""))
    return result
