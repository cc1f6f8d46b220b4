import logging
import unicodedata
from dataclasses import dataclass

from bibnames.parsing.scanner import has_balanced_braces, is_empty_group, iter_depths, split_top_level

log = logging.getLogger(__name__)

TEX_LETTER_COMMANDS = frozenset({"aa", "ae", "l", "o", "oe", "i", "j", "AA", "AE", "L", "O", "OE"})
"""LaTeX commands that stand for a letter, e.g. ``{\\O}rsted``. Their own case decides the case of the word."""


@dataclass(frozen=True, slots=True)
class Token:
    text: str
    abbreviation: str
    """The word up to its first initial, including a leading brace group holding that initial."""
    term: str
    """``"-"`` if the word was ended by a hyphen, else ``" "``."""
    upper: bool


def _is_author_boundary(text: str, i: int) -> bool:
    return i < 0 or i >= len(text) or text[i].isspace() or text[i] == "~"


def _is_word_separator(c: str) -> bool:
    return c.isspace() or c in "~-"


def is_han(c: str) -> bool:
    return unicodedata.name(c, "").startswith("CJK")


def split_authors(text: str, semicolons: bool = False) -> list[str]:
    """
    Splits an author field into one segment per author.

    Authors are separated by the word ``and`` outside of any brace group, and by ``;`` as well if `semicolons` is set.
    Segments are trimmed and empty ones are left out.
    """
    if not has_balanced_braces(text):
        log.debug("Unbalanced braces in %r, splitting what is outside of them", text)

    segments = []
    start = 0
    for i, c, depth in iter_depths(text):
        if depth != 0:
            continue

        if semicolons and c == ";":
            segments.append(text[start:i])
            start = i + 1
        elif (
            c in "aA"
            and text[i : i + 3].lower() == "and"
            and _is_author_boundary(text, i - 1)
            and _is_author_boundary(text, i + 3)
        ):
            segments.append(text[start:i])
            start = i + 3

    segments.append(text[start:])
    return [s for s in (segment.strip() for segment in segments) if s]


def split_commas(segment: str) -> list[str]:
    """Splits one author segment at its top-level commas. Parts are trimmed, empty parts are kept."""
    return [part.strip() for part, _ in split_top_level(segment, lambda c: c == ",")]


def _scan_word(word: str) -> tuple[str, bool]:
    abbreviation_end = -1
    upper = True
    first_letter_found = False
    backslash = -1

    for i, c, depth in iter_depths(word):
        if first_letter_found and abbreviation_end < 0 and ((depth == 0 and c != "}") or c == "{"):
            abbreviation_end = i

        if not first_letter_found and backslash < 0 and c.isalpha():
            # A letter inside braces is protected, "{van den Bergen}" is not a prefix
            upper = (c.isupper() or is_han(c)) if depth == 0 else True
            first_letter_found = True

        if backslash >= 0 and not c.isalpha():
            if not first_letter_found:
                command = word[backslash + 1 : i]
                if command in TEX_LETTER_COMMANDS:
                    upper = command[0].isupper()
                    first_letter_found = True
            backslash = -1

        if c == "\\":
            backslash = i

    if abbreviation_end < 0:
        abbreviation_end = len(word)

    return word[:abbreviation_end], upper


def tokenize(part: str) -> list[Token]:
    """
    Splits one comma part into words.

    Words are separated by whitespace, ``~`` and ``-`` outside of brace groups, so ``Mu{\\d{h}}ammad`` and
    ``{\\relax Ch}ristoph`` stay single words.
    """
    tokens = []
    for word, separator in split_top_level(part, _is_word_separator):
        if not word or is_empty_group(word):
            continue

        abbreviation, upper = _scan_word(word)
        tokens.append(Token(word, abbreviation, "-" if separator == "-" else " ", upper))

    return tokens


def join_tokens(tokens: list[Token], abbreviate: bool = False) -> str:
    """Joins tokens back into text using their terms. With `abbreviate` every token is reduced to its initial."""
    result = ""
    for i, token in enumerate(tokens):
        if i > 0:
            result += tokens[i - 1].term
        result += (token.abbreviation + ".") if abbreviate else token.text

    return result
