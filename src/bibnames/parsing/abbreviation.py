from typing import TYPE_CHECKING

import regex

from bibnames.parsing.tokenizer import join_tokens, tokenize

if TYPE_CHECKING:
    from bibnames.model.name import Name

re_initials_only = regex.compile(r"^[\p{Lu}.\s-]+$")
"""Matches given names written as bare initials: ``J``, ``JP``, ``J.P.``, ``W-P``."""

re_initial = regex.compile(r"\p{Lu}|-")


def abbreviate_given_name(given_name: str | None) -> str | None:
    """
    Reduces every word of a given name to its initial followed by a period.

    Hyphenated parts keep their hyphen (``Tse-tung`` becomes ``T.-t.``) and a leading brace group holding the initial
    is kept whole (``{\\relax Ch}ristoph`` becomes ``{\\relax Ch}.``). Initials are left as they are.
    """
    if given_name is None:
        return None

    tokens = tokenize(given_name)
    if not tokens:
        return None

    return join_tokens(tokens, abbreviate=True)


def abbreviate(name: "Name") -> str | None:
    """Abbreviated given name of a person, or the unchanged family name of an institution."""
    if name.is_institution:
        return name.family_name

    return abbreviate_given_name(name.given_name)


def add_dot_if_abbreviation(given_name: str) -> str:
    """
    Spells out given names that only consist of initials, so ``JP`` and ``J.P.`` both become ``J. P.``.

    Anything containing a lower-case letter or markup is returned unchanged.
    """
    if not re_initials_only.match(given_name) or not regex.search(r"\p{Lu}", given_name):
        return given_name

    result = ""
    for m in re_initial.finditer(given_name):
        if m.group(0) == "-":
            result = result.rstrip() + "-"
            continue
        if result and not result.endswith("-"):
            result += " "
        result += m.group(0) + "."

    return result
