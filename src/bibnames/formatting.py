"""
Rendering of parsed names.

Every style renders zero names as the empty string. Institutions are always rendered as written.
"""

from collections.abc import Callable, Sequence
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bibnames.model.name import Name


class Style(Enum):
    FIRST_LAST = "first-last"
    """``John von Neumann, John Smith and Peter Black Brown``"""
    LAST_FIRST = "last-first"
    """``von Neumann, John, Smith, John and Black Brown, Peter``"""
    LAST_NAMES = "last-names"
    """``von Neumann, Smith and Black Brown``"""
    NATBIB = "natbib"
    """``von Neumann et al.``"""
    ALPHABETIZATION = "alphabetization"
    """``Neumann, J. and Smith, J. and Black Brown, P.``"""
    FIRST_LAST_AND = "first-last-and"
    """``John von Neumann and John Smith and Peter Black Brown``"""
    LAST_FIRST_AND = "last-first-and"
    """``von Neumann, John and Smith, John and Black Brown, Peter``"""
    LAST_FIRST_FIRST_LAST_AND = "last-first-first-last-and"
    """``von Neumann, John and John Smith and Peter Black Brown``"""

    def __str__(self) -> str:
        return self.value


def prefix_and_family(name: "Name") -> str:
    if name.is_institution or name.name_prefix is None:
        return name.family_name or ""

    if name.family_name is None:
        return name.name_prefix

    return f"{name.name_prefix} {name.family_name}"


def given_family(name: "Name", abbreviate: bool) -> str:
    if name.is_institution:
        return name.family_name or ""

    given = name.given_name_abbreviated if abbreviate else name.given_name
    result = f"{given} " if given is not None else ""
    result += prefix_and_family(name)
    if name.name_suffix is not None:
        result += f", {name.name_suffix}"

    return result


def family_given(name: "Name", abbreviate: bool) -> str:
    if name.is_institution:
        return name.family_name or ""

    result = prefix_and_family(name)
    if name.name_suffix is not None:
        result += f", {name.name_suffix}"

    given = name.given_name_abbreviated if abbreviate else name.given_name
    if given is not None:
        result += f", {given}"

    return result


def name_for_alphabetization(name: "Name") -> str:
    if name.is_institution:
        return name.family_name or ""

    parts = [p for p in (name.family_name, name.name_suffix, name.given_name_abbreviated) if p is not None]
    return ", ".join(parts)


def join_and(items: Sequence[str]) -> str:
    return " and ".join(items)


def join_coordinated(items: Sequence[str], oxford_comma: bool) -> str:
    """
    Joins with commas and a final ``and``: ``A, B and C``.

    With `oxford_comma` a comma goes before the final ``and`` as well, provided there are at least three items.
    """
    if len(items) < 3:
        return join_and(items)

    return ", ".join(items[:-1]) + ("," if oxford_comma else "") + " and " + items[-1]


def natbib(names: Sequence["Name"]) -> str:
    if len(names) == 0:
        return ""

    result = prefix_and_family(names[0])
    if len(names) == 2:
        result += " and " + prefix_and_family(names[1])
    elif len(names) > 2:
        result += " et al."

    return result


def _render(names: Sequence["Name"], render: Callable[["Name"], str]) -> list[str]:
    return [render(name) for name in names]


def format_names(
    names: Sequence["Name"], style: Style, abbreviate: bool = False, oxford_comma: bool = False
) -> str:
    """
    Renders `names` in the given style.

    `abbreviate` only affects styles that show given names, `oxford_comma` only the comma-joined ones. The
    alphabetization style always uses abbreviated given names.
    """
    match style:
        case Style.FIRST_LAST:
            return join_coordinated(_render(names, lambda n: given_family(n, abbreviate)), oxford_comma)
        case Style.LAST_FIRST:
            # Each name keeps its own comma, so three names read "von Neumann, John, Smith, John and ..."
            return join_coordinated(_render(names, lambda n: family_given(n, abbreviate)), oxford_comma)
        case Style.LAST_NAMES:
            return join_coordinated(_render(names, prefix_and_family), oxford_comma)
        case Style.NATBIB:
            return natbib(names)
        case Style.ALPHABETIZATION:
            return join_and(_render(names, name_for_alphabetization))
        case Style.FIRST_LAST_AND:
            return join_and(_render(names, lambda n: given_family(n, abbreviate)))
        case Style.LAST_FIRST_AND:
            return join_and(_render(names, lambda n: family_given(n, abbreviate)))
        case Style.LAST_FIRST_FIRST_LAST_AND:
            if len(names) == 0:
                return ""
            rendered = [family_given(names[0], abbreviate)]
            rendered.extend(given_family(n, abbreviate) for n in names[1:])
            return join_and(rendered)

    raise ValueError(f"Unknown style: {style}")
