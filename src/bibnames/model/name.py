from dataclasses import dataclass, field
from enum import Enum

from bibnames import formatting
from bibnames.parsing.abbreviation import abbreviate_given_name, add_dot_if_abbreviation
from bibnames.parsing.scanner import has_balanced_braces, is_wrapped
from bibnames.util.latex import latex_to_unicode


class NameKind(Enum):
    PERSON = "person"
    INSTITUTION = "institution"
    """An organization written as one brace group, ``{JabRef Developers}``. Never split, reordered or abbreviated."""


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def remove_start_and_end_braces(value: str | None) -> str | None:
    """
    Removes redundant braces around the whole value and around single words.

    ``{Vall{\\'e}e} {Poussin}`` becomes ``Vall{\\'e}e Poussin``. Braces are only removed if what remains is still
    balanced, so ``{A}bbb{c}`` is left alone.
    """
    if value is None or _blank(value):
        return None

    if "{" not in value:
        return value

    words = []
    for word in value.split(" "):
        if len(word) > 2 and word.startswith("{") and word.endswith("}") and has_balanced_braces(word[1:-1]):
            word = word[1:-1]
        words.append(word)

    result = " ".join(words)
    if result.startswith("{") and result.endswith("}") and has_balanced_braces(result[1:-1]):
        result = result[1:-1]

    return None if _blank(result) else result


@dataclass(frozen=True, slots=True)
class Name:
    """
    One author: a person split into given name, prefix, family name and suffix, or an institution.

    An institution only has a family name holding the complete brace group as written. Two names are equal if all
    five fields are equal.
    """

    given_name: str | None = None
    given_name_abbreviated: str | None = None
    name_prefix: str | None = None
    """Lower-case particles in front of the family name, ``von``, ``de``, ``van den``."""
    family_name: str | None = None
    name_suffix: str | None = None
    """``Jr``, ``III``, ``Jr., III``."""
    kind: NameKind | None = field(default=None, repr=False, compare=False, kw_only=True)
    _latex_free: "Name | None" = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        no_person_parts = (
            _blank(self.given_name)
            and _blank(self.given_name_abbreviated)
            and _blank(self.name_prefix)
            and _blank(self.name_suffix)
        )
        if self.kind is NameKind.INSTITUTION and not no_person_parts:
            raise ValueError(f"An institution only has a family name, got {self!r}")

        family_only = no_person_parts and not _blank(self.family_name)

        given_name = remove_start_and_end_braces(self.given_name)
        if given_name is not None:
            given_name = add_dot_if_abbreviation(given_name)
        object.__setattr__(self, "given_name", given_name)

        given_name_abbreviated = remove_start_and_end_braces(self.given_name_abbreviated)
        if given_name_abbreviated is None:
            given_name_abbreviated = abbreviate_given_name(given_name)
        object.__setattr__(self, "given_name_abbreviated", given_name_abbreviated)

        object.__setattr__(self, "name_prefix", remove_start_and_end_braces(self.name_prefix))
        object.__setattr__(self, "name_suffix", remove_start_and_end_braces(self.name_suffix))
        if family_only:
            # Keep the braces, they protect institutions
            assert self.family_name is not None
            object.__setattr__(self, "family_name", self.family_name.strip())
        else:
            object.__setattr__(self, "family_name", remove_start_and_end_braces(self.family_name))

        if self.kind is None:
            institution = family_only and self.family_name is not None and is_wrapped(self.family_name)
            object.__setattr__(self, "kind", NameKind.INSTITUTION if institution else NameKind.PERSON)

    @property
    def is_institution(self) -> bool:
        return self.kind is NameKind.INSTITUTION

    @property
    def prefix_and_family(self) -> str:
        """``von Neumann``; the family name alone if there is no prefix."""
        return formatting.prefix_and_family(self)

    @property
    def name_for_alphabetization(self) -> str:
        """``Neumann, Jr, J.``: family name, suffix and abbreviated given name, without prefix."""
        return formatting.name_for_alphabetization(self)

    def given_family(self, abbreviate: bool) -> str:
        """``John von Neumann, Jr``, or ``J. von Neumann, Jr`` if `abbreviate` is set."""
        return formatting.given_family(self, abbreviate)

    def family_given(self, abbreviate: bool) -> str:
        """``von Neumann, Jr, John``, or ``von Neumann, Jr, J.`` if `abbreviate` is set."""
        return formatting.family_given(self, abbreviate)

    def latex_free(self) -> "Name":
        """
        Returns this name with markup in every field resolved to plain text.

        The result is computed once and cached. An institution stays an institution even though its braces are gone.
        """
        if self._latex_free is not None:
            return self._latex_free

        free = Name(
            *(
                None if value is None else latex_to_unicode(value)
                for value in (
                    self.given_name,
                    self.given_name_abbreviated,
                    self.name_prefix,
                    self.family_name,
                    self.name_suffix,
                )
            ),
            kind=self.kind,
        )
        object.__setattr__(free, "_latex_free", free)
        object.__setattr__(self, "_latex_free", free)

        return free
