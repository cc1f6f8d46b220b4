from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import overload

from bibnames.formatting import Style, format_names
from bibnames.model.name import Name


class AuthorIndexError(IndexError):
    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Author index {index} out of range for {size} author(s)")
        self.index = index
        self.size = size


@dataclass(frozen=True, slots=True, weakref_slot=True)
class NameList:
    """
    The authors of one author field, in the order they were written.

    Two lists are equal if they hold equal names in the same order.
    """

    names: tuple[Name, ...] = ()
    _latex_free: "NameList | None" = field(default=None, init=False, repr=False, compare=False)
    _source: "NameList | None" = field(default=None, init=False, repr=False, compare=False)
    """For a markup-free view, the list it was derived from. Kept alive as long as the view is."""

    @classmethod
    def of(cls, *names: Name) -> "NameList":
        return cls(tuple(names))

    def get(self, index: int) -> Name:
        if not 0 <= index < len(self.names):
            raise AuthorIndexError(index, len(self.names))
        return self.names[index]

    get_author = get

    def size(self) -> int:
        return len(self.names)

    def is_empty(self) -> bool:
        return len(self.names) == 0

    def latex_free(self) -> "NameList":
        """
        Returns the markup-free view of this list: every field of every name with LaTeX resolved to plain text.

        Computed once per list. The view is its own markup-free view.
        """
        if self._latex_free is not None:
            return self._latex_free

        free = NameList(tuple(name.latex_free() for name in self.names))
        object.__setattr__(free, "_latex_free", free)
        object.__setattr__(free, "_source", self)
        object.__setattr__(self, "_latex_free", free)

        return free

    def format(self, style: Style, abbreviate: bool = False, oxford_comma: bool = False) -> str:
        return format_names(self.names, style, abbreviate, oxford_comma)

    def get_as_natbib(self) -> str:
        """``Smith``, ``Smith and Black Brown`` or ``von Neumann et al.``"""
        return self.format(Style.NATBIB)

    def get_as_first_last_names(self, abbreviate: bool, oxford_comma: bool) -> str:
        """``John von Neumann, John Smith and Peter Black Brown``"""
        return self.format(Style.FIRST_LAST, abbreviate, oxford_comma)

    def get_as_last_first_names(self, abbreviate: bool, oxford_comma: bool) -> str:
        """
        ``von Neumann, John, Smith, John and Black Brown, Peter``

        The commas inside each name and those between names are not told apart.
        """
        return self.format(Style.LAST_FIRST, abbreviate, oxford_comma)

    def get_as_last_names(self, oxford_comma: bool) -> str:
        return self.format(Style.LAST_NAMES, oxford_comma=oxford_comma)

    def get_for_alphabetization(self) -> str:
        return self.format(Style.ALPHABETIZATION)

    def get_as_first_last_names_with_and(self) -> str:
        return self.format(Style.FIRST_LAST_AND)

    def get_as_last_first_names_with_and(self, abbreviate: bool) -> str:
        return self.format(Style.LAST_FIRST_AND, abbreviate)

    def get_as_last_first_first_last_names_with_and(self, abbreviate: bool) -> str:
        """``al-Khwārizmī, M. and C. Böhm and K. Gödel``: the first name last-first, the others first-last."""
        return self.format(Style.LAST_FIRST_FIRST_LAST_AND, abbreviate)

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[Name]:
        return iter(self.names)

    @overload
    def __getitem__(self, index: int) -> Name: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Name, ...]: ...

    def __getitem__(self, index: int | slice) -> Name | tuple[Name, ...]:
        return self.names[index]
