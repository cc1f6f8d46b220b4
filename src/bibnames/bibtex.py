"""Middlewares that parse and format the name fields of bibtexparser entries."""

import logging
from abc import abstractmethod
from collections.abc import Callable
from typing import Any, override

from bibtexparser.library import Library
from bibtexparser.middlewares.middleware import BlockMiddleware
from bibtexparser.model import Block, Entry

from bibnames.authorlist import parse
from bibnames.formatting import Style
from bibnames.model import NameList

log = logging.getLogger(__name__)

NAME_FIELDS = ("author", "editor", "translator")


class _NameFieldMiddleware(BlockMiddleware):
    def __init__(self, allow_inplace_modification: bool = True, name_fields: tuple[str, ...] = NAME_FIELDS):
        super().__init__(allow_inplace_modification=allow_inplace_modification, allow_parallel_execution=True)
        self._name_fields = tuple(f.lower() for f in name_fields)

    @property
    def name_fields(self) -> tuple[str, ...]:
        return self._name_fields

    @override
    def transform_entry(self, entry: Entry, library: Library) -> Block:
        for field in entry.fields:
            if field.key.lower() in self._name_fields:
                field.value = self._transform_value(entry.key, field.key, field.value)
        return entry

    @abstractmethod
    def _transform_value(self, key: str, field_key: str, value: Any) -> Any:
        pass


class ParseNameLists(_NameFieldMiddleware):
    """Replaces the string value of every name field by its `NameList`."""

    def __init__(
        self,
        allow_inplace_modification: bool = True,
        name_fields: tuple[str, ...] = NAME_FIELDS,
        parse_func: Callable[[str], NameList] = parse,
    ):
        super().__init__(allow_inplace_modification, name_fields)
        self._parse = parse_func

    @classmethod
    @override
    def metadata_key(cls) -> str:
        return "bibnames_parse_name_lists"

    @override
    def _transform_value(self, key: str, field_key: str, value: Any) -> Any:
        if not isinstance(value, str):
            log.debug("Field %s of %s is not a string, leaving it alone", field_key, key)
            return value

        return self._parse(value)


class FormatNameLists(_NameFieldMiddleware):
    """Renders `NameList` values of name fields back to strings in the given style."""

    def __init__(
        self,
        style: Style = Style.FIRST_LAST_AND,
        abbreviate: bool = False,
        oxford_comma: bool = False,
        latex_free: bool = False,
        allow_inplace_modification: bool = True,
        name_fields: tuple[str, ...] = NAME_FIELDS,
    ):
        super().__init__(allow_inplace_modification, name_fields)
        self.style = style
        self.abbreviate = abbreviate
        self.oxford_comma = oxford_comma
        self.latex_free = latex_free

    @classmethod
    @override
    def metadata_key(cls) -> str:
        return "bibnames_format_name_lists"

    @override
    def _transform_value(self, key: str, field_key: str, value: Any) -> Any:
        if not isinstance(value, NameList):
            return value

        if self.latex_free:
            value = value.latex_free()

        return value.format(self.style, self.abbreviate, self.oxford_comma)
