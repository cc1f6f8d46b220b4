__all__ = [
    "AuthorIndexError",
    "AuthorListParser",
    "Name",
    "NameKind",
    "NameList",
    "ParserOptions",
    "Style",
    "fix_author_first_name_first",
    "fix_author_first_name_first_commas",
    "fix_author_for_alphabetization",
    "fix_author_last_name_first",
    "fix_author_last_name_first_commas",
    "fix_author_last_name_only_commas",
    "fix_author_natbib",
    "format_names",
    "parse",
]

from .model import AuthorIndexError, Name, NameKind, NameList
from .formatting import Style, format_names
from .parsing.parser import AuthorListParser, ParserOptions
from .authorlist import (
    fix_author_first_name_first,
    fix_author_first_name_first_commas,
    fix_author_for_alphabetization,
    fix_author_last_name_first,
    fix_author_last_name_first_commas,
    fix_author_last_name_only_commas,
    fix_author_natbib,
    parse,
)
