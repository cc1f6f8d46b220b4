__all__ = [
    "AuthorIndexError",
    "Name",
    "NameKind",
    "NameList",
]

from .name import Name, NameKind
from .namelist import AuthorIndexError, NameList
