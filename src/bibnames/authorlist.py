"""
Parsing author fields with a cache, and one-call helpers that parse and format a raw author field.

`parse` returns the very same `NameList` for the same text as long as a previous result is still referenced
somewhere. The cache itself does not keep results alive.
"""

import logging

from bibnames.model import NameList
from bibnames.parsing.parser import AuthorListParser
from bibnames.util.cache import WeakValueCache

log = logging.getLogger(__name__)

_parser = AuthorListParser()
_cache: WeakValueCache[str, NameList] = WeakValueCache()


def parse(text: str) -> NameList:
    """Parses an author field like ``"John von Neumann and Black Brown, Peter"``. Never fails on odd input."""
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    names, created = _cache.get_or_create(text, _parser.parse)
    if created:
        log.debug("Cache miss for %r", text)
    else:
        log.debug("Cache hit for %r", text)

    return names


def parse_cache_info() -> dict[str, int]:
    return {"entries": len(_cache)}


def configure(parser: AuthorListParser) -> None:
    """Replaces the parser used by `parse`. Cached results of the previous parser are dropped."""
    global _parser
    _parser = parser
    _cache.clear()


def fix_author_natbib(authors: str) -> str:
    """Natbib form of a raw author field, for quick previews. Bypasses the cache."""
    if not authors.strip():
        return ""

    return _parser.parse(authors).get_as_natbib()


def fix_author_first_name_first_commas(authors: str, abbreviate: bool, oxford_comma: bool) -> str:
    return parse(authors).get_as_first_last_names(abbreviate, oxford_comma)


def fix_author_first_name_first(authors: str) -> str:
    return parse(authors).get_as_first_last_names_with_and()


def fix_author_last_name_first_commas(authors: str, abbreviate: bool, oxford_comma: bool) -> str:
    return parse(authors).get_as_last_first_names(abbreviate, oxford_comma)


def fix_author_last_name_first(authors: str, abbreviate: bool = False) -> str:
    return parse(authors).get_as_last_first_names_with_and(abbreviate)


def fix_author_last_name_only_commas(authors: str, oxford_comma: bool) -> str:
    return parse(authors).get_as_last_names(oxford_comma)


def fix_author_for_alphabetization(authors: str) -> str:
    return parse(authors).get_for_alphabetization()
