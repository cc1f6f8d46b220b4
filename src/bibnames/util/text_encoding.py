import logging
import re

from bs4.dammit import UnicodeDammit
from unidecode import unidecode_expect_ascii, unidecode_expect_nonascii

log = logging.getLogger(__name__)

re_special = re.compile(r"[^\x00-\x7f\w]")
"""Matches non-ascii non-word characters."""

re_declared_encoding = re.compile(rb"^%\s*Encoding:\s*([\w.-]+)\s*$", re.M | re.I)
"""The ``% Encoding: UTF-8`` header JabRef writes on top of a .bib file."""

_header_size = 1024


def to_ascii(string: str) -> str:
    """Transliterates a (markup-free) name to plain ascii, e.g. ``"Gödel"`` to ``"Godel"``."""
    return unidecode_expect_ascii(string)


def sanitize(string: str) -> str:
    """
    Replaces non-word, non-ascii characters with their ascii equivalent.

    Accented letters are word characters and stay as they are; typographic quotes and dashes do not.
    """
    return re_special.sub(lambda m: unidecode_expect_nonascii(m.group(0)), string)


def declared_encoding(content: bytes) -> str | None:
    m = re_declared_encoding.search(content[:_header_size])
    if m is None:
        return None

    return m.group(1).decode("ascii")


def decode_bib(content: bytes, encoding: str | None = None, force_sanitize: bool = False) -> str:
    """
    Decodes the contents of a .bib file.

    An explicit `encoding` wins over the one declared in the file header, which wins over guessing.
    """
    encodings = [e for e in (encoding, declared_encoding(content)) if e is not None]
    dammit = UnicodeDammit(content, user_encodings=encodings or None, smart_quotes_to="ascii")
    if dammit.unicode_markup is None:
        raise UnicodeDecodeError(encodings[0] if encodings else "unknown", content, 0, len(content), "undecodable")

    log.debug("Decoded %d bytes as %s", len(content), dammit.original_encoding)
    u = dammit.unicode_markup

    if force_sanitize:
        u = sanitize(u)

    return u
