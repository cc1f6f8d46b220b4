import logging
from collections.abc import Iterator

import pytest

from bibnames import AuthorListParser, Name, NameList, authorlist

# Examples similar to page 4 of "BibTeXing" by Oren Patashnik
MUHAMMAD_ALKHWARIZMI = Name(r"Mu{\d{h}}ammad", "M.", None, r"al-Khw{\={a}}rizm{\={i}}", None)
CORRADO_BOHM = Name("Corrado", "C.", None, r"B{\"o}hm", None)
KURT_GODEL = Name("Kurt", "K.", None, r"G{\"{o}}del", None)
BANU_MOSA = Name(None, None, None, r"{The Ban\={u} M\={u}s\={a} brothers}", None)

EMPTY_AUTHOR = NameList.of()
ONE_AUTHOR_WITH_LATEX = NameList.of(MUHAMMAD_ALKHWARIZMI)
TWO_AUTHORS_WITH_LATEX = NameList.of(MUHAMMAD_ALKHWARIZMI, CORRADO_BOHM)
THREE_AUTHORS_WITH_LATEX = NameList.of(MUHAMMAD_ALKHWARIZMI, CORRADO_BOHM, KURT_GODEL)
ONE_INSTITUTION_WITH_LATEX = NameList.of(BANU_MOSA)
ONE_INSTITUTION_WITH_STARTING_BRACE = NameList.of(Name(None, None, None, r"{{\L{}}ukasz Micha\l{}}", None))
TWO_INSTITUTIONS_WITH_LATEX = NameList.of(BANU_MOSA, BANU_MOSA)
MIXED_AUTHOR_AND_INSTITUTION_WITH_LATEX = NameList.of(BANU_MOSA, CORRADO_BOHM)

THREE_AUTHORS = "John von Neumann and John Smith and Black Brown, Peter"


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def restore_parser() -> Iterator[None]:
    yield
    authorlist.configure(AuthorListParser())
