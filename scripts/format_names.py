#!/usr/bin/env python3
import argparse
import logging
import sys
from collections.abc import Iterable

from bibnames import NameList, Style, authorlist
from bibnames.parsing.parser import AuthorListParser, ParserOptions
from bibnames.util import get_prefix_words, text_encoding
from bibnames.util.log import get_logger


def read_fields(args: argparse.Namespace) -> Iterable[str]:
    if args.authors:
        yield from args.authors
        return

    for line in sys.stdin:
        line = line.strip()
        if line:
            yield line


def render(names: NameList, args: argparse.Namespace) -> str:
    if args.latex_free:
        names = names.latex_free()

    result = names.format(args.style, args.abbreviate, args.oxford_comma)
    if args.ascii:
        result = text_encoding.to_ascii(result)

    return result


def main() -> None:
    parser = argparse.ArgumentParser(description="Format author fields of bibliography entries")
    parser.add_argument("authors", nargs="*", help="author fields, read from stdin (one per line) if omitted")
    parser.add_argument("-s", "--style", type=Style, choices=list(Style), default=Style.FIRST_LAST)
    parser.add_argument("-a", "--abbreviate", action="store_true", help="abbreviate given names")
    parser.add_argument("-o", "--oxford-comma", action="store_true", help="comma before the final 'and'")
    parser.add_argument("-l", "--latex-free", action="store_true", help="resolve LaTeX markup")
    parser.add_argument("--ascii", action="store_true", help="transliterate the output to ascii")
    parser.add_argument("--semicolons", action="store_true", help="also separate authors by ';'")
    parser.add_argument(
        "--comma-lists", action="store_true", help="read 'Last, F., Last, F.' as a list of authors"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--debug-file", help="write debug logs to this file")
    args = parser.parse_args()

    log = get_logger(logging.DEBUG if args.verbose else logging.WARNING, args.debug_file)

    authorlist.configure(
        AuthorListParser(
            ParserOptions(
                prefix_words=get_prefix_words(),
                semicolon_separator=args.semicolons,
                comma_separated_lists=args.comma_lists,
            )
        )
    )

    for field in read_fields(args):
        log.debug("Formatting %r", field)
        print(render(authorlist.parse(field), args))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt as e:
        logging.info(f'{type(e).__name__}: {"Terminated."}')
        sys.exit(1)
