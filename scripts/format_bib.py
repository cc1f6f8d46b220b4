#!/usr/bin/env python3
import argparse
import logging
import pathlib
import sys

import bibtexparser

from bibnames import Style
from bibnames.bibtex import FormatNameLists, ParseNameLists
from bibnames.util import text_encoding
from bibnames.util.log import get_logger


def main() -> None:
    parser = argparse.ArgumentParser(description="Print the formatted authors of every entry of a BibTeX file")
    parser.add_argument("bib_file", help="BibTeX file to read")
    parser.add_argument("-e", "--encoding", help="encoding of the file, read from its header or guessed if omitted")
    parser.add_argument("--sanitize", action="store_true", help="replace typographic quotes and dashes by ascii")
    parser.add_argument("-s", "--style", type=Style, choices=list(Style), default=Style.LAST_FIRST_AND)
    parser.add_argument("-a", "--abbreviate", action="store_true", help="abbreviate given names")
    parser.add_argument("-o", "--oxford-comma", action="store_true", help="comma before the final 'and'")
    parser.add_argument("-l", "--latex-free", action="store_true", help="resolve LaTeX markup")
    parser.add_argument("-f", "--field", default="author", help="name field to print")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    log = get_logger(logging.DEBUG if args.verbose else logging.INFO)

    path = pathlib.Path(args.bib_file)
    content = text_encoding.decode_bib(path.read_bytes(), args.encoding, args.sanitize)

    library = bibtexparser.parse_string(
        content,
        append_middleware=[
            ParseNameLists(),
            FormatNameLists(args.style, args.abbreviate, args.oxford_comma, args.latex_free),
        ],
    )
    if library.failed_blocks:
        log.warning("%d block(s) of %s could not be parsed", len(library.failed_blocks), path.name)

    log.info("Read %d entries from %s", len(library.entries), path.name)
    for entry in library.entries:
        field = entry.fields_dict.get(args.field)
        if field is None:
            log.debug("Entry %s has no %s field", entry.key, args.field)
            continue
        print(f"{entry.key}: {field.value}")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt as e:
        logging.info(f'{type(e).__name__}: {"Terminated."}')
        sys.exit(1)
