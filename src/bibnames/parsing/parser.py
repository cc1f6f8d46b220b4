import logging
from dataclasses import dataclass, field

from bibnames.model.name import Name, NameKind
from bibnames.model.namelist import NameList
from bibnames.parsing.scanner import is_empty_group, is_wrapped
from bibnames.parsing.tokenizer import Token, join_tokens, split_authors, split_commas, tokenize
from bibnames.util import get_prefix_words

log = logging.getLogger(__name__)

DEFAULT_AFFIX_WORDS = frozenset({"jr", "sr", "jnr", "snr", "von", "zu", "van", "der"})


@dataclass(frozen=True, slots=True)
class ParserOptions:
    prefix_words: frozenset[str] = field(default_factory=frozenset)
    """Words treated as name prefixes whatever their case, e.g. ``{"van"}`` for ``Ludwig Van Beethoven``."""
    affix_words: frozenset[str] = DEFAULT_AFFIX_WORDS
    """Words the comma separated list rewrite does not count as a family or given name."""
    semicolon_separator: bool = False
    """Also separate authors by ``;``."""
    comma_separated_lists: bool = False
    """Read ``Ali Babar, M., Lago, P.`` as two authors instead of one name with a suffix."""


def default_options() -> ParserOptions:
    return ParserOptions(prefix_words=get_prefix_words())


class AuthorListParser:
    """
    Turns an author field into a `NameList`.

    Each author segment is read in one of the three BibTeX orders: ``First von Last``, ``von Last, First`` and
    ``von Last, Jr, First``. A segment that is one brace group is an institution.
    """

    def __init__(self, options: ParserOptions | None = None) -> None:
        self.options = options or default_options()

    def parse(self, text: str) -> NameList:
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")

        stripped = text.strip()
        if self.options.comma_separated_lists:
            stripped = self._rewrite_comma_separated(stripped)

        names = []
        for segment in split_authors(stripped, semicolons=self.options.semicolon_separator):
            name = self.parse_segment(segment)
            if name is not None:
                names.append(name)

        log.debug("Parsed %d name(s) from %r", len(names), text)
        return NameList(tuple(names))

    def parse_segment(self, segment: str) -> Name | None:
        """Parses the text of a single author, returns None if it holds no name at all."""
        segment = segment.strip()
        if is_wrapped(segment) and not is_empty_group(segment):
            return Name(family_name=segment, kind=NameKind.INSTITUTION)

        parts = [tokenize(part) for part in split_commas(segment)]
        while parts and not parts[0]:
            parts.pop(0)

        if not parts:
            return None

        if len(parts) == 1:
            return self._first_von_last(parts[0])

        prefix, family = self._von_last(parts[0])
        given = parts[-1]
        suffix_parts = [join_tokens(p) for p in parts[1:-1] if p]

        return self._build(
            given,
            prefix,
            family,
            ", ".join(suffix_parts) if suffix_parts else None,
        )

    def _is_lower(self, token: Token) -> bool:
        return not token.upper or token.text.lower() in self.options.prefix_words

    def _first_von_last(self, tokens: list[Token]) -> Name:
        von_start = -1
        for i, token in enumerate(tokens):
            if not self._is_lower(token):
                continue
            if i > 0 and tokens[i - 1].term == "-":
                # Lower-case part of a hyphenated given name, "Tse-tung"
                continue
            if token.term == "-":
                continue
            von_start = i
            break

        if von_start < 0:
            last_start = len(tokens) - 1
            while last_start > 0 and tokens[last_start - 1].term == "-":
                last_start -= 1

            return self._build(tokens[:last_start], [], tokens[last_start:], None)

        last_start = next(
            (i for i in range(von_start + 1, len(tokens)) if not self._is_lower(tokens[i])),
            len(tokens) - 1,
        )
        if last_start == von_start:
            # Only a lower-case word, it is the family name
            return self._build(tokens[:von_start], [], tokens[von_start:], None)

        return self._build(tokens[:von_start], tokens[von_start:last_start], tokens[last_start:], None)

    def _von_last(self, tokens: list[Token]) -> tuple[list[Token], list[Token]]:
        if not tokens or not self._is_lower(tokens[0]) or tokens[0].term == "-":
            return [], tokens

        last_start = next((i for i in range(1, len(tokens)) if not self._is_lower(tokens[i])), len(tokens) - 1)
        if last_start == 0:
            return [], tokens

        return tokens[:last_start], tokens[last_start:]

    def _build(self, given: list[Token], prefix: list[Token], family: list[Token], suffix: str | None) -> Name:
        return Name(
            join_tokens(given) if given else None,
            join_tokens(given, abbreviate=True) if given else None,
            join_tokens(prefix) if prefix else None,
            join_tokens(family) if family else None,
            suffix,
        )

    def _rewrite_comma_separated(self, text: str) -> str:
        """
        Rewrites ``Ali Babar, M., Lago, P.`` to ``Ali Babar, M. and Lago, P.``.

        Only applies to fields without ``and``, braces or semicolons that have at least two commas. If every part has
        a space, each part is a complete name. Otherwise parts pair up as family and given name, with affix words
        attached to the name they follow.
        """
        if " and " in text.lower() or "{" in text or ";" in text or text.count(",") < 2:
            return text

        parts = [p.strip() for p in text.split(",")]
        if all(" " in p for p in parts):
            return " and ".join(parts)

        affixes = [p.lower().rstrip(".") in self.options.affix_words for p in parts]
        if (len(parts) - sum(affixes)) % 2 != 0:
            return text

        names = []
        pending_prefix: list[str] = []
        family: str | None = None
        suffixes: list[str] = []
        for part, affix in zip(parts, affixes):
            if affix:
                if family is None:
                    pending_prefix.append(part)
                else:
                    suffixes.append(part)
            elif family is None:
                family = " ".join([*pending_prefix, part])
                pending_prefix = []
            else:
                names.append(", ".join([family, *suffixes, part]))
                family = None
                suffixes = []

        if family is not None or pending_prefix:
            return text

        log.debug("Read comma separated list %r as %d name(s)", text, len(names))
        return " and ".join(names)

