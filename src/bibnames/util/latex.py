import logging
import unicodedata

from pylatexenc.latex2text import LatexNodes2Text  # type: ignore[import-untyped]
from pylatexenc.latexwalker import LatexWalkerError  # type: ignore[import-untyped]

log = logging.getLogger(__name__)

_decoder = LatexNodes2Text(math_mode="text", keep_comments=False, strict_latex_spaces=False)


def latex_to_unicode(text: str) -> str:
    """
    Resolves LaTeX markup in a name field to readable text.

    ``"al-Khw{\\={a}}rizm{\\={i}}"`` becomes ``"al-Khwārizmī"`` and grouping braces are dropped. The result is meant
    for display only, it is never parsed again.
    """
    if "\\" not in text and "{" not in text and "}" not in text and "~" not in text and "$" not in text:
        return text

    try:
        decoded = _decoder.latex_to_text(text)
    except LatexWalkerError as e:
        log.debug("Could not decode markup in %r, dropping braces only: %s", text, e)
        decoded = text.replace("{", "").replace("}", "")

    # Accents may come out as base letter + combining mark
    decoded = unicodedata.normalize("NFC", decoded)
    return " ".join(decoded.split())
