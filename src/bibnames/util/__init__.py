import os


def get_prefix_words() -> frozenset[str]:
    """Extra name prefix words from ``BIBNAMES_PREFIX_WORDS`` (comma separated, case-insensitive)."""
    words_str = os.environ.get("BIBNAMES_PREFIX_WORDS")
    if words_str is None:
        return frozenset()

    return frozenset(w.strip().lower() for w in words_str.split(",") if w.strip())
