"""Quoting and escaping helpers for the serialized interval forms."""

import json
import re

# Characters that would be read as operators if a tag were left bare
_OPERATOR_CHARS = "+-/()<^!=~_%"
_NEEDS_QUOTES = re.compile(r'[\s"' + re.escape(_OPERATOR_CHARS) + "]")


def escape(text: str, char: str) -> str:
    """Prefix every occurrence of ``char`` in ``text`` with a backslash."""
    return text.replace(char, "\\" + char)


def quote_if_needed(text: str) -> str:
    """Return ``text`` bare if it lexes as one word, else double-quoted.

    Examples:
        >>> quote_if_needed("work")
        'work'
        >>> quote_if_needed("two words")
        '"two words"'
    """
    if not _NEEDS_QUOTES.search(text):
        return text
    return '"' + escape(text, '"') + '"'


def json_encode(text: str) -> str:
    """JSON string escaping without the surrounding quotes."""
    return json.dumps(text, ensure_ascii=False)[1:-1]
