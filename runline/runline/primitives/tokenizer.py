"""Split and join free-text argument strings.

The quoting rules are those of the "raw options" field users type into:
whitespace separates tokens, a double quote opens a region where
whitespace is literal, and inside a region two double quotes stand for
one literal quote. ``join_arguments`` produces strings that split back
into the same tokens.
"""

import logging
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

QUOTE = '"'


def split_arguments(text: Optional[str]) -> List[str]:
    """Split a raw option string into argument tokens.

    Zero-length tokens are dropped. An unterminated quote is not an
    error: the rest of the input becomes part of the final token.

    Args:
        text: Raw option string, may be None or empty.

    Returns:
        Ordered list of tokens.
    """
    if not text:
        return []

    tokens: List[str] = []
    current: List[str] = []
    quoted = False
    pos = 0
    length = len(text)
    while pos < length:
        char = text[pos]
        if quoted:
            if char == QUOTE:
                if pos + 1 < length and text[pos + 1] == QUOTE:
                    current.append(QUOTE)
                    pos += 2
                    continue
                quoted = False
            else:
                current.append(char)
        elif char == QUOTE:
            quoted = True
        elif char.isspace():
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
        pos += 1

    if quoted:
        logger.warning("Unterminated quote in arguments: %r", text)
    if current:
        tokens.append("".join(current))
    return tokens


def quote_argument(token: str) -> str:
    """Escape a single token for display."""
    escaped = token.replace(QUOTE, QUOTE * 2)
    if QUOTE in escaped or any(char.isspace() for char in escaped):
        return f"{QUOTE}{escaped}{QUOTE}"
    return escaped


def join_arguments(tokens: Iterable[str]) -> str:
    """Join tokens into one string that splits back into the same tokens."""
    return " ".join(quote_argument(token) for token in tokens)
