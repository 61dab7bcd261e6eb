# tagspacings/core/indexes.py
"""
Index labels for tags: ordinal position + symbol alphabet -> short display string.
Positions past the alphabet length combine characters by integer division and
remainder. This is not a bijective numbering; very large counts may produce
labels that skip combinations.
"""

from __future__ import annotations

from tagspacings.core.config import (
    AMBIGUOUS_GLYPHS,
    DEFAULT_INDEX_SCHEME,
    DEFAULT_START_SYMBOL,
    INDEX_SCHEMES,
    UNAMBIGUOUS_SCHEMES,
)


def scheme_alphabet(scheme: str) -> str:
    """
    Alphabet for a scheme; unknown schemes fall back to alphabetic.
    Ambiguous glyphs (0 o O 1 l I) are stripped unless the scheme is
    numeric, circled or geometric.
    """
    alphabet = INDEX_SCHEMES.get(scheme) or INDEX_SCHEMES[DEFAULT_INDEX_SCHEME]
    if scheme in UNAMBIGUOUS_SCHEMES:
        return alphabet
    return "".join(ch for ch in alphabet if ch not in AMBIGUOUS_GLYPHS)


def index_for_position(position: int, alphabet: str) -> str:
    """
    Label for an absolute position in the alphabet.
    One character while position < len(alphabet); otherwise the leading part
    is the label of position // len and the trailing character is position % len.
    """
    n = len(alphabet)
    if position < n:
        return alphabet[position]
    first, second = divmod(position, n)
    if first < n:
        return alphabet[first] + alphabet[second]
    return index_for_position(first, alphabet) + alphabet[second]


def _parse_start_number(start_symbol: str) -> int:
    try:
        return int(str(start_symbol).strip())
    except ValueError:
        return 1


def _start_position(start_symbol: str, alphabet: str) -> int:
    if not start_symbol:
        return 0
    pos = alphabet.find(start_symbol)
    if pos < 0:
        pos = alphabet.find(start_symbol.lower())
    return max(0, pos)


def generate_indexes(
    count: int,
    scheme: str = DEFAULT_INDEX_SCHEME,
    start_symbol: str = DEFAULT_START_SYMBOL,
) -> list[str]:
    """
    Return count labels in order. Numeric scheme counts up from start_symbol
    (1 when it does not parse); other schemes start at start_symbol's position
    in the alphabet (0 when absent).
    """
    if count <= 0:
        return []
    if scheme == "numeric":
        start = _parse_start_number(start_symbol)
        return [str(start + i) for i in range(count)]
    alphabet = scheme_alphabet(scheme)
    start_index = _start_position(start_symbol, alphabet)
    return [index_for_position(start_index + i, alphabet) for i in range(count)]
