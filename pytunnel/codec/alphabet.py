"""
Alphabet tables for the Base32768 chat codec.

Two disjoint sets of BMP code points are used:

    Large alphabet (A): 32768 symbols, one per 15-bit group
    Tail alphabet  (B):   128 symbols, one per trailing group of 1-7 bits

Both are declared as ordered code point ranges and expanded once at import
time. Every code point is a printable letter or symbol that chat servers pass
through untouched: no whitespace, no control characters, no surrogates, and
nothing that NFC/NFKC normalisation rewrites.
"""

from enum import Enum
from typing import Dict, Optional, Tuple

from .errors import InternalError


# =============================================================================
# Constants
# =============================================================================

LARGE_BITS = 15
TAIL_BITS = 7

LARGE_SIZE = 1 << LARGE_BITS  # 32768
TAIL_SIZE = 1 << TAIL_BITS    # 128

# Inclusive (first, last) code point ranges, in index order
LARGE_RANGES = (
    (0x3400, 0x9FFF),  # CJK Ext A, Yijing hexagrams, CJK Unified Ideographs
    (0xAC00, 0xBFFF),  # Hangul syllables
)

TAIL_RANGES = (
    (0xA000, 0xA07F),  # Yi syllables
)


class AlphabetTag(Enum):
    """Which alphabet a symbol belongs to"""
    LARGE = "A"
    TAIL = "B"


def _expand(ranges) -> Tuple[str, ...]:
    symbols = []
    for first, last in ranges:
        symbols.extend(chr(cp) for cp in range(first, last + 1))
    return tuple(symbols)


_LARGE_SYMBOLS = _expand(LARGE_RANGES)
_TAIL_SYMBOLS = _expand(TAIL_RANGES)

assert len(_LARGE_SYMBOLS) == LARGE_SIZE
assert len(_TAIL_SYMBOLS) == TAIL_SIZE

_REVERSE: Dict[str, Tuple[AlphabetTag, int]] = {}
for _index, _char in enumerate(_LARGE_SYMBOLS):
    _REVERSE[_char] = (AlphabetTag.LARGE, _index)
for _index, _char in enumerate(_TAIL_SYMBOLS):
    _REVERSE[_char] = (AlphabetTag.TAIL, _index)
del _index, _char

assert len(_REVERSE) == LARGE_SIZE + TAIL_SIZE, "alphabets overlap"


# =============================================================================
# Lookup
# =============================================================================

def symbol(tag: AlphabetTag, index: int) -> str:
    """Get the code point for an alphabet index

    Raises:
        InternalError: index is outside the alphabet
    """
    table = _LARGE_SYMBOLS if tag is AlphabetTag.LARGE else _TAIL_SYMBOLS
    if not 0 <= index < len(table):
        raise InternalError(f"index {index} out of range for alphabet {tag.value}")
    return table[index]


def large_symbol(index: int) -> str:
    """Shortcut for symbol(AlphabetTag.LARGE, index)"""
    return symbol(AlphabetTag.LARGE, index)


def tail_symbol(index: int) -> str:
    """Shortcut for symbol(AlphabetTag.TAIL, index)"""
    return symbol(AlphabetTag.TAIL, index)


def lookup(char: str) -> Optional[Tuple[AlphabetTag, int]]:
    """Get (tag, index) for a code point, or None if it is not in A or B"""
    return _REVERSE.get(char)


def large_symbols() -> Tuple[str, ...]:
    """All 32768 large-alphabet symbols in index order"""
    return _LARGE_SYMBOLS


def tail_symbols() -> Tuple[str, ...]:
    """All 128 tail-alphabet symbols in index order"""
    return _TAIL_SYMBOLS
