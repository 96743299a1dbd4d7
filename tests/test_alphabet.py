"""
Tests for the codec alphabet tables
"""

import unicodedata

import pytest
from pytunnel.codec import alphabet
from pytunnel.codec.alphabet import AlphabetTag, lookup, symbol
from pytunnel.codec.errors import InternalError


LARGE = alphabet.large_symbols()
TAIL = alphabet.tail_symbols()


class TestAlphabetShape:
    """Size and membership invariants"""

    def test_sizes(self):
        assert len(LARGE) == 32768
        assert len(TAIL) == 128

    def test_pairwise_distinct(self):
        assert len(set(LARGE)) == len(LARGE)
        assert len(set(TAIL)) == len(TAIL)

    def test_disjoint(self):
        assert not set(LARGE) & set(TAIL)

    def test_bmp_without_surrogates(self):
        for char in LARGE + TAIL:
            cp = ord(char)
            assert cp <= 0xFFFF
            assert not 0xD800 <= cp <= 0xDFFF

    def test_transport_safe(self):
        """No whitespace, controls, format characters or private use"""
        for char in LARGE + TAIL:
            category = unicodedata.category(char)
            assert not category.startswith("Z"), hex(ord(char))
            assert category not in ("Cc", "Cf", "Cs", "Co"), hex(ord(char))
            assert not char.isspace()
            assert ord(char) >= 0x80

    def test_normalisation_stable(self):
        for char in LARGE + TAIL:
            assert unicodedata.normalize("NFC", char) == char
            assert unicodedata.normalize("NFKC", char) == char

    def test_range_boundaries(self):
        assert LARGE[0] == "\u3400"
        assert LARGE[27647] == "\u9fff"
        assert LARGE[27648] == "\uac00"
        assert LARGE[-1] == "\ubfff"
        assert TAIL[0] == "\ua000"
        assert TAIL[-1] == "\ua07f"


class TestLookup:
    """Forward and reverse lookup"""

    def test_symbol_lookup_inverse(self):
        for index in (0, 1, 12345, 27647, 27648, 32767):
            assert lookup(symbol(AlphabetTag.LARGE, index)) == (AlphabetTag.LARGE, index)
        for index in range(128):
            assert lookup(symbol(AlphabetTag.TAIL, index)) == (AlphabetTag.TAIL, index)

    def test_lookup_total_over_alphabets(self):
        for index, char in enumerate(LARGE):
            assert lookup(char) == (AlphabetTag.LARGE, index)

    @pytest.mark.parametrize("char", ["A", " ", "\n", "\x00", "\u00e9", "\ua080", "\ud7a3", "\U0001f600"])
    def test_not_in_alphabet(self, char):
        assert lookup(char) is None

    @pytest.mark.parametrize("tag,index", [
        (AlphabetTag.LARGE, -1),
        (AlphabetTag.LARGE, 32768),
        (AlphabetTag.TAIL, 128),
        (AlphabetTag.TAIL, -5),
    ])
    def test_symbol_out_of_range(self, tag, index):
        with pytest.raises(InternalError):
            symbol(tag, index)
