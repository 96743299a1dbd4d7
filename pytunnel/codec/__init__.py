"""
Base32768 codec - binary payloads as chat-safe BMP text
"""

from .alphabet import (
    LARGE_BITS,
    LARGE_SIZE,
    TAIL_BITS,
    TAIL_SIZE,
    AlphabetTag,
    lookup,
    symbol,
)
from .bit_buffer import BitBuffer
from .decoder import DecoderState, StreamDecoder, decode
from .encoder import StreamEncoder, available_bytes, encode, encoded_length_of
from .errors import (
    DecodeError,
    InternalError,
    InvalidSymbol,
    MalformedTail,
    TrailingSymbolsAfterTail,
    UnalignedLargeOnlyStream,
    describe_error,
)

__all__ = [
    'encode', 'decode', 'encoded_length_of', 'available_bytes',
    'StreamEncoder', 'StreamDecoder', 'DecoderState', 'BitBuffer',
    'AlphabetTag', 'symbol', 'lookup',
    'LARGE_BITS', 'LARGE_SIZE', 'TAIL_BITS', 'TAIL_SIZE',
    'DecodeError', 'InternalError', 'InvalidSymbol', 'MalformedTail',
    'TrailingSymbolsAfterTail', 'UnalignedLargeOnlyStream', 'describe_error',
]
