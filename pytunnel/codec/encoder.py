"""
Base32768 encoder

Octets are packed MSB-first into 15-bit groups, each written as one symbol of
the large alphabet. Whatever is left at the end (r = 8*n mod 15 bits) becomes
a single final symbol:

    r == 0      nothing
    r in 1..7   tail symbol, data in the high r bits of a 7-bit word
    r in 8..14  large symbol, data in the high r bits of a 15-bit word

Padding bits are always zero, so the output is exactly ceil(8*n / 15) code
points long and the original length needs no prefix.
"""

from typing import Callable, List, Union

from .alphabet import LARGE_BITS, TAIL_BITS, large_symbol, tail_symbol
from .bit_buffer import BitBuffer
from .errors import InternalError

BytesLike = Union[bytes, bytearray, memoryview]


def encoded_length_of(byte_count: int) -> int:
    """Number of code points produced for `byte_count` octets"""
    return -(-byte_count * 8 // LARGE_BITS)


def available_bytes(symbol_count: int) -> int:
    """Largest payload (in octets) that fits into `symbol_count` code points"""
    return symbol_count * LARGE_BITS // 8


class StreamEncoder:
    """Push-based encoder writing text chunks to a sink

    Usage:
        parts = []
        encoder = StreamEncoder(parts.append)
        encoder.feed(b"hello ")
        encoder.feed(b"world")
        encoder.finish()
        text = "".join(parts)
    """

    def __init__(self, sink: Callable[[str], None]):
        self.sink = sink
        self.buffer = BitBuffer()
        self.bytes_in = 0
        self.symbols_out = 0
        self.finished = False

    def feed(self, data: BytesLike) -> 'StreamEncoder':
        """Encode more octets; complete 15-bit groups are flushed to the sink"""
        if self.finished:
            raise InternalError("feed() called on a finished encoder")

        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"feed() expects a bytes-like object, got {type(data).__name__}")
        data = bytes(data)
        out: List[str] = []
        buffer = self.buffer
        for octet in data:
            buffer.push_octet(octet)
            if buffer.held_bits >= LARGE_BITS:
                out.append(large_symbol(buffer.pop_group(LARGE_BITS)))

        self.bytes_in += len(data)
        self._emit(out)
        return self

    def finish(self) -> None:
        """Flush the final partial group, if any"""
        if self.finished:
            raise InternalError("finish() called twice")
        self.finished = True

        residual = self.buffer.remaining()
        if residual == 0:
            return
        bits = self.buffer.pop_group(residual)
        if residual <= TAIL_BITS:
            char = tail_symbol(bits << (TAIL_BITS - residual))
        else:
            char = large_symbol(bits << (LARGE_BITS - residual))
        self._emit([char])

    def _emit(self, out: List[str]):
        if out:
            self.symbols_out += len(out)
            self.sink("".join(out))


def encode(data: BytesLike) -> str:
    """Encode octets as chat-safe text"""
    parts: List[str] = []
    encoder = StreamEncoder(parts.append)
    encoder.feed(data)
    encoder.finish()
    return "".join(parts)
