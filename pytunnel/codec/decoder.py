"""
Base32768 decoder

Walks the text one code point at a time through a small state machine:

    STREAMING  --large symbol-->  STREAMING   push 15 bits, drain octets
    STREAMING  --tail symbol--->  AFTER_TAIL  push 8-h bits, drain the octet
    AFTER_TAIL --any symbol---->  FAILED      TrailingSymbolsAfterTail
    *          --bad code point-> FAILED      InvalidSymbol
    *          --end----------->  DONE        if leftover padding is zero

The number of bits a tail symbol carries is fixed by the h bits already held
when it arrives (h = 15*L mod 8 after L large symbols), so a tail arriving on
an empty buffer would carry nothing and is rejected.
"""

from enum import Enum, auto
from typing import Callable

from .alphabet import LARGE_BITS, TAIL_BITS, AlphabetTag, lookup
from .bit_buffer import BitBuffer
from .errors import (
    DecodeError,
    InternalError,
    InvalidSymbol,
    MalformedTail,
    TrailingSymbolsAfterTail,
    UnalignedLargeOnlyStream,
)


class DecoderState(Enum):
    """Decoder lifecycle states"""
    STREAMING = auto()
    AFTER_TAIL = auto()
    DONE = auto()
    FAILED = auto()


class StreamDecoder:
    """Push-based decoder writing octet chunks to a sink

    The sink only sees octets from feed() calls that completed without error;
    once a DecodeError is raised the decoder is FAILED and must be discarded.
    """

    def __init__(self, sink: Callable[[bytes], None]):
        self.sink = sink
        self.buffer = BitBuffer()
        self.state = DecoderState.STREAMING
        self.position = 0
        self.bytes_out = 0

    @property
    def terminal(self) -> bool:
        return self.state in (DecoderState.DONE, DecoderState.FAILED)

    def feed(self, text: str) -> 'StreamDecoder':
        """Decode more symbols"""
        if self.terminal:
            raise InternalError(f"feed() called on a decoder in state {self.state.name}")

        out = bytearray()
        try:
            for char in text:
                self._step(char, out)
        except DecodeError:
            self.state = DecoderState.FAILED
            raise

        if out:
            self.bytes_out += len(out)
            self.sink(bytes(out))
        return self

    def finish(self) -> None:
        """Validate the end of the stream"""
        if self.terminal:
            raise InternalError(f"finish() called on a decoder in state {self.state.name}")

        residual = self.buffer.remaining()
        if self.state is DecoderState.AFTER_TAIL:
            if residual:
                self.state = DecoderState.FAILED
                raise MalformedTail(self.position - 1, f"{residual} bits left over")
        elif self.buffer.peek_value() != 0:
            self.state = DecoderState.FAILED
            raise UnalignedLargeOnlyStream(residual)

        # Zero bits left here are the padding of the final large symbol
        self.buffer.clear()
        self.state = DecoderState.DONE

    def _step(self, char: str, out: bytearray):
        position = self.position
        self.position += 1

        if self.state is DecoderState.AFTER_TAIL:
            raise TrailingSymbolsAfterTail(position)

        entry = lookup(char)
        if entry is None:
            raise InvalidSymbol(position, ord(char))
        tag, index = entry

        buffer = self.buffer
        if tag is AlphabetTag.LARGE:
            buffer.push_group(index, LARGE_BITS)
            while buffer.held_bits >= 8:
                out.append(buffer.pop_octet())
            return

        held = buffer.remaining()
        if held == 0:
            raise MalformedTail(position, "tail symbol carries no data bits")
        width = 8 - held
        padding = TAIL_BITS - width
        if index & ((1 << padding) - 1):
            raise MalformedTail(position, "non-zero padding bits")
        buffer.push_group(index >> padding, width)
        out.append(buffer.pop_octet())
        self.state = DecoderState.AFTER_TAIL


def decode(text: str) -> bytes:
    """Decode chat text produced by encode()

    Raises:
        DecodeError: one of InvalidSymbol, TrailingSymbolsAfterTail,
            UnalignedLargeOnlyStream or MalformedTail
    """
    if not isinstance(text, str):
        raise TypeError(f"decode() expects str, got {type(text).__name__}")

    result = bytearray()
    decoder = StreamDecoder(result.extend)
    decoder.feed(text)
    decoder.finish()
    return bytes(result)

