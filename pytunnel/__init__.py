"""
pytunnel - carry binary payloads through game chat

Usage:
    from pytunnel import encode, decode

    text = encode(b"schematic")   # chat-safe BMP text
    data = decode(text)          # raises DecodeError if damaged

Streaming:
    from pytunnel import StreamEncoder

    parts = []
    encoder = StreamEncoder(parts.append)
    for chunk in chunks:
        encoder.feed(chunk)
    encoder.finish()

Over a chat channel:
    from pytunnel import ChatTunnel, LoopbackTransport

    alice, bob = LoopbackTransport.pair("alice", "bob")
    sender = ChatTunnel(alice)
    receiver = ChatTunnel(bob)
    receiver.on_payload(lambda payload, who: print(who, payload))
    sender.send(b"hello")
"""

__version__ = "1.0.0"

from .codec import (
    DecodeError,
    DecoderState,
    InternalError,
    InvalidSymbol,
    MalformedTail,
    StreamDecoder,
    StreamEncoder,
    TrailingSymbolsAfterTail,
    UnalignedLargeOnlyStream,
    available_bytes,
    decode,
    describe_error,
    encode,
    encoded_length_of,
)
from .config import ConfigValidationError, TunnelConfig
from .tunnel import ChatTransport, ChatTunnel, LoopbackTransport, TunnelError

__all__ = [
    "encode",
    "decode",
    "encoded_length_of",
    "available_bytes",
    "StreamEncoder",
    "StreamDecoder",
    "DecoderState",
    "DecodeError",
    "InvalidSymbol",
    "TrailingSymbolsAfterTail",
    "UnalignedLargeOnlyStream",
    "MalformedTail",
    "InternalError",
    "describe_error",
    "TunnelConfig",
    "ConfigValidationError",
    "ChatTunnel",
    "ChatTransport",
    "LoopbackTransport",
    "TunnelError",
]
