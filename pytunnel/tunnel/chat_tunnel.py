"""
Chat Tunnel - carries binary payloads over a text chat channel

Send path:
    payload -> frame (type octet + maybe zlib) -> encode -> split into messages

Each chat message is `prefix + flag + chunk`, where flag is '+' when more
chunks follow and '.' on the last one. The receiver collects chunks per
sender and decodes once the final chunk arrives. Chat lines without the
prefix are ordinary chat and are ignored.
"""

import logging
from enum import IntEnum
from typing import Callable, Dict, List, Optional

from ..codec import DecodeError, decode, describe_error, encode, encoded_length_of
from ..config import TunnelConfig
from ..utils.compression import compress_if_beneficial, decompress_data
from ..utils.logging_config import set_log_level
from .transport import ChatTransport

logger = logging.getLogger(__name__)

CONTINUE_FLAG = '+'
FINAL_FLAG = '.'

PayloadListener = Callable[[bytes, str], None]  # (payload, sender)
ErrorListener = Callable[[str, str], None]      # (sender, message)


class FrameType(IntEnum):
    """First octet of every encoded frame"""
    RAW = 0x00
    ZLIB = 0x01


class TunnelError(Exception):
    """Raised for payloads that cannot be framed or unframed"""
    pass


class ChatTunnel:
    """Sends and receives payloads through a ChatTransport"""

    def __init__(self, transport: ChatTransport, config: Optional[TunnelConfig] = None):
        self.config = (config or TunnelConfig()).validate()
        set_log_level(self.config.level)
        self.transport = transport

        self.listeners: List[PayloadListener] = []
        self.error_listeners: List[ErrorListener] = []

        # sender -> chunks received so far
        self._pending: Dict[str, List[str]] = {}
        self._pending_size: Dict[str, int] = {}

        # Statistics
        self.payloads_sent = 0
        self.messages_sent = 0
        self.payloads_received = 0
        self.errors = 0

        if self.chunk_size < 1:
            raise TunnelError(
                f"transport limit of {transport.max_message_length} leaves no room after the prefix"
            )

        transport.add_listener(self._on_message)

    @property
    def chunk_size(self) -> int:
        """Encoded symbols that fit in one chat message"""
        limit = min(self.config.max_message_length, self.transport.max_message_length)
        return limit - len(self.config.prefix) - 1

    @property
    def max_encoded_length(self) -> int:
        return encoded_length_of(self.config.max_payload_size + 1)

    def on_payload(self, listener: PayloadListener):
        self.listeners.append(listener)

    def on_error(self, listener: ErrorListener):
        self.error_listeners.append(listener)

    def close(self):
        """Detach from the transport and drop partial payloads"""
        self.transport.remove_listener(self._on_message)
        self._pending.clear()
        self._pending_size.clear()

    # Framing
    def frame(self, payload: bytes) -> bytes:
        """Prefix the payload with its frame type, compressing when worthwhile"""
        if len(payload) > self.config.max_payload_size:
            raise TunnelError(
                f"payload of {len(payload)} bytes exceeds limit of {self.config.max_payload_size}"
            )
        if self.config.compress:
            compressed = compress_if_beneficial(payload, self.config.compress_min_ratio)
            if compressed is not None:
                return bytes([FrameType.ZLIB]) + compressed
        return bytes([FrameType.RAW]) + payload

    def unframe(self, frame: bytes) -> bytes:
        """Reverse frame()"""
        if not frame:
            raise TunnelError("empty frame")

        frame_type, body = frame[0], frame[1:]
        if frame_type == FrameType.RAW:
            payload = body
        elif frame_type == FrameType.ZLIB:
            payload = decompress_data(body, self.config.max_payload_size)
            if payload is None:
                raise TunnelError("compressed payload could not be inflated")
        else:
            raise TunnelError(f"unknown frame type 0x{frame_type:02X}")

        if len(payload) > self.config.max_payload_size:
            raise TunnelError(f"payload of {len(payload)} bytes exceeds limit")
        return payload

    def split(self, text: str) -> List[str]:
        """Cut encoded text into prefixed chat messages"""
        size = self.chunk_size
        chunks = [text[i:i + size] for i in range(0, len(text), size)] or [""]
        prefix = self.config.prefix
        messages = [prefix + CONTINUE_FLAG + chunk for chunk in chunks[:-1]]
        messages.append(prefix + FINAL_FLAG + chunks[-1])
        return messages

    # Sending
    def send(self, payload: bytes) -> int:
        """Send a payload, returning the number of chat messages used"""
        messages = self.split(encode(self.frame(bytes(payload))))
        for message in messages:
            self.transport.send_message(message)

        self.payloads_sent += 1
        self.messages_sent += len(messages)
        logger.debug(f"Sent {len(payload)} byte payload in {len(messages)} messages")
        return len(messages)

    # Receiving
    def _on_message(self, text: str, sender: str):
        prefix = self.config.prefix
        if not text.startswith(prefix):
            return

        flag = text[len(prefix):len(prefix) + 1]
        chunk = text[len(prefix) + 1:]
        if flag not in (CONTINUE_FLAG, FINAL_FLAG):
            self._fail(sender, f"unknown tunnel flag {flag!r}")
            return

        size = self._pending_size.get(sender, 0) + len(chunk)
        if size > self.max_encoded_length:
            self._fail(sender, "payload exceeds size limit")
            return
        self._pending.setdefault(sender, []).append(chunk)
        self._pending_size[sender] = size

        if flag == FINAL_FLAG:
            self._complete(sender)

    def _complete(self, sender: str):
        text = "".join(self._pending.pop(sender, []))
        self._pending_size.pop(sender, None)

        try:
            payload = self.unframe(decode(text))
        except DecodeError as e:
            logger.warning(f"Undecodable payload from {sender}: {e}")
            self._report(sender, describe_error(e))
            return
        except TunnelError as e:
            logger.warning(f"Bad frame from {sender}: {e}")
            self._report(sender, str(e))
            return

        self.payloads_received += 1
        logger.debug(f"Received {len(payload)} byte payload from {sender}")
        for listener in list(self.listeners):
            listener(payload, sender)

    def _fail(self, sender: str, message: str):
        self._pending.pop(sender, None)
        self._pending_size.pop(sender, None)
        logger.warning(f"Dropping tunnel data from {sender}: {message}")
        self._report(sender, message)

    def _report(self, sender: str, message: str):
        self.errors += 1
        for listener in list(self.error_listeners):
            listener(sender, message)
