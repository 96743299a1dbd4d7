"""
Chat transports - anything that can carry a line of text between players.

The tunnel only needs two things from a transport: a way to send one chat
message and a callback for every message received. A transport must deliver
code points of the codec alphabets unchanged.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)

MessageListener = Callable[[str, str], None]  # (text, sender)


class TransportError(Exception):
    """Raised when a transport cannot send a message"""
    pass


class ChatTransport(ABC):
    """Base class for chat transports"""

    def __init__(self, name: str, max_message_length: int = 150):
        self.name = name
        self.max_message_length = max_message_length
        self.listeners: List[MessageListener] = []

    def add_listener(self, listener: MessageListener):
        """Register a callback for incoming messages"""
        self.listeners.append(listener)

    def remove_listener(self, listener: MessageListener):
        if listener in self.listeners:
            self.listeners.remove(listener)

    @abstractmethod
    def send_message(self, text: str):
        """Send one chat message"""
        pass

    def deliver(self, text: str, sender: str):
        """Hand an incoming message to every listener"""
        for listener in list(self.listeners):
            listener(text, sender)


class LoopbackTransport(ChatTransport):
    """In-process transport; messages sent on one end arrive at its peer

    Usage:
        alice, bob = LoopbackTransport.pair("alice", "bob")
        bob.add_listener(lambda text, sender: print(sender, text))
        alice.send_message("hello")
    """

    def __init__(self, name: str, max_message_length: int = 150):
        super().__init__(name, max_message_length)
        self.peer: Optional['LoopbackTransport'] = None
        self.sent: List[str] = []

    @classmethod
    def pair(cls, first: str = "local", second: str = "remote",
             max_message_length: int = 150) -> Tuple['LoopbackTransport', 'LoopbackTransport']:
        """Create two transports wired to each other"""
        a = cls(first, max_message_length)
        b = cls(second, max_message_length)
        a.peer = b
        b.peer = a
        return a, b

    def send_message(self, text: str):
        if len(text) > self.max_message_length:
            raise TransportError(
                f"message of {len(text)} characters exceeds limit of {self.max_message_length}"
            )
        self.sent.append(text)
        if self.peer is None:
            logger.debug(f"{self.name}: no peer, message dropped")
            return
        self.peer.deliver(text, self.name)
