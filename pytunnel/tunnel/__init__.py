"""
Chat tunnelling - payload framing over chat transports
"""

from .chat_tunnel import CONTINUE_FLAG, FINAL_FLAG, ChatTunnel, FrameType, TunnelError
from .transport import ChatTransport, LoopbackTransport, TransportError

__all__ = [
    'ChatTunnel', 'FrameType', 'TunnelError', 'CONTINUE_FLAG', 'FINAL_FLAG',
    'ChatTransport', 'LoopbackTransport', 'TransportError',
]
