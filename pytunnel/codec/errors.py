"""
Codec error types

Encoding never fails. Decoding aborts on the first structural problem and
raises one of the DecodeError subclasses below; no partial output is kept.
"""

from typing import Optional


class InternalError(Exception):
    """Raised when the codec is driven outside its contract (programmer error)"""
    pass


class DecodeError(ValueError):
    """Base class for all decode failures"""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class InvalidSymbol(DecodeError):
    """A code point that belongs to neither alphabet"""

    def __init__(self, position: int, code_point: int):
        super().__init__(
            f"invalid symbol U+{code_point:04X} at position {position}", position
        )
        self.code_point = code_point


class TrailingSymbolsAfterTail(DecodeError):
    """A symbol follows the tail symbol"""

    def __init__(self, position: int):
        super().__init__(f"symbol at position {position} follows the tail symbol", position)


class UnalignedLargeOnlyStream(DecodeError):
    """Stream ended without a tail and its padding bits are not zero"""

    def __init__(self, residual_bits: int):
        super().__init__(
            f"stream ends with {residual_bits} non-zero padding bits and no tail"
        )
        self.residual_bits = residual_bits


class MalformedTail(DecodeError):
    """Tail symbol carries no bits, has non-zero padding, or does not align"""

    def __init__(self, position: int, reason: str):
        super().__init__(f"malformed tail at position {position}: {reason}", position)
        self.reason = reason


def describe_error(error: DecodeError) -> str:
    """Human readable text for a decode failure, for display in chat/UI"""
    if isinstance(error, InvalidSymbol):
        return (f"Message contains a character that is not part of the encoding "
                f"(U+{error.code_point:04X} at position {error.position}).")
    if isinstance(error, TrailingSymbolsAfterTail):
        return "Message has extra characters after its end marker."
    if isinstance(error, UnalignedLargeOnlyStream):
        return "Message was cut off or altered in transit."
    if isinstance(error, MalformedTail):
        return "Message ending is damaged and cannot be decoded."
    return f"Message could not be decoded: {error}"
