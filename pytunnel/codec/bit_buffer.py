"""
MSB-first bit accumulator shared by the encoder and decoder.

Octets and symbol groups are appended at the low end and removed from the
high end, so the first octet in always supplies the high bits of the first
group out.
"""

from .errors import InternalError


class BitBuffer:
    """Small bit queue holding at most 22 bits between public calls"""

    MAX_BITS = 22

    def __init__(self):
        self.value = 0
        self.held_bits = 0

    def __len__(self) -> int:
        return self.held_bits

    def __repr__(self) -> str:
        if not self.held_bits:
            return "BitBuffer(<empty>)"
        return f"BitBuffer({self.value:0{self.held_bits}b})"

    def remaining(self) -> int:
        """Number of bits currently held"""
        return self.held_bits

    def clear(self):
        self.value = 0
        self.held_bits = 0

    # Write methods
    def push_group(self, value: int, width: int) -> 'BitBuffer':
        """Append the low `width` bits of value"""
        if self.held_bits + width > self.MAX_BITS:
            raise InternalError(
                f"pushing {width} bits onto {self.held_bits} exceeds {self.MAX_BITS}"
            )
        self.value = (self.value << width) | (value & ((1 << width) - 1))
        self.held_bits += width
        return self

    def push_octet(self, octet: int) -> 'BitBuffer':
        """Append 8 bits"""
        return self.push_group(octet, 8)

    # Read methods
    def pop_group(self, width: int) -> int:
        """Remove and return the `width` most significant held bits"""
        if width > self.held_bits:
            raise InternalError(f"need {width} bits, only {self.held_bits} held")
        self.held_bits -= width
        group = self.value >> self.held_bits
        self.value &= (1 << self.held_bits) - 1
        return group

    def pop_octet(self) -> int:
        """Remove and return the 8 most significant held bits"""
        return self.pop_group(8)

    def peek_value(self) -> int:
        """Held bits as an integer, without consuming them"""
        return self.value
