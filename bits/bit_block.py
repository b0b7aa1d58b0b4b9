"""
Fixed-Length Bit Blocks

This module provides BitBlock, an immutable sequence of binary digits
backed by a read-only numpy array. Index 0 is the first and most
significant position. At the external boundary bits are exchanged as the
ASCII characters '0' and '1', one character per bit.
"""

import numpy as np
from typing import Iterator, Sequence, Union

_ZERO = ord('0')
_ONE = ord('1')


class MalformedBlockError(ValueError):
    """Raised for bit sequences of the wrong length or with invalid symbols."""


class BitBlock:
    """
    Immutable fixed-length sequence of bits.

    Every operation returns a new BitBlock; the underlying array is never
    written after construction.
    """

    __slots__ = ('_bits',)

    def __init__(self, bits: Sequence[int]):
        """
        Create a block from a sequence of 0/1 values.

        Args:
            bits: Sequence (or 1-D array) of integers or booleans

        Raises:
            MalformedBlockError: If the sequence is not one-dimensional
                or holds values other than 0 and 1
        """
        arr = np.asarray(bits)
        if arr.ndim != 1:
            raise MalformedBlockError("Bits must form a one-dimensional sequence")
        if arr.size and not np.all((arr == 0) | (arr == 1)):
            raise MalformedBlockError("Bits must be 0 or 1")
        self._bits = _freeze(arr.astype(np.uint8))

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> 'BitBlock':
        # Internal constructor for arrays already known to hold only 0/1.
        block = cls.__new__(cls)
        block._bits = _freeze(arr)
        return block

    @classmethod
    def from_bytes(cls, data: bytes) -> 'BitBlock':
        """
        Create a block from ASCII bytes, one b'0' or b'1' per bit.

        Args:
            data: Raw bytes as read from a bit file

        Returns:
            The decoded block

        Raises:
            MalformedBlockError: If any byte is not b'0' or b'1'
        """
        raw = np.frombuffer(bytes(data), dtype=np.uint8)
        if raw.size and not np.all((raw == _ZERO) | (raw == _ONE)):
            raise MalformedBlockError("Bit data may only contain the characters '0' and '1'")
        return cls._wrap((raw == _ONE).astype(np.uint8))

    @classmethod
    def from_string(cls, text: str) -> 'BitBlock':
        """Create a block from a string of '0'/'1' characters."""
        try:
            data = text.encode('ascii')
        except UnicodeEncodeError as e:
            raise MalformedBlockError(f"Bit string contains non-ASCII characters: {e}") from e
        return cls.from_bytes(data)

    @classmethod
    def from_int(cls, value: int, length: int) -> 'BitBlock':
        """
        Create a block of `length` bits from an integer, most significant bit first.

        Raises:
            MalformedBlockError: If the value does not fit in `length` bits
        """
        if value < 0 or value >> length:
            raise MalformedBlockError(f"Value {value} does not fit in {length} bits")
        bits = [(value >> (length - 1 - i)) & 1 for i in range(length)]
        return cls._wrap(np.array(bits, dtype=np.uint8))

    @classmethod
    def zeros(cls, length: int) -> 'BitBlock':
        """Create an all-zero block of the given length."""
        return cls._wrap(np.zeros(length, dtype=np.uint8))

    @property
    def bits(self) -> np.ndarray:
        """The read-only uint8 array holding the bits."""
        return self._bits

    def to_bytes(self) -> bytes:
        """Encode the block as ASCII b'0'/b'1' bytes."""
        return (self._bits + np.uint8(_ZERO)).tobytes()

    def to_string(self) -> str:
        """Encode the block as a string of '0'/'1' characters."""
        return self.to_bytes().decode('ascii')

    def to_int(self) -> int:
        """Interpret the block as an unsigned integer, first bit most significant."""
        return int(self.to_string(), 2) if len(self) else 0

    def hamming_distance(self, other: 'BitBlock') -> int:
        """Count the positions at which two equal-length blocks differ."""
        if len(self) != len(other):
            raise ValueError(f"Cannot compare blocks of {len(self)} and {len(other)} bits")
        return int(np.count_nonzero(self._bits != other._bits))

    def __xor__(self, other: 'BitBlock') -> 'BitBlock':
        if not isinstance(other, BitBlock):
            return NotImplemented
        if len(self) != len(other):
            raise ValueError(f"Cannot XOR blocks of {len(self)} and {len(other)} bits")
        return BitBlock._wrap(np.bitwise_xor(self._bits, other._bits))

    def __len__(self) -> int:
        return int(self._bits.size)

    def __getitem__(self, item):
        if isinstance(item, slice):
            return BitBlock._wrap(self._bits[item].copy())
        return int(self._bits[item])

    def __iter__(self) -> Iterator[int]:
        return (int(b) for b in self._bits)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BitBlock):
            return NotImplemented
        return bool(np.array_equal(self._bits, other._bits))

    def __hash__(self) -> int:
        return hash((len(self), self._bits.tobytes()))

    def __repr__(self) -> str:
        return f"BitBlock('{self.to_string()}')"

    def __str__(self) -> str:
        return self.to_string()


def _freeze(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


def as_bit_block(value: Union[BitBlock, str, bytes, Sequence[int]]) -> BitBlock:
    """
    Coerce a block given as BitBlock, '0'/'1' string, ASCII bytes
    or 0/1 sequence into a BitBlock.

    Args:
        value: The bits in any supported representation

    Returns:
        The value as a BitBlock

    Raises:
        MalformedBlockError: If the value holds anything but bits
    """
    if isinstance(value, BitBlock):
        return value
    if isinstance(value, str):
        return BitBlock.from_string(value)
    if isinstance(value, (bytes, bytearray)):
        return BitBlock.from_bytes(bytes(value))
    return BitBlock(value)
