from typing import BinaryIO

from bitarray import bitarray
from bitarray.util import ba2int

# returned by read_bits when the stream holds fewer bits than requested
END_OF_STREAM = -1


class BitReader:
    """
    A class for reading bits from a binary stream, most significant bit first.
    The whole stream is loaded into a bitarray so it can be rewound.
    """

    def __init__(self, stream: BinaryIO) -> None:
        """
        Initialize BitReader by reading the entire stream into a bitarray.

        Args:
            stream: Binary stream opened for reading
        """
        self.bits = bitarray(endian="big")
        self.bits.frombytes(stream.read())
        self.pos = 0
        self.bits_read = 0

    def __len__(self) -> int:
        return len(self.bits)

    def read_bit(self) -> int:
        """
        Read one bit from the stream.

        Returns:
            The bit value (0 or 1), or END_OF_STREAM if the stream is exhausted
        """
        if self.pos >= len(self.bits):
            return END_OF_STREAM
        val = self.bits[self.pos]
        self.pos += 1
        self.bits_read += 1
        return val

    def read_bits(self, n: int) -> int:
        """
        Read n bits in MSB-first order and return them as an integer.

        Args:
            n: Number of bits to read

        Returns:
            The value in [0, 2**n), or END_OF_STREAM if fewer than n bits
            remain. The position is left unchanged in that case.

        Raises:
            ValueError: If n is not positive
        """
        if n <= 0:
            raise ValueError("Number of bits must be positive")
        if self.pos + n > len(self.bits):
            return END_OF_STREAM
        val = ba2int(self.bits[self.pos : self.pos + n])
        self.pos += n
        self.bits_read += n
        return val

    def rewind(self) -> None:
        """Move the position back to the first bit of the stream."""
        self.pos = 0
