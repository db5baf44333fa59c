from typing import BinaryIO

from bitarray import bitarray
from bitarray.util import int2ba

# complete bytes kept in memory before they are pushed to the stream
FLUSH_THRESHOLD = 1 << 16


class BitWriter:
    """
    A class for writing bits to a binary stream, most significant bit first.
    Bits are collected in a bitarray and handed to the stream a byte at a time.

    Used as a context manager: a clean exit pads and flushes the last byte,
    an exit through an exception only keeps the bytes that were complete.
    The underlying stream is left open for its owner to close.
    """

    def __init__(self, stream: BinaryIO) -> None:
        """
        Initialize a new BitWriter on top of the given stream.

        Args:
            stream: Binary stream opened for writing
        """
        self.stream = stream
        self.bits = bitarray(endian="big")
        self.bits_written = 0
        self.closed = False

    def __enter__(self) -> "BitWriter":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if exc_type is None:
            self.close()
        else:
            self.abort()

    def write_bits(self, n: int, value: int) -> None:
        """
        Write the low n bits of value in MSB-first order.

        Args:
            n: Number of bits to write
            value: Integer holding the bits

        Raises:
            ValueError: If n is not positive or the writer is closed
        """
        if n <= 0:
            raise ValueError("Number of bits must be positive")
        if self.closed:
            raise ValueError("Write to a closed BitWriter")
        self.bits.extend(int2ba(value & ((1 << n) - 1), length=n, endian="big"))
        self.bits_written += n
        if len(self.bits) >= FLUSH_THRESHOLD * 8:
            self._flush_complete_bytes()

    def _flush_complete_bytes(self) -> None:
        whole = len(self.bits) - len(self.bits) % 8
        if whole:
            self.stream.write(self.bits[:whole].tobytes())
            del self.bits[:whole]

    def close(self) -> None:
        """Pad the last byte with zero bits and push everything to the stream."""
        if self.closed:
            return
        self.bits.fill()
        self._flush_complete_bytes()
        self.stream.flush()
        self.closed = True

    def abort(self) -> None:
        """Push the complete bytes to the stream and drop the partial byte."""
        if self.closed:
            return
        self._flush_complete_bytes()
        self.bits.clear()
        self.stream.flush()
        self.closed = True
