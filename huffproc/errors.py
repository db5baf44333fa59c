"""
Errors raised while decoding a Huffman stream.
"""


class HuffError(ValueError):
    """Base class for every failure of a compress/decompress call."""


class FormatError(HuffError):
    """
    The stream does not start with the expected format marker.
    """

    def __init__(self, magic: int) -> None:
        self.magic = magic
        super().__init__(f"invalid magic number {magic:#010x}")


class TruncatedHeader(HuffError):
    """End of stream reached while reading the tree header."""

    def __init__(self) -> None:
        super().__init__("bad header, stream ended inside the tree")


class MissingTerminator(HuffError):
    """End of stream reached before the PSEUDO_EOF code."""

    def __init__(self) -> None:
        super().__init__("bad input, no PSEUDO_EOF")


class CorruptHeader(HuffError):
    """The tree header does not describe a tree over valid symbols."""
