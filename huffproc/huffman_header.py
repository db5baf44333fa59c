"""
Tree header - the Huffman tree written in preorder so a decoder
can rebuild it without any external dictionary.

    internal node:  0, left subtree, right subtree
    leaf:           1, symbol in HEADER_VALUE_BITS bits
"""

from huffproc.errors import CorruptHeader, TruncatedHeader
from huffproc.huffman_coding import ALPH_SIZE, BITS_PER_WORD, PSEUDO_EOF, Internal, Leaf, Node
from huffproc.huffman_utils.bit_reader import END_OF_STREAM, BitReader
from huffproc.huffman_utils.bit_writer import BitWriter

# one bit more than a byte so PSEUDO_EOF fits
HEADER_VALUE_BITS = BITS_PER_WORD + 1


def write_header(node: Node, writer: BitWriter) -> int:
    """
    Write the tree rooted at node to the writer.

    Args:
        node: Root of the tree to serialize
        writer: Destination bit stream

    Returns:
        Number of bits written
    """
    if isinstance(node, Leaf):
        writer.write_bits(1, 1)
        writer.write_bits(HEADER_VALUE_BITS, node.value)
        return 1 + HEADER_VALUE_BITS

    writer.write_bits(1, 0)
    return 1 + write_header(node.left, writer) + write_header(node.right, writer)


def read_header(reader: BitReader, depth: int = 0) -> Node:
    """
    Rebuild a tree written by write_header. Weights are not stored
    in the header, every node comes back with weight 0.

    Raises:
        TruncatedHeader: If the stream ends before the tree is complete
        CorruptHeader: If a leaf holds a value above PSEUDO_EOF or the
            tree nests deeper than a tree over ALPH_SIZE + 1 leaves can
    """
    if depth > ALPH_SIZE:
        raise CorruptHeader("tree is too deep")
    bit = reader.read_bit()
    if bit == END_OF_STREAM:
        raise TruncatedHeader()
    if bit == 0:
        left = read_header(reader, depth + 1)
        right = read_header(reader, depth + 1)
        return Internal(left, right)

    value = reader.read_bits(HEADER_VALUE_BITS)
    if value == END_OF_STREAM:
        raise TruncatedHeader()
    if value > PSEUDO_EOF:
        raise CorruptHeader(f"leaf value {value} out of range")
    return Leaf(value)
