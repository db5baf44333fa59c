"""
Huffman coding algorithm -
frequency analysis, tree construction and code table
"""

import heapq

from huffproc.huffman_utils.bit_reader import END_OF_STREAM, BitReader

BITS_PER_WORD = 8
ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE


class Node:
    """
    Class object for Node in Huffman's Tree.

    Nodes are ordered by weight, then by serial number, so equal weights
    always resolve the same way: leaves use their symbol as serial and
    merged nodes are numbered after them in creation order.
    """

    def __init__(self, weight: int, serial: int):
        self.weight = weight
        self.serial = serial

    def __lt__(self, other):
        return (self.weight, self.serial) < (other.weight, other.serial)


class Leaf(Node):
    """
    Leaf of Huffman's Tree, holds a symbol in [0, PSEUDO_EOF].
    """

    def __init__(self, value: int, weight: int = 0):
        """
        :param value: int, symbol held by the leaf
        :param weight: int, the frequency of this symbol in our data
        """
        super().__init__(weight, value)
        self.value = value

    def __repr__(self):
        return f"Leaf({self.value})"


class Internal(Node):
    """
    Internal node of Huffman's Tree, owns exactly two children.
    """

    def __init__(self, left: Node, right: Node, weight: int = 0, serial: int = 0):
        super().__init__(weight, serial)
        self.left = left
        self.right = right

    def __repr__(self):
        return f"Internal({self.left!r}, {self.right!r})"


class HuffmanTree:
    """
    Class object for Huffman Tree - main structure used
    in Huffman coding algorithm. Holds the root and the
    code table derived from it.
    """

    def __init__(self, root: Node):
        """
        Function initializes the structure of Huffman Tree.

        :param root: Node, root of an already built tree
        """
        self.root = root
        self.res_codes: dict[int, tuple[int, int]] = {}

    @staticmethod
    def char_frequency(reader: BitReader) -> list[int]:
        """
        Function counts every 8-bit symbol of the stream until its end.
        PSEUDO_EOF is always counted exactly once. The reader is left
        at the end of the stream.

        :param reader: BitReader, stream to count symbols for
        :return: list, ALPH_SIZE + 1 counts indexed by symbol
        """
        freq = [0] * (ALPH_SIZE + 1)
        while True:
            val = reader.read_bits(BITS_PER_WORD)
            if val == END_OF_STREAM:
                break
            freq[val] += 1

        freq[PSEUDO_EOF] = 1
        return freq

    @classmethod
    def build_from_freq(cls, freq: list[int]) -> "HuffmanTree":
        """
        Builds Huffman-tree from a frequency table, every symbol including
        zero-weight ones enters the pool, generates prefix codes and
        returns the instance.

        :param freq: list, count per symbol
        :return: HuffmanTree with filled res_codes
        """
        nodes = [Leaf(val, val_freq) for val, val_freq in enumerate(freq)]
        heapq.heapify(nodes)

        serial = len(freq)
        while len(nodes) > 1:
            # two smallest nodes, left first
            l = heapq.heappop(nodes)
            r = heapq.heappop(nodes)
            heapq.heappush(nodes, Internal(l, r, l.weight + r.weight, serial))
            serial += 1

        tree = cls(nodes[0])
        tree.codes_generation()
        return tree

    def codes_generation(self, node: Node = None, code: int = 0, length: int = 0):
        """
        Recursive function that generates code for each symbol,
        preorder traversal of Huffman's tree. A step to the left
        appends 0, a step to the right appends 1.

        :param node: node to start traversal from
        :param code: int, bits of the path so far
        :param length: int, length of the path so far
        """
        if node is None:
            node = self.root

        if isinstance(node, Leaf):
            assert length > 0, "tree root must not be a leaf"
            self.res_codes[node.value] = (code, length)
            return

        self.codes_generation(node.left, code << 1, length + 1)
        self.codes_generation(node.right, (code << 1) | 1, length + 1)
