"""
Static Huffman compression with the tree stored in the stream.

Stream layout, most significant bit first:
    HUFF_TREE marker   32 bits
    tree header        see huffman_header
    body               one code per input byte, then the PSEUDO_EOF code
"""

from typing import BinaryIO

from huffproc.compressor_ABC import Compressor
from huffproc.errors import CorruptHeader, FormatError, MissingTerminator
from huffproc.huffman_coding import BITS_PER_WORD, PSEUDO_EOF, HuffmanTree, Leaf
from huffproc.huffman_header import read_header, write_header
from huffproc.huffman_utils.bit_reader import END_OF_STREAM, BitReader
from huffproc.huffman_utils.bit_writer import BitWriter

BITS_PER_INT = 32
HUFF_NUMBER = 0xFACE8200
HUFF_TREE = HUFF_NUMBER | 1


class HuffProcessor(Compressor):
    """
    Compresses and decompresses byte streams with a static Huffman code.
    Every call builds its own tree, nothing is shared between calls.
    """

    def compress(
        self, input_stream: BinaryIO, output_stream: BinaryIO, verbose: bool = False
    ) -> str:
        """
        Compress the input stream in two passes: count symbols,
        then rewind and write one code per byte.

        Args:
            input_stream: Stream with the data to compress
            output_stream: Stream for the compressed data
            verbose: Whether to print progress information

        Returns:
            Log information
        """
        reader = BitReader(input_stream)
        with BitWriter(output_stream) as writer:
            freq = HuffmanTree.char_frequency(reader)
            tree = HuffmanTree.build_from_freq(freq)
            if verbose:
                used = sum(1 for count in freq[:PSEUDO_EOF] if count)
                print(f"Counted {sum(freq) - 1} bytes, {used} distinct values")

            writer.write_bits(BITS_PER_INT, HUFF_TREE)
            header_bits = write_header(tree.root, writer)
            if verbose:
                print(f"Tree header: {header_bits} bits")

            reader.rewind()
            body_bits = self._write_compressed_bits(tree.res_codes, reader, writer)
            if verbose:
                print(f"Body: {body_bits} bits")

        return self._log_info(reader.bits_read, writer.bits_written, len(reader))

    @staticmethod
    def _write_compressed_bits(
        codes: dict[int, tuple[int, int]], reader: BitReader, writer: BitWriter
    ) -> int:
        body_bits = 0
        while True:
            val = reader.read_bits(BITS_PER_WORD)
            if val == END_OF_STREAM:
                break
            code, length = codes[val]
            writer.write_bits(length, code)
            body_bits += length

        code, length = codes[PSEUDO_EOF]
        writer.write_bits(length, code)
        return body_bits + length

    def decompress(
        self, input_stream: BinaryIO, output_stream: BinaryIO, verbose: bool = False
    ) -> str:
        """
        Decompress a stream written by compress. Bytes are written as soon
        as they are decoded; on error the ones already written stay.

        Args:
            input_stream: Stream with the compressed data
            output_stream: Stream for the original data
            verbose: Whether to print progress information

        Returns:
            Log information

        Raises:
            FormatError: If the stream does not start with HUFF_TREE
            TruncatedHeader: If the stream ends inside the tree header
            CorruptHeader: If the tree header is not a valid tree
            MissingTerminator: If the stream ends before PSEUDO_EOF
        """
        reader = BitReader(input_stream)
        with BitWriter(output_stream) as writer:
            magic = reader.read_bits(BITS_PER_INT)
            if magic != HUFF_TREE:
                raise FormatError(magic)

            root = read_header(reader)
            if isinstance(root, Leaf):
                raise CorruptHeader("tree root is a leaf")
            if verbose:
                print(f"Tree header: {reader.bits_read - BITS_PER_INT} bits")

            decoded = 0
            curr = root
            while True:
                bit = reader.read_bit()
                if bit == END_OF_STREAM:
                    raise MissingTerminator()
                curr = curr.right if bit else curr.left
                if isinstance(curr, Leaf):
                    if curr.value == PSEUDO_EOF:
                        break
                    writer.write_bits(BITS_PER_WORD, curr.value)
                    decoded += 1
                    curr = root

            if verbose:
                print(f"Decoded {decoded} bytes")

        return self._log_info(reader.bits_read, writer.bits_written, len(reader))

    @staticmethod
    def _log_info(bits_read: int, bits_written: int, input_bits: int) -> str:
        log = [f"Read {bits_read} bits, wrote {bits_written} bits"]
        size_in = (input_bits + 7) // 8
        size_out = (bits_written + 7) // 8
        diff = size_in - size_out
        if diff > 0:
            ratio = diff / size_in * 100
            log.append(f"Size reduced by {diff} bytes ({ratio:.1f}% total saving)")
        else:
            log.append(f"Size increased by {-diff} bytes")
        return "\n".join(log)
