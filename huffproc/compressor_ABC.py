from abc import ABC, abstractmethod
import io
from typing import BinaryIO, Tuple


class Compressor(ABC):
    """
    Interface for compressing and decompressing streams,
    with helpers for whole files and in-memory bytes.
    """

    @abstractmethod
    def compress(
        self, input_stream: BinaryIO, output_stream: BinaryIO, verbose: bool = False
    ) -> str:
        """
        Read the input stream, compress it and write the
        compressed form to the output stream.

        Args:
            input_stream: Stream with the data, must support a second pass
            output_stream: Stream for the compressed data
            verbose: Whether to print progress information

        Returns:
            Log information
        """

    @abstractmethod
    def decompress(
        self, input_stream: BinaryIO, output_stream: BinaryIO, verbose: bool = False
    ) -> str:
        """
        Read a compressed stream and write the original data
        to the output stream.

        Args:
            input_stream: Stream with the compressed data
            output_stream: Stream for the decompressed data
            verbose: Whether to print progress information

        Returns:
            Log information
        """

    @classmethod
    def compress_file(cls, input_file: str, output_file: str, verbose: bool = False) -> str:
        """
        Compress a file. Both files are closed on every exit path.

        Args:
            input_file: Path to the input file
            output_file: Path to the output file
            verbose: Whether to print progress information

        Returns:
            Log information
        """
        compressor = cls()
        with open(input_file, "rb") as in_file, open(output_file, "wb") as out_file:
            return compressor.compress(in_file, out_file, verbose=verbose)

    @classmethod
    def decompress_file(cls, input_file: str, output_file: str, verbose: bool = False) -> str:
        """
        Decompress a file. Both files are closed on every exit path,
        bytes decoded before an error stay in the output file.
        """
        compressor = cls()
        with open(input_file, "rb") as in_file, open(output_file, "wb") as out_file:
            return compressor.decompress(in_file, out_file, verbose=verbose)

    @classmethod
    def compress_bytes(cls, data: bytes, verbose: bool = False) -> Tuple[bytes, str]:
        """
        Compress bytes in memory.

        Returns:
            Tuple (compressed data, log information)
        """
        compressor = cls()
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.compress(in_buffer, out_buffer, verbose=verbose)
        return out_buffer.getvalue(), log_info

    @classmethod
    def decompress_bytes(cls, data: bytes, verbose: bool = False) -> Tuple[bytes, str]:
        """
        Decompress bytes in memory.

        Returns:
            Tuple (decompressed data, log information)
        """
        compressor = cls()
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.decompress(in_buffer, out_buffer, verbose=verbose)
        return out_buffer.getvalue(), log_info
