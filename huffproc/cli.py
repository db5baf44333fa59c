"""
Command line entry point: huffproc compress|decompress INPUT OUTPUT
"""

import argparse
import sys

from huffproc.errors import HuffError
from huffproc.huff_processor import HuffProcessor


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        prog="huffproc", description="static Huffman compression of a single file"
    )
    p.add_argument("command", choices=["compress", "decompress"])
    p.add_argument("input", metavar="INPUT")
    p.add_argument("output", metavar="OUTPUT")
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="print progress while compressing or decompressing"
    )
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.command == "compress":
        action = HuffProcessor.compress_file
    else:
        action = HuffProcessor.decompress_file

    try:
        log_info = action(args.input, args.output, verbose=args.verbose)
    except HuffError as e:
        print(f"{args.input}: {e}", file=sys.stderr)
        return 1

    print(log_info)
    return 0


if __name__ == "__main__":
    sys.exit(main())
