import io
import random
from fractions import Fraction

from huffproc.huffman_coding import (
    ALPH_SIZE,
    PSEUDO_EOF,
    HuffmanTree,
    Internal,
    Leaf,
)
from huffproc.huffman_utils.bit_reader import BitReader


def _freq(data: bytes) -> list:
    return HuffmanTree.char_frequency(BitReader(io.BytesIO(data)))


def _leaves(node, path=""):
    if isinstance(node, Leaf):
        yield node.value, path
        return
    yield from _leaves(node.left, path + "0")
    yield from _leaves(node.right, path + "1")


def _as_str(code, length):
    return format(code, f"0{length}b")


def test_char_frequency_empty():
    freq = _freq(b"")
    assert len(freq) == ALPH_SIZE + 1
    assert freq[PSEUDO_EOF] == 1
    assert sum(freq) == 1


def test_char_frequency_counts_bytes():
    freq = _freq(b"AAB\xff")
    assert freq[ord("A")] == 2
    assert freq[ord("B")] == 1
    assert freq[255] == 1
    assert freq[PSEUDO_EOF] == 1
    assert sum(freq) == 5


def test_char_frequency_consumes_stream():
    reader = BitReader(io.BytesIO(b"abc"))
    HuffmanTree.char_frequency(reader)
    assert reader.bits_read == 24


def test_empty_input_tree():
    tree = HuffmanTree.build_from_freq(_freq(b""))
    assert isinstance(tree.root, Internal)
    assert tree.res_codes[PSEUDO_EOF] == (1, 1)


def test_two_equal_bytes():
    tree = HuffmanTree.build_from_freq(_freq(b"AA"))
    assert tree.res_codes[ord("A")] == (1, 1)
    assert tree.res_codes[PSEUDO_EOF] == (0b01, 2)


def test_every_symbol_gets_a_leaf():
    tree = HuffmanTree.build_from_freq(_freq(b"hello world"))
    values = [value for value, _ in _leaves(tree.root)]
    assert sorted(values) == list(range(ALPH_SIZE + 1))
    assert values.count(PSEUDO_EOF) == 1
    assert len(tree.res_codes) == ALPH_SIZE + 1


def test_codes_follow_tree_paths():
    tree = HuffmanTree.build_from_freq(_freq(b"abracadabra"))
    for value, path in _leaves(tree.root):
        assert _as_str(*tree.res_codes[value]) == path


def test_codes_are_prefix_free():
    rng = random.Random(7)
    data = bytes(rng.choice(b"aaaaabbbccd\x00\xff") for _ in range(2000))
    tree = HuffmanTree.build_from_freq(_freq(data))
    codes = [_as_str(code, length) for code, length in tree.res_codes.values()]
    assert all(len(code) >= 1 for code in codes)
    for i, a in enumerate(codes):
        for b in codes[i + 1:]:
            assert not a.startswith(b)
            assert not b.startswith(a)


def test_code_lengths_form_a_complete_tree():
    tree = HuffmanTree.build_from_freq(_freq(bytes(range(256))))
    total = sum(Fraction(1, 2 ** length) for _, length in tree.res_codes.values())
    assert total == 1
    assert {length for _, length in tree.res_codes.values()} <= {8, 9}


def test_frequent_symbols_get_shorter_codes():
    tree = HuffmanTree.build_from_freq(_freq(b"a" * 100 + b"b" * 10 + b"c"))
    lengths = {value: length for value, (_, length) in tree.res_codes.items()}
    assert lengths[ord("a")] <= lengths[ord("b")] <= lengths[ord("c")]


def test_build_is_deterministic():
    freq = _freq(b"the quick brown fox jumps over the lazy dog")
    first = HuffmanTree.build_from_freq(freq).res_codes
    second = HuffmanTree.build_from_freq(list(freq)).res_codes
    assert first == second


def test_root_weight_is_total_count():
    freq = _freq(b"mississippi")
    tree = HuffmanTree.build_from_freq(freq)
    assert tree.root.weight == sum(freq)
