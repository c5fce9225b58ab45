import itertools

import numpy as np
import pytest

from linblock.code import gf2
from linblock.code.errors import LengthMismatch, UnknownCodeword
from linblock.code.generator import GeneratorMatrix
from linblock.utils.seeding import make_rng


def _all_messages(k):
    return [np.array(bits, dtype=np.int8) for bits in itertools.product([0, 1], repeat=k)]


def test_scenario_encode_decode():
    code = GeneratorMatrix(3, 2, [[1, 0, 1], [0, 1, 1]])
    np.testing.assert_array_equal(code.encode([1, 0]), [1, 0, 1])
    np.testing.assert_array_equal(code.decode([1, 0, 1]), [1, 0])


def test_degenerate_single_bit_code():
    code = GeneratorMatrix(1, 1)
    np.testing.assert_array_equal(code.matrix, [[1]])
    np.testing.assert_array_equal(code.encode([1]), [1])
    np.testing.assert_array_equal(code.decode([1]), [1])
    assert code.parity_check_matrix().to_list() == [[1]]


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_round_trip_generated(seed):
    code = GeneratorMatrix(8, 4, rng=make_rng(seed))
    for msg in _all_messages(4):
        np.testing.assert_array_equal(code.decode(code.encode(msg)), msg)


def test_round_trip_trailing_identity():
    code = GeneratorMatrix(5, 2, [[1, 1, 0, 1, 0], [0, 1, 1, 0, 1]])
    assert code.identity_offset == 3
    for msg in _all_messages(2):
        np.testing.assert_array_equal(code.decode(code.encode(msg)), msg)


def test_linearity():
    code = GeneratorMatrix(7, 3, rng=make_rng(9))
    msgs = _all_messages(3)
    for m1, m2 in itertools.product(msgs, repeat=2):
        lhs = code.encode(gf2.xor(m1, m2))
        rhs = gf2.xor(code.encode(m1), code.encode(m2))
        np.testing.assert_array_equal(lhs, rhs)


def test_table_completeness():
    code = GeneratorMatrix(6, 3, rng=make_rng(4))
    table = code.translation_table
    assert len(table) == 2 ** 3
    assert all(len(key) == 6 for key in table)
    assert all(value.size == 3 for value in table.values())
    assert len(set(table)) == len(table)


def test_table_is_read_only():
    code = GeneratorMatrix(4, 2, rng=make_rng(4))
    with pytest.raises(TypeError):
        code.translation_table["0000"] = np.zeros(2, dtype=np.int8)


def test_codewords_in_message_order():
    code = GeneratorMatrix(3, 2, [[1, 0, 1], [0, 1, 1]])
    pairs = [(m.tolist(), c.tolist()) for m, c in code.codewords()]
    assert pairs == [
        ([0, 0], [0, 0, 0]),
        ([0, 1], [0, 1, 1]),
        ([1, 0], [1, 0, 1]),
        ([1, 1], [1, 1, 0]),
    ]


def test_decode_returns_independent_copy():
    code = GeneratorMatrix(3, 2, [[1, 0, 1], [0, 1, 1]])
    msg = code.decode([1, 0, 1])
    msg[0] = 0
    np.testing.assert_array_equal(code.decode([1, 0, 1]), [1, 0])


def test_length_mismatch():
    code = GeneratorMatrix(3, 2, [[1, 0, 1], [0, 1, 1]])
    with pytest.raises(LengthMismatch):
        code.encode([1, 0, 1])
    with pytest.raises(LengthMismatch):
        code.decode([1, 0])


def test_unknown_codeword():
    code = GeneratorMatrix(3, 2, [[1, 0, 1], [0, 1, 1]])
    with pytest.raises(UnknownCodeword):
        code.decode([1, 0, 0])
