import numpy as np

from linblock.code.standard_form import find_identity_block, is_standard_form


def test_leading_identity_block():
    G = np.array([[1, 0, 0, 1, 1], [0, 1, 0, 0, 1], [0, 0, 1, 1, 0]])
    assert find_identity_block(G) == 0
    assert is_standard_form(G)


def test_trailing_identity_block():
    G = np.array([[1, 1, 1, 0], [0, 1, 0, 1]])
    assert find_identity_block(G) == 2


def test_identity_block_in_the_middle():
    G = np.array([[1, 1, 0, 1], [1, 0, 1, 1]])
    assert find_identity_block(G) == 1


def test_no_unit_columns_rejected():
    G = np.array([[1, 1, 1], [1, 1, 1]])
    assert find_identity_block(G) is None
    assert not is_standard_form(G)


def test_out_of_order_units_rejected():
    G = np.array([[0, 1, 1], [1, 0, 1]])
    assert not is_standard_form(G)


def test_failed_column_restarts_at_next_column():
    # Column 1 breaks the run started at column 0 and is not reconsidered as a start.
    G = np.array([[1, 1, 0], [0, 0, 1]])
    assert find_identity_block(G) is None


def test_single_bit_matrix_is_identity():
    assert find_identity_block(np.array([[1]])) == 0
