import pytest

from magnets.grid.board import Board
from magnets.types import CellSign, Orientation


def test_fresh_board_is_unassigned(one_by_four):
    board = Board(one_by_four)
    assert board.sign_at((0, 0)) == CellSign.UNASSIGNED
    assert board.line_counts(("row", 0)) == (0, 0)
    assert board.open_cells(("row", 0)) == 4
    assert board.open_cells(("col", 3)) == 1
    assert not board.row_resolved(0)


def test_place_updates_signs_and_counters(one_by_four):
    board = Board(one_by_four)
    first = one_by_four.magnets[0]

    board.place(first, Orientation.NEGATIVE_POSITIVE)

    assert board.sign_at((0, 0)) == CellSign.NEGATIVE
    assert board.sign_at((0, 1)) == CellSign.POSITIVE
    assert board.line_counts(("row", 0)) == (1, 1)
    assert board.line_counts(("col", 0)) == (0, 1)
    assert board.line_counts(("col", 1)) == (1, 0)
    assert board.open_cells(("row", 0)) == 2
    assert board.col_resolved(0)
    assert board.is_placed(0)
    assert not board.is_placed(1)


def test_place_and_lift_are_symmetric(sample_6x6):
    board = Board(sample_6x6)
    for magnet, value in zip(
        sample_6x6.magnets,
        [Orientation.POSITIVE_NEGATIVE, Orientation.EMPTY, Orientation.NEGATIVE_POSITIVE] * 6,
    ):
        board.place(magnet, value)
    assert all(board.row_resolved(r) for r in range(6))

    for magnet in reversed(sample_6x6.magnets):
        board.lift(magnet)

    assert (board.signs == int(CellSign.UNASSIGNED)).all()
    assert board.row_pos.sum() == 0 and board.row_neg.sum() == 0
    assert board.col_pos.sum() == 0 and board.col_neg.sum() == 0
    assert board.row_open.tolist() == [6] * 6
    assert board.col_open.tolist() == [6] * 6


def test_replacing_an_orientation_keeps_counts_exact(one_by_two):
    board = Board(one_by_two)
    magnet = one_by_two.magnets[0]
    board.place(magnet, Orientation.POSITIVE_NEGATIVE)
    board.place(magnet, Orientation.EMPTY)
    assert board.line_counts(("row", 0)) == (0, 0)
    assert board.open_cells(("row", 0)) == 0


def test_place_unassigned_is_rejected(one_by_two):
    board = Board(one_by_two)
    with pytest.raises(ValueError):
        board.place(one_by_two.magnets[0], Orientation.UNASSIGNED)


def test_geometry(two_by_two_vertical):
    board = Board(two_by_two_vertical)
    # 下・上・右・左 の順
    assert board.neighbors((0, 0)) == [(1, 0), (0, 1)]
    assert board.neighbors((1, 1)) == [(0, 1), (1, 0)]
    assert board.lines_of(two_by_two_vertical.magnets[0]) == [("row", 0), ("row", 1), ("col", 0)]
    assert board.cells_of(("col", 1)) == [(0, 1), (1, 1)]
