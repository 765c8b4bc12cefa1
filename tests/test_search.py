import pytest

from magnets.csp.consistency import has_sign_conflict, is_consistent
from magnets.csp.domains import build_initial_assignment
from magnets.csp.search import (
    assign,
    backtracking_search,
    order_domain_values,
    select_unassigned_variable,
    unassign,
)
from magnets.grid.board import Board
from magnets.types import CellSign, InferenceMode, Orientation

PN = Orientation.POSITIVE_NEGATIVE
NP = Orientation.NEGATIVE_POSITIVE
EMPTY = Orientation.EMPTY
U = Orientation.UNASSIGNED


def test_mrv_picks_smallest_domain():
    domains = [[PN, NP, EMPTY], [PN], [PN, NP]]
    assert select_unassigned_variable(domains, [U, U, U]) == 1
    assert select_unassigned_variable(domains, [U, PN, U]) == 2
    assert select_unassigned_variable(domains, [PN, PN, PN]) is None


def test_mrv_ties_break_on_index():
    domains = [[PN, NP], [PN, NP], [PN, NP]]
    assert select_unassigned_variable(domains, [PN, U, U]) == 1


def test_lcv_tries_empty_last(one_by_four):
    board = Board(one_by_four)
    assignment = build_initial_assignment(one_by_four.magnets)
    domains = [[EMPTY, PN, NP], [PN, NP, EMPTY]]

    # EMPTY は 1 のドメインをすべて消してしまう
    assert order_domain_values(board, 0, domains, assignment) == [PN, NP, EMPTY]
    assert domains[0] == [EMPTY, PN, NP]


def test_lcv_keeps_domain_order_on_ties(two_by_two_vertical):
    board = Board(two_by_two_vertical)
    assignment = build_initial_assignment(two_by_two_vertical.magnets)
    assign(board, 1, PN, assignment)
    domains = [[NP, PN], [PN]]
    # 近傍が割り当て済みなのでどちらのペナルティも 0
    assert order_domain_values(board, 0, domains, assignment) == [NP, PN]


def test_assign_unassign_restore_the_board(one_by_four):
    board = Board(one_by_four)
    assignment = build_initial_assignment(one_by_four.magnets)

    assign(board, 1, NP, assignment)
    assert assignment == [U, NP]
    unassign(board, 1, assignment)

    assert assignment == [U, U]
    assert (board.signs == int(CellSign.UNASSIGNED)).all()
    assert board.open_cells(("row", 0)) == 4


@pytest.mark.parametrize("mode", list(InferenceMode))
def test_backtracking_search(one_by_four, mode):
    outcome = backtracking_search(one_by_four, mode)
    assert outcome.solved
    assert outcome.assignment == [PN, PN]
    assert outcome.mode is mode
    assert outcome.stats.nodes >= 3


@pytest.mark.parametrize("mode", list(InferenceMode))
def test_backtracking_search_without_solution(unsolvable, mode):
    outcome = backtracking_search(unsolvable, mode)
    assert not outcome.solved
    assert outcome.assignment is None
    assert outcome.stats.backtracks > 0


def test_inference_modes_agree(sample_6x6):
    none = backtracking_search(sample_6x6, InferenceMode.NONE)
    mac = backtracking_search(sample_6x6, InferenceMode.MAC)
    assert none.assignment == mac.assignment
    assert mac.stats.pruned > 0
    assert none.stats.pruned == 0


@pytest.mark.parametrize("mode", list(InferenceMode))
def test_search_fails_on_adjacency_alone(adjacency_unsolvable, mode):
    # 個数だけなら両方 PN で満たせるが、(0,0) と (0,1) が + 同士になる
    board = Board(adjacency_unsolvable)
    board.place(adjacency_unsolvable.magnets[0], PN)
    assert is_consistent(board, 0)
    board.place(adjacency_unsolvable.magnets[1], PN)
    assert has_sign_conflict(board, 1)

    outcome = backtracking_search(adjacency_unsolvable, mode)
    assert not outcome.solved
    if mode is InferenceMode.NONE:
        # 1 個目の配置は整合性チェックを通り、2 段目で行き詰まる
        assert outcome.stats.nodes >= 2
