from magnets.csp.constraints import compatible, generate_arcs, line_within_limits
from magnets.csp.domains import build_initial_assignment
from magnets.csp.search import assign
from magnets.grid.board import Board
from magnets.types import ConstraintArc, ConstraintKind, Orientation

PN = Orientation.POSITIVE_NEGATIVE
NP = Orientation.NEGATIVE_POSITIVE
EMPTY = Orientation.EMPTY


def test_generate_arcs_sign_then_limit(two_by_two_vertical):
    board = Board(two_by_two_vertical)
    assignment = build_initial_assignment(two_by_two_vertical.magnets)

    arcs = list(generate_arcs(board, 0, assignment))

    assert arcs == [
        ConstraintArc(xi=1, xj=0, kind=ConstraintKind.SIGN, pole_i=0, pole_j=0),
        ConstraintArc(xi=1, xj=0, kind=ConstraintKind.SIGN, pole_i=1, pole_j=1),
        ConstraintArc(xi=1, xj=0, kind=ConstraintKind.LIMIT, line=("row", 0)),
        ConstraintArc(xi=1, xj=0, kind=ConstraintKind.LIMIT, line=("row", 1)),
    ]


def test_generate_arcs_is_deterministic(sample_6x6):
    board = Board(sample_6x6)
    assignment = build_initial_assignment(sample_6x6.magnets)
    assert list(generate_arcs(board, 7, assignment)) == list(generate_arcs(board, 7, assignment))


def test_generate_arcs_skips_excluded_and_assigned(two_by_two_vertical):
    board = Board(two_by_two_vertical)
    assignment = build_initial_assignment(two_by_two_vertical.magnets)

    assert list(generate_arcs(board, 0, assignment, exclude=1)) == []

    assign(board, 1, PN, assignment)
    assert list(generate_arcs(board, 0, assignment)) == []


def test_generate_arcs_one_limit_arc_per_line(sample_6x6):
    board = Board(sample_6x6)
    assignment = build_initial_assignment(sample_6x6.magnets)

    arcs = generate_arcs(board, 0, assignment)
    limit = [(a.xi, a.line) for a in arcs if a.kind is ConstraintKind.LIMIT]

    assert len(limit) == len(set(limit))
    # 行 0 の他のマグネット: 1, 2, 3
    assert [xi for xi, line in limit if line == ("row", 0)] == [1, 2, 3]
    # 列 0: 4 (E), 10 (K), 13 (N), 15 (P)
    assert [xi for xi, line in limit if line == ("col", 0)] == [4, 10, 13, 15]


def test_sign_compatibility(one_by_four):
    board = Board(one_by_four)
    # 1 の pole_a (0,2) と 0 の pole_b (0,1) が隣接
    arc = ConstraintArc(xi=1, xj=0, kind=ConstraintKind.SIGN, pole_i=0, pole_j=1)
    assert compatible(board, arc, PN, PN)       # + と -
    assert not compatible(board, arc, NP, PN)   # - と -
    assert not compatible(board, arc, PN, NP)   # + と +
    assert compatible(board, arc, EMPTY, PN)
    assert compatible(board, arc, EMPTY, EMPTY)


def test_limit_compatibility_counts_both_unplaced_magnets(one_by_four):
    board = Board(one_by_four)
    arc = ConstraintArc(xi=1, xj=0, kind=ConstraintKind.LIMIT, line=("row", 0))
    assert compatible(board, arc, PN, NP)
    # 行 0 は 4 マスすべてに符号が必要
    assert not compatible(board, arc, EMPTY, PN)
    assert not compatible(board, arc, EMPTY, EMPTY)


def test_limit_compatibility_with_placed_magnet(one_by_four):
    board = Board(one_by_four)
    assignment = build_initial_assignment(one_by_four.magnets)
    assign(board, 0, PN, assignment)

    arc = ConstraintArc(xi=1, xj=0, kind=ConstraintKind.LIMIT, line=("row", 0))
    # xj の寄与はすでに盤面に含まれているので二重に数えない
    assert compatible(board, arc, NP, PN)
    assert not compatible(board, arc, EMPTY, PN)


def test_line_within_limits(one_by_two):
    board = Board(one_by_two)
    magnet = one_by_two.magnets[0]
    assert line_within_limits(board, ("row", 0))
    assert line_within_limits(board, ("row", 0), [(magnet, PN)])
    assert not line_within_limits(board, ("row", 0), [(magnet, EMPTY)])
    # 列 0 は + が 1 個だけ
    assert line_within_limits(board, ("col", 0), [(magnet, PN)])
    assert not line_within_limits(board, ("col", 0), [(magnet, NP)])
