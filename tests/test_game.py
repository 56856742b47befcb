"""Unit tests for tic-tac-toe board state."""

import pytest

from tictactoe.game import (
    BoardState,
    CellOccupied,
    InvalidEncoding,
    InvalidMove,
    Move,
    Player,
)


def test_initial_state_allows_every_cell():
    state = BoardState.from_string(".........", Player.O)
    assert len(state.legal_moves()) == 9
    assert state.to_move is Player.O
    assert state.is_maximizing is False
    assert state.history == ()


@pytest.mark.parametrize(
    "encoding", [".........", "ox.o.....", "xxxoo....", "xoxxoooxx", "o.x.x.o.."]
)
def test_render_reproduces_encoding(encoding):
    state = BoardState.from_string(encoding, Player.X)
    rendered = state.render()
    assert rendered.endswith("\n\n")
    assert rendered.replace("\n", "") == encoding
    assert state.encode() == encoding


@pytest.mark.parametrize("encoding", ["", "........", "..........", "...X.....", "..a......"])
def test_invalid_encoding_rejected(encoding):
    with pytest.raises(InvalidEncoding):
        BoardState.from_string(encoding, Player.X)


def test_open_position_scores_zero():
    state = BoardState.from_string("ox.o.....", Player.X)
    assert state.score() == 0
    assert not state.is_terminal()
    assert len(state.children()) == 6


def test_row_win_for_x():
    state = BoardState.from_string("xxxoo....", Player.X)
    assert state.score() == 10
    assert state.winner() is Player.X
    assert state.is_terminal()


def test_column_win_for_o_is_terminal():
    state = BoardState.from_string("ox.ox.o..", Player.X)
    assert state.score() == -10
    assert state.winner() is Player.O
    assert state.children() == []
    assert state.legal_moves() == []


@pytest.mark.parametrize(
    "encoding, expected",
    [
        ("x...x...x", 10),
        ("..o.o.o..", -10),
        ("o..o..o..", -10),
        (".x..x..x.", 10),
        ("......ooo", -10),
    ],
)
def test_lines_of_every_kind_score(encoding, expected):
    assert BoardState.from_string(encoding, Player.X).score() == expected


def test_full_board_without_line_is_a_draw():
    state = BoardState.from_string("xoxxoooxx", Player.O)
    assert state.score() == 0
    assert state.winner() is None
    assert state.is_full()
    assert state.is_terminal()
    assert state.children() == []


def test_x_checked_before_o_when_both_complete():
    state = BoardState.from_string("ooo...xxx", Player.X)
    assert state.score() == 10


def test_legal_moves_are_row_major():
    state = BoardState.from_string("x.o.x.o..", Player.O)
    assert state.legal_moves() == [
        Move(0, 1),
        Move(1, 0),
        Move(1, 2),
        Move(2, 1),
        Move(2, 2),
    ]


def test_apply_move_renders_new_mark():
    state = BoardState.from_string("ox.o.....", Player.X)
    child = state.apply_move(Move(0, 2))
    assert child.render() == "oxx\no..\n...\n\n"


def test_apply_move_flips_turn_and_records_history():
    state = BoardState.from_string(".........", Player.O)
    first = state.apply_move(Move(1, 1))
    second = first.apply_move(Move(0, 0))

    assert first.to_move is Player.X and first.is_maximizing
    assert second.to_move is Player.O and not second.is_maximizing
    assert second.history == (Move(1, 1), Move(0, 0))
    # Earlier states are untouched.
    assert state.encode() == "........."
    assert first.encode() == "....o...."


def test_apply_move_on_occupied_cell_fails():
    state = BoardState.from_string("ox.o.....", Player.X)
    with pytest.raises(CellOccupied):
        state.apply_move(Move(0, 0))


def test_apply_move_off_board_fails():
    state = BoardState.from_string(".........", Player.X)
    with pytest.raises(InvalidMove):
        state.apply_move(Move(3, 0))


def test_children_match_empty_cells():
    state = BoardState.from_string("x...o....", Player.X)
    children = state.children()
    assert len(children) == 7
    assert [c.history[-1] for c in children] == state.legal_moves()
    assert all(c.to_move is Player.O for c in children)


def test_direct_construction_checks_side_flag():
    with pytest.raises(ValueError):
        BoardState(to_move=Player.O)
    with pytest.raises(ValueError):
        BoardState(to_move=Player.X, is_maximizing=False)
    assert BoardState(to_move=Player.O, is_maximizing=False).to_move is Player.O
