"""Unit tests for /src/chess/game.py"""

import logging
from copy import deepcopy
from unittest.mock import patch

import pytest

from src.chess.board import STARTING_PLACEMENT, Board
from src.chess.game import (
    GameState,
    apply_click,
    is_valid_placement,
    is_valid_square_name,
    new_game,
)
from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square, all_squares
from src.core.exceptions import GameStateError
from src.core.models import GameModel


def sq(name: str) -> Square:
    return Square.from_algebraic(name)


def click_sequence(state: GameState, *square_names: str) -> GameState:
    """convenience method: click the squares one after the other"""
    for name in square_names:
        state = apply_click(state, sq(name))
    return state


# -- NEW GAME ---
def test_new_game() -> None:
    state = new_game()
    assert state.board == Board.initialize()
    assert state.white_to_move
    assert state.color_to_move == Color.WHITE
    assert state.selected is None


# -- SELECTION ---
def test_select_own_piece() -> None:
    state = apply_click(new_game(), sq("e2"))
    assert state.selected == sq("e2")
    assert state.white_to_move


@pytest.mark.parametrize("square_name", ["e7", "e4", "a8"])
def test_cannot_select_empty_square_or_opponent_piece(square_name: str) -> None:
    start = new_game()
    state = apply_click(start, sq(square_name))
    assert state == start


def test_black_can_only_select_after_white_moved() -> None:
    state = click_sequence(new_game(), "e2", "e4", "e2")
    assert state.selected is None

    state = apply_click(state, sq("e7"))
    assert state.selected == sq("e7")


# -- MOVING ---
def test_legal_move_flips_turn_and_clears_selection() -> None:
    start = new_game()
    state = click_sequence(start, "e2", "e4")

    assert not state.white_to_move
    assert state.selected is None
    assert state.board.is_empty(sq("e2"))
    assert state.board.piece(sq("e4")) == Piece(PieceType.PAWN, Color.WHITE)
    for square in all_squares():
        if square not in (sq("e2"), sq("e4")):
            assert state.board.piece(square) == start.board.piece(square)


def test_illegal_move_changes_nothing_but_selection() -> None:
    start = new_game()
    selected = apply_click(start, sq("a1"))
    state = apply_click(selected, sq("a4"))

    assert state.board == start.board
    assert state.white_to_move
    assert state.selected is None


def test_clicking_selected_piece_again_deselects() -> None:
    state = click_sequence(new_game(), "g1", "g1")
    assert state == new_game()


def test_clicking_another_own_piece_only_deselects() -> None:
    """The second click is always a move attempt. Taking your own piece is illegal, so nothing gets selected."""
    state = click_sequence(new_game(), "g1", "e2")
    assert state.selected is None
    assert state.white_to_move
    assert state.board == Board.initialize()


def test_apply_click_does_not_mutate_input() -> None:
    start = apply_click(new_game(), sq("e2"))
    snapshot = deepcopy(start)
    _ = apply_click(start, sq("e4"))
    assert start == snapshot


def test_short_game_with_capture() -> None:
    """1. e4 d5 2. exd5"""
    state = click_sequence(new_game(), "e2", "e4", "d7", "d5", "e4", "d5")
    assert not state.white_to_move
    assert state.board.piece(sq("d5")) == Piece(PieceType.PAWN, Color.WHITE)
    assert state.board.count_pieces() == {Color.WHITE: 16, Color.BLACK: 15}
    assert state.board.to_placement() == "rnbqkbnr/ppp1pppp/8/3P4/8/8/PPPP1PPP/RNBQKBNR"


def test_validator_is_consulted() -> None:
    """Whatever the validator says goes"""
    state = apply_click(new_game(), sq("a1"))
    with patch("src.chess.game.is_valid_move", return_value=True) as mock_validator:
        after = apply_click(state, sq("a5"))

    mock_validator.assert_called_once_with(state.board, sq("a1"), sq("a5"))
    assert after.board.piece(sq("a5")) == Piece(PieceType.ROOK, Color.WHITE)
    assert not after.white_to_move


def test_moves_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="src.chess.game"):
        click_sequence(new_game(), "e2", "e5", "e2", "e4")

    assert "Rejected e2e5 for white" in caplog.text
    assert "white e2e4" in caplog.text


# -- CONVERSION TO/FROM TRANSPORT MODEL ---
def test_to_model() -> None:
    state = apply_click(new_game(), sq("b1"))
    model = state.to_model()
    assert model == GameModel(
        placement=STARTING_PLACEMENT, color_to_move="white", selected="b1"
    )


def test_from_model() -> None:
    model = GameModel(placement="4k3/8/8/8/8/8/8/4K3", color_to_move="black", selected="e8")
    state = GameState.from_model(model)
    assert not state.white_to_move
    assert state.selected == sq("e8")
    assert state.board.piece(sq("e8")) == Piece(PieceType.KING, Color.BLACK)
    assert state.to_model() == model


@pytest.mark.parametrize(
    "model",
    [
        GameModel(placement="8/8/8", color_to_move="white"),
        GameModel(placement=STARTING_PLACEMENT, color_to_move="red"),
        GameModel(placement=STARTING_PLACEMENT, color_to_move="white", selected="z9"),
        GameModel(placement="rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBN¹", color_to_move="white"),
        GameModel(placement=STARTING_PLACEMENT, color_to_move="white", selected="a²"),
        GameModel(placement=STARTING_PLACEMENT, color_to_move="white", selected="e4"),  # empty square
        GameModel(placement=STARTING_PLACEMENT, color_to_move="white", selected="e7"),  # opponent's piece
        GameModel(placement=STARTING_PLACEMENT, color_to_move="black", selected="e2"),  # opponent's piece
    ],
)
def test_from_invalid_model(model: GameModel) -> None:
    with pytest.raises(GameStateError):
        GameState.from_model(model)


# -- VALIDATION HELPERS ---
@pytest.mark.parametrize(
    "placement, expected",
    [
        (STARTING_PLACEMENT, True),
        ("/".join(["8"] * 8), True),
        ("4k3/8/8/8/8/8/8/4K3", True),
        ("/".join(["8"] * 7), False),  # only 7 rows
        ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBN", False),  # last row too short
        ("rnbqkbnr/pppppppp/9/8/8/8/PPPPPPPP/RNBQKBNR", False),  # row too long
        ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNX", False),  # unknown piece
        ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBN¹", False),  # superscript digit
        ("rnbqkbnr/pppppppp/8/8/0/8/PPPPPPPP/RNBQKBNR", False),
    ],
)
def test_is_valid_placement(placement: str, expected: bool) -> None:
    assert is_valid_placement(placement) == expected


@pytest.mark.parametrize(
    "name, expected",
    [("a1", True), ("h8", True), ("e4", True), ("i1", False), ("a9", False), ("a0", False), ("e", False), ("e44", False), ("a²", False), ("h¹", False)],
)
def test_is_valid_square_name(name: str, expected: bool) -> None:
    assert is_valid_square_name(name) == expected
