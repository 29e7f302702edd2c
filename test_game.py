"""
Tests for the Reversi game engine.
"""
import pytest

from reversi.game import Board, Color, ReversiGame, RejectReason, Phase, DRAW


def blank_board() -> Board:
    board = Board()
    board.clear()
    return board


def assert_consistent(game: ReversiGame):
    """Derived state must always agree with the grid."""
    assert game.empty == set(game.board.empty_positions())
    assert game.counts[Color.BLACK] == game.board.count(Color.BLACK)
    assert game.counts[Color.WHITE] == game.board.count(Color.WHITE)


def state_of(game: ReversiGame):
    return (game.board.grid.tobytes(), dict(game.counts), game.current_player,
            frozenset(game.empty), game.passes, game.phase, game.last_move,
            list(game.move_history))


def test_initial_state():
    game = ReversiGame()
    board = game.get_board_state()

    assert board.shape == (8, 8)
    assert (board == 0).sum() == 60
    assert game.get_score() == (2, 2)
    assert game.get_current_player() is Color.BLACK
    assert game.phase is Phase.AWAITING_MOVE
    assert game.passes == 0
    assert game.get_winner() is None
    assert_consistent(game)


def test_valid_moves():
    game = ReversiGame()
    assert game.get_valid_moves() == {(2, 3), (3, 2), (4, 5), (5, 4)}
    # No side effects
    assert game.get_valid_moves() == {(2, 3), (3, 2), (4, 5), (5, 4)}


def test_place_flips_single_disc():
    game = ReversiGame()
    result = game.place((2, 3))

    assert result
    assert result.accepted
    assert result.reason is None
    assert result.flipped == ((3, 3),)
    assert game.board.get((2, 3)) is Color.BLACK
    assert game.board.get((3, 3)) is Color.BLACK
    assert game.get_score() == (4, 1)
    assert game.get_current_player() is Color.WHITE
    assert (2, 3) not in game.empty
    assert game.last_move == (2, 3)
    assert game.get_move_history() == [((2, 3), Color.BLACK)]
    assert_consistent(game)


def test_white_reply():
    game = ReversiGame()
    game.place((2, 3))
    assert game.get_valid_moves() == {(2, 2), (4, 2), (2, 4)}
    result = game.place((2, 2))
    assert result.flipped == ((3, 3),)
    assert game.get_score() == (3, 3)
    assert game.get_current_player() is Color.BLACK


@pytest.mark.parametrize("position, reason", [
    ((3, 3), RejectReason.ALREADY_OCCUPIED),
    ((4, 3), RejectReason.ALREADY_OCCUPIED),
    ((0, 0), RejectReason.NO_FLIPS),
    ((2, 2), RejectReason.NO_FLIPS),
    ((8, 0), RejectReason.OUT_OF_RANGE),
    ((0, 8), RejectReason.OUT_OF_RANGE),
    ((-1, 3), RejectReason.OUT_OF_RANGE),
    (("a", "b"), RejectReason.OUT_OF_RANGE),
    ((2.0, 3), RejectReason.OUT_OF_RANGE),
    ((1, 2, 3), RejectReason.OUT_OF_RANGE),
    (None, RejectReason.OUT_OF_RANGE),
])
def test_rejected_place_leaves_state_unchanged(position, reason):
    game = ReversiGame()
    before = state_of(game)

    result = game.place(position)

    assert not result
    assert result.reason is reason
    assert result.flipped == ()
    assert state_of(game) == before


def test_place_accepts_numpy_integers():
    import numpy as np
    game = ReversiGame()
    assert game.place((np.int64(2), np.int64(3)))
    assert game.last_move == (2, 3)


def test_same_color_neighbourhood_is_never_legal():
    board = blank_board()
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            if (dx, dy) != (0, 0):
                board.set((1 + dx, 1 + dy), Color.BLACK)
    board.set((6, 6), Color.WHITE)
    board.set((7, 6), Color.BLACK)
    game = ReversiGame.from_board(board, Color.BLACK)

    assert (1, 1) not in game.get_valid_moves()
    assert game.place((1, 1)).reason is RejectReason.NO_FLIPS


def test_skip_rejected_when_moves_exist():
    game = ReversiGame()
    before = state_of(game)
    result = game.skip_turn()
    assert not result
    assert result.reason is RejectReason.HAS_LEGAL_MOVES
    assert state_of(game) == before


def test_single_skip_then_placement_resets_counter():
    board = blank_board()
    board.set((0, 0), Color.WHITE)
    board.set((1, 0), Color.BLACK)
    game = ReversiGame.from_board(board, Color.BLACK)

    assert game.get_valid_moves() == set()
    assert game.skip_turn()
    assert game.passes == 1
    assert game.phase is Phase.AWAITING_MOVE
    assert game.get_current_player() is Color.WHITE
    assert game.board == board
    assert game.get_move_history() == [(None, Color.BLACK)]

    # White still has a move so it may not pass
    assert game.skip_turn().reason is RejectReason.HAS_LEGAL_MOVES

    assert game.place((2, 0)).flipped == ((1, 0),)
    assert game.passes == 0
    assert game.get_score() == (0, 3)


def test_two_consecutive_passes_end_the_game():
    board = blank_board()
    board.set((0, 0), Color.BLACK)
    board.set((7, 7), Color.BLACK)
    board.set((3, 3), Color.WHITE)
    game = ReversiGame.from_board(board, Color.BLACK)

    assert game.skip_turn()
    assert not game.is_game_over()
    assert game.skip_turn()

    assert game.is_game_over()
    assert game.phase is Phase.TERMINAL
    assert sum(game.get_score()) < 64
    assert game.get_winner() is Color.BLACK


def test_board_full_ends_the_game():
    board = blank_board()
    board.grid.fill(int(Color.WHITE))
    board.grid[0, 0] = 0
    board.set((2, 0), Color.BLACK)
    game = ReversiGame.from_board(board, Color.BLACK)

    assert game.get_valid_moves() == {(0, 0)}
    result = game.place((0, 0))

    assert result.flipped == ((1, 0),)
    assert game.is_game_over()
    assert game.passes == 0
    assert game.get_score() == (3, 61)
    assert game.get_winner() is Color.WHITE


def test_full_grid_starts_terminal():
    board = blank_board()
    board.grid.fill(int(Color.BLACK))
    board.set((0, 0), Color.WHITE)
    game = ReversiGame.from_board(board, Color.WHITE)

    assert game.is_game_over()
    assert game.phase is Phase.TERMINAL
    assert game.get_score() == (63, 1)
    assert game.get_winner() is Color.BLACK
    assert game.get_valid_moves() == set()
    assert game.place((0, 0)).reason is RejectReason.GAME_OVER
    assert game.skip_turn().reason is RejectReason.GAME_OVER


def test_draw():
    board = blank_board()
    board.set((0, 0), Color.BLACK)
    board.set((7, 7), Color.WHITE)
    game = ReversiGame.from_board(board)
    game.skip_turn()
    game.skip_turn()
    assert game.get_winner() == DRAW
    assert "draw" in str(game)


def test_nothing_accepted_after_game_over():
    board = blank_board()
    board.set((0, 0), Color.BLACK)
    game = ReversiGame.from_board(board)
    game.skip_turn()
    game.skip_turn()
    assert game.is_game_over()
    before = state_of(game)

    assert game.get_valid_moves() == set()
    assert game.place((4, 4)).reason is RejectReason.GAME_OVER
    assert game.skip_turn().reason is RejectReason.GAME_OVER
    assert state_of(game) == before


def test_full_game_conserves_discs():
    """Play the lowest legal move each turn and check every transition."""
    game = ReversiGame()
    transitions = 0

    while not game.is_game_over():
        assert_consistent(game)
        moves = game.get_valid_moves()
        black, white = game.get_score()
        mover = game.get_current_player()

        if not moves:
            assert game.skip_turn()
            assert game.get_score() == (black, white)
        else:
            result = game.place(min(moves))
            assert result
            new_black, new_white = game.get_score()
            assert new_black + new_white == black + white + 1
            gained = len(result.flipped) + 1
            if mover is Color.BLACK:
                assert (new_black, new_white) == (black + gained, white - len(result.flipped))
            else:
                assert (new_black, new_white) == (black - len(result.flipped), white + gained)
        transitions += 1
        assert transitions < 200

    assert_consistent(game)
    black, white = game.get_score()
    assert game.board.is_full() or game.passes == 2
    if black > white:
        assert game.get_winner() is Color.BLACK
    elif white > black:
        assert game.get_winner() is Color.WHITE
    else:
        assert game.get_winner() == DRAW


def test_copy_is_independent():
    game = ReversiGame()
    clone = game.copy()
    clone.place((2, 3))
    assert game.get_score() == (2, 2)
    assert game.empty != clone.empty
    assert game.get_move_history() == []


def test_reset():
    game = ReversiGame()
    game.place((2, 3))
    game.reset()
    assert game.get_score() == (2, 2)
    assert game.get_current_player() is Color.BLACK
    assert len(game.empty) == 60


def test_snapshot():
    game = ReversiGame()
    snap = game.snapshot()
    assert snap.black == 2 and snap.white == 2
    assert snap.turn is Color.BLACK
    assert not snap.is_terminal
    assert snap.winner is None
    assert snap.legal_moves == frozenset({(2, 3), (3, 2), (4, 5), (5, 4)})
    assert not snap.cells.flags.writeable

    game.place((2, 3))
    # Snapshots do not follow later mutations
    assert snap.cells[3, 3] == int(Color.WHITE)
    assert game.snapshot().last_move == (2, 3)


def test_str():
    text = str(ReversiGame())
    assert "Current player: Black" in text
    assert "Score - Black: 2, White: 2" in text
