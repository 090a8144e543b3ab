import pytest

from lightsgrid.board import GameBoard, quit_text


def _off_count(board):
    return sum(
        not board.get(x, y) for x in range(board.width) for y in range(board.height)
    )


def test_new_board_is_solved():
    board = GameBoard(3, 3)
    assert board.solved()
    assert board.move_count == 0


def test_labels_follow_values():
    board = GameBoard(3, 3)
    assert board.label(1, 1) == " ON"
    board.set(1, 1, False)
    assert board.label(1, 1) == "OFF"


def test_press_centre_flips_five():
    board = GameBoard(3, 3)
    board.press(1, 1)
    assert _off_count(board) == 5
    assert board.get(0, 0) and board.get(2, 2)
    assert not board.get(1, 0) and not board.get(0, 1)


def test_press_corner_flips_three():
    board = GameBoard(3, 3)
    board.press(0, 0)
    assert _off_count(board) == 3
    assert not board.get(1, 0) and not board.get(0, 1)
    assert board.get(1, 1)


def test_press_twice_restores_and_counts():
    board = GameBoard(4, 2)
    board.press(2, 1)
    assert not board.solved()
    board.press(2, 1)
    assert board.solved()
    assert board.move_count == 2


def test_toggle_is_an_involution():
    board = GameBoard(2, 2)
    board.toggle(1, 0)
    assert board.get(1, 0) is False
    board.toggle(1, 0)
    assert board.get(1, 0) is True


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_out_of_range_cells_raise(x, y):
    board = GameBoard(3, 3)
    with pytest.raises(IndexError):
        board.press(x, y)
    assert board.move_count == 0


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        GameBoard(0, 3)


def test_scramble_is_deterministic_and_resets_moves():
    first = GameBoard(3, 3)
    second = GameBoard(3, 3)
    first.scramble(seed=7, iterations=25)
    second.scramble(seed=7, iterations=25)
    assert first.move_count == 0
    cells = [(x, y) for x in range(3) for y in range(3)]
    assert [first.get(*c) for c in cells] == [second.get(*c) for c in cells]


def test_scramble_with_no_iterations_keeps_board():
    board = GameBoard(3, 3)
    board.scramble(seed=1, iterations=0)
    assert board.solved()


def test_quit_text_solved():
    assert quit_text(GameBoard(3, 3)) == "Quit (0 moves) Solved!"


def test_quit_text_unsolved():
    board = GameBoard(3, 3)
    board.press(0, 2)
    assert quit_text(board) == "Quit (1 moves)"