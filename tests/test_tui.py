from lightsgrid.bitmap import Bitmap, CanvasAnimation
from lightsgrid.board import GameBoard
from lightsgrid.tui import _activate, _bitmap_lines, _compose_frame, board_rows


def test_fresh_board_rows_all_on():
    rows = board_rows(GameBoard(3, 3))
    assert rows == [[" ON"] * 3] * 3


def test_rows_follow_width_then_height():
    rows = board_rows(GameBoard(2, 4))
    assert len(rows) == 2
    assert all(len(row) == 4 for row in rows)


def test_rows_reflect_press():
    board = GameBoard(3, 3)
    board.press(0, 0)
    rows = board_rows(board)
    assert rows[0][0] == "OFF"
    assert rows[0][1] == "OFF"
    assert rows[1][0] == "OFF"
    assert rows[1][1] == " ON"


def test_activate_ignored_when_solved():
    board = GameBoard(3, 3)
    _activate(board, 1, 1)
    assert board.move_count == 0
    assert board.solved()


def test_activate_presses_when_unsolved():
    board = GameBoard(3, 3)
    board.press(2, 2)
    _activate(board, 2, 2)
    assert board.move_count == 2
    assert board.solved()


def test_bitmap_lines_one_glyph_per_column():
    bm = Bitmap(5, 4)
    lines = _bitmap_lines(bm)
    assert len(lines) == 2
    assert all(line.count("\u2584") == 5 for line in lines)


def test_frame_shows_counter():
    animation = CanvasAnimation()
    animation.step(1_000_000_000)
    frame = _compose_frame(animation, 7)
    assert "Frame: 7" in frame
    assert "FPS: 1.000000" in frame