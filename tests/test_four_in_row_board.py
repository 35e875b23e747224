import pytest

from dipgames.four_in_row_board import (
    BOARD_SIZE,
    ROWS,
    WINNING_LINES,
    Board,
    Progress,
    Side,
    Status,
    WinInfo,
    generate_lines,
    square_to_index,
)


def play(columns):
    board = Board()
    for column in columns:
        board = board.make_move(column)
    return board


def test_make_move():
    board = Board()
    board = board.make_move(0)
    assert board.side_to_move is Side.YELLOW
    assert board.get(square_to_index(0, 0)) is Side.RED

    board = board.make_move(0)
    assert board.side_to_move is Side.RED
    assert board.get(square_to_index(1, 0)) is Side.YELLOW


def test_valid_moves():
    board = Board()
    assert board.possible_moves() == [0, 1, 2, 3, 4, 5, 6]
    for _ in range(ROWS):
        board = board.make_move(0)
    assert board.possible_moves() == [1, 2, 3, 4, 5, 6]


def test_full_column_rejected():
    board = play([0] * ROWS)
    with pytest.raises(ValueError):
        board.make_move(0)


@pytest.mark.parametrize("column", [-1, 7])
def test_column_out_of_range(column):
    with pytest.raises(ValueError):
        Board().make_move(column)


def test_last_move_recorded():
    board = play([3, 3])
    assert board.last_move == (1, 3)


def test_original_board_unchanged():
    board = Board()
    board.make_move(2)
    assert board.complete_board() == 0


def test_square_to_index():
    assert square_to_index(0, 0) == 0
    assert square_to_index(2, 3) == 17
    assert square_to_index(5, 6) == BOARD_SIZE - 1


def test_generate_lines_count_and_shape():
    lines = generate_lines(4)
    assert len(lines) == 69
    assert lines[0] == 0b1111
    assert all(line.bit_count() == 4 for line in lines)
    assert (1 | 1 << 7 | 1 << 14 | 1 << 21) in lines
    assert tuple(lines) == WINNING_LINES


@pytest.mark.parametrize("n", [0, 7])
def test_generate_lines_bad_length(n):
    with pytest.raises(ValueError):
        generate_lines(n)


def test_blank_in_progress():
    assert Board().status() == Status(Progress.IN_PROGRESS)


def test_horizontal_win():
    board = play([0, 0, 1, 1, 2, 2, 3])
    assert board.status() == Status(Progress.WIN, WinInfo(Side.RED, 0b1111))


def test_vertical_win_yellow():
    board = play([0, 1, 0, 1, 0, 1, 2, 1])
    line = 1 << 1 | 1 << 8 | 1 << 15 | 1 << 22
    assert board.status() == Status(Progress.WIN, WinInfo(Side.YELLOW, line))


def _draw_board():
    red = 0
    yellow = 0
    for row in range(ROWS):
        for column in range(7):
            red_square = (column % 4 in (0, 1)) != (row % 2 == 1)
            bit = 1 << square_to_index(row, column)
            if red_square:
                red |= bit
            else:
                yellow |= bit
    return Board(red=red, yellow=yellow)


def test_full_board_without_line_is_draw():
    board = _draw_board()
    assert board.possible_moves() == []
    assert board.status() == Status(Progress.DRAW)


def test_overlapping_masks_rejected():
    with pytest.raises(ValueError):
        Board(red=1, yellow=1)


def test_get_empty_square():
    assert Board().get(10) is None


def test_side_helpers():
    assert Side.RED.other() is Side.YELLOW
    assert Side.YELLOW.other() is Side.RED
    assert Side.RED.sprite_index == 1
    assert Side.YELLOW.sprite_index == 2
    assert str(Side.RED) == "Red"


def test_str_blank():
    expected = "".join(f"{row} . . . . . . . \n" for row in range(5, -1, -1))
    expected += "  0 1 2 3 4 5 6 \n"
    assert str(Board()) == expected


def test_str_after_moves():
    text = str(play([3, 3]))
    lines = text.splitlines()
    assert lines[-2] == "0 . . . R . . . "
    assert lines[-3] == "1 . . . Y . . . "