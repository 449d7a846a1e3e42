"""
棋盘单元测试
"""

import pytest

from cchess.board import FILE_FOOTER, Board
from cchess.layouts import get_layout
from cchess.types import EMPTY, Move, Team


@pytest.fixture
def board() -> Board:
    return Board(get_layout("official"))


class TestBoardInitialization:
    """棋盘初始化测试"""

    def test_initial_piece_count(self, board):
        """每方 16 个棋子，共 32 个"""
        assert len(list(board)) == 32

    def test_initial_king_positions(self, board):
        assert board.find_king(Team.RED) == (9, 4)
        assert board.find_king(Team.BLACK) == (0, 4)

    def test_empty_board(self):
        board = Board.empty()
        assert list(board) == []
        assert board.find_king(Team.RED) is None

    def test_layout_is_copied(self):
        """修改原布局不影响棋盘"""
        layout = get_layout("official")
        board = Board(layout)
        layout[9][4] = 0
        assert board.get_piece(9, 4) == 17

    def test_wrong_row_count(self):
        with pytest.raises(ValueError):
            Board([[0] * 9 for _ in range(9)])

    def test_wrong_column_count(self):
        layout = [[0] * 9 for _ in range(10)]
        layout[3] = [0] * 8
        with pytest.raises(ValueError):
            Board(layout)

    def test_invalid_piece_code(self):
        layout = [[0] * 9 for _ in range(10)]
        layout[0][0] = 38
        with pytest.raises(ValueError):
            Board(layout)


class TestBoardOperations:
    """棋盘操作测试"""

    def test_get_piece(self, board):
        assert board.get_piece(7, 7) == 13
        assert board.get_piece(0, 0) == 21

    def test_get_piece_empty(self, board):
        assert board.get_piece(4, 4) == EMPTY
        assert board.is_empty(4, 4)

    def test_set_and_remove_piece(self):
        board = Board.empty()
        board.set_piece(5, 5, 11)
        assert board.get_piece(5, 5) == 11
        assert board.remove_piece(5, 5) == 11
        assert board.is_empty(5, 5)

    def test_count_between_vertical(self, board):
        # 红车 (9,0) 到黑车 (0,0) 之间有两个兵卒
        assert board.count_between(Move(9, 0, 0, 0)) == 2

    def test_count_between_horizontal(self, board):
        # 红炮 (7,1) 到 (7,7) 之间为空
        assert board.count_between(Move(7, 1, 7, 7)) == 0
        # 底线车到车之间 7 个子
        assert board.count_between(Move(9, 0, 9, 8)) == 7

    def test_count_between_adjacent(self, board):
        assert board.count_between(Move(9, 0, 8, 0)) == 0

    def test_equality(self, board):
        other = Board(board.to_layout())
        assert other == board
        other.remove_piece(9, 4)
        assert other != board

    def test_to_layout_snapshot(self, board):
        snapshot = board.to_layout()
        assert len(snapshot) == 10
        assert all(len(row) == 9 for row in snapshot)
        assert snapshot[9][4] == 17
        board.remove_piece(9, 4)
        assert snapshot[9][4] == 17


class TestBoardMoves:
    """棋盘走棋测试"""

    def test_make_move(self, board):
        captured = board.make_move(Move(7, 7, 7, 4))
        assert captured == EMPTY
        assert board.is_empty(7, 7)
        assert board.get_piece(7, 4) == 13

    def test_make_move_capture(self, board):
        # 红炮打黑马
        captured = board.make_move(Move(7, 1, 0, 1))
        assert captured == 22
        assert board.get_piece(0, 1) == 13

    def test_make_move_from_empty(self, board):
        with pytest.raises(ValueError):
            board.make_move(Move(4, 4, 5, 4))

    def test_undo_move(self, board):
        before = board.to_layout()
        move = Move(7, 1, 0, 1)
        captured = board.make_move(move)
        board.undo_move(move, captured)
        assert board.to_layout() == before


class TestBoardDisplay:
    """文本显示测试"""

    def test_display_lines(self, board):
        lines = board.display().splitlines()
        assert len(lines) == 11
        assert lines[0] == " 10 2車 2馬 2象 2士 2將 2士 2象 2馬 2車"
        assert lines[1] == " 09" + " -～" * 9
        assert lines[9] == " 01 1俥 1傌 1相 1仕 1帥 1仕 1相 1傌 1俥"
        assert lines[10] == FILE_FOOTER

    def test_str_matches_display(self, board):
        assert str(board) == board.display()
        assert board.display().endswith("\n")

    def test_repr(self, board):
        assert repr(board) == "Board(32 pieces)"
