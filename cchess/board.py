"""
棋盘类定义

10 行 x 9 列的棋子编码网格

坐标系统：
- row 0-9: 0 是黑方底线（第 10 行），9 是红方底线（第 1 行）
- col 0-8: 0 是记谱中的 A 列，即红方视角最右边的“九”路
"""

from collections.abc import Sequence
from typing import Iterator

from cchess.types import (
    COLS,
    EMPTY,
    ROWS,
    Move,
    PieceType,
    Team,
    is_valid_code,
    make_code,
    team_of,
    type_of,
)

Layout = Sequence[Sequence[int]]

# 棋子字符，下标为棋子类型，0 为空格
RED_GLYPHS = "～俥傌炮仕相兵帥"
BLACK_GLYPHS = "～車馬砲士象卒將"
FILE_FOOTER = "     Ａ  Ｂ  Ｃ  Ｄ  Ｅ  Ｆ  Ｇ  Ｈ  Ｉ"


class Board:
    """象棋棋盘

    每个格子存放棋子编码 team * 10 + type，0 表示空格
    """

    def __init__(self, layout: Layout | None = None):
        if layout is None:
            self._grid = [[EMPTY] * COLS for _ in range(ROWS)]
        else:
            self._grid = self._copy_layout(layout)

    @staticmethod
    def _copy_layout(layout: Layout) -> list[list[int]]:
        """复制并检查布局"""
        if len(layout) != ROWS:
            raise ValueError(f"Layout must have {ROWS} rows, got {len(layout)}")
        grid = []
        for i, row in enumerate(layout):
            if len(row) != COLS:
                raise ValueError(f"Layout row {i} must have {COLS} cells, got {len(row)}")
            for code in row:
                if not is_valid_code(code):
                    raise ValueError(f"Invalid piece code {code} in row {i}")
            grid.append(list(row))
        return grid

    @classmethod
    def empty(cls) -> "Board":
        """空棋盘"""
        return cls()

    def get_piece(self, row: int, col: int) -> int:
        """获取指定位置的棋子编码，空格返回 0"""
        return self._grid[row][col]

    def set_piece(self, row: int, col: int, code: int) -> None:
        """设置指定位置的棋子"""
        self._grid[row][col] = code

    def remove_piece(self, row: int, col: int) -> int:
        """移除并返回指定位置的棋子"""
        code = self._grid[row][col]
        self._grid[row][col] = EMPTY
        return code

    def is_empty(self, row: int, col: int) -> bool:
        return self._grid[row][col] == EMPTY

    def count_between(self, move: Move) -> int:
        """统计直线走法起点和终点之间（不含两端）的棋子数

        走法必须是横向或纵向，两个方向中总有一个循环为空
        """
        count = 0
        for row in range(min(move.sr, move.er) + 1, max(move.sr, move.er)):
            if self._grid[row][move.sc] != EMPTY:
                count += 1
        for col in range(min(move.sc, move.ec) + 1, max(move.sc, move.ec)):
            if self._grid[move.sr][col] != EMPTY:
                count += 1
        return count

    def find_king(self, team: Team) -> tuple[int, int] | None:
        """找到指定阵营的将/帅位置"""
        king = make_code(team, PieceType.KING)
        for row in range(ROWS):
            for col in range(COLS):
                if self._grid[row][col] == king:
                    return row, col
        return None

    def make_move(self, move: Move) -> int:
        """执行走棋，返回被吃的棋子编码（没有则为 0）"""
        piece = self._grid[move.sr][move.sc]
        if piece == EMPTY:
            raise ValueError(f"No piece at position ({move.sr}, {move.sc})")

        captured = self._grid[move.er][move.ec]
        self._grid[move.er][move.ec] = piece
        self._grid[move.sr][move.sc] = EMPTY
        return captured

    def undo_move(self, move: Move, captured: int) -> None:
        """撤销走棋"""
        piece = self._grid[move.er][move.ec]
        if piece == EMPTY:
            raise ValueError(f"No piece at position ({move.er}, {move.ec})")

        self._grid[move.sr][move.sc] = piece
        self._grid[move.er][move.ec] = captured

    def to_layout(self) -> tuple[tuple[int, ...], ...]:
        """只读快照"""
        return tuple(tuple(row) for row in self._grid)

    def to_dict(self) -> dict:
        """序列化为字典"""
        return {"layout": [list(row) for row in self._grid]}

    def __iter__(self) -> Iterator[tuple[int, int, int]]:
        """遍历所有棋子 (row, col, code)"""
        for row in range(ROWS):
            for col in range(COLS):
                if self._grid[row][col] != EMPTY:
                    yield row, col, self._grid[row][col]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        return f"Board({sum(1 for _ in self)} pieces)"

    def display(self) -> str:
        """返回棋盘的文本表示

         10 2車 2馬 2象 ...
         09 -～ -～ ...
         ...
         01 ...
             Ａ  Ｂ  Ｃ  ...
        """
        lines = []
        for row in range(ROWS):
            line = f" {ROWS - row:02d}"
            for col in range(COLS):
                code = self._grid[row][col]
                team = team_of(code)
                glyphs = RED_GLYPHS if team == Team.RED else BLACK_GLYPHS
                line += " " + ("-" if team == Team.NEUTRAL else str(team))
                line += glyphs[type_of(code)]
            lines.append(line)
        lines.append(FILE_FOOTER)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.display()
