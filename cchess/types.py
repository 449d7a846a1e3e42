"""
核心类型定义

棋子编码、阵营、走法和走棋结果
"""

from enum import IntEnum
from typing import NamedTuple

# 棋盘尺寸
ROWS = 10
COLS = 9

# 空格
EMPTY = 0


class Team(IntEnum):
    """阵营

    NEUTRAL 在当前规则中不使用
    """

    NEUTRAL = 0
    RED = 1
    BLACK = 2

    @property
    def opposite(self) -> "Team":
        """获取对方阵营"""
        return Team.BLACK if self == Team.RED else Team.RED


class PieceType(IntEnum):
    """棋子类型（按编码顺序，不是字母顺序）"""

    # 车
    ROOK = 1
    # 马
    KNIGHT = 2
    # 炮
    CANNON = 3
    # 士/仕
    GUARD = 4
    # 象/相
    ELEPHANT = 5
    # 卒/兵
    PAWN = 6
    # 将/帅
    KING = 7


class MoveStatus(IntEnum):
    """走棋结果"""

    REJECTED = -1
    OK = 0
    CAPTURE = 1
    CHECK = 2


class Move(NamedTuple):
    """走棋动作

    sr, sc: 起点行列
    er, ec: 终点行列
    均为 0 起始的棋盘下标
    """

    sr: int
    sc: int
    er: int
    ec: int

    @property
    def row_delta(self) -> int:
        return self.er - self.sr

    @property
    def col_delta(self) -> int:
        return self.ec - self.sc

    def is_in_bounds(self) -> bool:
        """检查起点终点是否都在棋盘范围内"""
        return (
            0 <= self.sr < ROWS
            and 0 <= self.er < ROWS
            and 0 <= self.sc < COLS
            and 0 <= self.ec < COLS
        )


def make_code(team: int, piece_type: int) -> int:
    """编码棋子: team * 10 + type"""
    return team * 10 + piece_type


def team_of(code: int) -> int:
    """棋子所属阵营，空格为 0"""
    return code // 10


def type_of(code: int) -> int:
    """棋子类型，空格为 0"""
    return code % 10


def is_valid_code(code: int) -> bool:
    """检查是否为合法的格子内容（空格或红黑双方的棋子）"""
    if code == EMPTY:
        return True
    if team_of(code) not in (Team.RED, Team.BLACK):
        return False
    return PieceType.ROOK <= type_of(code) <= PieceType.KING


RED_KING = make_code(Team.RED, PieceType.KING)
BLACK_KING = make_code(Team.BLACK, PieceType.KING)
