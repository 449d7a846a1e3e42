"""
中国象棋 (Xiangqi) 规则引擎

棋盘用 10x9 的棋子编码表示，走棋用六位记谱（如 "03H03E"），
支持走法检查、吃将判胜、认输、和棋和一步悔棋。
"""

from cchess.board import Board
from cchess.errors import FormatError, InvariantError, LayoutError, NotationError, RangeError
from cchess.game import DRAW, ONGOING, Game, GameConfig
from cchess.layouts import empty_layout, get_layout, load_layouts
from cchess.notation import format_move, parse
from cchess.rules import is_legal
from cchess.types import Move, MoveStatus, PieceType, Team

__all__ = [
    "Board",
    "DRAW",
    "FormatError",
    "Game",
    "GameConfig",
    "InvariantError",
    "LayoutError",
    "Move",
    "MoveStatus",
    "NotationError",
    "ONGOING",
    "PieceType",
    "RangeError",
    "Team",
    "empty_layout",
    "format_move",
    "get_layout",
    "is_legal",
    "load_layouts",
    "parse",
]
