"""
走法规则

每种棋子有独立的走法规则，is_legal 先做通用检查再按棋子类型分派
"""

from abc import ABC, abstractmethod
from types import MappingProxyType

from cchess.board import Board
from cchess.logging import logger
from cchess.types import EMPTY, Move, PieceType, Team, team_of, type_of

# 九宫格：列 3-5，红方行 7-9，黑方行 0-2
PALACE_COLS = range(3, 6)
PALACE_ROWS = MappingProxyType({Team.RED: range(7, 10), Team.BLACK: range(0, 3)})

# 己方半场（河界以内）
OWN_SIDE_ROWS = MappingProxyType({Team.RED: range(5, 10), Team.BLACK: range(0, 5)})

# 兵/卒的前进方向
FORWARD = MappingProxyType({Team.RED: -1, Team.BLACK: 1})


def in_palace(team: int, row: int, col: int) -> bool:
    """检查位置是否在该方九宫格内"""
    return col in PALACE_COLS and row in PALACE_ROWS[team]


def on_own_side(team: int, row: int) -> bool:
    """检查该行是否在该方半场"""
    return row in OWN_SIDE_ROWS[team]


class PieceRule(ABC):
    """棋子走法规则基类"""

    piece_type: PieceType

    @abstractmethod
    def allows(self, board: Board, move: Move, team: int) -> bool:
        """只检查该棋子的走法形状和阻挡，归属和终点已由 is_legal 检查"""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.piece_type.name})"


class RookRule(PieceRule):
    """车：横竖直走，中间不能有子"""

    piece_type = PieceType.ROOK

    def allows(self, board: Board, move: Move, team: int) -> bool:
        if move.sr != move.er and move.sc != move.ec:
            return False
        return board.count_between(move) == 0


class CannonRule(PieceRule):
    """炮：走法同车，吃子时中间必须恰好隔一个子（炮架）"""

    piece_type = PieceType.CANNON

    def allows(self, board: Board, move: Move, team: int) -> bool:
        if move.sr != move.er and move.sc != move.ec:
            return False
        between = board.count_between(move)
        if board.is_empty(move.er, move.ec):
            return between == 0
        return between == 1


class KnightRule(PieceRule):
    """马：走日字，蹩马腿时不能走"""

    piece_type = PieceType.KNIGHT

    def allows(self, board: Board, move: Move, team: int) -> bool:
        dr, dc = abs(move.row_delta), abs(move.col_delta)
        if (dr, dc) not in ((1, 2), (2, 1)):
            return False
        # 马腿在起点沿长边方向相邻的一格
        if dr == 2:
            leg = (move.sr + move.row_delta // 2, move.sc)
        else:
            leg = (move.sr, move.sc + move.col_delta // 2)
        return board.is_empty(*leg)


class GuardRule(PieceRule):
    """士：斜走一格，不能出九宫"""

    piece_type = PieceType.GUARD

    def allows(self, board: Board, move: Move, team: int) -> bool:
        if not in_palace(team, move.er, move.ec):
            return False
        return abs(move.row_delta) == 1 and abs(move.col_delta) == 1


class ElephantRule(PieceRule):
    """象：走田字，不能过河，塞象眼时不能走"""

    piece_type = PieceType.ELEPHANT

    def allows(self, board: Board, move: Move, team: int) -> bool:
        if not on_own_side(team, move.er):
            return False
        if abs(move.row_delta) != 2 or abs(move.col_delta) != 2:
            return False
        eye = (move.sr + move.row_delta // 2, move.sc + move.col_delta // 2)
        return board.is_empty(*eye)


class KingRule(PieceRule):
    """将/帅：九宫内直走一格；或与对方将同列且中间无子时直接吃将（飞将）"""

    piece_type = PieceType.KING

    def allows(self, board: Board, move: Move, team: int) -> bool:
        if self._is_flying_capture(board, move):
            return True
        if not in_palace(team, move.er, move.ec):
            return False
        return (abs(move.row_delta), abs(move.col_delta)) in ((0, 1), (1, 0))

    @staticmethod
    def _is_flying_capture(board: Board, move: Move) -> bool:
        target = board.get_piece(move.er, move.ec)
        if type_of(target) != PieceType.KING or move.sc != move.ec:
            return False
        return board.count_between(move) == 0


class PawnRule(PieceRule):
    """兵/卒：未过河只能前进一格，过河后可前进或左右一格，不能后退"""

    piece_type = PieceType.PAWN

    def allows(self, board: Board, move: Move, team: int) -> bool:
        forward_one = move.ec == move.sc and move.row_delta == FORWARD[team]
        if on_own_side(team, move.er):
            return forward_one
        side_one = move.er == move.sr and abs(move.col_delta) == 1
        return forward_one or side_one


RULES: MappingProxyType[int, PieceRule] = MappingProxyType(
    {
        rule.piece_type: rule
        for rule in (
            RookRule(),
            KnightRule(),
            CannonRule(),
            GuardRule(),
            ElephantRule(),
            PawnRule(),
            KingRule(),
        )
    }
)


def is_legal(board: Board, move: Move, current_player: int) -> bool:
    """检查走棋是否合法

    1. 起点必须是当前方的棋子
    2. 终点为空或为对方棋子，且不能原地不动
    3. 符合该棋子的走法规则

    走法必须已在棋盘范围内（由记谱解析保证），不合法时返回 False，不抛异常
    """
    piece = board.get_piece(move.sr, move.sc)
    if piece == EMPTY or team_of(piece) != current_player:
        logger.debug(f"Rejected {move}: no piece of player {current_player} at start")
        return False

    target = board.get_piece(move.er, move.ec)
    if (move.sr, move.sc) == (move.er, move.ec):
        logger.debug(f"Rejected {move}: start and end are the same")
        return False
    if target != EMPTY and team_of(target) == current_player:
        logger.debug(f"Rejected {move}: destination holds an own piece")
        return False

    rule = RULES.get(type_of(piece))
    if rule is None:
        return True
    if not rule.allows(board, move, current_player):
        logger.debug(f"Rejected {move}: {PieceType(type_of(piece)).name} rule")
        return False
    return True


__all__ = [
    "PieceRule",
    "RookRule",
    "KnightRule",
    "CannonRule",
    "GuardRule",
    "ElephantRule",
    "KingRule",
    "PawnRule",
    "RULES",
    "is_legal",
    "in_palace",
    "on_own_side",
]
