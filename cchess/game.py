"""
游戏管理类

管理棋盘、走棋方、胜负和一步悔棋
"""

from dataclasses import dataclass
from pathlib import Path
from uuid import uuid4

from cchess.board import Board, Layout
from cchess.errors import InvariantError, LayoutError, NotationError
from cchess.layouts import DEFAULT_LAYOUT_NAME, get_layout
from cchess.logging import logger
from cchess.notation import parse
from cchess.rules import is_legal
from cchess.types import EMPTY, MoveStatus, Team

# winner 取值：-1 未结束，0 和棋，其他为胜方编号
ONGOING = -1
DRAW = 0


@dataclass
class GameConfig:
    """游戏配置"""

    layout_name: str = DEFAULT_LAYOUT_NAME
    layouts_path: Path | None = None  # None 时使用包内的 layouts.json
    first_player: int = Team.RED


class Game:
    """象棋游戏

    只保留最后一步用于悔棋，不记录完整历史
    """

    def __init__(
        self,
        layout: Layout | None = None,
        game_id: str | None = None,
        first_player: int = Team.RED,
    ):
        self.game_id = game_id or str(uuid4())
        self.board = Board(layout)
        self._current_player = Team(first_player)
        self._last_move = ""
        self._last_captured = EMPTY
        self._winner = ONGOING

    @classmethod
    def empty(cls, game_id: str | None = None) -> "Game":
        """空棋盘上的游戏"""
        return cls(None, game_id=game_id)

    @classmethod
    def from_layout_name(
        cls,
        name: str = DEFAULT_LAYOUT_NAME,
        path: Path | str | None = None,
        game_id: str | None = None,
        first_player: int = Team.RED,
    ) -> "Game":
        """按布局名创建游戏，布局读取失败时使用空棋盘"""
        try:
            layout = get_layout(name, path)
        except LayoutError as e:
            logger.error(f"Failed to load layout {name!r}, falling back to an empty board: {e}")
            layout = None
        return cls(layout, game_id=game_id, first_player=first_player)

    @classmethod
    def from_config(cls, config: GameConfig, game_id: str | None = None) -> "Game":
        return cls.from_layout_name(
            config.layout_name,
            config.layouts_path,
            game_id=game_id,
            first_player=config.first_player,
        )

    # ------------------------------------------------------------------
    # 查询
    # ------------------------------------------------------------------

    def get_layout(self) -> tuple[tuple[int, ...], ...]:
        """当前棋盘的只读快照"""
        return self.board.to_layout()

    def is_game_over(self) -> bool:
        return self._winner != ONGOING

    def get_winner(self) -> int:
        return self._winner

    def get_current_player(self) -> Team:
        return self._current_player

    def get_next_player(self) -> Team:
        return self._current_player.opposite

    @property
    def last_move(self) -> str:
        """最后一步的记谱，没有或已悔棋时为空串"""
        return self._last_move

    @property
    def last_captured(self) -> int:
        """最后一步吃掉的棋子编码，没有为 0"""
        return self._last_captured

    # ------------------------------------------------------------------
    # 操作
    # ------------------------------------------------------------------

    def make_move(self, notation: str) -> MoveStatus:
        """执行走棋

        返回：REJECTED 未接受；OK 成功；CAPTURE 吃子；CHECK 将军
        记谱错误和不合法走法都返回 REJECTED，局面不变
        """
        if self.is_game_over():
            logger.debug(f"Rejected {notation!r}: game is over")
            return MoveStatus.REJECTED

        try:
            move = parse(notation)
        except NotationError as e:
            logger.debug(f"Rejected move: {e}")
            return MoveStatus.REJECTED

        if not is_legal(self.board, move, self._current_player):
            return MoveStatus.REJECTED

        captured = self.board.make_move(move)
        self._last_move = notation
        self._last_captured = captured
        self._current_player = self.get_next_player()

        check = self._is_check()
        self._update_winner()

        if check:
            return MoveStatus.CHECK
        return MoveStatus.CAPTURE if captured != EMPTY else MoveStatus.OK

    def recall_move(self) -> bool:
        """撤销上一步，只能撤销一步，游戏结束后不能撤销"""
        if not self._last_move or self.is_game_over():
            return False

        move = parse(self._last_move)
        self.board.undo_move(move, self._last_captured)
        self._last_move = ""
        self._last_captured = EMPTY
        self._current_player = self._current_player.opposite
        logger.debug(f"Move recalled, player {int(self._current_player)} to move")
        return True

    def resign(self) -> None:
        """当前走棋方认输"""
        if self.is_game_over():
            return
        self._winner = self.get_next_player()
        logger.info(f"Player {int(self._current_player)} resigned, winner is {int(self._winner)}")

    def draw(self) -> None:
        """和棋"""
        if self.is_game_over():
            return
        self._winner = DRAW
        logger.info("Game ended with a draw")

    def _is_check(self) -> bool:
        """走棋后是否将军"""
        # TODO: 实现将军检测，需要按对方将的位置逐个检查己方棋子的攻击
        return False

    def _update_winner(self) -> None:
        """一方的将/帅不在棋盘上时，另一方获胜"""
        red_alive = self.board.find_king(Team.RED) is not None
        black_alive = self.board.find_king(Team.BLACK) is not None
        if not red_alive and not black_alive:
            raise InvariantError("Both kings are missing from the board")

        if not black_alive:
            self._winner = Team.RED
        elif not red_alive:
            self._winner = Team.BLACK
        else:
            return
        logger.info(f"Game over, winner is {int(self._winner)}")

    # ------------------------------------------------------------------
    # 序列化
    # ------------------------------------------------------------------

    def to_dict(self) -> dict:
        """序列化为字典"""
        return {
            "game_id": self.game_id,
            "board": self.board.to_dict(),
            "current_player": int(self._current_player),
            "winner": int(self._winner),
            "is_game_over": self.is_game_over(),
            "last_move": self._last_move,
            "last_captured": self._last_captured,
        }

    def __str__(self) -> str:
        return self.board.display()

    def __repr__(self) -> str:
        return f"Game({self.game_id}, player={int(self._current_player)}, winner={self._winner})"
