"""
记谱法

六位记谱 "03H03E"：起点行(两位数字, 1-10) + 起点列(A-I) + 终点行 + 终点列。
行号 10 在最上方（黑方底线），列 A 对应棋盘下标 0。
"""

from cchess.errors import FormatError, RangeError
from cchess.types import ROWS, Move

NOTATION_LENGTH = 6
FILES = "ABCDEFGHI"


def _parse_rank(notation: str, field: str) -> int:
    """两位行号转为行下标"""
    if not (field.isascii() and field.isdigit()):
        raise FormatError(notation, "Unable to understand notation")
    return ROWS - int(field)


def _parse_file(notation: str, field: str) -> int:
    """列字母转为列下标"""
    upper = field.upper()
    # 个别字符大写后不止一个字母，如 "ß" -> "SS"
    if len(upper) != 1:
        raise RangeError(notation, f"Out of bound: file {field!r}")
    return ord(upper) - ord("A")


def parse(notation: str) -> Move:
    """解析记谱

    Raises:
        FormatError: 长度不是 6，或行号不是数字
        RangeError: 解析后的行列不在棋盘内
    """
    if not isinstance(notation, str) or len(notation) != NOTATION_LENGTH:
        raise FormatError(notation, "Wrong notation length")

    move = Move(
        sr=_parse_rank(notation, notation[0:2]),
        sc=_parse_file(notation, notation[2]),
        er=_parse_rank(notation, notation[3:5]),
        ec=_parse_file(notation, notation[5]),
    )
    if not move.is_in_bounds():
        raise RangeError(
            notation, f"Out of bound: ({move.sr}, {move.sc}) to ({move.er}, {move.ec})"
        )
    return move


def format_move(move: Move) -> str:
    """走法转为记谱，parse 的逆运算"""
    if not move.is_in_bounds():
        raise RangeError(move, "Out of bound")
    return (
        f"{ROWS - move.sr:02d}{FILES[move.sc]}"
        f"{ROWS - move.er:02d}{FILES[move.ec]}"
    )


__all__ = ["parse", "format_move", "FILES", "NOTATION_LENGTH"]
