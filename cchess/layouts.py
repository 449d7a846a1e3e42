"""
初始布局

布局文件是布局名到 10x9 棋子编码网格的映射，默认使用包内的 layouts.json。
引擎本身不读文件，由这里读取后把网格交给 Game。
"""

from pathlib import Path
from typing import Annotated

from pydantic import AfterValidator, Field, RootModel, ValidationError

from cchess.errors import LayoutError
from cchess.logging import logger
from cchess.types import COLS, EMPTY, ROWS, is_valid_code

DEFAULT_LAYOUTS_PATH = Path(__file__).with_name("layouts.json")
DEFAULT_LAYOUT_NAME = "official"


def _check_code(code: int) -> int:
    if not is_valid_code(code):
        raise ValueError(f"invalid piece code {code}")
    return code


PieceCode = Annotated[int, AfterValidator(_check_code)]
Row = Annotated[list[PieceCode], Field(min_length=COLS, max_length=COLS)]
Grid = Annotated[list[Row], Field(min_length=ROWS, max_length=ROWS)]


class LayoutTemplate(RootModel[dict[str, Grid]]):
    """布局文件"""


def load_layouts(path: Path | str | None = None) -> dict[str, list[list[int]]]:
    """读取并校验布局文件

    Raises:
        LayoutError: 文件无法读取，或内容不是合法的布局映射
    """
    source = Path(path) if path is not None else DEFAULT_LAYOUTS_PATH
    try:
        raw = source.read_text(encoding="utf-8")
    except OSError as e:
        raise LayoutError(f"Cannot read layouts from {source}: {e}") from e

    try:
        template = LayoutTemplate.model_validate_json(raw)
    except ValidationError as e:
        raise LayoutError(f"Malformed layouts in {source}: {e}") from e

    logger.debug(f"Loaded {len(template.root)} layouts from {source}")
    return template.root


def get_layout(name: str, path: Path | str | None = None) -> list[list[int]]:
    """按名称获取布局

    Raises:
        LayoutError: 布局文件有误或没有该布局
    """
    layouts = load_layouts(path)
    if name not in layouts:
        raise LayoutError(f"Unknown layout {name!r}, available: {sorted(layouts)}")
    return layouts[name]


def list_layouts(path: Path | str | None = None) -> list[str]:
    """列出所有布局名"""
    return sorted(load_layouts(path))


def empty_layout() -> list[list[int]]:
    """全空的棋盘"""
    return [[EMPTY] * COLS for _ in range(ROWS)]


__all__ = [
    "DEFAULT_LAYOUTS_PATH",
    "DEFAULT_LAYOUT_NAME",
    "LayoutError",
    "LayoutTemplate",
    "empty_layout",
    "get_layout",
    "list_layouts",
    "load_layouts",
]
