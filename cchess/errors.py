"""
异常定义

记谱解析错误和不变量破坏
"""


class NotationError(ValueError):
    """记谱错误基类"""

    def __init__(self, notation: object, reason: str):
        super().__init__(f"{reason}: {notation!r}")
        self.notation = notation
        self.reason = reason


class FormatError(NotationError):
    """记谱格式错误（长度不对或行号不是数字）"""


class RangeError(NotationError):
    """记谱越界（解析后的行列不在棋盘内）"""


class InvariantError(RuntimeError):
    """局面已损坏，引擎无法继续判断"""


class LayoutError(ValueError):
    """布局文件缺失、格式错误或找不到指定布局"""
