"""
语言文件加载错误

三类加载期错误都在控制器边界被捕获，转换为 bool / 结果对象；
键查找失败 (KeyMiss) 不是错误，由 fallback 规则处理，不会抛出。
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class LanguageLoadError(Exception):
    """语言文件加载失败的基类"""

    kind = "load_error"

    def __init__(self, message: str, language: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.language = language
        self.path = path


class LanguageNotFoundError(LanguageLoadError):
    """语言文件不存在"""
    kind = "not_found"


class LanguageParseError(LanguageLoadError):
    """文件存在，但内容不是 JSON 对象"""
    kind = "parse_error"


class LanguageEmptyError(LanguageLoadError):
    """解析成功，但顶层没有任何键"""
    kind = "empty"
