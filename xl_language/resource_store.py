"""
ResourceStore — 语言资源文件的读取与 dot-path 查找

- 文件命名约定: <directory>/<language>.json
- 资源是嵌套字典树: 值为标量 (叶子) 或 dict (命名空间)
- resolve() 是纯函数，未命中时返回 fallback 或 "[key]"
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from xl_language.errors import (
    LanguageEmptyError,
    LanguageLoadError,
    LanguageNotFoundError,
    LanguageParseError,
)

logger = logging.getLogger(__name__)

LanguageResource = Dict[str, Any]

FILE_SUFFIX = ".json"


class ResourceStore:
    """
    语言文件读取器。

    只保存目录配置；每次 load() 都返回一棵全新的字典树，
    调用方以整体替换引用的方式持有它，从不原地修改。

    Usage::

        store = ResourceStore("Language")
        data = store.load("English")
        store.resolve(data, "App.Name")              # -> "Demo"
        store.resolve(data, "App.Missing")           # -> "[App.Missing]"
        store.resolve(data, "App.Missing", "n/a")    # -> "n/a"
    """

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        """语言文件目录"""
        return self._directory

    @directory.setter
    def directory(self, value: str | Path) -> None:
        self._directory = Path(value)

    def path_for(self, language: str) -> Path:
        return self._directory / f"{language}{FILE_SUFFIX}"

    # ── 加载 ────────────────────────────────────────────────────

    def read(self, language: str) -> LanguageResource:
        """
        读取并解析语言文件，不检查是否为空。

        Raises
        ------
        LanguageNotFoundError
            文件不存在
        LanguageParseError
            JSON 语法错误、编码错误，或顶层不是对象
        """
        filepath = self.path_for(language)
        if not filepath.is_file():
            raise LanguageNotFoundError(
                f"Language file not found: {filepath}", language, filepath
            )

        try:
            with open(filepath, "r", encoding="utf-8-sig") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise LanguageParseError(
                f"Invalid language file {filepath}: {exc}", language, filepath
            ) from exc
        except OSError as exc:
            raise LanguageLoadError(
                f"Cannot read language file {filepath}: {exc}", language, filepath
            ) from exc

        if not isinstance(data, dict):
            raise LanguageParseError(
                f"Language file {filepath} must contain a JSON object, "
                f"got {type(data).__name__}",
                language, filepath,
            )
        return data

    def load(self, language: str) -> LanguageResource:
        """读取语言文件；顶层为空对象时抛出 LanguageEmptyError"""
        data = self.read(language)
        filepath = self.path_for(language)
        if not data:
            raise LanguageEmptyError(
                f"Language file is empty: {filepath}", language, filepath
            )

        logger.info("Language file loaded: %s", filepath)
        logger.debug("Top-level keys in %s: %d", language, len(data))
        return data

    # ── 查找 ────────────────────────────────────────────────────

    @staticmethod
    def resolve(
        resource: Optional[LanguageResource],
        dotted_key: str,
        fallback: Optional[str] = None,
    ) -> str:
        """
        按 dot-path 在嵌套字典中查找文本。

        Parameters
        ----------
        resource : dict or None
            语言资源树
        dotted_key : str
            如 "App.Name"
        fallback : str, optional
            未命中时的返回值；为 None 时返回 "[dotted_key]"

        Returns
        -------
        str
            叶子值的字符串形式。中间段不是 dict、路径过短 (停在 dict 上)、
            叶子为 null 均视为未命中。
        """
        if not dotted_key:
            return fallback if fallback is not None else ""

        miss = fallback if fallback is not None else f"[{dotted_key}]"

        current: Any = resource
        for part in dotted_key.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return miss

        if current is None or isinstance(current, dict):
            return miss
        return _stringify(current)

    @staticmethod
    def flatten_keys(resource: LanguageResource, prefix: str = "") -> List[str]:
        """深度优先展开所有叶子的 dot-path，保持文档顺序"""
        keys: List[str] = []
        for key, value in resource.items():
            full = f"{prefix}.{key}" if prefix else key
            if isinstance(value, dict):
                keys.extend(ResourceStore.flatten_keys(value, full))
            else:
                keys.append(full)
        return keys


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)
