"""
LanguageRegistry — 可用语言枚举、文件校验、键差异比较
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from xl_language.errors import LanguageLoadError
from xl_language.resource_store import FILE_SUFFIX, LanguageResource, ResourceStore

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """语言文件校验结果"""
    is_valid: bool
    error_message: Optional[str] = None
    error_kind: Optional[str] = None     # "not_found" | "parse_error" | "empty"


@dataclass
class DiffReport:
    """
    两个语言文件的键差异。

    出错时只有 error_message 有值，三个列表为空；调用方应先检查 has_error。
    """
    missing_in_a: List[str] = field(default_factory=list)
    missing_in_b: List[str] = field(default_factory=list)
    common: List[str] = field(default_factory=list)
    error_message: Optional[str] = None
    error_kind: Optional[str] = None

    @property
    def has_error(self) -> bool:
        return self.error_message is not None

    @property
    def is_identical(self) -> bool:
        return not self.has_error and not self.missing_in_a and not self.missing_in_b


def list_available(directory: str | Path) -> List[str]:
    """列出目录中的 *.json 语言文件名 (不含扩展名)，目录不存在时返回空列表"""
    path = Path(directory)
    if not path.is_dir():
        return []
    return [
        p.stem for p in path.iterdir()
        if p.suffix == FILE_SUFFIX and p.is_file()
    ]


def diff_resources(a: LanguageResource, b: LanguageResource) -> DiffReport:
    """比较两棵资源树的叶子键集合"""
    keys_a = ResourceStore.flatten_keys(a)
    keys_b = ResourceStore.flatten_keys(b)
    set_a, set_b = set(keys_a), set(keys_b)
    return DiffReport(
        missing_in_a=[k for k in keys_b if k not in set_a],
        missing_in_b=[k for k in keys_a if k not in set_b],
        common=[k for k in keys_a if k in set_b],
    )


class LanguageRegistry:
    """
    基于 ResourceStore 目录的语言文件工具集。

    Usage::

        registry = LanguageRegistry(ResourceStore("Language"))
        registry.list_available()                  # -> ["Chinese", "English"]
        registry.validate("English").is_valid      # -> True
        report = registry.diff("Chinese", "English")
        if not report.has_error:
            print(report.missing_in_b)
    """

    def __init__(self, store: ResourceStore) -> None:
        self._store = store

    @property
    def store(self) -> ResourceStore:
        return self._store

    def list_available(self) -> List[str]:
        return list_available(self._store.directory)

    def is_available(self, language: str) -> bool:
        return self._store.path_for(language).is_file()

    def validate(self, language: str) -> ValidationResult:
        try:
            self._store.load(language)
        except LanguageLoadError as exc:
            logger.warning("Language file '%s' is invalid: %s", language, exc)
            return ValidationResult(False, str(exc), exc.kind)
        return ValidationResult(True)

    def diff(self, language_a: str, language_b: str) -> DiffReport:
        """
        比较两个语言文件。

        空对象按零个键参与比较；任一侧不存在或无法解析时
        返回只带 error_message 的报告，不抛出异常。
        """
        try:
            a = self._store.read(language_a)
            b = self._store.read(language_b)
        except LanguageLoadError as exc:
            logger.warning("Cannot compare '%s' and '%s': %s", language_a, language_b, exc)
            return DiffReport(error_message=str(exc), error_kind=exc.kind)

        report = diff_resources(a, b)
        logger.debug(
            "Diff %s/%s: %d missing in %s, %d missing in %s, %d common",
            language_a, language_b,
            len(report.missing_in_a), language_a,
            len(report.missing_in_b), language_b,
            len(report.common),
        )
        return report
