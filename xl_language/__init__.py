"""
xl_language — 多语言资源管理

提供：
- ResourceStore: <语言名>.json 读取与 dot-path 查找 ("App.Name")
- LanguageRegistry: 可用语言枚举、文件校验、键差异比较
- LanguageController: 当前语言状态、同步/异步切换、变更通知
- LocalizedString / LanguageNotifier: 表现层可观察对象
"""

from xl_language.controller import ActiveLanguageState, LanguageController
from xl_language.errors import (
    LanguageEmptyError,
    LanguageLoadError,
    LanguageNotFoundError,
    LanguageParseError,
)
from xl_language.events import Event
from xl_language.localized import KeyConverter, LanguageNotifier, LocalizedString, localizer
from xl_language.registry import DiffReport, LanguageRegistry, ValidationResult, diff_resources, list_available
from xl_language.resource_store import ResourceStore
from xl_language.settings import LanguageSettings, initialize, initialize_async

__all__ = [
    "ActiveLanguageState",
    "DiffReport",
    "Event",
    "KeyConverter",
    "LanguageController",
    "LanguageEmptyError",
    "LanguageLoadError",
    "LanguageNotFoundError",
    "LanguageNotifier",
    "LanguageParseError",
    "LanguageRegistry",
    "LanguageSettings",
    "LocalizedString",
    "ResourceStore",
    "ValidationResult",
    "diff_resources",
    "initialize",
    "initialize_async",
    "list_available",
    "localizer",
]
