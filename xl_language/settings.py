"""
LanguageSettings — config/settings.yaml 中 language 段的配置

    language:
      language_dir: Language
      default_language: Chinese
      async_switch: false

也接受简写 ``language: English``。
"""

from __future__ import annotations

import logging
from concurrent.futures import Future
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Tuple

from xl_language.controller import DEFAULT_LANGUAGE, LanguageController

logger = logging.getLogger(__name__)


@dataclass
class LanguageSettings:
    """多语言配置"""
    language_dir: str = "Language"
    default_language: str = DEFAULT_LANGUAGE
    async_switch: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "LanguageSettings":
        """
        从配置构造，忽略未知键。

        ``language: English`` 这样的标量写法视为 default_language；
        其他非 dict 值记录警告并使用默认配置。
        """
        if data is None:
            return cls()
        if isinstance(data, str):
            data = {"default_language": data}
        elif not isinstance(data, dict):
            logger.warning(
                "Language settings must be a mapping or a language name, got %s; using defaults",
                type(data).__name__,
            )
            return cls()

        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        unknown = set(data) - known
        if unknown:
            logger.warning("Ignoring unknown language settings: %s", sorted(unknown))
        return cls(**values)

    def resolve_directory(self, base_dir: str | Path) -> Path:
        """相对路径按 base_dir 解析"""
        path = Path(self.language_dir)
        if not path.is_absolute():
            path = Path(base_dir) / path
        return path


def _log_available(controller: LanguageController) -> None:
    logger.info(
        "Languages in %s: %s",
        controller.language_directory, ", ".join(controller.available_languages()) or "-",
    )


def initialize(settings: LanguageSettings, base_dir: str | Path) -> LanguageController:
    """按配置创建控制器：设置目录并同步加载默认语言"""
    controller = LanguageController(
        settings.resolve_directory(base_dir),
        default_language=settings.default_language,
    )
    _log_available(controller)
    return controller


def initialize_async(
    settings: LanguageSettings, base_dir: str | Path
) -> Tuple[LanguageController, "Future[bool]"]:
    """
    按配置创建控制器，在后台线程加载默认语言。

    Returns
    -------
    (LanguageController, Future[bool])
        控制器立即可用 (加载完成前为 Unloaded，查找返回 fallback / "[key]")；
        Future 在默认语言加载结束后给出结果。
    """
    controller = LanguageController(
        settings.resolve_directory(base_dir),
        default_language=settings.default_language,
        load_default=False,
    )
    _log_available(controller)
    return controller, controller.set_language_async(settings.default_language)
