"""
LanguageController — 当前语言的唯一持有者

- 构造时同步加载默认语言
- set_language / set_language_async 切换语言，加载失败时状态不变
- 语言名与资源树封装在一个不可变 ActiveLanguageState 中，整体替换引用，
  读者不会看到名称与资源不一致的中间状态
- 切换成功后发布 language_changed(language) 与 property_changed(name)
- 通知在释放锁之后发出；不同线程上重叠的切换可能使事件顺序与状态替换顺序不同，
  订阅者应重新读取 current_language，而不是依赖事件参数
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from xl_language.errors import LanguageLoadError
from xl_language.events import Event
from xl_language.registry import LanguageRegistry
from xl_language.resource_store import LanguageResource, ResourceStore

logger = logging.getLogger(__name__)

# 项目根目录 (本包的上一级)
_BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_LANGUAGE_DIR = _BASE_DIR / "Language"
DEFAULT_LANGUAGE = "Chinese"

CURRENT_LANGUAGE_PROPERTY = "current_language"


@dataclass(frozen=True)
class ActiveLanguageState:
    """当前语言名 + 对应资源树"""
    language: str
    resource: LanguageResource = field(default_factory=dict)
    loaded: bool = False


class LanguageController:
    """
    语言切换控制器。

    Usage::

        ctrl = LanguageController("Language", default_language="Chinese")
        ctrl.language_changed.connect(lambda lang: print("now", lang))

        ctrl.text("App.Name")                      # -> "演示"
        if not ctrl.set_language("English"):
            print("switch rejected, still", ctrl.current_language)

        future = ctrl.set_language_async("Chinese")
        future.result()                             # -> True
    """

    def __init__(
        self,
        directory: str | Path | None = None,
        default_language: str = DEFAULT_LANGUAGE,
        store: Optional[ResourceStore] = None,
        max_workers: int = 1,
        load_default: bool = True,
    ) -> None:
        if store is None:
            store = ResourceStore(directory if directory is not None else DEFAULT_LANGUAGE_DIR)
        elif directory is not None:
            store.directory = directory

        self._store = store
        self._registry = LanguageRegistry(store)
        self._default_language = default_language
        self._max_workers = max_workers
        self._executor: Optional[ThreadPoolExecutor] = None

        self._lock = threading.Lock()
        self._next_ticket = 0
        self._applied_ticket = 0
        self._state = ActiveLanguageState(default_language)

        self.language_changed = Event("language_changed")
        self.property_changed = Event("property_changed")

        # 首次同步加载默认语言；失败则保持 Unloaded
        if load_default and not self.set_language(default_language):
            logger.warning(
                "Initial language '%s' could not be loaded from %s",
                default_language, store.directory,
            )

    # ── 状态访问 ────────────────────────────────────────────────

    @property
    def state(self) -> ActiveLanguageState:
        return self._state

    @property
    def current_language(self) -> str:
        """当前语言名；从未成功加载时为默认语言名"""
        return self._state.language

    @property
    def is_loaded(self) -> bool:
        return self._state.loaded

    @property
    def default_language(self) -> str:
        return self._default_language

    @property
    def language_directory(self) -> Path:
        return self._store.directory

    @property
    def store(self) -> ResourceStore:
        return self._store

    @property
    def registry(self) -> LanguageRegistry:
        return self._registry

    def set_language_directory(self, directory: str | Path) -> None:
        """修改后续加载使用的目录，不影响已加载的资源"""
        self._store.directory = directory
        logger.debug("Language directory set to %s", self._store.directory)

    def get_locale_data(self) -> Dict[str, Any]:
        """当前语言资源树的浅拷贝"""
        return dict(self._state.resource)

    def available_languages(self) -> List[str]:
        return self._registry.list_available()

    # ── 查找 ────────────────────────────────────────────────────

    def text(self, dotted_key: str, fallback: Optional[str] = None) -> str:
        """在当前语言中查找文本，规则见 ResourceStore.resolve"""
        return self._store.resolve(self._state.resource, dotted_key, fallback)

    get_text = text

    # ── 切换 ────────────────────────────────────────────────────

    def set_language(self, language: str) -> bool:
        """
        同步切换语言。

        Returns
        -------
        bool
            加载成功并已生效时为 True；失败或被更新的切换请求取代时为 False，
            此时 current_language 与所有查找结果保持不变。
        """
        ticket = self._take_ticket()
        return self._load_and_apply(ticket, language)

    def set_language_async(self, language: str) -> "Future[bool]":
        """在后台线程读取并解析语言文件，立即返回 Future[bool]"""
        ticket = self._take_ticket()
        return self._get_executor().submit(self._load_and_apply, ticket, language)

    def reload(self) -> bool:
        """重新读取当前语言文件 (开发期热重载)"""
        return self.set_language(self._state.language)

    def close(self) -> None:
        """关闭后台加载线程池"""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self) -> "LanguageController":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ── 内部方法 ────────────────────────────────────────────────

    def _get_executor(self) -> ThreadPoolExecutor:
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._max_workers,
                    thread_name_prefix="xl-language",
                )
            return self._executor

    def _take_ticket(self) -> int:
        with self._lock:
            self._next_ticket += 1
            return self._next_ticket

    def _load_and_apply(self, ticket: int, language: str) -> bool:
        try:
            resource = self._store.load(language)
        except LanguageLoadError as exc:
            logger.warning("Failed to load language '%s': %s", language, exc)
            return False

        with self._lock:
            if ticket < self._applied_ticket:
                logger.debug(
                    "Discarding stale switch to '%s' (superseded by a newer request)",
                    language,
                )
                return False
            previous = self._state.language
            self._applied_ticket = ticket
            self._state = ActiveLanguageState(language, resource, True)

        logger.info("Language switched: %s", language)
        self.language_changed.emit(language)
        if previous != language:
            self.property_changed.emit(CURRENT_LANGUAGE_PROPERTY)
        return True
