"""
面向表现层的辅助对象 (与 UI 框架无关)

- LocalizedString: 绑定一个 key 的可观察字符串，语言切换时自动刷新
- LanguageNotifier: 把 language_changed 转为属性变更通知
- localizer(): 返回绑定到某个控制器的 L(key, fallback) 快捷函数
- KeyConverter: 把 key 转为文本的单向转换器
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from xl_language.controller import CURRENT_LANGUAGE_PROPERTY, LanguageController
from xl_language.events import Event


class LocalizedString:
    """
    随当前语言变化的字符串。

    Usage::

        title = LocalizedString(ctrl, "App.Name")
        title.property_changed.connect(lambda name: print(name, title.value))
        ctrl.set_language("English")       # -> 打印 "value Demo"
        title.dispose()
    """

    def __init__(
        self,
        controller: LanguageController,
        key: str,
        fallback: Optional[str] = None,
    ) -> None:
        self._controller = controller
        self._key = key
        self._fallback = fallback
        self._value = controller.text(key, fallback)
        self.property_changed = Event("property_changed")
        controller.language_changed.connect(self._on_language_changed)

    @property
    def key(self) -> str:
        return self._key

    @key.setter
    def key(self, value: str) -> None:
        if value == self._key:
            return
        self._key = value
        self._update_value()
        self.property_changed.emit("key")

    @property
    def value(self) -> str:
        return self._value

    def dispose(self) -> None:
        """取消对语言切换的订阅"""
        self._controller.language_changed.disconnect(self._on_language_changed)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"LocalizedString({self._key!r}, value={self._value!r})"

    def _on_language_changed(self, language: str) -> None:
        self._update_value()

    def _update_value(self) -> None:
        value = self._controller.text(self._key, self._fallback)
        if value != self._value:
            self._value = value
            self.property_changed.emit("value")


class LanguageNotifier:
    """每次语言切换都发布 property_changed("current_language")"""

    def __init__(self, controller: LanguageController) -> None:
        self._controller = controller
        self.property_changed = Event("property_changed")
        controller.language_changed.connect(self._on_language_changed)

    @property
    def current_language(self) -> str:
        return self._controller.current_language

    def text(self, key: str) -> str:
        return self._controller.text(key)

    def dispose(self) -> None:
        self._controller.language_changed.disconnect(self._on_language_changed)

    def _on_language_changed(self, language: str) -> None:
        self.property_changed.emit(CURRENT_LANGUAGE_PROPERTY)


def localizer(controller: LanguageController) -> Callable[..., str]:
    """
    返回 L(key, fallback=None) 快捷函数::

        L = localizer(ctrl)
        L("App.Name")
    """
    def L(key: str, fallback: Optional[str] = None) -> str:
        return controller.text(key, fallback)

    return L


class KeyConverter:
    """单向转换: 字符串视为 key 查找文本，其他值转为字符串"""

    def __init__(self, controller: LanguageController) -> None:
        self._controller = controller

    def convert(self, value: Any) -> str:
        if isinstance(value, str):
            return self._controller.text(value)
        return "" if value is None else str(value)

    def convert_back(self, value: Any) -> Any:
        raise NotImplementedError("KeyConverter does not support reverse conversion")
