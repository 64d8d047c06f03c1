"""
QtLanguageBridge — 把 LanguageController 的事件转发为 Qt Signal / Property

控制器在执行切换的线程上同步通知；这里转为 Qt Signal 后，
跨线程连接由 Qt 自动排队到接收者所在线程 (通常是 UI 线程)。
"""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Property, QObject, Signal, Slot

from xl_language.controller import CURRENT_LANGUAGE_PROPERTY, LanguageController

logger = logging.getLogger(__name__)


class QtLanguageBridge(QObject):
    """
    Qt 侧的语言对象，可注册到 QWebChannel / QML 上下文。

    Usage::

        bridge = QtLanguageBridge(ctrl)
        bridge.languageChanged.connect(window.retranslate)
        label.setText(bridge.text("App.Name"))
    """

    languageChanged = Signal(str)       # 新语言名，如 "English"
    currentLanguageChanged = Signal()

    def __init__(self, controller: LanguageController, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._controller = controller
        controller.language_changed.connect(self._on_language_changed)
        controller.property_changed.connect(self._on_property_changed)

    @property
    def controller(self) -> LanguageController:
        return self._controller

    def _get_current_language(self) -> str:
        return self._controller.current_language

    currentLanguage = Property(str, _get_current_language, notify=currentLanguageChanged)

    @Slot(str, result=str)
    def text(self, key: str) -> str:
        return self._controller.text(key)

    @Slot(str, str, result=str)
    def textOr(self, key: str, fallback: str) -> str:
        return self._controller.text(key, fallback)

    @Slot(str, result=bool)
    def setLanguage(self, language: str) -> bool:
        return self._controller.set_language(language)

    def dispose(self) -> None:
        """断开与控制器的连接"""
        self._controller.language_changed.disconnect(self._on_language_changed)
        self._controller.property_changed.disconnect(self._on_property_changed)

    def _on_language_changed(self, language: str) -> None:
        self.languageChanged.emit(language)

    def _on_property_changed(self, name: str) -> None:
        if name == CURRENT_LANGUAGE_PROPERTY:
            self.currentLanguageChanged.emit()
