"""
LanguageWindow — 多语言演示主窗口

布局:
    ┌──────────────────────────────────────┐
    │  菜单栏 (文件 / 语言)                  │
    ├──────────────────────────────────────┤
    │  标题 + 问候语 + 语言选择               │
    │  当前语言 / 键数量 / 差异摘要            │
    ├──────────────────────────────────────┤
    │  底部: 诊断日志                        │
    └──────────────────────────────────────┘
"""

from __future__ import annotations

import logging
from concurrent.futures import Future
from typing import List, Optional

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtGui import QAction, QFont, QKeySequence
from PySide6.QtWidgets import (
    QComboBox, QHBoxLayout, QLabel, QMainWindow, QStatusBar,
    QVBoxLayout, QWidget,
)

from gui.qt_bridge import QtLanguageBridge
from gui.widgets import LogViewer, QLogHandler
from xl_language import LanguageController

logger = logging.getLogger(__name__)


class LanguageWindow(QMainWindow):
    """运行时切换语言的演示窗口"""

    # 后台切换失败时由工作线程发出，排队到 UI 线程处理
    switchRejected = Signal(str)

    def __init__(self, controller: LanguageController, async_switch: bool = False) -> None:
        super().__init__()
        self.controller = controller
        self.bridge = QtLanguageBridge(controller, self)
        self._async_switch = async_switch
        self._lang_actions: List[QAction] = []

        self._init_ui()
        self._init_menus()
        self._init_logging()

        # 连接语言切换信号 (先于首次刷新，避免漏掉后台加载完成的通知)
        self.bridge.languageChanged.connect(self._on_language_changed)
        self.switchRejected.connect(self._on_switch_rejected)
        self._retranslate()

    def _init_ui(self) -> None:
        """初始化界面布局"""
        self.setMinimumSize(640, 480)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        self._title_label = QLabel()
        self._title_label.setFont(QFont("Segoe UI", 16, QFont.Bold))
        self._title_label.setStyleSheet("color: #89b4fa;")
        layout.addWidget(self._title_label)

        self._greeting_label = QLabel()
        layout.addWidget(self._greeting_label)

        # 语言选择
        row = QHBoxLayout()
        self._current_caption = QLabel()
        row.addWidget(self._current_caption)

        self._lang_combo = QComboBox()
        self._lang_combo.addItems(self.controller.available_languages())
        self._lang_combo.setCurrentText(self.controller.current_language)
        self._lang_combo.textActivated.connect(self.request_switch)
        row.addWidget(self._lang_combo, 1)
        layout.addLayout(row)

        self._key_count_label = QLabel()
        layout.addWidget(self._key_count_label)

        self._diff_label = QLabel()
        self._diff_label.setWordWrap(True)
        self._diff_label.setAlignment(Qt.AlignTop | Qt.AlignLeft)
        layout.addWidget(self._diff_label, 1)

        self._log_viewer = LogViewer()
        self._log_viewer.setMaximumHeight(150)
        layout.addWidget(self._log_viewer, 0)

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)

    # ── 菜单栏 ──────────────────────────────────────────────────

    def _init_menus(self) -> None:
        menubar = self.menuBar()

        self._file_menu = menubar.addMenu("")
        self._exit_act = QAction(self)
        self._exit_act.setShortcut(QKeySequence.Quit)
        self._exit_act.triggered.connect(self.close)
        self._file_menu.addAction(self._exit_act)

        self._lang_menu = menubar.addMenu("")
        for language in self.controller.available_languages():
            act = QAction(language, self)
            act.setCheckable(True)
            act.triggered.connect(lambda checked, lang=language: self.request_switch(lang))
            self._lang_menu.addAction(act)
            self._lang_actions.append(act)

    def _init_logging(self) -> None:
        """设置日志输出到 UI"""
        self._log_handler = QLogHandler(self._log_viewer)
        self._log_handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logging.getLogger().addHandler(self._log_handler)

    # ── 切换 ────────────────────────────────────────────────────

    def request_switch(self, language: str) -> Optional["Future[bool]"]:
        """
        切换到指定语言。

        异步模式下返回加载结果的 Future；失败时经 switchRejected 回到 UI 线程。
        """
        if self._async_switch:
            future = self.controller.set_language_async(language)
            future.add_done_callback(
                lambda f, lang=language: self._forward_async_result(lang, f)
            )
            return future

        if not self.controller.set_language(language):
            self._on_switch_rejected(language)
        return None

    def _forward_async_result(self, language: str, future: "Future[bool]") -> None:
        # 通常在工作线程中调用 (Future 已完成时在调用线程)
        if not future.result():
            self.switchRejected.emit(language)

    @Slot(str)
    def _on_switch_rejected(self, language: str) -> None:
        logger.warning("Switch to '%s' rejected", language)
        self._status_bar.showMessage(
            f"{self.bridge.text('Messages.SwitchFailed')}: {language}", 5000
        )
        self._lang_combo.setCurrentText(self.controller.current_language)

    @Slot(str)
    def _on_language_changed(self, language: str) -> None:
        self._retranslate()
        self._status_bar.showMessage(language, 3000)

    def _retranslate(self) -> None:
        """按当前语言刷新所有文本"""
        t = self.controller.text
        current = self.controller.current_language

        self.setWindowTitle(t("App.Name"))
        self._title_label.setText(t("App.Name"))
        self._greeting_label.setText(t("Labels.Greeting"))
        self._current_caption.setText(t("Labels.CurrentLanguage"))
        self._key_count_label.setText(
            f"{t('Labels.KeyCount')}: {len(self.controller.store.flatten_keys(self.controller.get_locale_data()))}"
        )
        self._diff_label.setText(self._diff_summary(current))

        self._file_menu.setTitle(t("Menu.File") + "(&F)")
        self._exit_act.setText(t("Menu.Exit") + "(&Q)")
        self._lang_menu.setTitle(t("Menu.Language") + "(&L)")
        for act in self._lang_actions:
            act.setChecked(act.text() == current)

        if self._lang_combo.currentText() != current:
            self._lang_combo.setCurrentText(current)

    def _diff_summary(self, current: str) -> str:
        t = self.controller.text
        lines = [t("Labels.Diff")]
        for other in self.controller.available_languages():
            if other == current:
                continue
            report = self.controller.registry.diff(current, other)
            if report.has_error:
                lines.append(f"  {other}: {report.error_message}")
            elif report.is_identical:
                lines.append(f"  {other}: {t('Messages.Complete')}")
            else:
                missing = ", ".join(report.missing_in_b) or "-"
                lines.append(f"  {other}: {t('Messages.Missing')} {missing}")
        return "\n".join(lines)

    def closeEvent(self, event) -> None:
        logging.getLogger().removeHandler(self._log_handler)
        self.bridge.dispose()
        super().closeEvent(event)
