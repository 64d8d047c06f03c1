"""
测试 QtLanguageBridge — 控制器事件 → Qt Signal / Property
"""

import json
import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

QtCore = pytest.importorskip("PySide6.QtCore")

from xl_language.controller import LanguageController  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    app = QtCore.QCoreApplication.instance()
    if app is None:
        # 使用 QApplication，以便同一进程中的窗口测试可以复用
        os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
        from PySide6.QtWidgets import QApplication
        app = QApplication([])
    return app


@pytest.fixture
def bridge(qapp, tmp_path):
    from gui.qt_bridge import QtLanguageBridge

    for name, text in (("Chinese", "演示"), ("English", "Demo")):
        (tmp_path / f"{name}.json").write_text(
            json.dumps({"App": {"Name": text}}, ensure_ascii=False), encoding="utf-8"
        )
    ctrl = LanguageController(tmp_path)
    b = QtLanguageBridge(ctrl)
    yield b
    b.dispose()
    ctrl.close()


def test_signals_forwarded(bridge):
    languages, notified = [], []
    bridge.languageChanged.connect(languages.append)
    bridge.currentLanguageChanged.connect(lambda: notified.append(True))

    assert bridge.setLanguage("English") is True
    assert languages == ["English"]
    assert notified == [True]
    assert bridge.currentLanguage == "English"


def test_text_slots(bridge):
    assert bridge.text("App.Name") == "演示"
    assert bridge.text("App.Missing") == "[App.Missing]"
    assert bridge.textOr("App.Missing", "n/a") == "n/a"


def test_failed_switch_emits_nothing(bridge):
    languages = []
    bridge.languageChanged.connect(languages.append)
    assert bridge.setLanguage("NoSuchFile") is False
    assert languages == []
    assert bridge.currentLanguage == "Chinese"


def test_dispose_disconnects(bridge):
    languages = []
    bridge.languageChanged.connect(languages.append)
    bridge.dispose()
    bridge.controller.set_language("English")
    assert languages == []
    # fixture 会再次 dispose，应当无害
