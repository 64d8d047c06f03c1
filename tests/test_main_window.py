"""
测试 LanguageWindow — 同步/异步切换失败后界面回到当前语言
"""

import json
import logging
import os
import sys
import time
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from xl_language.controller import LanguageController  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance()
    if app is None:
        return QtWidgets.QApplication([])
    if not isinstance(app, QtWidgets.QApplication):
        pytest.skip("a non-widget QCoreApplication is already running")
    return app


@pytest.fixture
def lang_dir(tmp_path) -> Path:
    for name, data in {
        "Chinese": {"App": {"Name": "演示"}, "Messages": {"SwitchFailed": "切换失败"}},
        "English": {"App": {"Name": "Demo"}, "Messages": {"SwitchFailed": "Switch failed"}},
    }.items():
        (tmp_path / f"{name}.json").write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    # 出现在语言列表中，但无法加载
    (tmp_path / "Broken.json").write_text("{oops", encoding="utf-8")
    return tmp_path


def _make_window(qapp, lang_dir, async_switch):
    from gui.main_window import LanguageWindow

    ctrl = LanguageController(lang_dir)
    window = LanguageWindow(ctrl, async_switch=async_switch)
    return ctrl, window


def _close(ctrl, window):
    window.close()
    logging.getLogger().removeHandler(window._log_handler)
    window.bridge.dispose()
    ctrl.close()


def _wait_until(qapp, condition, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        qapp.processEvents()
        if condition():
            return True
        time.sleep(0.01)
    return False


@pytest.mark.parametrize("async_switch", [False, True])
def test_rejected_switch_restores_combo(qapp, lang_dir, async_switch):
    ctrl, window = _make_window(qapp, lang_dir, async_switch)
    try:
        window._lang_combo.setCurrentText("Broken")
        future = window.request_switch("Broken")
        if async_switch:
            assert future.result(timeout=5) is False
        else:
            assert future is None

        assert _wait_until(qapp, lambda: window._lang_combo.currentText() == "Chinese")
        assert "切换失败" in window.statusBar().currentMessage()
        assert ctrl.current_language == "Chinese"
    finally:
        _close(ctrl, window)


@pytest.mark.parametrize("async_switch", [False, True])
def test_successful_switch_retranslates(qapp, lang_dir, async_switch):
    ctrl, window = _make_window(qapp, lang_dir, async_switch)
    try:
        future = window.request_switch("English")
        if future is not None:
            assert future.result(timeout=5) is True

        assert _wait_until(qapp, lambda: window.windowTitle() == "Demo")
        assert window._lang_combo.currentText() == "English"
    finally:
        _close(ctrl, window)
