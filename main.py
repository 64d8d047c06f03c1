#!/usr/bin/env python3
"""
XL Language — 多语言资源演示程序

入口点：配置日志、加载配置、初始化语言控制器、启动 GUI。
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

# 确保项目根目录在 sys.path
PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

CONFIG_PATH = PROJECT_ROOT / "config" / "settings.yaml"


def setup_logging(level: str = "INFO") -> None:
    """配置日志系统"""
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=log_format,
        datefmt="%H:%M:%S",
    )


def load_config(path: Optional[Path] = None) -> dict:
    """加载配置文件；不存在或为空时返回 {}"""
    import yaml

    config_path = Path(path) if path is not None else CONFIG_PATH
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    return {}


def main() -> int:
    """主入口"""
    config = load_config()
    setup_logging(config.get("logging", {}).get("level", "INFO"))
    logger = logging.getLogger("xl_language")
    logger.info("Starting XL Language demo...")

    from xl_language import LanguageSettings, initialize, initialize_async

    settings = LanguageSettings.from_dict(config.get("language"))
    if settings.async_switch:
        # 默认语言在后台加载，窗口收到 languageChanged 后刷新
        controller, initial = initialize_async(settings, PROJECT_ROOT)
        initial.add_done_callback(
            lambda f: logger.info("Initial language loaded=%s", f.result())
        )
    else:
        controller = initialize(settings, PROJECT_ROOT)
        logger.info(
            "Language: %s (loaded=%s)", controller.current_language, controller.is_loaded
        )

    from PySide6.QtWidgets import QApplication

    app = QApplication(sys.argv)
    app.setApplicationName("XL Language")
    app.setApplicationVersion("0.1.0")

    from gui.main_window import LanguageWindow

    window = LanguageWindow(controller, async_switch=settings.async_switch)
    window.show()
    logger.info("GUI ready")

    try:
        return app.exec()
    finally:
        controller.close()


if __name__ == "__main__":
    sys.exit(main())
