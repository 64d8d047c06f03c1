"""
Event — 与 UI 框架无关的发布/订阅

接口仿照 Qt Signal (connect / disconnect / emit)，
在调用 emit() 的线程上同步分发。需要 UI 线程的订阅者自行转发。
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, List

logger = logging.getLogger(__name__)

Callback = Callable[..., Any]


class Event:
    """一个可订阅的事件"""

    def __init__(self, name: str = "event") -> None:
        self.name = name
        self._callbacks: List[Callback] = []
        self._lock = threading.Lock()

    def connect(self, callback: Callback) -> None:
        with self._lock:
            if callback not in self._callbacks:
                self._callbacks.append(callback)

    def disconnect(self, callback: Callback) -> None:
        """取消订阅；未订阅的回调忽略"""
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

    def emit(self, *args: Any) -> None:
        with self._lock:
            callbacks = list(self._callbacks)

        for callback in callbacks:
            try:
                callback(*args)
            except Exception:
                # 单个订阅者出错不影响其他订阅者
                logger.exception("Subscriber of '%s' raised", self.name)

    def __len__(self) -> int:
        return len(self._callbacks)
