"""
gui.widgets — GUI 组件包

提供:
- LogViewer: 诊断日志查看器
- QLogHandler: Python logging → LogViewer 桥接
"""

from gui.widgets.log_viewer import LogViewer, QLogHandler

__all__ = [
    "LogViewer",
    "QLogHandler",
]
