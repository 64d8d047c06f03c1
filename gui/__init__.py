"""
gui — PySide6 适配层与演示窗口
"""
