"""
CPU外部の周辺デバイス（画面、キーパッド）。
"""
from .display import Framebuffer
from .keypad import Keypad

__all__ = ["Framebuffer", "Keypad"]
