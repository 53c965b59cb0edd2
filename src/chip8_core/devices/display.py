# chip8_core/devices/display.py
"""
1bpp フレームバッファ。

ピクセルは行優先の平坦なリストで保持します (index = x + width * y)。
描画はXORで行い、画面端では反対側へ折り返します。
"""
from typing import List

from chip8_core.common.types import DisplayView


# @intent:responsibility 画面のピクセル状態を保持し、クリアとXOR描画を提供します。
class Framebuffer:
    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError("Framebuffer dimensions must be positive.")
        self.width = width
        self.height = height
        self._pixels: List[bool] = [False] * (width * height)

    def clear(self) -> None:
        self._pixels = [False] * (self.width * self.height)

    def get_pixel(self, x: int, y: int) -> bool:
        return self._pixels[(x % self.width) + self.width * (y % self.height)]

    # @intent:responsibility 指定座標のピクセルを反転します。
    # @intent:post-condition 反転前にピクセルが点灯していた（=今回消灯した）場合Trueを返します。
    def toggle_pixel(self, x: int, y: int) -> bool:
        idx = (x % self.width) + self.width * (y % self.height)
        was_set = self._pixels[idx]
        self._pixels[idx] = not was_set
        return was_set

    # @intent:responsibility 8ピクセル幅のスプライト1行を (x, y) にXOR描画します。
    # @intent:post-condition いずれかのピクセルが点灯→消灯に変化した場合Trueを返します（衝突判定）。
    def draw_row(self, x: int, y: int, row_bits: int) -> bool:
        collision = False
        for bit in range(8):
            if row_bits & (0x80 >> bit):
                if self.toggle_pixel(x + bit, y):
                    collision = True
        return collision

    def view(self) -> DisplayView:
        """
        現在の画面の読み取り専用コピーを返します。
        """
        return tuple(self._pixels)
