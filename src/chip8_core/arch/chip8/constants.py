# chip8_core/arch/chip8/constants.py
"""
CHIP-8 のハードウェア定数と組み込みフォント。
"""

# 64x32 モノクロ (1 bit per pixel) 画面
SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32

RAM_SIZE = 4096         # 4KB
START_ADDR = 0x200      # 0x000-0x1FF はインタプリタ領域（先頭80バイトにフォント）
NUM_REGS = 16           # V0-VF
FLAG_REG = 0xF          # VF はキャリー/ボロー/シフト/衝突の結果を受け取る
STACK_SIZE = 16
NUM_KEYS = 16

FONT_ADDR = 0x000
FONT_GLYPH_SIZE = 5     # 1文字 5 バイト (4x5 ピクセル)

# @intent:constant 16進数字 0-F のスプライト。構築時とリセット時にメモリ先頭へコピーされます。
FONTSET = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
])
FONTSET_SIZE = len(FONTSET)
