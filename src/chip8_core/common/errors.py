# chip8_core/common/errors.py
"""
エラー定義モジュール。

エミュレーション中に発生する致命的な状態を、種類ごとに区別可能な例外として定義します。
各例外は、同じ状況で組み込み例外を送出していた既存コードとの互換性のため、
対応する組み込み例外クラスも継承します。
"""
from typing import Optional


# @intent:responsibility 本パッケージが送出する全ての例外の基底クラスです。
class Chip8Error(Exception):
    """CHIP-8 コアが送出する例外の基底クラス。"""


# @intent:responsibility 範囲外メモリアクセス（フェッチ、インデックス読み書き）を表します。
class MemoryAccessError(Chip8Error, IndexError):
    def __init__(self, address: int, message: Optional[str] = None):
        self.address = address
        super().__init__(message or f"Address {address:#06x} is outside addressable memory.")


# @intent:responsibility 呼び出しスタックが満杯の状態でのCALLを表します。
class StackOverflowError(Chip8Error, OverflowError):
    pass


# @intent:responsibility 空のスタックでのRETを表します。
class StackUnderflowError(Chip8Error, IndexError):
    pass


# @intent:responsibility どのパターンにも一致しない命令ワードを表します。
class UnsupportedInstructionError(Chip8Error, ValueError):
    def __init__(self, opcode: int):
        self.opcode = opcode
        super().__init__(f"Unsupported instruction {opcode:#06x}.")


# @intent:responsibility プログラム領域に収まらないイメージのロードを表します。
class ProgramTooLargeError(Chip8Error, ValueError):
    def __init__(self, size: int, capacity: int):
        self.size = size
        self.capacity = capacity
        super().__init__(f"Program of {size} bytes exceeds the {capacity} byte program region.")


# @intent:responsibility 0-15 の範囲外のキー番号を表します。
class InvalidKeyError(Chip8Error, ValueError):
    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Key index {index} is out of range (0-15).")
