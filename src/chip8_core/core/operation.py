# chip8_core/core/operation.py
"""
デコード済み命令の表現。

命令ワードをニブル単位に分解した結果と、命令の種類を示すタグ（ニーモニック）を
不変のデータ構造として保持します。実行層はこのタグを元に処理を選択します。
"""
from dataclasses import dataclass


# @intent:responsibility 1命令分のデコード結果を記録します。
@dataclass(frozen=True) # 不変データ構造
class Operation:
    """
    デコードされた命令。mnemonic がバリアントのタグ、残りがオペランドフィールドです。
    """
    opcode: int        # 例: 0x6A0F
    mnemonic: str      # 例: "LD_VX_NN"
    x: int = 0         # 第2ニブル
    y: int = 0         # 第3ニブル
    n: int = 0         # 第4ニブル
    nn: int = 0        # 下位8bit
    nnn: int = 0       # 下位12bit
    length: int = 2    # 命令のバイト長

    @property
    def opcode_hex(self) -> str:
        return f"{self.opcode:04X}"

    def __str__(self) -> str:
        return f"{self.opcode_hex} {self.mnemonic}"
