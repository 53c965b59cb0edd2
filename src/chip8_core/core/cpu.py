# chip8_core/core/cpu.py
"""
Core Layer (抽象CPU)

このモジュールは、CPUの基本的な状態管理と命令サイクルの駆動に関する抽象化を提供します。
具体的な命令の振る舞いはInstruction Layerに移譲されます。
"""
from abc import ABC, abstractmethod

from chip8_core.transport.bus import Bus
from chip8_core.core.operation import Operation
from chip8_core.core.state import CpuState
from chip8_core.common.errors import Chip8Error

# @intent:responsibility 抽象CPUの基本機能とインターフェースを定義します。
class AbstractCpu(ABC):
    """
    全てのCPUエミュレーションの基底となる抽象クラス。
    Busとのインターフェース、基本的な状態管理、命令サイクルの抽象化を提供します。
    """
    # @intent:responsibility CPUの状態とバスへの参照を初期化します。
    # @intent:pre-condition `bus`は有効なBusオブジェクトである必要があります。
    def __init__(self, bus: Bus):
        self._bus = bus
        self._state: CpuState = self._create_initial_state()
        self._cycle_count: int = 0
        # @intent:rationale Stateオブジェクトの直接操作を避けるため、protectedな命名規則を採用。
        #                  外部からのアクセスは`get_state()`メソッドを介して行う。

    # @intent:responsibility 初期状態のCpuStateオブジェクトを生成します。
    @abstractmethod
    def _create_initial_state(self) -> CpuState:
        """
        CPUの初期状態を生成して返します。
        具体的なCPUアーキテクチャはこのメソッドを実装し、
        そのアーキテクチャに特化したCpuStateのサブクラスを返します。
        """
        pass

    # @intent:responsibility CPUをリセットし、初期状態に戻します。
    # @intent:rationale 初期状態の生成ロジックを_create_initial_stateに一元化します。
    def reset(self) -> None:
        self._state = self._create_initial_state()
        self._cycle_count = 0

    def get_state(self) -> CpuState:
        """
        現在のCPUの状態（レジスタ値など）を返します。
        """
        return self._state

    @property
    def cycle_count(self) -> int:
        return self._cycle_count

    # @intent:responsibility メモリから次の命令（オペコード）をフェッチします。
    @abstractmethod
    def _fetch(self) -> int:
        """
        現在のPCから次の命令（オペコード）を読み出して返します。
        PCの更新は_update_pcで行います。
        """
        pass

    # @intent:responsibility フェッチしたオペコードを解析し、Operationオブジェクトに変換します。
    @abstractmethod
    def _decode(self, opcode: int) -> Operation:
        pass

    # @intent:responsibility デコードされた命令を実行し、CPUの状態を更新します。
    @abstractmethod
    def _execute(self, operation: Operation) -> None:
        pass

    # @intent:responsibility CPUを1命令サイクル進め、実行したOperationを返します。
    # @intent:rationale Template Methodパターンを採用し、共通の実行フロー（フェッチ→デコード→PC更新→実行）を定義します。
    # @intent:post-condition Chip8Error で中断した場合、PCは失敗した命令の先頭を指したままです。
    def step(self) -> Operation:
        initial_pc = self._state.pc
        opcode = self._fetch()
        operation = self._decode(opcode)

        # 命令実行前にPCを次の命令へ進める。分岐命令は実行時にPCを上書きする。
        self._update_pc(operation)

        try:
            self._execute(operation)
        except Chip8Error:
            self._state.pc = initial_pc
            raise
        self._cycle_count += 1
        return operation

    # @intent:responsibility 命令実行前にPCを更新します。
    def _update_pc(self, operation: Operation) -> None:
        self._state.pc = (self._state.pc + operation.length) & 0xFFFF
