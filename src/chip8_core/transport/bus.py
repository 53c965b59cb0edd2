# chip8_core/transport/bus.py
"""
Transport Layer (共通バス)

このモジュールは、システム全体のメモリアドレス空間を抽象化し、
読み書きアクセスを適切なデバイスに委譲する責務を負います。
"""
from abc import ABC, abstractmethod
from typing import List, Tuple

from chip8_core.common.errors import MemoryAccessError

# @intent:responsibility バスの抽象デバイスインターフェースを定義します。
class Device(ABC):
    """
    バスに接続されるデバイスの抽象基底クラス。
    全てのデバイスはreadとwriteのインターフェースを実装する必要があります。
    """
    # @intent:responsibility 指定されたアドレスから8bitのデータを読み出す責務を負います。
    # @intent:pre-condition アドレスはデバイスの有効範囲内である必要があります。
    @abstractmethod
    def read(self, address: int) -> int:
        """
        指定されたアドレスから8bitのデータを読み出します。
        アドレスはデバイス内でのオフセットとして扱われます。
        """
        pass

    # @intent:responsibility 指定されたアドレスに8bitのデータを書き込みます。
    # @intent:pre-condition アドレスはデバイスの有効範囲内であり、データは8bit値である必要があります。
    @abstractmethod
    def write(self, address: int, data: int) -> None:
        pass

# @intent:responsibility 基本的なRAMデバイスの機能を提供します。
class RAM(Device):
    """
    CHIP-8 の 4KB メモリ全体を表すRAMデバイス。
    """
    # @intent:responsibility 指定されたサイズのメモリ領域を初期化します。
    # @intent:pre-condition sizeは正の整数である必要があります。
    def __init__(self, size: int):
        if not isinstance(size, int) or size <= 0:
            raise ValueError("RAM size must be a positive integer.")
        self._memory = bytearray(size)
        self._size = size

    def _check_address(self, address: int) -> None:
        if not 0 <= address < self._size:
            raise MemoryAccessError(address, f"Address {address} out of bounds for RAM of size {self._size}.")

    def read(self, address: int) -> int:
        self._check_address(address)
        return self._memory[address]

    def write(self, address: int, data: int) -> None:
        self._check_address(address)
        if not 0 <= data <= 0xFF:
            raise ValueError(f"Data {data} is not an 8-bit value.")
        self._memory[address] = data

    # @intent:responsibility 連続したバイト列を一括で書き込みます。
    # @intent:pre-condition 書き込み範囲全体がRAM内に収まる必要があります。部分的な書き込みは行いません。
    def load_block(self, address: int, data: bytes) -> None:
        end = address + len(data)
        if address < 0 or end > self._size:
            raise MemoryAccessError(end - 1, f"Block {address:#06x}-{end - 1:#06x} out of bounds for RAM of size {self._size}.")
        self._memory[address:end] = data

    # @intent:responsibility 全バイトを0に戻します。
    def clear(self) -> None:
        self._memory[:] = bytes(self._size)

    def get_size(self) -> int:
        return self._size

    # @intent:responsibility 内容のコピーを返します（テストや状態比較用）。
    def dump(self) -> bytes:
        return bytes(self._memory)

# @intent:responsibility メモリアドレス空間を管理し、デバイスへのアクセスをディスパッチする共通バス。
class Bus:
    """
    メモリアドレス空間を管理し、デバイスへのアクセスをディスパッチする共通バス。
    マップされていないアドレスへのアクセスは MemoryAccessError になります。
    """
    def __init__(self):
        # メモリマップ: (start_address, end_address, device) のタプルリスト
        self._memory_map: List[Tuple[int, int, Device]] = []

    # @intent:responsibility 指定されたアドレス範囲にデバイスを登録します。
    # @intent:pre-condition start_address <= end_addressかつ非負であり、deviceはDeviceのインスタンスである必要があります。
    # @intent:rationale アドレス範囲の重複チェックは行いません。システム構築側で管理します。
    def register_device(self, start_address: int, end_address: int, device: Device) -> None:
        if not (0 <= start_address <= end_address):
            raise ValueError("Invalid address range: start_address must be <= end_address and non-negative.")
        if not isinstance(device, Device):
            raise TypeError("Device must be an instance of a class derived from Device.")

        if isinstance(device, RAM):
            expected_size = end_address - start_address + 1
            if device.get_size() != expected_size:
                raise ValueError(
                    f"Registered {type(device).__name__} device size ({device.get_size()} bytes) does not match "
                    f"the specified address range size ({expected_size} bytes)."
                )

        self._memory_map.append((start_address, end_address, device))

    # @intent:responsibility 指定されたアドレスに対応するデバイスとオフセットを検索します。
    # @intent:post-condition デバイスが見つからなかった場合、MemoryAccessErrorを発生させます。
    def _find_device(self, address: int) -> Tuple[Device, int]:
        for start, end, device in self._memory_map:
            if start <= address <= end:
                return device, address - start
        raise MemoryAccessError(address, f"Address {address:#06x} not mapped to any device.")

    def read(self, address: int) -> int:
        device, offset = self._find_device(address)
        return device.read(offset)

    def write(self, address: int, data: int) -> None:
        device, offset = self._find_device(address)
        device.write(offset, data)

    # @intent:responsibility 連続したバイト列を書き込みます。
    # @intent:rationale 範囲の両端を先に検証し、途中で失敗して部分的に書き込まれることを防ぎます。
    def load_block(self, address: int, data: bytes) -> None:
        if not data:
            return
        self._find_device(address)
        self._find_device(address + len(data) - 1)
        device, offset = self._find_device(address)
        if isinstance(device, RAM):
            device.load_block(offset, data)
        else:
            for i, value in enumerate(data):
                self.write(address + i, value)
