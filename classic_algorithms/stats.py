"""排序算法的运行时计数器。

各排序函数通过引用接收同一个 RuntimeStats 实例并原地累加，
排序函数本身从不清零计数器，调用方需要新的计数时应创建新实例。
"""
from dataclasses import asdict, dataclass, replace
from typing import Dict


@dataclass
class RuntimeStats:
    """记录排序过程中的比较、交换、插入和通用操作次数。"""

    comparisons: int = 0
    swaps: int = 0
    insertions: int = 0
    operations: int = 0

    @property
    def total(self) -> int:
        return self.comparisons + self.swaps + self.insertions + self.operations

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)

    def snapshot(self) -> "RuntimeStats":
        """返回当前计数的独立副本。"""
        return replace(self)

    def reset(self) -> None:
        self.comparisons = 0
        self.swaps = 0
        self.insertions = 0
        self.operations = 0

    def __str__(self) -> str:
        return (
            f"comparisons={self.comparisons}, swaps={self.swaps}, "
            f"insertions={self.insertions}, operations={self.operations}"
        )
