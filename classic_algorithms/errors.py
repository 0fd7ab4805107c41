"""Errors raised by the graph and sorting algorithms."""
from typing import Any


class AlgorithmError(Exception):
    """算法库所有异常的基类。"""


class MissingNodeError(AlgorithmError, KeyError):
    """在图中查询不存在的节点时抛出。"""

    def __init__(self, node: Any) -> None:
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"node {self.node!r} is not in the graph"


class InvalidInputError(AlgorithmError, ValueError):
    """输入数据超出算法的定义域时抛出，例如计数排序遇到负数。"""

    def __init__(self, value: Any, reason: str) -> None:
        super().__init__(f"invalid value {value!r}: {reason}")
        self.value = value
