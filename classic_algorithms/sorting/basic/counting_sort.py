"""计数排序算法实现。"""
from typing import List, Optional

from ...errors import InvalidInputError
from ...stats import RuntimeStats
from ...template import ProductionAlgorithm


def counting_sort(items: List[int], stats: Optional[RuntimeStats] = None) -> List[int]:
    """原地对非负整数列表进行计数排序并返回同一个列表。

    先统计每个值出现的次数（计数数组的下标即元素值），
    再按下标从小到大依次把各个值写回原列表。

    参数:
        items: 非负整数列表，会被原地修改
        stats: 计数器，统计阶段和写回阶段的每个元素各计一次插入

    异常:
        InvalidInputError: 列表中含有负数或非整数，此时列表不会被修改

    时间复杂度: O(n + k) - k 为最大值加一
    空间复杂度: O(k)
    """
    if stats is None:
        stats = RuntimeStats()
    for value in items:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInputError(value, "counting sort requires integers")
        if value < 0:
            raise InvalidInputError(value, "counting sort requires non-negative integers")

    counts = [0] * (max(items) + 1 if items else 0)
    for value in items:
        stats.insertions += 1
        counts[value] += 1

    cursor = 0
    for value, occurrences in enumerate(counts):
        for _ in range(occurrences):
            stats.insertions += 1
            items[cursor] = value
            cursor += 1
    return items


class CountingSort(ProductionAlgorithm):
    """使用计数排序对非负整数列表进行原地排序。"""

    def execute(self, items: List[int], stats: Optional[RuntimeStats] = None) -> List[int]:
        return super().execute(items, stats)

    def _execute_core(self, items: List[int], stats: Optional[RuntimeStats] = None) -> List[int]:
        return counting_sort(items, stats)
