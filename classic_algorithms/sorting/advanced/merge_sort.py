"""归并排序算法实现。"""
from typing import Any, List, Optional

from ...stats import RuntimeStats
from ...template import ProductionAlgorithm


def merge_sort(items: List[Any], stats: Optional[RuntimeStats] = None) -> List[Any]:
    """返回排好序的新列表，输入列表保持不变。

    参数:
        items: 待排序的列表
        stats: 计数器，每次递归调用计一次操作，每次比较计一次比较，
            每个放入结果的元素计一次插入；空列表不计数

    时间复杂度: O(n log n)
    空间复杂度: O(n)
    """
    if stats is None:
        stats = RuntimeStats()
    if not items:
        return []
    return _merge_sort(list(items), stats)


def _merge_sort(items: List[Any], stats: RuntimeStats) -> List[Any]:
    stats.operations += 1
    length = len(items)
    if length <= 1:
        return items

    middle = length // 2
    left = _merge_sort(items[:middle], stats)
    right = _merge_sort(items[middle:], stats)
    return merge(left, right, stats)


def merge(left: List[Any], right: List[Any], stats: RuntimeStats) -> List[Any]:
    """合并两个有序列表，相等时优先取左侧元素以保持稳定。"""
    merged: List[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        stats.comparisons += 1
        stats.insertions += 1
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1

    for item in left[i:]:
        stats.insertions += 1
        merged.append(item)
    for item in right[j:]:
        stats.insertions += 1
        merged.append(item)
    return merged


class MergeSort(ProductionAlgorithm):
    """使用归并排序算法对列表进行排序。

    归并排序是一种稳定的分治排序算法，它将数组分为两半，
    分别排序后再合并。
    """

    def execute(self, items: List[Any], stats: Optional[RuntimeStats] = None) -> List[Any]:
        """返回数据的排序副本。"""
        return super().execute(items, stats)

    def _execute_core(self, items: List[Any], stats: Optional[RuntimeStats] = None) -> List[Any]:
        return merge_sort(items, stats)
