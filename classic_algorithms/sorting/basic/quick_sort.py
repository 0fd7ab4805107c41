"""快速排序算法实现。"""
from typing import Any, List, Optional

from ...stats import RuntimeStats
from ...template import ProductionAlgorithm
from ...utils import swap


def quick_sort(items: List[Any], stats: Optional[RuntimeStats] = None,
               start: int = 0, end: Optional[int] = None) -> List[Any]:
    """原地对 items[start..end] 进行快速排序并返回同一个列表。

    参数:
        items: 待排序的列表，会被原地修改
        stats: 计数器，分区时每个元素计一次比较，每次交换计一次交换
        start: 排序范围的起始索引
        end: 排序范围的结束索引（包含），默认为最后一个元素

    时间复杂度:
        - 平均情况: O(n log n)
        - 最坏情况: O(n^2) - 当数组已经有序或逆序时
    空间复杂度:
        - 平均情况: O(log n) - 递归调用栈深度
        - 最坏情况: O(n) - 有序或逆序输入时递归深度为 n，
          输入过大时会超出解释器的递归深度限制（RecursionError）
    """
    if stats is None:
        stats = RuntimeStats()
    if end is None:
        end = len(items) - 1

    if start < end:
        pivot_index = partition(items, start, end, stats)
        quick_sort(items, stats, start, pivot_index - 1)
        quick_sort(items, stats, pivot_index + 1, end)
    return items


def partition(items: List[Any], start: int, end: int, stats: RuntimeStats) -> int:
    """Lomuto 分区，以最后一个元素作为基准值。

    把所有小于基准值的元素移到左侧，再把基准值交换到分界处。

    返回:
        int: 基准值的最终位置索引
    """
    pivot_value = items[end]
    smaller_index = start

    for index in range(start, end):
        stats.comparisons += 1
        if items[index] < pivot_value:
            swap(items, smaller_index, index)
            smaller_index += 1
            stats.swaps += 1

    # 将基准值放到正确的位置
    swap(items, smaller_index, end)
    stats.swaps += 1

    return smaller_index


class QuickSort(ProductionAlgorithm):
    """使用快速排序算法对列表进行原地排序。

    快速排序是一种分治排序算法，选择一个基准元素把数组分为两部分，
    然后递归地对两部分进行排序。
    """

    def execute(self, items: List[Any], stats: Optional[RuntimeStats] = None) -> List[Any]:
        return super().execute(items, stats)

    def _execute_core(self, items: List[Any], stats: Optional[RuntimeStats] = None) -> List[Any]:
        return quick_sort(items, stats)
