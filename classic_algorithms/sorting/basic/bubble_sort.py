"""冒泡排序算法实现。"""
from typing import Any, List, Optional

from ...stats import RuntimeStats
from ...template import ProductionAlgorithm
from ...utils import swap


def bubble_sort(items: List[Any], stats: Optional[RuntimeStats] = None) -> List[Any]:
    """原地对列表进行冒泡排序并返回同一个列表。

    每一轮把位置 x 上的元素与其后的每个元素比较，后者更小时交换，
    因此每轮结束后位置 x 上是剩余部分的最小值。

    参数:
        items: 待排序的列表，会被原地修改
        stats: 计数器，每对元素计一次比较和一次操作，每次交换计一次交换

    时间复杂度: O(n^2) - 需要进行 n*(n-1)/2 次比较
    空间复杂度: O(1)
    """
    if stats is None:
        stats = RuntimeStats()
    size = len(items)

    for x in range(size):
        for y in range(x + 1, size):
            stats.operations += 1
            stats.comparisons += 1
            if items[y] < items[x]:
                stats.swaps += 1
                swap(items, y, x)
    return items


class BubbleSort(ProductionAlgorithm):
    """使用冒泡排序算法对列表进行原地排序。"""

    def execute(self, items: List[Any], stats: Optional[RuntimeStats] = None) -> List[Any]:
        return super().execute(items, stats)

    def _execute_core(self, items: List[Any], stats: Optional[RuntimeStats] = None) -> List[Any]:
        return bubble_sort(items, stats)
