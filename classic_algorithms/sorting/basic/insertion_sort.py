"""插入排序算法实现。"""
from typing import Any, List, Optional

from ...stats import RuntimeStats
from ...template import ProductionAlgorithm
from ...utils import swap


def insertion_sort(items: List[Any], stats: Optional[RuntimeStats] = None) -> List[Any]:
    """原地对列表进行排序并返回同一个列表。

    注意这不是教科书式的插入排序：这里没有通过后移元素腾出位置，
    而是把位置 x 上的元素依次与已排序前缀中的每个元素比较，
    只要它更小就交换。交换后的较大元素继续与前缀后面的元素比较，
    效果上把新元素插入了前缀中的正确位置，但比较次数固定为 x 次。

    参数:
        items: 待排序的列表，会被原地修改
        stats: 计数器，每次检查计一次操作和一次比较，每次交换计一次交换

    时间复杂度: O(n^2)
    空间复杂度: O(1)
    """
    if stats is None:
        stats = RuntimeStats()
    size = len(items)
    sorted_up_to = 0

    for x in range(size):
        for y in range(sorted_up_to):
            stats.operations += 1
            stats.comparisons += 1
            if items[x] < items[y]:
                swap(items, x, y)
                stats.swaps += 1
        sorted_up_to += 1
    return items


class InsertionSort(ProductionAlgorithm):
    """使用上面的交换式插入排序对列表进行原地排序。"""

    def execute(self, items: List[Any], stats: Optional[RuntimeStats] = None) -> List[Any]:
        return super().execute(items, stats)

    def _execute_core(self, items: List[Any], stats: Optional[RuntimeStats] = None) -> List[Any]:
        return insertion_sort(items, stats)
